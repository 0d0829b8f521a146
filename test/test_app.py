import json
import os
from types import SimpleNamespace

from chalice.test import Client
from app import app

from chalicelib.constants.status_codes import http400
from chalicelib.utils.logger import logger, new_request_id
from test.utils.request_utils import make_request, response_body

from test.utils.fixtures import PROJECT_DIR, chalice_gateway

# Lambda refuses function configurations which set these
LAMBDA_RESERVED_VARIABLES = {'AWS_REGION', 'AWS_DEFAULT_REGION', 'AWS_ACCESS_KEY_ID', 'AWS_SECRET_ACCESS_KEY',
                             'AWS_SESSION_TOKEN', 'AWS_LAMBDA_FUNCTION_NAME', '_HANDLER', 'LAMBDA_TASK_ROOT'}


def test_health_check():
    with Client(app, stage_name='test', project_dir=PROJECT_DIR) as client:
        response = client.http.get('/health')
        assert response.status_code == 200
        assert response.json_body['success'] is True
        assert response.json_body['message'] == 'API está funcionando'
        assert 'timestamp' in response.json_body


def test_error_id_is_per_request(chalice_gateway):
    first = make_request(chalice_gateway, endpoint='/categories', method='GET', query='type=bogus')
    second = make_request(chalice_gateway, endpoint='/categories', method='GET', query='type=bogus')
    assert first['statusCode'] == second['statusCode'] == http400

    first_id, second_id = response_body(first)['error_id'], response_body(second)['error_id']
    assert first_id and second_id
    assert first_id != second_id
    assert logger.current_request_id == second_id


def test_new_request_id():
    request = SimpleNamespace(lambda_context=SimpleNamespace(aws_request_id='6bc28136-6f45-4c47-b8a7-1f5c2e3d4a5b'))
    assert new_request_id(request) == '1f5c2e3d4a5b'
    assert logger.current_request_id == '1f5c2e3d4a5b'
    assert new_request_id() != new_request_id()


def test_stage_variables_are_not_reserved():
    with open(os.path.join(PROJECT_DIR, '.chalice', 'config.json')) as config_file:
        chalice_config = json.load(config_file)

    stages = [chalice_config, *chalice_config['stages'].values()]
    for stage in stages:
        assert not LAMBDA_RESERVED_VARIABLES & set(stage.get('environment_variables', {}))
