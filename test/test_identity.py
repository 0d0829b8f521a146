from types import SimpleNamespace

import boto3
import pytest
from botocore.stub import Stubber

from chalicelib import accounts, identity
from chalicelib.config import Config

subject_id = '5f1c3a9e-0b7d-4f6a-9c2e-8d4b1a7e6f30'
user_pool_id = 'eu-central-1_testpool'


@pytest.fixture
def config() -> Config:
    return Config(user_pool_id, 'test-app-client-id', 'zero-delivery-test')


@pytest.fixture
def cognito_client():
    client = boto3.client('cognito-idp', region_name='eu-central-1',
                          aws_access_key_id='testing', aws_secret_access_key='testing')
    with Stubber(client) as stubber:
        yield client, stubber
        stubber.assert_no_pending_responses()


def admin_get_user_response(attributes: dict) -> dict:
    return {
        'Username': subject_id,
        'UserAttributes': [{'Name': name, 'Value': value} for name, value in attributes.items()]
    }


def test_attributes_to_metadata():
    metadata = identity.attributes_to_metadata([
        {'Name': 'sub', 'Value': subject_id},
        {'Name': 'email', 'Value': 'cliente@zero-delivery.co.mz'},
        {'Name': 'custom:phoneNumber', 'Value': '+258841234567'},
        {'Name': 'custom:profileCompleted', 'Value': 'true'},
    ])
    assert metadata == {'phoneNumber': '+258841234567', 'profileCompleted': True}


def test_attribute_values():
    assert identity.parse_attribute_value('false') is False
    assert identity.parse_attribute_value('True') == 'True'
    assert identity.format_attribute_value(True) == 'true'
    assert identity.format_attribute_value(False) == 'false'
    assert identity.format_attribute_value('+258841234567') == '+258841234567'


def test_get_user(config, cognito_client):
    client, stubber = cognito_client
    stubber.add_response(
        'admin_get_user',
        admin_get_user_response({'sub': subject_id, 'custom:phoneNumber': '+258841234567',
                                 'custom:profileCompleted': 'true'}),
        {'UserPoolId': user_pool_id, 'Username': subject_id})

    user = identity.CognitoProfileProvider(config, client=client).get_user(subject_id)
    assert user == {
        'id': subject_id,
        'username': subject_id,
        'metadata': {'phoneNumber': '+258841234567', 'profileCompleted': True}
    }


def test_check_completeness_with_cognito(config, cognito_client):
    client, stubber = cognito_client
    stubber.add_response(
        'admin_get_user',
        admin_get_user_response({'sub': subject_id, 'custom:profileCompleted': 'false',
                                 'custom:phoneNumber': '+258841234567'}),
        {'UserPoolId': user_pool_id, 'Username': subject_id})

    response = accounts.check_completeness(SimpleNamespace(auth_result={'user_id': subject_id}),
                                            identity.CognitoProfileProvider(config, client=client))
    assert response.status_code == 200
    assert response.body == {'success': True, 'isComplete': False}


def test_check_completeness_cognito_error(config, cognito_client):
    client, stubber = cognito_client
    stubber.add_client_error('admin_get_user', service_error_code='UserNotFoundException',
                             service_message='User does not exist.', http_status_code=400)

    response = accounts.check_completeness(SimpleNamespace(auth_result={'user_id': subject_id}),
                                            identity.CognitoProfileProvider(config, client=client))
    assert response.status_code == 400
    assert response.body['success'] is False
    assert response.body['message'] == 'Erro ao verificar conta'
    assert 'User does not exist.' in response.body['error']


def test_update_metadata(config, monkeypatch):
    calls = []

    class FakeCognito:
        def __init__(self, user_pool_id, client_id, **kwargs):
            calls.append(('init', user_pool_id, client_id, kwargs))

        def admin_update_profile(self, attrs, attr_map=None):
            calls.append(('admin_update_profile', attrs))

    monkeypatch.setattr(identity, 'Cognito', FakeCognito)
    identity.CognitoProfileProvider(config, client=object()).update_metadata(
        subject_id, {'phoneNumber': '+258841234567', 'profileCompleted': True})

    assert calls == [
        ('init', user_pool_id, 'test-app-client-id', {'user_pool_region': 'eu-central-1', 'username': subject_id}),
        ('admin_update_profile', {'custom:phoneNumber': '+258841234567', 'custom:profileCompleted': 'true'})
    ]
