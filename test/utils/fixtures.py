import os

import pytest
from chalice.local import LocalGateway
from chalice.cli import factory

from chalicelib import accounts
from chalicelib.config import get_config
from chalicelib.utils import auth as utils_auth, db as utils_db
from chalicelib.utils.exceptions import InvalidToken
from chalicelib.utils.logger import log_message
from test.utils.doubles import FakeProfileProvider, FakeTable

PROJECT_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

INVALID_TOKEN = 'invalid-token'


def local_gateway() -> LocalGateway:
    config = factory.CLIFactory(
        project_dir=PROJECT_DIR, environ=os.environ).create_config_obj(
        chalice_stage_name=os.environ.get('stage', 'test'))
    log_message(f'local_gateway os.environ = {os.environ.get("stage", "test")}')
    return LocalGateway(config.chalice_app, config)


@pytest.fixture(scope='session')
def chalice_gateway() -> LocalGateway:
    yield local_gateway()


def fake_decode_token(token: str) -> dict:
    """Test tokens carry the user id itself"""
    if token == INVALID_TOKEN:
        raise InvalidToken('Signature verification failed')
    return {'sub': token, 'cognito:username': token, 'email': f'{token}@zero-delivery.co.mz'}


@pytest.fixture
def tokens(monkeypatch):
    monkeypatch.setattr(utils_auth, 'decode_token', fake_decode_token)
    yield


@pytest.fixture
def gen_table(monkeypatch) -> FakeTable:
    table = FakeTable()
    monkeypatch.setitem(utils_db._TABLES, get_config().gen_table_name, table)
    yield table


@pytest.fixture
def profile_provider() -> FakeProfileProvider:
    provider = FakeProfileProvider()
    accounts.set_profile_provider(provider)
    yield provider
    accounts.set_profile_provider(None)
