import pytest

from chalicelib.config import Config, load_config, get_config, DEFAULT_REGION
from chalicelib.utils.exceptions import ConfigurationError

environ = {
    'COGNITO_USER_POOL_ID': 'eu-central-1_testpool',
    'COGNITO_APP_CLIENT_ID': 'test-app-client-id',
    'GEN_TABLE_NAME': 'zero-delivery-test',
}


def test_from_environ():
    config = Config.from_environ(environ)
    assert config.cognito_user_pool_id == 'eu-central-1_testpool'
    assert config.cognito_app_client_id == 'test-app-client-id'
    assert config.gen_table_name == 'zero-delivery-test'
    assert config.region == DEFAULT_REGION
    assert config.endpoint_url is None


def test_from_environ_optional_settings():
    config = Config.from_environ({**environ, 'AWS_REGION': 'af-south-1', 'ENDPOINT_URL': 'http://localhost:8000'})
    assert config.region == 'af-south-1'
    assert config.endpoint_url == 'http://localhost:8000'
    assert config.cognito_issuer == 'https://cognito-idp.af-south-1.amazonaws.com/eu-central-1_testpool'
    assert config.cognito_jwk_url == \
        'https://cognito-idp.af-south-1.amazonaws.com/eu-central-1_testpool/.well-known/jwks.json'


def test_from_environ_missing_settings():
    with pytest.raises(ConfigurationError) as error:
        Config.from_environ({'GEN_TABLE_NAME': 'zero-delivery-test', 'COGNITO_APP_CLIENT_ID': ''})
    assert 'COGNITO_USER_POOL_ID' in str(error.value)
    assert 'COGNITO_APP_CLIENT_ID' in str(error.value)
    assert 'GEN_TABLE_NAME' not in str(error.value)


def test_repr_masks_client_id():
    assert 'test-app-client-id' not in repr(Config.from_environ(environ))


def test_load_config():
    previous = get_config()
    try:
        config = load_config({**environ, 'GEN_TABLE_NAME': 'another-table'})
        assert get_config() is config
        assert get_config().gen_table_name == 'another-table'
    finally:
        load_config({
            'COGNITO_USER_POOL_ID': previous.cognito_user_pool_id,
            'COGNITO_APP_CLIENT_ID': previous.cognito_app_client_id,
            'GEN_TABLE_NAME': previous.gen_table_name,
            'AWS_REGION': previous.region,
            'ENDPOINT_URL': previous.endpoint_url,
        })
