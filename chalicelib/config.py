import os
from typing import Mapping, Optional

from chalicelib.utils.exceptions import ConfigurationError
from chalicelib.utils.logger import logger

DEFAULT_REGION = 'eu-central-1'

_CONFIG = None


class Config:
    """
    Settings the application needs at startup.
    Built once from the environment, see load_config
    """

    required_settings = {
        'COGNITO_USER_POOL_ID': 'cognito_user_pool_id',
        'COGNITO_APP_CLIENT_ID': 'cognito_app_client_id',
        'GEN_TABLE_NAME': 'gen_table_name',
    }

    optional_settings = {
        'AWS_REGION': 'region',
        'ENDPOINT_URL': 'endpoint_url',
    }

    def __init__(self, cognito_user_pool_id: str, cognito_app_client_id: str, gen_table_name: str,
                 region: str = DEFAULT_REGION, endpoint_url: Optional[str] = None):
        self.cognito_user_pool_id = cognito_user_pool_id
        self.cognito_app_client_id = cognito_app_client_id
        self.gen_table_name = gen_table_name
        self.region = region or DEFAULT_REGION
        self.endpoint_url = endpoint_url or None

    @property
    def cognito_issuer(self) -> str:
        return f'https://cognito-idp.{self.region}.amazonaws.com/{self.cognito_user_pool_id}'

    @property
    def cognito_jwk_url(self) -> str:
        return f'{self.cognito_issuer}/.well-known/jwks.json'

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> 'Config':
        missing = [key for key in cls.required_settings if not environ.get(key)]
        if missing:
            raise ConfigurationError(f'Missing required settings: {", ".join(missing)}')
        kwargs = {attr: environ[key] for key, attr in cls.required_settings.items()}
        kwargs.update({attr: environ.get(key) for key, attr in cls.optional_settings.items()})
        return cls(**kwargs)

    def __repr__(self):
        return (f'Config(cognito_user_pool_id={self.cognito_user_pool_id!r}, '
                f'cognito_app_client_id={self.cognito_app_client_id[:6]!r}..., '
                f'gen_table_name={self.gen_table_name!r}, region={self.region!r}, '
                f'endpoint_url={self.endpoint_url!r})')


def load_config(environ: Optional[Mapping[str, str]] = None) -> Config:
    global _CONFIG
    _CONFIG = Config.from_environ(os.environ if environ is None else environ)
    logger.info(f'load_config ::: {_CONFIG!r}')
    return _CONFIG


def get_config() -> Config:
    if _CONFIG is None:
        return load_config()
    return _CONFIG
