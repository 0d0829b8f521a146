from typing import Dict, List, Any

from pycognito import Cognito

from chalicelib.config import Config, get_config
from chalicelib.constants.constants import COGNITO_CUSTOM_ATTR_PREFIX
from chalicelib.utils.boto_clients import get_cognito_client
from chalicelib.utils.logger import logger


class ProfileProvider:
    """
    What the account handlers need from the identity provider.

    get_user returns {'id': <subject id>, 'metadata': {...}} and raises whatever the
    provider raises when the user can't be fetched
    """

    def get_user(self, subject_id: str) -> Dict:
        raise NotImplementedError

    def update_metadata(self, subject_id: str, metadata: Dict[str, Any]) -> None:
        raise NotImplementedError


def parse_attribute_value(value: str) -> Any:
    """Cognito keeps every attribute as a string, booleans come back as 'true'/'false'"""
    if value in ('true', 'false'):
        return value == 'true'
    return value


def format_attribute_value(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def attributes_to_metadata(attributes: List[Dict]) -> Dict[str, Any]:
    """
    Custom attributes of the user pool are the profile metadata,
    custom:phoneNumber -> phoneNumber
    """
    return {
        attr['Name'][len(COGNITO_CUSTOM_ATTR_PREFIX):]: parse_attribute_value(attr.get('Value'))
        for attr in attributes
        if attr.get('Name', '').startswith(COGNITO_CUSTOM_ATTR_PREFIX)
    }


class CognitoProfileProvider(ProfileProvider):

    def __init__(self, config: Config, client=None):
        self.config = config
        self.client = client or get_cognito_client()

    def get_user(self, subject_id: str) -> Dict:
        logger.info(f'get_user ::: {subject_id=}')
        cognito_user = self.client.admin_get_user(
            UserPoolId=self.config.cognito_user_pool_id,
            Username=subject_id
        )
        return {
            'id': subject_id,
            'username': cognito_user.get('Username'),
            'metadata': attributes_to_metadata(cognito_user.get('UserAttributes', []))
        }

    def update_metadata(self, subject_id: str, metadata: Dict[str, Any]) -> None:
        logger.info(f'update_metadata ::: {subject_id=}, keys={list(metadata)}')
        cognito = Cognito(self.config.cognito_user_pool_id, self.config.cognito_app_client_id,
                          user_pool_region=self.config.region, username=subject_id)
        cognito.admin_update_profile({
            f'{COGNITO_CUSTOM_ATTR_PREFIX}{key}': format_attribute_value(value) for key, value in metadata.items()
        })


def get_default_provider() -> ProfileProvider:
    return CognitoProfileProvider(get_config())
