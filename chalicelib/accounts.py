import re
from typing import Dict, Optional

from chalice import Response
from chalice.app import Request

from chalicelib import identity
from chalicelib.constants.constants import NOT_AUTHENTICATED_MESSAGE, VERIFY_ACCOUNT_ERROR_MESSAGE, \
    UPDATE_PROFILE_ERROR_MESSAGE, PROFILE_UPDATED_MESSAGE, PHONE_REQUIRED_MESSAGE, PHONE_INVALID_MESSAGE, \
    PROFILE_COMPLETED_KEY, PHONE_NUMBER_KEY, MZ_PHONE_PATTERN
from chalicelib.constants.status_codes import http200, http400, http401
from chalicelib.utils import app as utils_app, auth as utils_auth, data as utils_data
from chalicelib.utils.exceptions import VerificationFailed
from chalicelib.utils.logger import logger, log_exception

_PROFILE_PROVIDER: Optional[identity.ProfileProvider] = None


def set_profile_provider(provider: Optional[identity.ProfileProvider]) -> None:
    global _PROFILE_PROVIDER
    _PROFILE_PROVIDER = provider


def get_profile_provider() -> identity.ProfileProvider:
    if _PROFILE_PROVIDER is None:
        set_profile_provider(identity.get_default_provider())
    return _PROFILE_PROVIDER


def is_profile_complete(metadata: Optional[Dict]) -> bool:
    """
    Onboarding is finished when the completion flag is exactly True
    and a phone number is stored
    """
    if not metadata:
        return False
    return metadata.get(PROFILE_COMPLETED_KEY) is True and bool(metadata.get(PHONE_NUMBER_KEY))


def _not_authenticated() -> Response:
    return utils_app.json_response({'success': False, 'message': NOT_AUTHENTICATED_MESSAGE}, http401)


def _failure(error: Exception, message: str) -> Response:
    log_exception(error, http400, message)
    return utils_app.json_response({'success': False, 'message': message, 'error': str(error)}, http400)


def check_completeness(request: Request, profile_provider: identity.ProfileProvider) -> Response:
    user_id = (getattr(request, 'auth_result', None) or {}).get('user_id')
    if not user_id:
        logger.info('check_completeness ::: no subject id on request')
        return _not_authenticated()

    try:
        user = profile_provider.get_user(user_id)
    except Exception as error:
        return _failure(VerificationFailed(str(error)), VERIFY_ACCOUNT_ERROR_MESSAGE)

    is_complete = is_profile_complete((user or {}).get('metadata'))
    logger.info(f'check_completeness ::: {user_id=}, {is_complete=}')
    return utils_app.json_response({'success': True, 'isComplete': is_complete}, http200)


def complete_profile(request: Request, profile_provider: identity.ProfileProvider) -> Response:
    user_id = (getattr(request, 'auth_result', None) or {}).get('user_id')
    if not user_id:
        return _not_authenticated()

    phone_number = utils_data.parse_raw_body(request).get(PHONE_NUMBER_KEY)
    if not phone_number:
        return utils_app.json_response({'success': False, 'message': PHONE_REQUIRED_MESSAGE}, http400)
    if not isinstance(phone_number, str) or not re.match(MZ_PHONE_PATTERN, phone_number):
        return utils_app.json_response({'success': False, 'message': PHONE_INVALID_MESSAGE}, http400)

    try:
        profile_provider.update_metadata(user_id, {PHONE_NUMBER_KEY: phone_number, PROFILE_COMPLETED_KEY: True})
    except Exception as error:
        return _failure(error, UPDATE_PROFILE_ERROR_MESSAGE)

    logger.info(f'complete_profile ::: {user_id=} profile completed')
    return utils_app.json_response({'success': True, 'message': PROFILE_UPDATED_MESSAGE}, http200)


@utils_app.request_exception_handler
@utils_auth.authenticate
@utils_app.log_start_finish
def endpoint_check_completeness(request: Request) -> Response:
    return check_completeness(request, get_profile_provider())


@utils_app.request_exception_handler
@utils_auth.authenticate
@utils_app.log_start_finish
def endpoint_complete_profile(request: Request) -> Response:
    return complete_profile(request, get_profile_provider())
