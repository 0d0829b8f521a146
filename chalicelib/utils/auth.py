import functools
from typing import Optional, Dict

import jwt
from chalice.app import Request

from chalicelib.config import get_config
from chalicelib.utils import exceptions as utils_exceptions
from chalicelib.utils.logger import log_request, logger

_JWKS_CLIENTS = {}


def get_jwks_client(jwk_url: str) -> jwt.PyJWKClient:
    if jwk_url not in _JWKS_CLIENTS:
        _JWKS_CLIENTS[jwk_url] = jwt.PyJWKClient(jwk_url)
    return _JWKS_CLIENTS[jwk_url]


def get_bearer_token(request: Request) -> Optional[str]:
    header = (request.headers or {}).get('authorization') or ''
    if header.lower().startswith('bearer '):
        header = header[len('bearer '):]
    return header.strip() or None


def decode_token(token: str) -> Dict:
    """
    Verifies a Cognito id token against the user pool JWKS
    and returns its claims
    """
    config = get_config()
    try:
        signing_key = get_jwks_client(config.cognito_jwk_url).get_signing_key_from_jwt(token)
        claims = jwt.decode(
            token,
            signing_key.key,
            algorithms=['RS256'],
            audience=config.cognito_app_client_id,
            issuer=config.cognito_issuer)
    except jwt.PyJWTError as error:
        raise utils_exceptions.InvalidToken(str(error))
    logger.debug(f'decode_token ::: token decoded, sub={claims.get("sub")}')
    return claims


def get_auth_result(request: Request) -> Dict:
    """
    Builds auth_result for the request.
    user_id is None when the request carries no token
    """
    token = get_bearer_token(request)
    if token is None:
        logger.info('get_auth_result ::: request without token')
        return {'user_id': None}
    claims = decode_token(token)
    return {
        'user_id': claims.get('sub'),
        'username': claims.get('cognito:username'),
        'email': claims.get('email'),
        'groups': claims.get('cognito:groups', [])
    }


def _attach_auth_result(request: Request) -> Dict:
    if getattr(request, 'auth_result', None) is None:
        log_request(request)
        setattr(request, 'auth_result', get_auth_result(request))
    return request.auth_result


def authenticate(func):
    """
    Wrapper for functions which take the request as the first argument.
    A request without token passes with auth_result['user_id'] = None
    """

    @functools.wraps(func)
    def result_auth(*args, **kwargs):
        request = args[0]
        auth_result = _attach_auth_result(request)
        logger.info(f'authenticate ::: {func.__name__}, user_id={auth_result.get("user_id")}')
        return func(*args, **kwargs)

    return result_auth


def authenticate_class(func):
    """
    Wrapper for class methods which require user's authentication
    """

    @functools.wraps(func)
    def result_auth(*args, **kwargs):
        request = args[1]
        auth_result = _attach_auth_result(request)
        if not auth_result.get('user_id'):
            raise utils_exceptions.NotAuthenticated(f'{func.__name__} requires an authenticated user')
        logger.info(f'authenticate_class ::: SUCCESS, func.__name__ {func.__name__}')
        return func(*args, **kwargs)

    return result_auth


def authenticate_user(func):
    """
    Same as authenticate, but the request must carry a verified token
    """

    @functools.wraps(func)
    def result_auth(*args, **kwargs):
        request = args[0]
        auth_result = _attach_auth_result(request)
        if not auth_result.get('user_id'):
            raise utils_exceptions.NotAuthenticated(f'{func.__name__} requires an authenticated user')
        logger.info(f'authenticate_user ::: SUCCESS, func.__name__ {func.__name__}')
        return func(*args, **kwargs)

    return result_auth
