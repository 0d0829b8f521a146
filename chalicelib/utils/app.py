import functools
from typing import Callable

from chalice import Response
from chalice.app import Request

from chalicelib.constants.constants import NOT_AUTHENTICATED_MESSAGE, INVALID_TOKEN_MESSAGE
from chalicelib.constants.status_codes import http400, http401, http404, http500
from chalicelib.utils.exceptions import NotAuthenticated, InvalidToken, RecordNotFound, ValidationException
from chalicelib.utils.logger import logger, log_exception, new_request_id


def json_response(body: dict, status_code: int) -> Response:
    return Response(body=body, status_code=status_code, headers={'Content-Type': 'application/json'})


def error_response(error: Exception, msg: str = "", status_code: int = 400, *args, **kwargs):
    log_exception(error, status_code, msg, *args, **kwargs)
    return json_response(
        body={
            'success': False,
            'message': str(msg),
            'error': str(error),
            'exception': error.__class__.__name__,
            'error_id': getattr(logger, 'current_request_id', None)
        },
        status_code=status_code
    )


def request_exception_handler(func: Callable):
    @functools.wraps(func)
    def result(*args, **kwargs):
        new_request_id(next((arg for arg in args if isinstance(arg, Request)), None))
        try:
            logger.info(f'Calling function {func.__name__}')
            return func(*args, **kwargs)
        except NotAuthenticated as not_authenticated:
            log_exception(not_authenticated, http401, f'function = {func.__name__}')
            return json_response({'success': False, 'message': NOT_AUTHENTICATED_MESSAGE}, http401)
        except InvalidToken as invalid_token:
            return error_response(
                error=invalid_token,
                msg=INVALID_TOKEN_MESSAGE,
                status_code=http401)
        except ValidationException as validation_error:
            return error_response(
                error=validation_error,
                msg=f'function = {func.__name__} , error = {validation_error}',
                status_code=http400)
        except RecordNotFound as record_not_found:
            return error_response(
                error=record_not_found,
                msg=f'function = {func.__name__} , error = {record_not_found}',
                status_code=http404)
        except Exception as exception:
            return error_response(
                error=exception,
                msg=f'function = {func.__name__}, error = {exception}',
                status_code=http500)
    return result


def log_start_finish(func: Callable):
    @functools.wraps(func)
    def result(*args, **kwargs):
        logger.info(f'{func.__name__} ::: started')
        response = func(*args, **kwargs)
        logger.info(f'{func.__name__} ::: finished')
        return response
    return result
