import json
from typing import List, Dict, Optional, Tuple

from chalice import Response
from chalice.app import Request

from chalicelib.constants.categories import CATEGORIES, CATEGORY_TYPES
from chalicelib.constants.status_codes import http200
from chalicelib.utils import app as utils_app, exceptions
from chalicelib.utils.logger import logger

CATEGORY_FIELDS = ('name', 'type', 'description')


def validate_category(record: Dict) -> Dict:
    if set(record) != set(CATEGORY_FIELDS):
        raise exceptions.ValidationException(f'Category record should have exactly the fields {CATEGORY_FIELDS}')
    if record['type'] not in CATEGORY_TYPES:
        raise exceptions.ValidationException(f'Unknown category type={record["type"]}')
    if not all(isinstance(record[field], str) for field in CATEGORY_FIELDS):
        raise exceptions.ValidationException(f'Category fields should be strings, record={record}')
    return record


def get_categories(type_: Optional[str] = None) -> List[Dict]:
    """
    Copies of the seed records in their original order,
    optionally only the ones of one type
    """
    if type_ is not None and type_ not in CATEGORY_TYPES:
        raise exceptions.ValidationException(f'Unknown category type={type_}, allowed={CATEGORY_TYPES}')
    return [dict(record) for record in CATEGORIES if type_ is None or record['type'] == type_]


def categories_to_json(categories=CATEGORIES) -> str:
    return json.dumps([dict(record) for record in categories], ensure_ascii=False)


def categories_from_json(raw: str) -> Tuple[Dict, ...]:
    records = json.loads(raw)
    if not isinstance(records, list):
        raise exceptions.ValidationException('Categories JSON should be a list')
    return tuple(validate_category(record) for record in records)


@utils_app.request_exception_handler
@utils_app.log_start_finish
def endpoint_get_categories(request: Request) -> Response:
    type_ = (request.query_params or {}).get('type')
    categories = get_categories(type_)
    logger.info(f'endpoint_get_categories ::: {type_=}, returning {len(categories)} categories')
    return utils_app.json_response({'success': True, 'data': categories}, http200)
