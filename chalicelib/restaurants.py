from datetime import datetime
from decimal import Decimal
from typing import Tuple, List, Dict
from uuid import uuid4

from boto3.dynamodb.conditions import Attr, Key
from chalice import Response
from chalice.app import Request

from chalicelib.base_class_entity import EntityBase
from chalicelib.constants import keys_structure
from chalicelib.constants.constants import MZ_PHONE_PATTERN, EMAIL_PATTERN, HH_MM_PATTERN, WEEK_DAYS, SERVICE_FIELDS
from chalicelib.constants.status_codes import http200, http201
from chalicelib.utils import auth as utils_auth, data as utils_data, db as utils_db, app as utils_app
from chalicelib.utils.logger import logger
from chalicelib.utils.validators import is_str, is_non_empty_str, is_bool, is_number, is_non_negative_number, \
    is_number_in_range, is_str_list, matches, is_one_of, to_decimal

ADDRESS_REQUIRED_FIELDS = ('street_type', 'street_name', 'number', 'city', 'province')
ADDRESS_OPTIONAL_FIELDS = ('neighbourhood', 'postal_code')


def is_valid_coordinates(coordinates) -> bool:
    if not isinstance(coordinates, dict):
        return False
    return all(coordinates.get(key) is None or is_number(coordinates.get(key)) for key in ('latitude', 'longitude'))


def is_valid_address(address) -> bool:
    if not isinstance(address, dict):
        return False
    if not all(is_non_empty_str(address.get(key)) for key in ADDRESS_REQUIRED_FIELDS):
        return False
    if not all(address.get(key) is None or is_str(address.get(key)) for key in ADDRESS_OPTIONAL_FIELDS):
        return False
    return address.get('coordinates') is None or is_valid_coordinates(address['coordinates'])


def is_valid_operating_hours(hours) -> bool:
    return isinstance(hours, dict) \
        and is_one_of(WEEK_DAYS, hours.get('day')) \
        and matches(HH_MM_PATTERN, hours.get('open_time')) \
        and matches(HH_MM_PATTERN, hours.get('close_time')) \
        and is_bool(hours.get('is_open'))


def normalize_address(address):
    if not isinstance(address, dict):
        return address
    address = dict(address)
    if isinstance(address.get('coordinates'), dict):
        address['coordinates'] = {key: to_decimal(value) for key, value in address['coordinates'].items()}
    return address


def normalize_operating_hours(operating_hours):
    if not isinstance(operating_hours, list):
        return operating_hours
    return [{'is_open': True, **hours} if isinstance(hours, dict) else hours for hours in operating_hours]


class Restaurant(EntityBase):
    pk = keys_structure.restaurants_pk
    sk = keys_structure.restaurants_sk

    required_immutable_fields_validation = {
        'id_': is_str,
        'created_by': is_str,
        'date_created': is_str
    }

    required_mutable_fields_validation = {
        'name': is_non_empty_str,
        'description': is_non_empty_str,
        'address': is_valid_address,
        'phone_number': lambda x: matches(MZ_PHONE_PATTERN, x),
        'cuisine_type': lambda x: is_str_list(x) and len(x) > 0,
        'rating': lambda x: is_number_in_range(x, 0, 5),
        'review_count': is_non_negative_number,
        'delivery_fee': is_non_negative_number,
        'minimum_order': is_non_negative_number,
        'average_preparation_time': is_non_negative_number,
        'delivery_radius': is_non_negative_number,
        'is_open': is_bool,
        'is_active': is_bool,
        'is_verified': is_bool,
        'operating_hours': lambda x: isinstance(x, list) and all(is_valid_operating_hours(h) for h in x),
        'accepted_payment_methods': is_str_list,
        'special_features': is_str_list,
        'date_updated': is_str,
        'updated_by': is_str
    }

    optional_fields_validation = {
        'email': lambda x: matches(EMAIL_PATTERN, x),
        'website': is_str,
        'logo_url': is_str,
        'cover_image_url': is_str
    }

    def __init__(self, id_, **kwargs):
        EntityBase.__init__(self, id_)

        self.request_data = kwargs.get('request_data', {})
        auth_user_id = self.request_data.get('auth_result', {}).get('user_id')

        self.name: str = kwargs.get('name').strip() if isinstance(kwargs.get('name'), str) else kwargs.get('name')
        self.description: str = kwargs.get('description').strip() if \
            isinstance(kwargs.get('description'), str) else kwargs.get('description')
        self.logo_url: str = kwargs.get('logo_url')
        self.cover_image_url: str = kwargs.get('cover_image_url')
        self.address: dict = normalize_address(kwargs.get('address'))
        self.phone_number: str = kwargs.get('phone_number')
        self.email: str = kwargs.get('email')
        self.website: str = kwargs.get('website')
        self.cuisine_type: list = kwargs.get('cuisine_type')
        self.rating: Decimal = to_decimal(kwargs.get('rating', 0))
        self.review_count: int = kwargs.get('review_count', 0)
        self.delivery_fee: Decimal = to_decimal(kwargs.get('delivery_fee'))
        self.minimum_order: Decimal = to_decimal(kwargs.get('minimum_order'))
        self.average_preparation_time: Decimal = to_decimal(kwargs.get('average_preparation_time'))
        self.delivery_radius: Decimal = to_decimal(kwargs.get('delivery_radius'))
        self.is_open: bool = kwargs.get('is_open', True)
        self.is_active: bool = kwargs.get('is_active', True)
        self.is_verified: bool = kwargs.get('is_verified', False)
        self.operating_hours: list = normalize_operating_hours(kwargs.get('operating_hours', []))
        self.accepted_payment_methods: list = kwargs.get('accepted_payment_methods', [])
        self.special_features: list = kwargs.get('special_features', [])
        self.created_by: str = kwargs.get('created_by') or auth_user_id
        self.updated_by: str = auth_user_id or kwargs.get('updated_by')
        self.date_created: str = kwargs.get('date_created') or datetime.now().isoformat(timespec="seconds")
        self.date_updated: str = kwargs.get('date_updated') or datetime.now().isoformat(timespec="seconds")
        self.record_type = 'restaurant'

    @classmethod
    @utils_auth.authenticate_class
    def init_request_create(cls, request: Request):
        logger.info("init_request_create ::: started")
        request_body = utils_data.parse_raw_body(request)
        utils_data.pop_keys(request_body, SERVICE_FIELDS)
        return cls(id_=str(uuid4()), request_data={'auth_result': request.auth_result}, **request_body)

    @classmethod
    @utils_auth.authenticate_class
    def init_request_update(cls, request: Request, restaurant_id: str):
        """
        Request fields are laid over the stored record,
        so the fields missing in the request keep their values
        """
        logger.info("init_request_update ::: started")
        db_record = cls(restaurant_id)._get_db_item()
        request_body = utils_data.parse_raw_body(request)
        utils_data.pop_keys(request_body, SERVICE_FIELDS)
        return cls(request_data={'auth_result': request.auth_result}, **{**db_record, **request_body,
                                                                         'id_': restaurant_id})

    @classmethod
    def init_get_by_id(cls, restaurant_id: str):
        logger.info("init_get_by_id ::: started")
        c = cls(restaurant_id)
        c.__init__(**c._get_db_item())
        return c

    @staticmethod
    def get_all(only_active: bool = True) -> List[Dict]:
        filter_expression = Attr('is_active').eq(True) if only_active else None
        restaurant_db_records: List[Dict] = utils_db.query_items_paged(
            Key('partkey').eq(keys_structure.restaurants_pk),
            filter_expression=filter_expression
        )
        return [Restaurant(**record)._to_ui() for record in restaurant_db_records]

    @utils_app.log_start_finish
    def endpoint_get_by_id(self) -> Response:
        restaurant = self._to_ui()
        logger.info(f"endpoint_get_by_id ::: returning restaurant={restaurant['id']}")
        return utils_app.json_response({'success': True, 'data': restaurant}, http200)

    @utils_app.log_start_finish
    def endpoint_create(self) -> Response:
        self._create_db_record()
        return utils_app.json_response(
            {'success': True, 'message': 'Restaurant successfully created', 'id': self.id_}, http201)

    @utils_app.log_start_finish
    def endpoint_update(self) -> Response:
        self._update_db_record()
        return utils_app.json_response(
            {'success': True, 'message': 'Restaurant was successfully updated', 'id': self.id_}, http200)

    def _get_pk_sk(self) -> Tuple[str, str]:
        return self.pk, self.sk.format(restaurant_id=self.id_)

    def _to_dict(self):
        return {
            'id_': self.id_,
            'name': self.name,
            'description': self.description,
            'logo_url': self.logo_url,
            'cover_image_url': self.cover_image_url,
            'address': self.address,
            'phone_number': self.phone_number,
            'email': self.email,
            'website': self.website,
            'cuisine_type': self.cuisine_type,
            'rating': self.rating,
            'review_count': self.review_count,
            'delivery_fee': self.delivery_fee,
            'minimum_order': self.minimum_order,
            'average_preparation_time': self.average_preparation_time,
            'delivery_radius': self.delivery_radius,
            'is_open': self.is_open,
            'is_active': self.is_active,
            'is_verified': self.is_verified,
            'operating_hours': self.operating_hours,
            'accepted_payment_methods': self.accepted_payment_methods,
            'special_features': self.special_features,
            'created_by': self.created_by,
            'updated_by': self.updated_by,
            'date_created': self.date_created,
            'date_updated': self.date_updated
        }


@utils_app.request_exception_handler
@utils_app.log_start_finish
def endpoint_get_restaurants(request: Request) -> Response:
    restaurants = Restaurant.get_all()
    logger.info(f"endpoint_get_restaurants ::: returning restaurants={[rest['id'] for rest in restaurants]}")
    return utils_app.json_response({'success': True, 'data': restaurants}, http200)


@utils_app.request_exception_handler
def endpoint_get_restaurant(request: Request, restaurant_id: str) -> Response:
    return Restaurant.init_get_by_id(restaurant_id).endpoint_get_by_id()


@utils_app.request_exception_handler
def endpoint_create_restaurant(request: Request) -> Response:
    return Restaurant.init_request_create(request).endpoint_create()


@utils_app.request_exception_handler
def endpoint_update_restaurant(request: Request, restaurant_id: str) -> Response:
    return Restaurant.init_request_update(request, restaurant_id).endpoint_update()
