from datetime import datetime
from decimal import Decimal
from typing import Tuple, List, Dict
from uuid import uuid4

from boto3.dynamodb.conditions import Attr, Key
from chalice import Response
from chalice.app import Request

from chalicelib.base_class_entity import EntityBase
from chalicelib.constants import keys_structure
from chalicelib.constants.constants import PAYMENT_METHODS, PAYMENT_STATUSES, SERVICE_FIELDS
from chalicelib.constants.status_codes import http200, http201
from chalicelib.constants.substitute_keys import from_db
from chalicelib.utils import auth as utils_auth, data as utils_data, db as utils_db, app as utils_app
from chalicelib.utils.logger import logger
from chalicelib.utils.validators import is_str, is_non_empty_str, is_number, is_one_of, is_iso_datetime, to_decimal


class Payment(EntityBase):
    """
    Payment of an order.
    Records are written once, status changes come from the payment provider callbacks
    """
    pk = keys_structure.payments_pk
    sk = keys_structure.payments_sk

    required_immutable_fields_validation = {
        'id_': is_str,
        'order_id': is_non_empty_str,
        'method': lambda x: is_one_of(PAYMENT_METHODS, x),
        'amount': is_number,
        'created_by': is_str,
        'date_created': is_str
    }

    required_mutable_fields_validation = {
        'status_': lambda x: is_one_of(PAYMENT_STATUSES, x),
        'date_updated': is_str
    }

    optional_fields_validation = {
        'paid_at': is_iso_datetime
    }

    def __init__(self, id_, **kwargs):
        EntityBase.__init__(self, id_)

        self.request_data = kwargs.get('request_data', {})

        self.order_id: str = kwargs.get('order_id')
        self.method: str = kwargs.get('method')
        self.status_: str = kwargs.get('status') or kwargs.get('status_') or 'pending'
        self.amount: Decimal = to_decimal(kwargs.get('amount'))
        self.paid_at: str = kwargs.get('paid_at')
        self.created_by: str = kwargs.get('created_by') or self.request_data.get('auth_result', {}).get('user_id')
        self.date_created: str = kwargs.get('date_created') or datetime.now().isoformat(timespec="seconds")
        self.date_updated: str = kwargs.get('date_updated') or datetime.now().isoformat(timespec="seconds")
        self.record_type = 'payment'

    @classmethod
    @utils_auth.authenticate_class
    def init_request_create(cls, request: Request):
        logger.info("init_request_create ::: started")
        request_body = utils_data.parse_raw_body(request)
        utils_data.pop_keys(request_body, SERVICE_FIELDS)
        return cls(id_=str(uuid4()), request_data={'auth_result': request.auth_result}, **request_body)

    @classmethod
    def init_get_by_id(cls, payment_id: str):
        logger.info("init_get_by_id ::: started")
        c = cls(payment_id)
        c.__init__(**c._get_db_item())
        return c

    @staticmethod
    def get_by_order(order_id: str) -> List[Dict]:
        payment_db_records: List[Dict] = utils_db.query_items_paged(
            Key('partkey').eq(keys_structure.payments_pk),
            filter_expression=Attr('order_id').eq(order_id)
        )
        return [Payment(**record)._to_ui() for record in payment_db_records]

    @utils_app.log_start_finish
    def endpoint_get_by_id(self) -> Response:
        return utils_app.json_response({'success': True, 'data': self._to_ui()}, http200)

    @utils_app.log_start_finish
    def endpoint_create(self) -> Response:
        self._create_db_record()
        return utils_app.json_response(
            {'success': True, 'message': 'Payment successfully created', 'id': self.id_, 'status': self.status_},
            http201)

    def _get_pk_sk(self) -> Tuple[str, str]:
        return self.pk, self.sk.format(payment_id=self.id_)

    def _to_dict(self):
        return {
            'id_': self.id_,
            'order_id': self.order_id,
            'method': self.method,
            'status_': self.status_,
            'amount': self.amount,
            'paid_at': self.paid_at,
            'created_by': self.created_by,
            'date_created': self.date_created,
            'date_updated': self.date_updated
        }

    def _to_ui(self):
        item = self._to_dict()
        utils_data.substitute_keys(dict_to_process=item, base_keys=from_db, opt_dict={'status_': 'status'})
        return item


@utils_app.request_exception_handler
def endpoint_create_payment(request: Request) -> Response:
    return Payment.init_request_create(request).endpoint_create()


@utils_app.request_exception_handler
@utils_auth.authenticate_user
def endpoint_get_payment(request: Request, payment_id: str) -> Response:
    return Payment.init_get_by_id(payment_id).endpoint_get_by_id()


@utils_app.request_exception_handler
@utils_auth.authenticate_user
@utils_app.log_start_finish
def endpoint_get_order_payments(request: Request, order_id: str) -> Response:
    payments = Payment.get_by_order(order_id)
    logger.info(f"endpoint_get_order_payments ::: {order_id=}, returning payments={[p['id'] for p in payments]}")
    return utils_app.json_response({'success': True, 'data': payments}, http200)
