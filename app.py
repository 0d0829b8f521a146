from datetime import datetime

from chalice import Chalice

from chalicelib import accounts, categories, restaurants, payments
from chalicelib.config import load_config
from chalicelib.constants.constants import HEALTH_CHECK_MESSAGE
from chalicelib.constants.status_codes import http200
from chalicelib.utils import app as utils_app

# Missing settings stop the cold start here
config = load_config()

app = Chalice(app_name='zero-delivery')


@utils_app.request_exception_handler
def endpoint_health_check(request):
    return utils_app.json_response({
        'success': True,
        'message': HEALTH_CHECK_MESSAGE,
        'timestamp': datetime.now().isoformat(timespec="seconds")
    }, http200)


@app.route('/health', methods=['GET'], cors=True)
def health_check():
    return endpoint_health_check(app.current_request)


# USERS
@app.route('/users/complete', methods=['GET'], cors=True)
def check_account_completeness():
    return accounts.endpoint_check_completeness(app.current_request)


@app.route('/users/profile', methods=['PUT'], cors=True)
def complete_profile():
    return accounts.endpoint_complete_profile(app.current_request)


# CATEGORIES
@app.route('/categories', methods=['GET'], cors=True)
def get_categories():
    return categories.endpoint_get_categories(app.current_request)


# RESTAURANTS
@app.route('/restaurants', methods=['GET'], cors=True)
def get_restaurants():
    return restaurants.endpoint_get_restaurants(app.current_request)


@app.route('/restaurants/{restaurant_id}', methods=['GET'], cors=True)
def get_restaurant_by_id(restaurant_id):
    return restaurants.endpoint_get_restaurant(app.current_request, restaurant_id)


@app.route('/restaurants', methods=['POST'], cors=True)
def create_restaurant():
    return restaurants.endpoint_create_restaurant(app.current_request)


@app.route('/restaurants/{restaurant_id}', methods=['PUT'], cors=True)
def update_restaurant(restaurant_id):
    """
    partial update, also used to flip is_open / is_active / is_verified
    """
    return restaurants.endpoint_update_restaurant(app.current_request, restaurant_id)


# PAYMENTS
@app.route('/payments', methods=['POST'], cors=True)
def create_payment():
    return payments.endpoint_create_payment(app.current_request)


@app.route('/payments/{payment_id}', methods=['GET'], cors=True)
def get_payment_by_id(payment_id):
    return payments.endpoint_get_payment(app.current_request, payment_id)


@app.route('/payments/order/{order_id}', methods=['GET'], cors=True)
def get_order_payments(order_id):
    return payments.endpoint_get_order_payments(app.current_request, order_id)
