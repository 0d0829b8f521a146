restaurants_pk = 'restaurants'
restaurants_sk = '{restaurant_id}'

payments_pk = 'payments'
payments_sk = '{payment_id}'
