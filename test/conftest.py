import os

# app.py loads its settings at import time, the values match the "test" stage of .chalice/config.json
os.environ['COGNITO_USER_POOL_ID'] = 'eu-central-1_testpool'
os.environ['COGNITO_APP_CLIENT_ID'] = 'test-app-client-id'
os.environ['GEN_TABLE_NAME'] = 'zero-delivery-test'
os.environ['AWS_REGION'] = 'eu-central-1'
os.environ.setdefault('stage', 'test')
