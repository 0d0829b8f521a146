import boto3

from botocore.config import Config

from chalicelib.config import get_config

_CLIENTS = {}


def aws_config(region_name: str) -> Config:
    return Config(retries={'max_attempts': 30}, region_name=region_name)


def get_cognito_client():
    """
    Cognito Client.
    Low-level interface used for the user pool admin calls
    """
    if 'cognito-idp' not in _CLIENTS:
        _CLIENTS['cognito-idp'] = boto3.client('cognito-idp', config=aws_config(get_config().region))
    return _CLIENTS['cognito-idp']


def get_dynamodb_resource():
    """
    DynamoDB Resource.
    ENDPOINT_URL points to a local DynamoDB when it is set
    """
    if 'dynamodb' not in _CLIENTS:
        config = get_config()
        if config.endpoint_url:
            _CLIENTS['dynamodb'] = boto3.resource('dynamodb', endpoint_url=config.endpoint_url,
                                                  region_name=config.region)
        else:
            _CLIENTS['dynamodb'] = boto3.resource('dynamodb', config=aws_config(config.region))
    return _CLIENTS['dynamodb']
