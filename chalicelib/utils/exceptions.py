__all__ = ["NotAuthenticated", "InvalidToken", "VerificationFailed", "RecordNotFound", "NumberOfRetriesExceeded",
           "ValidationException", "ConfigurationError"]


# Auth exceptions
class NotAuthenticated(Exception):
    LEVEL = 'warning'


class InvalidToken(Exception):
    LEVEL = 'warning'


# Identity provider exceptions
class VerificationFailed(Exception):
    pass


# DynamoDB exceptions
class RecordNotFound(Exception):
    LEVEL = 'warning'


# DB Performance Exception
class NumberOfRetriesExceeded(Exception):
    pass


# Validations exceptions
class ValidationException(Exception):
    LEVEL = 'warning'


# Startup exceptions
class ConfigurationError(Exception):
    pass
