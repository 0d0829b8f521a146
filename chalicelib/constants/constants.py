# User facing messages
NOT_AUTHENTICATED_MESSAGE = 'Usuário não autenticado'
INVALID_TOKEN_MESSAGE = 'Token inválido'
VERIFY_ACCOUNT_ERROR_MESSAGE = 'Erro ao verificar conta'
UPDATE_PROFILE_ERROR_MESSAGE = 'Erro ao atualizar perfil'
PROFILE_UPDATED_MESSAGE = 'Perfil atualizado com sucesso'
PHONE_REQUIRED_MESSAGE = 'Número de telefone é obrigatório'
PHONE_INVALID_MESSAGE = 'Número de telefone inválido para Moçambique'
HEALTH_CHECK_MESSAGE = 'API está funcionando'

# Identity provider metadata
COGNITO_CUSTOM_ATTR_PREFIX = 'custom:'
PROFILE_COMPLETED_KEY = 'profileCompleted'
PHONE_NUMBER_KEY = 'phoneNumber'

# Validation patterns
MZ_PHONE_PATTERN = r'^\+258\d{9}$'
EMAIL_PATTERN = r'^\S+@\S+\.\S+$'
HH_MM_PATTERN = r'^([01]?[0-9]|2[0-3]):[0-5][0-9]$'

WEEK_DAYS = ('monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday')

PAYMENT_METHODS = ('mpesa', 'card', 'cash')
PAYMENT_STATUSES = ('pending', 'paid', 'failed')

# Keys a client can't set in a request body
SERVICE_FIELDS = ('id', 'id_', 'partkey', 'sortkey', 'record_type', 'request_data',
                  'created_by', 'date_created', 'updated_by', 'date_updated')
