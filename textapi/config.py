import os

class ServiceConfig:
    ## Credentials

    APPLICATION_ID = os.getenv('TEXTAPI_APPLICATION_ID', '')
    APPLICATION_KEY = os.getenv('TEXTAPI_APPLICATION_KEY', '')

    ## Transport

    USE_HTTPS = os.getenv('TEXTAPI_USE_HTTPS', 'false').lower() in ('1', 'true', 'yes')
    HOST = os.getenv('TEXTAPI_HOST', 'api.aylien.com')
    BASE_PATH = os.getenv('TEXTAPI_BASE_PATH', '/api/v1')
    TIMEOUT = float(os.getenv('TEXTAPI_TIMEOUT', '60'))

    # Request headers
    USER_AGENT_PREFIX = 'Aylien Text API Python'
    APPLICATION_ID_HEADER = 'X-AYLIEN-TextAPI-Application-ID'
    APPLICATION_KEY_HEADER = 'X-AYLIEN-TextAPI-Application-Key'

    # Response headers
    RATE_LIMIT_LIMIT_HEADER = 'X-RateLimit-Limit'
    RATE_LIMIT_REMAINING_HEADER = 'X-RateLimit-Remaining'
    RATE_LIMIT_RESET_HEADER = 'X-RateLimit-Reset'


service_config = ServiceConfig()
