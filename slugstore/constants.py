from enum import StrEnum


class TTL:
    """TTL durations in seconds."""

    # Slug TTL used when the caller gives none, or an invalid one (24 hours)
    DEFAULT = 86_400  # 60 * 60 * 24
    # Upper bound for caller-provided slug TTLs (7 days)
    MAX = 604_800  # 60 * 60 * 24 * 7


# Fallback Redis connection URL when REDIS_URL is missing or unparsable
DEFAULT_REDIS_URL = 'redis://localhost:6379/0'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'

    class Redis(StrEnum):
        URL = 'REDIS_URL'
        # SSM parameter name holding the Redis URL (takes precedence over REDIS_URL)
        URL_PARAM = 'REDIS_URL_PARAM'

    class LocalStack(StrEnum):
        ENDPOINT = 'LOCALSTACK_ENDPOINT'  # usually http://localstack:4566


# Log event names / error codes
SLUG_CREATED = 'SLUG_CREATED'
SLUG_FOUND = 'SLUG_FOUND'
SLUG_NOT_FOUND = 'SLUG_NOT_FOUND'
INVALID_INPUT = 'INVALID_INPUT'
MISSING_PATH_PARAMETER = 'MISSING_PATH_PARAMETER'
DATA_STORE_UNAVAILABLE = 'DATA_STORE_UNAVAILABLE'
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
