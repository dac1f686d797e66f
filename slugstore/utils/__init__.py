from slugstore.utils.config import app_env, app_name, app_prefix, load_redis_url
from slugstore.utils.helpers import path_parameter, guarantee_500_response
from slugstore.utils.identifiers import generate_slug, is_valid_slug, slug_timestamp
from slugstore.utils.logging import initialize_logging
from slugstore.utils.validation import parse_ttl, validate_input


__all__ = [
    'generate_slug',
    'is_valid_slug',
    'slug_timestamp',
    'parse_ttl',
    'validate_input',
    'app_env',
    'app_name',
    'app_prefix',
    'load_redis_url',
    'path_parameter',
    'guarantee_500_response',
    'initialize_logging',
]
