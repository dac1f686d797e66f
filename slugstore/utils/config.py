"""Utility functions for application configuration management.

Configuration comes from environment variables set on each Lambda function.
The Redis connection URL can either be given directly (`REDIS_URL`) or stored
in AWS SSM Parameter Store (`REDIS_URL_PARAM` holds the parameter name), which
keeps credentials embedded in the URL out of the function configuration.

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return application prefix for DAOs, or None if `APP_NAME` is not set.

    load_redis_url(ssm_client=None, default=DEFAULT_REDIS_URL) -> str
        Resolve the Redis connection URL, falling back to the default URL
        when none is configured or the configured one can't be parsed.

Example:
    Typical usage inside a Lambda handler:

        >>> from slugstore.utils.config import load_redis_url, app_prefix
        >>> os.environ['REDIS_URL'] = 'redis://redis.internal:6379/2'
        >>> load_redis_url()
        'redis://redis.internal:6379/2'
"""

import os
import logging

import boto3
from botocore.client import BaseClient
from botocore.exceptions import BotoCoreError, ClientError
from redis.connection import parse_url

from slugstore.constants import ENV, DEFAULT_REDIS_URL
from slugstore.exceptions import BadConfigurationError, ConfigurationError, MalformedResponseError
from slugstore.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def app_env() -> str:
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    """Return application prefix for DAOs

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'slugstore'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'slugstore:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def _is_parsable(url: str) -> bool:
    try:
        parse_url(url)
    except ValueError:
        return False
    else:
        return True


def _load_ssm_parameter(name: str, ssm_client: BaseClient | None) -> str:
    # fmt: off
    ssm_client_kwargs = {
        'endpoint_url': os.environ.get(ENV.LocalStack.ENDPOINT, 'http://localhost:4566'),
    } if running_locally() else {}
    # fmt: on
    ssm = ssm_client or boto3.client('ssm', **ssm_client_kwargs)

    try:
        return ssm.get_parameter(Name=name, WithDecryption=True)['Parameter']['Value']
    except KeyError as e:
        raise MalformedResponseError('Malformed SSM get_parameter response') from e
    except (BotoCoreError, ClientError) as e:
        raise ConfigurationError(f"Can't resolve SSM parameter {name!r}.") from e


def load_redis_url(ssm_client: BaseClient | None = None, default: str = DEFAULT_REDIS_URL) -> str:
    """Resolve the Redis connection URL

    Resolution order:
        1. SSM parameter named by `REDIS_URL_PARAM` (if set)
        2. `REDIS_URL`
        3. `default`

    A configured URL which can't be parsed is logged and replaced by `default`.

    Args:
        ssm_client (BaseClient | None):
            boto3 SSM client. Created on demand if None.
        default (str):
            Fallback URL. Defaults to 'redis://localhost:6379/0'.

    Returns:
        str: a parsable Redis URL.

    Raises:
        BadConfigurationError:
            If even the default URL can't be parsed.
        ConfigurationError:
            If `REDIS_URL_PARAM` is set but the SSM parameter can't be resolved.
    """
    param_name = os.environ.get(ENV.Redis.URL_PARAM)
    if param_name:
        logger.debug('Resolving Redis URL from SSM.', extra={'parameter': param_name})
        url = _load_ssm_parameter(param_name, ssm_client)
    else:
        url = os.environ.get(ENV.Redis.URL)

    if url and _is_parsable(url):
        return url

    if url:
        logger.warning('Could not parse the given Redis URL. Falling back to the default Redis URL.')
    if not _is_parsable(default):
        raise BadConfigurationError('Could not parse the default Redis URL.')
    return default
