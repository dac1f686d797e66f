"""Process-wide dependencies shared by the Lambda handlers

The identity DAO (and the Redis connection pool behind it) is built once per
execution environment, on the first invocation, and handed to the request
handling functions explicitly.
"""

import functools
import logging

from slugstore.dao.base import IdentityBaseDAO
from slugstore.dao.redis import IdentityRedisDAO
from slugstore.dao.exceptions import DataStoreError
from slugstore.exceptions import ConfigurationError
from slugstore.utils.config import app_prefix, load_redis_url


logger = logging.getLogger(__name__)


@functools.cache
def _build_identity_dao() -> IdentityBaseDAO:
    return IdentityRedisDAO(redis_url=load_redis_url(), prefix=app_prefix())


def identity_dao() -> IdentityBaseDAO:
    """Return the process-wide identity DAO, building it on first use

    Failing to configure or reach Redis is fatal: the execution environment
    exits with status 1 instead of serving requests without a data store.

    Raises:
        SystemExit: If Redis is misconfigured or unreachable.
    """
    try:
        return _build_identity_dao()
    except (DataStoreError, ConfigurationError) as e:
        logger.critical('Could not connect to Redis. Exiting.', extra={'errorCode': e.error_code, 'reason': str(e)})
        raise SystemExit(1) from e
