import functools
from typing import Any
from collections.abc import Callable

import redis

from slugstore.dao.exceptions import DataStoreError


__all__ = []


def _redis_location(client: redis.Redis) -> str:
    info = client.connection_pool.connection_kwargs
    return f"{info.get('host')}:{info.get('port')}/{info.get('db')}"


def handle_redis_errors(error_cls: type[DataStoreError] = DataStoreError) -> Callable:
    """Wrap Redis-interacting DAO methods to translate Redis failures

    Args:
        error_cls (type[DataStoreError]):
            DataStoreError subclass raised in place of the Redis exception.
            Defaults to DataStoreError.

    Returns:
        Callable[..., Any]:
            Decorator for DAO methods performing Redis operations which may raise
            redis.exceptions.RedisError (connection issues, timeouts, OOM, etc.).

    Example:
        >>> @handle_redis_errors(RecordReadError)
        ... def get_record(self, key):
        ...     return self.redis.hgetall(key)
    """

    def decorator(method: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(method)
        def wrapper(self, *args, **kwargs):
            try:
                return method(self, *args, **kwargs)
            except redis.exceptions.ConnectionError as e:
                raise error_cls(f"Can't connect to Redis at {_redis_location(self.redis)}.") from e
            except redis.exceptions.RedisError as e:
                raise error_cls(f'Redis command failed at {_redis_location(self.redis)}: {e}') from e

        return wrapper

    return decorator
