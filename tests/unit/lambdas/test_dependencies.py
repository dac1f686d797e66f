"""Unit tests for the process-wide Lambda dependencies

Test coverage includes:
    - The identity DAO is built once and reused across invocations.
    - Misconfigured or unreachable Redis exits the process.
    - A PING timeout at startup exits the process too.
"""

from unittest.mock import MagicMock

import pytest
import redis

from slugstore.dao.exceptions import DataStoreError
from slugstore.exceptions import BadConfigurationError
from slugstore.lambdas import dependencies


@pytest.fixture(autouse=True)
def _clear_cache():
    dependencies._build_identity_dao.cache_clear()
    yield
    dependencies._build_identity_dao.cache_clear()


def test_identity_dao_is_built_once(monkeypatch):
    dao_cls = MagicMock()
    monkeypatch.setattr(dependencies, 'IdentityRedisDAO', dao_cls)
    monkeypatch.setattr(dependencies, 'load_redis_url', lambda: 'redis://redis.test:6379/0')
    monkeypatch.setattr(dependencies, 'app_prefix', lambda: 'slugstore:test')

    first = dependencies.identity_dao()
    second = dependencies.identity_dao()

    assert first is second is dao_cls.return_value
    dao_cls.assert_called_once_with(redis_url='redis://redis.test:6379/0', prefix='slugstore:test')


@pytest.mark.parametrize('error', [DataStoreError("Can't connect to Redis"), BadConfigurationError('Could not parse the default Redis URL.')])
def test_identity_dao_exits_when_redis_is_unavailable(monkeypatch, error):
    monkeypatch.setattr(dependencies, 'IdentityRedisDAO', MagicMock(side_effect=error))
    monkeypatch.setattr(dependencies, 'load_redis_url', lambda: 'redis://redis.test:6379/0')

    with pytest.raises(SystemExit) as excinfo:
        dependencies.identity_dao()

    assert excinfo.value.code == 1


def test_identity_dao_exits_when_redis_ping_times_out(monkeypatch):
    """A startup PING timeout is as fatal as a refused connection."""
    redis_client = MagicMock(spec=redis.Redis)
    redis_client.connection_pool = MagicMock(connection_kwargs={'host': 'redis.test', 'port': 6379, 'db': 0})
    redis_client.ping.side_effect = redis.exceptions.TimeoutError('Timeout connecting to server')
    monkeypatch.setattr(redis.Redis, 'from_url', MagicMock(return_value=redis_client))
    monkeypatch.setattr(dependencies, 'load_redis_url', lambda: 'redis://redis.test:6379/0?socket_connect_timeout=1')
    monkeypatch.setattr(dependencies, 'app_prefix', lambda: None)

    with pytest.raises(SystemExit) as excinfo:
        dependencies.identity_dao()

    assert excinfo.value.code == 1
