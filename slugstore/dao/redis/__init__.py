from slugstore.dao.redis.redis_key_schema import RedisKeySchema
from slugstore.dao.redis.mixins import RedisClientMixin
from slugstore.dao.redis.identity_redis_dao import IdentityRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'IdentityRedisDAO',
]
