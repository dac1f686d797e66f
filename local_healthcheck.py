"""Check that slugs can be created and resolved against your local Redis

Connection details:
- redis: REDIS_URL, redis://localhost:6379/0 by default
- redisinsight: 127.0.0.1:5540

Expect to see the created slug and its identity record printed in your local
console. You can also find the record in the Redis Insight UI under
'identities:<slug>' (with a 60 seconds TTL).
"""

from slugstore.dao.redis import IdentityRedisDAO
from slugstore.models import Action, IdentityRecord, UserType
from slugstore.utils import app_prefix, load_redis_url


def main():
    dao = IdentityRedisDAO(redis_url=load_redis_url(), prefix=app_prefix())

    slug = dao.create(IdentityRecord(user='healthcheck', user_type=UserType.PROSPECT, action=Action.SMS_CONSENT), ttl=60)
    print(slug)
    print(dao.lookup(slug).to_dict())


if __name__ == '__main__':
    main()
