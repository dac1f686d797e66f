"""Data Access Object (DAO) implementation for managing identity records in Redis

This module provides a Redis-based implementation of IdentityBaseDAO for the
create/lookup lifecycle of IdentityRecord instances.

Responsibilities:
    - Mint a fresh slug for every stored record;
    - Store records as Redis hashes and attach their TTL;
    - Retrieve records by slug, reporting expired and unknown slugs alike as not found;
    - Raise a distinct DataStoreError subclass for each failing Redis step.

Classes:
    IdentityRedisDAO:
        DAO for storing and retrieving IdentityRecord in a Redis datastore.

Example:
    >>> from slugstore.models import IdentityRecord, UserType, Action
    >>> from slugstore.dao.redis import IdentityRedisDAO

    >>> dao = IdentityRedisDAO(redis_url='redis://localhost:6379/0', prefix='slugstore:dev')

    >>> record = IdentityRecord(user='u123', user_type=UserType.RESIDENT, action=Action.SMS_CONSENT)
    >>> slug = dao.create(record, ttl=3600)
    >>> dao.lookup(slug)
    IdentityRecord(user='u123', user_type=<UserType.RESIDENT: 'resident'>, action=<Action.SMS_CONSENT: 'smsConsent'>)
"""

import logging

from beartype import beartype

from slugstore.models import Action, IdentityRecord, UserType
from slugstore.types import RedisHash
from slugstore.dao.base import IdentityBaseDAO
from slugstore.dao.redis.mixins import RedisClientMixin
from slugstore.dao.redis.helpers import handle_redis_errors
from slugstore.dao.exceptions import (
    MalformedRecordError,
    RecordExpireError,
    RecordReadError,
    RecordWriteError,
    SlugNotFoundError,
)
from slugstore.utils.identifiers import generate_slug


logger = logging.getLogger(__name__)


class IdentityRedisDAO(RedisClientMixin, IdentityBaseDAO):
    """Redis-based Data Access Object (DAO) for managing identity records

    This class implements the IdentityBaseDAO interface using Redis as a data store.
    Each record lives in a hash under `<prefix>:identities:<slug>` with the fields
    `user`, `userType` and `action`.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        create(record: IdentityRecord, ttl: int, **kwargs) -> str:
            Store a record under a new slug and let it expire after `ttl` seconds.
            Raises RecordWriteError when the hash can't be written.
            Raises RecordExpireError when the TTL can't be applied.

        lookup(slug: str, **kwargs) -> IdentityRecord:
            Retrieve a record by slug.
            Raises SlugNotFoundError when the slug doesn't exist (or expired).
            Raises MalformedRecordError when the stored hash holds unsupported values.
            Raises RecordReadError on Redis failures.
    """

    @beartype
    def create(self, record: IdentityRecord, ttl: int, **kwargs) -> str:
        """Store an identity record under a freshly generated slug

        The hash is written with a single HSET (all fields or none), then the
        TTL is applied with EXPIRE ... LT. The two commands aren't wrapped in a
        transaction: if EXPIRE fails the record stays in Redis without a TTL.
        The slug is not handed out in that case, so nobody can look it up.

        Args:
            record (IdentityRecord):
                Validated identity record.
            ttl (int):
                Seconds until the record expires.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            str: slug the record is stored under.

        Raises:
            RecordWriteError:
                If writing the hash fails.
            RecordExpireError:
                If applying the TTL fails. The record is left without TTL.

        Example:
            >>> dao.create(record, ttl=3600)
            '01JA8Q6W3M2ZB0S6QX1V9C4T7N'
        """
        slug = generate_slug()
        key = self.keys.identity_key(slug)

        self._write(key, record.to_dict())
        try:
            self._expire(key, ttl)
        except RecordExpireError:
            logger.error(
                'Identity record was written but its TTL could not be applied. Record persists without expiry.',
                extra={'slug': slug, 'ttl': ttl},
            )
            raise

        logger.info('Created identity record.', extra={'slug': slug, 'ttl': ttl})
        return slug

    @handle_redis_errors(RecordReadError)
    @beartype
    def lookup(self, slug: str, **kwargs) -> IdentityRecord:
        """Retrieve a stored identity record by slug

        Redis can't tell a slug that never existed from an expired one, and
        neither does this method: both raise SlugNotFoundError. A hash with
        an empty `user` field counts as missing too.

        Args:
            slug (str):
                Slug returned by create().
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            IdentityRecord: the stored record.

        Raises:
            SlugNotFoundError:
                If no live record exists for the slug.
            MalformedRecordError:
                If the stored user type or action isn't supported.
            RecordReadError:
                If Redis connectivity issues occur.

        Example:
            >>> dao.lookup('01JA8Q6W3M2ZB0S6QX1V9C4T7N')
            IdentityRecord(user='u123', user_type=<UserType.RESIDENT: 'resident'>, action=<Action.SMS_CONSENT: 'smsConsent'>)
        """
        value = self.redis.hgetall(self.keys.identity_key(slug))

        if not value.get('user'):
            raise SlugNotFoundError(f"Slug '{slug}' not found.")

        try:
            return IdentityRecord(
                user=value['user'],
                user_type=UserType(value.get('userType')),
                action=Action(value.get('action')),
            )
        except ValueError as e:
            raise MalformedRecordError(f"Identity record for slug '{slug}' is malformed.") from e

    @handle_redis_errors(RecordWriteError)
    def _write(self, key: str, fields: RedisHash) -> None:
        self.redis.hset(key, mapping=fields)

    @handle_redis_errors(RecordExpireError)
    def _expire(self, key: str, ttl: int) -> None:
        # LT: only set the expiry if it shortens the current one (a key without TTL counts as infinite)
        self.redis.expire(key, ttl, lt=True)
