"""Abstract base class for identity record data access objects (DAOs).

This class establishes a consistent contract for all identity DAO implementations,
regardless of the underlying storage mechanism (e.g., Redis, DynamoDB).

Responsibilities:
    - Provide an interface for creating and looking up IdentityRecord objects by slug.
    - Standardize error handling across multiple data store implementations.
    - Enforce a consistent API for use by Lambda functions.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from slugstore.models import IdentityRecord, UserType, Action
        >>> from slugstore.dao.redis import IdentityRedisDAO

        >>> dao = IdentityRedisDAO(...)

        >>> record = IdentityRecord(user='u123', user_type=UserType.RESIDENT, action=Action.SMS_CONSENT)
        >>> slug = dao.create(record, ttl=3600)
        >>> slug
        '01JA8Q6W3M2ZB0S6QX1V9C4T7N'

        >>> dao.lookup(slug).user
        'u123'
"""

from abc import ABC, abstractmethod

from slugstore.models import IdentityRecord


class IdentityBaseDAO(ABC):
    """Interface for identity record data access objects (DAOs).

    Methods:
        create(record: IdentityRecord, ttl: int, **kwargs) -> str:
            Store a record under a freshly generated slug which expires after `ttl` seconds.
            Raises DataStoreError on connection or write failure.

        lookup(slug: str, **kwargs) -> IdentityRecord:
            Retrieve the record stored under a slug.
            Raises SlugNotFoundError if the slug was never created or already expired.
            Raises DataStoreError on connection or read failure.

    NOTE:
        - Records are write-once. They expire automatically and the DAO offers
          no interface to update or delete them.
    """

    @abstractmethod
    def create(self, record: IdentityRecord, ttl: int, **kwargs) -> str:
        """Store a new IdentityRecord under a freshly generated slug.

        Args:
            record (IdentityRecord):
                The validated identity record to store.

            ttl (int):
                Seconds until the record expires.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            str: the slug the record is reachable under.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def lookup(self, slug: str, **kwargs) -> IdentityRecord:
        """Retrieve an IdentityRecord from the data store by its slug.

        Args:
            slug (str):
                The slug returned by create().

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            IdentityRecord: the stored record.

        Raises:
            SlugNotFoundError:
                If no live record exists for the slug.

            DataStoreError:
                If there is an error in the data store.
        """
        pass
