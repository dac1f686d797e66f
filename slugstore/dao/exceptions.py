"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    SlugNotFoundError:
        Raised when no live identity record exists for a slug.

    MalformedRecordError:
        Raised when a stored identity record can't be mapped back to an IdentityRecord.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, timeouts, OOM, etc.).

    RecordWriteError / RecordExpireError / RecordReadError:
        DataStoreError flavours telling which step of a DAO operation failed.

Example:
    >>> from slugstore.dao.exceptions import SlugNotFoundError
    >>> raise SlugNotFoundError("Slug '01J9Z3...' not found.")
    Traceback (most recent call last):
        ...
    slugstore.dao.exceptions.SlugNotFoundError: Slug '01J9Z3...' not found.
"""

from slugstore.exceptions import SlugStoreError


class DAOError(SlugStoreError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class SlugNotFoundError(DAOError):
    """Raised when a slug was never created or its record already expired."""

    error_code = 'dao:slug_not_found_error'


class MalformedRecordError(DAOError):
    """Raised when a stored record holds values outside the supported user types or actions."""

    error_code = 'dao:malformed_record_error'


class DataStoreError(DAOError):
    """Raised when the data store encounters an error.

    Examples include connection issues, timeouts, and out-of-memory failures.
    """

    error_code = 'dao:data_store_error'


class RecordWriteError(DataStoreError):
    """Raised when writing an identity record fails."""

    error_code = 'dao:record_write_error'


class RecordExpireError(DataStoreError):
    """Raised when applying the TTL to a freshly written identity record fails."""

    error_code = 'dao:record_expire_error'


class RecordReadError(DataStoreError):
    """Raised when reading an identity record fails."""

    error_code = 'dao:record_read_error'
