"""Validation and normalization of slug creation input

Functions:
    parse_ttl(raw_ttl) -> int
        Normalize a raw TTL string into seconds, falling back to the default TTL.
    validate_input(raw_user_type, raw_action, raw_user_id, raw_ttl) -> ValidatedInput
        Validate raw path parameters before an identity record is persisted.

Example:
    >>> validate_input('resident', 'smsConsent', 'u123', '3600')
    ValidatedInput(user_type=<UserType.RESIDENT: 'resident'>, action=<Action.SMS_CONSENT: 'smsConsent'>, user_id='u123', ttl=3600)
    >>> validate_input('resident', 'smsConsent', 'u123', 'forever').ttl
    86400
    >>> validate_input('bogus', 'smsConsent', 'u123', None)
    Traceback (most recent call last):
        ...
    slugstore.exceptions.InvalidUserTypeError: Invalid user type 'bogus'.
"""

import re
from typing import NamedTuple

from slugstore.constants import TTL
from slugstore.exceptions import InvalidActionError, InvalidUserIdError, InvalidUserTypeError
from slugstore.models import Action, IdentityRecord, UserType


# Optional sign followed by ASCII digits (no whitespace, underscores or decimals)
TTL_PATTERN = re.compile(r'[+-]?[0-9]+')


class ValidatedInput(NamedTuple):
    user_type: UserType
    action: Action
    user_id: str
    ttl: int

    @property
    def record(self) -> IdentityRecord:
        return IdentityRecord(user=self.user_id, user_type=self.user_type, action=self.action)


def parse_ttl(raw_ttl: str | None) -> int:
    """Normalize a raw TTL into seconds

    Malformed, non-positive and too large TTLs silently fall back to the
    default TTL. This function never raises.

    Args:
        raw_ttl (str | None): TTL in seconds as given by the client.

    Returns:
        int: TTL in seconds within (0, TTL.MAX].

    Example:
        >>> parse_ttl('3600')
        3600
        >>> parse_ttl('0')
        86400
        >>> parse_ttl(None)
        86400
    """
    if raw_ttl is None or TTL_PATTERN.fullmatch(raw_ttl) is None:
        return TTL.DEFAULT

    digits = raw_ttl.lstrip('+-').lstrip('0')
    # Anything longer than TTL.MAX is out of range, skip int() on huge inputs
    if len(digits) > len(str(TTL.MAX)):
        return TTL.DEFAULT

    ttl = -int(digits or '0') if raw_ttl.startswith('-') else int(digits or '0')
    if 0 < ttl <= TTL.MAX:
        return ttl
    return TTL.DEFAULT


def validate_input(raw_user_type: str | None, raw_action: str | None, raw_user_id: str | None, raw_ttl: str | None = None) -> ValidatedInput:
    """Validate raw slug creation input

    Checks run in order (user type, action, user id) and the first failing
    check is reported. The user id is passed through untouched apart from
    the emptiness check. The TTL is normalized, never rejected.

    Args:
        raw_user_type (str | None): one of 'prospect', 'resident'.
        raw_action (str | None): one of 'smsConsent', 'appointmentChange'.
        raw_user_id (str | None): opaque, non-empty user identifier.
        raw_ttl (str | None): TTL in seconds, optional.

    Returns:
        ValidatedInput: normalized (user_type, action, user_id, ttl).

    Raises:
        InvalidUserTypeError: If the user type is not supported.
        InvalidActionError: If the action is not supported.
        InvalidUserIdError: If the user id is missing or empty.
    """
    try:
        user_type = UserType(raw_user_type)
    except ValueError as e:
        raise InvalidUserTypeError(f'Invalid user type {raw_user_type!r}.') from e

    try:
        action = Action(raw_action)
    except ValueError as e:
        raise InvalidActionError(f'Invalid action {raw_action!r}.') from e

    if not raw_user_id:
        raise InvalidUserIdError('User id must be a non-empty string.')

    return ValidatedInput(user_type=user_type, action=action, user_id=raw_user_id, ttl=parse_ttl(raw_ttl))
