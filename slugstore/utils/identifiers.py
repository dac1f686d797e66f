"""Slug generation utility

This module generates ULIDs (Universally Unique Lexicographically Sortable
Identifiers) used as slugs for identity records. A ULID packs 128 bits:

    01JA8Q6W3M      2ZB0S6QX1V9C4T7N
    |--------|      |--------------|
    timestamp           randomness
     48 bits              80 bits

encoded into 26 characters of Crockford's base32 alphabet (no I, L, O, U),
so slugs are URL path safe and sort lexicographically by creation time.

Classes:
    SlugGenerator:
        Thread-safe, monotonic ULID generator.

Functions:
    generate_slug() -> str:
        Generate a new slug with the process-wide generator.
    is_valid_slug(value) -> bool:
        Check that a string is shaped like a slug.
    slug_timestamp(slug) -> datetime:
        Decode the creation time embedded in a slug.

Example:
    >>> from slugstore.utils import generate_slug, slug_timestamp
    >>> slug = generate_slug()
    >>> slug
    '01JA8Q6W3M2ZB0S6QX1V9C4T7N'
    >>> slug_timestamp(slug)
    datetime.datetime(2024, 10, 14, 9, 21, 52, 148000, tzinfo=datetime.timezone.utc)
"""

import re
import secrets
import threading
import time
from datetime import datetime, UTC


ALPHABET = '0123456789ABCDEFGHJKMNPQRSTVWXYZ'  # Crockford's base32
BASE = len(ALPHABET)

SLUG_LENGTH = 26
TIMESTAMP_LENGTH = 10
TIMESTAMP_BITS = 48
RANDOMNESS_BITS = 80

# First character only carries 3 bits (26 * 5 = 130 > 128), so it never exceeds '7'
SLUG_PATTERN = re.compile(r'[0-7][0-9A-HJKMNP-TV-Z]{25}')


def _encode(value: int, length: int) -> str:
    # Most significant digit first, left padded with '0'
    return ''.join(reversed([ALPHABET[(value >> (5 * i)) & (BASE - 1)] for i in range(length)]))


class SlugGenerator:
    """Generate monotonically increasing ULID slugs.

    Slugs minted within the same millisecond (or after the wall clock stepped
    backwards) reuse the last timestamp and increment the previous randomness
    by one, so every slug sorts after the ones generated before it.

    Raises:
        OverflowError:
            If the randomness is exhausted within a single millisecond (2^80 slugs).
        ValueError:
            If the clock reports a time past the 48-bit timestamp range (year 10889).
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._last_ms = -1
        self._last_randomness = 0

    def generate(self) -> str:
        now_ms = int(time.time() * 1000)
        if now_ms >= 1 << TIMESTAMP_BITS:
            raise ValueError(f'Timestamp {now_ms} does not fit into {TIMESTAMP_BITS} bits.')

        with self._lock:
            if now_ms <= self._last_ms:
                now_ms = self._last_ms
                randomness = self._last_randomness + 1
                if randomness >= 1 << RANDOMNESS_BITS:
                    raise OverflowError('Slug randomness exhausted within a single millisecond.')
            else:
                randomness = secrets.randbits(RANDOMNESS_BITS)

            self._last_ms = now_ms
            self._last_randomness = randomness

        return _encode((now_ms << RANDOMNESS_BITS) | randomness, SLUG_LENGTH)


_generator = SlugGenerator()


def generate_slug() -> str:
    """Generate a globally unique, time sortable, URL safe slug.

    Returns:
        str: 26 character ULID string.

    Example:
        >>> generate_slug()
        '01JA8Q6W3M2ZB0S6QX1V9C4T7N'
    """
    return _generator.generate()


def is_valid_slug(value: str | None) -> bool:
    """Return True if `value` is shaped like a slug produced by generate_slug()."""
    return isinstance(value, str) and SLUG_PATTERN.fullmatch(value) is not None


def slug_timestamp(slug: str) -> datetime:
    """Decode the creation time of a slug.

    Args:
        slug (str): slug produced by generate_slug().

    Returns:
        datetime: creation time in UTC (millisecond precision).

    Raises:
        ValueError: If `slug` is not a valid slug.
    """
    if not is_valid_slug(slug):
        raise ValueError(f'Invalid slug (given value: {slug!r}).')

    ms = 0
    for char in slug[:TIMESTAMP_LENGTH]:
        ms = ms * BASE + ALPHABET.index(char)
    return datetime.fromtimestamp(ms // 1000, tz=UTC).replace(microsecond=(ms % 1000) * 1000)
