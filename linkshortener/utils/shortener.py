"""Shortcode generation utility

This module provides a helper function for generating random, fixed-length
alphanumeric shortcodes that don't collide with existing ones.

Functions:
    generate_shortcode(exists, length=6, max_attempts=10):
        Generate a random shortcode not yet taken according to `exists`.

Example:
    >>> from linkshortener.utils import generate_shortcode
    >>> generate_shortcode(lambda code: False)
    'q3ZxT0'
"""

import logging
import secrets
import string
from collections.abc import Callable

from linkshortener.constants import Defaults
from linkshortener.exceptions import AliasSpaceExhaustedError


logger = logging.getLogger(__name__)

ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits  # Base62: [A-Za-z0-9]


def generate_shortcode(
    exists: Callable[[str], bool],
    length: int = Defaults.SHORTCODE_LENGTH,
    max_attempts: int = Defaults.SHORTCODE_MAX_ATTEMPTS,
) -> str:
    """Generate a random shortcode that isn't taken yet.

    Each character is drawn uniformly from the Base62 alphabet. When a
    candidate collides with an existing shortcode, a new one is drawn, up to
    `max_attempts` candidates in total.

    Args:
        exists (Callable[[str], bool]):
            Predicate telling whether a shortcode is already taken,
            typically `ShortURLBaseDAO.exists`.

        length (int, optional):
            Number of characters in the shortcode. Defaults to 6.

        max_attempts (int, optional):
            Number of candidates to try before giving up. Defaults to 10.

    Returns:
        str: A free shortcode of exactly `length` characters.

    Raises:
        ValueError:
            If `length` or `max_attempts` is not a positive integer.
        AliasSpaceExhaustedError:
            If every candidate collided.

    NOTE:
        - With 62^6 (~5.7e10) possible codes, collisions are practically
          impossible at small scale. The attempt limit only guards against a
          (nearly) full keyspace.
    """
    if length < 1:
        raise ValueError(f'Shortcode length must be a positive integer (given value: {length}).')
    if max_attempts < 1:
        raise ValueError(f'Max attempts must be a positive integer (given value: {max_attempts}).')

    for attempt in range(1, max_attempts + 1):
        shortcode = ''.join(secrets.choice(ALPHABET) for _ in range(length))
        if not exists(shortcode):
            return shortcode
        logger.debug('Generated shortcode collides with an existing one.', extra={'attempt': attempt})

    raise AliasSpaceExhaustedError(f'Could not generate a free shortcode after {max_attempts} attempts.')
