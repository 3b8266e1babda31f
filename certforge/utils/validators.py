"""Input validation utilities."""

import logging
from typing import Optional

from certforge.models.request import ALLOWED_KEY_SIZES, DEFAULT_KEY_SIZE, DEFAULT_VALIDITY_DAYS

logger = logging.getLogger("certforge")


def normalize_key_size(value) -> int:
    """
    Coerce a requested RSA key size into the allowed set.

    Anything that is not 2048, 3072 or 4096 falls back to 2048.

    Args:
        value: Requested size (int, numeric string, or None)

    Returns:
        A supported key size

    Example:
        >>> normalize_key_size("1024")
        2048
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return DEFAULT_KEY_SIZE

    try:
        size = int(value)
    except (TypeError, ValueError):
        size = None

    if size not in ALLOWED_KEY_SIZES:
        logger.warning(f"Invalid key size. Using default: {DEFAULT_KEY_SIZE}")
        return DEFAULT_KEY_SIZE

    return size


def normalize_validity_days(value, default: Optional[int] = None) -> int:
    """
    Coerce a validity period into a positive number of days.

    Args:
        value: Requested days (int, numeric string, or None)
        default: Value used when nothing was requested

    Returns:
        Positive number of days
    """
    fallback = default if default is not None and default > 0 else DEFAULT_VALIDITY_DAYS

    if value is None or (isinstance(value, str) and not value.strip()):
        return fallback

    try:
        days = int(value)
    except (TypeError, ValueError):
        days = 0

    if days <= 0:
        logger.warning(f"Invalid validity period. Using default: {DEFAULT_VALIDITY_DAYS} days")
        return DEFAULT_VALIDITY_DAYS

    return days


def looks_like_domain(name: Optional[str]) -> bool:
    """Return True when a common name looks like a DNS name."""
    return bool(name) and "." in name
