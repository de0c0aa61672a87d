"""Environment variable parsing for ordstat settings.

All ``ORDSTAT_*`` variables are read through these helpers so that 0/1,
true/false, yes/no, on/off behave identically everywhere.

Rules:
- Unset / empty / whitespace -> default value.
- strict=True (default): unknown values raise ``ConfigError``.
- strict=False: unknown values log a warning and return the default.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

TRUTHY: frozenset[str] = frozenset({"1", "true", "yes", "on"})
FALSEY: frozenset[str] = frozenset({"0", "false", "no", "off", ""})


class ConfigError(Exception):
    """Raised when a setting has an invalid value (strict mode)."""


def parse_bool(
    name: str,
    default: bool = False,
    *,
    strict: bool = True,
) -> bool:
    """Parse a boolean environment variable.

    Truthy: ``1 true yes on``; falsey: ``0 false no off ""``
    (case-insensitive, stripped).
    """
    raw = os.environ.get(name)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in TRUTHY:
        return True
    if v in FALSEY:
        return False
    if strict:
        raise ConfigError(f"invalid boolean value for {name}: {raw!r}")
    logger.warning("Invalid boolean value for %s: %r, using default %s", name, raw, default)
    return default


def parse_int(
    name: str,
    default: int | None = None,
    *,
    min_value: int | None = None,
    strict: bool = True,
) -> int | None:
    """Parse an integer environment variable.

    Args:
        name: Environment variable name.
        default: Value when unset, blank, or (non-strict) unparseable.
        min_value: Optional inclusive lower bound. Non-strict mode clamps.
        strict: If *True*, bad values raise :class:`ConfigError`.
    """
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        result = int(raw.strip())
    except ValueError:
        if strict:
            raise ConfigError(f"invalid integer value for {name}: {raw!r}") from None
        logger.warning("Invalid integer value for %s: %r, using default %s", name, raw, default)
        return default
    if min_value is not None and result < min_value:
        if strict:
            raise ConfigError(f"{name}={result} is below minimum {min_value}")
        logger.warning("%s=%d is below minimum %d, clamping", name, result, min_value)
        return min_value
    return result


def parse_enum(
    name: str,
    allowed: set[str],
    default: str | None = None,
    *,
    strict: bool = True,
) -> str | None:
    """Parse an enum-like environment variable.

    Matching is case-insensitive; the canonical form from *allowed* is returned.
    """
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    lookup = {a.lower(): a for a in allowed}
    match = lookup.get(raw.strip().lower())
    if match is not None:
        return match
    if strict:
        raise ConfigError(f"invalid value for {name}: {raw!r} (allowed: {sorted(allowed)})")
    logger.warning(
        "Invalid value for %s: %r (allowed: %s), using default %s",
        name,
        raw,
        sorted(allowed),
        default,
    )
    return default
