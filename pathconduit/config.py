"""Runtime configuration for pathconduit.

Settings are read from environment variables and can be overridden
globally or temporarily from code:

- ``PATHCONDUIT_MULTIEDGE_POLICY``: how parallel edges of a multigraph are
  collapsed into one weight (``min``, ``max`` or ``sum``; default ``min``).
- ``PATHCONDUIT_LOG_LEVEL``: default level for pathconduit loggers.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Iterator, Optional

from .exceptions import InvalidArgumentError

_POLICY_ENV_VAR = "PATHCONDUIT_MULTIEDGE_POLICY"
_LOG_LEVEL_ENV_VAR = "PATHCONDUIT_LOG_LEVEL"

MULTIEDGE_POLICIES = ("min", "max", "sum")
DEFAULT_MULTIEDGE_POLICY = "min"

_policy_override: Optional[str] = None


def _validate_policy(policy: str) -> str:
    normalized = str(policy).strip().lower()
    if normalized not in MULTIEDGE_POLICIES:
        raise InvalidArgumentError(
            f"Unknown multi-edge policy {policy!r}; "
            f"expected one of {', '.join(MULTIEDGE_POLICIES)}"
        )
    return normalized


def get_multiedge_policy() -> str:
    """
    Return the active multi-edge weight policy.

    An explicit override (see :func:`set_multiedge_policy`) wins over the
    ``PATHCONDUIT_MULTIEDGE_POLICY`` environment variable, which wins over
    the ``"min"`` default.

    Returns
    -------
    str
        One of ``"min"``, ``"max"`` or ``"sum"``.

    Raises
    ------
    InvalidArgumentError
        If the environment variable holds an unknown policy.
    """
    if _policy_override is not None:
        return _policy_override
    return _validate_policy(os.getenv(_POLICY_ENV_VAR, DEFAULT_MULTIEDGE_POLICY))


def set_multiedge_policy(policy: Optional[str]) -> None:
    """
    Globally set the multi-edge weight policy.

    Parameters
    ----------
    policy:
        ``"min"``, ``"max"``, ``"sum"``, or None to fall back to the
        environment variable.
    """
    global _policy_override
    _policy_override = None if policy is None else _validate_policy(policy)


@contextmanager
def multiedge_policy(policy: str) -> Iterator[None]:
    """
    Context manager to temporarily switch the multi-edge weight policy.

    Example
    -------
    >>> with multiedge_policy("sum"):
    ...     # parallel edges add up inside this block
    ...     pass
    """
    global _policy_override
    prev = _policy_override
    _policy_override = _validate_policy(policy)
    try:
        yield
    finally:
        _policy_override = prev


def default_log_level() -> int:
    """Return the log level named by ``PATHCONDUIT_LOG_LEVEL`` (default WARNING)."""
    value = os.getenv(_LOG_LEVEL_ENV_VAR, "WARNING")
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else logging.WARNING


__all__ = [
    "MULTIEDGE_POLICIES",
    "DEFAULT_MULTIEDGE_POLICY",
    "get_multiedge_policy",
    "set_multiedge_policy",
    "multiedge_policy",
    "default_log_level",
]
