"""Central configuration for the HireLink intake and review core.

Values are read from the environment (a local ``.env`` file is loaded first)
so deployments can tune identifiers, timeouts and persistence without code
changes. Validation limits are not configurable at runtime and live in
:mod:`config.rules`.
"""

from __future__ import annotations

import logging
import os
import warnings

from dotenv import load_dotenv

from config.rules import RULES, ValidationRules

load_dotenv()


logger = logging.getLogger(__name__)


_TRUTHY_ENV_VALUES: tuple[str, ...] = ("1", "true", "yes", "on")
_FALSY_ENV_VALUES: tuple[str, ...] = ("0", "false", "no", "off")
_SUPPORTED_LANGUAGES: tuple[str, ...] = ("de", "en")


def _is_truthy_flag(value: str | None, *, default: bool = False) -> bool:
    """Return ``True`` when ``value`` matches a truthy environment token."""

    if value is None:
        return default
    candidate = value.strip().lower()
    if not candidate:
        return default
    if candidate in _TRUTHY_ENV_VALUES:
        return True
    if candidate in _FALSY_ENV_VALUES:
        return False
    warnings.warn(
        "Unsupported boolean value %r; falling back to %s." % (value, default),
        RuntimeWarning,
    )
    return default


def _normalise_timeout(value: object | None, *, env_var: str, default: float) -> float:
    """Return a positive timeout value in seconds."""

    if value is None:
        return default
    candidate = value
    if isinstance(candidate, str):
        stripped = candidate.strip()
        if not stripped:
            return default
        try:
            candidate = float(stripped)
        except ValueError:
            warnings.warn(
                "Unsupported %s '%s'; falling back to %.1f seconds." % (env_var, candidate, default),
                RuntimeWarning,
            )
            return default
    if isinstance(candidate, (int, float)) and not isinstance(candidate, bool):
        timeout = float(candidate)
        if timeout > 0:
            return timeout
    warnings.warn(
        "%s must be a positive number; falling back to %.1f seconds." % (env_var, default),
        RuntimeWarning,
    )
    return default


def _normalise_language(value: str | None, *, default: str = "en") -> str:
    if not value:
        return default
    candidate = value.strip().lower()[:2]
    if candidate in _SUPPORTED_LANGUAGES:
        return candidate
    logger.warning("Unsupported HIRELINK_LANGUAGE %r; using %s", value, default)
    return default


def _normalise_prefix(value: str | None, *, default: str = "HLA") -> str:
    if not value:
        return default
    candidate = value.strip().upper()
    if candidate.isalnum():
        return candidate
    logger.warning("HIRELINK_APPLICATION_PREFIX must be alphanumeric; using %s", default)
    return default


def _normalise_log_level(value: str | None, *, default: int = logging.INFO) -> int:
    if not value:
        return default
    level = logging.getLevelName(value.strip().upper())
    if isinstance(level, int):
        return level
    return default


DEFAULT_LANGUAGE = _normalise_language(os.getenv("HIRELINK_LANGUAGE"))
APPLICATION_ID_PREFIX = _normalise_prefix(os.getenv("HIRELINK_APPLICATION_PREFIX"))
SUBMISSION_TIMEOUT_SECONDS = _normalise_timeout(
    os.getenv("HIRELINK_SUBMISSION_TIMEOUT"),
    env_var="HIRELINK_SUBMISSION_TIMEOUT",
    default=10.0,
)
STORE_SNAPSHOT_PATH = (os.getenv("HIRELINK_STORE_PATH") or "").strip() or None
LOG_LEVEL = _normalise_log_level(os.getenv("HIRELINK_LOG_LEVEL"))
AUTOSAVE_ENABLED = _is_truthy_flag(os.getenv("HIRELINK_AUTOSAVE"), default=True)


__all__ = [
    "APPLICATION_ID_PREFIX",
    "AUTOSAVE_ENABLED",
    "DEFAULT_LANGUAGE",
    "LOG_LEVEL",
    "RULES",
    "STORE_SNAPSHOT_PATH",
    "SUBMISSION_TIMEOUT_SECONDS",
    "ValidationRules",
]
