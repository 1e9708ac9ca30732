"""Contextual log fields for the intake and review core.

Every record carries the session, the wizard step and, while a store or
submission operation runs, the candidate and application it concerns.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from types import MappingProxyType
from typing import Iterator, Mapping

import config

_PLACEHOLDER = "-"

_DEFAULT_LOG_FORMAT = (
    "%(asctime)s %(levelname)s [session=%(session_id)s step=%(wizard_step)s "
    "candidate=%(candidate_id)s application=%(application_id)s] %(name)s: %(message)s"
)

_CONTEXT_FIELDS: Mapping[str, contextvars.ContextVar[str]] = MappingProxyType(
    {
        name: contextvars.ContextVar(name, default=_PLACEHOLDER)
        for name in ("session_id", "wizard_step", "candidate_id", "application_id")
    }
)

_base_record_factory = logging.getLogRecordFactory()
_factory_installed = False


def _normalise(value: object | None) -> str:
    text = "" if value is None else str(value).strip()
    return text or _PLACEHOLDER


def _stamp(record: logging.LogRecord) -> None:
    for name, var in _CONTEXT_FIELDS.items():
        setattr(record, name, var.get())


def _record_factory(*args: object, **kwargs: object) -> logging.LogRecord:
    record = _base_record_factory(*args, **kwargs)
    _stamp(record)
    return record


class _ContextFilter(logging.Filter):
    """Refresh context fields on records created before the factory was installed."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - logging protocol
        if not hasattr(record, "session_id"):
            _stamp(record)
        return True


def configure_logging(*, level: int | None = None) -> None:
    """Install the context-aware format on the root logger.

    Safe to call repeatedly; handlers that already have a formatter keep it.
    """

    global _factory_installed
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=config.LOG_LEVEL if level is None else level, format=_DEFAULT_LOG_FORMAT)
    elif level is not None:
        root.setLevel(level)
    for handler in root.handlers:
        if handler.formatter is None:
            handler.setFormatter(logging.Formatter(_DEFAULT_LOG_FORMAT))
    if not any(isinstance(flt, _ContextFilter) for flt in root.filters):
        root.addFilter(_ContextFilter())
    if not _factory_installed:
        logging.setLogRecordFactory(_record_factory)
        _factory_installed = True


def set_session_id(session_id: str | None) -> None:
    """Bind a session identifier for subsequent log records."""

    configure_logging()
    _CONTEXT_FIELDS["session_id"].set(_normalise(session_id))


def set_wizard_step(step: str | None) -> None:
    _CONTEXT_FIELDS["wizard_step"].set(_normalise(step))


@contextmanager
def log_context(
    *,
    session_id: str | None = None,
    wizard_step: str | None = None,
    candidate_id: str | None = None,
    application_id: str | None = None,
) -> Iterator[None]:
    """Temporarily override context fields; ``None`` leaves a field as is."""

    overrides = {
        "session_id": session_id,
        "wizard_step": wizard_step,
        "candidate_id": candidate_id,
        "application_id": application_id,
    }
    tokens = [
        (_CONTEXT_FIELDS[name], _CONTEXT_FIELDS[name].set(_normalise(value)))
        for name, value in overrides.items()
        if value is not None
    ]
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)


__all__ = ["configure_logging", "log_context", "set_session_id", "set_wizard_step"]
