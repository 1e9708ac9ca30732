"""Simple i18n helper utilities."""

from __future__ import annotations

from typing import Final, Tuple

import streamlit as st

import config

LocalizedText = Tuple[str, str]

APPLICATION_SUBMITTED: Final[LocalizedText] = (
    "Bewerbung eingereicht! Deine Bewerbungs-ID: {application_id}",
    "Application submitted! Your application ID: {application_id}",
)
SUBMISSION_FAILED: Final[LocalizedText] = (
    "Bewerbung konnte nicht gesendet werden. Bitte versuche es erneut.",
    "Failed to submit application. Please try again.",
)
SUBMISSION_TIMED_OUT: Final[LocalizedText] = (
    "Die Übermittlung hat zu lange gedauert. Bitte versuche es erneut.",
    "Submitting took too long. Please try again.",
)
SUBMISSION_NOT_SAVED: Final[LocalizedText] = (
    "Die Bewerbung konnte nicht gespeichert werden. Bitte versuche es erneut.",
    "Your application could not be saved. Please try again.",
)
JOB_NOT_FOUND: Final[LocalizedText] = (
    "Die Stellenanzeige wurde nicht gefunden.",
    "Job posting not found.",
)


def current_language() -> str:
    """Return the active UI language from the session or configuration."""

    value = st.session_state.get("lang")
    if isinstance(value, str) and value:
        return value
    return config.DEFAULT_LANGUAGE


def tr(de: str, en: str, lang: str | None = None) -> str:
    """Return the string matching the current language.

    Args:
        de: German text.
        en: English text.
        lang: Optional language override (``"de"`` or ``"en"``).

    Returns:
        The localized string for the requested language.
    """
    code = lang or current_language()
    return de if code.lower().startswith("de") else en


def resolve_message(message: str | LocalizedText, *, lang: str | None = None) -> str:
    """Return the localized string for ``message``.

    Args:
        message: Either a plain string or a ``(de, en)`` tuple.
        lang: Optional language override.
    """

    if isinstance(message, tuple):
        de, en = message
        return tr(de, en, lang=lang)
    return message
