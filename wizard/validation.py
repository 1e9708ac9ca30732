"""Field-level validation rules for the application wizard.

Every check is a pure function returning a :class:`FieldCheck`. Failures are
identified by ``(field, kind)``; the user-facing text is looked up from that
key so callers can localise at the display boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final, Sequence

from config.rules import RULES
from core.regexes import (
    DECIMAL_RE,
    EMAIL_RE,
    FULL_NAME_RE,
    NON_DIGIT_RE,
    PHONE_RE,
    PORTFOLIO_URL_RE,
)
from models.application import ResumeRef
from utils.i18n import LocalizedText, tr


FULL_NAME = "full_name"
EMAIL = "email"
PHONE = "phone"
YEARS_OF_EXPERIENCE = "years_of_experience"
SKILLS = "skills"
SKILL_INPUT = "skill_input"
PORTFOLIO_LINK = "portfolio_link"
RESUME = "resume"


class FailureKind(StrEnum):
    EMPTY = "EMPTY"
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    BAD_FORMAT = "BAD_FORMAT"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    TOO_MANY = "TOO_MANY"
    ITEM_TOO_LONG = "ITEM_TOO_LONG"
    DUPLICATE = "DUPLICATE"
    MISSING = "MISSING"
    BAD_TYPE = "BAD_TYPE"
    TOO_LARGE = "TOO_LARGE"


_RESUME_MAX_MB = RULES.resume_max_bytes // (1024 * 1024)

_REASONS: Final[dict[tuple[str, FailureKind], LocalizedText]] = {
    (FULL_NAME, FailureKind.EMPTY): (
        "Bitte vollständigen Namen eintragen.",
        "Full name is required",
    ),
    (FULL_NAME, FailureKind.TOO_SHORT): (
        f"Der Name muss mindestens {RULES.full_name_min_length} Zeichen lang sein.",
        f"Full name must be at least {RULES.full_name_min_length} characters",
    ),
    (FULL_NAME, FailureKind.TOO_LONG): (
        f"Der Name darf höchstens {RULES.full_name_max_length} Zeichen lang sein.",
        f"Full name must not exceed {RULES.full_name_max_length} characters",
    ),
    (FULL_NAME, FailureKind.BAD_FORMAT): (
        "Der Name darf nur Buchstaben, Leerzeichen, Bindestriche und Apostrophe enthalten.",
        "Full name can only contain letters, spaces, hyphens, and apostrophes",
    ),
    (EMAIL, FailureKind.EMPTY): (
        "Bitte E-Mail-Adresse eintragen.",
        "Email is required",
    ),
    (EMAIL, FailureKind.BAD_FORMAT): (
        "Bitte gültige E-Mail-Adresse verwenden.",
        "Please enter a valid email address",
    ),
    (PHONE, FailureKind.EMPTY): (
        "Bitte Telefonnummer eintragen.",
        "Phone number is required",
    ),
    (PHONE, FailureKind.BAD_FORMAT): (
        "Die Telefonnummer enthält ungültige Zeichen.",
        "Phone number contains invalid characters",
    ),
    (PHONE, FailureKind.TOO_SHORT): (
        f"Die Telefonnummer muss mindestens {RULES.phone_min_digits} Ziffern enthalten.",
        f"Phone number must contain at least {RULES.phone_min_digits} digits",
    ),
    (YEARS_OF_EXPERIENCE, FailureKind.EMPTY): (
        "Bitte Berufserfahrung in Jahren angeben.",
        "Years of experience is required",
    ),
    (YEARS_OF_EXPERIENCE, FailureKind.BAD_FORMAT): (
        "Die Berufserfahrung muss eine gültige Zahl sein.",
        "Years of experience must be a valid number",
    ),
    (YEARS_OF_EXPERIENCE, FailureKind.OUT_OF_RANGE): (
        f"Die Berufserfahrung muss zwischen {RULES.years_min:g} und {RULES.years_max:g} Jahren liegen.",
        f"Years of experience must be between {RULES.years_min:g} and {RULES.years_max:g}",
    ),
    (SKILLS, FailureKind.EMPTY): (
        "Bitte mindestens eine Fähigkeit hinzufügen.",
        "Please add at least one skill",
    ),
    (SKILLS, FailureKind.TOO_MANY): (
        f"Maximal {RULES.skills_max_items} Fähigkeiten erlaubt.",
        f"Maximum {RULES.skills_max_items} skills allowed",
    ),
    (SKILLS, FailureKind.ITEM_TOO_LONG): (
        f"Jede Fähigkeit darf höchstens {RULES.skill_max_length} Zeichen lang sein.",
        f"Each skill must not exceed {RULES.skill_max_length} characters",
    ),
    (SKILL_INPUT, FailureKind.EMPTY): (
        "Bitte eine Fähigkeit eingeben.",
        "Please enter a skill",
    ),
    (SKILL_INPUT, FailureKind.ITEM_TOO_LONG): (
        f"Die Fähigkeit darf höchstens {RULES.skill_max_length} Zeichen lang sein.",
        f"Skill must not exceed {RULES.skill_max_length} characters",
    ),
    (SKILL_INPUT, FailureKind.DUPLICATE): (
        "Diese Fähigkeit wurde bereits hinzugefügt.",
        "This skill is already added",
    ),
    (SKILL_INPUT, FailureKind.TOO_MANY): (
        f"Maximal {RULES.skills_max_items} Fähigkeiten erlaubt.",
        f"Maximum {RULES.skills_max_items} skills allowed",
    ),
    (PORTFOLIO_LINK, FailureKind.BAD_FORMAT): (
        "Bitte gültige Portfolio-URL eintragen.",
        "Please enter a valid portfolio URL",
    ),
    (RESUME, FailureKind.MISSING): (
        "Bitte Lebenslauf hochladen.",
        "Resume is required",
    ),
    (RESUME, FailureKind.BAD_TYPE): (
        "Der Lebenslauf muss als PDF, DOC oder DOCX vorliegen.",
        "Resume must be PDF, DOC, or DOCX format",
    ),
    (RESUME, FailureKind.TOO_LARGE): (
        f"Der Lebenslauf darf höchstens {_RESUME_MAX_MB} MB groß sein.",
        f"Resume must not exceed {_RESUME_MAX_MB}MB",
    ),
}


@dataclass(frozen=True)
class FieldCheck:
    """Verdict for a single field; ``kind`` is ``None`` when the value passed."""

    field: str
    kind: FailureKind | None = None

    @property
    def valid(self) -> bool:
        return self.kind is None

    @property
    def reason(self) -> str | None:
        """Stable English reason, or ``None`` for a passing check."""

        if self.kind is None:
            return None
        return _REASONS[(self.field, self.kind)][1]

    def reason_for(self, lang: str | None = None) -> str | None:
        """Return the reason in ``lang`` (or the session language)."""

        if self.kind is None:
            return None
        de, en = _REASONS[(self.field, self.kind)]
        return tr(de, en, lang=lang)


def _ok(field: str) -> FieldCheck:
    return FieldCheck(field)


def _fail(field: str, kind: FailureKind) -> FieldCheck:
    return FieldCheck(field, kind)


def check_full_name(value: str | None) -> FieldCheck:
    candidate = (value or "").strip()
    if not candidate:
        return _fail(FULL_NAME, FailureKind.EMPTY)
    if len(candidate) < RULES.full_name_min_length:
        return _fail(FULL_NAME, FailureKind.TOO_SHORT)
    if len(candidate) > RULES.full_name_max_length:
        return _fail(FULL_NAME, FailureKind.TOO_LONG)
    if not FULL_NAME_RE.match(candidate):
        return _fail(FULL_NAME, FailureKind.BAD_FORMAT)
    return _ok(FULL_NAME)


def check_email(value: str | None) -> FieldCheck:
    candidate = (value or "").strip()
    if not candidate:
        return _fail(EMAIL, FailureKind.EMPTY)
    if not EMAIL_RE.match(candidate):
        return _fail(EMAIL, FailureKind.BAD_FORMAT)
    return _ok(EMAIL)


def check_phone(value: str | None) -> FieldCheck:
    """Accept formatted numbers such as ``(555) 123-4567`` with 10+ digits."""

    candidate = (value or "").strip()
    if not candidate:
        return _fail(PHONE, FailureKind.EMPTY)
    if not PHONE_RE.match(candidate):
        return _fail(PHONE, FailureKind.BAD_FORMAT)
    if len(NON_DIGIT_RE.sub("", candidate)) < RULES.phone_min_digits:
        return _fail(PHONE, FailureKind.TOO_SHORT)
    return _ok(PHONE)


def check_years_of_experience(value: str | None) -> FieldCheck:
    candidate = (value or "").strip()
    if not candidate:
        return _fail(YEARS_OF_EXPERIENCE, FailureKind.EMPTY)
    if not DECIMAL_RE.match(candidate):
        return _fail(YEARS_OF_EXPERIENCE, FailureKind.BAD_FORMAT)
    years = float(candidate)
    if years < RULES.years_min or years > RULES.years_max:
        return _fail(YEARS_OF_EXPERIENCE, FailureKind.OUT_OF_RANGE)
    return _ok(YEARS_OF_EXPERIENCE)


def check_skills(skills: Sequence[str] | None) -> FieldCheck:
    """Check the whole skills list; uniqueness is enforced by :func:`check_skill_entry`."""

    entries = list(skills or ())
    if len(entries) < RULES.skills_min_items:
        return _fail(SKILLS, FailureKind.EMPTY)
    if len(entries) > RULES.skills_max_items:
        return _fail(SKILLS, FailureKind.TOO_MANY)
    if any(len(entry) > RULES.skill_max_length for entry in entries):
        return _fail(SKILLS, FailureKind.ITEM_TOO_LONG)
    return _ok(SKILLS)


def check_skill_entry(text: str | None, existing: Sequence[str]) -> FieldCheck:
    """Run the pre-insertion checks for a single new skill."""

    candidate = (text or "").strip()
    if not candidate:
        return _fail(SKILL_INPUT, FailureKind.EMPTY)
    if len(candidate) > RULES.skill_max_length:
        return _fail(SKILL_INPUT, FailureKind.ITEM_TOO_LONG)
    if candidate in existing:
        return _fail(SKILL_INPUT, FailureKind.DUPLICATE)
    if len(existing) >= RULES.skills_max_items:
        return _fail(SKILL_INPUT, FailureKind.TOO_MANY)
    return _ok(SKILL_INPUT)


def check_portfolio_link(value: str | None) -> FieldCheck:
    """Optional field: blank passes, anything else must look like a URL."""

    candidate = (value or "").strip()
    if not candidate:
        return _ok(PORTFOLIO_LINK)
    if not PORTFOLIO_URL_RE.match(candidate):
        return _fail(PORTFOLIO_LINK, FailureKind.BAD_FORMAT)
    return _ok(PORTFOLIO_LINK)


def check_resume(resume: ResumeRef | None) -> FieldCheck:
    if resume is None:
        return _fail(RESUME, FailureKind.MISSING)
    if resume.mime_type not in RULES.accepted_resume_types:
        return _fail(RESUME, FailureKind.BAD_TYPE)
    if resume.size_bytes > RULES.resume_max_bytes:
        return _fail(RESUME, FailureKind.TOO_LARGE)
    return _ok(RESUME)


__all__ = [
    "EMAIL",
    "FULL_NAME",
    "FailureKind",
    "FieldCheck",
    "PHONE",
    "PORTFOLIO_LINK",
    "RESUME",
    "SKILLS",
    "SKILL_INPUT",
    "YEARS_OF_EXPERIENCE",
    "check_email",
    "check_full_name",
    "check_phone",
    "check_portfolio_link",
    "check_resume",
    "check_skill_entry",
    "check_skills",
    "check_years_of_experience",
]
