"""Whole-step validation built from the field checks in :mod:`wizard.validation`.

Each step reports an explicit struct with one optional failure per field
instead of a free-form dictionary, so the set of fields a step can flag is
fixed by its type.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Sequence

from models.application import ApplicationDraft, ResumeRef
from wizard.steps import WizardStep
from wizard.validation import (
    FieldCheck,
    check_email,
    check_full_name,
    check_phone,
    check_portfolio_link,
    check_resume,
    check_skills,
    check_years_of_experience,
)


def _failure(check: FieldCheck) -> FieldCheck | None:
    return None if check.valid else check


@dataclass(frozen=True)
class StepErrors:
    """Base for per-step error structs; every field holds a failing check or ``None``."""

    def failures(self) -> tuple[FieldCheck, ...]:
        found: list[FieldCheck] = []
        for item in fields(self):
            value = getattr(self, item.name)
            if value is not None:
                found.append(value)
        return tuple(found)

    @property
    def valid(self) -> bool:
        return not self.failures()

    @property
    def errors(self) -> dict[str, str]:
        """Map of field name to English reason for the failing fields only."""

        return {check.field: check.reason or "" for check in self.failures()}

    def localized(self, lang: str | None = None) -> dict[str, str]:
        return {check.field: check.reason_for(lang) or "" for check in self.failures()}


@dataclass(frozen=True)
class IdentityErrors(StepErrors):
    full_name: FieldCheck | None = None
    email: FieldCheck | None = None
    phone: FieldCheck | None = None


@dataclass(frozen=True)
class ExperienceErrors(StepErrors):
    years_of_experience: FieldCheck | None = None
    skills: FieldCheck | None = None
    portfolio_link: FieldCheck | None = None


@dataclass(frozen=True)
class ResumeErrors(StepErrors):
    resume: FieldCheck | None = None


def validate_identity_step(full_name: str | None, email: str | None, phone: str | None) -> IdentityErrors:
    return IdentityErrors(
        full_name=_failure(check_full_name(full_name)),
        email=_failure(check_email(email)),
        phone=_failure(check_phone(phone)),
    )


def validate_experience_step(
    years_of_experience: str | None,
    skills: Sequence[str] | None,
    portfolio_link: str | None,
) -> ExperienceErrors:
    return ExperienceErrors(
        years_of_experience=_failure(check_years_of_experience(years_of_experience)),
        skills=_failure(check_skills(skills)),
        portfolio_link=_failure(check_portfolio_link(portfolio_link)),
    )


def validate_resume_step(resume: ResumeRef | None) -> ResumeErrors:
    return ResumeErrors(resume=_failure(check_resume(resume)))


def validate_step(step: WizardStep, draft: ApplicationDraft) -> StepErrors:
    """Run the validator for ``step`` against the matching part of ``draft``."""

    if step == WizardStep.IDENTITY:
        info = draft.personal_info
        return validate_identity_step(info.full_name, info.email, info.phone)
    if step == WizardStep.EXPERIENCE:
        experience = draft.experience
        return validate_experience_step(
            experience.years_of_experience,
            experience.skills,
            experience.portfolio_link,
        )
    return validate_resume_step(draft.resume)


__all__ = [
    "ExperienceErrors",
    "IdentityErrors",
    "ResumeErrors",
    "StepErrors",
    "validate_experience_step",
    "validate_identity_step",
    "validate_resume_step",
    "validate_step",
]
