"""Pydantic models for an in-progress job application draft."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

_DRAFT_CONFIG = ConfigDict(
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
    validate_assignment=True,
)

_SUBMITTED_CONFIG = ConfigDict(**_DRAFT_CONFIG, frozen=True)


class PersonalInfo(BaseModel):
    """Identity fields collected on the first wizard step."""

    model_config = _DRAFT_CONFIG

    full_name: str = ""
    email: str = ""
    phone: str = ""


class Experience(BaseModel):
    """Experience fields collected on the second wizard step.

    ``portfolio_link`` stays ``None`` until the candidate provides one so an
    untouched field can be told apart from a cleared one.
    """

    model_config = _DRAFT_CONFIG

    years_of_experience: str = ""
    skills: list[str] = Field(default_factory=list)
    portfolio_link: Optional[str] = None

    @field_validator("skills", mode="before")
    @classmethod
    def _dedupe_skills(cls, value: object) -> object:
        """Drop repeated entries while keeping insertion order."""

        if isinstance(value, (list, tuple)):
            return list(dict.fromkeys(value))
        return value


class ResumeRef(BaseModel):
    """Resume file captured when the candidate selects it.

    Only ``name``, ``size_bytes`` and ``mime_type`` are inspected. ``content``
    is owned by the draft and never written into snapshots.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    name: str = Field(..., min_length=1)
    size_bytes: int = Field(..., ge=0)
    mime_type: str = ""
    content: Optional[bytes] = Field(default=None, exclude=True, repr=False)


class ApplicationDraft(BaseModel):
    """Everything the wizard accumulates before submission."""

    model_config = _DRAFT_CONFIG

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: Experience = Field(default_factory=Experience)
    resume: Optional[ResumeRef] = None

    def is_empty(self) -> bool:
        return self == ApplicationDraft()


class SubmittedPersonalInfo(PersonalInfo):
    model_config = _SUBMITTED_CONFIG


class SubmittedExperience(Experience):
    model_config = _SUBMITTED_CONFIG

    skills: tuple[str, ...] = ()


class SubmittedApplication(BaseModel):
    """Read-only copy of a draft as it was when the candidate submitted it."""

    model_config = _SUBMITTED_CONFIG

    personal_info: SubmittedPersonalInfo = Field(default_factory=SubmittedPersonalInfo)
    experience: SubmittedExperience = Field(default_factory=SubmittedExperience)
    resume: Optional[ResumeRef] = None

    @model_validator(mode="before")
    @classmethod
    def _from_draft(cls, value: Any) -> Any:
        if isinstance(value, ApplicationDraft):
            return {
                "personal_info": value.personal_info.model_dump(),
                "experience": value.experience.model_dump(),
                "resume": value.resume,
            }
        return value


__all__ = [
    "ApplicationDraft",
    "Experience",
    "PersonalInfo",
    "ResumeRef",
    "SubmittedApplication",
    "SubmittedExperience",
    "SubmittedPersonalInfo",
]
