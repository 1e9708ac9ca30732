"""Pydantic models for submitted candidates and their pipeline stage."""

from __future__ import annotations

from datetime import date, datetime
from enum import StrEnum
from typing import Final, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from config.rules import RULES
from models.application import SubmittedApplication
from utils.i18n import LocalizedText


class CandidateStage(StrEnum):
    """Stages of the recruiter pipeline; values are the display labels."""

    APPLIED = "Applied"
    REVIEWED = "Reviewed"
    INTERVIEW_SCHEDULED = "Interview Scheduled"
    OFFER_SENT = "Offer Sent"

    @property
    def rank(self) -> int:
        return PIPELINE_STAGES.index(self)

    def next_stage(self) -> CandidateStage | None:
        """Return the following stage, or ``None`` at the end of the pipeline."""

        position = self.rank + 1
        if position >= len(PIPELINE_STAGES):
            return None
        return PIPELINE_STAGES[position]


PIPELINE_STAGES: Final[tuple[CandidateStage, ...]] = tuple(CandidateStage)

STAGE_LABELS: Final[dict[CandidateStage, LocalizedText]] = {
    CandidateStage.APPLIED: ("Beworben", "Applied"),
    CandidateStage.REVIEWED: ("Gesichtet", "Reviewed"),
    CandidateStage.INTERVIEW_SCHEDULED: ("Interview geplant", "Interview Scheduled"),
    CandidateStage.OFFER_SENT: ("Angebot versendet", "Offer Sent"),
}


class InterviewType(StrEnum):
    PHONE = "phone"
    VIDEO = "video"
    IN_PERSON = "in-person"


_RECORD_CONFIG = ConfigDict(
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
)


class CandidateRecord(BaseModel):
    """Durable representation of a submitted application.

    Records are immutable; the candidate store swaps in an updated copy for
    every recruiter change.
    """

    model_config = ConfigDict(**_RECORD_CONFIG, frozen=True)

    id: str = Field(..., min_length=1)
    application_id: str = Field(..., min_length=1)
    job_id: str
    job_title: str
    application_data: SubmittedApplication
    applied_at: datetime
    stage: CandidateStage = CandidateStage.APPLIED
    score: Optional[int] = Field(default=None, ge=1, le=5)
    notes: Optional[str] = Field(default=None, max_length=RULES.notes_max_length)
    interview_date: Optional[date] = None
    interview_time: Optional[str] = None
    interview_type: Optional[InterviewType] = None
    offer_details: Optional[str] = None

    @property
    def full_name(self) -> str:
        return self.application_data.personal_info.full_name


class CandidateUpdate(BaseModel):
    """Partial change set accepted by :meth:`CandidateStore.update`.

    Identity fields and the application snapshot are not part of this model,
    so they cannot change after submission. Only explicitly set fields are
    merged; passing ``None`` clears an optional field.
    """

    model_config = _RECORD_CONFIG

    stage: Optional[CandidateStage] = None
    score: Optional[int] = Field(default=None, ge=1, le=5)
    notes: Optional[str] = Field(default=None, max_length=RULES.notes_max_length)
    interview_date: Optional[date] = None
    interview_time: Optional[str] = None
    interview_type: Optional[InterviewType] = None
    offer_details: Optional[str] = None

    @field_validator("stage")
    @classmethod
    def _stage_not_cleared(cls, value: Optional[CandidateStage]) -> Optional[CandidateStage]:
        if value is None:
            raise ValueError("stage cannot be cleared")
        return value

    def changes(self) -> dict[str, object]:
        return self.model_dump(exclude_unset=True)


__all__ = [
    "CandidateRecord",
    "CandidateStage",
    "CandidateUpdate",
    "InterviewType",
    "PIPELINE_STAGES",
    "STAGE_LABELS",
]
