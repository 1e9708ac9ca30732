"""Recruiter actions on stored candidates.

Every action goes through :class:`state.candidate_store.CandidateStore` and
only ever moves a candidate forward along the pipeline.
"""

from __future__ import annotations

import datetime as dt
import logging
from datetime import date, timedelta
from typing import Final, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config.rules import RULES
from core.errors import CandidateNotFoundError, StageTransitionError
from models.candidate import CandidateRecord, CandidateStage, CandidateUpdate, InterviewType
from state.candidate_store import CandidateStore
from utils.logging_context import log_context

logger = logging.getLogger(__name__)

TIME_SLOTS: Final[tuple[str, ...]] = (
    "09:00 AM",
    "10:00 AM",
    "11:00 AM",
    "1:00 PM",
    "2:00 PM",
    "3:00 PM",
    "4:00 PM",
)
OFFER_MIN_LEAD_DAYS = 7
OFFER_SIGNATURE = "The HireLink Team"

_SCHEDULABLE_STAGES: Final[frozenset[CandidateStage]] = frozenset(
    {CandidateStage.REVIEWED, CandidateStage.INTERVIEW_SCHEDULED}
)


def _today() -> date:
    return date.today()


class InterviewRequest(BaseModel):
    """Interview slot chosen by a recruiter."""

    model_config = ConfigDict(extra="forbid")

    date: dt.date
    time: str
    interview_type: InterviewType
    notes: Optional[str] = Field(default=None, max_length=RULES.notes_max_length)

    @field_validator("date")
    @classmethod
    def _not_in_past(cls, value: date) -> date:
        if value < _today():
            raise ValueError("Interview date cannot be in the past")
        return value

    @field_validator("time")
    @classmethod
    def _offered_slot(cls, value: str) -> str:
        slot = value.strip()
        if slot not in TIME_SLOTS:
            raise ValueError(f"Time must be one of: {', '.join(TIME_SLOTS)}")
        return slot


class OfferDraft(BaseModel):
    """Offer terms entered before the letter is sent."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    salary: str = Field(..., min_length=1)
    start_date: date
    terms: Optional[str] = None
    position: Optional[str] = None

    @field_validator("start_date")
    @classmethod
    def _enough_notice(cls, value: date) -> date:
        earliest = _today() + timedelta(days=OFFER_MIN_LEAD_DAYS)
        if value < earliest:
            raise ValueError(f"Start date must be on or after {earliest.isoformat()}")
        return value


def _require(store: CandidateStore, record_id: str) -> CandidateRecord:
    record = store.get_by_id(record_id)
    if record is None:
        raise CandidateNotFoundError(record_id)
    return record


def save_review(
    store: CandidateStore,
    record_id: str,
    *,
    score: int | None = None,
    notes: str | None = None,
    stage: CandidateStage | str | None = None,
) -> CandidateRecord:
    """Store a recruiter's score and notes, optionally moving the candidate on.

    Raises:
        CandidateNotFoundError: If ``record_id`` is unknown.
        StageTransitionError: If ``stage`` lies before the current stage.
        pydantic.ValidationError: If the score or notes are out of range.
    """

    current = _require(store, record_id)
    changes: dict[str, object] = {}
    if score is not None:
        changes["score"] = score
    if notes is not None:
        changes["notes"] = notes
    if stage is not None:
        target = CandidateStage(stage)
        if target.rank < current.stage.rank:
            raise StageTransitionError(record_id, current.stage.value, target.value)
        changes["stage"] = target
    update = CandidateUpdate(**changes)
    return store.update(record_id, update)


def advance_stage(store: CandidateStore, record_id: str) -> CandidateRecord:
    """Move the candidate to the following stage.

    Raises:
        StageTransitionError: If the candidate already received an offer.
    """

    current = _require(store, record_id)
    following = current.stage.next_stage()
    if following is None:
        raise StageTransitionError(record_id, current.stage.value, current.stage.value)
    return store.transition_stage(record_id, following)


def schedule_interview(store: CandidateStore, record_id: str, request: InterviewRequest) -> CandidateRecord:
    """Book an interview for a reviewed candidate or reschedule an existing one."""

    current = _require(store, record_id)
    if current.stage not in _SCHEDULABLE_STAGES:
        raise StageTransitionError(record_id, current.stage.value, CandidateStage.INTERVIEW_SCHEDULED.value)
    changes: dict[str, object] = {
        "stage": CandidateStage.INTERVIEW_SCHEDULED,
        "interview_date": request.date,
        "interview_time": request.time,
        "interview_type": request.interview_type,
    }
    if request.notes is not None:
        changes["notes"] = request.notes
    with log_context(candidate_id=record_id, application_id=current.application_id):
        logger.info("Scheduling %s interview on %s at %s", request.interview_type, request.date, request.time)
        return store.update(record_id, CandidateUpdate(**changes))


def compose_offer_letter(record: CandidateRecord, offer: OfferDraft, *, issued_on: date | None = None) -> str:
    """Return the plain-text offer letter for ``record``."""

    full_name = record.full_name.strip()
    first_name = full_name.split(" ")[0] if full_name else full_name
    position = offer.position or record.job_title
    lines = [
        (issued_on or _today()).isoformat(),
        full_name,
        "",
        f"Dear {first_name},",
        "",
        f"We are pleased to offer you the position of {position} at our company. "
        "We are impressed with your qualifications and believe you will be a "
        "valuable addition to our team.",
        "",
        f"Position: {position}",
        f"Compensation: {offer.salary} per annum",
        f"Start Date: {offer.start_date.isoformat()}",
    ]
    if offer.terms:
        lines += ["", "Terms & Conditions:", offer.terms]
    lines += [
        "",
        "Please confirm your acceptance of this offer by signing the attached "
        "document and returning it within 5 business days.",
        "",
        "We look forward to welcoming you to our team. If you have any "
        "questions, please do not hesitate to contact us.",
        "",
        "Best regards,",
        OFFER_SIGNATURE,
    ]
    return "\n".join(lines)


def send_offer(store: CandidateStore, record_id: str, offer: OfferDraft) -> str:
    """Mark an interviewed candidate as ``Offer Sent`` and return the letter."""

    current = _require(store, record_id)
    if current.stage is not CandidateStage.INTERVIEW_SCHEDULED:
        raise StageTransitionError(record_id, current.stage.value, CandidateStage.OFFER_SENT.value)
    with log_context(candidate_id=record_id, application_id=current.application_id):
        updated = store.update(
            record_id,
            CandidateUpdate(stage=CandidateStage.OFFER_SENT, offer_details=offer.terms),
        )
        logger.info("Offer sent for '%s'", offer.position or current.job_title)
    return compose_offer_letter(updated, offer)


__all__ = [
    "InterviewRequest",
    "OFFER_MIN_LEAD_DAYS",
    "OfferDraft",
    "TIME_SLOTS",
    "advance_stage",
    "compose_offer_letter",
    "save_review",
    "schedule_interview",
    "send_offer",
]
