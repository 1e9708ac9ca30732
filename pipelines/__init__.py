"""Recruiter-side views and actions on the candidate store."""

from __future__ import annotations

__all__ = [
    "CandidateCard",
    "InterviewRequest",
    "OfferDraft",
    "StageColumn",
    "advance_stage",
    "build_board",
    "compose_offer_letter",
    "group_by_stage",
    "save_review",
    "schedule_interview",
    "send_offer",
    "stage_counts",
]

from .board import CandidateCard, StageColumn, build_board, group_by_stage, stage_counts
from .review import (
    InterviewRequest,
    OfferDraft,
    advance_stage,
    compose_offer_letter,
    save_review,
    schedule_interview,
    send_offer,
)
