"""Recruiter review, interview scheduling and offer actions."""

from __future__ import annotations

from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from core.errors import CandidateNotFoundError, StageTransitionError
from models.candidate import CandidateStage, InterviewType
from pipelines import review
from pipelines.review import (
    InterviewRequest,
    OfferDraft,
    advance_stage,
    compose_offer_letter,
    save_review,
    schedule_interview,
    send_offer,
)
from state.candidate_store import CandidateStore

TODAY = date(2024, 6, 3)


@pytest.fixture(autouse=True)
def _fixed_today(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(review, "_today", lambda: TODAY)


@pytest.fixture
def store() -> CandidateStore:
    return CandidateStore(autosave=False)


def test_save_review_stores_score_and_notes(store: CandidateStore, make_record) -> None:
    record = store.insert(make_record())
    updated = save_review(store, record.id, score=5, notes="Excellent fit", stage=CandidateStage.REVIEWED)
    assert updated.score == 5
    assert updated.notes == "Excellent fit"
    assert updated.stage is CandidateStage.REVIEWED


def test_save_review_validates_input(store: CandidateStore, make_record) -> None:
    record = store.insert(make_record())
    with pytest.raises(ValidationError):
        save_review(store, record.id, score=0)
    with pytest.raises(ValidationError):
        save_review(store, record.id, notes="x" * 501)
    assert save_review(store, record.id, notes="x" * 500).notes == "x" * 500


def test_save_review_refuses_backward_stage(store: CandidateStore, make_record) -> None:
    record = store.insert(make_record(stage=CandidateStage.INTERVIEW_SCHEDULED))
    with pytest.raises(StageTransitionError):
        save_review(store, record.id, score=3, stage=CandidateStage.APPLIED)
    assert store.get_by_id(record.id).score is None


def test_save_review_unknown_candidate(store: CandidateStore) -> None:
    with pytest.raises(CandidateNotFoundError):
        save_review(store, "missing", score=3)


def test_advance_stage_walks_the_pipeline(store: CandidateStore, make_record) -> None:
    record = store.insert(make_record())
    stages = [advance_stage(store, record.id).stage for _ in range(3)]
    assert stages == [
        CandidateStage.REVIEWED,
        CandidateStage.INTERVIEW_SCHEDULED,
        CandidateStage.OFFER_SENT,
    ]
    with pytest.raises(StageTransitionError):
        advance_stage(store, record.id)


def test_interview_request_validation() -> None:
    request = InterviewRequest(date=TODAY, time=" 10:00 AM ", interview_type="video")
    assert request.time == "10:00 AM"
    assert request.interview_type is InterviewType.VIDEO
    with pytest.raises(ValidationError):
        InterviewRequest(date=TODAY - timedelta(days=1), time="10:00 AM", interview_type="video")
    with pytest.raises(ValidationError):
        InterviewRequest(date=TODAY, time="12:00 PM", interview_type="video")
    with pytest.raises(ValidationError):
        InterviewRequest(date=TODAY, time="10:00 AM", interview_type="carrier pigeon")


def test_schedule_interview_moves_stage(store: CandidateStore, make_record) -> None:
    record = store.insert(make_record(stage=CandidateStage.REVIEWED))
    store.update(record.id, {"notes": "Keep these"})
    request = InterviewRequest(date=TODAY + timedelta(days=2), time="2:00 PM", interview_type="in-person")

    updated = schedule_interview(store, record.id, request)

    assert updated.stage is CandidateStage.INTERVIEW_SCHEDULED
    assert updated.interview_date == TODAY + timedelta(days=2)
    assert updated.interview_time == "2:00 PM"
    assert updated.interview_type is InterviewType.IN_PERSON
    assert updated.notes == "Keep these"


def test_schedule_interview_reschedule_overwrites_notes(store: CandidateStore, make_record) -> None:
    record = store.insert(make_record(stage=CandidateStage.INTERVIEW_SCHEDULED))
    request = InterviewRequest(date=TODAY, time="09:00 AM", interview_type="phone", notes="Moved to morning")
    assert schedule_interview(store, record.id, request).notes == "Moved to morning"


def test_schedule_interview_requires_review_first(store: CandidateStore, make_record) -> None:
    record = store.insert(make_record())
    request = InterviewRequest(date=TODAY, time="09:00 AM", interview_type="phone")
    with pytest.raises(StageTransitionError):
        schedule_interview(store, record.id, request)
    assert store.get_by_id(record.id).stage is CandidateStage.APPLIED


def test_offer_draft_requires_salary_and_notice() -> None:
    with pytest.raises(ValidationError):
        OfferDraft(salary="   ", start_date=TODAY + timedelta(days=30))
    with pytest.raises(ValidationError):
        OfferDraft(salary="$120,000", start_date=TODAY + timedelta(days=6))
    offer = OfferDraft(salary="$120,000", start_date=TODAY + timedelta(days=7))
    assert offer.terms is None


def test_send_offer_updates_record_and_returns_letter(store: CandidateStore, make_record) -> None:
    record = store.insert(make_record(stage=CandidateStage.INTERVIEW_SCHEDULED))
    offer = OfferDraft(salary="$120,000", start_date=date(2024, 7, 1), terms="Remote friendly")

    letter = send_offer(store, record.id, offer)

    stored = store.get_by_id(record.id)
    assert stored.stage is CandidateStage.OFFER_SENT
    assert stored.offer_details == "Remote friendly"
    assert letter.startswith("2024-06-03\nAda Lovelace")
    assert "Dear Ada," in letter
    assert "Position: Senior Frontend Developer" in letter
    assert "Compensation: $120,000 per annum" in letter
    assert "Start Date: 2024-07-01" in letter
    assert "Terms & Conditions:\nRemote friendly" in letter
    assert letter.endswith("Best regards,\nThe HireLink Team")


def test_send_offer_requires_interview(store: CandidateStore, make_record) -> None:
    record = store.insert(make_record(stage=CandidateStage.REVIEWED))
    offer = OfferDraft(salary="$90,000", start_date=TODAY + timedelta(days=14))
    with pytest.raises(StageTransitionError):
        send_offer(store, record.id, offer)


def test_compose_offer_letter_omits_empty_terms(make_record) -> None:
    offer = OfferDraft(salary="€70,000", start_date=TODAY + timedelta(days=10), position="Staff Engineer")
    letter = compose_offer_letter(make_record(), offer, issued_on=TODAY)
    assert "Terms & Conditions" not in letter
    assert "position of Staff Engineer" in letter
