from pathlib import Path
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from itertools import count

import streamlit as st

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import config
from models.application import ApplicationDraft, Experience, PersonalInfo, ResumeRef
from models.candidate import CandidateRecord, CandidateStage


@dataclass
class _SessionDict(dict[str, object]):
    """Lightweight replacement for ``st.session_state`` during tests."""

    def clear(self) -> None:  # type: ignore[override]
        super().clear()


@pytest.fixture(autouse=True)
def _stub_streamlit_session_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace Streamlit's runtime-bound session state with a plain dictionary."""

    session_state = _SessionDict()
    monkeypatch.setattr(st, "session_state", session_state, raising=False)
    yield


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep environment-derived settings deterministic across tests."""

    monkeypatch.setattr(config, "DEFAULT_LANGUAGE", "en")
    monkeypatch.setattr(config, "STORE_SNAPSHOT_PATH", None)
    monkeypatch.setattr(config, "AUTOSAVE_ENABLED", True)
    monkeypatch.setattr(config, "APPLICATION_ID_PREFIX", "HLA")
    yield


APPLIED_AT = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)


def _build_draft(
    *,
    full_name: str = "Ada Lovelace",
    skills: list[str] | None = None,
    portfolio_link: str | None = None,
) -> ApplicationDraft:
    return ApplicationDraft(
        personal_info=PersonalInfo(
            full_name=full_name,
            email="ada@example.com",
            phone="+1 (555) 123-4567",
        ),
        experience=Experience(
            years_of_experience="7",
            skills=["Python", "SQL"] if skills is None else skills,
            portfolio_link=portfolio_link,
        ),
        resume=ResumeRef(name="ada.pdf", size_bytes=2048, mime_type="application/pdf"),
    )


_record_counter = count(1)


def _build_record(
    *,
    record_id: str | None = None,
    stage: CandidateStage = CandidateStage.APPLIED,
    full_name: str = "Ada Lovelace",
    skills: list[str] | None = None,
    job_id: str = "1",
) -> CandidateRecord:
    number = next(_record_counter)
    return CandidateRecord(
        id=record_id or f"rec-{number}",
        application_id=f"HLA-TEST{number:04d}-LX1",
        job_id=job_id,
        job_title="Senior Frontend Developer",
        application_data=_build_draft(full_name=full_name, skills=skills),
        applied_at=APPLIED_AT,
        stage=stage,
    )


@pytest.fixture
def make_draft():
    """Return a factory for complete, valid application drafts."""

    return _build_draft


@pytest.fixture
def make_record():
    """Return a factory for candidate records with unique identifiers."""

    return _build_record
