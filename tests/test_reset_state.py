"""Regression tests for :func:`state.ensure_state` and :func:`state.reset_state`."""

from pathlib import Path

import pytest
import streamlit as st

import config
from constants.keys import StateKeys, UIKeys
from models.jobs import JobCatalog
from state import ensure_state, reset_state
from state.autosave import JsonFilePersistence, SessionStatePersistence
from state.candidate_store import CandidateStore
from state.ensure_state import build_persistence, get_store, get_wizard, save_wizard_draft
from wizard.application import ApplicationWizard
from wizard.steps import DraftScope, WizardStep


def test_ensure_state_installs_core_objects() -> None:
    st.session_state.clear()
    ensure_state()

    assert isinstance(st.session_state[StateKeys.STORE], CandidateStore)
    assert isinstance(st.session_state[StateKeys.WIZARD], ApplicationWizard)
    assert isinstance(st.session_state[StateKeys.JOBS], JobCatalog)
    assert len(st.session_state[StateKeys.JOBS]) == 4
    assert st.session_state["lang"] == "en"
    assert st.session_state[StateKeys.SELECTED_JOB_ID] is None
    assert st.session_state[StateKeys.SESSION_ID]


def test_ensure_state_keeps_existing_objects(make_record) -> None:
    st.session_state.clear()
    ensure_state()
    store = get_store()
    store.insert(make_record())
    wizard = get_wizard()

    ensure_state()

    assert get_store() is store
    assert get_wizard() is wizard


def test_store_restored_from_session_snapshot(make_record) -> None:
    st.session_state.clear()
    ensure_state()
    record = get_store().insert(make_record())

    del st.session_state[StateKeys.STORE]
    ensure_state()

    assert get_store().records() == [record]


def test_wizard_draft_survives_rebuild() -> None:
    st.session_state.clear()
    ensure_state()
    wizard = get_wizard()
    wizard.update_field(DraftScope.PERSONAL_INFO, "full_name", "Ada Lovelace")
    save_wizard_draft()

    del st.session_state[StateKeys.WIZARD]
    ensure_state()

    assert get_wizard().draft.personal_info.full_name == "Ada Lovelace"
    assert get_wizard().step is WizardStep.IDENTITY


def test_reset_state_keeps_candidates_and_language(make_record) -> None:
    st.session_state.clear()
    ensure_state()
    record = get_store().insert(make_record())
    get_wizard().update_field(DraftScope.PERSONAL_INFO, "email", "ada@example.com")
    save_wizard_draft()
    st.session_state["lang"] = "de"
    st.session_state[UIKeys.LANG_SELECT] = "de"
    st.session_state[StateKeys.SELECTED_JOB_ID] = "3"

    reset_state()

    assert st.session_state["lang"] == "de"
    assert st.session_state[UIKeys.LANG_SELECT] == "de"
    assert st.session_state[StateKeys.SELECTED_JOB_ID] is None
    assert get_store().records() == [record]
    assert get_wizard().draft.is_empty()


def test_build_persistence_prefers_configured_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    assert isinstance(build_persistence(), SessionStatePersistence)
    monkeypatch.setattr(config, "STORE_SNAPSHOT_PATH", str(tmp_path / "store.json"))
    persistence = build_persistence()
    assert isinstance(persistence, JsonFilePersistence)
    assert persistence.path == tmp_path / "store.json"
