"""Helpers for initializing Streamlit session state."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable

import streamlit as st

import config
from constants.keys import StateKeys, UIKeys
from models.jobs import DEFAULT_JOB_POSTINGS, JobCatalog
from state.autosave import (
    JsonFilePersistence,
    SessionStatePersistence,
    SnapshotPersistence,
    load_wizard_snapshot,
    persist_wizard_snapshot,
)
from state.candidate_store import CandidateStore
from utils.ids import generate_record_id
from utils.logging_context import set_session_id
from wizard.application import ApplicationWizard

logger = logging.getLogger(__name__)


_DEFAULT_STATE_FACTORIES: Mapping[str, Callable[[], Any]] = MappingProxyType(
    {
        StateKeys.LANG: lambda: config.DEFAULT_LANGUAGE,
        StateKeys.SELECTED_JOB_ID: lambda: None,
        StateKeys.SESSION_ID: generate_record_id,
    }
)

_PRESERVED_ON_RESET: frozenset[str] = frozenset(
    {
        StateKeys.LANG,
        StateKeys.SESSION_ID,
        StateKeys.STORE,
        StateKeys.STORE_SNAPSHOT,
        UIKeys.LANG_SELECT,
    }
)


def build_persistence() -> SnapshotPersistence:
    """Return the JSON file strategy when a path is configured, session state otherwise."""

    if config.STORE_SNAPSHOT_PATH:
        return JsonFilePersistence(config.STORE_SNAPSHOT_PATH)
    return SessionStatePersistence()


def _load_store() -> CandidateStore:
    store = CandidateStore(persistence=build_persistence())
    if store.load():
        logger.info("Candidate store restored with %d records", len(store))
    return store


def ensure_state() -> None:
    """Initialize ``st.session_state`` with the store, wizard and job catalogue.

    Existing objects are preserved across reruns; missing ones are rebuilt from
    their snapshots when available.
    """

    for key, factory in _DEFAULT_STATE_FACTORIES.items():
        if key not in st.session_state:
            st.session_state[key] = factory()
    set_session_id(str(st.session_state[StateKeys.SESSION_ID]))

    if not isinstance(st.session_state.get(StateKeys.STORE), CandidateStore):
        st.session_state[StateKeys.STORE] = _load_store()
    if not isinstance(st.session_state.get(StateKeys.JOBS), JobCatalog):
        st.session_state[StateKeys.JOBS] = JobCatalog(DEFAULT_JOB_POSTINGS)
    if not isinstance(st.session_state.get(StateKeys.WIZARD), ApplicationWizard):
        st.session_state[StateKeys.WIZARD] = ApplicationWizard.from_snapshot(load_wizard_snapshot())


def get_store() -> CandidateStore:
    ensure_state()
    return st.session_state[StateKeys.STORE]


def get_wizard() -> ApplicationWizard:
    ensure_state()
    return st.session_state[StateKeys.WIZARD]


def get_job_catalog() -> JobCatalog:
    ensure_state()
    return st.session_state[StateKeys.JOBS]


def save_wizard_draft() -> None:
    """Snapshot the in-progress application so a rerun can restore it."""

    if not config.AUTOSAVE_ENABLED:
        return
    persist_wizard_snapshot(get_wizard().to_snapshot())


def reset_state() -> None:
    """Reset ``st.session_state`` while keeping submitted candidates.

    Keeps the language selection, session id and the candidate store, then reinitializes
    defaults via :func:`ensure_state`.
    """

    for key in list(st.session_state.keys()):
        if key not in _PRESERVED_ON_RESET:
            del st.session_state[key]
    ensure_state()


__all__ = [
    "build_persistence",
    "ensure_state",
    "get_job_catalog",
    "get_store",
    "get_wizard",
    "reset_state",
    "save_wizard_draft",
]
