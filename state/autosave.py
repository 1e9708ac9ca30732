"""Snapshot serialisation and persistence strategies for the candidate store.

The store never talks to storage directly. It is handed a
:class:`SnapshotPersistence` that saves and loads a full snapshot, either in
the Streamlit session or in a JSON file on disk.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Mapping, Protocol

import streamlit as st
from pydantic import ValidationError

from constants.keys import StateKeys
from models.candidate import CandidateRecord

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1

AutosavePayload = dict[str, Any]


class SnapshotPersistence(Protocol):
    """Save/load pair injected into :class:`state.candidate_store.CandidateStore`."""

    def save_snapshot(self, payload: Mapping[str, Any]) -> None: ...

    def load_snapshot(self) -> AutosavePayload | None: ...


def build_snapshot(
    records: Iterable[CandidateRecord],
    *,
    wizard_state: Mapping[str, Any] | None = None,
) -> AutosavePayload:
    """Return a portable snapshot that can be exported or restored later."""

    snapshot: AutosavePayload = {
        "candidates": [record.model_dump(mode="json", by_alias=True) for record in records],
        "meta": {
            "captured_at": datetime.now(timezone.utc).isoformat(),
            "version": SNAPSHOT_VERSION,
        },
    }
    if isinstance(wizard_state, Mapping):
        snapshot["wizard"] = dict(wizard_state)
    return snapshot


def parse_snapshot(payload: Mapping[str, Any] | None) -> list[CandidateRecord]:
    """Return the valid records of ``payload`` in stored order.

    Malformed entries and repeated ids are skipped with a warning so one bad
    record does not discard the rest.
    """

    if not isinstance(payload, Mapping):
        return []
    raw_candidates = payload.get("candidates")
    if not isinstance(raw_candidates, list):
        return []
    records: list[CandidateRecord] = []
    seen: set[str] = set()
    for index, entry in enumerate(raw_candidates):
        if not isinstance(entry, Mapping):
            logger.warning("Skipping snapshot entry %d: not an object", index)
            continue
        try:
            record = CandidateRecord.model_validate(entry)
        except ValidationError as error:
            logger.warning("Skipping snapshot entry %d: %s", index, error)
            continue
        if record.id in seen:
            logger.warning("Skipping snapshot entry %d: duplicate id '%s'", index, record.id)
            continue
        seen.add(record.id)
        records.append(record)
    return records


def serialize_snapshot(snapshot: Mapping[str, Any]) -> bytes:
    """Return a JSON representation of ``snapshot`` for download or disk."""

    return json.dumps(snapshot, ensure_ascii=False, indent=2).encode("utf-8")


class SessionStatePersistence:
    """Keep the snapshot in ``st.session_state`` for the lifetime of the session."""

    def __init__(self, key: str = StateKeys.STORE_SNAPSHOT) -> None:
        self.key = key

    def save_snapshot(self, payload: Mapping[str, Any]) -> None:
        st.session_state[self.key] = dict(payload)

    def load_snapshot(self) -> AutosavePayload | None:
        value = st.session_state.get(self.key)
        if isinstance(value, Mapping):
            return dict(value)
        return None


class JsonFilePersistence:
    """Write snapshots to a JSON file, replacing it atomically."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def save_snapshot(self, payload: Mapping[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(serialize_snapshot(payload))
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def load_snapshot(self) -> AutosavePayload | None:
        if not self.path.is_file():
            return None
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as error:
            logger.warning("Ignoring unreadable snapshot %s: %s", self.path, error)
            return None
        if not isinstance(payload, dict):
            logger.warning("Ignoring snapshot %s: top level is not an object", self.path)
            return None
        return payload


def persist_wizard_snapshot(wizard_state: Mapping[str, Any]) -> None:
    """Capture the in-progress draft into ``StateKeys.WIZARD_SNAPSHOT``."""

    st.session_state[StateKeys.WIZARD_SNAPSHOT] = dict(wizard_state)


def load_wizard_snapshot() -> AutosavePayload | None:
    value = st.session_state.get(StateKeys.WIZARD_SNAPSHOT)
    if isinstance(value, Mapping):
        return dict(value)
    return None


__all__ = [
    "AutosavePayload",
    "JsonFilePersistence",
    "SNAPSHOT_VERSION",
    "SessionStatePersistence",
    "SnapshotPersistence",
    "build_snapshot",
    "load_wizard_snapshot",
    "parse_snapshot",
    "persist_wizard_snapshot",
    "serialize_snapshot",
]
