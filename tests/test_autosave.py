from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import streamlit as st

from constants.keys import StateKeys
from state.autosave import (
    SNAPSHOT_VERSION,
    JsonFilePersistence,
    SessionStatePersistence,
    build_snapshot,
    load_wizard_snapshot,
    parse_snapshot,
    persist_wizard_snapshot,
    serialize_snapshot,
)


def test_build_snapshot_uses_camel_case_and_meta(make_record) -> None:
    record = make_record()
    snapshot = build_snapshot([record], wizard_state={"current_step": "identity", "draft": {}})

    entry = snapshot["candidates"][0]
    assert entry["applicationId"] == record.application_id
    assert entry["applicationData"]["personalInfo"]["fullName"] == "Ada Lovelace"
    assert entry["appliedAt"].startswith("2024-05-01T09:30:00")
    assert snapshot["meta"]["version"] == SNAPSHOT_VERSION
    assert "captured_at" in snapshot["meta"]
    assert snapshot["wizard"]["current_step"] == "identity"


def test_serialized_snapshot_is_json(make_record) -> None:
    raw = serialize_snapshot(build_snapshot([make_record()]))
    decoded = json.loads(raw.decode("utf-8"))
    assert len(decoded["candidates"]) == 1


def test_parse_snapshot_skips_bad_and_duplicate_entries(make_record, caplog: Any) -> None:
    good = make_record()
    payload = build_snapshot([good])
    payload["candidates"].append({"id": "broken"})
    payload["candidates"].append("not a record")
    payload["candidates"].append(dict(payload["candidates"][0]))

    with caplog.at_level(logging.WARNING, logger="state.autosave"):
        records = parse_snapshot(payload)

    assert records == [good]
    assert len(caplog.records) == 3


def test_parse_snapshot_handles_missing_payload() -> None:
    assert parse_snapshot(None) == []
    assert parse_snapshot({}) == []
    assert parse_snapshot({"candidates": "nope"}) == []


def test_session_state_persistence_round_trip(make_record) -> None:
    persistence = SessionStatePersistence()
    assert persistence.load_snapshot() is None

    snapshot = build_snapshot([make_record()])
    persistence.save_snapshot(snapshot)

    assert st.session_state[StateKeys.STORE_SNAPSHOT] == snapshot
    assert persistence.load_snapshot() == snapshot


def test_json_file_persistence_round_trip(tmp_path: Path, make_record) -> None:
    target = tmp_path / "nested" / "candidates.json"
    persistence = JsonFilePersistence(target)
    assert persistence.load_snapshot() is None

    record = make_record()
    persistence.save_snapshot(build_snapshot([record]))

    assert target.is_file()
    assert parse_snapshot(persistence.load_snapshot()) == [record]
    assert [path.name for path in target.parent.iterdir()] == ["candidates.json"]


def test_json_file_persistence_ignores_corrupt_file(tmp_path: Path) -> None:
    target = tmp_path / "candidates.json"
    target.write_text("{not json", encoding="utf-8")
    assert JsonFilePersistence(target).load_snapshot() is None
    target.write_text("[]", encoding="utf-8")
    assert JsonFilePersistence(target).load_snapshot() is None


def test_wizard_snapshot_lives_in_session() -> None:
    assert load_wizard_snapshot() is None
    persist_wizard_snapshot({"current_step": "experience", "draft": {}})
    assert load_wizard_snapshot() == {"current_step": "experience", "draft": {}}
