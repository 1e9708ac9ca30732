from __future__ import annotations

import pytest

from utils import ids
from utils.ids import generate_application_id, generate_record_id, is_application_id, to_base36


def test_to_base36() -> None:
    assert to_base36(0) == "0"
    assert to_base36(35) == "Z"
    assert to_base36(36) == "10"
    with pytest.raises(ValueError):
        to_base36(-1)


def test_application_id_shape() -> None:
    value = generate_application_id()
    prefix, random_segment, stamp = value.split("-")
    assert prefix == "HLA"
    assert len(random_segment) == 8
    assert stamp.isalnum() and stamp.upper() == stamp
    assert is_application_id(value)


def test_application_id_prefix_override() -> None:
    assert generate_application_id("JOB").startswith("JOB-")


def test_application_ids_are_distinct_and_time_ordered() -> None:
    values = [generate_application_id() for _ in range(200)]
    assert len(set(values)) == len(values)
    stamps = [int(value.rsplit("-", 1)[1], 36) for value in values]
    assert stamps == sorted(stamps)


def test_timestamp_never_goes_backwards(monkeypatch: pytest.MonkeyPatch) -> None:
    readings = iter([2_000_000_000_000, 1_000_000_000_000])
    monkeypatch.setattr(ids, "_now_ms", lambda: next(readings))
    monkeypatch.setattr(ids, "_last_timestamp_ms", 0)
    first = ids._next_timestamp_ms()
    second = ids._next_timestamp_ms()
    assert second == first


def test_record_ids_are_unique_hex() -> None:
    first, second = generate_record_id(), generate_record_id()
    assert first != second
    assert len(first) == 32
    int(first, 16)


def test_is_application_id_rejects_other_shapes() -> None:
    assert not is_application_id("")
    assert not is_application_id("HLA-short-1")
    assert not is_application_id("hla-ABCDEFGH-1")
