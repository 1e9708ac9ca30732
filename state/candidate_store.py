"""In-memory system of record for submitted applications."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Mapping

import config
from core.errors import (
    CandidateNotFoundError,
    DuplicateIdError,
    SnapshotPersistenceError,
    StageTransitionError,
)
from models.candidate import CandidateRecord, CandidateStage, CandidateUpdate
from state.autosave import AutosavePayload, SnapshotPersistence, build_snapshot, parse_snapshot
from utils.logging_context import log_context

logger = logging.getLogger(__name__)


class CandidateStore:
    """Ordered collection of candidate records, newest first.

    Records are keyed by ``id`` with a secondary unique index on
    ``application_id``. :meth:`update` merges any change set, including
    arbitrary stage values; :meth:`transition_stage` is the forward-only path
    used by recruiter actions. When a persistence strategy is injected, a full
    snapshot is saved after every mutation; if that save fails the mutation is
    rolled back before the error propagates.
    """

    def __init__(
        self,
        records: Iterable[CandidateRecord] = (),
        *,
        persistence: SnapshotPersistence | None = None,
        autosave: bool | None = None,
    ) -> None:
        self._records: dict[str, CandidateRecord] = {}
        self._order: list[str] = []
        self._by_application_id: dict[str, str] = {}
        self._persistence = persistence
        self._autosave = config.AUTOSAVE_ENABLED if autosave is None else autosave
        self._replace_all(records)

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[CandidateRecord]:
        return iter(self.records())

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def records(self) -> list[CandidateRecord]:
        """Return all records, most recently inserted first."""

        return [self._records[record_id] for record_id in self._order]

    def get_by_id(self, record_id: str) -> CandidateRecord | None:
        return self._records.get(record_id)

    def get_by_application_id(self, application_id: str) -> CandidateRecord | None:
        record_id = self._by_application_id.get(application_id)
        if record_id is None:
            return None
        return self._records[record_id]

    def insert(self, record: CandidateRecord) -> CandidateRecord:
        """Prepend ``record``.

        Raises:
            DuplicateIdError: If the id or application id is already stored.
            SnapshotPersistenceError: If autosave fails; the record is not kept.
        """

        if record.id in self._records:
            raise DuplicateIdError(record.id)
        if record.application_id in self._by_application_id:
            raise DuplicateIdError(record.application_id)
        self._records[record.id] = record
        self._by_application_id[record.application_id] = record.id
        self._order.insert(0, record.id)
        try:
            self._persist()
        except Exception:
            del self._records[record.id]
            del self._by_application_id[record.application_id]
            self._order.remove(record.id)
            raise
        with log_context(candidate_id=record.id, application_id=record.application_id):
            logger.info("Stored application for job '%s'", record.job_id)
        return record

    def update(self, record_id: str, changes: CandidateUpdate | Mapping[str, Any]) -> CandidateRecord:
        """Merge ``changes`` into the record and return the new version.

        Only fields present in ``changes`` are touched. A mapping is validated
        as :class:`CandidateUpdate` first, so unknown fields or an out-of-range
        score raise ``pydantic.ValidationError`` before anything changes.

        Raises:
            CandidateNotFoundError: If no record has ``record_id``.
        """

        current = self._records.get(record_id)
        if current is None:
            raise CandidateNotFoundError(record_id)
        update = changes if isinstance(changes, CandidateUpdate) else CandidateUpdate.model_validate(changes)
        updated = current.model_copy(update=update.changes())
        self._records[record_id] = updated
        try:
            self._persist()
        except Exception:
            self._records[record_id] = current
            raise
        if updated.stage is not current.stage:
            with log_context(candidate_id=record_id, application_id=current.application_id):
                logger.info("Stage changed from '%s' to '%s'", current.stage, updated.stage)
        return updated

    def transition_stage(self, record_id: str, next_stage: CandidateStage | str) -> CandidateRecord:
        """Move a record forward along the pipeline.

        Skipping ahead is allowed; requesting the current stage is a no-op.

        Raises:
            CandidateNotFoundError: If no record has ``record_id``.
            StageTransitionError: If ``next_stage`` lies before the current stage.
        """

        current = self._records.get(record_id)
        if current is None:
            raise CandidateNotFoundError(record_id)
        target = CandidateStage(next_stage)
        if target.rank < current.stage.rank:
            raise StageTransitionError(record_id, current.stage.value, target.value)
        if target is current.stage:
            return current
        return self.update(record_id, CandidateUpdate(stage=target))

    def snapshot(self) -> AutosavePayload:
        return build_snapshot(self.records())

    def restore(self, payload: Mapping[str, Any] | None) -> None:
        """Replace the whole collection with the records in ``payload``."""

        self._replace_all(parse_snapshot(payload))
        logger.info("Restored %d candidate records from snapshot", len(self))

    @classmethod
    def from_snapshot(cls, payload: Mapping[str, Any] | None, **kwargs: Any) -> "CandidateStore":
        return cls(parse_snapshot(payload), **kwargs)

    def save(self) -> None:
        """Write a full snapshot through the injected persistence.

        Raises:
            SnapshotPersistenceError: If the snapshot cannot be written.
        """

        if self._persistence is None:
            return
        try:
            self._persistence.save_snapshot(self.snapshot())
        except (OSError, TypeError, ValueError) as exc:
            raise SnapshotPersistenceError(f"Could not save candidate snapshot: {exc}") from exc

    def load(self) -> bool:
        """Restore from the injected persistence; ``False`` when nothing was stored."""

        if self._persistence is None:
            return False
        payload = self._persistence.load_snapshot()
        if payload is None:
            return False
        self.restore(payload)
        return True

    def _persist(self) -> None:
        if self._autosave:
            self.save()

    def _replace_all(self, records: Iterable[CandidateRecord]) -> None:
        self._records.clear()
        self._order.clear()
        self._by_application_id.clear()
        for record in records:
            if record.id in self._records or record.application_id in self._by_application_id:
                logger.warning("Skipping duplicate candidate record '%s'", record.id)
                continue
            self._records[record.id] = record
            self._by_application_id[record.application_id] = record.id
            self._order.append(record.id)


__all__ = ["CandidateStore"]
