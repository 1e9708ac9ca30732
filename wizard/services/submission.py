"""Hand a finished application to the outside world and record it locally."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeoutError
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Callable

from opentelemetry import trace

import config
from core.errors import JobPostingNotFoundError, SnapshotPersistenceError
from models.candidate import CandidateRecord
from models.jobs import JobCatalog
from state.candidate_store import CandidateStore
from utils import i18n
from utils.logging_context import log_context
from wizard.application import ApplicationWizard
from wizard.step_validators import StepErrors

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

SubmissionTransport = Callable[[CandidateRecord], Any]


class SubmissionStatus(StrEnum):
    SUBMITTED = "submitted"
    INVALID = "invalid"
    JOB_NOT_FOUND = "job_not_found"
    TRANSPORT_FAILED = "transport_failed"
    TIMED_OUT = "timed_out"
    STORAGE_FAILED = "storage_failed"


_STATUS_MESSAGES: dict[SubmissionStatus, i18n.LocalizedText] = {
    SubmissionStatus.SUBMITTED: i18n.APPLICATION_SUBMITTED,
    SubmissionStatus.JOB_NOT_FOUND: i18n.JOB_NOT_FOUND,
    SubmissionStatus.TRANSPORT_FAILED: i18n.SUBMISSION_FAILED,
    SubmissionStatus.TIMED_OUT: i18n.SUBMISSION_TIMED_OUT,
    SubmissionStatus.STORAGE_FAILED: i18n.SUBMISSION_NOT_SAVED,
}


@dataclass(frozen=True)
class SubmissionOutcome:
    """Result of :func:`submit_application`.

    ``record`` is only set for ``SUBMITTED``; ``errors`` only for ``INVALID``.
    """

    status: SubmissionStatus
    record: CandidateRecord | None = None
    errors: StepErrors | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is SubmissionStatus.SUBMITTED

    @property
    def application_id(self) -> str | None:
        return self.record.application_id if self.record is not None else None

    def message(self, lang: str | None = None) -> str:
        """Return the user-facing confirmation or failure text."""

        if self.status is SubmissionStatus.INVALID:
            reasons = self.errors.localized(lang) if self.errors is not None else {}
            return "; ".join(reasons.values())
        text = i18n.resolve_message(_STATUS_MESSAGES[self.status], lang=lang)
        return text.format(application_id=self.application_id or "")


def _run_transport(transport: SubmissionTransport, record: CandidateRecord, timeout: float) -> None:
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="hirelink-submit")
    try:
        future = executor.submit(transport, record)
        future.result(timeout=timeout)
    finally:
        executor.shutdown(wait=False, cancel_futures=True)


def submit_application(
    wizard: ApplicationWizard,
    store: CandidateStore,
    jobs: JobCatalog,
    job_id: str,
    *,
    transport: SubmissionTransport | None = None,
    timeout: float | None = None,
) -> SubmissionOutcome:
    """Validate, transmit and store the wizard's draft for ``job_id``.

    The record is inserted and the wizard reset only after ``transport``
    returns within ``timeout`` seconds and the store has saved it. On any
    other outcome the draft, the wizard step and the store are left as they
    were, so the applicant can retry.

    Raises:
        WizardStateError: If the wizard is not on its final step.
        DuplicateIdError: If the generated identifiers collide with a stored record.
    """

    limit = config.SUBMISSION_TIMEOUT_SECONDS if timeout is None else timeout
    with tracer.start_as_current_span("hirelink.submit_application") as span:
        span.set_attribute("hirelink.job_id", job_id)
        try:
            job = jobs.require(job_id)
        except JobPostingNotFoundError as exc:
            logger.warning("Rejected application for unknown job '%s'", job_id)
            span.set_attribute("hirelink.submission_status", SubmissionStatus.JOB_NOT_FOUND.value)
            return SubmissionOutcome(SubmissionStatus.JOB_NOT_FOUND, detail=str(exc))

        prepared = wizard.prepare_record(job)
        if prepared.record is None:
            span.set_attribute("hirelink.submission_status", SubmissionStatus.INVALID.value)
            return SubmissionOutcome(SubmissionStatus.INVALID, errors=prepared.errors)

        record = prepared.record
        span.set_attribute("hirelink.application_id", record.application_id)
        with log_context(candidate_id=record.id, application_id=record.application_id):
            if transport is not None:
                try:
                    _run_transport(transport, record, limit)
                except FuturesTimeoutError:
                    logger.warning("Submission transport exceeded timeout after %.2fs", limit)
                    span.set_attribute("hirelink.submission_status", SubmissionStatus.TIMED_OUT.value)
                    return SubmissionOutcome(
                        SubmissionStatus.TIMED_OUT,
                        detail=f"Transport did not finish within {limit:.2f}s",
                    )
                except Exception as exc:  # noqa: BLE001 - reported to the caller as an outcome
                    logger.warning("Submission transport failed", exc_info=exc)
                    span.record_exception(exc)
                    span.set_attribute("hirelink.submission_status", SubmissionStatus.TRANSPORT_FAILED.value)
                    return SubmissionOutcome(SubmissionStatus.TRANSPORT_FAILED, detail=str(exc) or type(exc).__name__)

            try:
                store.insert(record)
            except SnapshotPersistenceError as exc:
                logger.warning("Submitted application could not be saved", exc_info=exc)
                span.record_exception(exc)
                span.set_attribute("hirelink.submission_status", SubmissionStatus.STORAGE_FAILED.value)
                return SubmissionOutcome(SubmissionStatus.STORAGE_FAILED, detail=str(exc))
            wizard.reset()
            logger.info("Application submitted for job '%s'", job.id)
        span.set_attribute("hirelink.submission_status", SubmissionStatus.SUBMITTED.value)
        return SubmissionOutcome(SubmissionStatus.SUBMITTED, record=record)


__all__ = [
    "SubmissionOutcome",
    "SubmissionStatus",
    "SubmissionTransport",
    "submit_application",
]
