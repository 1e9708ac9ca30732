"""Custom exception types for the candidate store and wizard."""

from __future__ import annotations


class HireLinkError(Exception):
    """Base exception for misuse of the intake and review core."""

    code: str = "HIRELINK_ERROR"


class DuplicateIdError(HireLinkError):
    """Raised when a record with the same identifier already exists."""

    code = "DUPLICATE_ID"

    def __init__(self, record_id: str) -> None:
        super().__init__(f"Candidate record '{record_id}' already exists")
        self.record_id = record_id


class CandidateNotFoundError(HireLinkError):
    """Raised when an update targets an unknown candidate id."""

    code = "NOT_FOUND"

    def __init__(self, record_id: str) -> None:
        super().__init__(f"Candidate record '{record_id}' not found")
        self.record_id = record_id


class StageTransitionError(HireLinkError):
    """Raised when a stage move would leave the forward pipeline path."""

    code = "INVALID_TRANSITION"

    def __init__(self, record_id: str, current: str, requested: str) -> None:
        super().__init__(f"Cannot move candidate '{record_id}' from '{current}' to '{requested}'")
        self.record_id = record_id
        self.current = current
        self.requested = requested


class WizardStateError(HireLinkError):
    """Raised when a wizard operation is called from the wrong step."""

    code = "WRONG_STEP"


class JobPostingNotFoundError(HireLinkError):
    """Raised when an application references an unknown job posting."""

    code = "JOB_NOT_FOUND"

    def __init__(self, job_id: str) -> None:
        super().__init__(f"Job posting '{job_id}' not found")
        self.job_id = job_id


class SnapshotPersistenceError(HireLinkError):
    """Raised when the candidate store cannot write its snapshot."""

    code = "PERSISTENCE_FAILED"


__all__ = [
    "CandidateNotFoundError",
    "DuplicateIdError",
    "HireLinkError",
    "JobPostingNotFoundError",
    "SnapshotPersistenceError",
    "StageTransitionError",
    "WizardStateError",
]
