"""Service layer for shared wizard logic."""

from .submission import SubmissionOutcome, SubmissionStatus, submit_application

__all__ = [
    "SubmissionOutcome",
    "SubmissionStatus",
    "submit_application",
]
