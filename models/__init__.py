"""Pydantic models for application drafts, candidates and job postings."""

from .application import ApplicationDraft, Experience, PersonalInfo, ResumeRef, SubmittedApplication
from .candidate import (
    PIPELINE_STAGES,
    STAGE_LABELS,
    CandidateRecord,
    CandidateStage,
    CandidateUpdate,
    InterviewType,
)
from .jobs import DEFAULT_JOB_POSTINGS, JobCatalog, JobPosting

__all__ = [
    "ApplicationDraft",
    "CandidateRecord",
    "CandidateStage",
    "CandidateUpdate",
    "DEFAULT_JOB_POSTINGS",
    "Experience",
    "InterviewType",
    "JobCatalog",
    "JobPosting",
    "PIPELINE_STAGES",
    "PersonalInfo",
    "ResumeRef",
    "STAGE_LABELS",
    "SubmittedApplication",
]
