"""Field limits shared by the validation engine and the wizard."""

from __future__ import annotations

from dataclasses import dataclass


PDF_MIME_TYPE = "application/pdf"
DOC_MIME_TYPE = "application/msword"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@dataclass(frozen=True, slots=True)
class ValidationRules:
    """Static limits applied to application fields."""

    full_name_min_length: int = 2
    full_name_max_length: int = 100
    phone_min_digits: int = 10
    years_min: float = 0.0
    years_max: float = 80.0
    skills_min_items: int = 1
    skills_max_items: int = 20
    skill_max_length: int = 50
    notes_max_length: int = 500
    resume_max_bytes: int = 5 * 1024 * 1024
    accepted_resume_types: tuple[str, ...] = (PDF_MIME_TYPE, DOC_MIME_TYPE, DOCX_MIME_TYPE)


RULES = ValidationRules()


__all__ = [
    "DOCX_MIME_TYPE",
    "DOC_MIME_TYPE",
    "PDF_MIME_TYPE",
    "RULES",
    "ValidationRules",
]
