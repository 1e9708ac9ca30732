"""Application wizard package."""

from __future__ import annotations

from .application import ApplicationWizard, StepTransition, SubmissionResult
from .steps import WIZARD_PAGES, DraftScope, WizardPage, WizardStep

__all__ = [
    "ApplicationWizard",
    "DraftScope",
    "StepTransition",
    "SubmissionResult",
    "WIZARD_PAGES",
    "WizardPage",
    "WizardStep",
]
