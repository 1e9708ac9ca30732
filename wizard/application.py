"""Three-step application wizard that turns a draft into a candidate record."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Mapping

from pydantic import BaseModel, ValidationError

from core.errors import WizardStateError
from models.application import ApplicationDraft, ResumeRef
from models.candidate import CandidateRecord, CandidateStage
from models.jobs import JobPosting
from utils.ids import generate_application_id, generate_record_id
from utils.logging_context import set_wizard_step
from wizard import validation
from wizard.step_validators import StepErrors, validate_step
from wizard.steps import WIZARD_PAGES, DraftScope, WizardPage, WizardStep, page_by_key, page_for
from wizard.validation import FieldCheck, check_resume, check_skill_entry

logger = logging.getLogger(__name__)

_FIELD_CHECKS: dict[str, Callable[[Any], FieldCheck]] = {
    validation.FULL_NAME: validation.check_full_name,
    validation.EMAIL: validation.check_email,
    validation.PHONE: validation.check_phone,
    validation.YEARS_OF_EXPERIENCE: validation.check_years_of_experience,
    validation.SKILLS: validation.check_skills,
    validation.PORTFOLIO_LINK: validation.check_portfolio_link,
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class StepTransition:
    """Outcome of a navigation request.

    ``errors`` carries the validator result of the step that was checked; a
    refused ``advance`` leaves ``step`` unchanged and ``errors`` non-empty.
    """

    moved: bool
    step: WizardStep
    errors: StepErrors | None = None


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of :meth:`ApplicationWizard.submit`."""

    record: CandidateRecord | None
    errors: StepErrors
    step: WizardStep = WizardStep.RESUME

    @property
    def ok(self) -> bool:
        return self.record is not None


class ApplicationWizard:
    """Three-step application form state machine.

    The wizard owns the draft while it is being filled in. Forward moves are
    gated by the current step's validator; backward moves are always allowed
    and keep whatever was entered. A successful submission hands back a
    :class:`CandidateRecord` and resets the wizard; inserting that record into
    a store is the caller's job.
    """

    def __init__(
        self,
        draft: ApplicationDraft | None = None,
        step: WizardStep = WizardStep.IDENTITY,
        *,
        clock: Callable[[], datetime] = _utcnow,
        application_id_factory: Callable[[], str] = generate_application_id,
        record_id_factory: Callable[[], str] = generate_record_id,
    ) -> None:
        self._draft = draft if draft is not None else ApplicationDraft()
        self._step = WizardStep(step)
        self._clock = clock
        self._application_id_factory = application_id_factory
        self._record_id_factory = record_id_factory
        self._pending_validation_errors: StepErrors | None = None

    @property
    def step(self) -> WizardStep:
        return self._step

    @property
    def draft(self) -> ApplicationDraft:
        return self._draft

    @property
    def current_page(self) -> WizardPage:
        return page_for(self._step)

    @property
    def pages(self) -> tuple[WizardPage, ...]:
        return WIZARD_PAGES

    @property
    def progress(self) -> float:
        """Completion percentage shown in the step header (33, 67, 100)."""

        return (int(self._step) + 1) / len(WIZARD_PAGES) * 100

    @property
    def pending_validation_errors(self) -> StepErrors | None:
        """Errors of the last refused ``advance``, cleared on the next move."""

        return self._pending_validation_errors

    def _set_step(self, step: WizardStep) -> None:
        previous = self._step
        self._step = step
        self._pending_validation_errors = None
        set_wizard_step(page_for(step).key)
        logger.debug("Wizard moved from '%s' to '%s'", page_for(previous).key, page_for(step).key)

    def validate_current_step(self) -> StepErrors:
        return validate_step(self._step, self._draft)

    def advance(self) -> StepTransition:
        """Move to the next step when the current one validates."""

        errors = self.validate_current_step()
        if not errors.valid:
            self._pending_validation_errors = errors
            logger.debug(
                "Wizard refused to leave '%s': %s",
                self.current_page.key,
                ", ".join(errors.errors),
            )
            return StepTransition(moved=False, step=self._step, errors=errors)
        if self._step is WizardStep.RESUME:
            return StepTransition(moved=False, step=self._step, errors=errors)
        self._set_step(WizardStep(self._step + 1))
        return StepTransition(moved=True, step=self._step, errors=errors)

    def retreat(self) -> StepTransition:
        if self._step is WizardStep.IDENTITY:
            return StepTransition(moved=False, step=self._step)
        self._set_step(WizardStep(self._step - 1))
        return StepTransition(moved=True, step=self._step)

    def _section(self, scope: DraftScope | str) -> BaseModel:
        scope = DraftScope(scope)
        if scope is DraftScope.PERSONAL_INFO:
            return self._draft.personal_info
        return self._draft.experience

    def update_field(self, scope: DraftScope | str, field: str, value: Any) -> None:
        """Store ``value`` without validating it.

        Non-text input is stored as its text form; ``None`` clears the field.

        Raises:
            ValueError: If ``scope`` or ``field`` is unknown, or ``field`` is
                ``skills`` (use :meth:`add_skill` / :meth:`remove_skill`).
        """

        section = self._section(scope)
        if field not in type(section).model_fields:
            raise ValueError(f"Unknown field '{field}' for draft section '{scope}'")
        if field == validation.SKILLS:
            raise ValueError("Skills are changed through add_skill/remove_skill")
        if value is None:
            value = None if field == validation.PORTFOLIO_LINK else ""
        elif not isinstance(value, str):
            value = str(value)
        setattr(section, field, value)

    def check_field(self, scope: DraftScope | str, field: str) -> FieldCheck:
        """Validate one field of the draft, e.g. when the input loses focus."""

        section = self._section(scope)
        check = _FIELD_CHECKS.get(field)
        if check is None or field not in type(section).model_fields:
            raise ValueError(f"Unknown field '{field}' for draft section '{scope}'")
        return check(getattr(section, field))

    def add_skill(self, text: str) -> FieldCheck:
        skills = self._draft.experience.skills
        verdict = check_skill_entry(text, skills)
        if verdict.valid:
            skills.append(text.strip())
        return verdict

    def remove_skill(self, text: str) -> bool:
        skills = self._draft.experience.skills
        candidate = text.strip()
        if candidate not in skills:
            return False
        skills.remove(candidate)
        return True

    def select_resume(self, resume: ResumeRef) -> FieldCheck:
        """Attach ``resume`` when it passes the file checks; keep the old one otherwise."""

        verdict = check_resume(resume)
        if verdict.valid:
            self._draft.resume = resume
        return verdict

    def clear_resume(self) -> None:
        self._draft.resume = None

    def _snapshot_draft(self) -> ApplicationDraft:
        snapshot = self._draft.model_copy(deep=True)
        link = snapshot.experience.portfolio_link
        snapshot.experience.portfolio_link = link.strip() if link and link.strip() else None
        return snapshot

    def prepare_record(self, job: JobPosting, *, now: datetime | None = None) -> SubmissionResult:
        """Validate the draft and build the candidate record without resetting.

        Raises:
            WizardStateError: If the wizard is not on the resume step.
        """

        if self._step is not WizardStep.RESUME:
            raise WizardStateError(f"Cannot submit from step '{self.current_page.key}'")
        resume_errors = validate_step(WizardStep.RESUME, self._draft)
        if not resume_errors.valid:
            return SubmissionResult(record=None, errors=resume_errors)
        for step in (WizardStep.IDENTITY, WizardStep.EXPERIENCE):
            errors = validate_step(step, self._draft)
            if not errors.valid:
                logger.warning("Draft step '%s' became invalid before submission", page_for(step).key)
                return SubmissionResult(record=None, errors=errors, step=step)
        record = CandidateRecord(
            id=self._record_id_factory(),
            application_id=self._application_id_factory(),
            job_id=job.id,
            job_title=job.title,
            application_data=self._snapshot_draft(),
            applied_at=now or self._clock(),
            stage=CandidateStage.APPLIED,
        )
        return SubmissionResult(record=record, errors=resume_errors)

    def submit(self, job: JobPosting, *, now: datetime | None = None) -> SubmissionResult:
        result = self.prepare_record(job, now=now)
        if result.record is not None:
            logger.info("Application %s prepared for job '%s'", result.record.application_id, job.id)
            self.reset()
        return result

    def reset(self) -> None:
        self._draft = ApplicationDraft()
        self._set_step(WizardStep.IDENTITY)

    def to_snapshot(self) -> dict[str, Any]:
        """Return the step and draft; resume content is never included."""

        return {
            "current_step": self.current_page.key,
            "draft": self._draft.model_dump(mode="json", by_alias=True),
        }

    @classmethod
    def from_snapshot(cls, payload: Mapping[str, Any] | None, **kwargs: Any) -> "ApplicationWizard":
        """Rebuild a wizard from :meth:`to_snapshot` output, tolerating bad data."""

        if not isinstance(payload, Mapping):
            return cls(**kwargs)
        page = page_by_key(str(payload.get("current_step") or ""))
        step = page.step if page is not None else WizardStep.IDENTITY
        draft_raw = payload.get("draft")
        draft: ApplicationDraft | None = None
        if isinstance(draft_raw, Mapping):
            try:
                draft = ApplicationDraft.model_validate(draft_raw)
            except ValidationError as error:
                logger.warning("Discarding invalid wizard draft snapshot: %s", error)
                step = WizardStep.IDENTITY
        return cls(draft, step, **kwargs)


__all__ = [
    "ApplicationWizard",
    "StepTransition",
    "SubmissionResult",
]
