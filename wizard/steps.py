"""Static metadata for the three application wizard steps."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum
from typing import Tuple

from wizard import validation
from utils.i18n import LocalizedText


class WizardStep(IntEnum):
    IDENTITY = 0
    EXPERIENCE = 1
    RESUME = 2


class DraftScope(StrEnum):
    """Draft sections that accept free-form field updates."""

    PERSONAL_INFO = "personal_info"
    EXPERIENCE = "experience"


@dataclass(frozen=True)
class WizardPage:
    """Static metadata describing an individual wizard step.

    Keeping labels and field lists apart from the state machine lets every
    display surface render the same step order and translations.
    """

    step: WizardStep
    key: str
    label: LocalizedText
    fields: Tuple[str, ...]
    scope: DraftScope | None = None

    def translate(self, pair: LocalizedText, lang: str) -> str:
        """Return the language-specific variant from ``pair``."""

        if lang.lower().startswith("de"):
            return pair[0]
        return pair[1]

    def label_for(self, lang: str) -> str:
        """Return the localised label for the step."""

        return self.translate(self.label, lang)


WIZARD_PAGES: Tuple[WizardPage, ...] = (
    WizardPage(
        step=WizardStep.IDENTITY,
        key="identity",
        label=("Persönliche Angaben", "Personal Information"),
        fields=(validation.FULL_NAME, validation.EMAIL, validation.PHONE),
        scope=DraftScope.PERSONAL_INFO,
    ),
    WizardPage(
        step=WizardStep.EXPERIENCE,
        key="experience",
        label=("Erfahrung & Fähigkeiten", "Experience & Skills"),
        fields=(validation.YEARS_OF_EXPERIENCE, validation.SKILLS, validation.PORTFOLIO_LINK),
        scope=DraftScope.EXPERIENCE,
    ),
    WizardPage(
        step=WizardStep.RESUME,
        key="resume",
        label=("Lebenslauf hochladen", "Resume Upload"),
        fields=(validation.RESUME,),
    ),
)

_PAGES_BY_KEY = {page.key: page for page in WIZARD_PAGES}


def page_for(step: WizardStep) -> WizardPage:
    return WIZARD_PAGES[int(step)]


def page_by_key(key: str) -> WizardPage | None:
    return _PAGES_BY_KEY.get(key)


__all__ = [
    "DraftScope",
    "WIZARD_PAGES",
    "WizardPage",
    "WizardStep",
    "page_by_key",
    "page_for",
]
