"""Read-only projections of the candidate store for the recruiter board."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from models.candidate import PIPELINE_STAGES, STAGE_LABELS, CandidateRecord, CandidateStage
from utils.i18n import tr

CARD_SKILL_PREVIEW = 2


def group_by_stage(records: Iterable[CandidateRecord]) -> dict[CandidateStage, list[CandidateRecord]]:
    """Bucket ``records`` by stage.

    Every stage is present, in pipeline order, even when empty. Records keep
    their relative order from ``records`` inside each bucket.
    """

    buckets: dict[CandidateStage, list[CandidateRecord]] = {stage: [] for stage in PIPELINE_STAGES}
    for record in records:
        buckets[record.stage].append(record)
    return buckets


def stage_counts(records: Iterable[CandidateRecord]) -> dict[CandidateStage, int]:
    """Return the number of records per stage, including zero counts."""

    return {stage: len(bucket) for stage, bucket in group_by_stage(records).items()}


@dataclass(frozen=True)
class CandidateCard:
    """Compact summary rendered for a candidate on the board."""

    id: str
    application_id: str
    full_name: str
    email: str
    job_title: str
    score: Optional[int]
    skills: tuple[str, ...]
    more_skills: int

    @classmethod
    def from_record(cls, record: CandidateRecord) -> "CandidateCard":
        data = record.application_data
        skills = data.experience.skills
        return cls(
            id=record.id,
            application_id=record.application_id,
            full_name=data.personal_info.full_name,
            email=data.personal_info.email,
            job_title=record.job_title,
            score=record.score,
            skills=tuple(skills[:CARD_SKILL_PREVIEW]),
            more_skills=max(len(skills) - CARD_SKILL_PREVIEW, 0),
        )


@dataclass(frozen=True)
class StageColumn:
    stage: CandidateStage
    label: str
    cards: tuple[CandidateCard, ...]

    @property
    def count(self) -> int:
        return len(self.cards)


def build_board(
    records: Iterable[CandidateRecord],
    lang: str | None = None,
    *,
    stage: CandidateStage | str | None = None,
) -> list[StageColumn]:
    """Return one column per stage, optionally restricted to a single ``stage``."""

    selected = CandidateStage(stage) if stage is not None else None
    columns: list[StageColumn] = []
    for column_stage, bucket in group_by_stage(records).items():
        if selected is not None and column_stage is not selected:
            continue
        label = tr(*STAGE_LABELS[column_stage], lang=lang)
        columns.append(
            StageColumn(
                stage=column_stage,
                label=label,
                cards=tuple(CandidateCard.from_record(record) for record in bucket),
            )
        )
    return columns


__all__ = [
    "CandidateCard",
    "StageColumn",
    "build_board",
    "group_by_stage",
    "stage_counts",
]
