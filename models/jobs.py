"""Job postings candidates can apply to."""

from __future__ import annotations

from typing import Iterable, Iterator

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from core.errors import JobPostingNotFoundError


class JobPosting(BaseModel):
    """Read-only reference data for an open position."""

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    title: str
    location: str
    description: str
    department: str
    experience_label: str


DEFAULT_JOB_POSTINGS: tuple[JobPosting, ...] = (
    JobPosting(
        id="1",
        title="Senior Frontend Developer",
        location="San Francisco, CA",
        description="Build scalable web applications with React and Next.js. Join our team of passionate engineers.",
        department="Engineering",
        experience_label="5+ years",
    ),
    JobPosting(
        id="2",
        title="Full Stack Engineer",
        location="New York, NY",
        description="Work on end-to-end features using modern web technologies. Shape the future of our platform.",
        department="Engineering",
        experience_label="3+ years",
    ),
    JobPosting(
        id="3",
        title="Product Manager",
        location="Remote",
        description="Lead product vision and strategy for our core offerings. Drive impact across all departments.",
        department="Product",
        experience_label="4+ years",
    ),
    JobPosting(
        id="4",
        title="UX/UI Designer",
        location="Austin, TX",
        description="Design beautiful and intuitive user experiences for millions of users.",
        department="Design",
        experience_label="2+ years",
    ),
)


class JobCatalog:
    """Lookup and search over a fixed set of job postings."""

    def __init__(self, postings: Iterable[JobPosting] = DEFAULT_JOB_POSTINGS) -> None:
        self._postings: dict[str, JobPosting] = {}
        for posting in postings:
            if posting.id in self._postings:
                raise ValueError(f"Duplicate job posting id '{posting.id}'")
            self._postings[posting.id] = posting

    def __iter__(self) -> Iterator[JobPosting]:
        return iter(self._postings.values())

    def __len__(self) -> int:
        return len(self._postings)

    def get(self, job_id: str) -> JobPosting | None:
        return self._postings.get(job_id)

    def require(self, job_id: str) -> JobPosting:
        """Return the posting for ``job_id``.

        Raises:
            JobPostingNotFoundError: If no posting has ``job_id``.
        """

        posting = self._postings.get(job_id)
        if posting is None:
            raise JobPostingNotFoundError(job_id)
        return posting

    def search(self, query: str | None) -> list[JobPosting]:
        """Return postings whose title, location or department contain ``query``."""

        needle = (query or "").strip().casefold()
        if not needle:
            return list(self._postings.values())
        return [
            posting
            for posting in self._postings.values()
            if needle in posting.title.casefold()
            or needle in posting.location.casefold()
            or needle in posting.department.casefold()
        ]


__all__ = ["DEFAULT_JOB_POSTINGS", "JobCatalog", "JobPosting"]
