"""Client-side job filtering over an already-fetched list."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Iterable

from jobdash.models import Job


@dataclass(frozen=True)
class FilterCriteria:
    search: str = ""
    role: str = ""
    location: str = ""
    job_type: str = ""
    work_mode: str = ""

    def active_count(self) -> int:
        return sum(1 for f in fields(self) if getattr(self, f.name))

    def is_empty(self) -> bool:
        return self.active_count() == 0


def _contains(haystack: str | None, needle: str) -> bool:
    return needle.lower() in (haystack or "").lower()


def matches(job: Job, criteria: FilterCriteria) -> bool:
    if criteria.search and not (
        _contains(job.title, criteria.search) or _contains(job.company, criteria.search)
    ):
        return False
    if criteria.role and not _contains(job.title, criteria.role):
        return False
    if criteria.location and not _contains(job.location, criteria.location):
        return False
    if criteria.job_type and job.job_type != criteria.job_type:
        return False
    if criteria.work_mode and job.work_mode != criteria.work_mode:
        return False
    return True


def filter_jobs(jobs: Iterable[Job], criteria: FilterCriteria) -> list[Job]:
    """Jobs satisfying every active criterion, in their original order."""
    return [job for job in jobs if matches(job, criteria)]
