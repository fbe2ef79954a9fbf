"""Dataset Store — process-lifetime holder of the generated jobs and reports.

Invariants:
    - Collections are fixed at construction; there are no write operations
    - job_by_id() returns None for unknown ids (not an error)
    - Accessors return fresh lists, so callers cannot reorder the store

Design Decisions:
    - Job index built once in __post_init__; the store is a frozen dataclass
      so it can be shared across requests without synchronization
"""

from dataclasses import dataclass, field

from hiretrack.core.domain_types import JobId, JobStatus
from hiretrack.core.entities import Job, Report


@dataclass(frozen=True)
class DatasetStore:
    """Read-only Job and Report collections with lookup by id."""

    jobs: tuple[Job, ...]
    reports: tuple[Report, ...]
    _job_index: dict[str, Job] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_job_index", {job.id: job for job in self.jobs})

    def all_jobs(self) -> list[Job]:
        return list(self.jobs)

    def job_by_id(self, job_id: JobId | str) -> Job | None:
        return self._job_index.get(job_id)

    def active_jobs(self) -> list[Job]:
        """Jobs currently accepting applications (Published)."""
        return [job for job in self.jobs if job.status is JobStatus.PUBLISHED]

    def all_reports(self) -> list[Report]:
        return list(self.reports)
