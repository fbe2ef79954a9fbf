"""Aggregation — dashboard-level reductions over the dataset.

Invariants:
    - total_applicants() sums the authoritative Job.applicants_count counter;
      it never materializes Applicant records
    - recent_applications(): 5 most recently posted jobs → their applicants,
      merged, applied_date descending, first 5
    - Every figure is recomputed from the store on each call (no caching)

Design Decisions:
    - DashboardSummary is a frozen snapshot; the shell serializes it as-is
"""

from dataclasses import dataclass
from typing import Iterable

from hiretrack.core.context import DatasetContext
from hiretrack.core.entities import Applicant, Job
from hiretrack.core.query import sort_by_date, upcoming_deadlines
from hiretrack.core.relationships import ApplicantResolver

RECENT_JOBS_LIMIT = 5
RECENT_APPLICATIONS_LIMIT = 5


@dataclass(frozen=True)
class DashboardSummary:
    total_jobs: int
    active_jobs: int
    total_applicants: int
    upcoming_deadlines: tuple[Job, ...]
    recent_applications: tuple[Applicant, ...]


def total_applicants(jobs: Iterable[Job]) -> int:
    return sum(job.applicants_count for job in jobs)


def most_recent_jobs(jobs: Iterable[Job], limit: int = RECENT_JOBS_LIMIT) -> list[Job]:
    return sort_by_date(jobs, key=lambda job: job.posted_date)[:limit]


def recent_applications(
    jobs: Iterable[Job],
    resolver: ApplicantResolver,
    job_limit: int = RECENT_JOBS_LIMIT,
    limit: int = RECENT_APPLICATIONS_LIMIT,
) -> list[Applicant]:
    """Newest applicants across the most recently posted jobs."""
    merged = [
        applicant
        for job in most_recent_jobs(jobs, job_limit)
        for applicant in resolver.applicants_for_job(job.id)
    ]
    return sort_by_date(merged, key=lambda applicant: applicant.applied_date)[:limit]


def dashboard_counts(context: DatasetContext) -> dict[str, int]:
    jobs = context.store.all_jobs()
    return {
        "total_jobs": len(jobs),
        "active_jobs": len(context.store.active_jobs()),
        "total_applicants": total_applicants(jobs),
    }


def dashboard_summary(context: DatasetContext) -> DashboardSummary:
    """Stat cards, deadline list and recent-applications feed in one snapshot."""
    jobs = context.store.all_jobs()
    counts = dashboard_counts(context)
    return DashboardSummary(
        total_jobs=counts["total_jobs"],
        active_jobs=counts["active_jobs"],
        total_applicants=counts["total_applicants"],
        upcoming_deadlines=tuple(upcoming_deadlines(jobs)),
        recent_applications=tuple(recent_applications(jobs, context.resolver)),
    )
