"""Recruitment Queries — list/get/dashboard operations over a DatasetContext.

Invariants:
    - Read-only: no method mutates the store or a returned record
    - get_job()/get_applicant() return None for unknown ids
    - list_applicants() for an unknown job returns [] (weak contract, see resolver)
    - list_active_jobs() == list_jobs(status=Published), same order
    - Omitted filters mean "no filtering"

Design Decisions:
    - One instance per DatasetContext, created by the shell (app.state)
"""

import logging
from dataclasses import dataclass

from hiretrack.core import query
from hiretrack.core.aggregation import DashboardSummary, dashboard_summary
from hiretrack.core.context import DatasetContext
from hiretrack.core.display import default_selected_job
from hiretrack.core.domain_types import ApplicantId, JobCategory, JobId
from hiretrack.core.entities import Applicant, Job, Report
from hiretrack.core.query import QueryFilters

logger = logging.getLogger(__name__)

_NO_FILTERS = QueryFilters()


@dataclass(frozen=True)
class ApplicationsScreen:
    """Job picker plus the grouped pipeline of the job it has selected."""
    jobs: list[Job]
    selected_job_id: JobId | None
    buckets: dict[str, list[Applicant]]


class RecruitmentQueries:
    """Query surface for the dashboard, job list, pipeline and report screens."""

    def __init__(self, context: DatasetContext):
        self.context = context

    @property
    def store(self):
        return self.context.store

    # --- Jobs -----------------------------------------------------------------

    def list_jobs(self, filters: QueryFilters | None = None) -> list[Job]:
        filters = filters or _NO_FILTERS
        jobs = query.filter_jobs(self.store.all_jobs(), filters)
        logger.debug(
            "list_jobs",
            extra={"filters": filters.__dict__, "result_count": len(jobs)},
        )
        return jobs

    def get_job(self, job_id: JobId | str) -> Job | None:
        return self.store.job_by_id(job_id)

    def list_active_jobs(self, search_text: str = "") -> list[Job]:
        active = self.store.active_jobs()
        if search_text:
            active = query.filter_jobs(active, QueryFilters(search_text=search_text))
        return active

    def group_jobs(self, filters: QueryFilters | None = None) -> dict[str, list[Job]]:
        return query.group_jobs(self.list_jobs(filters))

    def job_categories(self) -> list[JobCategory]:
        return query.unique_categories(self.store.all_jobs())

    # --- Applicants -----------------------------------------------------------

    def list_applicants(
        self, job_id: JobId | str, filters: QueryFilters | None = None,
    ) -> list[Applicant]:
        filters = filters or _NO_FILTERS
        applicants = query.filter_applicants(
            self.context.resolver.applicants_for_job(job_id), filters,
        )
        logger.debug(
            "list_applicants",
            extra={"job_id": job_id, "result_count": len(applicants)},
        )
        return applicants

    def get_applicant(
        self, job_id: JobId | str, applicant_id: ApplicantId | str,
    ) -> Applicant | None:
        return self.context.resolver.applicant_by_id(job_id, applicant_id)

    def group_applicants(
        self, job_id: JobId | str, filters: QueryFilters | None = None,
    ) -> dict[str, list[Applicant]]:
        return query.group_applicants(self.list_applicants(job_id, filters))

    def applications_screen(
        self, job_id: JobId | str | None = None, filters: QueryFilters | None = None,
    ) -> ApplicationsScreen:
        """Without an explicit job the first job in the store is selected."""
        jobs = self.store.all_jobs()
        selected = job_id or default_selected_job(jobs)
        applicants = self.list_applicants(selected, filters) if selected else []
        return ApplicationsScreen(
            jobs=jobs,
            selected_job_id=selected,
            buckets=query.group_applicants(applicants),
        )

    # --- Reports --------------------------------------------------------------

    def list_reports(self, filters: QueryFilters | None = None) -> list[Report]:
        filters = filters or _NO_FILTERS
        reports = query.filter_reports(self.store.all_reports(), filters)
        logger.debug("list_reports", extra={"result_count": len(reports)})
        return reports

    def group_reports(
        self, filters: QueryFilters | None = None,
    ) -> dict[str, list[Report]]:
        return query.group_reports(self.list_reports(filters))

    # --- Dashboard ------------------------------------------------------------

    def dashboard_summary(self) -> DashboardSummary:
        summary = dashboard_summary(self.context)
        logger.info(
            f"Dashboard: {summary.total_jobs} jobs, {summary.active_jobs} active, "
            f"{summary.total_applicants} applicants",
        )
        return summary
