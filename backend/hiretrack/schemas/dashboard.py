"""Dashboard Schemas — stat cards, upcoming deadlines and recent applications."""

from datetime import datetime

from pydantic import BaseModel

from hiretrack.core.aggregation import DashboardSummary
from hiretrack.core.display import deadline_label
from hiretrack.schemas.records import ApplicantOut, JobOut


class UpcomingDeadlineOut(JobOut):
    deadline_label: str


class DashboardOut(BaseModel):
    total_jobs: int
    active_jobs: int
    total_applicants: int
    upcoming_deadlines: list[UpcomingDeadlineOut]
    recent_applications: list[ApplicantOut]

    @classmethod
    def from_summary(cls, summary: DashboardSummary, now: datetime) -> "DashboardOut":
        return cls(
            total_jobs=summary.total_jobs,
            active_jobs=summary.active_jobs,
            total_applicants=summary.total_applicants,
            upcoming_deadlines=[
                UpcomingDeadlineOut(
                    **JobOut.from_entity(job).model_dump(),
                    deadline_label=deadline_label(job.deadline, now),
                )
                for job in summary.upcoming_deadlines
            ],
            recent_applications=[
                ApplicantOut.from_entity(a) for a in summary.recent_applications
            ],
        )
