"""Record Schemas — response models for jobs, applicants and reports.

Invariants:
    - Built from core entities via dataclasses.asdict; no field is recomputed here
      except the display labels and previews taken from core/display.py
    - Grouped responses carry every status bucket, empty ones included
"""

from dataclasses import asdict
from datetime import datetime

from pydantic import BaseModel

from hiretrack.core.display import (
    BadgeVariant, badge_variant, description_preview, is_actionable,
)
from hiretrack.core.domain_types import (
    ApplicantStatus, JobCategory, JobStatus, JobType, ReportStatus, ReportType,
)
from hiretrack.core.entities import Applicant, Job, Report


class SalaryOut(BaseModel):
    min: int
    max: int
    currency: str


class JobOut(BaseModel):
    id: str
    title: str
    company: str
    category: JobCategory
    type: JobType
    location: str
    remote: bool
    description: str
    requirements: list[str]
    salary: SalaryOut
    posted_by: str
    posted_date: datetime
    deadline: datetime
    status: JobStatus
    applicants_count: int
    badge: BadgeVariant
    description_preview: str

    @classmethod
    def from_entity(cls, job: Job) -> "JobOut":
        return cls.model_validate({
            **asdict(job),
            "badge": badge_variant(job.status),
            "description_preview": description_preview(job.description),
        })


class ApplicantOut(BaseModel):
    id: str
    job_id: str
    name: str
    email: str
    phone: str
    resume: str
    cover_letter: str
    skills: list[str]
    experience: int
    applied_date: datetime
    status: ApplicantStatus
    badge: BadgeVariant
    actionable: bool

    @classmethod
    def from_entity(cls, applicant: Applicant) -> "ApplicantOut":
        return cls.model_validate({
            **asdict(applicant),
            "badge": badge_variant(applicant.status),
            "actionable": is_actionable(applicant),
        })


class ReportOut(BaseModel):
    id: str
    title: str
    description: str
    type: ReportType
    status: ReportStatus
    created_by: str
    created_date: datetime
    updated_date: datetime
    badge: BadgeVariant
    description_preview: str

    @classmethod
    def from_entity(cls, report: Report) -> "ReportOut":
        return cls.model_validate({
            **asdict(report),
            "badge": badge_variant(report.status),
            "description_preview": description_preview(report.description),
        })


class JobList(BaseModel):
    items: list[JobOut]
    count: int


class ApplicantList(BaseModel):
    items: list[ApplicantOut]
    count: int


class ReportList(BaseModel):
    items: list[ReportOut]
    count: int


class GroupedJobs(BaseModel):
    buckets: dict[str, list[JobOut]]
    counts: dict[str, int]


class GroupedApplicants(BaseModel):
    buckets: dict[str, list[ApplicantOut]]
    counts: dict[str, int]


class GroupedReports(BaseModel):
    buckets: dict[str, list[ReportOut]]
    counts: dict[str, int]



class ApplicationsScreenOut(BaseModel):
    jobs: list[JobOut]
    selected_job_id: str | None
    buckets: dict[str, list[ApplicantOut]]
    counts: dict[str, int]
