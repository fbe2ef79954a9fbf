"""Entities — immutable Job, Applicant and Report records.

Invariants:
    - SalaryRange: 0 < min < max
    - Job: deadline > posted_date, applicants_count >= 0
    - Applicant: experience in [0, 15], 3 <= len(skills) <= 8
    - Report: updated_date >= created_date
    - All sequence fields are tuples — a record never changes after construction

Design Decisions:
    - Frozen dataclasses with __post_init__ checks: generators compute dependent
      fields from validated ones, the checks only catch generator defects
    - Timestamps are timezone-aware UTC datetimes
"""

from dataclasses import dataclass
from datetime import datetime

from hiretrack.core.domain_types import (
    ApplicantId, ApplicantStatus, JobCategory, JobId, JobStatus, JobType,
    ReportId, ReportStatus, ReportType,
)
from hiretrack.core.errors import InvariantViolationError

MIN_SKILLS = 3
MAX_SKILLS = 8
MAX_EXPERIENCE_YEARS = 15


@dataclass(frozen=True)
class SalaryRange:
    min: int
    max: int
    currency: str

    def __post_init__(self) -> None:
        if self.min <= 0:
            raise InvariantViolationError("SalaryRange", "min > 0")
        if self.min >= self.max:
            raise InvariantViolationError("SalaryRange", "min < max")


@dataclass(frozen=True)
class Job:
    id: JobId
    title: str
    company: str
    category: JobCategory
    type: JobType
    location: str
    remote: bool
    description: str
    requirements: tuple[str, ...]
    salary: SalaryRange
    posted_by: str
    posted_date: datetime
    deadline: datetime
    status: JobStatus
    applicants_count: int

    def __post_init__(self) -> None:
        if self.deadline <= self.posted_date:
            raise InvariantViolationError("Job", "deadline > posted_date")
        if self.applicants_count < 0:
            raise InvariantViolationError("Job", "applicants_count >= 0")


@dataclass(frozen=True)
class Applicant:
    id: ApplicantId
    job_id: JobId
    name: str
    email: str
    phone: str
    resume: str
    cover_letter: str
    skills: tuple[str, ...]  # may repeat a skill
    experience: int
    applied_date: datetime
    status: ApplicantStatus

    def __post_init__(self) -> None:
        if not 0 <= self.experience <= MAX_EXPERIENCE_YEARS:
            raise InvariantViolationError("Applicant", "0 <= experience <= 15")
        if not MIN_SKILLS <= len(self.skills) <= MAX_SKILLS:
            raise InvariantViolationError("Applicant", "3 <= len(skills) <= 8")


@dataclass(frozen=True)
class Report:
    id: ReportId
    title: str
    description: str
    type: ReportType
    status: ReportStatus
    created_by: str
    created_date: datetime
    updated_date: datetime

    def __post_init__(self) -> None:
        if self.updated_date < self.created_date:
            raise InvariantViolationError("Report", "updated_date >= created_date")
