"""Entity Generators — populated Job, Applicant and Report records.

Invariants:
    - salary.max = salary.min + positive offset (never sampled independently)
    - deadline = posted_date + positive offset
    - report.updated_date sampled from [created_date, now]
    - generate_applicants(count, job_id) returns exactly `count` records, all with job_id
    - Output is fully determined by the provider's seed and anchor

Design Decisions:
    - Dependent fields computed from already-sampled ones, so the entity
      __post_init__ checks can only fire on a generator defect
    - `not_before` lets the resolver keep applied_date on or after the job's posted_date
"""

from datetime import datetime, timedelta

from hiretrack.core.domain_types import (
    ApplicantId, ApplicantStatus, DEFAULT_CURRENCY, DEFAULT_RESUME, JOB_CATEGORIES,
    JobId, JobStatus, JobType, REMOTE_LOCATION, ReportId, ReportStatus, ReportType,
    SKILLS,
)
from hiretrack.core.entities import (
    Applicant, Job, MAX_EXPERIENCE_YEARS, MAX_SKILLS, MIN_SKILLS, Report, SalaryRange,
)
from hiretrack.core.randomness import RandomnessProvider

DEFAULT_OWNER = "Sarah Johnson"

SALARY_MIN_RANGE = (30_000, 70_000)
SALARY_SPREAD_RANGE = (10_000, 50_000)
POSTED_WITHIN_DAYS = 30
DEADLINE_HORIZON_DAYS = 182.5
MAX_APPLICANTS_PER_JOB = 50
REQUIREMENTS_RANGE = (3, 8)
APPLIED_WITHIN_DAYS = 14
REPORT_CREATED_WITHIN_DAYS = 30


def generate_job(provider: RandomnessProvider, owner: str = DEFAULT_OWNER) -> Job:
    salary_min = provider.pick(*SALARY_MIN_RANGE)
    salary_max = salary_min + provider.pick(*SALARY_SPREAD_RANGE)
    posted_date = provider.past_timestamp(POSTED_WITHIN_DAYS)
    remote = provider.boolean()
    requirement_count = provider.pick(*REQUIREMENTS_RANGE)

    return Job(
        id=JobId(provider.new_id()),
        title=provider.job_title(),
        company=provider.company_name(),
        category=provider.choice(JOB_CATEGORIES),
        type=provider.choice(tuple(JobType)),
        location=REMOTE_LOCATION if remote else provider.city(),
        remote=remote,
        description=provider.paragraphs(3),
        requirements=tuple(provider.sentence() for _ in range(requirement_count)),
        salary=SalaryRange(min=salary_min, max=salary_max, currency=DEFAULT_CURRENCY),
        posted_by=owner,
        posted_date=posted_date,
        deadline=provider.future_timestamp(posted_date, DEADLINE_HORIZON_DAYS),
        status=provider.choice(tuple(JobStatus)),
        applicants_count=provider.pick(0, MAX_APPLICANTS_PER_JOB),
    )


def generate_jobs(
    provider: RandomnessProvider, count: int, owner: str = DEFAULT_OWNER,
) -> list[Job]:
    """Generate `count` independent jobs."""
    return [generate_job(provider, owner) for _ in range(count)]


def generate_applicant(
    provider: RandomnessProvider, job_id: JobId, not_before: datetime | None = None,
) -> Applicant:
    name = provider.full_name()
    window_start = provider.now - timedelta(days=APPLIED_WITHIN_DAYS)
    if not_before is not None and not_before > window_start:
        window_start = not_before

    return Applicant(
        id=ApplicantId(provider.new_id()),
        job_id=job_id,
        name=name,
        email=provider.email(name),
        phone=provider.phone(),
        resume=DEFAULT_RESUME,
        cover_letter=provider.paragraphs(2),
        skills=tuple(
            provider.choice(SKILLS)
            for _ in range(provider.pick(MIN_SKILLS, MAX_SKILLS))
        ),
        experience=provider.pick(0, MAX_EXPERIENCE_YEARS),
        applied_date=provider.between(window_start, provider.now),
        status=provider.choice(tuple(ApplicantStatus)),
    )


def generate_applicants(
    provider: RandomnessProvider,
    count: int,
    job_id: JobId,
    not_before: datetime | None = None,
) -> list[Applicant]:
    """Generate exactly `count` applicants for one job."""
    return [generate_applicant(provider, job_id, not_before) for _ in range(count)]


def generate_report(provider: RandomnessProvider, owner: str = DEFAULT_OWNER) -> Report:
    created_date = provider.recent_timestamp(REPORT_CREATED_WITHIN_DAYS)
    return Report(
        id=ReportId(provider.new_id()),
        title=provider.sentence(),
        description=provider.paragraphs(2),
        type=provider.choice(tuple(ReportType)),
        status=provider.choice(tuple(ReportStatus)),
        created_by=owner,
        created_date=created_date,
        updated_date=provider.between(created_date, provider.now),
    )


def generate_reports(
    provider: RandomnessProvider, count: int, owner: str = DEFAULT_OWNER,
) -> list[Report]:
    return [generate_report(provider, owner) for _ in range(count)]
