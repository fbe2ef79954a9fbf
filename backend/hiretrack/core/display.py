"""Display Helpers — presentation-neutral labels derived from entity fields.

Invariants:
    - Each badge map covers every member of its status enum
    - deadline_label() uses whole days rounded up: <0 Overdue, 0 Today, 1 Tomorrow
    - description_preview() never returns more than limit + 3 characters
"""

import math
from datetime import datetime
from enum import Enum
from typing import Sequence

from hiretrack.core.domain_types import (
    ACTIONABLE_APPLICANT_STATUSES, ApplicantStatus, JobId, JobStatus, ReportStatus,
)
from hiretrack.core.entities import Applicant, Job


class BadgeVariant(str, Enum):
    DEFAULT = "default"
    SECONDARY = "secondary"
    DESTRUCTIVE = "destructive"
    OUTLINE = "outline"


JOB_STATUS_BADGES: dict[JobStatus, BadgeVariant] = {
    JobStatus.PUBLISHED: BadgeVariant.DEFAULT,
    JobStatus.DRAFT: BadgeVariant.OUTLINE,
    JobStatus.CLOSED: BadgeVariant.SECONDARY,
    JobStatus.FILLED: BadgeVariant.DESTRUCTIVE,
}

APPLICANT_STATUS_BADGES: dict[ApplicantStatus, BadgeVariant] = {
    ApplicantStatus.HIRED: BadgeVariant.DEFAULT,
    ApplicantStatus.SHORTLISTED: BadgeVariant.SECONDARY,
    ApplicantStatus.REJECTED: BadgeVariant.DESTRUCTIVE,
    ApplicantStatus.PENDING: BadgeVariant.OUTLINE,
    ApplicantStatus.REVIEWED: BadgeVariant.OUTLINE,
}

REPORT_STATUS_BADGES: dict[ReportStatus, BadgeVariant] = {
    ReportStatus.NEW: BadgeVariant.OUTLINE,
    ReportStatus.IN_PROGRESS: BadgeVariant.SECONDARY,
    ReportStatus.RESOLVED: BadgeVariant.DEFAULT,
    ReportStatus.CLOSED: BadgeVariant.DESTRUCTIVE,
}

_BADGE_MAPS: dict[type[Enum], dict] = {
    JobStatus: JOB_STATUS_BADGES,
    ApplicantStatus: APPLICANT_STATUS_BADGES,
    ReportStatus: REPORT_STATUS_BADGES,
}


def badge_variant(status: JobStatus | ApplicantStatus | ReportStatus) -> BadgeVariant:
    return _BADGE_MAPS[type(status)][status]


def is_actionable(applicant: Applicant) -> bool:
    """Whether the applicant can still be accepted or rejected."""
    return applicant.status in ACTIONABLE_APPLICANT_STATUSES


def days_until(deadline: datetime, now: datetime) -> int:
    return math.ceil((deadline - now).total_seconds() / 86_400)


def deadline_label(deadline: datetime, now: datetime) -> str:
    days = days_until(deadline, now)
    if days < 0:
        return "Overdue"
    if days == 0:
        return "Today"
    if days == 1:
        return "Tomorrow"
    return f"{days} days left"


def description_preview(text: str, limit: int = 100) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def default_selected_job(jobs: Sequence[Job]) -> JobId | None:
    """The job the applications screen opens on: the first one, if any."""
    return jobs[0].id if jobs else None
