"""Domain Types — identity types, closed enums and fixed vocabularies.

Invariants:
    - JobId, ApplicantId, ReportId wrap opaque str tokens — never compare ids to other fields
    - Every status is a closed Enum; code that branches on a status covers all members
    - JOB_CATEGORIES has exactly 10 members, SKILLS is the only skill vocabulary

Design Decisions:
    - str Enums: values are the display strings ("In Progress"), JSON-serializable as-is
    - ALL_FILTER sentinel lives here so filters and schemas share one spelling
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

JobId = NewType("JobId", str)
ApplicantId = NewType("ApplicantId", str)
ReportId = NewType("ReportId", str)


# ─── Enums ───────────────────────────────────────────────────────

class JobStatus(str, Enum):
    """Job lifecycle — changed only outside the core."""
    DRAFT = "Draft"
    PUBLISHED = "Published"
    CLOSED = "Closed"
    FILLED = "Filled"


class JobType(str, Enum):
    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    CONTRACT = "Contract"
    TEMPORARY = "Temporary"
    INTERNSHIP = "Internship"


class JobCategory(str, Enum):
    """The closed set of 10 job categories."""
    SOFTWARE_DEVELOPMENT = "Software Development"
    DESIGN = "Design"
    MARKETING = "Marketing"
    SALES = "Sales"
    CUSTOMER_SERVICE = "Customer Service"
    FINANCE = "Finance"
    HUMAN_RESOURCES = "Human Resources"
    ADMINISTRATION = "Administration"
    ENGINEERING = "Engineering"
    PRODUCT_MANAGEMENT = "Product Management"


class ApplicantStatus(str, Enum):
    """Applicant pipeline stage."""
    PENDING = "Pending"
    REVIEWED = "Reviewed"
    SHORTLISTED = "Shortlisted"
    REJECTED = "Rejected"
    HIRED = "Hired"


class ReportType(str, Enum):
    TECHNICAL_ISSUE = "Technical Issue"
    FEATURE_REQUEST = "Feature Request"
    CANDIDATE_ISSUE = "Candidate Issue"
    OTHER = "Other"


class ReportStatus(str, Enum):
    NEW = "New"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"
    CLOSED = "Closed"


# ─── Constants ───────────────────────────────────────────────────

ALL_FILTER = "all"
REMOTE_LOCATION = "Remote"
DEFAULT_CURRENCY = "USD"
DEFAULT_RESUME = "resume.pdf"

# Applicants eligible for accept/reject in the review screen
ACTIONABLE_APPLICANT_STATUSES: frozenset[ApplicantStatus] = frozenset({
    ApplicantStatus.PENDING,
    ApplicantStatus.REVIEWED,
})

JOB_CATEGORIES: tuple[JobCategory, ...] = tuple(JobCategory)

SKILLS: tuple[str, ...] = (
    "JavaScript", "TypeScript", "React", "Vue", "Angular", "Node.js",
    "Python", "Java", "C#", "PHP", "Ruby", "Go", "Swift", "Kotlin",
    "SQL", "MongoDB", "PostgreSQL", "MySQL", "Firebase",
    "AWS", "Azure", "Google Cloud", "Docker", "Kubernetes",
    "UI/UX Design", "Figma", "Adobe XD", "Sketch",
    "Marketing", "SEO", "Content Writing", "Social Media",
    "Sales", "CRM", "Lead Generation",
    "Customer Service", "Help Desk", "Support",
    "Finance", "Accounting", "Budgeting",
    "HR", "Recruitment", "Onboarding",
    "Project Management", "Agile", "Scrum", "Kanban",
    "Communication", "Team Management", "Leadership",
)
