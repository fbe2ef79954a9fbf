"""Filter Parameters — query-string models converted to core QueryFilters.

Invariants:
    - Each categorical option accepts an enum value or "all" (default)
    - Unknown values are rejected here (400), so the core only sees known values
"""

from typing import Literal

from pydantic import BaseModel, Field

from hiretrack.core.domain_types import (
    ApplicantStatus, JobCategory, JobStatus, JobType, ReportStatus, ReportType,
)
from hiretrack.core.query import QueryFilters

All = Literal["all"]


class JobFilterParams(BaseModel):
    search_text: str = Field("", max_length=200)
    category: JobCategory | All = "all"
    status: JobStatus | All = "all"
    type: JobType | All = "all"

    def to_query_filters(self) -> QueryFilters:
        return QueryFilters.from_options(**self.model_dump())


class ApplicantFilterParams(BaseModel):
    search_text: str = Field("", max_length=200)
    status: ApplicantStatus | All = "all"

    def to_query_filters(self) -> QueryFilters:
        return QueryFilters.from_options(**self.model_dump())


class ReportFilterParams(BaseModel):
    search_text: str = Field("", max_length=200)
    status: ReportStatus | All = "all"
    type: ReportType | All = "all"

    def to_query_filters(self) -> QueryFilters:
        return QueryFilters.from_options(**self.model_dump())


class ApplicationsScreenParams(ApplicantFilterParams):
    job_id: str | None = Field(None, max_length=64)
