"""Job Routes — job list, grouping, active jobs, categories and detail.

Invariants:
    - Filters validated by JobFilterParams; unknown enum values → 400
    - Unknown job id on the detail route → 404 (ResourceNotFoundError)
    - Static paths (/grouped, /active, /categories) registered before /{job_id}
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from hiretrack.api.dependencies import get_queries
from hiretrack.core.domain_types import JobCategory
from hiretrack.core.errors import ResourceNotFoundError
from hiretrack.schemas.filters import JobFilterParams
from hiretrack.schemas.records import GroupedJobs, JobList, JobOut
from hiretrack.services.recruitment_queries import RecruitmentQueries

router = APIRouter(prefix="/api/v1/jobs", tags=["jobs"])

Queries = Annotated[RecruitmentQueries, Depends(get_queries)]


@router.get("", response_model=JobList)
async def list_jobs(queries: Queries, params: Annotated[JobFilterParams, Query()]):
    jobs = queries.list_jobs(params.to_query_filters())
    return JobList(items=[JobOut.from_entity(j) for j in jobs], count=len(jobs))


@router.get("/grouped", response_model=GroupedJobs)
async def group_jobs(queries: Queries, params: Annotated[JobFilterParams, Query()]):
    buckets = queries.group_jobs(params.to_query_filters())
    return GroupedJobs(
        buckets={k: [JobOut.from_entity(j) for j in v] for k, v in buckets.items()},
        counts={k: len(v) for k, v in buckets.items()},
    )


@router.get("/active", response_model=JobList)
async def list_active_jobs(
    queries: Queries, search_text: Annotated[str, Query(max_length=200)] = "",
):
    jobs = queries.list_active_jobs(search_text)
    return JobList(items=[JobOut.from_entity(j) for j in jobs], count=len(jobs))


@router.get("/categories", response_model=list[JobCategory])
async def job_categories(queries: Queries):
    return queries.job_categories()


@router.get("/{job_id}", response_model=JobOut)
async def get_job(job_id: str, queries: Queries):
    job = queries.get_job(job_id)
    if job is None:
        raise ResourceNotFoundError("Job", job_id)
    return JobOut.from_entity(job)
