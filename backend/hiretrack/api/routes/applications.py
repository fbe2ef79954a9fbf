"""Applications Screen Route — job picker plus the selected job's grouped pipeline.

Invariants:
    - No job_id → the first job in the store is selected (null on an empty store)
    - An unknown job_id is echoed back with empty buckets, never a 404
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from hiretrack.api.dependencies import get_queries
from hiretrack.schemas.filters import ApplicationsScreenParams
from hiretrack.schemas.records import ApplicantOut, ApplicationsScreenOut, JobOut
from hiretrack.services.recruitment_queries import RecruitmentQueries

router = APIRouter(prefix="/api/v1/applications", tags=["applications"])


@router.get("", response_model=ApplicationsScreenOut)
async def applications_screen(
    queries: Annotated[RecruitmentQueries, Depends(get_queries)],
    params: Annotated[ApplicationsScreenParams, Query()],
):
    screen = queries.applications_screen(params.job_id, params.to_query_filters())
    return ApplicationsScreenOut(
        jobs=[JobOut.from_entity(j) for j in screen.jobs],
        selected_job_id=screen.selected_job_id,
        buckets={
            k: [ApplicantOut.from_entity(a) for a in v] for k, v in screen.buckets.items()
        },
        counts={k: len(v) for k, v in screen.buckets.items()},
    )
