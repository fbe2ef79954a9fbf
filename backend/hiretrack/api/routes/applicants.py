"""Applicant Routes — a job's application pipeline.

Invariants:
    - Unknown job id on the list routes → 200 with an empty list
    - Unknown applicant id on the detail route → 404
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from hiretrack.api.dependencies import get_queries
from hiretrack.core.errors import ResourceNotFoundError
from hiretrack.schemas.filters import ApplicantFilterParams
from hiretrack.schemas.records import ApplicantList, ApplicantOut, GroupedApplicants
from hiretrack.services.recruitment_queries import RecruitmentQueries

router = APIRouter(prefix="/api/v1/jobs/{job_id}/applicants", tags=["applicants"])

Queries = Annotated[RecruitmentQueries, Depends(get_queries)]


@router.get("", response_model=ApplicantList)
async def list_applicants(
    job_id: str, queries: Queries, params: Annotated[ApplicantFilterParams, Query()],
):
    applicants = queries.list_applicants(job_id, params.to_query_filters())
    return ApplicantList(
        items=[ApplicantOut.from_entity(a) for a in applicants],
        count=len(applicants),
    )


@router.get("/grouped", response_model=GroupedApplicants)
async def group_applicants(
    job_id: str, queries: Queries, params: Annotated[ApplicantFilterParams, Query()],
):
    buckets = queries.group_applicants(job_id, params.to_query_filters())
    return GroupedApplicants(
        buckets={k: [ApplicantOut.from_entity(a) for a in v] for k, v in buckets.items()},
        counts={k: len(v) for k, v in buckets.items()},
    )


@router.get("/{applicant_id}", response_model=ApplicantOut)
async def get_applicant(job_id: str, applicant_id: str, queries: Queries):
    applicant = queries.get_applicant(job_id, applicant_id)
    if applicant is None:
        raise ResourceNotFoundError("Applicant", applicant_id)
    return ApplicantOut.from_entity(applicant)
