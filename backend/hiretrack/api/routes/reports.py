"""Report Routes — issue report queue with status/type filters."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from hiretrack.api.dependencies import get_queries
from hiretrack.schemas.filters import ReportFilterParams
from hiretrack.schemas.records import GroupedReports, ReportList, ReportOut
from hiretrack.services.recruitment_queries import RecruitmentQueries

router = APIRouter(prefix="/api/v1/reports", tags=["reports"])

Queries = Annotated[RecruitmentQueries, Depends(get_queries)]


@router.get("", response_model=ReportList)
async def list_reports(queries: Queries, params: Annotated[ReportFilterParams, Query()]):
    reports = queries.list_reports(params.to_query_filters())
    return ReportList(items=[ReportOut.from_entity(r) for r in reports], count=len(reports))


@router.get("/grouped", response_model=GroupedReports)
async def group_reports(queries: Queries, params: Annotated[ReportFilterParams, Query()]):
    buckets = queries.group_reports(params.to_query_filters())
    return GroupedReports(
        buckets={k: [ReportOut.from_entity(r) for r in v] for k, v in buckets.items()},
        counts={k: len(v) for k, v in buckets.items()},
    )
