"""Dashboard Route — stat cards, upcoming deadlines, recent applications."""

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends

from hiretrack.api.dependencies import get_queries
from hiretrack.schemas.dashboard import DashboardOut
from hiretrack.services.recruitment_queries import RecruitmentQueries

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardOut)
async def dashboard(queries: Annotated[RecruitmentQueries, Depends(get_queries)]):
    return DashboardOut.from_summary(
        queries.dashboard_summary(), now=datetime.now(timezone.utc),
    )
