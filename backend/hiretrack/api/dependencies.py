"""Route Dependencies — resolve the per-process query surface from app.state."""

from fastapi import Request

from hiretrack.core.errors import DatasetUnavailableError
from hiretrack.services.recruitment_queries import RecruitmentQueries


def get_queries(request: Request) -> RecruitmentQueries:
    queries = getattr(request.app.state, "queries", None)
    if queries is None:
        raise DatasetUnavailableError()
    return queries
