"""API test fixtures — FastAPI app around a hand-built dataset + httpx client.

Invariants:
    - Every test gets an app whose app.state.queries wraps a known context
    - ASGITransport does not run the lifespan, so no dataset is generated implicitly
"""

import pytest
from httpx import ASGITransport, AsyncClient

from hiretrack.core.domain_types import (
    JobCategory, JobStatus, JobType, ReportStatus, ReportType,
)
from hiretrack.main import create_app
from tests.factories import make_context, make_job, make_report


@pytest.fixture
def api_context():
    jobs = [
        make_job("j-eng", title="Senior Software Engineer", status=JobStatus.PUBLISHED,
                 category=JobCategory.ENGINEERING, applicants_count=6, deadline_in_days=3),
        make_job("j-design", title="Product Designer", status=JobStatus.DRAFT,
                 category=JobCategory.DESIGN, type=JobType.CONTRACT, applicants_count=0),
        make_job("j-sales", title="Account Executive", status=JobStatus.PUBLISHED,
                 category=JobCategory.SALES, applicants_count=4, deadline_in_days=1),
        make_job("j-fin", title="Financial Analyst", status=JobStatus.FILLED,
                 category=JobCategory.FINANCE, applicants_count=2),
    ]
    reports = [
        make_report("r-1", title="Search is slow", status=ReportStatus.NEW),
        make_report("r-2", title="Add CSV export", type=ReportType.FEATURE_REQUEST,
                    status=ReportStatus.IN_PROGRESS),
    ]
    return make_context(jobs, reports)


@pytest.fixture
async def client(api_context):
    app = create_app(api_context)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def bare_client():
    """Client for an app that has not generated its dataset yet."""
    app = create_app()
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
