"""Aggregation — dashboard counts and the recent-applications feed.

Tests cover:
    - total_applicants sums the authoritative counter, not materialized records
    - recent_applications draws only from the 5 most recently posted jobs
    - Feed is applied_date descending and capped at 5
    - dashboard_summary reflects the store on every call
"""

from hiretrack.core.aggregation import (
    dashboard_counts, dashboard_summary, most_recent_jobs, recent_applications,
    total_applicants,
)
from hiretrack.core.domain_types import JobStatus
from tests.factories import make_context, make_job


def _jobs():
    return [
        make_job("j0", applicants_count=4, posted_days_ago=1, status=JobStatus.DRAFT),
        make_job("j1", applicants_count=0, posted_days_ago=2),
        make_job("j2", applicants_count=6, posted_days_ago=3),
        make_job("j3", applicants_count=2, posted_days_ago=4, status=JobStatus.CLOSED),
        make_job("j4", applicants_count=1, posted_days_ago=5),
        make_job("old", applicants_count=30, posted_days_ago=20),
    ]


def test_total_applicants_sums_counter():
    assert total_applicants(_jobs()) == 43


def test_total_applicants_of_nothing_is_zero():
    assert total_applicants([]) == 0


def test_total_applicants_never_materializes(context):
    assert total_applicants(context.store.all_jobs()) == sum(
        job.applicants_count for job in context.store.jobs
    )
    assert context.resolver._cache == {}


def test_most_recent_jobs_by_posted_date():
    assert [j.id for j in most_recent_jobs(_jobs())] == ["j0", "j1", "j2", "j3", "j4"]


def test_recent_applications_excludes_older_jobs():
    ctx = make_context(_jobs())
    feed = recent_applications(ctx.store.all_jobs(), ctx.resolver)
    assert len(feed) == 5
    assert "old" not in {a.job_id for a in feed}


def test_recent_applications_sorted_newest_first():
    ctx = make_context(_jobs())
    feed = recent_applications(ctx.store.all_jobs(), ctx.resolver, limit=13)
    assert len(feed) == 13
    dates = [a.applied_date for a in feed]
    assert dates == sorted(dates, reverse=True)


def test_recent_applications_empty_when_no_applicants():
    ctx = make_context([make_job("j1", applicants_count=0)])
    assert recent_applications(ctx.store.all_jobs(), ctx.resolver) == []


def test_dashboard_counts():
    ctx = make_context(_jobs())
    assert dashboard_counts(ctx) == {
        "total_jobs": 6, "active_jobs": 4, "total_applicants": 43,
    }


def test_dashboard_summary_for_generated_session(context):
    summary = dashboard_summary(context)
    jobs = context.store.all_jobs()
    assert summary.total_jobs == 12
    assert summary.active_jobs == len([j for j in jobs if j.status is JobStatus.PUBLISHED])
    assert summary.total_applicants == sum(j.applicants_count for j in jobs)
    assert len(summary.upcoming_deadlines) <= 5
    assert all(j.status is JobStatus.PUBLISHED for j in summary.upcoming_deadlines)
    assert len(summary.recent_applications) <= 5


def test_dashboard_summary_is_stable_with_memoized_applicants(context):
    assert dashboard_summary(context) == dashboard_summary(context)
