"""Entity Generators — field constraints and cross-field invariants.

Tests cover:
    - Job: salary.min < salary.max, deadline > posted_date, counts and lengths in range
    - Job: remote ⇔ location == "Remote"
    - Applicant: exact count, shared job_id, experience and skills bounds
    - Applicant: not_before keeps applied_date at or after the bound
    - Report: updated_date >= created_date
    - Same seed → same records
"""

from datetime import timedelta

import pytest

from hiretrack.core.domain_types import JobId, SKILLS
from hiretrack.core.entities import SalaryRange
from hiretrack.core.errors import InvariantViolationError
from hiretrack.core.generators import (
    generate_applicants, generate_jobs, generate_reports,
)
from hiretrack.core.randomness import RandomnessProvider


def test_generate_jobs_returns_requested_count(provider):
    assert len(generate_jobs(provider, 12)) == 12
    assert generate_jobs(provider, 0) == []


def test_job_invariants_hold_for_many_jobs(provider):
    for job in generate_jobs(provider, 300):
        assert 0 < job.salary.min < job.salary.max
        assert 30_000 <= job.salary.min <= 70_000
        assert 10_000 <= job.salary.max - job.salary.min <= 50_000
        assert job.deadline > job.posted_date
        assert job.posted_date < provider.now
        assert 0 <= job.applicants_count <= 50
        assert 3 <= len(job.requirements) <= 8
        assert job.salary.currency == "USD"


def test_remote_jobs_use_remote_location(provider):
    for job in generate_jobs(provider, 100):
        assert (job.location == "Remote") == job.remote


def test_jobs_get_distinct_ids(provider):
    jobs = generate_jobs(provider, 50)
    assert len({job.id for job in jobs}) == 50


def test_owner_name_is_configurable(provider):
    jobs = generate_jobs(provider, 3, owner="Alex Kim")
    assert {job.posted_by for job in jobs} == {"Alex Kim"}


def test_generate_applicants_exact_count_and_job_id(provider):
    applicants = generate_applicants(provider, 7, JobId("job-9"))
    assert len(applicants) == 7
    assert {a.job_id for a in applicants} == {"job-9"}


def test_applicant_invariants_hold(provider):
    for applicant in generate_applicants(provider, 300, JobId("job-1")):
        assert 0 <= applicant.experience <= 15
        assert 3 <= len(applicant.skills) <= 8
        assert all(skill in SKILLS for skill in applicant.skills)
        assert provider.now - timedelta(days=14) <= applicant.applied_date <= provider.now


def test_applied_date_respects_not_before(provider):
    bound = provider.now - timedelta(days=2)
    for applicant in generate_applicants(provider, 100, JobId("job-1"), not_before=bound):
        assert bound <= applicant.applied_date <= provider.now


def test_not_before_older_than_window_keeps_window(provider):
    bound = provider.now - timedelta(days=60)
    for applicant in generate_applicants(provider, 50, JobId("job-1"), not_before=bound):
        assert applicant.applied_date >= provider.now - timedelta(days=14)


def test_zero_applicants(provider):
    assert generate_applicants(provider, 0, JobId("job-1")) == []


def test_report_invariants_hold(provider):
    for report in generate_reports(provider, 300):
        assert report.updated_date >= report.created_date
        assert report.updated_date <= provider.now
        assert report.created_date >= provider.now - timedelta(days=30)


def test_generation_is_reproducible(anchor):
    a = RandomnessProvider(seed=11, now=anchor)
    b = RandomnessProvider(seed=11, now=anchor)
    assert generate_jobs(a, 5) == generate_jobs(b, 5)
    assert generate_reports(a, 5) == generate_reports(b, 5)


def test_salary_range_rejects_inverted_bounds():
    with pytest.raises(InvariantViolationError):
        SalaryRange(min=50_000, max=50_000, currency="USD")
