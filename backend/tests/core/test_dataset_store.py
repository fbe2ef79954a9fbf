"""Dataset Store and Context — lookup, active subset, reproducible sessions."""

from hiretrack.core.context import create_dataset_context
from hiretrack.core.dataset import DatasetStore
from hiretrack.core.domain_types import JobStatus
from tests.factories import make_job, make_report


def _store() -> DatasetStore:
    return DatasetStore(
        jobs=(
            make_job("j1", status=JobStatus.PUBLISHED),
            make_job("j2", status=JobStatus.DRAFT),
            make_job("j3", status=JobStatus.PUBLISHED),
        ),
        reports=(make_report("r1"),),
    )


def test_job_by_id_finds_job():
    assert _store().job_by_id("j2").id == "j2"


def test_job_by_id_unknown_returns_none():
    assert _store().job_by_id("missing") is None


def test_active_jobs_are_published_in_store_order():
    assert [job.id for job in _store().active_jobs()] == ["j1", "j3"]


def test_accessors_return_copies():
    store = _store()
    jobs = store.all_jobs()
    jobs.reverse()
    assert [job.id for job in store.all_jobs()] == ["j1", "j2", "j3"]


def test_all_reports():
    assert [r.id for r in _store().all_reports()] == ["r1"]


def test_context_default_sizes(context):
    assert len(context.store.jobs) == 12
    assert len(context.store.reports) == 5
    assert context.generated_at == context.provider.now


def test_context_is_reproducible_for_a_seed(anchor):
    a = create_dataset_context(seed=3, now=anchor)
    b = create_dataset_context(seed=3, now=anchor)
    assert a.store.jobs == b.store.jobs
    assert a.store.reports == b.store.reports


def test_context_custom_counts(anchor):
    ctx = create_dataset_context(seed=3, job_count=4, report_count=0, now=anchor)
    assert len(ctx.store.jobs) == 4
    assert ctx.store.all_reports() == []
