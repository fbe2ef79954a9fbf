"""Dataset Context — the explicit per-process session object.

Invariants:
    - Built exactly once per process/session by create_dataset_context()
    - Same seed + same anchor → identical jobs, reports and memoized applicants
    - Holds the only RandomnessProvider used for on-demand applicant generation

Design Decisions:
    - Passed to every query instead of module-level globals; the HTTP shell
      keeps it on app.state
"""

from dataclasses import dataclass
from datetime import datetime

from hiretrack.core.dataset import DatasetStore
from hiretrack.core.generators import DEFAULT_OWNER, generate_jobs, generate_reports
from hiretrack.core.randomness import RandomnessProvider
from hiretrack.core.relationships import ApplicantResolver

DEFAULT_JOB_COUNT = 12
DEFAULT_REPORT_COUNT = 5


@dataclass(frozen=True)
class DatasetContext:
    provider: RandomnessProvider
    store: DatasetStore
    resolver: ApplicantResolver
    seed: int | str | None
    generated_at: datetime


def create_dataset_context(
    seed: int | str | None = None,
    job_count: int = DEFAULT_JOB_COUNT,
    report_count: int = DEFAULT_REPORT_COUNT,
    owner_name: str = DEFAULT_OWNER,
    memoize_applicants: bool = True,
    now: datetime | None = None,
) -> DatasetContext:
    """Generate the session dataset and wire the resolver to it."""
    provider = RandomnessProvider(seed=seed, now=now)
    store = DatasetStore(
        jobs=tuple(generate_jobs(provider, job_count, owner_name)),
        reports=tuple(generate_reports(provider, report_count, owner_name)),
    )
    resolver = ApplicantResolver(store, provider, memoize=memoize_applicants)
    return DatasetContext(
        provider=provider,
        store=store,
        resolver=resolver,
        seed=provider.seed,
        generated_at=provider.now,
    )
