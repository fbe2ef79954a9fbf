"""Relationship Resolver — materializes a job's applicants on demand.

Invariants:
    - Unknown job id → [] ("no applicants" and "unknown job" look the same here)
    - Materialized count == job.applicants_count
    - applied_date of every resolved applicant is >= the job's posted_date
    - memoize=True: repeated calls for a job return the same list contents
    - memoize=False: every call draws a fresh set from the shared stream

Design Decisions:
    - Memoized sets come from provider.spawn(job_id): stable per seed no matter
      which job is resolved first
    - A lock guards the memo table and the shared stream; the store itself is read-only
"""

import logging
import threading

from hiretrack.core.dataset import DatasetStore
from hiretrack.core.domain_types import ApplicantId, JobId
from hiretrack.core.entities import Applicant
from hiretrack.core.generators import generate_applicants
from hiretrack.core.randomness import RandomnessProvider

logger = logging.getLogger(__name__)


class ApplicantResolver:
    """Job 1—* Applicant, resolved through the Dataset Store."""

    def __init__(
        self,
        store: DatasetStore,
        provider: RandomnessProvider,
        memoize: bool = True,
    ):
        self._store = store
        self._provider = provider
        self._memoize = memoize
        self._cache: dict[str, tuple[Applicant, ...]] = {}
        self._lock = threading.Lock()

    @property
    def memoize(self) -> bool:
        return self._memoize

    def applicants_for_job(self, job_id: JobId | str) -> list[Applicant]:
        job = self._store.job_by_id(job_id)
        if job is None:
            return []

        with self._lock:
            if not self._memoize:
                return generate_applicants(
                    self._provider, job.applicants_count, job.id, job.posted_date,
                )
            cached = self._cache.get(job.id)
            if cached is None:
                cached = tuple(generate_applicants(
                    self._provider.spawn(job.id),
                    job.applicants_count, job.id, job.posted_date,
                ))
                self._cache[job.id] = cached
                logger.debug(
                    f"Materialized {len(cached)} applicants",
                    extra={"job_id": job.id, "result_count": len(cached)},
                )
            return list(cached)

    def applicant_by_id(
        self, job_id: JobId | str, applicant_id: ApplicantId | str,
    ) -> Applicant | None:
        """Drill-in lookup; only stable when memoization is on."""
        for applicant in self.applicants_for_job(job_id):
            if applicant.id == applicant_id:
                return applicant
        return None
