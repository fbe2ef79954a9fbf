"""Randomness Provider — identifiers and pseudo-random values for the generators.

Invariants:
    - new_id() never repeats within a provider family (a root and every spawned child)
    - pick(low, high) is inclusive on both ends
    - past_timestamp() < now, future_timestamp(base, ...) > base
    - recent_timestamp(days) and between(start, end) stay inside their bounds
    - Text and numbers come from one seeded Faker instance; no module-level state

Design Decisions:
    - Faker (seed_instance) for names, companies, cities, phones and lorem text;
      its per-instance random.Random drives numbers, choices and timestamps too
    - `now` is captured once per provider: every timestamp in a session is relative
      to the same anchor, and tests pin it
    - spawn(key) derives a child Faker from (seed, key), so a memoized per-job
      applicant set does not depend on the order jobs are resolved in
    - Not thread-safe: callers confine a provider to one thread or hold a lock
"""

from datetime import datetime, timedelta, timezone
from typing import Sequence, TypeVar

from faker import Faker

T = TypeVar("T")

SECONDS_PER_DAY = 86_400
FAKER_LOCALE = "en_US"


class RandomnessProvider:
    """Seedable source of ids, numbers, choices, timestamps and filler text."""

    def __init__(
        self,
        seed: int | str | None = None,
        now: datetime | None = None,
        issued: set[str] | None = None,
    ):
        self._seed = seed
        self._faker = Faker(FAKER_LOCALE)
        self._faker.seed_instance(seed)
        self._rng = self._faker.random
        self.now = now or datetime.now(timezone.utc)
        self._issued = issued if issued is not None else set()

    @property
    def seed(self) -> int | str | None:
        return self._seed

    def spawn(self, key: str) -> "RandomnessProvider":
        """Child provider with its own stream, the same anchor and the same id registry."""
        if self._seed is None:
            child_seed: int | str = self._rng.getrandbits(64)
        else:
            child_seed = f"{self._seed}:{key}"
        return RandomnessProvider(seed=child_seed, now=self.now, issued=self._issued)

    # --- Identifiers & numbers ------------------------------------------------

    def new_id(self) -> str:
        """Random UUID4 string, unique among ids issued by this provider family."""
        while True:
            token = self._faker.uuid4()
            if token not in self._issued:
                self._issued.add(token)
                return token

    def pick(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)

    def choice(self, options: Sequence[T]) -> T:
        return self._rng.choice(options)

    def boolean(self) -> bool:
        return self._faker.pybool()

    # --- Timestamps -----------------------------------------------------------

    def past_timestamp(self, within_days: float) -> datetime:
        """Instant strictly before `now`, at most `within_days` ago."""
        offset = self._rng.uniform(1.0, within_days * SECONDS_PER_DAY)
        return self.now - timedelta(seconds=offset)

    def future_timestamp(self, base: datetime, horizon_days: float) -> datetime:
        """Instant strictly after `base`, at most `horizon_days` later."""
        offset = self._rng.uniform(1.0, horizon_days * SECONDS_PER_DAY)
        return base + timedelta(seconds=offset)

    def recent_timestamp(self, within_days: float) -> datetime:
        """Instant in [now - within_days, now]."""
        return self.between(self.now - timedelta(days=within_days), self.now)

    def between(self, start: datetime, end: datetime) -> datetime:
        """Instant in [start, end]; `start` when the interval is empty."""
        span = (end - start).total_seconds()
        if span <= 0:
            return start
        moment = start + timedelta(seconds=self._rng.uniform(0.0, span))
        return min(moment, end)

    # --- Text -----------------------------------------------------------------

    def sentence(self) -> str:
        return self._faker.sentence()

    def paragraphs(self, count: int) -> str:
        return "\n".join(self._faker.paragraphs(nb=count))

    def full_name(self) -> str:
        return f"{self._faker.first_name()} {self._faker.last_name()}"

    def email(self, name: str | None = None) -> str:
        """Address whose local part is built from `name` (a fresh one when omitted)."""
        first, _, last = (name or self.full_name()).partition(" ")
        local = "".join(ch for ch in f"{first}.{last}".lower() if ch.isalnum() or ch == ".")
        return f"{local}{self.pick(1, 99)}@{self._faker.free_email_domain()}"

    def phone(self) -> str:
        return self._faker.phone_number()

    def company_name(self) -> str:
        return self._faker.company()

    def job_title(self) -> str:
        return self._faker.job()

    def city(self) -> str:
        return self._faker.city()
