"""Root conftest — shared fixtures: fixed time anchor, seeded provider, dataset context."""

import os
from datetime import datetime, timezone

import pytest

# Settings read by create_app() must not depend on a developer's .env
os.environ.setdefault("DATASET_SEED", "1234")
os.environ.setdefault("LOG_FORMAT", "text")

from hiretrack.core.context import create_dataset_context
from hiretrack.core.randomness import RandomnessProvider

ANCHOR = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def anchor() -> datetime:
    return ANCHOR


@pytest.fixture
def provider():
    return RandomnessProvider(seed=42, now=ANCHOR)


@pytest.fixture
def context():
    """Generated 12-job / 5-report session, memoized applicants."""
    return create_dataset_context(seed=42, now=ANCHOR)
