"""Query Engine — filtering, grouping, sorting and top-N views over collections.

Invariants:
    - Pure: collection in → new list out, input never mutated
    - Order-preserving unless a sort is requested
    - Text search is a case-insensitive substring match over OR-ed fields;
      empty query matches everything
    - Categorical filter is an exact match on the enum value; "all" (or empty)
      disables it; an unknown value matches nothing
    - Active predicates are AND-ed, so their order never changes the result
    - group_by_status(): every record lands in exactly one status bucket and in "all"
    - Sorts are stable (ties keep input order) in both directions

Design Decisions:
    - One QueryFilters shape for every screen; a FilterProfile per entity says
      which record attributes each option reads, unused options are ignored
    - Predicates are plain callables so screens can compose extra ones
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Iterable, Sequence, TypeVar

from hiretrack.core.domain_types import (
    ALL_FILTER, ApplicantStatus, JobCategory, JobStatus, ReportStatus,
)
from hiretrack.core.entities import Applicant, Job, Report

T = TypeVar("T")
Predicate = Callable[[Any], bool]

UPCOMING_DEADLINES_LIMIT = 5


# ─── Filter configuration ───────────────────────────────────────

@dataclass(frozen=True)
class QueryFilters:
    """Recognized filter options; every default means "no filtering"."""
    search_text: str = ""
    category: str = ALL_FILTER
    status: str = ALL_FILTER
    type: str = ALL_FILTER

    @classmethod
    def from_options(cls, **options: Any) -> "QueryFilters":
        """Build from loose options: None, "" and enum members are accepted."""
        values: dict[str, str] = {}
        for name in ("category", "status", "type"):
            raw = options.get(name)
            if isinstance(raw, Enum):
                raw = raw.value
            values[name] = raw or ALL_FILTER
        return cls(search_text=options.get("search_text") or "", **values)

    @property
    def is_empty(self) -> bool:
        return (
            not self.search_text
            and self.category == ALL_FILTER
            and self.status == ALL_FILTER
            and self.type == ALL_FILTER
        )


@dataclass(frozen=True)
class FilterProfile:
    """Which record attributes the search text and categorical options read."""
    search_fields: tuple[str, ...]
    categorical: dict[str, str] = field(default_factory=dict)


JOB_PROFILE = FilterProfile(
    search_fields=("title", "company"),
    categorical={"category": "category", "status": "status", "type": "type"},
)
APPLICANT_PROFILE = FilterProfile(
    search_fields=("name",),
    categorical={"status": "status"},
)
REPORT_PROFILE = FilterProfile(
    search_fields=("title",),
    categorical={"status": "status", "type": "type"},
)


# ─── Predicates ─────────────────────────────────────────────────

def _field_text(value: Any) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def matches_text(query: str, *values: str) -> bool:
    """Case-insensitive substring match against any of `values`."""
    if not query:
        return True
    needle = query.lower()
    return any(needle in value.lower() for value in values)


def text_predicate(query: str, fields: Sequence[str]) -> Predicate:
    return lambda record: matches_text(
        query, *(_field_text(getattr(record, name)) for name in fields)
    )


def categorical_predicate(attribute: str, expected: str) -> Predicate:
    return lambda record: _field_text(getattr(record, attribute)) == expected


def build_predicates(filters: QueryFilters, profile: FilterProfile) -> list[Predicate]:
    """Active predicates only; an empty list means everything matches."""
    predicates: list[Predicate] = []
    if filters.search_text:
        predicates.append(text_predicate(filters.search_text, profile.search_fields))
    for option, attribute in profile.categorical.items():
        expected = getattr(filters, option)
        if expected and expected != ALL_FILTER:
            predicates.append(categorical_predicate(attribute, expected))
    return predicates


def apply_filters(items: Iterable[T], predicates: Sequence[Predicate]) -> list[T]:
    return [item for item in items if all(p(item) for p in predicates)]


def filter_jobs(jobs: Iterable[Job], filters: QueryFilters) -> list[Job]:
    return apply_filters(jobs, build_predicates(filters, JOB_PROFILE))


def filter_applicants(
    applicants: Iterable[Applicant], filters: QueryFilters,
) -> list[Applicant]:
    return apply_filters(applicants, build_predicates(filters, APPLICANT_PROFILE))


def filter_reports(reports: Iterable[Report], filters: QueryFilters) -> list[Report]:
    return apply_filters(reports, build_predicates(filters, REPORT_PROFILE))


# ─── Grouping ───────────────────────────────────────────────────

def group_by_status(items: Iterable[T], statuses: type[Enum]) -> dict[str, list[T]]:
    """Partition into "all" plus one bucket per status value, in enum order."""
    records = list(items)
    buckets: dict[str, list[T]] = {ALL_FILTER: records}
    for status in statuses:
        buckets[status.value] = []
    for record in records:
        buckets[getattr(record, "status").value].append(record)
    return buckets


def group_jobs(jobs: Iterable[Job]) -> dict[str, list[Job]]:
    return group_by_status(jobs, JobStatus)


def group_applicants(applicants: Iterable[Applicant]) -> dict[str, list[Applicant]]:
    return group_by_status(applicants, ApplicantStatus)


def group_reports(reports: Iterable[Report]) -> dict[str, list[Report]]:
    return group_by_status(reports, ReportStatus)


# ─── Sorting & top-N ────────────────────────────────────────────

def sort_by_date(
    items: Iterable[T],
    key: Callable[[T], datetime],
    descending: bool = True,
) -> list[T]:
    """Stable sort on a timestamp; equal keys keep their input order."""
    return sorted(items, key=key, reverse=descending)


def upcoming_deadlines(
    jobs: Iterable[Job], limit: int = UPCOMING_DEADLINES_LIMIT,
) -> list[Job]:
    """Published jobs, closest deadline first, truncated to `limit`."""
    published = [job for job in jobs if job.status is JobStatus.PUBLISHED]
    return sort_by_date(published, key=lambda job: job.deadline, descending=False)[:limit]


def unique_categories(jobs: Iterable[Job]) -> list[JobCategory]:
    """Categories present in `jobs`, in first-appearance order."""
    return list(dict.fromkeys(job.category for job in jobs))
