"""
Schedule report generation as chat-ready text lines.
"""

from dataclasses import dataclass, field
from datetime import date

from core.config import DEFAULT_SCHEDULE_TITLE, LAST_WORKING_ISO_WEEKDAY, MILESTONES_HEADER
from core.errors import DanglingReferenceError
from models.forecast import Dataset, DateRange, Person, Project


@dataclass
class AllocationEntry:
    project: Project
    allocation: float
    notes: str | None = None


@dataclass
class MilestoneEntry:
    project: Project
    name: str


@dataclass
class DayBucket:
    """Milestones and per-person allocations for one calendar day."""

    milestones: list[MilestoneEntry] = field(default_factory=list)
    people: dict[int, list[AllocationEntry]] = field(default_factory=dict)


# =============================================================================
# FORMATTING
# =============================================================================


def ordinal_suffix(day: int) -> str:
    return "th" if 11 <= day <= 13 else {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def format_day_header(d: date) -> str:
    """Format date as 'Mon 3rd Feb'."""
    return f"{d.strftime('%a')} {d.day}{ordinal_suffix(d.day)} {d.strftime('%b')}"


def format_allocation(allocation: float) -> str:
    """8.0 -> '8', 4.5 -> '4.5'."""
    if isinstance(allocation, float) and allocation.is_integer():
        return str(int(allocation))
    return str(allocation)


def format_person_short(person: Person) -> str:
    """First name and last-name initial, e.g. 'Ada L'."""
    initial = person["last_name"][:1]
    return f"{person['first_name']} {initial}" if initial else person["first_name"]


def is_working_day(d: date) -> bool:
    return d.isoweekday() <= LAST_WORKING_ISO_WEEKDAY


# =============================================================================
# BUCKETING
# =============================================================================


def lookup_project(dataset: Dataset, project_id) -> Project:
    try:
        return dataset.projects_by_id[project_id]
    except KeyError:
        raise DanglingReferenceError("project", project_id) from None


def lookup_person(dataset: Dataset, person_id) -> Person:
    try:
        return dataset.people_by_id[person_id]
    except KeyError:
        raise DanglingReferenceError("person", person_id) from None


def build_day_buckets(dataset: Dataset, date_range: DateRange) -> dict[str, DayBucket]:
    """
    Group assignments and milestones by day.

    Keys are 'YYYY-MM-DD' in the order the days were first seen: assignments
    first, then milestones. Days outside the range and weekends are skipped.
    Assignments that cover several days add one entry per day.
    """
    buckets: dict[str, DayBucket] = {}

    for assignment in dataset.assignments:
        span = DateRange.from_iso(assignment["start_date"], assignment["end_date"])
        for day in span.days():
            if not (date_range.contains(day) and is_working_day(day)):
                continue
            bucket = buckets.setdefault(day.isoformat(), DayBucket())
            bucket.people.setdefault(assignment["person_id"], []).append(
                AllocationEntry(
                    project=lookup_project(dataset, assignment["project_id"]),
                    allocation=assignment["allocation"],
                    notes=assignment.get("notes"),
                )
            )

    for milestone in dataset.milestones or []:
        day = date.fromisoformat(milestone["date"])
        if not (date_range.contains(day) and is_working_day(day)):
            continue
        bucket = buckets.setdefault(day.isoformat(), DayBucket())
        bucket.milestones.append(
            MilestoneEntry(
                project=lookup_project(dataset, milestone["project_id"]),
                name=milestone["name"],
            )
        )

    return buckets


# =============================================================================
# RENDERING
# =============================================================================


def build_report(dataset: Dataset, date_range: DateRange, title: str | None = None) -> list[str]:
    """
    Render a schedule as lines of text.

    Layout:
        Schedule:
        \\tMon 3rd Feb:
        \\t\\tMILESTONES:
        \\t\\t\\tLaunch - Engine
        \\t\\tAda L:
        \\t\\t\\t8 hours - Engine

    Raises:
        DanglingReferenceError: a record points at an unknown person/project
    """
    lines = [title or DEFAULT_SCHEDULE_TITLE]

    for day, bucket in build_day_buckets(dataset, date_range).items():
        lines.append(f"\t{format_day_header(date.fromisoformat(day))}:")

        if bucket.milestones:
            lines.append(f"\t\t{MILESTONES_HEADER}")
            for milestone in bucket.milestones:
                lines.append(f"\t\t\t{milestone.name} - {milestone.project['name']}")

        for person_id, entries in bucket.people.items():
            person = lookup_person(dataset, person_id)
            lines.append(f"\t\t{format_person_short(person)}:")
            for entry in entries:
                lines.append(
                    f"\t\t\t{format_allocation(entry.allocation)} hours - {entry.project['name']}"
                )

    return lines


def build_people_listing(people: list[Person]) -> list[str]:
    lines = ["Listing people in Forecast:"]
    lines.extend(f"\t{person['first_name']} {person['last_name']}" for person in people)
    return lines


def build_projects_listing(projects: list[Project]) -> list[str]:
    lines = ["Listing projects in Forecast:"]
    lines.extend(f"\t{project['name']}" for project in projects)
    return lines
