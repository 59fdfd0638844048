"""
Data models for Forecast records and per-request datasets.

Records come straight from the Forecast JSON payloads, so they are typed
with TypedDict; the dataset and date range are dataclasses.
"""

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterator, TypedDict


class Person(TypedDict):
    """Forecast person."""
    id: int
    first_name: str
    last_name: str
    archived: bool


class Project(TypedDict):
    """Forecast project."""
    id: int
    name: str
    archived: bool


class Assignment(TypedDict):
    """Time a person is booked on a project, per day, over a date span."""
    id: int
    person_id: int
    project_id: int
    start_date: str
    end_date: str
    allocation: float
    notes: str | None


class Milestone(TypedDict):
    """One-day project event."""
    id: int
    project_id: int
    date: str
    name: str


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar days."""

    start: date
    end: date

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def days(self) -> Iterator[date]:
        """Yield each day from start to end; nothing if start > end."""
        day = self.start
        while day <= self.end:
            yield day
            day += timedelta(days=1)

    @classmethod
    def from_iso(cls, start: str, end: str) -> "DateRange":
        return cls(date.fromisoformat(start), date.fromisoformat(end))


def index_by_id(records: list[dict]) -> dict:
    """Map id -> record. Later duplicates replace earlier ones."""
    return {record["id"]: record for record in records}


@dataclass
class Dataset:
    """
    Everything fetched from Forecast for one chat command.

    milestones is None after narrowing to a person (people have no
    milestones of their own), which is distinct from an empty list.
    """

    projects: list[Project]
    people: list[Person]
    assignments: list[Assignment]
    milestones: list[Milestone] | None
    projects_by_id: dict[int, Project] = field(default_factory=dict)
    people_by_id: dict[int, Person] = field(default_factory=dict)
    assignments_by_id: dict[int, Assignment] = field(default_factory=dict)
    milestones_by_id: dict[int, Milestone] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        projects: list[Project],
        people: list[Person],
        assignments: list[Assignment],
        milestones: list[Milestone],
    ) -> "Dataset":
        """Create a dataset and its id lookups."""
        return cls(
            projects=projects,
            people=people,
            assignments=assignments,
            milestones=milestones,
            projects_by_id=index_by_id(projects),
            people_by_id=index_by_id(people),
            assignments_by_id=index_by_id(assignments),
            milestones_by_id=index_by_id(milestones),
        )
