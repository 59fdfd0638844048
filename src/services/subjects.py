"""
Resolve a chat search term to a project or person, and narrow datasets to it.
"""

from dataclasses import dataclass, replace
from typing import Literal

from core.errors import SubjectNotFoundError
from models.forecast import Dataset, Person, Project


@dataclass(frozen=True)
class Subject:
    """A resolved search term."""

    kind: Literal["project", "person"]
    value: Project | Person


def full_name(person: Person) -> str:
    return f"{person['first_name']} {person['last_name']}"


def find_project(term: str, projects: list[Project]) -> Project | None:
    """First project whose name equals the term, ignoring case."""
    lowered = term.lower()
    for project in projects:
        if project["name"].lower() == lowered:
            return project
    return None


def find_person(term: str, people: list[Person]) -> Person | None:
    """First person whose first name, or first and last name, equals the term."""
    lowered = term.lower()
    for person in people:
        if person["first_name"].lower() == lowered:
            return person
        if full_name(person).lower() == lowered:
            return person
    return None


def resolve_subject(term: str, dataset: Dataset) -> Subject:
    """
    Decide whether a term names a project or a person.

    Projects are checked before people. When several records share a name
    the first one returned by Forecast wins.

    Raises:
        SubjectNotFoundError: nothing matches the term
    """
    project = find_project(term, dataset.projects)
    if project is not None:
        return Subject(kind="project", value=project)

    person = find_person(term, dataset.people)
    if person is not None:
        return Subject(kind="person", value=person)

    raise SubjectNotFoundError(term)


def narrow_to_person(dataset: Dataset, person: Person) -> Dataset:
    """Keep only this person's assignments. People have no milestones."""
    return replace(
        dataset,
        assignments=[a for a in dataset.assignments if a["person_id"] == person["id"]],
        milestones=None,
    )


def narrow_to_project(dataset: Dataset, project: Project) -> Dataset:
    """Keep only this project's assignments and milestones."""
    return replace(
        dataset,
        assignments=[a for a in dataset.assignments if a["project_id"] == project["id"]],
        milestones=[m for m in (dataset.milestones or []) if m["project_id"] == project["id"]],
    )


def title_for(subject: Subject) -> str:
    if subject.kind == "person":
        return f"Schedule for {full_name(subject.value)}:"
    return f"Schedule for {subject.value['name']}:"


def narrow(dataset: Dataset, subject: Subject) -> Dataset:
    if subject.kind == "person":
        return narrow_to_person(dataset, subject.value)
    return narrow_to_project(dataset, subject.value)
