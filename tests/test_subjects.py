"""Tests for subject resolution and dataset narrowing."""

import pytest

from core.errors import SubjectNotFoundError
from models.forecast import Dataset
from services.subjects import (
    narrow_to_person,
    narrow_to_project,
    resolve_subject,
    title_for,
)


def test_project_name_matches_ignoring_case(sample_dataset):
    subject = resolve_subject("eNGINE", sample_dataset)
    assert subject.kind == "project"
    assert subject.value["id"] == 10


def test_person_matches_first_name(sample_dataset):
    subject = resolve_subject("ada", sample_dataset)
    assert subject.kind == "person"
    assert subject.value["id"] == 1


def test_person_matches_full_name(sample_dataset):
    subject = resolve_subject("Charles Babbage", sample_dataset)
    assert subject.kind == "person"
    assert subject.value["id"] == 2


def test_last_name_alone_does_not_match(sample_dataset):
    with pytest.raises(SubjectNotFoundError):
        resolve_subject("Babbage", sample_dataset)


def test_partial_project_name_does_not_match(sample_dataset):
    with pytest.raises(SubjectNotFoundError):
        resolve_subject("Eng", sample_dataset)


def test_unknown_term_carries_term(sample_dataset):
    with pytest.raises(SubjectNotFoundError) as exc_info:
        resolve_subject("Bob Nobody", sample_dataset)
    assert exc_info.value.term == "Bob Nobody"
    assert str(exc_info.value) == "Unknown person/project matching term: Bob Nobody"


def test_projects_are_checked_before_people(sample_records):
    projects = sample_records["projects"] + [{"id": 13, "name": "Ada", "archived": False}]
    data = Dataset.build(projects, sample_records["people"], [], [])

    assert resolve_subject("Ada", data).kind == "project"
    assert resolve_subject("Ada Lovelace", data).kind == "person"


def test_first_matching_person_wins(sample_records):
    people = sample_records["people"] + [
        {"id": 4, "first_name": "Ada", "last_name": "Byron", "archived": False}
    ]
    data = Dataset.build(sample_records["projects"], people, [], [])

    assert resolve_subject("Ada", data).value["id"] == 1
    assert resolve_subject("Ada Byron", data).value["id"] == 4


def test_narrow_to_project_keeps_only_that_project(sample_records):
    sample_records["milestones"].append(
        {"id": 201, "project_id": 11, "date": "2014-02-05", "name": "Weave"}
    )
    data = Dataset.build(
        sample_records["projects"],
        sample_records["people"],
        sample_records["assignments"],
        sample_records["milestones"],
    )
    engine = data.projects_by_id[10]

    narrowed = narrow_to_project(data, engine)

    assert [a["id"] for a in narrowed.assignments] == [100]
    assert [m["id"] for m in narrowed.milestones] == [200]
    assert all(a["project_id"] == 10 for a in narrowed.assignments)
    assert narrowed.people is data.people
    assert narrowed.people_by_id is data.people_by_id
    # Input dataset untouched
    assert len(data.assignments) == 2
    assert len(data.milestones) == 2


def test_narrow_to_person_drops_milestones(sample_dataset):
    charles = sample_dataset.people_by_id[2]

    narrowed = narrow_to_person(sample_dataset, charles)

    assert [a["id"] for a in narrowed.assignments] == [101]
    assert narrowed.milestones is None
    assert sample_dataset.milestones is not None


def test_titles(sample_dataset):
    assert title_for(resolve_subject("ada", sample_dataset)) == "Schedule for Ada Lovelace:"
    assert title_for(resolve_subject("loom", sample_dataset)) == "Schedule for Loom:"
