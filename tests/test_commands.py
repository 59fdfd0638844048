"""Tests for chat command parsing and dispatch."""

import asyncio
from datetime import date

import pytest

from core.errors import DateRangeError, UnknownCommandError
from services.commands import Command, handle_command, parse_command, schedule_range

MONDAY = date(2014, 2, 3)


def run(text, client, today=MONDAY):
    """Run a command and return the messages that were sent."""
    sent = []

    async def send(line):
        sent.append(line)

    returned = asyncio.run(handle_command(text, send, today=today, client=client))
    assert returned == sent
    return sent


@pytest.mark.parametrize(
    "text, expected",
    [
        ("show forecast people", Command(kind="people")),
        ("hubot SHOW FORECAST PROJECTS", Command(kind="projects")),
        ("show schedule", Command(kind="schedule", days=1, term="")),
        ("show forecast", Command(kind="schedule", days=1, term="")),
        ("show 5 day schedule", Command(kind="schedule", days=5, term="")),
        ("show 2 days forecast for Ada", Command(kind="schedule", days=2, term="Ada")),
        ("hubot show 5 day schedule for Ada Lovelace", Command(kind="schedule", days=5, term="Ada Lovelace")),
        ("show schedule for Example Project ", Command(kind="schedule", days=1, term="Example Project")),
        ("@hubot: show 3 day forecast", Command(kind="schedule", days=3, term="")),
        ("forecastbot, show forecast people", Command(kind="people")),
    ],
)
def test_parse_command(text, expected):
    assert parse_command(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "hello",
        "show forecast people please",
        "schedule for Ada",
        "I won't show schedule",
        "reshow forecast",
        "please just show forecast projects",
    ],
)
def test_unknown_command(text):
    with pytest.raises(UnknownCommandError):
        parse_command(text)


def test_schedule_range():
    date_range = schedule_range(1, MONDAY)
    assert (date_range.start, date_range.end) == (MONDAY, date(2014, 2, 4))


def test_schedule_range_past_calendar_end():
    with pytest.raises(DateRangeError) as exc_info:
        schedule_range(4000000, MONDAY)
    assert exc_info.value.days == 4000000


def test_day_count_past_calendar_sends_one_error_line(make_client):
    lines = run("show 4000000 day schedule", make_client())
    assert lines == [str(DateRangeError(4000000))]


def test_full_schedule(make_client):
    assert run("show schedule", make_client()) == [
        "Schedule:",
        "\tMon 3rd Feb:",
        "\t\tAda L:",
        "\t\t\t8 hours - Engine",
        "\tTue 4th Feb:",
        "\t\tMILESTONES:",
        "\t\t\tPrototype - Engine",
        "\t\tCharles B:",
        "\t\t\t4.5 hours - Loom",
    ]


def test_project_schedule(make_client):
    assert run("show schedule for engine", make_client()) == [
        "Schedule for Engine:",
        "\tMon 3rd Feb:",
        "\t\tAda L:",
        "\t\t\t8 hours - Engine",
        "\tTue 4th Feb:",
        "\t\tMILESTONES:",
        "\t\t\tPrototype - Engine",
    ]


def test_person_schedule_has_no_milestones(make_client):
    assert run("show forecast for Charles", make_client()) == [
        "Schedule for Charles Babbage:",
        "\tTue 4th Feb:",
        "\t\tCharles B:",
        "\t\t\t4.5 hours - Loom",
    ]


def test_one_day_from_tuesday_skips_monday(make_client):
    lines = run("show schedule for Ada", make_client(), today=date(2014, 2, 4))
    assert lines == ["Schedule for Ada Lovelace:"]


def test_people_listing(make_client):
    assert run("show forecast people", make_client()) == [
        "Listing people in Forecast:",
        "\tAda Lovelace",
        "\tCharles Babbage",
    ]


def test_projects_listing(make_client):
    assert run("show forecast projects", make_client()) == [
        "Listing projects in Forecast:",
        "\tEngine",
        "\tLoom",
    ]


def test_unknown_subject_sends_one_error_line(make_client):
    assert run("show schedule for Bob Nobody", make_client()) == [
        "Unknown person/project matching term: Bob Nobody"
    ]


def test_forecast_failure_sends_one_error_line(make_client):
    lines = run("show 3 day schedule", make_client(failing={"assignments": 503}))
    assert len(lines) == 1
    assert "503" in lines[0]


def test_unknown_command_sends_nothing(make_client):
    sent = []

    async def send(line):
        sent.append(line)

    with pytest.raises(UnknownCommandError):
        asyncio.run(handle_command("make coffee", send, client=make_client()))
    assert sent == []
