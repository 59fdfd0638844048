"""
Chat command parsing and dispatch.

Supported commands:
    show forecast people
    show forecast projects
    show [N day] (schedule|forecast) [for <person or project>]

Examples:
    show schedule
    show 5 day schedule for Ada
    show 2 day forecast for Ada Lovelace
    show schedule for Example Project
"""

import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Awaitable, Callable, Literal

from core.config import DEFAULT_SCHEDULE_DAYS
from core.errors import DateRangeError, ForecastError, UnknownCommandError
from core.forecast_client import ForecastClient
from models.forecast import DateRange
from services.forecast import fetch_dataset, fetch_people, fetch_projects
from services.reports import build_people_listing, build_projects_listing, build_report
from services.subjects import narrow, resolve_subject, title_for

# Optional leading bot mention: "hubot ", "@hubot: ", "forecastbot, "
MENTION = r"^(?:@?[\w.-]+[:,]?\s+)?"

PEOPLE_PATTERN = re.compile(MENTION + r"show forecast people\s*$", re.IGNORECASE)
PROJECTS_PATTERN = re.compile(MENTION + r"show forecast projects\s*$", re.IGNORECASE)
SCHEDULE_PATTERN = re.compile(
    MENTION + r"show (?:(?P<days>\d{1,9}) days? )?(?:schedule|forecast)(?: for (?P<term>.*))?$",
    re.IGNORECASE,
)

Send = Callable[[str], Awaitable[None]]


@dataclass(frozen=True)
class Command:
    """A parsed chat command."""

    kind: Literal["people", "projects", "schedule"]
    days: int = DEFAULT_SCHEDULE_DAYS
    term: str = ""


def parse_command(text: str) -> Command:
    """
    Parse chat text into a Command.

    Text may carry a leading bot mention ("hubot show schedule").

    Raises:
        UnknownCommandError: text matches none of the commands
    """
    text = text.strip()

    if PEOPLE_PATTERN.search(text):
        return Command(kind="people")
    if PROJECTS_PATTERN.search(text):
        return Command(kind="projects")

    match = SCHEDULE_PATTERN.search(text)
    if match:
        days = int(match.group("days")) if match.group("days") else DEFAULT_SCHEDULE_DAYS
        term = (match.group("term") or "").strip()
        return Command(kind="schedule", days=days, term=term)

    raise UnknownCommandError(text)


def schedule_range(days: int, today: date | None = None) -> DateRange:
    """
    Range from today through today + days, inclusive.

    Raises:
        DateRangeError: the range ends past the last representable date
    """
    today = today or date.today()
    try:
        return DateRange(today, today + timedelta(days=days))
    except OverflowError:
        raise DateRangeError(days) from None


async def schedule(term: str, date_range: DateRange, client: ForecastClient | None = None) -> list[str]:
    """
    Schedule report lines.

    An empty term reports everything; otherwise the report is narrowed to
    the project or person the term resolves to.
    """
    dataset = await fetch_dataset(date_range, client)

    if not term:
        return build_report(dataset, date_range)

    subject = resolve_subject(term, dataset)
    return build_report(narrow(dataset, subject), date_range, title_for(subject))


async def run_command(
    command: Command, today: date | None = None, client: ForecastClient | None = None
) -> list[str]:
    if command.kind == "people":
        return build_people_listing(await fetch_people(client))
    if command.kind == "projects":
        return build_projects_listing(await fetch_projects(client))
    return await schedule(command.term, schedule_range(command.days, today), client)


async def handle_command(
    text: str,
    send: Send,
    today: date | None = None,
    client: ForecastClient | None = None,
) -> list[str]:
    """
    Answer one chat command, sending each line as its own message.

    Forecast failures are sent as a single message holding the error text.
    Returns the lines that were sent.

    Raises:
        UnknownCommandError: text is not a supported command
    """
    command = parse_command(text)

    try:
        lines = await run_command(command, today, client)
    except ForecastError as e:
        lines = [str(e)]

    for line in lines:
        await send(line)

    return lines
