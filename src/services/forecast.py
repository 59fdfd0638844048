"""
Dataset fetching from the Forecast API.
"""

import asyncio

from core.forecast_client import ForecastClient, get_forecast_client
from models.forecast import Dataset, DateRange, Person, Project


async def fetch_dataset(date_range: DateRange, client: ForecastClient | None = None) -> Dataset:
    """
    Fetch projects, people, assignments and milestones for a date range.

    The four reads run concurrently. The first failure cancels the other
    reads and propagates as ForecastAPIError; no partial dataset is returned.
    """
    client = client or get_forecast_client()

    try:
        async with asyncio.TaskGroup() as tg:
            projects = tg.create_task(client.projects())
            people = tg.create_task(client.people())
            assignments = tg.create_task(client.assignments(date_range.start, date_range.end))
            milestones = tg.create_task(client.milestones(date_range.start, date_range.end))
    except ExceptionGroup as group:
        raise group.exceptions[0] from None

    return Dataset.build(
        projects.result(), people.result(), assignments.result(), milestones.result()
    )


async def fetch_people(client: ForecastClient | None = None) -> list[Person]:
    """Active (non-archived) people."""
    client = client or get_forecast_client()
    people = await client.people()
    return [person for person in people if not person.get("archived")]


async def fetch_projects(client: ForecastClient | None = None) -> list[Project]:
    """Active (non-archived) projects."""
    client = client or get_forecast_client()
    projects = await client.projects()
    return [project for project in projects if not project.get("archived")]
