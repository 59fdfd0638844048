"""
Pytest configuration and shared fixtures.
"""

import copy
import sys
from pathlib import Path

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.forecast_client import ForecastClient
from models.forecast import Dataset

SAMPLE_RECORDS = {
    "people": [
        {"id": 1, "first_name": "Ada", "last_name": "Lovelace", "archived": False},
        {"id": 2, "first_name": "Charles", "last_name": "Babbage", "archived": False},
        {"id": 3, "first_name": "Old", "last_name": "Timer", "archived": True},
    ],
    "projects": [
        {"id": 10, "name": "Engine", "archived": False},
        {"id": 11, "name": "Loom", "archived": False},
        {"id": 12, "name": "Retired", "archived": True},
    ],
    # 2014-02-03 is a Monday
    "assignments": [
        {
            "id": 100,
            "person_id": 1,
            "project_id": 10,
            "start_date": "2014-02-03",
            "end_date": "2014-02-03",
            "allocation": 8,
            "notes": None,
        },
        {
            "id": 101,
            "person_id": 2,
            "project_id": 11,
            "start_date": "2014-02-04",
            "end_date": "2014-02-04",
            "allocation": 4.5,
            "notes": "Pattern cards",
        },
    ],
    "milestones": [
        {"id": 200, "project_id": 10, "date": "2014-02-04", "name": "Prototype"},
    ],
}


@pytest.fixture
def sample_records():
    """Forecast records as returned by the API, keyed by resource."""
    return copy.deepcopy(SAMPLE_RECORDS)


@pytest.fixture
def sample_dataset(sample_records):
    """Dataset built from the sample records."""
    return Dataset.build(
        sample_records["projects"],
        sample_records["people"],
        sample_records["assignments"],
        sample_records["milestones"],
    )


@pytest.fixture
def make_client(sample_records):
    """
    Factory for a ForecastClient backed by httpx.MockTransport.

    failing maps a resource name to the HTTP status it should answer with.
    Every request is appended to the returned client's `requests` list.
    """

    def factory(records=None, failing=None):
        records = sample_records if records is None else records
        failing = failing or {}
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            resource = request.url.path.strip("/")
            if resource in failing:
                return httpx.Response(failing[resource], text=f"{resource} unavailable")
            return httpx.Response(200, json={resource: records.get(resource, [])})

        client = ForecastClient(
            account_id="12345",
            authorization="secret-token",
            base_url="https://forecast.test",
            transport=httpx.MockTransport(handler),
        )
        client.requests = seen
        return client

    return factory
