"""
Forecast API client setup with lazy initialization.
"""

from datetime import date

import httpx

from core.config import (
    FORECAST_ACCOUNT_ID,
    FORECAST_API_URL,
    FORECAST_AUTHORIZATION,
    FORECAST_TIMEOUT_SECONDS,
)
from core.errors import ForecastAPIError


class ForecastClient:
    """Read-only access to the Forecast REST API."""

    def __init__(
        self,
        account_id: str,
        authorization: str,
        base_url: str = FORECAST_API_URL,
        timeout: float = FORECAST_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.account_id = account_id
        self.authorization = authorization
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Authorization": f"Bearer {self.authorization}",
            "Forecast-Account-ID": str(self.account_id),
        }

    async def _get(self, resource: str, params: dict | None = None) -> list[dict]:
        """GET /<resource> and unwrap the list stored under the resource key."""
        url = f"{self.base_url}/{resource}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url, headers=self._headers(), params=params)
        except httpx.HTTPError as e:
            raise ForecastAPIError(f"Forecast request for {resource} failed: {e}") from e

        if response.status_code >= 400:
            raise ForecastAPIError(
                f"Forecast API error {response.status_code} for {resource}: {response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise ForecastAPIError(f"Forecast returned invalid JSON for {resource}") from e

        records = payload.get(resource) if isinstance(payload, dict) else None
        if not isinstance(records, list):
            raise ForecastAPIError(f"Forecast response for {resource} has no '{resource}' list")
        return records

    @staticmethod
    def _range_params(start_date: date, end_date: date) -> dict[str, str]:
        return {"start_date": start_date.isoformat(), "end_date": end_date.isoformat()}

    async def projects(self) -> list[dict]:
        return await self._get("projects")

    async def people(self) -> list[dict]:
        return await self._get("people")

    async def assignments(self, start_date: date, end_date: date) -> list[dict]:
        """Assignments overlapping the date range."""
        return await self._get("assignments", self._range_params(start_date, end_date))

    async def milestones(self, start_date: date, end_date: date) -> list[dict]:
        """Milestones dated within the date range."""
        return await self._get("milestones", self._range_params(start_date, end_date))


_forecast_client: ForecastClient | None = None


def is_configured() -> bool:
    """True when both Forecast credentials are present."""
    return bool(FORECAST_ACCOUNT_ID and FORECAST_AUTHORIZATION)


def get_forecast_client() -> ForecastClient:
    """Get or create the Forecast client (lazy initialization)."""
    global _forecast_client
    if _forecast_client is None:
        if not is_configured():
            raise ForecastAPIError(
                "Forecast is not configured: set FORECAST_ACCOUNT_ID and FORECAST_AUTHORIZATION"
            )
        _forecast_client = ForecastClient(
            account_id=FORECAST_ACCOUNT_ID,
            authorization=FORECAST_AUTHORIZATION,
        )
    return _forecast_client
