#!/usr/bin/env python3
"""
List all people and projects in Forecast, including archived ones.

Usage:
    uv run python src/scripts/list_forecast.py
"""

import asyncio
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.forecast_client import get_forecast_client


async def main():
    """List all people and projects."""
    forecast = get_forecast_client()

    print("Fetching people and projects from Forecast...\n")
    people, projects = await asyncio.gather(forecast.people(), forecast.projects())

    print(f"Found {len(people)} people\n")
    print("=" * 80)
    for person in people:
        archived = " (archived)" if person.get("archived") else ""
        print(f"  {person['first_name']} {person['last_name']}{archived}")
        print(f"    ID: {person['id']}")

    print(f"\nFound {len(projects)} projects\n")
    print("=" * 80)
    for project in projects:
        archived = " (archived)" if project.get("archived") else ""
        print(f"  {project['name']}{archived}")
        print(f"    ID: {project['id']}")

    print("\nDone!")


if __name__ == "__main__":
    asyncio.run(main())
