#!/usr/bin/env python3
"""
Run a chat command against Forecast and print the reply.

Usage:
    uv run python src/scripts/forecast_command.py "show schedule"
    uv run python src/scripts/forecast_command.py "show 5 day schedule for Ada"
    uv run python src/scripts/forecast_command.py --today 2014-02-03 "show forecast for Engine"
"""

import argparse
import asyncio
import sys
from datetime import datetime
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.errors import UnknownCommandError
from services.commands import handle_command


async def print_line(line: str):
    print(line)


async def main(text: str, today_str: str | None = None):
    """Main entry point."""
    today = datetime.strptime(today_str, "%Y-%m-%d").date() if today_str else None
    await handle_command(text, print_line, today=today)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Answer a Forecast chat command")
    parser.add_argument("text", help='Command text, e.g. "show 2 day schedule for Ada"')
    parser.add_argument(
        "--today",
        help="Treat this date (YYYY-MM-DD) as today. Defaults to the current date.",
    )
    args = parser.parse_args()

    try:
        asyncio.run(main(args.text, args.today))
    except UnknownCommandError as e:
        print(f"\nError: {e}")
        sys.exit(1)
