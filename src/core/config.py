"""
Configuration constants and environment setup.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# PATHS
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent
DB_PATH = Path(os.environ.get("FORECAST_BOT_DB_PATH", PROJECT_ROOT / "data" / "db" / "forecast-bot.db"))

# =============================================================================
# FORECAST CREDENTIALS (from environment)
# =============================================================================

FORECAST_ACCOUNT_ID = os.environ.get("FORECAST_ACCOUNT_ID", "")
FORECAST_AUTHORIZATION = os.environ.get("FORECAST_AUTHORIZATION", "")
FORECAST_API_URL = os.environ.get("FORECAST_API_URL", "https://api.forecastapp.com")
FORECAST_TIMEOUT_SECONDS = float(os.environ.get("FORECAST_TIMEOUT_SECONDS", "15"))

# =============================================================================
# SCHEDULE CONFIGURATION
# =============================================================================

DEFAULT_SCHEDULE_DAYS = 1
DEFAULT_SCHEDULE_TITLE = "Schedule:"
MILESTONES_HEADER = "MILESTONES:"

# ISO weekdays 6 and 7 (Saturday, Sunday) are never reported
LAST_WORKING_ISO_WEEKDAY = 5

# =============================================================================
# CHAT API CONFIGURATION
# =============================================================================

CHAT_API_KEY = os.environ.get("CHAT_API_KEY", "")
API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
API_VERSION = "1.0.0"
