"""
SQLite database operations for the chat command log.
"""

import sqlite3
from pathlib import Path

from core.config import DB_PATH


def get_connection(db_path: Path | None = None) -> sqlite3.Connection:
    """Get a database connection."""
    return sqlite3.connect(db_path or DB_PATH)


def create_tables(conn: sqlite3.Connection):
    """Create the request log tables if they don't exist."""
    cursor = conn.cursor()

    # Create API request logging table
    cursor.execute("""
        CREATE TABLE IF NOT EXISTS api_requests (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            request_id TEXT UNIQUE NOT NULL,
            timestamp TEXT NOT NULL,
            endpoint TEXT NOT NULL,
            method TEXT NOT NULL,
            client_ip TEXT,
            chat_user TEXT,
            command_text TEXT,
            command_kind TEXT,
            subject_term TEXT,
            status_code INTEGER NOT NULL,
            error_code TEXT,
            error_message TEXT,
            processing_time_ms INTEGER NOT NULL,
            messages_sent INTEGER
        )
    """)

    # Create API request details table (one row per message or error)
    cursor.execute("""
        CREATE TABLE IF NOT EXISTS api_request_details (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            request_id TEXT NOT NULL,
            detail_type TEXT NOT NULL CHECK(detail_type IN ('command_error', 'forecast_error', 'warning')),
            message TEXT NOT NULL,
            FOREIGN KEY (request_id) REFERENCES api_requests(request_id)
        )
    """)

    cursor.execute(
        "CREATE INDEX IF NOT EXISTS idx_api_requests_timestamp ON api_requests(timestamp)"
    )
    cursor.execute(
        "CREATE INDEX IF NOT EXISTS idx_api_requests_status ON api_requests(status_code)"
    )
    cursor.execute(
        "CREATE INDEX IF NOT EXISTS idx_api_request_details_request ON api_request_details(request_id)"
    )

    conn.commit()
