"""SQLite request logging for API."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from core.database import get_connection


@dataclass
class RequestLog:
    """Captured request/response data for logging."""

    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    endpoint: str = ""
    method: str = ""
    client_ip: str | None = None
    chat_user: str | None = None
    command_text: str | None = None
    command_kind: str | None = None
    subject_term: str | None = None
    status_code: int = 0
    error_code: str | None = None
    error_message: str | None = None
    processing_time_ms: int = 0
    messages_sent: int | None = None
    details: list[tuple[str, str]] = field(default_factory=list)  # (type, message)


def log_request(log: RequestLog, db_path: Path | None = None) -> None:
    """Write request log to SQLite database."""
    conn = get_connection(db_path)
    try:
        cursor = conn.cursor()

        cursor.execute(
            """
            INSERT INTO api_requests (
                request_id, timestamp, endpoint, method, client_ip,
                chat_user, command_text, command_kind, subject_term,
                status_code, error_code, error_message, processing_time_ms,
                messages_sent
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
            (
                log.request_id,
                log.timestamp,
                log.endpoint,
                log.method,
                log.client_ip,
                log.chat_user,
                log.command_text,
                log.command_kind,
                log.subject_term,
                log.status_code,
                log.error_code,
                log.error_message,
                log.processing_time_ms,
                log.messages_sent,
            ),
        )

        for detail_type, message in log.details:
            cursor.execute(
                """
                INSERT INTO api_request_details (request_id, detail_type, message)
                VALUES (?, ?, ?)
            """,
                (log.request_id, detail_type, message),
            )

        conn.commit()
    finally:
        conn.close()
