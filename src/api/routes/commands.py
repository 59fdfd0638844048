"""Chat command webhook endpoint."""

import time

from fastapi import APIRouter, Depends, HTTPException, Request, status

from api.dependencies import verify_api_key
from api.logging import RequestLog, log_request
from api.models.responses import CommandRequest, CommandResponse, ErrorCodes
from core.errors import ForecastError, UnknownCommandError
from services.commands import parse_command, run_command

router = APIRouter(prefix="/v1")


def get_client_ip(request: Request) -> str:
    """Extract client IP from request, handling proxies."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


@router.post("/chat/commands", response_model=CommandResponse)
async def chat_command_endpoint(
    request: Request,
    body: CommandRequest,
    _api_key: str = Depends(verify_api_key),
):
    """
    Answer a chat command.

    Returns the lines to post, one chat message each. Forecast failures are
    answered with a single message carrying the error text.
    """
    start_time = time.time()

    request_log = RequestLog(
        endpoint="/v1/chat/commands",
        method="POST",
        client_ip=get_client_ip(request),
        chat_user=body.user,
        command_text=body.text,
    )

    try:
        command = parse_command(body.text)
        request_log.command_kind = command.kind
        request_log.subject_term = command.term or None

        try:
            messages = await run_command(command)
        except ForecastError as e:
            messages = [str(e)]
            request_log.error_code = ErrorCodes.FORECAST_ERROR
            request_log.error_message = str(e)
            request_log.details.append(("forecast_error", str(e)))

        request_log.status_code = 200
        request_log.messages_sent = len(messages)
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)

        return CommandResponse(messages=messages)

    except UnknownCommandError as e:
        request_log.status_code = 400
        request_log.error_code = ErrorCodes.UNKNOWN_COMMAND
        request_log.error_message = str(e)
        request_log.details.append(("command_error", str(e)))
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)

        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "Unknown command",
                "code": ErrorCodes.UNKNOWN_COMMAND,
                "details": [body.text],
            },
        )

    except Exception as e:
        # Unexpected errors
        request_log.status_code = 500
        request_log.error_code = ErrorCodes.INTERNAL_ERROR
        request_log.error_message = str(e)
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)

        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "Internal server error",
                "code": ErrorCodes.INTERNAL_ERROR,
                "details": [],
            },
        )

    finally:
        # Always log the request
        try:
            log_request(request_log)
        except Exception as e:
            # Don't fail the request if logging fails
            print(f"Failed to log request {request_log.request_id}: {e}")
