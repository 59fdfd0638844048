"""FastAPI dependencies for the chat webhook."""

import secrets

from fastapi import Header, HTTPException, status

from api.models.responses import ErrorCodes, ErrorResponse
from core import config


def _rejected(status_code: int, error: str, code: str) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail=ErrorResponse(error=error, code=code).model_dump(),
    )


async def verify_api_key(x_api_key: str = Header(..., alias="X-API-Key")) -> str:
    """
    Check the chat host's X-API-Key header against CHAT_API_KEY.

    Raises:
        HTTPException: 500 if CHAT_API_KEY is unset, 401 if the key differs
    """
    if not config.CHAT_API_KEY:
        raise _rejected(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Chat API key not configured on server",
            ErrorCodes.INTERNAL_ERROR,
        )

    # Constant-time comparison
    if not secrets.compare_digest(x_api_key, config.CHAT_API_KEY):
        raise _rejected(
            status.HTTP_401_UNAUTHORIZED,
            "Invalid chat API key",
            ErrorCodes.UNAUTHORIZED,
        )

    return x_api_key
