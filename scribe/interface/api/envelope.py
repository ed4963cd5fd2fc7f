"""JSON response envelope.

Every response body is ``{"message": ..., "data"?: ..., "errors"?: ...}``.
"""

from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from scribe.application.usecase.result import (
    Invalid,
    NotFound,
    Result,
    Success,
    Unexpected,
)

SUCCESS_MESSAGE = "Success"
VALIDATION_MESSAGE = "Validation errors"
NOT_FOUND_MESSAGE = "Data Not found"
SERVER_ERROR_MESSAGE = "Something went wrong"


def envelope(
    message: str,
    status_code: int = status.HTTP_200_OK,
    data: Any = None,
    errors: dict[str, list[str]] | None = None,
) -> JSONResponse:
    """Build an enveloped JSON response; ``data``/``errors`` only when set."""
    body: dict[str, Any] = {"message": message}
    if data is not None:
        body["data"] = jsonable_encoder(data)
    if errors is not None:
        body["errors"] = errors
    return JSONResponse(status_code=status_code, content=body)


def server_error(error: str, expose: bool = False) -> JSONResponse:
    """500 response; the raw error text is only shown when ``expose`` is set."""
    return envelope(
        error if expose and error else SERVER_ERROR_MESSAGE,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def respond(
    result: Result,
    success_status: int = status.HTTP_200_OK,
    expose_errors: bool = False,
) -> JSONResponse:
    """Translate a use case result into an HTTP response.

    Args:
        result: Use case result
        success_status: Status code for ``Success``
        expose_errors: Put raw error text in 500 responses (debug only)

    Returns:
        Enveloped JSON response
    """
    if isinstance(result, Success):
        return envelope(SUCCESS_MESSAGE, status_code=success_status, data=result.data)
    if isinstance(result, Invalid):
        return envelope(
            VALIDATION_MESSAGE,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            errors=result.errors,
        )
    if isinstance(result, NotFound):
        return envelope(NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND)
    if isinstance(result, Unexpected):
        return server_error(result.error, expose=expose_errors)
    raise TypeError(f"Unknown result type: {type(result).__name__}")
