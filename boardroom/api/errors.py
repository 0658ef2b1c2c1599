"""Error responses for the REST API.

Every error body has the shape ``{"error": ...}``: a message string, or for
request validation failures the list of field errors.
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class ApiError(Exception):
    """An error that maps directly to an HTTP response."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Render an ApiError as ``{"error": message}``."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation failures as 400 with the field error list."""
    return JSONResponse(
        status_code=400,
        content={"error": jsonable_encoder(exc.errors())},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the API's exception handlers on an application."""
    app.add_exception_handler(ApiError, api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError,
        validation_error_handler,  # type: ignore[arg-type]
    )
