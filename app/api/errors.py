"""Maps pipeline exceptions to JSON error responses. No tracebacks reach clients."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.schemas import ErrorResponse
from app.llm.exceptions import GenerationError
from app.logging.logger import Log
from app.processor.exceptions import (
    ConfigurationError,
    UnknownProcessingError,
    UploadValidationError,
)
from app.report.exceptions import ResponseFormatError

CONFIGURATION_MESSAGE = "Server configuration error: API key is missing or invalid."
UPLOAD_VALIDATION_MESSAGE = "No documents uploaded."
UPSTREAM_MESSAGE = "Failed to get a response from the AI provider."
RESPONSE_FORMAT_MESSAGE = "Model did not return a valid JSON response"
UNKNOWN_MESSAGE = "Failed to process documents due to a server error."


def error_response(
    status_code: int, error: str, raw_response: str | None = None
) -> JSONResponse:
    body = ErrorResponse(error=error, raw_response=raw_response)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


async def _configuration_error(request: Request, exc: Exception) -> JSONResponse:
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, CONFIGURATION_MESSAGE)


async def _upload_validation_error(request: Request, exc: Exception) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, UPLOAD_VALIDATION_MESSAGE)


async def _request_validation_error(request: Request, exc: Exception) -> JSONResponse:
    Log.warning(f"Rejected malformed request to {request.url.path}")
    return error_response(status.HTTP_400_BAD_REQUEST, UPLOAD_VALIDATION_MESSAGE)


async def _generation_error(request: Request, exc: Exception) -> JSONResponse:
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, UPSTREAM_MESSAGE)


async def _response_format_error(request: Request, exc: Exception) -> JSONResponse:
    raw = exc.raw_response if isinstance(exc, ResponseFormatError) else None
    Log.error(f"Failed to parse model response as JSON: {raw}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, RESPONSE_FORMAT_MESSAGE, raw)


async def _unknown_error(request: Request, exc: Exception) -> JSONResponse:
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, UNKNOWN_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ConfigurationError, _configuration_error)
    app.add_exception_handler(UploadValidationError, _upload_validation_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(GenerationError, _generation_error)
    app.add_exception_handler(ResponseFormatError, _response_format_error)
    app.add_exception_handler(UnknownProcessingError, _unknown_error)
