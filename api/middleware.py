"""
Consolidated middleware and error translation for the Brewery API
"""

import time
import logging
from typing import Any, Iterable, List, Mapping
from uuid import uuid4

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from api.responses import FieldError, error_response
from app.exceptions import ConstraintViolation, ConstraintViolationError, NotFoundError

logger = logging.getLogger("brewery.middleware")


# ============================================================================
# Error Translation
# ============================================================================

# Detail FastAPI uses when the request body cannot be read as JSON at all
# (e.g. a non-UTF-8 body sent as application/json)
BODY_PARSE_ERROR = "There was an error parsing the body"


def _decode_bytes(raw: bytes) -> str:
    return raw.decode("utf-8", "replace")


def format_constraint_violations(violations: Iterable[ConstraintViolation]) -> List[str]:
    """Render each violation as ``"<property path> <message>"``, keeping order."""
    return [f"{v.property_path} {v.message}" for v in violations]


def format_binding_errors(errors: Iterable[Mapping[str, Any]]) -> List[FieldError]:
    """
    Convert pydantic/FastAPI binding errors into FieldError objects.

    ``loc`` looks like ``("body", "upc")`` or ``("path", "beer_id")``: the first
    element names the request part, the rest is the field path. Raw bodies
    arrive as bytes and are decoded leniently.
    """
    field_errors = []
    for error in errors:
        loc = tuple(error.get("loc", ()))
        # for missing values pydantic reports the enclosing object as input
        rejected = None if error.get("type") == "missing" else error.get("input")
        field_errors.append(
            FieldError(
                object_name=str(loc[0]) if loc else "request",
                field=".".join(str(part) for part in loc[1:]) or None,
                rejected_value=jsonable_encoder(
                    rejected, custom_encoder={bytes: _decode_bytes}
                ),
                default_message=error.get("msg", "Invalid value"),
                code=error.get("type"),
            )
        )
    return field_errors


def _binding_response(field_errors: List[FieldError]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=[e.model_dump(by_alias=True) for e in field_errors],
    )


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its id and timing; echo both as response headers"""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid4())
        request.state.request_id = request_id
        target = f"{request.method} {request.url.path}"

        logger.info(
            f"request_started request_id={request_id} {target}",
            extra={
                "request_id": request_id,
                "client": request.client.host if request.client else None,
            },
        )
        start_time = time.perf_counter()

        try:
            response: Response = await call_next(request)
        except Exception:
            elapsed = time.perf_counter() - start_time
            logger.error(
                f"request_failed request_id={request_id} {target} after {elapsed:.4f}s",
                extra={"request_id": request_id},
                exc_info=True,
            )
            raise

        elapsed = time.perf_counter() - start_time
        logger.info(
            f"request_completed request_id={request_id} {target} "
            f"status={response.status_code} in {elapsed:.4f}s",
            extra={"request_id": request_id},
        )
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        return response


# ============================================================================
# Error Handlers
# ============================================================================


async def constraint_violation_exception_handler(
    request: Request, exc: ConstraintViolationError
):
    """Handle constraint violations: 400 with a list of 'path message' strings"""
    errors = format_constraint_violations(exc.violations)
    logger.warning(f"Constraint violations on {request.url}: {errors}")

    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=errors)


async def binding_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request binding errors: 400 with a list of field errors"""
    field_errors = format_binding_errors(exc.errors())
    logger.warning(f"Binding errors on {request.url}: {len(field_errors)} error(s)")

    return _binding_response(field_errors)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions; unreadable bodies are reported as binding errors"""
    if exc.status_code == status.HTTP_400_BAD_REQUEST and exc.detail == BODY_PARSE_ERROR:
        logger.warning(f"Unreadable body on {request.url}")
        return _binding_response(
            [
                FieldError(
                    object_name="body",
                    default_message=BODY_PARSE_ERROR,
                    code="json_invalid",
                )
            ]
        )

    logger.warning(f"HTTP {exc.status_code} on {request.url}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(f"HTTP_{exc.status_code}", str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def not_found_exception_handler(request: Request, exc: NotFoundError):
    """Handle not found errors"""
    logger.warning(f"Resource not found on {request.url}: {str(exc)}")
    body = exc.to_dict()

    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=error_response(body["code"], body["message"]),
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response(
            "INTERNAL_SERVER_ERROR", "An unexpected error occurred"
        ),
    )
