"""
Failure -> HTTP response translation.

Two paths lead to an error response, and both end in `error_response`:

- services return `Failure(error)`; routers pass every result through
  `to_response`, which looks the status up by the error's kind;
- anything raised instead (gateway DataAccessError, BadRequestError from the
  asset storage, programming errors) is caught by `ExceptionHandlingMiddleware`
  and classified the same way, with INTERNAL as the fallback.

Framework errors (request validation, unknown route, wrong method) are turned
into the same envelope by the handlers registered in `register_exception_handlers`.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from ecommerce.exceptions.base import STATUS_BY_KIND, AppError, ErrorKind, InternalServerError
from ecommerce.models.common import ResponseEnvelope
from ecommerce.services.result import Failure, Ok, ServiceResult

logger = logging.getLogger(__name__)


def envelope_response(status_code: int, message: str, data=None) -> JSONResponse:
    envelope = ResponseEnvelope(status_code=status_code, message=message, data=data)
    return JSONResponse(status_code=status_code, content=envelope.to_json_dict())


def error_response(error: AppError) -> JSONResponse:
    return envelope_response(STATUS_BY_KIND[error.kind], error.message)


def to_response(result: ServiceResult) -> JSONResponse:
    """Turn a service result into the HTTP response: Ok -> 200, Failure -> status of its kind."""
    if isinstance(result, Ok):
        return envelope_response(200, result.message, result.data)
    if isinstance(result, Failure):
        logger.info(
            "api.failure",
            extra={"kind": result.kind.value, "status_code": STATUS_BY_KIND[result.kind]},
        )
        return error_response(result.error)
    raise TypeError(f"Unexpected service result: {type(result).__name__}")


def classify(exc: Exception) -> AppError:
    """Application errors keep their kind; everything else is INTERNAL."""
    if isinstance(exc, AppError):
        return exc
    return InternalServerError(str(exc) or InternalServerError.default_message)


class ExceptionHandlingMiddleware(BaseHTTPMiddleware):
    """
    Catch anything the endpoint raised and write one JSON envelope with the
    matching status. Must be registered inside RequestIDMiddleware so the
    response still gets the request id header.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            error = classify(exc)
            if error.kind is ErrorKind.INTERNAL:
                logger.exception("Unhandled error for %s %s", request.method, request.url.path)
            else:
                logger.info(
                    "api.error",
                    extra={
                        "method": request.method,
                        "path": request.url.path,
                        "kind": error.kind.value,
                        "error_message": error.message,
                    },
                )
            return error_response(error)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """400 for malformed bodies, query strings and path parameters."""
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        problems.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    message = "Invalid request: " + "; ".join(problems) if problems else "Invalid request"

    logger.info("api.validation_error", extra={"method": request.method, "path": request.url.path})
    return envelope_response(400, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown route, wrong method and the like keep their status but use the envelope."""
    response = envelope_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
