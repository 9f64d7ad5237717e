"""
Domain errors and their HTTP mapping.

Services raise these; each FastAPI app installs the handlers from
``register_exception_handlers`` so the errors reach clients as JSON
bodies with the status code carried by the exception class.
"""

import logging
from typing import Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class CustomerNotFound(NotFound):
    pass


class ProductNotFound(NotFound):
    pass


class PurchaseFailed(ServiceError):
    """A purchase batch was rejected and nothing was applied."""

    def __init__(self, message: str, product_id: Optional[int] = None):
        super().__init__(message)
        self.product_id = product_id


def _field_name(loc) -> str:
    # ("body", "firstName") -> "firstName"; ("body", 0, "quantity") -> "0.quantity"
    parts = [str(p) for p in loc if p != "body"]
    return ".".join(parts) or "body"


def validation_errors(exc: RequestValidationError) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for err in exc.errors():
        errors[_field_name(err.get("loc", ()))] = err.get("msg", "invalid value")
    return errors


async def service_error_handler(request: Request, exc: ServiceError):
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = validation_errors(exc)
    logger.warning("%s %s rejected: %s", request.method, request.url.path, errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
