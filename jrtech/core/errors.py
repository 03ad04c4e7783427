"""
Error types and FastAPI exception handlers for the contact backend.

Every failure on /contact is answered with the same envelope the landing
page form understands: {"success": false, "message": "..."}.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from jrtech.models.contact import ContactResponse

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Email and message are required."


class ContactValidationError(Exception):
    """Raised when a contact submission is missing its email or message"""

    def __init__(self, message: str = MISSING_FIELDS_MESSAGE):
        super().__init__(message)
        self.message = message


def failure_response(message: str, status_code: int = status.HTTP_400_BAD_REQUEST) -> JSONResponse:
    body = ContactResponse(success=False, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def contact_validation_error_handler(request: Request, exc: ContactValidationError):
    logger.debug(f"Rejected submission on {request.url.path}: {exc.message}")
    return failure_response(exc.message)


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    # A body that is not a JSON object, or fields that are not strings
    logger.debug(f"Malformed request body on {request.url.path}: {len(exc.errors())} error(s)")
    return failure_response(MISSING_FIELDS_MESSAGE)


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(ContactValidationError, contact_validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
