"""
Contact form submission endpoint.

Accepts the landing page's {email, message} payload, validates that both
fields are present, logs the submission and acknowledges it. Nothing is
persisted.
"""

from fastapi import APIRouter, status
import logging

from jrtech.core.errors import ContactValidationError
from jrtech.models.contact import ContactSubmission, ContactResponse

router = APIRouter()
logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Your message has been sent successfully!"


def log_submission(submission: ContactSubmission):
    """Write the submission to the process log as a banner block"""
    logger.info("--- New Contact Form Submission ---")
    logger.info(f"Email: {submission.email}")
    logger.info(f"Message: {submission.message}")
    logger.info("-----------------------------------")


@router.post("/contact", response_model=ContactResponse, status_code=status.HTTP_200_OK, tags=["Contact"])
async def submit_contact(submission: ContactSubmission) -> ContactResponse:
    """
    Handle a contact form submission.

    Args:
        submission: Email and message typed into the landing page form

    Returns:
        ContactResponse: success flag and a confirmation message

    Raises:
        ContactValidationError: if the email or message is missing or empty
    """
    if not submission.is_complete():
        raise ContactValidationError()

    log_submission(submission)

    return ContactResponse(success=True, message=SUCCESS_MESSAGE)
