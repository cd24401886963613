"""
Business Logic Layer for contact form submissions.

Parsing and validation return explicit outcomes instead of raising, so the
handler can answer each failure with an early return. SubmissionService builds
the record and hands it to the DAL.
"""

import base64
import binascii
import json
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from aws_lambda_powertools.metrics import MetricUnit
from pydantic import ValidationError as PydanticValidationError
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

from service.dal import DalHandler
from service.handlers.utils.errors import (
    BaseServiceError,
    EmptyBodyError,
    ErrorContext,
    MalformedBodyError,
)
from service.handlers.utils.observability import logger, metrics, tracer
from service.models.input import ContactFormRequest
from service.models.submission import ContactSubmission, is_blank


@dataclass(frozen=True)
class ParseOutcome:
    """Result of reading a request body: either a request or the error to answer with."""

    request: Optional[ContactFormRequest] = None
    error: Optional[BaseServiceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def is_valid_email(value: str) -> bool:
    """
    Check that the whole value is one email address.

    validate_email also accepts "Name <address>" forms and strips surrounding
    whitespace, so the normalized address must still match the input. Only the
    domain is lowercased by normalization.
    """
    try:
        _, normalized = validate_email(value)
    except PydanticCustomError:
        return False
    return normalized.lower() == value.lower()


def parse_submission(
    body: Optional[str],
    context: Optional[ErrorContext] = None,
    is_base64_encoded: bool = False,
) -> ParseOutcome:
    """
    Parse a raw request body into a ContactFormRequest.

    Args:
        body: Raw request body text
        context: Error context of the current request
        is_base64_encoded: Whether the gateway delivered the body base64 encoded

    Returns:
        ParseOutcome holding the request, or the error describing why it could not be read
    """
    if not body:
        return ParseOutcome(error=EmptyBodyError(context=context))

    if is_base64_encoded:
        try:
            body = base64.b64decode(body).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError) as e:
            logger.error("Failed to decode base64 body", extra={"error_type": type(e).__name__})
            return ParseOutcome(error=MalformedBodyError(
                message=f"Body is not base64 encoded UTF-8 text: {e}",
                context=context,
            ))

    try:
        payload = json.loads(body)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse JSON: {e.msg}", extra={"position": e.pos})
        return ParseOutcome(error=MalformedBodyError(
            message=f"Body is not valid JSON: {e.msg}",
            context=context,
        ))

    if payload is None:
        return ParseOutcome(error=MalformedBodyError(
            message="Body parsed to null",
            user_message="Invalid contact form data",
            context=context,
        ))

    try:
        request = ContactFormRequest.model_validate(payload)
    except PydanticValidationError as e:
        logger.error("Body does not match the contact form shape", extra={
            "error_count": e.error_count(),
            "fields": [".".join(str(part) for part in error["loc"]) for error in e.errors()],
        })
        return ParseOutcome(error=MalformedBodyError(
            message="Body does not match the contact form shape",
            context=context,
        ))

    return ParseOutcome(request=request)


def validate_submission(request: ContactFormRequest) -> List[str]:
    """
    Check every required field and the email format.

    All rules are evaluated; the returned list holds one message per failing
    rule, in field order. An empty list means the request is valid.
    """
    errors: List[str] = []

    if is_blank(request.first_name):
        errors.append("First name is required")

    if is_blank(request.last_name):
        errors.append("Last name is required")

    if is_blank(request.email):
        errors.append("Email is required")
    elif not is_valid_email(request.email):
        errors.append("Invalid email format")

    if is_blank(request.subject):
        errors.append("Subject is required")

    if is_blank(request.message):
        errors.append("Message is required")

    return errors


class SubmissionService:
    """Business logic service for storing contact submissions."""

    def __init__(self, submissions_dal: DalHandler):
        """
        Initialize the submission service.

        Args:
            submissions_dal: Data access layer used to store submissions
        """
        self.submissions_dal = submissions_dal

    @tracer.capture_method
    def submit(
        self,
        request: ContactFormRequest,
        context: Optional[ErrorContext] = None,
        now: Optional[datetime] = None,
    ) -> ContactSubmission:
        """
        Build a submission record from a validated request and store it.

        Args:
            request: Request that passed validate_submission
            context: Error context of the current request
            now: Intake time, defaults to the current UTC time

        Returns:
            The stored submission

        Raises:
            PersistenceError: If the record could not be written
        """
        submission = ContactSubmission.create(request, now=now)

        self.submissions_dal.put_submission(submission, context=context)

        metrics.add_metric(name="SubmissionStored", unit=MetricUnit.Count, value=1)
        logger.info(f"Successfully saved contact form submission with ID: {submission.id}", extra={
            "submission_id": submission.id,
            "submitted_at": submission.submitted_at,
            "has_company": submission.company_name is not None,
        })

        return submission
