"""
Business Logic Layer Module.

This module contains the contact form business rules: reading the request
body, validating the required fields and email format, and building and
storing the submission record.
"""

__version__ = "1.0.0"

from service.logic.submission_service import (
    ParseOutcome,
    SubmissionService,
    parse_submission,
    validate_submission,
)

__all__ = [
    "ParseOutcome",
    "SubmissionService",
    "parse_submission",
    "validate_submission",
]
