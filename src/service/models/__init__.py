"""
Service Models Package

This package contains the Pydantic models used by the service: the contact form
request, the stored submission record and the response bodies.
"""

from .input import ContactFormRequest
from .output import ErrorOutput, SubmissionAcceptedOutput
from .submission import ContactSubmission, RETENTION_DAYS

__all__ = [
    # Input models
    "ContactFormRequest",

    # Output models
    "SubmissionAcceptedOutput",
    "ErrorOutput",

    # Domain models
    "ContactSubmission",
    "RETENTION_DAYS",
]
