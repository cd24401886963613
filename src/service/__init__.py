"""
Contact Form Service Module.

This package contains the contact form intake service, laid out in three layers:

- handlers: Lambda entry point, response shaping and error boundary
- logic: Body parsing, field validation and submission orchestration
- dal: Data access layer for DynamoDB persistence
- models: Data models and schemas

Logging, tracing and metrics use AWS Lambda Powertools; request and record
models use Pydantic.
"""

__version__ = "1.0.0"
__description__ = "Contact form submission intake for API Gateway and DynamoDB"

# Re-export commonly used classes for convenience
from service.models.input import ContactFormRequest
from service.models.submission import ContactSubmission
from service.models.output import ErrorOutput, SubmissionAcceptedOutput
from service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "ContactFormRequest",
    "ContactSubmission",
    "ErrorOutput",
    "SubmissionAcceptedOutput",
    "logger",
    "tracer",
    "metrics",
]
