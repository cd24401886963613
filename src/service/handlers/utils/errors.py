"""
Error handling utilities for the contact form Lambda handler.

This module defines the service error hierarchy used to reject submissions and
the helpers that log and count those errors consistently.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from aws_lambda_powertools.metrics import MetricUnit
from pydantic import BaseModel, Field

from service.handlers.utils.observability import logger, metrics, tracer

INTERNAL_SERVER_ERROR_MESSAGE = 'Internal server error'
VALIDATION_ERRORS_PREFIX = 'Validation errors: '
VALIDATION_ERRORS_DELIMITER = ', '


class ErrorSeverity(str, Enum):
    """Error severity levels for classification."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    SECURITY = "SECURITY"
    VALIDATION = "VALIDATION"
    INFRASTRUCTURE = "INFRASTRUCTURE"


class ErrorContext(BaseModel):
    """Context information for errors."""

    request_id: str = Field(description="Unique request identifier")
    operation: str = Field(description="Operation being performed")
    resource_id: Optional[str] = Field(default=None, description="Resource identifier")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    additional_data: Dict[str, Any] = Field(default_factory=dict)


class BaseServiceError(Exception):
    """Base exception class for service errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 500,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.INFRASTRUCTURE,
        context: Optional[ErrorContext] = None,
        user_message: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.severity = severity
        self.category = category
        self.context = context
        self.user_message = user_message or INTERNAL_SERVER_ERROR_MESSAGE
        self.error_id = str(uuid.uuid4())

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_id": self.error_id,
            "error_code": self.error_code,
            "status_code": self.status_code,
            "message": self.message,
            "user_message": self.user_message,
            "severity": self.severity.value,
            "category": self.category.value,
            "context": self.context.model_dump(mode="json") if self.context else None,
        }


class AuthPresenceError(BaseServiceError):
    """Raised when the API key header is missing from the request."""

    def __init__(self, context: Optional[ErrorContext] = None):
        super().__init__(
            message="Request missing API key header",
            error_code="API_KEY_REQUIRED",
            status_code=401,
            severity=ErrorSeverity.MEDIUM,
            category=ErrorCategory.SECURITY,
            context=context,
            user_message="API key required",
        )


class EmptyBodyError(BaseServiceError):
    """Raised when the request carries no body."""

    def __init__(self, context: Optional[ErrorContext] = None):
        super().__init__(
            message="Request body is empty",
            error_code="EMPTY_BODY",
            status_code=400,
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.VALIDATION,
            context=context,
            user_message="Request body is required",
        )


class MalformedBodyError(BaseServiceError):
    """Raised when the request body cannot be read as a contact form."""

    def __init__(
        self,
        message: str,
        user_message: str = "Invalid JSON format",
        context: Optional[ErrorContext] = None,
    ):
        super().__init__(
            message=message,
            error_code="MALFORMED_BODY",
            status_code=400,
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.VALIDATION,
            context=context,
            user_message=user_message,
        )


class ValidationError(BaseServiceError):
    """Raised when one or more contact form fields fail validation."""

    def __init__(
        self,
        field_errors: List[str],
        context: Optional[ErrorContext] = None,
    ):
        joined = VALIDATION_ERRORS_DELIMITER.join(field_errors)
        super().__init__(
            message=f"{VALIDATION_ERRORS_PREFIX}{joined}",
            error_code="VALIDATION_ERROR",
            status_code=400,
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.VALIDATION,
            context=context,
            user_message=f"{VALIDATION_ERRORS_PREFIX}{joined}",
        )
        self.field_errors = list(field_errors)


class PersistenceError(BaseServiceError):
    """Raised when a submission could not be stored or processing failed unexpectedly."""

    def __init__(
        self,
        message: str = "Unexpected error processing contact form",
        error_code: str = "PERSISTENCE_ERROR",
        context: Optional[ErrorContext] = None,
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=500,
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.INFRASTRUCTURE,
            context=context,
            user_message=INTERNAL_SERVER_ERROR_MESSAGE,
        )


def create_error_context(
    request_id: str,
    operation: str,
    resource_id: Optional[str] = None,
    **additional_data: Any,
) -> ErrorContext:
    """Create an error context for consistent error handling."""
    return ErrorContext(
        request_id=request_id,
        operation=operation,
        resource_id=resource_id,
        additional_data=additional_data,
    )


@tracer.capture_method
def log_error_metrics(error: BaseServiceError) -> None:
    """Log error metrics for monitoring and alerting."""

    metrics.add_metric(name="SubmissionRejected", unit=MetricUnit.Count, value=1)
    metrics.add_metric(name=f"Error{error.category.value}Count", unit=MetricUnit.Count, value=1)

    tracer.put_annotation("error_code", error.error_code)
    tracer.put_metadata("error_details", error.to_dict())

    log_fields = {
        "error_id": error.error_id,
        "error_code": error.error_code,
        "status_code": error.status_code,
        "error_severity": error.severity.value,
        "error_message": error.message,
        "request_id": error.context.request_id if error.context else None,
    }

    if error.status_code >= 500:
        logger.error("Contact form submission failed", extra=log_fields)
    else:
        logger.warning("Contact form submission rejected", extra=log_fields)
