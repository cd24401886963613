"""
API Gateway response builders for the contact form handler.

Every response, success or error, carries the same JSON content type and
permissive CORS headers so the browser form can read the body.
"""

from typing import Any, Dict, Optional

from service.handlers.utils.errors import BaseServiceError
from service.models.output import ErrorOutput, SubmissionAcceptedOutput
from service.models.submission import ContactSubmission

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token",
    "Access-Control-Allow-Methods": "POST,OPTIONS",
}


def create_api_response(
    status_code: int,
    body: str,
    request_id: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """Create standardized API Gateway response."""

    default_headers = {"Content-Type": "application/json", **CORS_HEADERS}

    if request_id:
        default_headers["X-Request-ID"] = request_id

    if headers:
        default_headers.update(headers)

    return {
        "statusCode": status_code,
        "headers": default_headers,
        "body": body,
    }


def success_response(submission: ContactSubmission, request_id: Optional[str] = None) -> Dict[str, Any]:
    """Build the 200 response for a stored submission."""
    output = SubmissionAcceptedOutput(
        submission_id=submission.id,
        submitted_at=submission.submitted_at,
    )
    return create_api_response(
        status_code=200,
        body=output.model_dump_json(by_alias=True),
        request_id=request_id,
    )


def error_response(error: BaseServiceError, request_id: Optional[str] = None) -> Dict[str, Any]:
    """Build the error response for a service error, exposing only its user message."""
    output = ErrorOutput(error=error.user_message)
    return create_api_response(
        status_code=error.status_code,
        body=output.model_dump_json(),
        request_id=request_id,
    )
