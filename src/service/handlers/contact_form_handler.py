"""
Contact Form Handler - Lambda function for contact form submissions.

This module implements the handler layer for POST /contact: it checks the API
key header, reads and validates the body through the logic layer, stores the
submission and shapes every outcome into an API Gateway response. Nothing
raised while handling a request escapes the handler.
"""

from typing import Any, Dict, Optional

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent
from aws_lambda_powertools.utilities.typing import LambdaContext

from service.dal import get_dal_handler
from service.handlers.models.env_vars import get_handler_env_vars
from service.handlers.utils.errors import (
    AuthPresenceError,
    BaseServiceError,
    PersistenceError,
    ValidationError as ServiceValidationError,
    create_error_context,
    log_error_metrics,
)
from service.handlers.utils.observability import logger, metrics, tracer
from service.handlers.utils.responses import error_response, success_response
from service.logic.submission_service import SubmissionService, parse_submission, validate_submission

API_KEY_HEADER = 'x-api-key'


def has_api_key(event: APIGatewayProxyEvent) -> bool:
    """Check for the API key header, matching the name case-insensitively."""
    headers = event.get('headers') or {}
    return any(name.lower() == API_KEY_HEADER for name in headers)


class ContactFormHandler:
    """Handles one contact form submission per call; holds no per-request state."""

    def __init__(self, submission_service: SubmissionService):
        self.submission_service = submission_service

    @tracer.capture_method
    def handle(self, event: APIGatewayProxyEvent) -> Dict[str, Any]:
        """
        Process a contact form submission.

        Args:
            event: API Gateway proxy event

        Returns:
            API Gateway response with status 200, 400, 401 or 500
        """
        request_id = (event.get('requestContext') or {}).get('requestId', 'unknown')
        logger.info("Processing contact form submission", extra={"request_id": request_id})

        context = create_error_context(
            request_id=request_id,
            operation="submit_contact_form",
        )

        try:
            # The gateway enforces the key; this only confirms it was sent
            if not has_api_key(event):
                return self._reject(AuthPresenceError(context=context), request_id)

            outcome = parse_submission(event.body, context, is_base64_encoded=bool(event.is_base64_encoded))
            if not outcome.ok:
                return self._reject(outcome.error, request_id)

            field_errors = validate_submission(outcome.request)
            if field_errors:
                return self._reject(ServiceValidationError(field_errors, context=context), request_id)

            submission = self.submission_service.submit(outcome.request, context=context)
            tracer.put_annotation("submission_id", submission.id)

            return success_response(submission, request_id)

        except BaseServiceError as e:
            return self._reject(e, request_id)

        except Exception as e:
            logger.exception("Error processing contact form", extra={
                "request_id": request_id,
                "error_type": type(e).__name__,
            })
            return self._reject(
                PersistenceError(message=f"Unexpected {type(e).__name__}: {e}", context=context),
                request_id,
            )

    def _reject(self, error: BaseServiceError, request_id: Optional[str]) -> Dict[str, Any]:
        log_error_metrics(error)
        return error_response(error, request_id)


# Built on first use and reused by later invocations in the same execution environment
_contact_form_handler: Optional[ContactFormHandler] = None


def get_contact_form_handler() -> ContactFormHandler:
    """Get or create the contact form handler configured from environment variables."""
    global _contact_form_handler

    if _contact_form_handler is None:
        env_vars = get_handler_env_vars()
        submissions_dal = get_dal_handler(
            table_name=env_vars.DYNAMODB_TABLE_NAME,
            region_name=env_vars.AWS_REGION,
            endpoint_url=env_vars.DYNAMODB_ENDPOINT,
        )
        _contact_form_handler = ContactFormHandler(
            submission_service=SubmissionService(submissions_dal=submissions_dal),
        )
        logger.info("Contact form handler initialized", extra={
            "table_name": env_vars.DYNAMODB_TABLE_NAME,
        })

    return _contact_form_handler


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Main Lambda handler function.

    Args:
        event: Lambda event payload
        context: Lambda context object

    Returns:
        API Gateway response
    """
    metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)

    try:
        handler = get_contact_form_handler()
    except Exception as e:
        logger.exception("Contact form handler could not be initialized", extra={
            "error": str(e),
            "request_id": context.aws_request_id,
        })
        return error_response(PersistenceError(message="Handler initialization failed"), context.aws_request_id)

    return handler.handle(APIGatewayProxyEvent(event))
