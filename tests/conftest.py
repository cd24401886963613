"""
Pytest configuration and shared fixtures for the contact form service.

This module provides common test fixtures and configuration used across
unit, integration, and end-to-end tests.
"""

import json
import os
from typing import Any, Callable, Dict, Optional
from unittest.mock import Mock

import pytest

# Powertools reads these when the service modules are first imported
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "test",
    "AWS_SECRET_ACCESS_KEY": "test",
    "DYNAMODB_TABLE_NAME": "test-contact-messages",
    "POWERTOOLS_SERVICE_NAME": "test-contact-form",
    "POWERTOOLS_METRICS_NAMESPACE": "TestContactForm",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
})

import boto3
from moto import mock_aws

from service.dal.db_handler import DynamoDbHandler
from service.dal.schema import create_contact_messages_table
from service.handlers.contact_form_handler import ContactFormHandler
from service.handlers.utils.observability import metrics
from service.logic.submission_service import SubmissionService

TEST_TABLE_NAME = "test-contact-messages"


# DynamoDB fixtures
@pytest.fixture
def dynamodb_resource():
    """Mocked DynamoDB service resource."""
    with mock_aws():
        yield boto3.resource("dynamodb", region_name="us-east-1")


@pytest.fixture
def contact_table(dynamodb_resource):
    """Create a mock contact submissions table with the production schema."""
    return create_contact_messages_table(dynamodb_resource, TEST_TABLE_NAME)


@pytest.fixture
def submissions_dal(dynamodb_resource, contact_table) -> DynamoDbHandler:
    """DAL bound to the mocked contact submissions table."""
    return DynamoDbHandler(TEST_TABLE_NAME, dynamodb_resource=dynamodb_resource)


@pytest.fixture
def contact_form_handler(submissions_dal) -> ContactFormHandler:
    """Handler wired to the mocked table."""
    return ContactFormHandler(submission_service=SubmissionService(submissions_dal=submissions_dal))


# Sample data fixtures
@pytest.fixture
def minimal_form_data() -> Dict[str, Any]:
    """Contact form with only the required fields."""
    return {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "subject": "Analytical engine",
        "message": "I would like to discuss a collaboration.",
    }


@pytest.fixture
def full_form_data(minimal_form_data) -> Dict[str, Any]:
    """Contact form with every field populated."""
    return {
        **minimal_form_data,
        "companyName": "Analytical Engines Ltd",
        "companyWebsite": "https://analytical.example.com",
        "phone": "+44 20 7946 0000",
    }


@pytest.fixture
def make_event() -> Callable[..., Dict[str, Any]]:
    """Factory for API Gateway REST proxy events posted to /contact."""

    def _make_event(
        body: Any = None,
        headers: Optional[Dict[str, str]] = None,
        request_id: str = "test-request-id-123",
    ) -> Dict[str, Any]:
        if headers is None:
            headers = {
                "Content-Type": "application/json",
                "x-api-key": "test-api-key",
            }
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)
        return {
            "resource": "/contact",
            "path": "/contact",
            "httpMethod": "POST",
            "headers": headers,
            "multiValueHeaders": {},
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "pathParameters": None,
            "stageVariables": None,
            "requestContext": {
                "requestId": request_id,
                "accountId": "123456789012",
                "stage": "prod",
                "httpMethod": "POST",
                "path": "/prod/contact",
                "resourcePath": "/contact",
                "identity": {
                    "sourceIp": "127.0.0.1",
                    "userAgent": "test-agent/1.0",
                },
            },
            "body": body,
            "isBase64Encoded": False,
        }

    return _make_event


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "contact-form-lambda-function"
    context.function_version = "$LATEST"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:contact-form-lambda-function"
    context.memory_limit_in_mb = 256
    context.aws_request_id = "lambda-request-id-456"
    context.log_group_name = "/aws/lambda/contact-form-lambda-function"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    context.get_remaining_time_in_millis.return_value = 30000
    return context


@pytest.fixture(autouse=True)
def reset_metrics():
    """Drop metrics buffered by handlers that were called without log_metrics."""
    metrics.clear_metrics()
    yield
    metrics.clear_metrics()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "e2e" in str(item.fspath):
            item.add_marker(pytest.mark.e2e)
