"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for the environment variables read by the
contact form handler when it builds its DynamoDB collaborator.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field

DEFAULT_TABLE_NAME = 'ContactMessages'


class ContactFormEnvVars(BaseModel):
    """Environment variables for the contact form handler."""

    # DynamoDB table holding contact form submissions
    DYNAMODB_TABLE_NAME: Annotated[str, Field(
        default=DEFAULT_TABLE_NAME,
        description='DynamoDB table name for contact form submissions',
        min_length=1
    )] = DEFAULT_TABLE_NAME

    # Endpoint override, only set when running against DynamoDB Local
    DYNAMODB_ENDPOINT: Annotated[Optional[str], Field(
        default=None,
        description='DynamoDB endpoint URL for local testing'
    )] = None

    AWS_REGION: Annotated[str, Field(
        default='us-east-1',
        description='AWS region for service deployment'
    )] = 'us-east-1'

    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='contact-form',
        description='Service name for AWS Powertools'
    )] = 'contact-form'

    POWERTOOLS_METRICS_NAMESPACE: Annotated[str, Field(
        default='ContactForm',
        description='Namespace for CloudWatch metrics'
    )] = 'ContactForm'

    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'


def get_handler_env_vars() -> ContactFormEnvVars:
    """
    Get typed environment variables for the contact form handler.

    Results are cached by aws-lambda-env-modeler for the lifetime of the
    execution environment.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=ContactFormEnvVars)
