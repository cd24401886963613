"""
DynamoDB implementation of the Data Access Layer (DAL).

This module stores contact submissions in Amazon DynamoDB. Writes are blind
inserts: the (id, submittedAt) key is freshly generated for every submission,
so no condition expression or read-back is used.
"""

from typing import Any, Optional

import boto3
from aws_lambda_powertools.metrics import MetricUnit
from botocore.exceptions import BotoCoreError, ClientError

from service.dal import BaseDalHandler
from service.handlers.utils.errors import ErrorContext, PersistenceError
from service.handlers.utils.observability import logger, metrics, tracer
from service.models.submission import ContactSubmission


class DALError(PersistenceError):
    """Raised when a DynamoDB operation fails."""

    def __init__(
        self,
        message: str,
        operation: str,
        table_name: str,
        dynamodb_error_code: Optional[str] = None,
        context: Optional[ErrorContext] = None,
    ):
        super().__init__(
            message=message,
            error_code="DAL_ERROR",
            context=context,
        )
        self.operation = operation
        self.table_name = table_name
        self.dynamodb_error_code = dynamodb_error_code


class DynamoDbHandler(BaseDalHandler):
    """DynamoDB implementation of the data access layer."""

    def __init__(
        self,
        table_name: str,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        dynamodb_resource: Optional[Any] = None,
    ) -> None:
        """
        Initialize the DynamoDB handler.

        Args:
            table_name: Name of the DynamoDB table
            region_name: AWS region name
            endpoint_url: DynamoDB endpoint URL (for local testing)
            dynamodb_resource: Pre-built boto3 DynamoDB resource to reuse
        """
        super().__init__(table_name)

        if dynamodb_resource is None:
            session_config = {}
            if region_name:
                session_config['region_name'] = region_name
            if endpoint_url:
                session_config['endpoint_url'] = endpoint_url
            dynamodb_resource = boto3.resource('dynamodb', **session_config)

        self.dynamodb = dynamodb_resource
        self.table = self.dynamodb.Table(table_name)

        logger.debug("DynamoDB handler initialized", extra={
            "table_name": table_name,
            "region_name": region_name,
            "endpoint_url": endpoint_url,
        })

    @tracer.capture_method
    def put_submission(self, submission: ContactSubmission, context: Optional[ErrorContext] = None) -> None:
        """
        Store a new contact submission in DynamoDB.

        Args:
            submission: Submission to write
            context: Error context of the current request

        Raises:
            DALError: If the DynamoDB write fails
        """
        try:
            self.table.put_item(Item=submission.to_item())

        except ClientError as e:
            error_code = e.response['Error']['Code']
            metrics.add_metric(name="DynamoDBPutItemError", unit=MetricUnit.Count, value=1)
            logger.error(f'DynamoDB error storing submission: {error_code}', extra={
                'submission_id': submission.id,
                'table_name': self.table_name,
                'error_message': e.response['Error'].get('Message'),
            })
            raise DALError(
                message=f"PutItem failed with {error_code}",
                operation="put_item",
                table_name=self.table_name,
                dynamodb_error_code=error_code,
                context=context,
            ) from e

        except BotoCoreError as e:
            metrics.add_metric(name="DynamoDBPutItemError", unit=MetricUnit.Count, value=1)
            logger.error('DynamoDB client error storing submission', extra={
                'submission_id': submission.id,
                'table_name': self.table_name,
                'error': str(e),
            })
            raise DALError(
                message=f"PutItem failed: {e}",
                operation="put_item",
                table_name=self.table_name,
                context=context,
            ) from e

        metrics.add_metric(name="DynamoDBPutItemSuccess", unit=MetricUnit.Count, value=1)
        tracer.put_annotation('submission_id', submission.id)
        logger.debug(f'Stored submission {submission.id} in {self.table_name}')
