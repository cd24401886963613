"""
Data Access Layer (DAL) for the contact form service.

This module provides the data access layer interface and factory function used
by the logic layer to store contact submissions.
"""

from abc import ABC, abstractmethod
from typing import Optional, Protocol, runtime_checkable

from service.handlers.utils.errors import ErrorContext
from service.models.submission import ContactSubmission


@runtime_checkable
class DalHandler(Protocol):
    """Protocol defining the data access layer interface."""

    def put_submission(self, submission: ContactSubmission, context: Optional[ErrorContext] = None) -> None:
        """Store a new submission."""
        ...


class BaseDalHandler(ABC):
    """Abstract base class for data access layer implementations."""

    def __init__(self, table_name: str) -> None:
        """
        Initialize the DAL handler.

        Args:
            table_name: Name of the database table
        """
        self.table_name = table_name

    @abstractmethod
    def put_submission(self, submission: ContactSubmission, context: Optional[ErrorContext] = None) -> None:
        """Store a new submission."""
        pass


def get_dal_handler(
    table_name: str,
    region_name: Optional[str] = None,
    endpoint_url: Optional[str] = None,
) -> DalHandler:
    """
    Factory function to get the appropriate DAL handler.

    Args:
        table_name: Name of the database table
        region_name: AWS region name
        endpoint_url: DynamoDB endpoint URL (for local testing)

    Returns:
        DAL handler instance
    """
    # Import here to avoid circular imports
    from service.dal.db_handler import DynamoDbHandler

    return DynamoDbHandler(table_name, region_name=region_name, endpoint_url=endpoint_url)


__all__ = [
    'DalHandler',
    'BaseDalHandler',
    'get_dal_handler'
]
