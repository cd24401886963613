"""
Contact submission domain model.

A ContactSubmission is the record written to DynamoDB for one accepted contact
form. It is built once at intake and never changed afterwards.
"""

from datetime import datetime, timedelta, timezone
from typing import Annotated, Any, Dict, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from service.models.input import ContactFormRequest

RETENTION_DAYS = 90

# yyyy-MM-ddTHH:mm:ss.fffZ
SUBMITTED_AT_FORMAT = '%Y-%m-%dT%H:%M:%S.%fZ'


def format_submitted_at(moment: datetime) -> str:
    """Format a UTC datetime with millisecond precision and a literal Z suffix."""
    moment = moment.astimezone(timezone.utc)
    return f"{moment.strftime('%Y-%m-%dT%H:%M:%S')}.{moment.microsecond // 1000:03d}Z"


def parse_submitted_at(value: str) -> datetime:
    """Parse a submittedAt string back into an aware UTC datetime."""
    return datetime.strptime(value, SUBMITTED_AT_FORMAT).replace(tzinfo=timezone.utc)


def is_blank(value: Optional[str]) -> bool:
    """True for None, empty or whitespace-only text."""
    return value is None or not value.strip()


class ContactSubmission(BaseModel):
    """Core contact submission domain model."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Annotated[str, Field(
        description='Unique identifier for the submission',
        examples=['5f0c6d1e-8a57-4c38-9f7e-3f3b3c1e2a10']
    )]

    submitted_at: Annotated[str, Field(
        alias='submittedAt',
        description='UTC timestamp the submission was accepted at',
        examples=['2024-05-01T12:30:45.123Z']
    )]

    first_name: Annotated[str, Field(alias='firstName')]
    last_name: Annotated[str, Field(alias='lastName')]
    email: Annotated[str, Field(alias='email')]
    subject: Annotated[str, Field(alias='subject')]
    message: Annotated[str, Field(alias='message')]

    expires_at: Annotated[int, Field(
        alias='expiresAt',
        description='Epoch seconds after which DynamoDB TTL removes the item'
    )]

    company_name: Annotated[Optional[str], Field(default=None, alias='companyName')] = None
    company_website: Annotated[Optional[str], Field(default=None, alias='companyWebsite')] = None
    phone: Annotated[Optional[str], Field(default=None, alias='phone')] = None

    @classmethod
    def create(cls, request: ContactFormRequest, now: Optional[datetime] = None) -> 'ContactSubmission':
        """
        Create a new submission with a generated ID, timestamp and expiry.

        Args:
            request: Validated contact form request
            now: Intake time, defaults to the current UTC time

        Returns:
            New ContactSubmission with optional fields kept only when non-blank
        """
        now = now or datetime.now(timezone.utc)
        expires_at = int((now + timedelta(days=RETENTION_DAYS)).timestamp())

        return cls(
            id=str(uuid4()),
            submitted_at=format_submitted_at(now),
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            subject=request.subject,
            message=request.message,
            expires_at=expires_at,
            company_name=None if is_blank(request.company_name) else request.company_name,
            company_website=None if is_blank(request.company_website) else request.company_website,
            phone=None if is_blank(request.phone) else request.phone,
        )

    def to_item(self) -> Dict[str, Any]:
        """Convert to a DynamoDB item, leaving out optional attributes that are not set."""
        return self.model_dump(by_alias=True, exclude_none=True)
