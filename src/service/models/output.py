"""
Output models for API responses using Pydantic.

This module defines the response bodies returned by the contact form handler.
Field aliases keep the camelCase names the website front end already reads.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

SUBMISSION_ACCEPTED_MESSAGE = 'Contact form submitted successfully'


class SubmissionAcceptedOutput(BaseModel):
    """Response model for a stored contact form submission."""

    model_config = ConfigDict(populate_by_name=True)

    success: Annotated[bool, Field(
        default=True,
        description='Always true for an accepted submission'
    )] = True

    message: Annotated[str, Field(
        default=SUBMISSION_ACCEPTED_MESSAGE,
        description='Human-readable confirmation',
        examples=[SUBMISSION_ACCEPTED_MESSAGE]
    )] = SUBMISSION_ACCEPTED_MESSAGE

    submission_id: Annotated[str, Field(
        alias='submissionId',
        description='Identifier generated for the stored submission',
        examples=['5f0c6d1e-8a57-4c38-9f7e-3f3b3c1e2a10']
    )]

    submitted_at: Annotated[str, Field(
        alias='submittedAt',
        description='UTC timestamp the submission was accepted at',
        examples=['2024-05-01T12:30:45.123Z']
    )]


class ErrorOutput(BaseModel):
    """Standard error response model."""

    success: Annotated[bool, Field(
        default=False,
        description='Always false for a rejected submission'
    )] = False

    error: Annotated[str, Field(
        description='Human-readable error message',
        examples=['API key required', 'Request body is required', 'Internal server error']
    )]
