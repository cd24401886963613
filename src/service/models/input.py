"""
Input models for request validation using Pydantic.

This module defines the shape of the contact form body posted by the website.
The model only checks the shape (string or missing for every field); the
business rules for required fields and email format live in the logic layer so
that every failing rule can be reported at once.
"""

from typing import Annotated, Any, Optional

from pydantic import BaseModel, Field, model_validator


class ContactFormRequest(BaseModel):
    """Request model for a contact form submission."""

    first_name: Annotated[Optional[str], Field(
        default=None,
        alias='firstName',
        description='Sender first name',
        examples=['Ada']
    )] = None

    last_name: Annotated[Optional[str], Field(
        default=None,
        alias='lastName',
        description='Sender last name',
        examples=['Lovelace']
    )] = None

    company_name: Annotated[Optional[str], Field(
        default=None,
        alias='companyName',
        description='Optional company name',
        examples=['Analytical Engines Ltd']
    )] = None

    company_website: Annotated[Optional[str], Field(
        default=None,
        alias='companyWebsite',
        description='Optional company website',
        examples=['https://example.com']
    )] = None

    email: Annotated[Optional[str], Field(
        default=None,
        alias='email',
        description='Sender email address',
        examples=['ada@example.com']
    )] = None

    phone: Annotated[Optional[str], Field(
        default=None,
        alias='phone',
        description='Optional phone number',
        examples=['+44 20 7946 0000']
    )] = None

    subject: Annotated[Optional[str], Field(
        default=None,
        alias='subject',
        description='Message subject',
        examples=['Partnership enquiry']
    )] = None

    message: Annotated[Optional[str], Field(
        default=None,
        alias='message',
        description='Message body',
        examples=['Hello, I would like to talk about...']
    )] = None

    @model_validator(mode='before')
    @classmethod
    def match_keys_case_insensitively(cls, data: Any) -> Any:
        """Map incoming keys onto field aliases ignoring case; unknown keys pass through and are dropped."""
        if not isinstance(data, dict):
            return data
        aliases = {field.alias.lower(): field.alias for field in cls.model_fields.values() if field.alias}
        return {
            aliases.get(key.lower(), key) if isinstance(key, str) else key: value
            for key, value in data.items()
        }
