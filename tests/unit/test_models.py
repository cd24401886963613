"""
Unit tests for Pydantic models.

This module tests the request shape model, the submission domain model and
the response models used by the contact form handler.
"""

import json
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from service.models.input import ContactFormRequest
from service.models.output import ErrorOutput, SubmissionAcceptedOutput
from service.models.submission import (
    RETENTION_DAYS,
    ContactSubmission,
    format_submitted_at,
    is_blank,
    parse_submitted_at,
)

FIXED_NOW = datetime(2024, 5, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)


class TestContactFormRequest:
    """Test cases for ContactFormRequest model."""

    def test_camel_case_keys(self, full_form_data):
        """Test binding the documented camelCase keys."""
        request = ContactFormRequest.model_validate(full_form_data)

        assert request.first_name == "Ada"
        assert request.last_name == "Lovelace"
        assert request.email == "ada@example.com"
        assert request.company_name == "Analytical Engines Ltd"
        assert request.company_website == "https://analytical.example.com"
        assert request.phone == "+44 20 7946 0000"

    def test_keys_match_case_insensitively(self):
        """Test that key case does not matter."""
        request = ContactFormRequest.model_validate({
            "FIRSTNAME": "Ada",
            "lastname": "Lovelace",
            "Email": "ada@example.com",
            "SUBJECT": "Hi",
            "Message": "Hello",
            "CompanyName": "Engines",
        })

        assert request.first_name == "Ada"
        assert request.last_name == "Lovelace"
        assert request.email == "ada@example.com"
        assert request.subject == "Hi"
        assert request.message == "Hello"
        assert request.company_name == "Engines"

    def test_unknown_fields_ignored(self, minimal_form_data):
        """Test that extra keys are dropped."""
        request = ContactFormRequest.model_validate({**minimal_form_data, "newsletter": True, "utm": {"a": 1}})

        assert not hasattr(request, "newsletter")
        assert request.first_name == "Ada"

    def test_snake_case_keys_are_not_field_names(self):
        """Test that Python attribute names are not accepted as JSON keys."""
        request = ContactFormRequest.model_validate({"first_name": "Ada"})

        assert request.first_name is None

    def test_missing_and_null_fields_are_none(self):
        """Test that absent and null values both read as None."""
        request = ContactFormRequest.model_validate({"firstName": None})

        assert request.first_name is None
        assert request.last_name is None
        assert request.phone is None

    def test_values_kept_verbatim(self):
        """Test that values are not trimmed or case folded."""
        request = ContactFormRequest.model_validate({"email": " Ada@Example.com ", "message": "  Hi  "})

        assert request.email == " Ada@Example.com "
        assert request.message == "  Hi  "

    @pytest.mark.parametrize("value", [123, 4.5, True, ["Ada"], {"name": "Ada"}])
    def test_non_string_value_rejected(self, value):
        """Test that a field with a non-string JSON value fails the shape check."""
        with pytest.raises(ValidationError):
            ContactFormRequest.model_validate({"firstName": value})

    @pytest.mark.parametrize("payload", [[], [1, 2], "text", 42, True])
    def test_non_object_payload_rejected(self, payload):
        """Test that only JSON objects are accepted."""
        with pytest.raises(ValidationError):
            ContactFormRequest.model_validate(payload)


class TestContactSubmission:
    """Test cases for the ContactSubmission domain model."""

    def test_create_with_required_fields_only(self, minimal_form_data):
        """Test that absent optional fields are left out of the item entirely."""
        request = ContactFormRequest.model_validate(minimal_form_data)

        submission = ContactSubmission.create(request, now=FIXED_NOW)
        item = submission.to_item()

        assert "companyName" not in item
        assert "companyWebsite" not in item
        assert "phone" not in item
        assert item["firstName"] == "Ada"
        assert item["lastName"] == "Lovelace"
        assert item["email"] == "ada@example.com"
        assert item["subject"] == "Analytical engine"
        assert item["message"] == "I would like to discuss a collaboration."

    def test_create_with_all_fields(self, full_form_data):
        """Test that every populated field is stored."""
        request = ContactFormRequest.model_validate(full_form_data)

        item = ContactSubmission.create(request, now=FIXED_NOW).to_item()

        assert set(item) == {
            "id", "submittedAt", "expiresAt",
            "firstName", "lastName", "email", "subject", "message",
            "companyName", "companyWebsite", "phone",
        }
        assert item["companyName"] == "Analytical Engines Ltd"
        assert item["companyWebsite"] == "https://analytical.example.com"
        assert item["phone"] == "+44 20 7946 0000"

    def test_blank_optional_fields_omitted(self, minimal_form_data):
        """Test that empty and whitespace-only optional fields are not stored."""
        request = ContactFormRequest.model_validate({
            **minimal_form_data,
            "companyName": "",
            "companyWebsite": "   ",
            "phone": None,
        })

        item = ContactSubmission.create(request, now=FIXED_NOW).to_item()

        assert "companyName" not in item
        assert "companyWebsite" not in item
        assert "phone" not in item

    def test_submitted_at_format(self, minimal_form_data):
        """Test the millisecond UTC timestamp format."""
        request = ContactFormRequest.model_validate(minimal_form_data)

        submission = ContactSubmission.create(request, now=FIXED_NOW)

        assert submission.submitted_at == "2024-05-01T12:30:45.123Z"

    def test_expires_at_is_ninety_days_after_submission(self, full_form_data):
        """Test that expiresAt is exactly the retention window after submittedAt, in epoch seconds."""
        request = ContactFormRequest.model_validate(full_form_data)

        submission = ContactSubmission.create(request, now=FIXED_NOW)

        submitted = parse_submitted_at(submission.submitted_at)
        assert RETENTION_DAYS == 90
        assert submission.expires_at == int(submitted.timestamp()) + 90 * 24 * 60 * 60
        assert submission.expires_at == int(datetime(2024, 7, 30, 12, 30, 45, tzinfo=timezone.utc).timestamp())

    def test_create_uses_current_time_by_default(self, minimal_form_data):
        """Test that submittedAt falls between the times taken around create()."""
        request = ContactFormRequest.model_validate(minimal_form_data)

        before = datetime.now(timezone.utc) - timedelta(milliseconds=1)
        submission = ContactSubmission.create(request)
        after = datetime.now(timezone.utc)

        submitted = parse_submitted_at(submission.submitted_at)
        assert before <= submitted <= after

    def test_ids_are_unique(self, minimal_form_data):
        """Test that every submission gets a fresh identifier."""
        request = ContactFormRequest.model_validate(minimal_form_data)

        ids = {ContactSubmission.create(request).id for _ in range(50)}

        assert len(ids) == 50

    def test_submission_is_immutable(self, minimal_form_data):
        """Test that a built record cannot be changed."""
        submission = ContactSubmission.create(ContactFormRequest.model_validate(minimal_form_data))

        with pytest.raises(ValidationError):
            submission.email = "other@example.com"

    def test_expires_at_stored_as_integer(self, minimal_form_data):
        """Test that the TTL attribute is numeric for DynamoDB."""
        item = ContactSubmission.create(ContactFormRequest.model_validate(minimal_form_data)).to_item()

        assert isinstance(item["expiresAt"], int)


class TestTimestampHelpers:
    """Test cases for the timestamp helpers."""

    def test_format_pads_milliseconds(self):
        assert format_submitted_at(datetime(2024, 1, 2, 3, 4, 5, 7000, tzinfo=timezone.utc)) == "2024-01-02T03:04:05.007Z"

    def test_format_converts_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        assert format_submitted_at(datetime(2024, 1, 2, 5, 4, 5, tzinfo=plus_two)) == "2024-01-02T03:04:05.000Z"

    def test_parse_round_trips_millisecond_precision(self):
        assert parse_submitted_at("2024-05-01T12:30:45.123Z") == datetime(2024, 5, 1, 12, 30, 45, 123000, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value,expected", [
        (None, True), ("", True), ("   ", True), ("\t\n", True), ("a", False), (" a ", False),
    ])
    def test_is_blank(self, value, expected):
        assert is_blank(value) is expected


class TestOutputModels:
    """Test cases for response body models."""

    def test_accepted_output_uses_camel_case(self):
        output = SubmissionAcceptedOutput(submission_id="abc", submitted_at="2024-05-01T12:30:45.123Z")

        body = json.loads(output.model_dump_json(by_alias=True))

        assert body == {
            "success": True,
            "message": "Contact form submitted successfully",
            "submissionId": "abc",
            "submittedAt": "2024-05-01T12:30:45.123Z",
        }

    def test_error_output(self):
        body = json.loads(ErrorOutput(error="API key required").model_dump_json())

        assert body == {"success": False, "error": "API key required"}
