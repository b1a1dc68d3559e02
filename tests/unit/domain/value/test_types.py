"""Tests for partnership value objects."""

import pytest
from pydantic import ValidationError

from paire.domain.value import Email, InvitationToken, emails_match, is_valid_email


class TestEmail:
    """Tests for Email value object."""

    def test_normalises_case_and_whitespace(self):
        """Emails are stored lower-cased and stripped."""
        assert Email(root="  Alice@Example.COM ").root == "alice@example.com"

    def test_equal_regardless_of_input_case(self):
        assert Email(root="BOB@example.com") == Email(root="bob@EXAMPLE.com")

    @pytest.mark.parametrize(
        "value", ["", "not-an-email", "a@b", "@example.com", "a b@example.com"]
    )
    def test_rejects_malformed(self, value):
        with pytest.raises(ValidationError):
            Email(root=value)

    def test_rejects_overlong(self):
        with pytest.raises(ValidationError):
            Email(root="a" * 250 + "@example.com")


class TestEmailHelpers:
    """Tests for email helper functions."""

    def test_is_valid_email(self):
        assert is_valid_email("alice@example.com")
        assert not is_valid_email("alice")
        assert not is_valid_email(None)

    def test_emails_match_is_case_insensitive(self):
        assert emails_match("Alice@Example.com", "alice@example.COM")

    def test_missing_email_never_matches(self):
        assert not emails_match(None, "alice@example.com")
        assert not emails_match("alice@example.com", "")


class TestInvitationToken:
    """Tests for InvitationToken value object."""

    def test_redacted_keeps_prefix_only(self):
        token = InvitationToken(root="abcdefghijklmnop")
        assert token.redacted() == "abcdefgh..."

    def test_rejects_empty(self):
        with pytest.raises(ValidationError):
            InvitationToken(root="")
