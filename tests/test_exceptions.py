"""Tests for textdates exception hierarchy."""

import pytest

from textdates.exceptions import InvalidArgumentError, TextDatesError


class TestTextDatesError:
    """Tests for the base TextDatesError class."""

    def test_error_message(self):
        """Should store and return message."""
        error = TextDatesError("Something went wrong")
        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"

    def test_error_code(self):
        """Should have default error code."""
        assert TextDatesError("test").code == "textdates_error"

    def test_to_dict(self):
        """Should convert to a serializable dict."""
        assert TextDatesError("Something went wrong").to_dict() == {
            "error": {
                "code": "textdates_error",
                "message": "Something went wrong",
            }
        }


class TestInvalidArgumentError:
    """Tests for InvalidArgumentError."""

    def test_field_and_message(self):
        """Should store field and prefix the message with it."""
        error = InvalidArgumentError("reference_date", "expected a date")
        assert error.field == "reference_date"
        assert error.message == "reference_date: expected a date"

    def test_error_code(self):
        """Should have invalid_argument code."""
        assert InvalidArgumentError("field", "message").code == "invalid_argument"

    def test_to_dict_includes_field(self):
        """Should include field in dict representation."""
        result = InvalidArgumentError("nil_date", "expected a date").to_dict()
        assert result["error"]["code"] == "invalid_argument"
        assert result["error"]["field"] == "nil_date"
        assert "nil_date" in result["error"]["message"]

    def test_caught_as_base(self):
        """Should be catchable as TextDatesError."""
        with pytest.raises(TextDatesError):
            raise InvalidArgumentError("now", "expected a date")
