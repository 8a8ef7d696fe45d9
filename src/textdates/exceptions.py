"""textdates exception hierarchy.

Recognition failures are not errors: text that contains no date, or contains
an impossible one like "June 31", simply yields fewer matches. Exceptions are
reserved for callers passing values of the wrong type.
"""

from __future__ import annotations


class TextDatesError(Exception):
    """Base exception for all textdates errors.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code.
    """

    code: str = "textdates_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, object]:
        """Convert exception to a serializable dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
            }
        }


class InvalidArgumentError(TextDatesError):
    """An argument has the wrong type.

    Raised by the public entry points when ``reference_date``, ``nil_date``
    or ``now`` is not a calendar date.

    Attributes:
        field: Name of the offending argument.
        message: Description of the failure, prefixed with the field name.
    """

    code: str = "invalid_argument"

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"{field}: {message}")

    def to_dict(self) -> dict[str, object]:
        """Convert exception to a serializable dictionary."""
        return {
            "error": {
                "code": self.code,
                "field": self.field,
                "message": self.message,
            }
        }
