"""
Validation error types.

Failed checks are recorded as plain strings (ValidationFailure). They only
become exceptions when a terminal method is asked to raise them.
"""

from __future__ import annotations

from typing import List, Optional

# One failed check, as a human-readable message.
ValidationFailure = str


def with_parameter(text: str, param_name: Optional[str]) -> str:
    """Append the offending parameter the way argument errors name it."""
    if not param_name:
        return text
    return f"{text} (Parameter '{param_name}')"


class CheckValidationError(ValueError):
    """
    Raised when a terminal method is asked to surface accumulated errors.

    Attributes:
        message: The formatted error text, without the parameter suffix
        errors: The individual failures the text was built from
        param_name: The checked value's label (verbose mode only)
        location: Where the check was created (verbose mode only)
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[ValidationFailure]] = None,
        param_name: Optional[str] = None,
        location: str = "",
    ):
        self.message = message
        self.errors = list(errors or [])
        self.param_name = param_name
        self.location = location
        super().__init__(with_parameter(message, param_name))


class AggregateValidationError(CheckValidationError):
    """Carries every accumulated failure, numbered in order."""

    pass


class SingleValidationError(CheckValidationError):
    """Carries only the first accumulated failure."""

    pass


class EmptyReportError(ValueError):
    """Raised when asked to format the first error of an empty report."""

    def __init__(self) -> None:
        super().__init__("Cannot format the first error: no errors were recorded.")


class OptionsError(ValueError):
    """Raised when report options are malformed."""

    pass
