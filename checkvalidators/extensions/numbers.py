"""Numeric checks (int, float, Decimal and anything else ordered)."""

from __future__ import annotations

from typing import Any, Callable, Optional

from checkvalidators.check import Check


def _holds(comparison: Callable[[], bool]) -> bool:
    """Evaluate an ordering comparison; NaN operands make it not hold."""
    try:
        return bool(comparison())
    except (TypeError, ArithmeticError):
        return False


class NumberCheck(Check[Any]):
    """Checks for numeric values."""

    def if_negative(self, msg: Optional[str] = None) -> "NumberCheck":
        if self.invalid_model():
            return self
        if _holds(lambda: self.value < 0):
            self.add_error("The number is negative", msg)
        return self

    def if_positive(self, msg: Optional[str] = None) -> "NumberCheck":
        if self.invalid_model():
            return self
        if _holds(lambda: self.value > 0):
            self.add_error("The number is positive", msg)
        return self

    def if_zero(self, msg: Optional[str] = None) -> "NumberCheck":
        if self.invalid_model():
            return self
        if self.value == 0:
            self.add_error("The number is zero", msg)
        return self

    def if_not_zero(self, msg: Optional[str] = None) -> "NumberCheck":
        if self.invalid_model():
            return self
        if self.value != 0:
            self.add_error("The number is not zero", msg)
        return self

    def if_greater_than(self, value: Any, msg: Optional[str] = None) -> "NumberCheck":
        if self.invalid_model():
            return self
        if _holds(lambda: self.value > value):
            self.add_error(f"The number is greater than {value}", msg)
        return self

    def if_less_than(self, value: Any, msg: Optional[str] = None) -> "NumberCheck":
        if self.invalid_model():
            return self
        if _holds(lambda: self.value < value):
            self.add_error(f"The number is less than {value}", msg)
        return self

    def if_equals(self, value: Any, msg: Optional[str] = None) -> "NumberCheck":
        if self.invalid_model():
            return self
        if self.value == value:
            self.add_error(f"The number should not be {value}", msg)
        return self

    def if_not_equals(self, value: Any, msg: Optional[str] = None) -> "NumberCheck":
        if self.invalid_model():
            return self
        if self.value != value:
            self.add_error(f"The number should be {value}", msg)
        return self

    def if_between(self, start: Any, end: Any, msg: Optional[str] = None) -> "NumberCheck":
        """Fail if start < value < end."""
        if self.invalid_model():
            return self
        if _holds(lambda: start < self.value < end):
            self.add_error(
                f"The number '{self.value}' is between '{start}' and '{end}'", msg
            )
        return self

    def if_not_between(self, start: Any, end: Any, msg: Optional[str] = None) -> "NumberCheck":
        """Fail if value < start or value > end."""
        if self.invalid_model():
            return self
        if _holds(lambda: self.value < start or self.value > end):
            self.add_error(
                f"The number '{self.value}' is not between '{start}' and '{end}'", msg
            )
        return self

    def if_between_or_equal(
        self, start: Any, end: Any, msg: Optional[str] = None
    ) -> "NumberCheck":
        """Fail if start <= value <= end."""
        if self.invalid_model():
            return self
        if _holds(lambda: start <= self.value <= end):
            self.add_error(
                f"The number '{self.value}' is between or equal to '{start}' and '{end}'",
                msg,
            )
        return self
