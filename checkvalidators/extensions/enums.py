"""
Enum checks.

The checked value is an Enum member; the checks ask questions about the
member's enum class.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from checkvalidators.check import Check


class EnumCheck(Check[Optional[Enum]]):
    """Checks for Enum members."""

    def _defines(self, value: Any) -> bool:
        enum_cls = type(self.value)
        if isinstance(value, enum_cls):
            return True
        return any(member.value == value for member in enum_cls)

    def if_contains_value(self, name: str, msg: Optional[str] = None) -> "EnumCheck":
        """Fail if the enum class has a member called `name`."""
        if self.invalid_model():
            return self
        if name in type(self.value).__members__:
            self.add_error(f"The enum contains the value '{name}'", msg)
        return self

    def if_not_contains_value(self, name: str, msg: Optional[str] = None) -> "EnumCheck":
        if self.invalid_model():
            return self
        if name not in type(self.value).__members__:
            self.add_error(f"The enum does not contain the value '{name}'", msg)
        return self

    def if_defined(self, value: Any, msg: Optional[str] = None) -> "EnumCheck":
        """Fail if the enum class defines `value` (a member or a member's value)."""
        if self.invalid_model():
            return self
        if self._defines(value):
            self.add_error(f"The enum should not define the value '{value}'", msg)
        return self

    def if_not_defined(self, value: Any, msg: Optional[str] = None) -> "EnumCheck":
        if self.invalid_model():
            return self
        if not self._defines(value):
            self.add_error(f"The enum does not define the value '{value}'", msg)
        return self
