"""Checks for sized collections and mappings."""

from __future__ import annotations

from typing import Any, Optional

from checkvalidators.check import Check


class CollectionCheck(Check[Any]):
    """Checks for lists, tuples, sets and other sized collections."""

    # How emptiness messages refer to the value.
    subject = "The list"

    def if_empty(self, msg: Optional[str] = None) -> "CollectionCheck":
        if self.invalid_model():
            return self
        if len(self.value) == 0:
            self.add_error(f"{self.subject} is empty", msg)
        return self

    def if_not_empty(self, msg: Optional[str] = None) -> "CollectionCheck":
        if self.invalid_model():
            return self
        if len(self.value) != 0:
            self.add_error(f"{self.subject} is not empty", msg)
        return self

    def if_count(self, count: int, msg: Optional[str] = None) -> "CollectionCheck":
        if self.invalid_model():
            return self
        if len(self.value) == count:
            self.add_error(f"The item count should not be {count}", msg)
        return self

    def if_not_count(self, count: int, msg: Optional[str] = None) -> "CollectionCheck":
        if self.invalid_model():
            return self
        if len(self.value) != count:
            self.add_error(f"The item count is not {count}", msg)
        return self

    def if_count_greater_than(self, count: int, msg: Optional[str] = None) -> "CollectionCheck":
        if self.invalid_model():
            return self
        if len(self.value) > count:
            self.add_error(f"The item count is greater than {count}", msg)
        return self

    def if_count_less_than(self, count: int, msg: Optional[str] = None) -> "CollectionCheck":
        if self.invalid_model():
            return self
        if len(self.value) < count:
            self.add_error(f"The item count is less than {count}", msg)
        return self


class MappingCheck(CollectionCheck):
    """Checks for dicts and other mappings."""

    subject = "Dictionary"

    def if_contains_key(self, key: Any, msg: Optional[str] = None) -> "MappingCheck":
        if self.invalid_model():
            return self
        if key in self.value:
            self.add_error(f"Dictionary should not contain the key '{key}'", msg)
        return self

    def if_not_contains_key(self, key: Any, msg: Optional[str] = None) -> "MappingCheck":
        if self.invalid_model():
            return self
        if key not in self.value:
            self.add_error(f"Dictionary does not contain the key '{key}'", msg)
        return self
