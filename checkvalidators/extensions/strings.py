"""String checks."""

from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Callable, Optional

from checkvalidators.check import Check

EMAIL_PATTERN = (
    r"^[a-zA-Z0-9.!#$%&'*+\/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)

URL_PATTERN = (
    r"^(http|https|file|mailto|ftp|ht|f)tp(s?)\:\/\/[0-9a-zA-Z]([-.\w]*[0-9a-zA-Z])*"
    r"(:(0-9)*)*(\/?)([a-zA-Z0-9\-\.\?\,\'\/\\\+&%\$#_]*)?$"
)


def _comparison(ignore_case: bool) -> str:
    return "IgnoreCase" if ignore_case else "Ordinal"


def _fold(s: str, ignore_case: bool) -> str:
    return s.casefold() if ignore_case else s


def _parses(parse: Callable[[str], object], s: str) -> bool:
    try:
        parse(s)
    except ValueError:
        return False
    return True


class StringCheck(Check[Optional[str]]):
    """Checks for str values."""

    # ========== Emptiness ==========

    def if_empty(self, msg: Optional[str] = None) -> "StringCheck":
        if self.invalid_model():
            return self
        if len(self.value) == 0:
            self.add_error("String is empty", msg)
        return self

    def if_not_empty(self, msg: Optional[str] = None) -> "StringCheck":
        if self.invalid_model():
            return self
        if len(self.value) != 0:
            self.add_error("String is not empty", msg)
        return self

    def if_whitespace(self, msg: Optional[str] = None) -> "StringCheck":
        """Fail if every character is whitespace (an empty string counts)."""
        if self.invalid_model():
            return self
        if all(c.isspace() for c in self.value):
            self.add_error("String is whitespace", msg)
        return self

    def if_empty_or_whitespace(self, msg: Optional[str] = None) -> "StringCheck":
        if self.invalid_model():
            return self
        if not self.value.strip():
            self.add_error("String is empty or whitespace", msg)
        return self

    # ========== Comparison ==========

    def if_equals(
        self, other: str, ignore_case: bool = True, msg: Optional[str] = None
    ) -> "StringCheck":
        if self.invalid_model():
            return self
        if _fold(self.value, ignore_case) == _fold(other, ignore_case):
            self.add_error(
                f"String should not be equal to '{other}' "
                f"[StringComparison: '{_comparison(ignore_case)}']",
                msg,
            )
        return self

    def if_not_equals(
        self, other: str, ignore_case: bool = False, msg: Optional[str] = None
    ) -> "StringCheck":
        if self.invalid_model():
            return self
        if _fold(self.value, ignore_case) != _fold(other, ignore_case):
            self.add_error(
                f"String should be equal to '{other}' "
                f"[StringComparison: '{_comparison(ignore_case)}']",
                msg,
            )
        return self

    def if_starts_with(
        self, prefix: str, ignore_case: bool = False, msg: Optional[str] = None
    ) -> "StringCheck":
        if self.invalid_model():
            return self
        if _fold(self.value, ignore_case).startswith(_fold(prefix, ignore_case)):
            self.add_error(
                f"String should not start with '{prefix}' "
                f"[StringComparison: '{_comparison(ignore_case)}']",
                msg,
            )
        return self

    def if_not_starts_with(
        self, prefix: str, ignore_case: bool = False, msg: Optional[str] = None
    ) -> "StringCheck":
        if self.invalid_model():
            return self
        if not _fold(self.value, ignore_case).startswith(_fold(prefix, ignore_case)):
            self.add_error(
                f"String does not start with '{prefix}' "
                f"[StringComparison: '{_comparison(ignore_case)}']",
                msg,
            )
        return self

    def if_ends_with(
        self, suffix: str, ignore_case: bool = False, msg: Optional[str] = None
    ) -> "StringCheck":
        if self.invalid_model():
            return self
        if _fold(self.value, ignore_case).endswith(_fold(suffix, ignore_case)):
            self.add_error(
                f"String should not end with '{suffix}' "
                f"[StringComparison: '{_comparison(ignore_case)}']",
                msg,
            )
        return self

    def if_not_ends_with(
        self, suffix: str, ignore_case: bool = False, msg: Optional[str] = None
    ) -> "StringCheck":
        if self.invalid_model():
            return self
        if not _fold(self.value, ignore_case).endswith(_fold(suffix, ignore_case)):
            self.add_error(
                f"String does not end with '{suffix}' "
                f"[StringComparison: '{_comparison(ignore_case)}']",
                msg,
            )
        return self

    def if_contains(
        self, part: str, ignore_case: bool = False, msg: Optional[str] = None
    ) -> "StringCheck":
        if self.invalid_model():
            return self
        if _fold(part, ignore_case) in _fold(self.value, ignore_case):
            self.add_error(
                f"String should not contain '{part}' "
                f"[StringComparison: '{_comparison(ignore_case)}']",
                msg,
            )
        return self

    def if_not_contains(
        self, part: str, ignore_case: bool = False, msg: Optional[str] = None
    ) -> "StringCheck":
        if self.invalid_model():
            return self
        if _fold(part, ignore_case) not in _fold(self.value, ignore_case):
            self.add_error(
                f"String should contain '{part}' "
                f"[StringComparison: '{_comparison(ignore_case)}']",
                msg,
            )
        return self

    # ========== Length ==========

    def if_length_greater_than(self, length: int, msg: Optional[str] = None) -> "StringCheck":
        if self.invalid_model():
            return self
        if len(self.value) > length:
            self.add_error(
                f"String has exceeded the character limit of {length} characters", msg
            )
        return self

    def if_length_less_than(self, length: int, msg: Optional[str] = None) -> "StringCheck":
        if self.invalid_model():
            return self
        if len(self.value) < length:
            self.add_error(
                f"String does not meet the minimum character length of {length} characters",
                msg,
            )
        return self

    def if_length_equals(self, length: int, msg: Optional[str] = None) -> "StringCheck":
        if self.invalid_model():
            return self
        if len(self.value) == length:
            self.add_error(f"String length should not equal {length} characters", msg)
        return self

    def if_not_length_equals(self, length: int, msg: Optional[str] = None) -> "StringCheck":
        if self.invalid_model():
            return self
        if len(self.value) != length:
            self.add_error(f"String length should equal {length} characters", msg)
        return self

    # ========== Patterns ==========

    def if_matches(
        self, pattern: str, flags: int = re.IGNORECASE, msg: Optional[str] = None
    ) -> "StringCheck":
        if self.invalid_model():
            return self
        if re.search(pattern, self.value, flags):
            self.add_error(
                f"String should not match the regular expressions pattern '{pattern}'", msg
            )
        return self

    def if_not_matches(
        self, pattern: str, flags: int = re.IGNORECASE, msg: Optional[str] = None
    ) -> "StringCheck":
        if self.invalid_model():
            return self
        if not re.search(pattern, self.value, flags):
            self.add_error(
                f"String should match the regular expressions pattern '{pattern}'", msg
            )
        return self

    def if_not_email(
        self, pattern: Optional[str] = None, flags: int = re.IGNORECASE, msg: Optional[str] = None
    ) -> "StringCheck":
        if self.invalid_model():
            return self
        if not re.match(pattern or EMAIL_PATTERN, self.value, flags):
            self.add_error(f"String '{self.value}' is not an email address", msg)
        return self

    def if_not_url(
        self, pattern: Optional[str] = None, flags: int = re.IGNORECASE, msg: Optional[str] = None
    ) -> "StringCheck":
        if self.invalid_model():
            return self
        if not re.match(pattern or URL_PATTERN, self.value, flags):
            self.add_error(f"String {self.value} is not a URL", msg)
        return self

    # ========== Parsing ==========

    def if_not_int(self, msg: Optional[str] = None) -> "StringCheck":
        if self.invalid_model():
            return self
        if not _parses(int, self.value):
            self.add_error(f"String {self.value} is not an integer", msg)
        return self

    def if_not_float(self, msg: Optional[str] = None) -> "StringCheck":
        if self.invalid_model():
            return self
        if not _parses(float, self.value):
            self.add_error(f"String {self.value} is not a float", msg)
        return self

    def if_not_date(self, msg: Optional[str] = None) -> "StringCheck":
        """Fail unless the string is an ISO 8601 date."""
        if self.invalid_model():
            return self
        if not _parses(date.fromisoformat, self.value):
            self.add_error(f"String {self.value} is not a date", msg)
        return self

    def if_not_datetime(self, msg: Optional[str] = None) -> "StringCheck":
        """Fail unless the string is an ISO 8601 datetime."""
        if self.invalid_model():
            return self
        if not _parses(datetime.fromisoformat, self.value):
            self.add_error(f"String {self.value} is not a datetime", msg)
        return self

    def if_not_time(self, msg: Optional[str] = None) -> "StringCheck":
        if self.invalid_model():
            return self
        if not _parses(time.fromisoformat, self.value):
            self.add_error(f"String {self.value} is not a time", msg)
        return self

    # ========== Passwords ==========

    def if_not_valid_password(
        self,
        min_length: int = 8,
        num_upper: int = 2,
        num_lower: int = 2,
        num_numbers: int = 2,
        num_special: int = 2,
        msg: Optional[str] = None,
    ) -> "StringCheck":
        """
        Fail unless the password is complex enough.

        Every unmet requirement is listed in one message, separated by "; ".
        """
        if self.invalid_model():
            return self

        missing = []
        if len(self.value) < min_length:
            missing.append(f"{min_length} characters")
        if len(re.findall(r"[A-Z]", self.value)) < num_upper:
            missing.append(f"{num_upper} upper-case characters")
        if len(re.findall(r"[a-z]", self.value)) < num_lower:
            missing.append(f"{num_lower} lower-case characters")
        if len(re.findall(r"[0-9]", self.value)) < num_numbers:
            missing.append(f"{num_numbers} numbers")
        if len(re.findall(r"[^a-zA-Z0-9]", self.value)) < num_special:
            missing.append(f"{num_special} special characters")

        if missing:
            self.add_error(f"The password requires the following: {'; '.join(missing)}", msg)
        return self
