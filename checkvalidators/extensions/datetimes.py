"""
Date and time checks.

Naive datetimes are treated as local wall-clock time; "older than" checks
compare against now in the value's own timezone.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Any, Optional, Union

from checkvalidators.check import Check

Weekday = Union[int, str]

DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def _weekday_index(day: Weekday) -> int:
    if isinstance(day, int):
        if not 0 <= day <= 6:
            raise ValueError(f"Weekday index must be 0-6, got {day}")
        return day
    try:
        return [name.lower() for name in DAY_NAMES].index(day.lower())
    except ValueError:
        raise ValueError(f"Unknown weekday: {day!r}") from None


class _WeekdayChecks:
    """Day-of-week checks shared by date and datetime values."""

    def if_weekday(self, day: Weekday, msg: Optional[str] = None):
        """Fail if the value falls on `day` (0=Monday, or a day name)."""
        index = _weekday_index(day)
        if self.invalid_model():
            return self
        if self.value.weekday() == index:
            self.add_error(
                f"The day of the week should not be {DAY_NAMES[index]}", msg
            )
        return self

    def if_not_weekday(self, day: Weekday, msg: Optional[str] = None):
        index = _weekday_index(day)
        if self.invalid_model():
            return self
        if self.value.weekday() != index:
            self.add_error(f"The day of the week should be {DAY_NAMES[index]}", msg)
        return self

    def if_monday(self, msg: Optional[str] = None):
        return self.if_weekday(calendar.MONDAY, msg)

    def if_not_monday(self, msg: Optional[str] = None):
        return self.if_not_weekday(calendar.MONDAY, msg)

    def if_tuesday(self, msg: Optional[str] = None):
        return self.if_weekday(calendar.TUESDAY, msg)

    def if_not_tuesday(self, msg: Optional[str] = None):
        return self.if_not_weekday(calendar.TUESDAY, msg)

    def if_wednesday(self, msg: Optional[str] = None):
        return self.if_weekday(calendar.WEDNESDAY, msg)

    def if_not_wednesday(self, msg: Optional[str] = None):
        return self.if_not_weekday(calendar.WEDNESDAY, msg)

    def if_thursday(self, msg: Optional[str] = None):
        return self.if_weekday(calendar.THURSDAY, msg)

    def if_not_thursday(self, msg: Optional[str] = None):
        return self.if_not_weekday(calendar.THURSDAY, msg)

    def if_friday(self, msg: Optional[str] = None):
        return self.if_weekday(calendar.FRIDAY, msg)

    def if_not_friday(self, msg: Optional[str] = None):
        return self.if_not_weekday(calendar.FRIDAY, msg)

    def if_saturday(self, msg: Optional[str] = None):
        return self.if_weekday(calendar.SATURDAY, msg)

    def if_not_saturday(self, msg: Optional[str] = None):
        return self.if_not_weekday(calendar.SATURDAY, msg)

    def if_sunday(self, msg: Optional[str] = None):
        return self.if_weekday(calendar.SUNDAY, msg)

    def if_not_sunday(self, msg: Optional[str] = None):
        return self.if_not_weekday(calendar.SUNDAY, msg)


class _OrderingChecks:
    """Earlier/later/between checks; `noun` names the value in messages."""

    noun = "value"

    def if_earlier_than(self, other: Any, msg: Optional[str] = None):
        if self.invalid_model():
            return self
        if self.value < other:
            self.add_error(f"The {self.noun} '{self.value}' is earlier than '{other}'", msg)
        return self

    def if_later_than(self, other: Any, msg: Optional[str] = None):
        if self.invalid_model():
            return self
        if self.value > other:
            self.add_error(f"The {self.noun} '{self.value}' is later than '{other}'", msg)
        return self

    def if_equal(self, other: Any, msg: Optional[str] = None):
        if self.invalid_model():
            return self
        if self.value == other:
            self.add_error(f"The {self.noun} '{self.value}' is equal to '{other}'", msg)
        return self

    def if_not_equal(self, other: Any, msg: Optional[str] = None):
        if self.invalid_model():
            return self
        if self.value != other:
            self.add_error(f"The {self.noun} '{self.value}' is not equal to '{other}'", msg)
        return self

    def if_between(self, start: Any, end: Any, msg: Optional[str] = None):
        """Fail if start < value < end."""
        if self.invalid_model():
            return self
        if start < self.value < end:
            self.add_error(
                f"The {self.noun} '{self.value}' is between '{start}' and '{end}'", msg
            )
        return self

    def if_not_between(self, start: Any, end: Any, msg: Optional[str] = None):
        if self.invalid_model():
            return self
        if self.value < start or self.value > end:
            self.add_error(
                f"The {self.noun} '{self.value}' is not between '{start}' and '{end}'", msg
            )
        return self


class DateTimeCheck(_WeekdayChecks, _OrderingChecks, Check[Optional[datetime]]):
    """Checks for datetime values."""

    noun = "datetime"

    # ========== Time zone ==========

    def _is_utc(self) -> bool:
        return self.value.tzinfo is not None and self.value.utcoffset() == timedelta(0)

    def _is_local(self) -> bool:
        return self.value.tzinfo is not None and not self._is_utc()

    def if_utc_time(self, msg: Optional[str] = None) -> "DateTimeCheck":
        if self.invalid_model():
            return self
        if self._is_utc():
            self.add_error("The datetime format is Utc", msg)
        return self

    def if_not_utc_time(self, msg: Optional[str] = None) -> "DateTimeCheck":
        if self.invalid_model():
            return self
        if not self._is_utc():
            self.add_error("The datetime format is not Utc", msg)
        return self

    def if_local_time(self, msg: Optional[str] = None) -> "DateTimeCheck":
        """Fail if the value is timezone-aware with a non-UTC offset."""
        if self.invalid_model():
            return self
        if self._is_local():
            self.add_error("The datetime format is local", msg)
        return self

    def if_not_local_time(self, msg: Optional[str] = None) -> "DateTimeCheck":
        if self.invalid_model():
            return self
        if not self._is_local():
            self.add_error("The datetime format is not local", msg)
        return self

    def if_unspecified_time_format(self, msg: Optional[str] = None) -> "DateTimeCheck":
        """Fail if the value is naive."""
        if self.invalid_model():
            return self
        if self.value.tzinfo is None:
            self.add_error("The datetime format is unspecified", msg)
        return self

    def if_daylight_saving_time(self, msg: Optional[str] = None) -> "DateTimeCheck":
        if self.invalid_model():
            return self
        if self.value.dst():
            self.add_error(f"The datetime '{self.value}' is on daylight savings time", msg)
        return self

    def if_not_daylight_saving_time(self, msg: Optional[str] = None) -> "DateTimeCheck":
        if self.invalid_model():
            return self
        if not self.value.dst():
            self.add_error(f"The datetime '{self.value}' is not on daylight savings time", msg)
        return self

    # ========== Age ==========

    def _age(self) -> timedelta:
        return datetime.now(self.value.tzinfo) - self.value

    def _if_older(self, limit: timedelta, amount: float, unit: str, msg: Optional[str]):
        if self.invalid_model():
            return self
        if self._age() > limit:
            self.add_error(f"The datetime '{self.value}' is older than {amount} {unit}", msg)
        return self

    def _if_not_older(self, limit: timedelta, amount: float, unit: str, msg: Optional[str]):
        if self.invalid_model():
            return self
        if self._age() <= limit:
            self.add_error(
                f"The datetime '{self.value}' is not older than {amount} {unit}", msg
            )
        return self

    def if_days_older_than(self, days: float, msg: Optional[str] = None) -> "DateTimeCheck":
        return self._if_older(timedelta(days=days), days, "days", msg)

    def if_not_days_older_than(self, days: float, msg: Optional[str] = None) -> "DateTimeCheck":
        return self._if_not_older(timedelta(days=days), days, "days", msg)

    def if_minutes_older_than(self, minutes: float, msg: Optional[str] = None) -> "DateTimeCheck":
        return self._if_older(timedelta(minutes=minutes), minutes, "minutes", msg)

    def if_not_minutes_older_than(
        self, minutes: float, msg: Optional[str] = None
    ) -> "DateTimeCheck":
        return self._if_not_older(timedelta(minutes=minutes), minutes, "minutes", msg)

    def if_seconds_older_than(self, seconds: float, msg: Optional[str] = None) -> "DateTimeCheck":
        return self._if_older(timedelta(seconds=seconds), seconds, "seconds", msg)

    def if_not_seconds_older_than(
        self, seconds: float, msg: Optional[str] = None
    ) -> "DateTimeCheck":
        return self._if_not_older(timedelta(seconds=seconds), seconds, "seconds", msg)

    def if_milliseconds_older_than(
        self, milliseconds: float, msg: Optional[str] = None
    ) -> "DateTimeCheck":
        return self._if_older(
            timedelta(milliseconds=milliseconds), milliseconds, "milliseconds", msg
        )

    def if_not_milliseconds_older_than(
        self, milliseconds: float, msg: Optional[str] = None
    ) -> "DateTimeCheck":
        return self._if_not_older(
            timedelta(milliseconds=milliseconds), milliseconds, "milliseconds", msg
        )


class DateCheck(_WeekdayChecks, _OrderingChecks, Check[Optional[date]]):
    """Checks for date values."""

    noun = "date"

    def if_min_value(self, msg: Optional[str] = None) -> "DateCheck":
        if self.invalid_model():
            return self
        if self.value == date.min:
            self.add_error(f"The date is set to the minimum value of {self.value}", msg)
        return self

    def if_not_min_value(self, msg: Optional[str] = None) -> "DateCheck":
        if self.invalid_model():
            return self
        if self.value != date.min:
            self.add_error(
                f"The date '{self.value}' is not set to the minimum value of {date.min}", msg
            )
        return self

    def if_max_value(self, msg: Optional[str] = None) -> "DateCheck":
        if self.invalid_model():
            return self
        if self.value == date.max:
            self.add_error(f"The date is set to the maximum value of {self.value}", msg)
        return self

    def if_not_max_value(self, msg: Optional[str] = None) -> "DateCheck":
        if self.invalid_model():
            return self
        if self.value != date.max:
            self.add_error(
                f"The date '{self.value}' is not set to the maximum value of {date.max}", msg
            )
        return self


class TimeCheck(_OrderingChecks, Check[Optional[time]]):
    """Checks for time-of-day values."""

    noun = "time"
