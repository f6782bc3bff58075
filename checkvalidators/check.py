"""
Check: fluent guard clauses over a single value.

A Check wraps one value and lets the caller chain predicate checks against it.
Failed checks are accumulated as plain messages; nothing is raised until a
terminal method (throw_errors, throw_first_error) is called.

Gating rules:
- if_ / if_not always run (unless the value is None) and open or close the gate
- and_if / and_if_not only run while the gate is open
- or_if / or_if_not only run while the gate is closed
- a None value turns every predicate check into a no-op
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Callable, Generic, List, Mapping, Optional, TypeVar, Union

from checkvalidators.errors import AggregateValidationError, SingleValidationError
from checkvalidators.report.options import ReportOptions, resolve_options
from checkvalidators.report.reporter import ErrorReport

logger = logging.getLogger(__name__)

T = TypeVar("T")

Predicate = Callable[[Any], bool]
OptionsLike = Union[ReportOptions, Mapping[str, Any], None]


def _caller_location(depth: int) -> str:
    """Render the file and line `depth` frames above the caller."""
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return ""
    return f"in {os.path.basename(frame.f_code.co_filename)}:line {frame.f_lineno}"


def _describe(predicate: Predicate, expression: Optional[str]) -> str:
    if expression:
        return expression
    return getattr(predicate, "__name__", None) or repr(predicate)


class Check(Generic[T]):
    """
    Fluent guard over a single value.

    Usage:
        (
            Check(age, "age")
            .if_null()
            .if_(lambda a: a < 0, "age must not be negative")
            .and_if(lambda a: a > 150, "age is not plausible")
            .throw_errors()
        )
    """

    def __init__(
        self,
        value: T,
        label: str = "",
        location: Optional[str] = None,
        stacklevel: int = 1,
    ) -> None:
        self.value = value
        self.is_null = value is None
        type_name = f"<{type(value).__name__}>"
        self.label = f"{label} {type_name}" if label else type_name
        if location is None:
            location = _caller_location(stacklevel)
        self.location = location
        self._is_valid = not self.is_null
        self._if_valid = True
        self._messages: List[str] = []

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.label!r}, "
            f"errors={len(self._messages)})"
        )

    # ========== Null checks ==========

    def if_null(self, msg: Optional[str] = None) -> "Check[T]":
        """Fail if the value is None."""
        self._if_valid = True
        if self.is_null:
            self.add_error("The value is null", msg)
        return self

    def if_not_null(self, msg: Optional[str] = None) -> "Check[T]":
        """Fail if the value is not None."""
        self._if_valid = True
        if not self.is_null:
            self.add_error("The value is not null", msg)
        return self

    # ========== Predicate checks ==========

    def if_(
        self,
        predicate: Predicate,
        msg: Optional[str] = None,
        expression: Optional[str] = None,
    ) -> "Check[T]":
        """
        Fail if the predicate holds.

        A predicate that raises is treated as not holding.
        """
        if self.invalid_model():
            return self
        if self._evaluate(predicate, default=False):
            self.add_error(self._describe_check("If", predicate, expression), msg)
        return self

    def if_not(
        self,
        predicate: Predicate,
        msg: Optional[str] = None,
        expression: Optional[str] = None,
    ) -> "Check[T]":
        """
        Fail unless the predicate holds.

        A predicate that raises is treated as not holding, so it fails.
        """
        if self.invalid_model():
            return self
        if not self._evaluate(predicate, default=False):
            self.add_error(self._describe_check("IfNot", predicate, expression), msg)
        return self

    def and_if(
        self,
        predicate: Predicate,
        msg: Optional[str] = None,
        expression: Optional[str] = None,
    ) -> "Check[T]":
        """Like if_, but only runs when the preceding check passed."""
        if self.invalid_if():
            return self
        if self._evaluate(predicate, default=False):
            self.add_error(self._describe_check("AndIf", predicate, expression), msg)
        return self

    def and_if_not(
        self,
        predicate: Predicate,
        msg: Optional[str] = None,
        expression: Optional[str] = None,
    ) -> "Check[T]":
        """Like if_not, but only runs when the preceding check passed."""
        if self.invalid_if():
            return self
        if not self._evaluate(predicate, default=False):
            self.add_error(self._describe_check("AndIfNot", predicate, expression), msg)
        return self

    def or_if(
        self,
        predicate: Predicate,
        msg: Optional[str] = None,
        expression: Optional[str] = None,
    ) -> "Check[T]":
        """Like if_, but only runs when the preceding check failed."""
        if not self.invalid_if() or self.is_null:
            return self
        if self._evaluate(predicate, default=False):
            self.add_error(self._describe_check("OrIf", predicate, expression), msg)
        return self

    def or_if_not(
        self,
        predicate: Predicate,
        msg: Optional[str] = None,
        expression: Optional[str] = None,
    ) -> "Check[T]":
        """Like if_not, but only runs when the preceding check failed."""
        if not self.invalid_if() or self.is_null:
            return self
        if not self._evaluate(predicate, default=False):
            self.add_error(self._describe_check("OrIfNot", predicate, expression), msg)
        return self

    def _describe_check(
        self, kind: str, predicate: Predicate, expression: Optional[str]
    ) -> str:
        """Default message; anonymous predicates also name the checked value."""
        text = f"{kind}({_describe(predicate, expression)})"
        if not expression and getattr(predicate, "__name__", None) == "<lambda>":
            return f"{text} on {self.label}"
        return text

    def _evaluate(self, predicate: Predicate, default: bool) -> bool:
        try:
            return bool(predicate(self.value))
        except Exception as e:
            logger.debug("Predicate raised while checking %s: %r", self.label, e)
            return default

    # ========== Extension API ==========

    def add_error(self, default_msg: str, msg: Optional[str] = None) -> None:
        """
        Record a failed check and close the gate.

        A non-empty custom message replaces the default one.
        """
        self._is_valid = False
        self._if_valid = False
        self._messages.append(msg if msg else default_msg)

    def invalid_model(self) -> bool:
        """
        Return True when content checks must be skipped (value is None).

        Otherwise reopens the gate; every independent check starts fresh.
        """
        if self.is_null:
            return True
        self._if_valid = True
        return False

    def invalid_if(self) -> bool:
        """Return True when the previous gated check failed or the value is None."""
        if not self._if_valid or self.invalid_model():
            return True
        return False

    # ========== Reading state ==========

    def get_errors(self) -> List[str]:
        """Accumulated messages, in the order they were added."""
        return list(self._messages)

    def has_errors(self) -> bool:
        return len(self._messages) > 0

    def error_count(self) -> int:
        return len(self._messages)

    def is_valid(self) -> bool:
        return self._is_valid

    def clear(self) -> "Check[T]":
        """Forget all errors and reopen the gate. The value is untouched."""
        self._is_valid = True
        self._if_valid = True
        self._messages.clear()
        return self

    # ========== Terminal methods ==========

    def report(self, options: OptionsLike = None, **overrides: Any) -> ErrorReport:
        """Snapshot the current messages for formatting."""
        return ErrorReport(
            messages=tuple(self._messages),
            label=self.label,
            location=self.location,
            options=resolve_options(options, **overrides),
        )

    def throw_errors(self, options: OptionsLike = None, **overrides: Any) -> None:
        """
        Raise every accumulated error as one AggregateValidationError.

        Does nothing when there are no errors, so it is safe to call
        unconditionally at the end of a chain.

        Raises:
            AggregateValidationError: If any check failed
        """
        if not self._messages:
            return
        report = self.report(options, **overrides)
        logger.debug("Raising %d validation error(s) for %s", len(self._messages), self.label)
        raise AggregateValidationError(
            report.all(),
            errors=list(report.messages),
            param_name=report.param_name,
            location=report.location,
        )

    def throw_first_error(self, options: OptionsLike = None, **overrides: Any) -> None:
        """
        Raise only the first accumulated error.

        Raises:
            SingleValidationError: If any check failed
        """
        if not self._messages:
            return
        report = self.report(options, **overrides)
        logger.debug("Raising first validation error for %s", self.label)
        raise SingleValidationError(
            report.first(),
            errors=[report.messages[0]],
            param_name=report.param_name,
            location=report.location,
        )

    def return_errors(self, options: OptionsLike = None, **overrides: Any) -> Optional[str]:
        """Every accumulated error as one string, or None when valid."""
        if not self._messages:
            return None
        return self.report(options, **overrides).render_all()

    def return_first_error(self, options: OptionsLike = None, **overrides: Any) -> Optional[str]:
        """The first accumulated error as a string, or None when valid."""
        if not self._messages:
            return None
        return self.report(options, **overrides).render_first()
