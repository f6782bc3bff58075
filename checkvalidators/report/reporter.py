"""
Error report rendering.

Format (stable, tested):
    {start_text}1) {m0}, 2) {m1}.
    {start_text}1) {m0}, 2) {m1}, {location}.      (verbose)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from checkvalidators.errors import EmptyReportError, with_parameter
from checkvalidators.report.options import ReportOptions


def _finish(body: str, location: str, options: ReportOptions) -> str:
    text = f"{options.start_text}{body}"
    if options.verbose and location:
        return f"{text}, {location}."
    return f"{text}."


def format_all(
    messages: Sequence[str],
    label: str = "",
    location: str = "",
    options: Optional[ReportOptions] = None,
) -> str:
    """
    Number every message in insertion order and join them.

    The label is not part of the text; in verbose mode callers attach it
    as the offending parameter.
    """
    options = options or ReportOptions()
    body = ", ".join(f"{i}) {m}" for i, m in enumerate(messages, start=1))
    return _finish(body, location, options)


def format_first(
    messages: Sequence[str],
    label: str = "",
    location: str = "",
    options: Optional[ReportOptions] = None,
) -> str:
    """
    Render only the first message.

    Raises:
        EmptyReportError: If there are no messages
    """
    if not messages:
        raise EmptyReportError()
    return _finish(messages[0], location, options or ReportOptions())


@dataclass(frozen=True)
class ErrorReport:
    """A snapshot of a check's messages plus what is needed to render them."""

    messages: Sequence[str]
    label: str = ""
    location: str = ""
    options: ReportOptions = field(default_factory=ReportOptions)

    @property
    def param_name(self) -> Optional[str]:
        """The label, reported as the offending parameter in verbose mode."""
        if self.options.verbose and self.label:
            return self.label
        return None

    def all(self) -> str:
        return format_all(self.messages, self.label, self.location, self.options)

    def first(self) -> str:
        return format_first(self.messages, self.label, self.location, self.options)

    def render_all(self) -> str:
        """all() plus the parameter suffix, matching str() of the raised error."""
        return with_parameter(self.all(), self.param_name)

    def render_first(self) -> str:
        return with_parameter(self.first(), self.param_name)
