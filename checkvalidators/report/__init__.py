"""Formatting of accumulated check errors."""

from .options import ReportOptions, resolve_options
from .reporter import ErrorReport, format_all, format_first

__all__ = [
    "ErrorReport",
    "ReportOptions",
    "format_all",
    "format_first",
    "resolve_options",
]
