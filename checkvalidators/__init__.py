"""
CheckValidators: fluent guard clauses.

Wrap a value, chain checks against it, then raise or return every failure
at once:

    check(name, "name").if_empty_or_whitespace().if_length_greater_than(40).throw_errors()
"""

from .check import Check
from .errors import (
    AggregateValidationError,
    CheckValidationError,
    EmptyReportError,
    OptionsError,
    SingleValidationError,
)
from .extensions import (
    CollectionCheck,
    DateCheck,
    DateTimeCheck,
    EnumCheck,
    MappingCheck,
    NumberCheck,
    StringCheck,
    TimeCheck,
    UrlCheck,
)
from .factory import check, check_class_for
from .report import ErrorReport, ReportOptions, format_all, format_first

__version__ = "0.1.0"

__all__ = [
    "AggregateValidationError",
    "Check",
    "CheckValidationError",
    "CollectionCheck",
    "DateCheck",
    "DateTimeCheck",
    "EmptyReportError",
    "EnumCheck",
    "ErrorReport",
    "MappingCheck",
    "NumberCheck",
    "OptionsError",
    "ReportOptions",
    "SingleValidationError",
    "StringCheck",
    "TimeCheck",
    "UrlCheck",
    "check",
    "check_class_for",
    "format_all",
    "format_first",
]
