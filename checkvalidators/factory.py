"""Pick the typed Check for a value."""

from __future__ import annotations

import numbers
from collections.abc import Collection, Mapping
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, List, Optional, Tuple, Type
from urllib.parse import ParseResult, SplitResult

from checkvalidators.check import Check
from checkvalidators.extensions import (
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

# First match wins; order matters where types overlap
# (bool is an int, IntEnum is an int, datetime is a date, URL results are tuples).
# Complex numbers are unordered, so they fall through to a plain Check.
_DISPATCH: List[Tuple[Tuple[type, ...], Type[Check]]] = [
    ((bool,), Check),
    ((Enum,), EnumCheck),
    ((numbers.Real, Decimal), NumberCheck),
    ((str,), StringCheck),
    ((datetime,), DateTimeCheck),
    ((date,), DateCheck),
    ((time,), TimeCheck),
    ((ParseResult, SplitResult), UrlCheck),
    ((Mapping,), MappingCheck),
    ((Collection,), CollectionCheck),
]


def check_class_for(value: Any) -> Type[Check]:
    """The Check subclass whose checks apply to `value`."""
    for types, cls in _DISPATCH:
        if isinstance(value, types):
            return cls
    return Check


def check(value: Any, label: str = "", location: Optional[str] = None) -> Check:
    """
    Start a check chain on `value`.

    None gets a plain Check; construct a typed check (e.g. StringCheck)
    directly to keep typed checks available on a value that may be None.
    """
    return check_class_for(value)(value, label, location, stacklevel=2)
