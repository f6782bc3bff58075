"""Typed checks built on the Check extension API."""

from .containers import CollectionCheck, MappingCheck
from .datetimes import DateCheck, DateTimeCheck, TimeCheck
from .enums import EnumCheck
from .numbers import NumberCheck
from .strings import StringCheck
from .urls import UrlCheck

__all__ = [
    "CollectionCheck",
    "DateCheck",
    "DateTimeCheck",
    "EnumCheck",
    "MappingCheck",
    "NumberCheck",
    "StringCheck",
    "TimeCheck",
    "UrlCheck",
]
