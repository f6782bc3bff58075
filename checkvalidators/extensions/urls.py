"""URL checks over urllib.parse results."""

from __future__ import annotations

import ipaddress
from typing import Optional, Union
from urllib.parse import ParseResult, SplitResult

from checkvalidators.check import Check

ParsedUrl = Union[ParseResult, SplitResult]

_LOOPBACK_HOSTS = {"localhost"}


def _port(url: ParsedUrl) -> Optional[int]:
    """The URL's port, or None when absent or not a valid port number."""
    try:
        return url.port
    except ValueError:
        return None


def _is_loopback(host: Optional[str]) -> bool:
    if not host:
        return False
    if host.lower() in _LOOPBACK_HOSTS:
        return True
    try:
        return ipaddress.ip_address(host).is_loopback
    except ValueError:
        return False


class UrlCheck(Check[Optional[ParsedUrl]]):
    """Checks for parsed URLs (urlparse / urlsplit results)."""

    def if_scheme(self, scheme: str, msg: Optional[str] = None) -> "UrlCheck":
        if self.invalid_model():
            return self
        if self.value.scheme.lower() == scheme.lower():
            self.add_error(f"Uri scheme should not be '{scheme}'", msg)
        return self

    def if_not_scheme(self, scheme: str, msg: Optional[str] = None) -> "UrlCheck":
        if self.invalid_model():
            return self
        if self.value.scheme.lower() != scheme.lower():
            self.add_error(f"Uri scheme is not '{scheme}'", msg)
        return self

    def if_absolute(self, msg: Optional[str] = None) -> "UrlCheck":
        """Fail if the URL has a scheme."""
        if self.invalid_model():
            return self
        if self.value.scheme:
            self.add_error("Uri is absolute, consider changing it to relative", msg)
        return self

    def if_relative(self, msg: Optional[str] = None) -> "UrlCheck":
        if self.invalid_model():
            return self
        if not self.value.scheme:
            self.add_error("Uri is relative, consider changing it to absolute", msg)
        return self

    def if_port(self, port: int, msg: Optional[str] = None) -> "UrlCheck":
        if self.invalid_model():
            return self
        if _port(self.value) == port:
            self.add_error(f"Uri port should not be {port}", msg)
        return self

    def if_not_port(self, port: int, msg: Optional[str] = None) -> "UrlCheck":
        if self.invalid_model():
            return self
        if _port(self.value) != port:
            self.add_error(f"Uri port should be {port}", msg)
        return self

    def if_file(self, msg: Optional[str] = None) -> "UrlCheck":
        if self.invalid_model():
            return self
        if self.value.scheme.lower() == "file":
            self.add_error("Uri is a file path", msg)
        return self

    def if_not_file(self, msg: Optional[str] = None) -> "UrlCheck":
        if self.invalid_model():
            return self
        if self.value.scheme.lower() != "file":
            self.add_error("Uri is not a file", msg)
        return self

    def if_loopback(self, msg: Optional[str] = None) -> "UrlCheck":
        if self.invalid_model():
            return self
        if _is_loopback(self.value.hostname):
            self.add_error("Uri is the loopback address", msg)
        return self

    def if_not_loopback(self, msg: Optional[str] = None) -> "UrlCheck":
        if self.invalid_model():
            return self
        if not _is_loopback(self.value.hostname):
            self.add_error("Uri is not the loopback address", msg)
        return self
