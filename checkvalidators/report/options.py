"""
Report options.

Options can be given as a ReportOptions, as a plain mapping (for example
loaded from a settings file), or as keyword overrides on a terminal method.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional, Union

from checkvalidators.errors import OptionsError

DEFAULT_START_TEXT = "Errors: "

# Accepted spellings for each option field.
_KEY_ALIASES = {
    "verbose": "verbose",
    "isVerbose": "verbose",
    "start_text": "start_text",
    "startText": "start_text",
}

_FIELD_TYPES = {
    "verbose": bool,
    "start_text": str,
}


@dataclass(frozen=True)
class ReportOptions:
    """
    How accumulated errors are rendered.

    verbose: append the source location and name the checked value
    start_text: prefix for the rendered text; "" omits it
    """

    verbose: bool = False
    start_text: str = DEFAULT_START_TEXT

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ReportOptions":
        """
        Build options from a mapping.

        Raises:
            OptionsError: On an unknown key or a wrongly typed value
        """
        return cls()._with(data)

    def to_dict(self) -> Dict[str, Any]:
        return {"verbose": self.verbose, "start_text": self.start_text}

    def _with(self, data: Mapping[str, Any]) -> "ReportOptions":
        changes: Dict[str, Any] = {}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key)
            if name is None:
                raise OptionsError(f"Unknown report option: {key!r}")
            if not isinstance(value, _FIELD_TYPES[name]):
                raise OptionsError(
                    f"Report option {key!r} must be {_FIELD_TYPES[name].__name__}, "
                    f"got {type(value).__name__}"
                )
            changes[name] = value
        return replace(self, **changes)


def resolve_options(
    options: Union[ReportOptions, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> ReportOptions:
    """Normalize whatever a terminal method was given into ReportOptions."""
    if options is None:
        resolved = ReportOptions()
    elif isinstance(options, ReportOptions):
        resolved = options
    elif isinstance(options, Mapping):
        resolved = ReportOptions.from_dict(options)
    else:
        raise OptionsError(
            f"Report options must be ReportOptions or a mapping, got {type(options).__name__}"
        )
    if overrides:
        resolved = resolved._with(overrides)
    return resolved
