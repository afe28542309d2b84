# core/exceptions.py

"""
Exception hierarchy for Watson.

`ParseException` is raised while turning user input into a `Command`,
`CommandException` while executing a `Command` against the `Database`, and
`DataLoadingError` while reading the JSON data file.
"""

from __future__ import annotations

from core.messages import MESSAGE_INVALID_COMMAND_FORMAT


class WatsonError(Exception):
    """Base class for all user-facing Watson errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self._message = message

    @property
    def message(self) -> str:
        return self._message


class ParseException(WatsonError):
    """Raised when user input does not match the expected command format."""

    @classmethod
    def invalid_format(cls, usage: str) -> ParseException:
        return cls(MESSAGE_INVALID_COMMAND_FORMAT.format(usage=usage))

    @classmethod
    def with_usage(cls, detail: str, usage: str) -> ParseException:
        return cls(f"{detail}\n{usage}")


class CommandException(WatsonError):
    """Raised when a parsed command cannot be carried out."""


class DataLoadingError(WatsonError):
    """Raised when the data file exists but cannot be read into a `Database`."""
