# logic/commands/command.py

"""
Base class and result type shared by every Watson command.

A `Command` is produced by a parser and executed later against a `Database`.
Each subclass carries its own `COMMAND_WORD` and `MESSAGE_USAGE`, which the
parsers pass explicitly when building error messages.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from models.database import Database


@dataclass(frozen=True)
class CommandResult:
    feedback_to_user: str
    show_help: bool = False
    exit: bool = False


class Command(ABC):
    COMMAND_WORD: ClassVar[str]
    MESSAGE_USAGE: ClassVar[str]

    @abstractmethod
    def execute(self, database: Database) -> CommandResult:
        """
        Executes the command against `database`.

        Raises:
            CommandException: If the command cannot be carried out.
        """

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return vars(self) == vars(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{k.lstrip('_')}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({fields})"
