# logic/parser/database_parser.py

"""
Top-level entry point of the parsing layer.

`DatabaseParser.parse_command()` splits a raw input line into its command word
and argument text, looks the word up in a closed registry, and hands the
argument text to that command's parser. Commands that take no arguments
(`clear`, `exit`, `help`, `list`) ignore anything typed after the command word.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from types import MappingProxyType

from core.exceptions import ParseException
from core.messages import MESSAGE_UNKNOWN_COMMAND
from logic.commands.add_command import AddCommand
from logic.commands.clear_command import ClearCommand
from logic.commands.command import Command
from logic.commands.delete_command import DeleteCommand
from logic.commands.edit_command import EditCommand
from logic.commands.exit_command import ExitCommand
from logic.commands.find_command import FindCommand
from logic.commands.help_command import HelpCommand
from logic.commands.list_command import ListCommand
from logic.commands.sort_command import SortCommand
from logic.parser import (
    add_command_parser,
    delete_command_parser,
    edit_command_parser,
    find_command_parser,
    sort_command_parser,
)

logger = logging.getLogger(__name__)

ArgumentParser = Callable[[str], Command]

BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)


def _ignoring_arguments(command_type: type[Command]) -> ArgumentParser:
    def parse(args: str) -> Command:
        return command_type()

    return parse


COMMAND_PARSERS: Mapping[str, ArgumentParser] = MappingProxyType(
    {
        AddCommand.COMMAND_WORD: add_command_parser.parse,
        ClearCommand.COMMAND_WORD: _ignoring_arguments(ClearCommand),
        DeleteCommand.COMMAND_WORD: delete_command_parser.parse,
        EditCommand.COMMAND_WORD: edit_command_parser.parse,
        ExitCommand.COMMAND_WORD: _ignoring_arguments(ExitCommand),
        FindCommand.COMMAND_WORD: find_command_parser.parse,
        HelpCommand.COMMAND_WORD: _ignoring_arguments(HelpCommand),
        ListCommand.COMMAND_WORD: _ignoring_arguments(ListCommand),
        SortCommand.COMMAND_WORD: sort_command_parser.parse,
    }
)

COMMAND_TYPES: tuple[type[Command], ...] = (
    AddCommand,
    ClearCommand,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    SortCommand,
)


class DatabaseParser:

    def parse_command(self, user_input: str) -> Command:
        """
        Parses one line of user input into a `Command`.

        Args:
            user_input (str): The raw line as typed by the user.

        Returns:
            Command: The parsed, not yet executed, command.

        Raises:
            ParseException:
                - If the line is empty or whitespace only (message cites the help usage).
                - If the command word is not recognized.
                - If the command's own parser rejects the arguments.

        Notes:
            - Command words are matched exactly and case-sensitively.
            - The argument text keeps its leading whitespace, which the prefix tokenizer relies on.
        """
        match = BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
        if match is None:
            raise ParseException.invalid_format(HelpCommand.MESSAGE_USAGE)

        command_word = match.group("command_word")
        arguments = match.group("arguments")

        parser = COMMAND_PARSERS.get(command_word)
        if parser is None:
            logger.debug("Unknown command word %r", command_word)
            raise ParseException(MESSAGE_UNKNOWN_COMMAND)

        logger.debug("Dispatching %r with arguments %r", command_word, arguments)
        return parser(arguments)
