# logic/parser/sort_command_parser.py

from core.exceptions import ParseException
from logic.commands.sort_command import SortCommand


def parse(args: str) -> SortCommand:
    order = args.strip().upper()

    if order == SortCommand.ASCENDING_ARGS:
        return SortCommand(True)

    if order == SortCommand.DESCENDING_ARGS:
        return SortCommand(False)

    raise ParseException.invalid_format(SortCommand.MESSAGE_USAGE)
