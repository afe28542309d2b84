# logic/parser/delete_command_parser.py

from core.exceptions import ParseException
from logic.commands.delete_command import DeleteCommand
from logic.parser import parser_util


def parse(args: str) -> DeleteCommand:
    # exactly one token; "delete 1 2" is rejected rather than truncated
    tokens = args.split()
    if len(tokens) != 1:
        raise ParseException.invalid_format(DeleteCommand.MESSAGE_USAGE)

    try:
        index = parser_util.parse_index(tokens[0])
    except ParseException as e:
        raise ParseException.invalid_format(DeleteCommand.MESSAGE_USAGE) from e

    return DeleteCommand(index)
