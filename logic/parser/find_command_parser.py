# logic/parser/find_command_parser.py

from core.exceptions import ParseException
from logic.commands.find_command import FindCommand, FindCommandPredicate


def parse(args: str) -> FindCommand:
    keywords = args.split()
    if not keywords:
        raise ParseException.invalid_format(FindCommand.MESSAGE_USAGE)

    return FindCommand(FindCommandPredicate(keywords))
