# logic/parser/add_command_parser.py

from core.exceptions import ParseException
from logic.commands.add_command import AddCommand
from logic.parser import parser_util
from logic.parser.argument_tokenizer import tokenize
from logic.parser.cli_syntax import (
    ALL_PREFIXES,
    PREFIX_ADDRESS,
    PREFIX_ATTENDANCE,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_REMARK,
    PREFIX_STUDENT_CLASS,
    PREFIX_SUBJECT,
    PREFIX_TAG,
)
from models.person import Person

REQUIRED_PREFIXES = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_EMAIL,
    PREFIX_ADDRESS,
    PREFIX_STUDENT_CLASS,
)


def parse(args: str) -> AddCommand:
    """
    Parses the arguments of an `add` command into an `AddCommand`.

    Args:
        args (str): Everything after the command word.

    Raises:
        ParseException: If the preamble is not empty, a required prefix is missing, or any field value is invalid.

    Notes:
        - For single-valued fields, the last occurrence of the prefix wins.
    """
    multimap = tokenize(args, *ALL_PREFIXES)

    if multimap.preamble or not multimap.are_all_present(*REQUIRED_PREFIXES):
        raise ParseException.invalid_format(AddCommand.MESSAGE_USAGE)

    try:
        person = Person(
            name=parser_util.parse_name(multimap.get_value(PREFIX_NAME)),
            phone=parser_util.parse_phone(multimap.get_value(PREFIX_PHONE)),
            email=parser_util.parse_email(multimap.get_value(PREFIX_EMAIL)),
            address=parser_util.parse_address(multimap.get_value(PREFIX_ADDRESS)),
            student_class=parser_util.parse_student_class(
                multimap.get_value(PREFIX_STUDENT_CLASS)
            ),
            attendance=parser_util.parse_attendance(
                multimap.get_all_values(PREFIX_ATTENDANCE)
            ),
            remarks=parser_util.parse_remarks(multimap.get_all_values(PREFIX_REMARK)),
            subject_handler=parser_util.parse_subjects(
                multimap.get_all_values(PREFIX_SUBJECT)
            ),
            tags=parser_util.parse_tags(multimap.get_all_values(PREFIX_TAG)),
        )

    except ParseException as e:
        raise ParseException.with_usage(e.message, AddCommand.MESSAGE_USAGE) from e

    return AddCommand(person)
