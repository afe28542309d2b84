# logic/parser/edit_command_parser.py

"""
Parses the arguments of an `edit` command.

The preamble is the one-based index of the person to edit. Every prefix that
follows sets one field of the `EditPersonDescriptor`. For the collection
fields (`at/`, `r/`, `s/`, `t/`), a single empty value such as `t/` clears
the collection.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from core.exceptions import ParseException
from logic.commands.edit_command import EditCommand, EditPersonDescriptor
from logic.parser import parser_util
from logic.parser.argument_tokenizer import ArgumentMultimap, tokenize
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
    Prefix,
)

T = TypeVar("T")


def _parse_collection(
    multimap: ArgumentMultimap,
    prefix: Prefix,
    parse_values: Callable[[list[str]], T],
) -> T | None:
    if not multimap.is_present(prefix):
        return None

    values = multimap.get_all_values(prefix)
    if values == [""]:
        return parse_values([])

    return parse_values(values)


def _parse_single(
    multimap: ArgumentMultimap,
    prefix: Prefix,
    parse_value: Callable[[str], T],
) -> T | None:
    value = multimap.get_value(prefix)
    return parse_value(value) if value is not None else None


def parse(args: str) -> EditCommand:
    """
    Raises:
        ParseException: If the index is missing or invalid, a field value is invalid, or no field is supplied.
    """
    multimap = tokenize(args, *ALL_PREFIXES)

    try:
        index = parser_util.parse_index(multimap.preamble)
    except ParseException as e:
        raise ParseException.invalid_format(EditCommand.MESSAGE_USAGE) from e

    try:
        descriptor = EditPersonDescriptor(
            name=_parse_single(multimap, PREFIX_NAME, parser_util.parse_name),
            phone=_parse_single(multimap, PREFIX_PHONE, parser_util.parse_phone),
            email=_parse_single(multimap, PREFIX_EMAIL, parser_util.parse_email),
            address=_parse_single(multimap, PREFIX_ADDRESS, parser_util.parse_address),
            student_class=_parse_single(
                multimap, PREFIX_STUDENT_CLASS, parser_util.parse_student_class
            ),
            attendance=_parse_collection(
                multimap, PREFIX_ATTENDANCE, parser_util.parse_attendance
            ),
            remarks=_parse_collection(multimap, PREFIX_REMARK, parser_util.parse_remarks),
            subject_handler=_parse_collection(
                multimap, PREFIX_SUBJECT, parser_util.parse_subjects
            ),
            tags=_parse_collection(multimap, PREFIX_TAG, parser_util.parse_tags),
        )

    except ParseException as e:
        raise ParseException.with_usage(e.message, EditCommand.MESSAGE_USAGE) from e

    if not descriptor.is_any_field_edited():
        raise ParseException.with_usage(
            EditCommand.MESSAGE_NOT_EDITED, EditCommand.MESSAGE_USAGE
        )

    return EditCommand(index, descriptor)
