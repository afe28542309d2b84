# logic/parser/parser_util.py

"""
Helpers that turn raw argument text into validated model values.

Every helper strips surrounding whitespace, then either returns a model value
or raises `ParseException` carrying the relevant constraint message. The
per-command parsers append their own usage text to these messages.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from core.exceptions import ParseException
from core.index import Index
from models.attendance import Attendance
from models.fields import Address, Email, Name, Phone, Remark, StudentClass, Tag
from models.subject import Grade, Subject, SubjectHandler

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_ATTENDANCE_CONSTRAINTS = (
    "Attendance should be given as SESSION:COUNT, where SESSION is not blank "
    "and COUNT is 1 (present) or 0 (absent)"
)
MESSAGE_SUBJECT_CONSTRAINTS = (
    "Subjects should be given as SUBJECT or SUBJECT:ASSESSMENT:SCORE/TOTAL:WEIGHTAGE, "
    "with 0 <= SCORE <= TOTAL, TOTAL > 0 and 0 <= WEIGHTAGE <= 100"
)

SUBJECT_FIELD_SEPARATOR = ":"
ATTENDANCE_SEPARATOR = ":"


def parse_index(one_based_index: str) -> Index:
    trimmed = one_based_index.strip()
    if not re.fullmatch(r"[0-9]+", trimmed) or int(trimmed) == 0:
        raise ParseException(MESSAGE_INVALID_INDEX)
    return Index.from_one_based(int(trimmed))


def _parse_field(field_type, text: str):
    try:
        return field_type(text.strip())
    except ValueError as e:
        raise ParseException(field_type.MESSAGE_CONSTRAINTS) from e


def parse_name(name: str) -> Name:
    return _parse_field(Name, name)


def parse_phone(phone: str) -> Phone:
    return _parse_field(Phone, phone)


def parse_email(email: str) -> Email:
    return _parse_field(Email, email)


def parse_address(address: str) -> Address:
    return _parse_field(Address, address)


def parse_student_class(student_class: str) -> StudentClass:
    return _parse_field(StudentClass, student_class)


def parse_remark(remark: str) -> Remark:
    return _parse_field(Remark, remark)


def parse_tag(tag: str) -> Tag:
    return _parse_field(Tag, tag)


def parse_remarks(remarks: Iterable[str]) -> frozenset[Remark]:
    return frozenset(parse_remark(r) for r in remarks)


def parse_tags(tags: Iterable[str]) -> frozenset[Tag]:
    return frozenset(parse_tag(t) for t in tags)


def parse_attendance(entries: Iterable[str]) -> Attendance:
    """
    Parses `SESSION:COUNT` entries into an `Attendance`.

    The last entry for a session wins. COUNT must be exactly "0" or "1".
    """
    sessions: dict[str, int] = {}

    for entry in entries:
        session, separator, count = entry.strip().rpartition(ATTENDANCE_SEPARATOR)
        session = session.strip()
        count = count.strip()

        if not separator or not session or count not in ("0", "1"):
            raise ParseException(MESSAGE_ATTENDANCE_CONSTRAINTS)

        sessions[session] = int(count)

    return Attendance(sessions)


def parse_subject(entry: str) -> Subject:
    """
    Parses one `s/` value into a `Subject`.

    Accepts either a bare subject name ("Math") or a subject with one graded
    assessment ("Math:Midterm:45/50:30").
    """
    parts = [part.strip() for part in entry.strip().split(SUBJECT_FIELD_SEPARATOR)]

    if len(parts) == 1:
        if not Subject.is_valid_name(parts[0]):
            raise ParseException(Subject.MESSAGE_CONSTRAINTS)
        return Subject(parts[0])

    if len(parts) != 4:
        raise ParseException(MESSAGE_SUBJECT_CONSTRAINTS)

    name, assessment, score_and_total, weightage = parts
    if not Subject.is_valid_name(name):
        raise ParseException(Subject.MESSAGE_CONSTRAINTS)

    score, slash, total = score_and_total.partition("/")
    if not slash:
        raise ParseException(MESSAGE_SUBJECT_CONSTRAINTS)

    try:
        grade = Grade(assessment, score.strip(), total.strip(), weightage)
    except (TypeError, ValueError) as e:
        raise ParseException(MESSAGE_SUBJECT_CONSTRAINTS) from e

    return Subject(name, [grade])


def parse_subjects(entries: Iterable[str]) -> SubjectHandler:
    return SubjectHandler(parse_subject(entry) for entry in entries)
