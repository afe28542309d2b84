# models/fields.py

"""
Validated single-value fields of a `Person`.

Each field wraps one string and checks it on construction, so an instance can
only ever hold a valid value. Invalid input raises `ValueError` carrying the
field's `MESSAGE_CONSTRAINTS`, which the parser layer reports back to the user.

All fields are frozen and compare by value, which makes them safe to share
between `Person` instances and to store in sets.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class TextField:
    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Value should not be blank."
    VALIDATION_REGEX: ClassVar[str] = r"\S(?:.*\S)?"

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(
                f"{type(self).__name__} expects a str, got {type(self.value).__name__}."
            )
        if not self.is_valid(self.value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return re.fullmatch(cls.VALIDATION_REGEX, text, flags=re.DOTALL) is not None

    def __str__(self) -> str:
        return self.value


class Name(TextField):
    MESSAGE_CONSTRAINTS = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    # first character must not be a space
    VALIDATION_REGEX = r"[^\W_](?:[^\W_]| )*(?<! )"


class Phone(TextField):
    MESSAGE_CONSTRAINTS = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )
    VALIDATION_REGEX = r"[0-9]{3,}"


class Email(TextField):
    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain, with exactly one '@', "
        "no whitespace, and a '.' separating the domain and top-level domain"
    )
    VALIDATION_REGEX = r"[^@\s]+@[^@\s]+\.[^@\s]+"


class Address(TextField):
    MESSAGE_CONSTRAINTS = "Addresses can take any values, and it should not be blank"


class StudentClass(TextField):
    MESSAGE_CONSTRAINTS = (
        "Class should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    VALIDATION_REGEX = r"[^\W_](?:[^\W_]| )*(?<! )"


class Remark(TextField):
    MESSAGE_CONSTRAINTS = "Remarks can take any values, and it should not be blank"


class Tag(TextField):
    MESSAGE_CONSTRAINTS = "Tag names should be alphanumeric"
    VALIDATION_REGEX = r"[^\W_]+"
