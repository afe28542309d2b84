# logic/parser/cli_syntax.py

# argument prefixes shared by the add and edit commands

from dataclasses import dataclass


@dataclass(frozen=True)
class Prefix:
    prefix: str

    def __str__(self) -> str:
        return self.prefix


PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_ADDRESS = Prefix("a/")
PREFIX_STUDENT_CLASS = Prefix("c/")
PREFIX_ATTENDANCE = Prefix("at/")
PREFIX_REMARK = Prefix("r/")
PREFIX_SUBJECT = Prefix("s/")
PREFIX_TAG = Prefix("t/")

ALL_PREFIXES = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_EMAIL,
    PREFIX_ADDRESS,
    PREFIX_STUDENT_CLASS,
    PREFIX_ATTENDANCE,
    PREFIX_REMARK,
    PREFIX_SUBJECT,
    PREFIX_TAG,
)
