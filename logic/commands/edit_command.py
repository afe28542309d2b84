# logic/commands/edit_command.py

"""
Edits the details of an existing person.

The parser records only the fields the user supplied in an
`EditPersonDescriptor`; every other field is copied from the person being
edited when the command executes. The edited person always replaces the
original as a new `Person` instance.
"""

from __future__ import annotations

from textwrap import dedent
from typing import Any

from core.exceptions import CommandException
from core.index import Index
from core.messages import MESSAGE_INVALID_PERSON_DISPLAYED_INDEX
from logic.commands.command import Command, CommandResult
from models.attendance import Attendance
from models.database import Database
from models.fields import Address, Email, Name, Phone, Remark, StudentClass, Tag
from models.person import Person
from models.subject import SubjectHandler


class EditPersonDescriptor:
    """
    Sparse set of changes to apply to a `Person`.

    Unset fields are None. Collection fields hold the full replacement
    collection, so an empty collection clears that field.
    """

    FIELDS = (
        "name",
        "phone",
        "email",
        "address",
        "student_class",
        "attendance",
        "remarks",
        "subject_handler",
        "tags",
    )

    def __init__(
        self,
        name: Name | None = None,
        phone: Phone | None = None,
        email: Email | None = None,
        address: Address | None = None,
        student_class: StudentClass | None = None,
        attendance: Attendance | None = None,
        remarks: frozenset[Remark] | None = None,
        subject_handler: SubjectHandler | None = None,
        tags: frozenset[Tag] | None = None,
    ):
        self.name = name
        self.phone = phone
        self.email = email
        self.address = address
        self.student_class = student_class
        self.attendance = attendance
        self.remarks = frozenset(remarks) if remarks is not None else None
        self.subject_handler = subject_handler
        self.tags = frozenset(tags) if tags is not None else None

    def changes(self) -> dict[str, Any]:
        return {
            field: getattr(self, field)
            for field in self.FIELDS
            if getattr(self, field) is not None
        }

    def is_any_field_edited(self) -> bool:
        return bool(self.changes())

    def apply_to(self, person: Person) -> Person:
        return person.with_changes(**self.changes())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EditPersonDescriptor):
            return NotImplemented
        return self.changes() == other.changes()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.changes().items())
        return f"EditPersonDescriptor({fields})"


class EditCommand(Command):
    COMMAND_WORD = "edit"
    MESSAGE_USAGE = dedent(
        """\
        edit: Edits the details of the person identified by the index number used in the displayed person list. Existing values will be overwritten by the input values.
        Parameters: INDEX (must be a positive integer) [n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] [c/CLASS] [at/SESSION:COUNT]... [r/REMARK]... [s/SUBJECT[:ASSESSMENT:SCORE/TOTAL:WEIGHTAGE]]... [t/TAG]...
        Example: edit 1 p/91234567 e/johndoe@example.com"""
    )

    MESSAGE_EDIT_PERSON_SUCCESS = "Edited Person: {person}"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
    MESSAGE_DUPLICATE_PERSON = "This person already exists in the database."

    def __init__(self, index: Index, descriptor: EditPersonDescriptor):
        if index is None or descriptor is None:
            raise TypeError("EditCommand requires an Index and an EditPersonDescriptor.")
        self._index = index
        self._descriptor = descriptor

    @property
    def index(self) -> Index:
        return self._index

    @property
    def descriptor(self) -> EditPersonDescriptor:
        return self._descriptor

    def execute(self, database: Database) -> CommandResult:
        shown = database.filtered_persons

        if self._index.zero_based >= len(shown):
            raise CommandException(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)

        person_to_edit = shown[self._index.zero_based]
        edited_person = self._descriptor.apply_to(person_to_edit)

        if not person_to_edit.is_same_person(edited_person) and database.has_person(
            edited_person
        ):
            raise CommandException(self.MESSAGE_DUPLICATE_PERSON)

        database.set_person(person_to_edit, edited_person)
        database.reset_filter()
        return CommandResult(self.MESSAGE_EDIT_PERSON_SUCCESS.format(person=edited_person))
