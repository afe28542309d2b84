# logic/commands/add_command.py

from __future__ import annotations

from textwrap import dedent

from core.exceptions import CommandException
from logic.commands.command import Command, CommandResult
from models.database import Database
from models.person import Person


class AddCommand(Command):
    COMMAND_WORD = "add"
    MESSAGE_USAGE = dedent(
        """\
        add: Adds a person to the database.
        Parameters: n/NAME p/PHONE e/EMAIL a/ADDRESS c/CLASS [at/SESSION:COUNT]... [r/REMARK]... [s/SUBJECT[:ASSESSMENT:SCORE/TOTAL:WEIGHTAGE]]... [t/TAG]...
        Example: add n/John Doe p/98765432 e/johnd@example.com a/311, Clementi Ave 2, #02-25 c/4A s/Math:Midterm:45/50:30 t/monitor"""
    )

    MESSAGE_SUCCESS = "New person added: {person}"
    MESSAGE_DUPLICATE_PERSON = "This person already exists in the database"

    def __init__(self, person: Person):
        if person is None:
            raise TypeError("AddCommand requires a Person.")
        self._person = person

    @property
    def person(self) -> Person:
        return self._person

    def execute(self, database: Database) -> CommandResult:
        if database.has_person(self._person):
            raise CommandException(self.MESSAGE_DUPLICATE_PERSON)

        database.add_person(self._person)
        return CommandResult(self.MESSAGE_SUCCESS.format(person=self._person))
