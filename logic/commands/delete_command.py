# logic/commands/delete_command.py

from __future__ import annotations

from core.exceptions import CommandException
from core.index import Index
from core.messages import MESSAGE_INVALID_PERSON_DISPLAYED_INDEX
from logic.commands.command import Command, CommandResult
from models.database import Database


class DeleteCommand(Command):
    COMMAND_WORD = "delete"
    MESSAGE_USAGE = (
        "delete: Deletes the person identified by the index number used in the displayed person list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: delete 1"
    )

    MESSAGE_SUCCESS = "Deleted Person: {person}"

    def __init__(self, target_index: Index):
        if target_index is None:
            raise TypeError("DeleteCommand requires an Index.")
        self._target_index = target_index

    @property
    def target_index(self) -> Index:
        return self._target_index

    def execute(self, database: Database) -> CommandResult:
        shown = database.filtered_persons

        if self._target_index.zero_based >= len(shown):
            raise CommandException(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)

        person = shown[self._target_index.zero_based]
        database.remove_person(person)
        return CommandResult(self.MESSAGE_SUCCESS.format(person=person))
