# logic/commands/sort_command.py

from logic.commands.command import Command, CommandResult
from models.database import Database


class SortCommand(Command):
    COMMAND_WORD = "sort"
    ASCENDING_ARGS = "ASC"
    DESCENDING_ARGS = "DESC"
    MESSAGE_USAGE = (
        "sort: Sorts all persons by the sum of their subjects' total percentages.\n"
        f"Parameters: {ASCENDING_ARGS} or {DESCENDING_ARGS} (case-insensitive)\n"
        "Example: sort desc"
    )

    MESSAGE_SUCCESS = "Sorted all persons by total score in {order} order"

    def __init__(self, is_ascending: bool):
        self._is_ascending = is_ascending

    @property
    def is_ascending(self) -> bool:
        return self._is_ascending

    def execute(self, database: Database) -> CommandResult:
        database.sort_persons(ascending=self._is_ascending)
        order = "ascending" if self._is_ascending else "descending"
        return CommandResult(self.MESSAGE_SUCCESS.format(order=order))
