# logic/commands/list_command.py

from logic.commands.command import Command, CommandResult
from models.database import Database


class ListCommand(Command):
    COMMAND_WORD = "list"
    MESSAGE_USAGE = "list: Lists all persons in the database.\nExample: list"

    MESSAGE_SUCCESS = "Listed all persons"

    def execute(self, database: Database) -> CommandResult:
        database.reset_filter()
        return CommandResult(self.MESSAGE_SUCCESS)
