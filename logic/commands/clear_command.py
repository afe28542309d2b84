# logic/commands/clear_command.py

from logic.commands.command import Command, CommandResult
from models.database import Database


class ClearCommand(Command):
    COMMAND_WORD = "clear"
    MESSAGE_USAGE = "clear: Removes every person from the database.\nExample: clear"

    MESSAGE_SUCCESS = "Database has been cleared!"

    def execute(self, database: Database) -> CommandResult:
        database.clear()
        database.reset_filter()
        return CommandResult(self.MESSAGE_SUCCESS)
