# logic/commands/help_command.py

from logic.commands.command import Command, CommandResult
from models.database import Database


class HelpCommand(Command):
    COMMAND_WORD = "help"
    MESSAGE_USAGE = "help: Shows program usage instructions.\nExample: help"

    SHOWING_HELP_MESSAGE = "Showing help for all commands."

    def execute(self, database: Database) -> CommandResult:
        return CommandResult(self.SHOWING_HELP_MESSAGE, show_help=True)
