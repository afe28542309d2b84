# logic/commands/exit_command.py

from logic.commands.command import Command, CommandResult
from models.database import Database


class ExitCommand(Command):
    COMMAND_WORD = "exit"
    MESSAGE_USAGE = "exit: Exits the program.\nExample: exit"

    MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting Watson as requested ..."

    def execute(self, database: Database) -> CommandResult:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)
