# logic/logic_manager.py

"""
Wires parsing, execution, and persistence together for one input line.
"""

from __future__ import annotations

import logging

from core.exceptions import CommandException
from logic.commands.command import CommandResult
from logic.parser.database_parser import DatabaseParser
from models.database import Database
from models.person import Person
from storage.json_storage import JsonDatabaseStorage

logger = logging.getLogger(__name__)

MESSAGE_FILE_OPS_ERROR = "Could not save data to file: {error}"


class LogicManager:

    def __init__(self, database: Database, storage: JsonDatabaseStorage):
        self._database = database
        self._storage = storage
        self._parser = DatabaseParser()

    @property
    def database(self) -> Database:
        return self._database

    @property
    def filtered_persons(self) -> tuple[Person, ...]:
        return self._database.filtered_persons

    def execute(self, command_text: str) -> CommandResult:
        """
        Parses and executes one line of user input, then saves if anything changed.

        Raises:
            ParseException: If the input cannot be parsed.
            CommandException: If the command fails, or the data file cannot be written.
        """
        logger.info("User command: %s", command_text)

        command = self._parser.parse_command(command_text)
        result = command.execute(self._database)

        if self._database.has_unsaved_changes:
            try:
                self._storage.save_database(self._database)
            except OSError as e:
                raise CommandException(MESSAGE_FILE_OPS_ERROR.format(error=e)) from e

        return result
