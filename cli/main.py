# cli/main.py

"""
Interactive console for Watson.

Loads configuration and the data file, then reads one command per line until
the user exits. Parse and command errors are printed and the user is prompted
again; they never end the session.
"""

from __future__ import annotations

import logging

import cli.formatters as formatters
from core.config import Config, load_config
from core.exceptions import DataLoadingError, WatsonError
from core.log_setup import configure_logging
from logic.commands.command import CommandResult
from logic.logic_manager import LogicManager
from logic.parser.database_parser import COMMAND_TYPES
from models.database import Database
from storage.json_storage import JsonDatabaseStorage

logger = logging.getLogger(__name__)


def main() -> None:
    config = load_config()
    configure_logging(config.log_level, config.log_file_path)
    run_cli(config)


def run_cli(config: Config) -> None:
    """
    Top-level read-execute loop.

    Raises:
        SystemExit: When the user issues the `exit` command or closes input.
    """
    logic = LogicManager(load_database(config), JsonDatabaseStorage(config.data_file_path))

    print(f"\n{formatters.format_banner_text('WATSON')}")
    print("Type 'help' to see all commands.")

    while True:
        try:
            command_text = prompt_user_input("Enter command:")
        except EOFError:
            exit_program()

        if not command_text:
            continue

        try:
            result = logic.execute(command_text)

        except WatsonError as e:
            display_error(e)
            continue

        display_result(result, logic)

        if result.exit:
            exit_program()


def load_database(config: Config) -> Database:
    """
    Reads the data file named in `config`.

    Returns:
        Database: The stored database, or an empty one if the file is missing or unreadable.

    Notes:
        - An unreadable file is reported and left untouched until the first change is saved over it.
    """
    storage = JsonDatabaseStorage(config.data_file_path)

    try:
        database = storage.read_database()

    except DataLoadingError as e:
        display_error(e)
        print("Starting with an empty database.")
        return Database()

    if database is None:
        logger.info("Starting with an empty database")
        return Database()

    return database


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def display_result(result: CommandResult, logic: LogicManager) -> None:
    print(f"\n{result.feedback_to_user}")

    if result.show_help:
        print(f"\n{formatters.format_help_text(COMMAND_TYPES)}")
        return

    if result.exit:
        return

    for i, person in enumerate(logic.filtered_persons, 1):
        print(f"{i:>2}. {formatters.format_person_oneline(person)}")


def display_error(error: WatsonError) -> None:
    print(f"\n[ERROR: {type(error).__name__}] {error.message}")


def exit_program() -> None:
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.
    """
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit


if __name__ == "__main__":
    main()
