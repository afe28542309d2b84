# storage/json_storage.py

"""
Reads and writes the Watson `Database` as a single JSON file.

The file holds `{"persons": [...]}`, one dictionary per `Person` as produced by
`Person.to_dict()`. A missing file is not an error: the caller starts with an
empty database instead.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from core.exceptions import DataLoadingError
from models.database import Database

logger = logging.getLogger(__name__)


class JsonDatabaseStorage:

    def __init__(self, file_path: str | os.PathLike):
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    def read_database(self) -> Database | None:
        """
        Loads the database from disk.

        Returns:
            Database | None: The loaded database, or None if the data file does not exist.

        Raises:
            DataLoadingError: If the file cannot be read, is not valid JSON, or holds invalid or
                duplicate records.
        """
        if not self._file_path.exists():
            logger.info("Data file %s not found", self._file_path)
            return None

        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                data = json.load(f)

            if not isinstance(data, dict):
                raise ValueError(f"Expected {self._file_path.name} to contain an object.")

            database = Database.from_dict(data)

        except json.JSONDecodeError as e:
            logger.warning("Failed to parse JSON data in %s: %s", self._file_path, e)
            raise DataLoadingError(f"Failed to parse JSON data: {e}") from e

        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Invalid data in %s: %s", self._file_path, e)
            raise DataLoadingError(f"Invalid data in {self._file_path}: {e}") from e

        except OSError as e:
            logger.warning("Could not read %s: %s", self._file_path, e)
            raise DataLoadingError(f"Could not read data file {self._file_path}: {e}") from e

        logger.info("Loaded %d persons from %s", len(database), self._file_path)
        return database

    def save_database(self, database: Database) -> None:
        """
        Serializes `database` to disk, overwriting the data file.

        Raises:
            OSError: If the file or its parent directory cannot be written.

        Notes:
            - Parent directories are created as needed.
            - Marks the database as saved on success.
        """
        self._file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self._file_path, "w", encoding="utf-8") as f:
            json.dump(database.to_dict(), f, indent=2, sort_keys=True)

        database.mark_saved()
        logger.info("Saved %d persons to %s", len(database), self._file_path)
