# models/database.py

"""
The Database model is the in-memory "source of truth" for all `Person` records.

Persons are kept in insertion order (or the order of the last sort) alongside a
filtered view that commands such as `find` narrow down and `list` resets. The
one-based indices users type always refer to positions in the filtered view.

Provides methods for adding, replacing, removing, and sorting persons, as well
as `require_unique_person()` for enforcing that no two persons share a name.
Tracks `has_unsaved_changes` so callers know when the data file is stale.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from models.person import Person

logger = logging.getLogger(__name__)

PersonPredicate = Callable[[Person], bool]


def show_all_persons(person: Person) -> bool:
    return True


class Database:

    def __init__(self, persons: Iterable[Person] = ()):
        self._persons: list[Person] = []
        self._predicate: PersonPredicate = show_all_persons
        self._unsaved_changes: bool = False

        for person in persons:
            self.require_unique_person(person)
            self._persons.append(person)

    # === properties ===

    @property
    def persons(self) -> tuple[Person, ...]:
        return tuple(self._persons)

    @property
    def filtered_persons(self) -> tuple[Person, ...]:
        return tuple(p for p in self._persons if self._predicate(p))

    @property
    def has_unsaved_changes(self) -> bool:
        return self._unsaved_changes

    def mark_saved(self) -> None:
        self._unsaved_changes = False

    def _mark_dirty(self) -> None:
        self._unsaved_changes = True

    # === data accessors ===

    def has_person(self, person: Person) -> bool:
        return any(p.is_same_person(person) for p in self._persons)

    def __len__(self) -> int:
        return len(self._persons)

    # === data manipulators ===

    def add_person(self, person: Person) -> None:
        """
        Appends a person to the database.

        Raises:
            ValueError: If a person with the same name already exists.
        """
        self.require_unique_person(person)
        self._persons.append(person)
        self._mark_dirty()
        logger.info("Added person %s", person.name)

    def set_person(self, target: Person, edited: Person) -> None:
        """
        Replaces `target` with `edited`, keeping its position.

        Raises:
            ValueError: If `target` is not in the database, or if `edited` has the same name as a different existing person.
        """
        position = self._position_of(target)

        if not target.is_same_person(edited):
            self.require_unique_person(edited)

        self._persons[position] = edited
        self._mark_dirty()
        logger.info("Replaced person %s with %s", target.name, edited.name)

    def remove_person(self, person: Person) -> None:
        """
        Raises:
            ValueError: If the person is not in the database.
        """
        del self._persons[self._position_of(person)]
        self._mark_dirty()
        logger.info("Removed person %s", person.name)

    def clear(self) -> None:
        self._persons.clear()
        self._mark_dirty()
        logger.info("Cleared all persons")

    def sort_persons(self, ascending: bool = True) -> None:
        # stable, so persons with equal scores keep their relative order
        self._persons.sort(key=lambda p: p.total_score, reverse=not ascending)
        self._mark_dirty()

    def update_filtered_persons(self, predicate: PersonPredicate) -> None:
        self._predicate = predicate

    def reset_filter(self) -> None:
        self._predicate = show_all_persons

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {"persons": [person.to_dict() for person in self._persons]}

    @classmethod
    def from_dict(cls, data: dict) -> Database:
        """
        Raises:
            KeyError: If the "persons" key is missing.
            TypeError: If "persons" or a nested record has the wrong shape.
            ValueError: If any record holds an invalid field value or two records share a name.
        """
        persons = data["persons"]
        if not isinstance(persons, list):
            raise TypeError("Database persons must be a list.")
        return cls(Person.from_dict(p) for p in persons)

    # === data validators ===

    def require_unique_person(self, person: Person) -> None:
        if self.has_person(person):
            raise ValueError(f"A person named '{person.name}' already exists.")

    def _position_of(self, person: Person) -> int:
        for i, p in enumerate(self._persons):
            if p == person:
                return i
        raise ValueError(f"Person '{person.name}' is not in the database.")

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Database({len(self._persons)} persons)"
