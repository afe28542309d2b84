# logic/commands/find_command.py

from __future__ import annotations

from core.messages import MESSAGE_PERSONS_LISTED_OVERVIEW
from logic.commands.command import Command, CommandResult
from models.database import Database
from models.person import Person


class FindCommandPredicate:
    """
    Matches a person when any keyword equals, ignoring case, one word of the
    person's name, their class, one of their tags, or one of their subjects.
    """

    def __init__(self, keywords: list[str]):
        self._keywords: tuple[str, ...] = tuple(keywords)

    @property
    def keywords(self) -> list[str]:
        return list(self._keywords)

    def __call__(self, person: Person) -> bool:
        searchable = {word.casefold() for word in str(person.name).split()}
        searchable.add(str(person.student_class).casefold())
        searchable.update(str(tag).casefold() for tag in person.tags)
        searchable.update(subject.name.casefold() for subject in person.subjects_taken)

        return any(keyword.casefold() in searchable for keyword in self._keywords)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FindCommandPredicate):
            return NotImplemented
        return self._keywords == other._keywords

    def __hash__(self) -> int:
        return hash(self._keywords)

    def __repr__(self) -> str:
        return f"FindCommandPredicate({list(self._keywords)})"


class FindCommand(Command):
    COMMAND_WORD = "find"
    MESSAGE_USAGE = (
        "find: Finds all persons whose name, class, tags or subjects contain any of "
        "the specified keywords (case-insensitive) and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: find alice 4A math"
    )

    def __init__(self, predicate: FindCommandPredicate):
        if predicate is None:
            raise TypeError("FindCommand requires a FindCommandPredicate.")
        self._predicate = predicate

    @property
    def predicate(self) -> FindCommandPredicate:
        return self._predicate

    def execute(self, database: Database) -> CommandResult:
        database.update_filtered_persons(self._predicate)
        count = len(database.filtered_persons)
        return CommandResult(MESSAGE_PERSONS_LISTED_OVERVIEW.format(count=count))
