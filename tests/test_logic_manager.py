# tests/test_logic_manager.py

import pytest

from core.exceptions import CommandException, ParseException
from core.messages import MESSAGE_UNKNOWN_COMMAND
from logic.logic_manager import LogicManager
from models.database import Database
from person_builder import PersonBuilder, get_add_command
from storage.json_storage import JsonDatabaseStorage


@pytest.fixture
def logic(storage):
    return LogicManager(Database(), storage)


def test_add_command_is_saved(logic, storage, sample_person):
    result = logic.execute(get_add_command(sample_person))

    assert result.feedback_to_user.startswith("New person added")
    assert logic.filtered_persons == (sample_person,)
    assert storage.read_database().persons == (sample_person,)


def test_read_only_command_does_not_write(logic, storage):
    logic.execute("list")

    assert not storage.file_path.exists()


def test_parse_error_propagates(logic):
    with pytest.raises(ParseException) as excinfo:
        logic.execute("unknownCommand")

    assert excinfo.value.message == MESSAGE_UNKNOWN_COMMAND


def test_command_error_propagates(logic):
    with pytest.raises(CommandException):
        logic.execute("delete 1")


def test_find_then_delete_then_list(storage, sample_database, carl):
    logic = LogicManager(sample_database, storage)

    logic.execute("find kurz")
    assert logic.filtered_persons == (carl,)

    logic.execute("delete 1")
    logic.execute("list")

    assert len(logic.filtered_persons) == 2
    assert not storage.read_database().has_person(carl)


def test_edit_then_sort(storage, sample_database, alice, bob, carl):
    logic = LogicManager(sample_database, storage)

    logic.execute("edit 2 s/Math:Exam:100/100:100 s/Physics:Exam:100/100:100")
    logic.execute("sort desc")

    names = [str(p.name) for p in logic.filtered_persons]
    assert names == ["Bob Choo", "Alice Pauline", "Carl Kurz"]


def test_save_failure_is_reported(tmp_path, sample_person):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    logic = LogicManager(Database(), JsonDatabaseStorage(blocker / "watson.json"))

    with pytest.raises(CommandException, match="Could not save data"):
        logic.execute(get_add_command(sample_person))

    assert logic.database.has_person(PersonBuilder().build())
