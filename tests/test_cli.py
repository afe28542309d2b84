# tests/test_cli.py

import pytest

import cli.formatters as formatters
import cli.main as main
from core.config import Config
from logic.parser.database_parser import COMMAND_TYPES
from person_builder import get_add_command


@pytest.fixture
def config(tmp_path):
    return Config(data_file_path=tmp_path / "watson.json")


def feed_input(monkeypatch, lines):
    remaining = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_format_banner_text():
    assert formatters.format_banner_text("WATSON", width=10) == (
        "==========\n  WATSON  \n=========="
    )


def test_format_person_oneline(alice):
    line = formatters.format_person_oneline(alice)

    assert line.startswith("Alice Pauline")
    assert "3A" in line
    assert "0/0" in line
    assert "150.00%" in line
    assert line.endswith("[friends]")


def test_format_person_multiline(full_person):
    text = formatters.format_person_multiline(full_person)

    assert "Person: Benson Meier" in text
    assert "... Attendance: 2/3" in text
    assert "... Tags: friends, monitor" in text


def test_help_text_lists_every_command():
    text = formatters.format_help_text(COMMAND_TYPES)

    for command_type in COMMAND_TYPES:
        assert command_type.MESSAGE_USAGE in text


def test_session_adds_lists_and_exits(monkeypatch, capsys, config, sample_person):
    feed_input(monkeypatch, [get_add_command(sample_person), "", "bogus", "list", "exit"])

    with pytest.raises(SystemExit):
        main.run_cli(config)

    output = capsys.readouterr().out
    assert "New person added: Amy Bee" in output
    assert "[ERROR: ParseException] Unknown command" in output
    assert " 1. Amy Bee" in output
    assert "Exiting Program" in output
    assert config.data_file_path.exists()


def test_session_shows_help(monkeypatch, capsys, config):
    feed_input(monkeypatch, ["help"])

    with pytest.raises(SystemExit):
        main.run_cli(config)

    assert "WATSON COMMANDS" in capsys.readouterr().out


def test_unreadable_data_file_starts_empty(capsys, config):
    config.data_file_path.write_text("{not json")

    database = main.load_database(config)

    assert len(database) == 0
    assert "Starting with an empty database." in capsys.readouterr().out


def test_data_path_directory_starts_empty(capsys, config):
    config.data_file_path.mkdir()

    database = main.load_database(config)

    output = capsys.readouterr().out
    assert len(database) == 0
    assert "[ERROR: DataLoadingError]" in output
    assert "Starting with an empty database." in output


def test_misshapen_record_starts_empty(capsys, config):
    config.data_file_path.write_text(
        '{"persons": [{"name": "Amy Bee", "phone": "85355255", "email": "amy@gmail.com",'
        ' "address": "Street", "student_class": "4A", "attendance": []}]}'
    )

    database = main.load_database(config)

    assert len(database) == 0
    assert "Starting with an empty database." in capsys.readouterr().out
