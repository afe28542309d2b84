# tests/test_argument_tokenizer.py

from logic.parser.argument_tokenizer import tokenize
from logic.parser.cli_syntax import (
    PREFIX_ATTENDANCE,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_TAG,
)


def test_tokenize_without_prefixes():
    multimap = tokenize("  some random string /t tag with leading and trailing spaces ")

    assert multimap.preamble == "some random string /t tag with leading and trailing spaces"
    assert not multimap.is_present(PREFIX_TAG)


def test_tokenize_preamble_and_values():
    multimap = tokenize(" 1 n/John Doe t/friend t/cs ", PREFIX_NAME, PREFIX_TAG)

    assert multimap.preamble == "1"
    assert multimap.get_value(PREFIX_NAME) == "John Doe"
    assert multimap.get_all_values(PREFIX_TAG) == ["friend", "cs"]
    assert multimap.get_value(PREFIX_TAG) == "cs"


def test_tokenize_prefix_needs_leading_whitespace():
    multimap = tokenize(" n/John e/john@ex.com", PREFIX_NAME, PREFIX_EMAIL, PREFIX_TAG)

    assert multimap.get_value(PREFIX_EMAIL) == "john@ex.com"
    assert multimap.get_value(PREFIX_NAME) == "John"

    # "n/" inside a value is not a prefix
    multimap = tokenize(" n/Johnn/Doe", PREFIX_NAME)
    assert multimap.get_value(PREFIX_NAME) == "Johnn/Doe"


def test_tokenize_distinguishes_overlapping_prefixes():
    multimap = tokenize(" at/m1:1 t/friend", PREFIX_ATTENDANCE, PREFIX_TAG)

    assert multimap.get_all_values(PREFIX_ATTENDANCE) == ["m1:1"]
    assert multimap.get_all_values(PREFIX_TAG) == ["friend"]


def test_tokenize_at_start_of_string():
    multimap = tokenize("n/John", PREFIX_NAME)

    assert multimap.preamble == ""
    assert multimap.get_value(PREFIX_NAME) == "John"


def test_empty_value_is_present():
    multimap = tokenize(" t/", PREFIX_TAG)

    assert multimap.is_present(PREFIX_TAG)
    assert multimap.get_all_values(PREFIX_TAG) == [""]
    assert multimap.get_value(PREFIX_NAME) is None
