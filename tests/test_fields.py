# tests/test_fields.py

import pytest

from models.fields import Address, Email, Name, Phone, Remark, StudentClass, Tag


@pytest.mark.parametrize("name", ["peter jack", "12345", "peter the 2nd", "Capital Tan"])
def test_valid_names(name):
    assert Name.is_valid(name)
    assert str(Name(name)) == name


@pytest.mark.parametrize("name", ["", " ", "^", "peter*", " peter", "peter ", "peter jack "])
def test_invalid_names(name):
    assert not Name.is_valid(name)

    with pytest.raises(ValueError, match="Names should only contain"):
        Name(name)


def test_phone_validation():
    assert Phone.is_valid("911")
    assert Phone.is_valid("124293842033123")
    assert not Phone.is_valid("91")
    assert not Phone.is_valid("9011p041")
    assert not Phone.is_valid("9312 1534")

    with pytest.raises(ValueError):
        Phone("phone")


def test_email_validation():
    assert Email.is_valid("peterjack_1190@example.com")
    assert Email.is_valid("a@bc.d")
    assert not Email.is_valid("peterjackexample.com")
    assert not Email.is_valid("peter@jack@example.com")
    assert not Email.is_valid("peter jack@example.com")
    assert not Email.is_valid("peterjack@example")


def test_address_remark_and_class_validation():
    assert Address.is_valid("Blk 456, Den Road, #01-355")
    assert not Address.is_valid(" ")
    assert Remark.is_valid("Needs help: fractions")
    assert not Remark.is_valid("")
    assert StudentClass.is_valid("4A")
    assert not StudentClass.is_valid("4A!")


def test_tag_validation():
    assert Tag.is_valid("friends")
    assert not Tag.is_valid("best friends")
    assert not Tag.is_valid("#1")


def test_fields_compare_by_value():
    assert Name("Amy") == Name("Amy")
    assert Name("Amy") != Name("amy")
    assert Name("Amy") != StudentClass("Amy")
    assert len({Tag("a"), Tag("a"), Tag("b")}) == 2


def test_field_rejects_non_string():
    with pytest.raises(TypeError):
        Name(None)


def test_fields_reject_trailing_whitespace():
    assert not StudentClass.is_valid("4A ")
    assert not Address.is_valid("Den Road ")
    assert not Remark.is_valid("late\n")
    assert Address.is_valid("A")
    assert Remark.is_valid("Needs  help")
