# tests/conftest.py

import pytest

from models.database import Database
from models.subject import Grade, Subject
from person_builder import PersonBuilder, subject_scoring
from storage.json_storage import JsonDatabaseStorage


@pytest.fixture
def sample_person():
    return PersonBuilder().build()


@pytest.fixture
def full_person():
    return (
        PersonBuilder()
        .with_name("Benson Meier")
        .with_phone("98765432")
        .with_email("johnd@example.com")
        .with_address("311, Clementi Ave 2, #02-25")
        .with_class("4B")
        .with_attendance({"m1": 1, "m2": 0, "m3": 1})
        .with_remarks("Needs help with algebra", "Class monitor")
        .with_subjects(
            Subject(
                "Math",
                [Grade("Midterm", 45, 50, 30), Grade("Final", 80, 100, 70)],
            ),
            Subject("Physics"),
        )
        .with_tags("friends", "monitor")
        .build()
    )


@pytest.fixture
def alice():
    return (
        PersonBuilder()
        .with_name("Alice Pauline")
        .with_phone("94351253")
        .with_email("alice@example.com")
        .with_class("3A")
        .with_subjects(subject_scoring("Math", 60), subject_scoring("English", 90))
        .with_tags("friends")
        .build()
    )


@pytest.fixture
def bob():
    return (
        PersonBuilder()
        .with_name("Bob Choo")
        .with_phone("98765432")
        .with_email("bob@example.com")
        .with_class("4B")
        .with_subjects(subject_scoring("Math", 50))
        .build()
    )


@pytest.fixture
def carl():
    return (
        PersonBuilder()
        .with_name("Carl Kurz")
        .with_phone("95352563")
        .with_email("heinz@example.com")
        .with_class("4B")
        .with_subjects(subject_scoring("Physics", 100))
        .with_tags("owesMoney")
        .build()
    )


@pytest.fixture
def sample_database(alice, bob, carl):
    return Database([alice, bob, carl])


@pytest.fixture
def storage(tmp_path):
    return JsonDatabaseStorage(tmp_path / "data" / "watson.json")
