# models/person.py

"""
Represents a person (usually a student) stored in the Watson database.

A `Person` combines identity fields (name, phone, email, address) with academic
fields (student class, attendance, remarks, subjects) and free-form tags.

Key behaviors:
- `is_same_person()`: Weak equality on name only. Used to keep the database free of duplicates.
- `__eq__` / `__hash__`: Strong equality over every field. Used for full-state comparisons and set membership.
- `total_score` / `compare_to()`: Ranks persons by the sum of their subjects' total percentages.
- `with_changes()`: Returns a new `Person` with some fields replaced.
- `to_dict()` / `from_dict()`: Used for serialization and persistence.

Notes:
- Instances are immutable. Tag and remark collections are copied into frozensets on construction.
- Passing None for any field is a programming error and raises TypeError.
- Ordering and equality are deliberately unrelated: two persons with equal
  scores compare as neither less nor greater, yet are usually not equal.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from models.attendance import Attendance
from models.fields import Address, Email, Name, Phone, Remark, StudentClass, Tag
from models.subject import Subject, SubjectHandler


def _require_all_non_null(**fields: Any) -> None:
    missing = [name for name, value in fields.items() if value is None]
    if missing:
        raise TypeError(f"Person fields must not be None: {', '.join(missing)}")


class Person:

    def __init__(
        self,
        name: Name,
        phone: Phone,
        email: Email,
        address: Address,
        student_class: StudentClass,
        attendance: Attendance = Attendance(),
        remarks: Iterable[Remark] = (),
        subject_handler: SubjectHandler = SubjectHandler(),
        tags: Iterable[Tag] = (),
    ):
        _require_all_non_null(
            name=name,
            phone=phone,
            email=email,
            address=address,
            student_class=student_class,
            attendance=attendance,
            remarks=remarks,
            subject_handler=subject_handler,
            tags=tags,
        )
        self._name = name
        self._phone = phone
        self._email = email
        self._address = address
        self._student_class = student_class
        self._attendance = attendance
        self._remarks: frozenset[Remark] = frozenset(remarks)
        self._subject_handler = subject_handler
        self._tags: frozenset[Tag] = frozenset(tags)

    # === properties ===

    # --- identity fields ---

    @property
    def name(self) -> Name:
        return self._name

    @property
    def phone(self) -> Phone:
        return self._phone

    @property
    def email(self) -> Email:
        return self._email

    @property
    def address(self) -> Address:
        return self._address

    # --- academic fields ---

    @property
    def student_class(self) -> StudentClass:
        return self._student_class

    @property
    def attendance(self) -> Attendance:
        return self._attendance

    @property
    def remarks(self) -> frozenset[Remark]:
        return self._remarks

    @property
    def subject_handler(self) -> SubjectHandler:
        return self._subject_handler

    @property
    def subjects_taken(self) -> frozenset[Subject]:
        return self._subject_handler.subjects_taken

    @property
    def tags(self) -> frozenset[Tag]:
        return self._tags

    # --- derived values ---

    @property
    def total_score(self) -> float:
        return self._subject_handler.total_percentage_sum

    # === comparisons ===

    def is_same_person(self, other: Person | None) -> bool:
        """
        Returns True if both persons have the same name.

        This is a weaker notion of equality than `==` and decides whether two
        records describe the same individual.
        """
        if other is self:
            return True
        return other is not None and other.name == self._name

    def compare_to(self, other: Person) -> int:
        """
        Compares two persons by total score.

        Returns:
            int: -1, 0 or 1 as this person's total score is lower than, equal to, or higher than `other`'s.
        """
        if other is None:
            raise TypeError("Cannot compare a Person with None.")
        mine, theirs = self.total_score, other.total_score
        return (mine > theirs) - (mine < theirs)

    # === data manipulators ===

    def with_changes(self, **changes: Any) -> Person:
        fields = {
            "name": self._name,
            "phone": self._phone,
            "email": self._email,
            "address": self._address,
            "student_class": self._student_class,
            "attendance": self._attendance,
            "remarks": self._remarks,
            "subject_handler": self._subject_handler,
            "tags": self._tags,
        }
        unknown = set(changes) - set(fields)
        if unknown:
            raise TypeError(f"Unknown Person fields: {', '.join(sorted(unknown))}")
        fields.update(changes)
        return Person(**fields)

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "name": str(self._name),
            "phone": str(self._phone),
            "email": str(self._email),
            "address": str(self._address),
            "student_class": str(self._student_class),
            "attendance": self._attendance.to_dict(),
            "remarks": sorted(str(remark) for remark in self._remarks),
            "subjects": self._subject_handler.to_dict(),
            "tags": sorted(str(tag) for tag in self._tags),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Person:
        if not isinstance(data, dict):
            raise TypeError("Person data must be an object.")

        for key in ("remarks", "tags"):
            if not isinstance(data.get(key, []), list):
                raise TypeError(f"Person {key} must be a list.")

        return cls(
            name=Name(data["name"]),
            phone=Phone(data["phone"]),
            email=Email(data["email"]),
            address=Address(data["address"]),
            student_class=StudentClass(data["student_class"]),
            attendance=Attendance.from_dict(data.get("attendance", {})),
            remarks=[Remark(r) for r in data.get("remarks", [])],
            subject_handler=SubjectHandler.from_dict(data.get("subjects", [])),
            tags=[Tag(t) for t in data.get("tags", [])],
        )

    # === dunder methods ===

    def _key(self) -> tuple:
        return (
            self._name,
            self._phone,
            self._email,
            self._address,
            self._student_class,
            self._attendance,
            self._remarks,
            self._subject_handler,
            self._tags,
        )

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Person):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: Person) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self.compare_to(other) < 0

    def __repr__(self) -> str:
        return f"Person({self._name}, {self._phone}, {self._email}, {self._student_class})"

    def __str__(self) -> str:
        remarks = ", ".join(sorted(str(r) for r in self._remarks)) or "None"
        text = (
            f"{self._name}; Phone: {self._phone}; Email: {self._email}; "
            f"Address: {self._address}; Class: {self._student_class}; "
            f"{self._attendance}; Remarks: {remarks}; "
            f"Subject: {self._subject_handler}"
        )
        if self._tags:
            text += "; Tags: " + "".join(f"[{tag}]" for tag in sorted(self._tags, key=str))
        return text
