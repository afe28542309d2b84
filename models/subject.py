# models/subject.py

"""
Subjects taken by a `Person` and the grades recorded for them.

A `Subject` holds zero or more `Grade` records, one per assessment. Each grade
contributes `score / total * weightage` percentage points, and the sum of
contributions is the subject's `total_percentage`. The `SubjectHandler` groups
all subjects of one person and is what `Person` ordering is computed from.

Notes:
- All three types are immutable; "changing" a subject returns a new instance.
- Subjects are keyed by name and assessments by name within a subject. Adding
  a grade for an existing assessment replaces the earlier grade.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Iterator
from typing import Any


class Grade:

    def __init__(
        self,
        assessment: str,
        score: float,
        total: float,
        weightage: float,
    ):
        self._assessment = Grade.validate_assessment_input(assessment)
        self._total = Grade.validate_number_input(total, "Total")
        self._score = Grade.validate_number_input(score, "Score")
        self._weightage = Grade.validate_number_input(weightage, "Weightage")

        if self._total == 0:
            raise ValueError("Invalid input. Total cannot be zero.")
        if self._score > self._total:
            raise ValueError("Invalid input. Score cannot be greater than total.")
        if self._weightage > 100:
            raise ValueError("Invalid input. Weightage cannot be greater than 100.")

    # === properties ===

    @property
    def assessment(self) -> str:
        return self._assessment

    @property
    def score(self) -> float:
        return self._score

    @property
    def total(self) -> float:
        return self._total

    @property
    def weightage(self) -> float:
        return self._weightage

    @property
    def percentage_contribution(self) -> float:
        return self._score / self._total * self._weightage

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "assessment": self._assessment,
            "score": self._score,
            "total": self._total,
            "weightage": self._weightage,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Grade:
        if not isinstance(data, dict):
            raise TypeError("Grade data must be an object.")
        return cls(
            assessment=data["assessment"],
            score=data["score"],
            total=data["total"],
            weightage=data["weightage"],
        )

    # === dunder methods ===

    def _key(self) -> tuple:
        return (self._assessment, self._score, self._total, self._weightage)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grade):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Grade({self._assessment}, {self._score}, {self._total}, {self._weightage})"

    def __str__(self) -> str:
        return f"{self._assessment}: {self._score:g}/{self._total:g} ({self._weightage:g}%)"

    # === data validators ===

    @staticmethod
    def validate_assessment_input(assessment: str) -> str:
        if not isinstance(assessment, str) or not assessment.strip():
            raise ValueError("Invalid input. Assessment name should not be blank.")
        return assessment.strip()

    @staticmethod
    def validate_number_input(value: Any, label: str) -> float:
        """
        Validates and normalizes one numeric component of a `Grade`.

        Casts to float, then ensures the number is finite and non-negative.

        Raises:
            TypeError: If the input cannot be cast to float.
            ValueError: If the input is non-finite or less than zero.
        """
        try:
            value = float(value)

        except (TypeError, ValueError):
            raise TypeError(f"Invalid input. {label} must be a number.") from None

        if not math.isfinite(value):
            raise ValueError(f"Invalid input. {label} must be a finite number.")

        if value < 0:
            raise ValueError(f"Invalid input. {label} cannot be less than zero.")

        return value


class Subject:
    MESSAGE_CONSTRAINTS = (
        "Subject names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    VALIDATION_REGEX = r"[^\W_](?:[^\W_]| )*(?<! )"

    def __init__(self, name: str, grades: Iterable[Grade] = ()):
        self._name = Subject.validate_name_input(name)

        by_assessment: dict[str, Grade] = {}
        for grade in grades:
            by_assessment[grade.assessment] = grade

        self._grades: tuple[Grade, ...] = tuple(
            by_assessment[assessment] for assessment in sorted(by_assessment)
        )

    # === properties ===

    @property
    def name(self) -> str:
        return self._name

    @property
    def grades(self) -> tuple[Grade, ...]:
        return self._grades

    @property
    def total_percentage(self) -> float:
        return sum(grade.percentage_contribution for grade in self._grades)

    # === data manipulators ===

    def with_grade(self, grade: Grade) -> Subject:
        return Subject(self._name, [*self._grades, grade])

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "name": self._name,
            "grades": [grade.to_dict() for grade in self._grades],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Subject:
        if not isinstance(data, dict):
            raise TypeError("Subject data must be an object.")

        grades = data.get("grades", [])
        if not isinstance(grades, list):
            raise TypeError("Subject grades must be a list.")

        return cls(name=data["name"], grades=[Grade.from_dict(g) for g in grades])

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Subject):
            return NotImplemented
        return self._name == other._name and self._grades == other._grades

    def __hash__(self) -> int:
        return hash((self._name, self._grades))

    def __repr__(self) -> str:
        return f"Subject({self._name}, {list(self._grades)})"

    def __str__(self) -> str:
        if not self._grades:
            return self._name
        grades = ", ".join(str(grade) for grade in self._grades)
        return f"{self._name} [{grades}] = {self.total_percentage:.2f}%"

    # === data validators ===

    @staticmethod
    def is_valid_name(name: str) -> bool:
        return re.fullmatch(Subject.VALIDATION_REGEX, name) is not None

    @staticmethod
    def validate_name_input(name: str) -> str:
        if not isinstance(name, str) or not Subject.is_valid_name(name):
            raise ValueError(Subject.MESSAGE_CONSTRAINTS)
        return name


class SubjectHandler:
    """
    The set of subjects one `Person` is taking, keyed by subject name.

    Subjects passed in with the same name are merged, so
    `SubjectHandler([Subject("Math", [a]), Subject("Math", [b])])` holds a single
    "Math" subject with both grades.
    """

    def __init__(self, subjects: Iterable[Subject] = ()):
        by_name: dict[str, Subject] = {}

        for subject in subjects:
            existing = by_name.get(subject.name)
            if existing is None:
                by_name[subject.name] = subject
            else:
                by_name[subject.name] = Subject(
                    subject.name, [*existing.grades, *subject.grades]
                )

        self._subjects: dict[str, Subject] = by_name

    # === properties ===

    @property
    def subjects_taken(self) -> frozenset[Subject]:
        return frozenset(self._subjects.values())

    @property
    def total_percentage_sum(self) -> float:
        return sum(subject.total_percentage for subject in self._subjects.values())

    def is_empty(self) -> bool:
        return not self._subjects

    # === data accessors ===

    def get(self, name: str) -> Subject | None:
        return self._subjects.get(name)

    def names(self) -> list[str]:
        return sorted(self._subjects)

    # === persistence and import ===

    def to_dict(self) -> list:
        return [self._subjects[name].to_dict() for name in self.names()]

    @classmethod
    def from_dict(cls, data: list) -> SubjectHandler:
        if not isinstance(data, list):
            raise TypeError("Subject data must be a list.")
        return cls(Subject.from_dict(s) for s in data)

    # === dunder methods ===

    def __iter__(self) -> Iterator[Subject]:
        return iter(self._subjects[name] for name in self.names())

    def __len__(self) -> int:
        return len(self._subjects)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SubjectHandler):
            return NotImplemented
        return self.subjects_taken == other.subjects_taken

    def __hash__(self) -> int:
        return hash(self.subjects_taken)

    def __repr__(self) -> str:
        return f"SubjectHandler({list(self)})"

    def __str__(self) -> str:
        return ", ".join(str(subject) for subject in self) if self._subjects else "None"
