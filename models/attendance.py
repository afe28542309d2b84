# models/attendance.py

"""
Represents the attendance record of one `Person`.

Attendance is stored as a mapping from a session identifier (e.g. "m1" or
"2024-01-15") to a presence count, normally 1 for present and 0 for absent.
The record reduces to a `present/total` ratio for display and reporting.

Key behaviors:
- `total_attendance()`: Returns `(sum of counts, number of sessions)`.
- `ratio`: The reduced value as text, "0/0" when no sessions are recorded.
- `with_session()`: Returns a new `Attendance` with one session added or replaced.
- `to_dict()` / `from_dict()`: Used for serialization and persistence.

Notes:
- Instances are immutable. The session mapping is copied on construction and
  exposed only as a read-only view.
- Counts are not bounded here. Restricting counts to 0 or 1 is done by the parser.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType


class Attendance:

    def __init__(self, sessions: Mapping[str, int] | None = None):
        sessions = dict(sessions) if sessions is not None else {}

        for session, count in sessions.items():
            Attendance.validate_session_input(session)
            Attendance.validate_count_input(count)

        self._sessions: Mapping[str, int] = MappingProxyType(sessions)

    # === properties ===

    @property
    def sessions(self) -> Mapping[str, int]:
        return self._sessions

    @property
    def ratio(self) -> str:
        present, total = self.total_attendance()
        return f"{present}/{total}"

    @property
    def percentage(self) -> float:
        present, total = self.total_attendance()
        return present / total * 100 if total else 0.0

    def is_empty(self) -> bool:
        return not self._sessions

    # === data accessors ===

    def total_attendance(self) -> tuple[int, int]:
        return sum(self._sessions.values()), len(self._sessions)

    # === data manipulators ===

    def with_session(self, session: str, count: int) -> Attendance:
        sessions = dict(self._sessions)
        sessions[session] = count
        return Attendance(sessions)

    # === persistence and import ===

    def to_dict(self) -> dict:
        return dict(self._sessions)

    @classmethod
    def from_dict(cls, data: dict) -> Attendance:
        if not isinstance(data, dict):
            raise TypeError("Attendance data must be an object of session counts.")
        return cls(data)

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attendance):
            return NotImplemented
        return dict(self._sessions) == dict(other._sessions)

    def __hash__(self) -> int:
        return hash(frozenset(self._sessions.items()))

    def __repr__(self) -> str:
        return f"Attendance({dict(self._sessions)})"

    def __str__(self) -> str:
        return f"Attendance: {self.ratio}"

    # === data validators ===

    @staticmethod
    def validate_session_input(session: str) -> str:
        if not isinstance(session, str) or not session.strip():
            raise ValueError("Attendance session should not be blank.")
        return session

    @staticmethod
    def validate_count_input(count: int) -> int:
        # bool is an int subclass but never a valid count
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError("Attendance count must be an integer.")
        if count < 0:
            raise ValueError("Attendance count cannot be less than zero.")
        return count
