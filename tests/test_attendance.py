# tests/test_attendance.py

import pytest

from models.attendance import Attendance


def test_empty_attendance_reports_zero_over_zero():
    attendance = Attendance()

    assert attendance.total_attendance() == (0, 0)
    assert attendance.ratio == "0/0"
    assert attendance.percentage == 0.0
    assert str(attendance) == "Attendance: 0/0"
    assert attendance.is_empty()


def test_attendance_ratio():
    attendance = Attendance({"m1": 1, "m2": 0, "m3": 1})

    assert attendance.total_attendance() == (2, 3)
    assert attendance.ratio == "2/3"
    assert str(attendance) == "Attendance: 2/3"
    assert attendance.percentage == pytest.approx(66.6667, rel=1e-4)


def test_attendance_does_not_cap_counts():
    assert Attendance({"m1": 3}).ratio == "3/1"


def test_attendance_is_copied_and_read_only():
    sessions = {"m1": 1}
    attendance = Attendance(sessions)

    sessions["m2"] = 1
    assert attendance.ratio == "1/1"

    with pytest.raises(TypeError):
        attendance.sessions["m3"] = 1


def test_with_session_returns_new_attendance():
    attendance = Attendance({"m1": 1})
    updated = attendance.with_session("m2", 0)

    assert attendance.ratio == "1/1"
    assert updated.ratio == "1/2"

    replaced = updated.with_session("m2", 1)
    assert replaced.ratio == "2/2"


def test_attendance_equality_and_hash():
    assert Attendance({"m1": 1, "m2": 0}) == Attendance({"m2": 0, "m1": 1})
    assert hash(Attendance({"m1": 1})) == hash(Attendance({"m1": 1}))
    assert Attendance({"m1": 1}) != Attendance({"m1": 0})


def test_attendance_rejects_invalid_entries():
    with pytest.raises(ValueError):
        Attendance({"m1": -1})

    with pytest.raises(ValueError):
        Attendance({" ": 1})

    with pytest.raises(TypeError):
        Attendance({"m1": "1"})


def test_attendance_to_and_from_dict():
    attendance = Attendance({"m1": 1, "m2": 0})

    assert attendance.to_dict() == {"m1": 1, "m2": 0}
    assert Attendance.from_dict({"m1": 1, "m2": 0}) == attendance


@pytest.mark.parametrize("data", [{"m1": 1.9}, {"m1": True}, {"m1": "1"}])
def test_attendance_from_dict_rejects_non_integer_counts(data):
    with pytest.raises(TypeError):
        Attendance.from_dict(data)


@pytest.mark.parametrize("data", [[], "m1", 5, None])
def test_attendance_from_dict_rejects_non_mapping(data):
    with pytest.raises(TypeError):
        Attendance.from_dict(data)
