# tests/test_subject.py

import pytest

from models.subject import Grade, Subject, SubjectHandler


def test_grade_contribution():
    grade = Grade("Midterm", 45, 50, 30)

    assert grade.score == 45.0
    assert grade.percentage_contribution == pytest.approx(27.0)
    assert str(grade) == "Midterm: 45/50 (30%)"


@pytest.mark.parametrize(
    "score, total, weightage",
    [(-1, 50, 30), (60, 50, 30), (10, 0, 30), (10, 50, 101), ("inf", 50, 30)],
)
def test_grade_rejects_invalid_values(score, total, weightage):
    with pytest.raises(ValueError):
        Grade("Midterm", score, total, weightage)


def test_grade_rejects_non_numeric_values():
    with pytest.raises(TypeError):
        Grade("Midterm", "forty", 50, 30)


def test_subject_total_percentage():
    subject = Subject("Math", [Grade("Midterm", 45, 50, 30), Grade("Final", 80, 100, 70)])

    assert subject.total_percentage == pytest.approx(83.0)
    assert [g.assessment for g in subject.grades] == ["Final", "Midterm"]


def test_subject_without_grades_scores_zero():
    assert Subject("Math").total_percentage == 0.0
    assert str(Subject("Math")) == "Math"


def test_subject_replaces_grade_for_same_assessment():
    subject = Subject("Math", [Grade("Quiz", 5, 10, 10)])
    updated = subject.with_grade(Grade("Quiz", 10, 10, 10))

    assert len(updated.grades) == 1
    assert updated.total_percentage == pytest.approx(10.0)
    assert subject.total_percentage == pytest.approx(5.0)


def test_subject_rejects_invalid_name():
    with pytest.raises(ValueError, match="Subject names"):
        Subject("Math!")


def test_subject_handler_merges_subjects_by_name():
    handler = SubjectHandler(
        [
            Subject("Math", [Grade("Midterm", 45, 50, 30)]),
            Subject("Math", [Grade("Final", 80, 100, 70)]),
            Subject("Physics"),
        ]
    )

    assert len(handler) == 2
    assert handler.names() == ["Math", "Physics"]
    assert handler.get("Math").total_percentage == pytest.approx(83.0)
    assert handler.total_percentage_sum == pytest.approx(83.0)


def test_subject_handler_equality_ignores_order():
    a = SubjectHandler([Subject("Math"), Subject("Physics")])
    b = SubjectHandler([Subject("Physics"), Subject("Math")])

    assert a == b
    assert hash(a) == hash(b)


def test_subject_handler_to_and_from_dict():
    handler = SubjectHandler([Subject("Math", [Grade("Midterm", 45, 50, 30)])])

    data = handler.to_dict()

    assert data == [
        {
            "name": "Math",
            "grades": [
                {"assessment": "Midterm", "score": 45.0, "total": 50.0, "weightage": 30.0}
            ],
        }
    ]
    assert SubjectHandler.from_dict(data) == handler


def test_subject_name_rejects_trailing_space():
    assert Subject.is_valid_name("Further Math")
    assert not Subject.is_valid_name("Math ")


@pytest.mark.parametrize(
    "data",
    [
        "Math",
        {"name": "Math"},
        [{"name": "Math", "grades": {}}],
        [{"name": "Math", "grades": ["Midterm"]}],
    ],
)
def test_subject_handler_from_dict_rejects_wrong_shapes(data):
    with pytest.raises(TypeError):
        SubjectHandler.from_dict(data)
