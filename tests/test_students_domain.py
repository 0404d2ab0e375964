from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the roster package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from roster.domain import students  # noqa: E402
from roster.domain.students import InvalidStudentError, Student, validate_student  # noqa: E402


@pytest.mark.parametrize(
    "value, expected",
    [
        ("A", False),
        ("Ab", True),
        ("A" * 50, True),
        ("A" * 51, False),
        ("Ann Lee", True),
        ("Ann-Lee", False),
        ("Ann2", False),
        ("", False),
    ],
)
def test_name_rule(value, expected):
    assert students.is_valid_name(value) is expected


@pytest.mark.parametrize("value, expected", [("0", True), ("12345", True), ("12a", False), ("1 2", False), ("", False)])
def test_identifier_rule(value, expected):
    assert students.is_valid_identifier(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [("123456789", False), ("1234567890", True), ("123456789012", True), ("12345678x0", False)],
)
def test_contact_rule(value, expected):
    assert students.is_valid_contact(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [("a@b", False), ("a@b.c", True), ("ann.lee@school.edu", True), ("a b@c.d", False), ("@b.c", False), ("a@@b.c", False)],
)
def test_email_rule(value, expected):
    assert students.is_valid_email(value) is expected


def test_validate_student_trims_fields():
    student = validate_student("  Ann Lee ", " 1", "a@b.com  ", "1234567890 ")
    assert student == Student("Ann Lee", "1", "a@b.com", "1234567890")


def test_empty_check_runs_before_format_rules():
    with pytest.raises(InvalidStudentError) as excinfo:
        validate_student("A", "   ", "a@b.com", "1234567890")
    assert excinfo.value.message == students.MISSING_FIELDS_MESSAGE


@pytest.mark.parametrize(
    "fields, message",
    [
        (("A", "x", "bad", "1"), students.NAME_MESSAGE),
        (("Ann", "x", "bad", "1"), students.IDENTIFIER_MESSAGE),
        (("Ann", "1", "bad", "1"), students.EMAIL_MESSAGE),
        (("Ann", "1", "a@b.com", "1"), students.CONTACT_MESSAGE),
    ],
)
def test_only_first_failing_rule_is_reported(fields, message):
    with pytest.raises(InvalidStudentError) as excinfo:
        validate_student(*fields)
    assert excinfo.value.message == message


def test_student_dict_uses_id_key_and_accepts_identifier_alias():
    student = Student("Ann Lee", "1", "a@b.com", "1234567890")
    data = student.to_dict()
    assert data == {"name": "Ann Lee", "id": "1", "email": "a@b.com", "contact": "1234567890"}
    assert Student.from_dict(data) == student
    alias = {"name": "Ann Lee", "identifier": "1", "email": "a@b.com", "contact": "1234567890"}
    assert Student.from_dict(alias) == student


@pytest.mark.parametrize("data", [{"name": "Ann"}, {"name": "Ann", "id": 1, "email": "a@b.c", "contact": "1"}, ["x"]])
def test_student_from_dict_rejects_bad_shapes(data):
    with pytest.raises(ValueError):
        Student.from_dict(data)
