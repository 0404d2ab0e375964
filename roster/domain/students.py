"""Student record type and field validation rules."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping

NAME_PATTERN = re.compile(r"[A-Za-z\s]{2,50}")
IDENTIFIER_PATTERN = re.compile(r"[0-9]+")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
CONTACT_PATTERN = re.compile(r"[0-9]{10,}")

MISSING_FIELDS_MESSAGE = "Please fill in all fields."
NAME_MESSAGE = "Name must be letters and spaces only (2-50 chars)."
IDENTIFIER_MESSAGE = "Student ID must contain digits only."
EMAIL_MESSAGE = "Please enter a valid email address."
CONTACT_MESSAGE = "Contact number must be digits only and at least 10 digits."


@dataclass(frozen=True)
class Student:
    name: str
    identifier: str
    email: str
    contact: str

    def to_dict(self) -> dict:
        # "id" is the key the roster has always stored the identifier under.
        return {"name": self.name, "id": self.identifier, "email": self.email, "contact": self.contact}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Student":
        """Build a Student from its stored form; raises ValueError on bad shape."""
        if not isinstance(data, Mapping):
            raise ValueError(f"Expected an object, got {type(data).__name__}")
        identifier = data.get("id", data.get("identifier"))
        values = (data.get("name"), identifier, data.get("email"), data.get("contact"))
        if not all(isinstance(v, str) and v for v in values):
            raise ValueError(f"Incomplete student entry: {dict(data)!r}")
        return cls(*values)


class InvalidStudentError(ValueError):
    """Raised when submitted fields fail a validation rule."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def is_valid_name(value: str | None) -> bool:
    return bool(value) and bool(NAME_PATTERN.fullmatch(value))


def is_valid_identifier(value: str | None) -> bool:
    return bool(value) and bool(IDENTIFIER_PATTERN.fullmatch(value))


def is_valid_email(value: str | None) -> bool:
    return bool(value) and bool(EMAIL_PATTERN.fullmatch(value))


def is_valid_contact(value: str | None) -> bool:
    return bool(value) and bool(CONTACT_PATTERN.fullmatch(value))


_RULES = (
    ("name", is_valid_name, NAME_MESSAGE),
    ("identifier", is_valid_identifier, IDENTIFIER_MESSAGE),
    ("email", is_valid_email, EMAIL_MESSAGE),
    ("contact", is_valid_contact, CONTACT_MESSAGE),
)


def validate_student(name: str | None, identifier: str | None, email: str | None, contact: str | None) -> Student:
    """
    Trim the submitted fields and check them in a fixed order.

    The empty check runs before any format rule, and only the first failing
    rule is reported.
    """
    fields = {
        "name": (name or "").strip(),
        "identifier": (identifier or "").strip(),
        "email": (email or "").strip(),
        "contact": (contact or "").strip(),
    }
    if not all(fields.values()):
        raise InvalidStudentError(MISSING_FIELDS_MESSAGE)
    for field, check, message in _RULES:
        if not check(fields[field]):
            raise InvalidStudentError(message)
    return Student(**fields)
