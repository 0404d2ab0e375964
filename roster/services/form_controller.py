"""
Add/edit form workflow for the roster page.

The controller owns the edit cursor and the values currently shown in the
form. UI events reach it as typed commands (Edit, Delete, Submit, Reset) so the
state machine can run without any rendering technology attached.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

from roster.domain.students import InvalidStudentError, Student, validate_student
from roster.services.notifications import ERROR, INFO, SUCCESS
from roster.services.student_store import DuplicateStudentIdError, StudentStore

ADD_LABEL = "Add Student"
UPDATE_LABEL = "Update Student"
DELETE_PROMPT = "Are you sure you want to delete this student?"
EDITING_MESSAGE = 'Editing mode: update values and press "Update Student"'
ADDED_MESSAGE = "Student added successfully."
UPDATED_MESSAGE = "Student updated successfully."
DELETED_MESSAGE = "Student deleted"
DUPLICATE_ON_ADD_MESSAGE = "A student with this Student ID already exists."
DUPLICATE_ON_UPDATE_MESSAGE = "Another student with this Student ID already exists."


class Mode(str, Enum):
    ADD = "add"
    EDIT = "edit"


@dataclass(frozen=True)
class Edit:
    index: int


@dataclass(frozen=True)
class Delete:
    index: int


@dataclass(frozen=True)
class Submit:
    name: str = ""
    identifier: str = ""
    email: str = ""
    contact: str = ""


@dataclass(frozen=True)
class Reset:
    pass


Command = Union[Edit, Delete, Submit, Reset]
Notify = Callable[[str, str], object]
Confirm = Callable[[str], bool]


@dataclass
class FormValues:
    name: str = ""
    identifier: str = ""
    email: str = ""
    contact: str = ""

    @classmethod
    def of(cls, student: Student) -> "FormValues":
        return cls(student.name, student.identifier, student.email, student.contact)


def _decline(_prompt: str) -> bool:
    return False


class FormController:
    def __init__(self, store: StudentStore, notify: Notify, confirm: Confirm = _decline) -> None:
        self.store = store
        self.notify = notify
        self.confirm = confirm
        self.edit_index: Optional[int] = None
        self.form = FormValues()

    @property
    def mode(self) -> Mode:
        return Mode.ADD if self.edit_index is None else Mode.EDIT

    @property
    def submit_label(self) -> str:
        return ADD_LABEL if self.edit_index is None else UPDATE_LABEL

    def dispatch(self, command: Command, confirm: Optional[Confirm] = None) -> bool:
        """Route a UI command; returns True when it changed anything."""
        if isinstance(command, Submit):
            return self.submit(command)
        if isinstance(command, Edit):
            return self.start_edit(command.index)
        if isinstance(command, Delete):
            return self.delete(command.index, confirm or self.confirm)
        if isinstance(command, Reset):
            self.reset()
            return True
        raise TypeError(f"Unknown command {command!r}")

    def start_edit(self, index: int) -> bool:
        student = self.store.get(index)
        if student is None:
            return False
        self.form = FormValues.of(student)
        self.edit_index = index
        self.notify(EDITING_MESSAGE, INFO)
        return True

    def delete(self, index: int, confirm: Confirm) -> bool:
        if self.store.get(index) is None:
            return False
        if not confirm(DELETE_PROMPT):
            return False
        self.store.delete(index)
        if self.edit_index == index:
            self.reset()
        elif self.edit_index is not None and self.edit_index > index:
            self.edit_index -= 1
        self.notify(DELETED_MESSAGE, SUCCESS)
        return True

    def submit(self, fields: Submit) -> bool:
        self.form = FormValues(fields.name, fields.identifier, fields.email, fields.contact)
        try:
            student = validate_student(fields.name, fields.identifier, fields.email, fields.contact)
        except InvalidStudentError as exc:
            self.notify(exc.message, ERROR)
            return False

        if self.edit_index is None:
            try:
                self.store.add(student)
            except DuplicateStudentIdError:
                self.notify(DUPLICATE_ON_ADD_MESSAGE, ERROR)
                return False
            self.form = FormValues()
            self.notify(ADDED_MESSAGE, SUCCESS)
            return True

        try:
            self.store.update(self.edit_index, student)
        except DuplicateStudentIdError:
            self.notify(DUPLICATE_ON_UPDATE_MESSAGE, ERROR)
            return False
        self.reset()
        self.notify(UPDATED_MESSAGE, SUCCESS)
        return True

    def reset(self) -> None:
        self.form = FormValues()
        self.edit_index = None
