"""In-memory student roster kept in sync with its repository."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from roster.domain.students import Student
from roster.repositories.student_repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentError(Exception):
    """Base exception for roster mutations."""


class DuplicateStudentIdError(StudentError):
    """Raised when the identifier already belongs to another record."""

    def __init__(self, identifier: str, index: int):
        super().__init__(f"Student ID {identifier} already used at index {index}")
        self.identifier = identifier
        self.index = index


class StudentNotFoundError(StudentError):
    """Raised when updating an index outside the roster."""


class StudentStore:
    """
    Ordered roster of students.

    Order is insertion order; an update keeps the record's position and a
    delete shifts later records up by one. Every mutation is written through to
    the repository before the method returns.
    """

    def __init__(self, repository: StudentRepository) -> None:
        self.repository = repository
        self._students: List[Student] = repository.load()

    @property
    def students(self) -> Tuple[Student, ...]:
        return tuple(self._students)

    def __len__(self) -> int:
        return len(self._students)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._students)

    def get(self, index: int) -> Optional[Student]:
        return self._students[index] if self._in_range(index) else None

    def find_by_identifier(self, identifier: str) -> Optional[int]:
        for idx, student in enumerate(self._students):
            if student.identifier == identifier:
                return idx
        return None

    def add(self, student: Student) -> int:
        existing = self.find_by_identifier(student.identifier)
        if existing is not None:
            raise DuplicateStudentIdError(student.identifier, existing)
        self._students.append(student)
        self._save()
        logger.info("Added student %s", student.identifier)
        return len(self._students) - 1

    def update(self, index: int, student: Student) -> None:
        if not self._in_range(index):
            raise StudentNotFoundError(f"No student at index {index}")
        existing = self.find_by_identifier(student.identifier)
        if existing is not None and existing != index:
            raise DuplicateStudentIdError(student.identifier, existing)
        self._students[index] = student
        self._save()
        logger.info("Updated student at index %d", index)

    def delete(self, index: int) -> Optional[Student]:
        if not self._in_range(index):
            return None
        removed = self._students.pop(index)
        self._save()
        logger.info("Deleted student %s", removed.identifier)
        return removed

    def _save(self) -> None:
        self.repository.save(self._students)
