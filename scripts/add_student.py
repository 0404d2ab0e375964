#!/usr/bin/env python3
"""
Add a student straight to the configured roster storage.

Usage:
  python scripts/add_student.py --name "Ann Lee" --id 1 --email a@b.com --contact 1234567890
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Make the roster package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from roster.core.config import get_settings  # noqa: E402
from roster.domain.students import InvalidStudentError, validate_student  # noqa: E402
from roster.repositories import build_storage  # noqa: E402
from roster.repositories.student_repository import StudentRepository  # noqa: E402
from roster.services.student_store import DuplicateStudentIdError, StudentStore  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Add a student to the roster")
    ap.add_argument("--name", required=True)
    ap.add_argument("--id", dest="identifier", required=True, help="Student ID (digits only)")
    ap.add_argument("--email", required=True)
    ap.add_argument("--contact", required=True, help="Contact number (10+ digits)")
    args = ap.parse_args()

    try:
        student = validate_student(args.name, args.identifier, args.email, args.contact)
    except InvalidStudentError as exc:
        raise SystemExit(exc.message)

    settings = get_settings()
    store = StudentStore(StudentRepository(build_storage(settings), settings.storage_key))
    try:
        index = store.add(student)
    except DuplicateStudentIdError:
        raise SystemExit(f"Student ID '{student.identifier}' already exists")
    print("OK: student added")
    print(f"  Name: {student.name}")
    print(f"  ID: {student.identifier}")
    print(f"  Position: {index + 1} of {len(store)}")


if __name__ == "__main__":
    main()
