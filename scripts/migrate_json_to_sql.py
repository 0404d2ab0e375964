"""One-off migration: roster JSON file storage -> SQL storage (DATABASE_URL)."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Make the roster package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from roster.core.config import get_settings  # noqa: E402
from roster.db.create_tables import create_all  # noqa: E402
from roster.repositories.json_storage import JsonFileStorage  # noqa: E402
from roster.repositories.sql_repository import SQLStorage  # noqa: E402
from roster.repositories.student_repository import StudentRepository  # noqa: E402


def migrate(data_file: Path, database_url: str, key: str) -> int:
    source = JsonFileStorage(data_file)
    if source.get_item(key) is None:
        raise SystemExit(f"No roster stored under '{key}' in {data_file}")
    students = StudentRepository(source, key).load()
    create_all(database_url)
    StudentRepository(SQLStorage(database_url), key).save(students)
    return len(students)


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Copy the roster from the JSON file into SQL")
    ap.add_argument("--data-file", default=settings.data_file)
    args = ap.parse_args()
    if not settings.database_url:
        raise SystemExit("DATABASE_URL must be set")
    count = migrate(Path(args.data_file), settings.database_url, settings.storage_key)
    print(f"Roster migrated to SQL successfully ({count} students).")


if __name__ == "__main__":
    main()
