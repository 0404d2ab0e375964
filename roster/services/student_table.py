"""Render the roster table body and decode the row action buttons."""
from __future__ import annotations

import html
from typing import Iterable, Optional, Union

from roster.domain.students import Student
from roster.services.form_controller import Delete, Edit

EMPTY_PLACEHOLDER = "No students registered yet."
ACTIONS = {"edit": ("Edit", Edit), "delete": ("Delete", Delete)}


def escape_text(value) -> str:
    """Escape & < > \" ' for insertion into markup; non-strings render empty."""
    if not isinstance(value, str):
        return ""
    return html.escape(value, quote=True)


def _action_button(action: str, index: int) -> str:
    label = ACTIONS[action][0]
    return (
        f'<button type="submit" class="action-btn {action}-btn" name="action" '
        f'value="{action}:{index}" data-action="{action}" data-index="{index}">{label}</button>'
    )


def _data_row(index: int, student: Student) -> str:
    cells = "".join(
        f"<td>{escape_text(value)}</td>"
        for value in (student.name, student.identifier, student.email, student.contact)
    )
    buttons = _action_button("edit", index) + _action_button("delete", index)
    return f"<tr>{cells}<td>{buttons}</td></tr>"


def render_table_body(students: Iterable[Student]) -> str:
    """
    Build every <tbody> row from the current roster snapshot, in roster order.

    An empty roster yields one placeholder row with no controls. Each data row
    carries an edit and a delete button whose value is "<action>:<index>";
    all of them submit to the same endpoint, which decodes the value with
    parse_row_action.
    """
    rows = [_data_row(idx, student) for idx, student in enumerate(students)]
    if not rows:
        return f'<tr class="placeholder-row"><td colspan="5">{EMPTY_PLACEHOLDER}</td></tr>'
    return "\n".join(rows)


def parse_row_action(value: Optional[str]) -> Optional[Union[Edit, Delete]]:
    """Turn a submitted button value back into a command, or None if malformed."""
    action, sep, raw_index = (value or "").strip().partition(":")
    if not sep or action not in ACTIONS or not (raw_index.isascii() and raw_index.isdigit()):
        return None
    return ACTIONS[action][1](int(raw_index))
