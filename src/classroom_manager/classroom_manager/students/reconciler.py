from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Sequence

from ..core.constants import EMAIL_HEADERS, FIRST_NAME_HEADERS, LAST_NAME_HEADERS, STUDENT_ID_HEADERS
from ..core.exceptions import NoValidRows
from .model import PreviewRow


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def _pick(raw: Mapping[str, Any], headers: Sequence[str]) -> str:
    # first alias with a non-empty value wins
    for header in headers:
        text = _text(raw.get(header))
        if text:
            return text
    return ""


class RosterReconciler:
    """Turn loosely-shaped spreadsheet rows into validated PreviewRows.

    Header names are matched exactly against the alias lists; no further
    case or spacing normalization is applied. Rows missing a student id,
    first name or last name are dropped without a per-row report.
    """

    def __init__(
        self,
        *,
        student_id_headers: Sequence[str] = STUDENT_ID_HEADERS,
        first_name_headers: Sequence[str] = FIRST_NAME_HEADERS,
        last_name_headers: Sequence[str] = LAST_NAME_HEADERS,
        email_headers: Sequence[str] = EMAIL_HEADERS,
    ):
        self._student_id_headers = tuple(student_id_headers)
        self._first_name_headers = tuple(first_name_headers)
        self._last_name_headers = tuple(last_name_headers)
        self._email_headers = tuple(email_headers)

    def stage_row(self, raw: Mapping[str, Any]) -> Optional[PreviewRow]:
        student_id = _pick(raw, self._student_id_headers)
        first_name = _pick(raw, self._first_name_headers)
        last_name = _pick(raw, self._last_name_headers)
        if not (student_id and first_name and last_name):
            return None

        return PreviewRow(
            student_id=student_id,
            first_name=first_name,
            last_name=last_name,
            email=_pick(raw, self._email_headers) or None,
        )

    def reconcile(self, raw_rows: Iterable[Mapping[str, Any]]) -> tuple[PreviewRow, ...]:
        staged = tuple(row for row in (self.stage_row(raw) for raw in raw_rows) if row is not None)
        if not staged:
            raise NoValidRows("No valid rows found: each row needs a student ID, first name and last name")
        return staged
