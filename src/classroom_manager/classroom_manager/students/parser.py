from __future__ import annotations

import logging
from io import BytesIO
from typing import Any, Dict, List, Optional

import pandas as pd

from ..core.constants import ACCEPTED_UPLOAD_RE, CSV_ENCODINGS
from ..core.exceptions import ParseError, UnsupportedFormat

logger = logging.getLogger(__name__)

RawRow = Dict[str, Any]


def check_extension(filename: Optional[str]) -> str:
    """Return the lower-cased extension (xlsx, xls or csv) or raise UnsupportedFormat."""

    m = ACCEPTED_UPLOAD_RE.fullmatch(filename or "")
    if not m:
        raise UnsupportedFormat("Please upload an Excel file (.xlsx, .xls, .csv)")
    return m.group(1).lower()


def _read_csv_bytes(data: bytes) -> pd.DataFrame:
    # first row is the header; blanks stay "" instead of NaN
    last_err: Exception | None = None
    for enc in CSV_ENCODINGS:
        try:
            return pd.read_csv(
                BytesIO(data),
                dtype=object,
                encoding=enc,
                keep_default_na=False,
                skip_blank_lines=True,
            )
        except UnicodeDecodeError as e:
            last_err = e
            continue
    raise ParseError(f"Could not decode CSV file: {last_err}")


def _read_excel_bytes(data: bytes) -> pd.DataFrame:
    # only the first sheet is imported
    return pd.read_excel(BytesIO(data), sheet_name=0, dtype=object)


def _clean_cell(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, str):
        return value if value != "" else None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _frame_to_rows(df: pd.DataFrame) -> List[RawRow]:
    headers = [str(c) for c in df.columns]
    rows: List[RawRow] = []
    for values in df.itertuples(index=False, name=None):
        row: RawRow = {}
        for header, value in zip(headers, values):
            cell = _clean_cell(value)
            if cell is not None:
                row[header] = cell
        if row:
            rows.append(row)
    return rows


def parse_spreadsheet(filename: str, payload: bytes) -> List[RawRow]:
    """Decode an uploaded roster file into header-keyed row mappings.

    Raises UnsupportedFormat for anything other than .xlsx/.xls/.csv (checked
    before reading) and ParseError when the payload is not readable as a table.
    Empty cells are left out of each mapping and fully empty rows are skipped.
    """

    extension = check_extension(filename)
    if not payload:
        raise ParseError("File is empty")

    try:
        if extension == "csv":
            df = _read_csv_bytes(payload)
        else:
            df = _read_excel_bytes(payload)
    except ParseError:
        raise
    except Exception as e:
        logger.warning("could not parse %s: %s", filename, e)
        raise ParseError(f"Could not read {filename}: {e}") from e

    rows = _frame_to_rows(df)
    logger.debug("parsed %d rows from %s", len(rows), filename)
    return rows
