from __future__ import annotations

from io import BytesIO

import pytest
from openpyxl import Workbook

from src.classroom_manager.classroom_manager.core.exceptions import ParseError, UnsupportedFormat
from src.classroom_manager.classroom_manager.students.parser import check_extension, parse_spreadsheet


def _xlsx_bytes(*sheets: list[list]) -> bytes:
    wb = Workbook()
    wb.remove(wb.active)
    for i, rows in enumerate(sheets):
        ws = wb.create_sheet(title=f"Sheet{i + 1}")
        for row in rows:
            ws.append(row)
    buf = BytesIO()
    wb.save(buf)
    return buf.getvalue()


def test_csv_rows_are_keyed_by_header():
    payload = b"Student ID,First Name,Last Name\nS001,Ana,Lee\nS002,Ben,Kim\n"

    rows = parse_spreadsheet("roster.csv", payload)

    assert rows == [
        {"Student ID": "S001", "First Name": "Ana", "Last Name": "Lee"},
        {"Student ID": "S002", "First Name": "Ben", "Last Name": "Kim"},
    ]


def test_csv_blank_cells_are_left_out():
    payload = b"Student ID,First Name,Last Name,Email\nS002,,Kim,\n"

    rows = parse_spreadsheet("roster.csv", payload)

    assert rows == [{"Student ID": "S002", "Last Name": "Kim"}]


def test_csv_with_utf8_bom_and_accents():
    payload = "studentId,firstName,lastName\nS010,Zoë,Müller\n".encode("utf-8-sig")

    rows = parse_spreadsheet("ROSTER.CSV", payload)

    assert rows == [{"studentId": "S010", "firstName": "Zoë", "lastName": "Müller"}]


def test_xlsx_reads_first_sheet_only():
    payload = _xlsx_bytes(
        [["Student ID", "First Name", "Last Name"], [1001, "Ana", "Lee"]],
        [["Student ID", "First Name", "Last Name"], [2002, "Other", "Sheet"]],
    )

    rows = parse_spreadsheet("roster.xlsx", payload)

    assert len(rows) == 1
    assert rows[0]["Student ID"] == 1001
    assert rows[0]["First Name"] == "Ana"


def test_xlsx_skips_empty_rows():
    payload = _xlsx_bytes(
        [["student_id", "first_name", "last_name"], ["S001", "Ana", "Lee"], [None, None, None], ["S003", "Cy", "Ng"]]
    )

    rows = parse_spreadsheet("roster.xlsx", payload)

    assert [r["student_id"] for r in rows] == ["S001", "S003"]


@pytest.mark.parametrize("filename", ["roster.txt", "roster.pdf", "roster", "roster.xlsx.bak", ""])
def test_unsupported_extension_is_rejected_before_parsing(filename):
    with pytest.raises(UnsupportedFormat):
        parse_spreadsheet(filename, b"not even looked at")


def test_corrupt_workbook_raises_parse_error():
    with pytest.raises(ParseError):
        parse_spreadsheet("roster.xlsx", b"this is not a zip archive")


def test_empty_payload_raises_parse_error():
    with pytest.raises(ParseError):
        parse_spreadsheet("roster.csv", b"")


@pytest.mark.parametrize("filename,expected", [("a.CSV", "csv"), ("a.Xlsx", "xlsx"), ("dir.v2/roster.xls", "xls")])
def test_check_extension_returns_reader_kind(filename, expected):
    assert check_extension(filename) == expected


def test_trailing_newline_in_filename_is_rejected():
    with pytest.raises(UnsupportedFormat):
        parse_spreadsheet("roster.csv\n", b"Student ID,First Name,Last Name\nS1,A,B\n")
