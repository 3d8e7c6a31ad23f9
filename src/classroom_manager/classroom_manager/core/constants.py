"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

import re

# matched against the whole filename; group 1 is the extension
ACCEPTED_UPLOAD_RE = re.compile(r"(?s).*\.(xlsx?|csv)", re.IGNORECASE)
CSV_ENCODINGS = ("utf-8-sig", "cp1252")

# Header aliases per importable field, in priority order.
STUDENT_ID_HEADERS = ("studentId", "Student ID", "student_id")
FIRST_NAME_HEADERS = ("firstName", "First Name", "first_name")
LAST_NAME_HEADERS = ("lastName", "Last Name", "last_name")
EMAIL_HEADERS = ("email", "Email")

SCORE_MIN = 0
SCORE_MAX = 100

# Lower bounds of the letter bands; anything below the last one is F.
GRADE_BANDS = (
    ("A", 90),
    ("B", 80),
    ("C", 70),
    ("D", 60),
)

EXPORT_FILENAME = "class-report.xlsx"
EXPORT_SHEET_NAME = "Class Report"
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

DEFAULT_MAX_UPLOAD_MB = 10
