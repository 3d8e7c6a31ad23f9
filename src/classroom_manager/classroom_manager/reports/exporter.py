from __future__ import annotations

import io
from typing import Sequence

import pandas as pd

from ..core.constants import EXPORT_SHEET_NAME


def export_to_excel_bytes(rows: Sequence[dict], *, sheet_name: str = EXPORT_SHEET_NAME) -> bytes:
    """Write report rows to a single-sheet .xlsx document.

    Column order follows the first row; pandas fills any gaps with blanks.
    """

    df = pd.DataFrame(list(rows))

    # in memory, never touches disk
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    return output.getvalue()
