"""Write a layout's clue list to an XLSX file."""

from __future__ import annotations

from typing import Sequence

import openpyxl
from openpyxl.styles import Font

from models import Entry, Word


def write_clues_xlsx(
    across: Sequence[Entry],
    down: Sequence[Entry],
    output_path: str,
    omitted: Sequence[Word] | None = None,
) -> None:
    """Write across and down clues to an Excel workbook.

    Column A holds the entry id (``A1``, ``D2``), B the clue, C the answer.
    If *omitted* is given, a second sheet lists words too long for the board.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Clues"

    header_font = Font(bold=True, size=12)
    row = 1

    for label, entries in (("ACROSS", across), ("DOWN", down)):
        ws.cell(row=row, column=1, value=label).font = header_font
        row += 1
        for entry in entries:
            ws.cell(row=row, column=1, value=entry.id)
            ws.cell(row=row, column=2, value=entry.clue)
            ws.cell(row=row, column=3, value=entry.answer)
            row += 1
        # Blank separator
        row += 1

    ws.column_dimensions["A"].width = 8
    ws.column_dimensions["B"].width = 60
    ws.column_dimensions["C"].width = 15

    if omitted:
        ws2 = wb.create_sheet(title="Omitted")
        ws2.cell(row=1, column=1, value="Clue").font = header_font
        ws2.cell(row=1, column=2, value="Answer").font = header_font
        for i, word in enumerate(omitted, start=2):
            ws2.cell(row=i, column=1, value=word.clue)
            ws2.cell(row=i, column=2, value=word.answer)
        ws2.column_dimensions["A"].width = 60
        ws2.column_dimensions["B"].width = 15

    wb.save(output_path)
