"""Render a crossword layout to a printable PDF using ReportLab.

Page 1: title banner, grid centered below it, ACROSS and DOWN clues in
columns under the grid. Page 2: answer key.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.platypus import Paragraph

from models import CellType, Entry, Grid

PAGE_W, PAGE_H = letter  # 612 x 792
MARGIN = 36
SECTION_HEADER_H = 14.0


@dataclass
class LayoutParams:
    """All computed page measurements."""

    rows: int = 15
    cols: int = 15
    cell_size: float = 24.0
    number_font_size: float = 8.0

    grid_x: float = 0.0
    grid_y: float = 0.0  # top of grid in page coords

    banner_h: float = 28.0
    banner_y: float = 0.0

    clue_font_size: float = 10.0
    clue_leading: float = 11.5
    space_after: float = 2.0

    clue_zone_y: float = 0.0  # top of clue area
    clue_cols: int = 2
    clue_gutter: float = 12.0
    clue_col_w: float = 0.0

    title: str = "CROSSWORD"

    @property
    def usable_w(self) -> float:
        return PAGE_W - 2 * MARGIN

    @property
    def grid_w(self) -> float:
        return self.cell_size * self.cols

    @property
    def grid_h(self) -> float:
        return self.cell_size * self.rows


def render_pdf(
    grid: Grid,
    across: Sequence[Entry],
    down: Sequence[Entry],
    title: str,
    output_path: str,
) -> None:
    """Compute layout, fit clues, draw page 1 (puzzle) + page 2 (answer key)."""
    from reportlab.pdfgen.canvas import Canvas

    layout = _compute_layout(grid.rows, grid.cols, across, down, title)
    layout = _adaptive_fit(across, down, layout)

    c = Canvas(output_path, pagesize=letter)

    _draw_title_banner(c, layout)
    _draw_grid(c, grid, layout, show_answers=False)
    _draw_clue_zone(c, across, down, layout)
    c.showPage()

    key = LayoutParams(
        rows=layout.rows, cols=layout.cols,
        cell_size=layout.cell_size, number_font_size=layout.number_font_size,
        title="ANSWER KEY",
    )
    _recompute_positions(key)
    _draw_title_banner(c, key)
    _draw_grid(c, grid, key, show_answers=True)
    c.showPage()

    c.save()


def _compute_layout(
    rows: int,
    cols: int,
    across: Sequence[Entry],
    down: Sequence[Entry],
    title: str,
) -> LayoutParams:
    """Calculate all positions and sizes."""
    lp = LayoutParams(rows=rows, cols=cols, title=title)

    longest = max(rows, cols)
    if longest <= 9:
        lp.cell_size = 32.0
        lp.number_font_size = 9.5
    elif longest <= 12:
        lp.cell_size = 28.0
        lp.number_font_size = 8.5
    elif longest <= 15:
        lp.cell_size = 24.0
        lp.number_font_size = 8.0
    else:
        lp.cell_size = 17.0
        lp.number_font_size = 6.0

    lp.clue_cols = 2 if len(across) + len(down) <= 10 else 3

    _recompute_positions(lp)
    return lp


def _recompute_positions(lp: LayoutParams) -> None:
    """(Re)calculate derived positions from current params."""
    lp.banner_y = PAGE_H - MARGIN - lp.banner_h
    lp.grid_x = (PAGE_W - lp.grid_w) / 2
    lp.grid_y = lp.banner_y - 12
    lp.clue_zone_y = lp.grid_y - lp.grid_h - 16

    total_gutter = lp.clue_gutter * (lp.clue_cols - 1)
    lp.clue_col_w = (lp.usable_w - total_gutter) / lp.clue_cols


def _adaptive_fit(
    across: Sequence[Entry],
    down: Sequence[Entry],
    layout: LayoutParams,
) -> LayoutParams:
    """Shrink fonts, add columns, then shrink cells until clues fit on page 1."""
    for _ in range(16):
        if _content_fits(across, down, layout):
            return layout

        if layout.clue_font_size > 6.5:
            layout.clue_font_size -= 0.5
            layout.clue_leading = layout.clue_font_size + 1.5
            continue

        if layout.clue_cols < 4:
            layout.clue_cols += 1
            _recompute_positions(layout)
            continue

        if layout.cell_size > 16:
            layout.cell_size -= 2
            _recompute_positions(layout)
            continue

        break

    return layout


def _content_fits(
    across: Sequence[Entry],
    down: Sequence[Entry],
    layout: LayoutParams,
) -> bool:
    columns = _distribute(_render_items(across, down, layout), layout.clue_cols)
    tallest = max((sum(h for _, _, h in col) for col in columns), default=0.0)
    return tallest <= layout.clue_zone_y - MARGIN


def _clue_style(layout: LayoutParams) -> ParagraphStyle:
    return ParagraphStyle(
        "ClueStyle",
        fontName="Helvetica",
        fontSize=layout.clue_font_size,
        leading=layout.clue_leading,
        spaceAfter=layout.space_after,
    )


def _clue_markup(entry: Entry) -> str:
    """Format clue as ``<b>A3.</b> text`` with XML escaping."""
    return f"<b>{entry.id}.</b> {escape(entry.clue)}"


def _render_items(
    across: Sequence[Entry],
    down: Sequence[Entry],
    layout: LayoutParams,
) -> list[tuple[str, str, float]]:
    """Ordered (kind, content, height) items: section headers and measured clues."""
    style = _clue_style(layout)
    items: list[tuple[str, str, float]] = []
    for label, entries in (("ACROSS", across), ("DOWN", down)):
        items.append(("header", label, SECTION_HEADER_H + 4))
        for entry in entries:
            markup = _clue_markup(entry)
            _, h = Paragraph(markup, style).wrap(layout.clue_col_w, 10000)
            items.append(("clue", markup, h + style.spaceAfter))
    return items


def _distribute(
    items: list[tuple[str, str, float]], n_cols: int,
) -> list[list[tuple[str, str, float]]]:
    """Greedy balanced split into *n_cols*; a header never ends a column."""
    target = sum(h for _, _, h in items) / n_cols
    columns: list[list[tuple[str, str, float]]] = [[] for _ in range(n_cols)]
    heights = [0.0] * n_cols
    idx = 0

    for item in items:
        h = item[2]
        if idx < n_cols - 1 and heights[idx] > 0 and heights[idx] + h > target * 1.05:
            if columns[idx][-1][0] == "header":
                stray = columns[idx].pop()
                heights[idx] -= stray[2]
                idx += 1
                columns[idx].append(stray)
                heights[idx] += stray[2]
            else:
                idx += 1
        columns[idx].append(item)
        heights[idx] += h

    return columns


# ─── Drawing functions ──────────────────────────────────────────────────────


def _draw_title_banner(c, layout: LayoutParams) -> None:
    """Black rect + white centered bold text."""
    x = MARGIN
    y = layout.banner_y
    w = layout.usable_w
    h = layout.banner_h

    c.setFillColorRGB(0, 0, 0)
    c.rect(x, y, w, h, fill=1, stroke=0)

    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 16)
    text_w = stringWidth(layout.title, "Helvetica-Bold", 16)
    c.drawString(x + (w - text_w) / 2, y + (h - 16) / 2 + 2, layout.title)


def _draw_grid(c, grid: Grid, layout: LayoutParams, show_answers: bool) -> None:
    """Draw black/white cells, numbers, optional letters."""
    x0 = layout.grid_x
    y0 = layout.grid_y
    cs = layout.cell_size

    for r in range(grid.rows):
        for col in range(grid.cols):
            cell = grid.cells[r][col]
            cx = x0 + col * cs
            cy = y0 - (r + 1) * cs

            if cell.cell_type == CellType.BLACK:
                c.setFillColorRGB(0, 0, 0)
                c.rect(cx, cy, cs, cs, fill=1, stroke=0)
                continue

            c.setFillColorRGB(1, 1, 1)
            c.setStrokeColorRGB(0, 0, 0)
            c.setLineWidth(0.5)
            c.rect(cx, cy, cs, cs, fill=1, stroke=1)

            if cell.number is not None:
                c.setFillColorRGB(0, 0, 0)
                c.setFont("Helvetica-Bold", layout.number_font_size)
                c.drawString(cx + 1.5, cy + cs - layout.number_font_size - 1, str(cell.number))

            if show_answers and cell.letter:
                c.setFillColorRGB(0, 0, 0)
                font_size = cs * 0.45
                c.setFont("Helvetica", font_size)
                lw = stringWidth(cell.letter, "Helvetica", font_size)
                c.drawString(cx + cs * 0.55 - lw / 2, cy + cs * 0.42 - font_size / 2, cell.letter)

    # Outer border
    c.setStrokeColorRGB(0, 0, 0)
    c.setLineWidth(1.5)
    c.rect(x0, y0 - layout.grid_h, layout.grid_w, layout.grid_h, fill=0, stroke=1)


def _draw_clue_zone(
    c,
    across: Sequence[Entry],
    down: Sequence[Entry],
    layout: LayoutParams,
) -> None:
    style = _clue_style(layout)
    columns = _distribute(_render_items(across, down, layout), layout.clue_cols)

    for i, col_items in enumerate(columns):
        col_x = MARGIN + i * (layout.clue_col_w + layout.clue_gutter)
        current_y = layout.clue_zone_y

        for kind, content, h in col_items:
            if kind == "header":
                _draw_section_header(c, content, col_x, current_y, layout.clue_col_w)
            else:
                p = Paragraph(content, style)
                p.wrap(layout.clue_col_w, 10000)
                p.drawOn(c, col_x, current_y - h)
            current_y -= h


def _draw_section_header(c, text: str, x: float, y: float, width: float) -> None:
    """Black rect + white bold text."""
    c.setFillColorRGB(0, 0, 0)
    c.rect(x, y - SECTION_HEADER_H, width, SECTION_HEADER_H, fill=1, stroke=0)

    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 9)
    c.drawString(x + 4, y - SECTION_HEADER_H + 3.5, text)
