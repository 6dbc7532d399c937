"""Render a crossword layout as standalone SVG."""

from __future__ import annotations

from xml.sax.saxutils import escape

from models import CellType, Grid


def render_svg(
    grid: Grid,
    output_path: str,
    show_answers: bool = False,
    cell_size: float | None = None,
) -> None:
    """Write the crossword grid to an SVG file."""
    longest = max(grid.rows, grid.cols)
    if cell_size is None:
        cell_size = _default_cell_size(longest)

    number_font = _number_font_size(longest)
    letter_font = cell_size * 0.45
    width = cell_size * grid.cols
    height = cell_size * grid.rows

    parts: list[str] = []
    parts.append(
        f'<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">\n'
    )

    for r in range(grid.rows):
        for c in range(grid.cols):
            cell = grid.cells[r][c]
            x = c * cell_size
            y = r * cell_size

            if cell.cell_type == CellType.BLACK:
                parts.append(
                    f'  <rect x="{x}" y="{y}" width="{cell_size}" '
                    f'height="{cell_size}" fill="black"/>\n'
                )
                continue

            parts.append(
                f'  <rect x="{x}" y="{y}" width="{cell_size}" '
                f'height="{cell_size}" fill="white" '
                f'stroke="black" stroke-width="0.5"/>\n'
            )

            if cell.number is not None:
                parts.append(
                    f'  <text x="{x + 1.5}" y="{y + number_font + 1}" '
                    f'font-family="Helvetica, Arial, sans-serif" '
                    f'font-weight="bold" font-size="{number_font}" '
                    f'fill="black">{cell.number}</text>\n'
                )

            if show_answers and cell.letter:
                parts.append(
                    f'  <text x="{x + cell_size * 0.55}" y="{y + cell_size * 0.58}" '
                    f'text-anchor="middle" dominant-baseline="central" '
                    f'font-family="Helvetica, Arial, sans-serif" '
                    f'font-size="{letter_font}" '
                    f'fill="black">{escape(cell.letter)}</text>\n'
                )

    # Outer border
    parts.append(
        f'  <rect x="0" y="0" width="{width}" height="{height}" '
        f'fill="none" stroke="black" stroke-width="1.5"/>\n'
    )
    parts.append('</svg>\n')

    with open(output_path, 'w', encoding='utf-8') as f:
        f.writelines(parts)


def render_puzzle_svg(grid: Grid, output_path: str) -> None:
    """Render puzzle grid (no answers) to SVG."""
    render_svg(grid, output_path, show_answers=False)


def render_answer_svg(grid: Grid, output_path: str) -> None:
    """Render answer grid (with letters) to SVG."""
    render_svg(grid, output_path, show_answers=True)


def _default_cell_size(longest_side: int) -> float:
    if longest_side <= 9:
        return 32.0
    elif longest_side <= 15:
        return 24.0
    return 17.0


def _number_font_size(longest_side: int) -> float:
    if longest_side <= 9:
        return 9.5
    elif longest_side <= 13:
        return 8.5
    elif longest_side <= 15:
        return 8.0
    return 6.0
