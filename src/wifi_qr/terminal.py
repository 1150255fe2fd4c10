"""Render QR module matrices as terminal text."""

from __future__ import annotations

from typing import Iterator

from .matrix_utils import Matrix, require_rectangular

ON_GLYPH = "██"
OFF_GLYPH = "  "
GLYPH_WIDTH = 2


def iter_lines(matrix: Matrix, *, on: str = ON_GLYPH, off: str = OFF_GLYPH) -> Iterator[str]:
    """Yield one line per matrix row, without line terminators."""
    if len(on) != GLYPH_WIDTH or len(off) != GLYPH_WIDTH:
        raise ValueError(f"glyphs must be {GLYPH_WIDTH} characters wide, got {on!r} and {off!r}")
    require_rectangular(matrix)
    for row in matrix:
        yield "".join(on if cell else off for cell in row)


def render_matrix(matrix: Matrix, *, on: str = ON_GLYPH, off: str = OFF_GLYPH) -> str:
    """Return ``matrix`` as text, two characters per module and ``\\n`` after every row.

    An empty matrix renders as an empty string.
    """
    return "".join(f"{line}\n" for line in iter_lines(matrix, on=on, off=off))
