"""
Row packing for variable-width keys.

Greedy first-fit in input order: keys are never reordered and the packer does
not look ahead. Each row that ends with unused capacity is padded by exactly
one trailing spacer cell, so every packed row sums to ``row_units``.
"""
from typing import Iterable, List, Optional, Tuple

from scrambled_keypad.core.keys import Cell, Key, Row

# (id, span, key or None)
PackEntry = Tuple[str, int, Optional[Key]]


def clamp_span(span, row_units, max_span=None):
    span = max(1, span)
    if max_span is not None:
        span = min(max_span, span)
    return min(span, max(1, row_units))


def pack_rows(entries: Iterable[PackEntry], row_units: int,
              max_span: Optional[int] = None) -> List[Row]:
    """
    Pack (id, span, key) entries into rows of ``row_units`` capacity.

    Args:
        entries: keys in display order with their spans.
        row_units: unit capacity of every row.
        max_span: optional upper clamp applied to each span.

    Returns:
        list[Row]: rows in order, spacer-padded to full capacity.
    """
    row_units = max(1, row_units)
    rows: List[Row] = []
    current: List[Cell] = []
    remaining = row_units

    def close_row():
        if remaining > 0:
            index = len(rows)
            current.append(Cell(f"spacer-{index}-{len(current)}", remaining, None))
        rows.append(Row(len(rows), tuple(current)))

    for entry_id, span, key in entries:
        span = clamp_span(span, row_units, max_span)
        if span > remaining:
            close_row()
            current = []
            remaining = row_units
        current.append(Cell(entry_id, span, key))
        remaining -= span

    if current:
        close_row()
    return rows


def fixed_grid(keys: Iterable[Key], column_count: int) -> List[Row]:
    """Plain grid wrap: span 1 per key, no spacers."""
    column_count = max(1, column_count)
    keys = list(keys)
    rows = []
    for start in range(0, len(keys), column_count):
        chunk = keys[start:start + column_count]
        cells = tuple(Cell(key.id, 1, key) for key in chunk)
        rows.append(Row(len(rows), cells))
    return rows
