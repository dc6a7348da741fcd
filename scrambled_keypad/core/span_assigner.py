"""
Random span assignment for the variable-size layout.

Phase 1 hands out the spare capacity (rows * units - keys) one unit at a time
to randomly ordered keys, capped at ``max_span``. Phase 2 packs the result and,
while it needs more than ``max_rows`` rows, narrows keys from the end of the
key order. Both loops are bounded, so an infeasible request (more keys than
total capacity) ends with every span at 1 and an overflowing row count.
"""
import math
import random
from typing import Dict, List, Sequence

from scrambled_keypad.core.row_packer import pack_rows


def row_units_for(key_count, column_count, max_rows, max_span):
    """Row capacity wide enough for one full-span key per row."""
    minimum_units = math.ceil(key_count / max(1, max_rows))
    return max(column_count + 3, minimum_units, max_span)


def _row_count(ids, spans, row_units, max_span):
    return len(pack_rows(((i, spans[i], None) for i in ids), row_units, max_span))


def grow_spans(ids: Sequence[str], row_units: int, max_rows: int,
               max_span: int, rng=None) -> Dict[str, int]:
    rng = rng or random
    spans = {key_id: 1 for key_id in ids}
    remaining = max(0, row_units * max_rows - len(ids))

    order: List[str] = list(ids)
    rng.shuffle(order)
    cursor = 0
    while remaining > 0 and order:
        key_id = order[cursor % len(order)]
        if spans[key_id] < max_span:
            spans[key_id] += 1
            remaining -= 1
        cursor += 1
        # Every key saturated before the budget ran out
        if cursor > len(order) * max_span * 2:
            break
    return spans


def shrink_spans(ids: Sequence[str], spans: Dict[str, int], row_units: int,
                 max_rows: int, max_span: int) -> Dict[str, int]:
    spans = dict(spans)
    rows = _row_count(ids, spans, row_units, max_span)
    guard = 0
    while rows > max_rows and guard < len(ids) * max_span:
        candidate = next((i for i in reversed(ids) if spans[i] > 1), None)
        if candidate is None:
            break
        spans[candidate] -= 1
        rows = _row_count(ids, spans, row_units, max_span)
        guard += 1
    return spans


def assign_spans(key_ids: Sequence[str], row_units: int, max_rows: int,
                 max_span: int, rng=None) -> Dict[str, int]:
    """
    Assign a random span in [1, max_span] to every key id.

    Args:
        key_ids: key ids in display order (must be unique).
        row_units: unit capacity of a row.
        max_rows: row budget the packed layout should respect.
        max_span: widest span a key may get.
        rng: random.Random for reproducible draws.

    Returns:
        dict: id -> span. Packing the ids with these spans needs at most
        ``max_rows`` rows whenever that is achievable.
    """
    ids = list(key_ids)
    max_span = max(1, max_span)
    spans = grow_spans(ids, row_units, max_rows, max_span, rng)
    return shrink_spans(ids, spans, row_units, max_rows, max_span)
