"""
LayoutEngine - turns the current key list into renderable rows.

Fixed mode wraps keys into ``column_count`` columns. Variable mode derives a
row capacity, draws random spans and packs them. The engine keeps nothing
between calls except the last result for the renderer.
"""
import logging
from typing import List, Sequence

from scrambled_keypad.core.keypad_config import KeypadConfig
from scrambled_keypad.core.keys import Key, Row
from scrambled_keypad.core.row_packer import fixed_grid, pack_rows
from scrambled_keypad.core.span_assigner import assign_spans, row_units_for


class LayoutEngine:

    def __init__(self, rng=None):
        self.logger = logging.getLogger(__name__)
        self.rng = rng
        self.last_rows: List[Row] = []
        self.last_row_units: int = 0

    def row_units(self, key_count: int, config: KeypadConfig) -> int:
        return row_units_for(key_count, config.column_count,
                             config.max_rows, config.max_span)

    def compute_layout(self, keys: Sequence[Key], config: KeypadConfig,
                       size_variation: bool = False) -> List[Row]:
        """
        Compute rows for ``keys``.

        Args:
            keys: keys in display order.
            config: layout tunables.
            size_variation: variable-span layout when True, fixed grid when
                False.
        """
        keys = list(keys)
        if not size_variation:
            rows = fixed_grid(keys, config.column_count)
            self.last_row_units = config.column_count
        else:
            rows = self._variable_rows(keys, config)

        self.logger.debug(
            f"Layout recomputed: {len(keys)} keys -> {len(rows)} rows "
            f"(variable={bool(size_variation)})"
        )
        self.last_rows = rows
        return rows

    def _variable_rows(self, keys, config):
        row_units = self.row_units(len(keys), config)
        ids = [key.id for key in keys]
        spans = assign_spans(ids, row_units, config.max_rows,
                             config.max_span, self.rng)
        rows = pack_rows(((key.id, spans[key.id], key) for key in keys),
                         row_units, config.max_span)
        if len(rows) > config.max_rows:
            self.logger.warning(
                f"{len(keys)} keys do not fit {config.max_rows} rows of "
                f"{row_units} units; using {len(rows)} rows"
            )
        self.last_row_units = row_units
        return rows

    @staticmethod
    def unit_width(row_units: int, total_width: float, spacing: float) -> float:
        """Width of one layout unit once the inter-unit gaps are removed."""
        units = max(1, row_units)
        available = max(0.0, total_width - spacing * (units - 1))
        return available / units

    @staticmethod
    def cell_width(span: int, unit_width: float, spacing: float) -> float:
        """A span-wide cell also swallows the gaps it covers."""
        span = max(1, span)
        return unit_width * span + spacing * (span - 1)
