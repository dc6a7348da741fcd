from scrambled_keypad.core.keys import Key, KeyKind, Cell, Row, Offset, build_keys
from scrambled_keypad.core.keypad_config import KeypadConfig, KeypadConfigError, OverlapPolicy
from scrambled_keypad.core.digit_source import shuffled_digits
from scrambled_keypad.core.span_assigner import assign_spans, row_units_for
from scrambled_keypad.core.row_packer import pack_rows, fixed_grid
from scrambled_keypad.core.layout_engine import LayoutEngine
from scrambled_keypad.core.scheduler import ManualScheduler
from scrambled_keypad.core.scramble_sequencer import ScrambleSequencer, ScramblePhase, scramble_offsets
from scrambled_keypad.core.keypad import ScrambledKeypad

__all__ = [
    "Key",
    "KeyKind",
    "Cell",
    "Row",
    "Offset",
    "build_keys",
    "KeypadConfig",
    "KeypadConfigError",
    "OverlapPolicy",
    "shuffled_digits",
    "assign_spans",
    "row_units_for",
    "pack_rows",
    "fixed_grid",
    "LayoutEngine",
    "ManualScheduler",
    "ScrambleSequencer",
    "ScramblePhase",
    "scramble_offsets",
    "ScrambledKeypad",
]
