"""
Keypad tunables.

Numeric knobs of the layout and scramble algorithms, loaded from the
``keypad`` section of keypad_config.yml. Replaces loose dict lookups with a
typed, validated object.
"""
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional

from scrambled_keypad.core.config_loader import ConfigLoader


class KeypadConfigError(ValueError):
    """Raised when keypad settings cannot produce a usable keypad."""


class OverlapPolicy(Enum):
    """What a scramble trigger does while another scramble is in flight."""
    DEBOUNCE = "debounce"   # ignore until idle
    RESTART = "restart"     # cancel pending timers, start over


@dataclass
class KeypadConfig:
    column_count: int = 3
    spacing: float = 12.0
    max_rows: int = 3
    max_span: int = 3
    key_height: int = 52

    # Scramble transition
    out_duration_ms: int = 80
    in_duration_ms: int = 80
    min_offset: float = 6.0
    max_offset: float = 14.0
    overlap_policy: OverlapPolicy = OverlapPolicy.DEBOUNCE

    def __post_init__(self):
        if isinstance(self.overlap_policy, str):
            try:
                self.overlap_policy = OverlapPolicy(self.overlap_policy.lower())
            except ValueError:
                raise KeypadConfigError(
                    f"Unknown overlap_policy: {self.overlap_policy!r}"
                ) from None
        self.validate()

    def validate(self):
        if self.column_count < 1:
            raise KeypadConfigError("column_count must be >= 1")
        if self.max_rows < 1:
            raise KeypadConfigError("max_rows must be >= 1")
        if self.max_span < 1:
            raise KeypadConfigError("max_span must be >= 1")
        if self.spacing < 0:
            raise KeypadConfigError("spacing must be >= 0")
        if self.out_duration_ms < 0 or self.in_duration_ms < 0:
            raise KeypadConfigError("scramble durations must be >= 0")
        if self.min_offset < 0 or self.min_offset > self.max_offset:
            raise KeypadConfigError(
                f"offset range [{self.min_offset}, {self.max_offset}] is empty"
            )

    @property
    def total_duration_ms(self) -> int:
        return self.out_duration_ms + self.in_duration_ms

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "KeypadConfig":
        """Build from a config mapping. Unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in (data or {}).items() if k in known}
        return cls(**values)

    @classmethod
    def load(cls) -> "KeypadConfig":
        """Build from the ``keypad`` section of the YAML config."""
        return cls.from_dict(ConfigLoader().keypad)
