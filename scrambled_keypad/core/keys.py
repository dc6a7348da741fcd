"""
Keypad data model.

Keys, layout cells/rows and scramble offsets. These are the in-memory
structures handed to the renderer.

Note on identity: ``Key.id`` is derived from kind + value, so "digit-7" names
whatever slot the digit 7 occupies in the current arrangement. It is only
meaningful within one layout/animation cycle. Anything keyed by it (spans,
offsets) must be dropped when the digits are reshuffled.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple


class KeyKind(Enum):
    DIGIT = "digit"
    DELETE = "delete"
    ENTER = "enter"


@dataclass(frozen=True)
class Key:
    kind: KeyKind
    value: Optional[int] = None

    @classmethod
    def digit(cls, value: int) -> "Key":
        return cls(KeyKind.DIGIT, value)

    @classmethod
    def delete(cls) -> "Key":
        return cls(KeyKind.DELETE)

    @classmethod
    def enter(cls) -> "Key":
        return cls(KeyKind.ENTER)

    @property
    def id(self) -> str:
        if self.kind is KeyKind.DIGIT:
            return f"digit-{self.value}"
        return self.kind.value

    @property
    def label(self) -> str:
        if self.kind is KeyKind.DIGIT:
            return str(self.value)
        if self.kind is KeyKind.DELETE:
            return "⌫"
        return "Enter"


@dataclass(frozen=True)
class Cell:
    """One layout slot. ``key is None`` marks a spacer."""
    id: str
    span: int
    key: Optional[Key] = None

    @property
    def is_spacer(self) -> bool:
        return self.key is None


@dataclass(frozen=True)
class Row:
    index: int
    cells: Tuple[Cell, ...]

    @property
    def units(self) -> int:
        return sum(cell.span for cell in self.cells)

    @property
    def keys(self) -> List[Key]:
        return [cell.key for cell in self.cells if cell.key is not None]


@dataclass(frozen=True)
class Offset:
    dx: float = 0.0
    dy: float = 0.0

    @property
    def is_zero(self) -> bool:
        return self.dx == 0.0 and self.dy == 0.0


Offset.ZERO = Offset()


def build_keys(digits: Iterable[int], include_delete: bool = True,
               include_enter: bool = False) -> List[Key]:
    """Digits in display order, then the enabled auxiliary keys."""
    keys = [Key.digit(d) for d in digits]
    if include_delete:
        keys.append(Key.delete())
    if include_enter:
        keys.append(Key.enter())
    return keys


def flatten_keys(rows: Iterable[Row]) -> List[Key]:
    """Non-spacer keys in row, then cell, order."""
    return [key for row in rows for key in row.keys]
