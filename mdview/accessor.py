"""Data handles into flat buffers and the default way to read and write them."""

from __future__ import annotations

import operator
from collections.abc import MutableSequence
from dataclasses import dataclass
from typing import Any


def _as_offset(value: object) -> int:
    if isinstance(value, bool):
        raise TypeError("an offset must be an integer, not bool")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"an offset must be an integer, not {type(value).__name__}"
        ) from None


@dataclass(frozen=True, eq=False)
class Pointer:
    """A position inside a mutable flat buffer.

    Two pointers are equal when they refer to the very same buffer object at
    the same position.
    """

    buffer: MutableSequence[Any]
    offset: int = 0

    def __post_init__(self) -> None:
        offset = _as_offset(self.offset)
        if offset < 0:
            raise ValueError(f"a pointer offset must not be negative, got {offset}")
        object.__setattr__(self, "offset", offset)

    def _position(self, i: object) -> int:
        position = self.offset + _as_offset(i)
        if position < 0 or position >= len(self.buffer):
            raise IndexError(
                f"position {position} is outside a buffer of length {len(self.buffer)}"
            )
        return position

    def __add__(self, i: object) -> Pointer:
        return Pointer(self.buffer, self.offset + _as_offset(i))

    def __getitem__(self, i: object) -> Any:
        return self.buffer[self._position(i)]

    def __setitem__(self, i: object, value: Any) -> None:
        self.buffer[self._position(i)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pointer):
            return NotImplemented
        return self.buffer is other.buffer and self.offset == other.offset

    def __hash__(self) -> int:
        return hash((id(self.buffer), self.offset))

    def __repr__(self) -> str:
        return f"Pointer(<buffer of {len(self.buffer)}>, offset={self.offset})"


@dataclass(frozen=True)
class DefaultAccessor:
    """Reads and writes elements of a buffer through a ``Pointer``."""

    def offset(self, p: Pointer, i: int) -> Pointer:
        """The handle ``i`` elements past ``p``."""
        return p + i

    def access(self, p: Pointer, i: int) -> Any:
        """The element ``i`` elements past ``p``."""
        return p[i]

    def store(self, p: Pointer, i: int, value: Any) -> None:
        """Write ``value`` to the element ``i`` elements past ``p``."""
        p[i] = value