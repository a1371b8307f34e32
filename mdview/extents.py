"""Multidimensional index spaces mixing compile-time-like and runtime extents."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from typing import Optional

DYNAMIC_EXTENT = None
"""Marker for an extent whose value is only known at run time."""

StaticExtent = Optional[int]


def _as_index(value: object) -> int:
    if isinstance(value, bool):
        raise TypeError("an extent must be an integer, not bool")
    try:
        index = operator.index(value)
    except TypeError:
        raise TypeError(
            f"an extent must be an integer, not {type(value).__name__}"
        ) from None
    if index < 0:
        raise ValueError(f"an extent must not be negative, got {index}")
    return index


def _as_static(value: object) -> StaticExtent:
    if value is DYNAMIC_EXTENT:
        return DYNAMIC_EXTENT
    return _as_index(value)


class Extents:
    """The extents of a multidimensional index space.

    ``static_extents`` fixes the rank and, for each dimension, either a fixed
    extent or ``DYNAMIC_EXTENT``. The remaining arguments give either the
    dynamic extents only or every extent; they may also be passed as one
    list or tuple. With no values, the dynamic extents default to zero.
    """

    __slots__ = ("_static", "_values")

    def __init__(self, static_extents: Iterable[StaticExtent], *args: object) -> None:
        statics = tuple(_as_static(e) for e in static_extents)
        if len(args) == 1 and isinstance(args[0], (list, tuple)):
            raw: Iterable[object] = args[0]
        else:
            raw = args
        given = tuple(_as_index(v) for v in raw)

        dynamic_positions = [r for r, s in enumerate(statics) if s is DYNAMIC_EXTENT]
        if not given:
            dynamic = (0,) * len(dynamic_positions)
        elif len(given) == len(dynamic_positions):
            dynamic = given
        elif len(given) == len(statics):
            for r, (static, value) in enumerate(zip(statics, given)):
                if static is not DYNAMIC_EXTENT and static != value:
                    raise ValueError(
                        f"extent {r} is fixed at {static} but {value} was given"
                    )
            dynamic = tuple(given[r] for r in dynamic_positions)
        else:
            raise ValueError(
                f"expected {len(dynamic_positions)} dynamic or {len(statics)} "
                f"extents, got {len(given)}"
            )

        values = list(statics)
        for position, value in zip(dynamic_positions, dynamic):
            values[position] = value
        self._static: tuple[StaticExtent, ...] = statics
        self._values: tuple[int, ...] = tuple(values)  # type: ignore[arg-type]

    def rank(self) -> int:
        """Number of dimensions."""
        return len(self._static)

    def rank_dynamic(self) -> int:
        """Number of dimensions whose extent is dynamic."""
        return sum(1 for s in self._static if s is DYNAMIC_EXTENT)

    def extent(self, r: int) -> int:
        """The extent of dimension ``r``."""
        self._check_rank_index(r)
        return self._values[r]

    def static_extent(self, r: int) -> StaticExtent:
        """The fixed extent of dimension ``r``, or ``DYNAMIC_EXTENT``."""
        self._check_rank_index(r)
        return self._static[r]

    @property
    def static_extents(self) -> tuple[StaticExtent, ...]:
        """The static pattern of these extents."""
        return self._static

    @property
    def values(self) -> tuple[int, ...]:
        """Every extent, in dimension order."""
        return self._values

    def convert(self, static_extents: Iterable[StaticExtent]) -> Extents:
        """Return equal extents with a different, compatible static pattern."""
        target = tuple(_as_static(e) for e in static_extents)
        if len(target) != self.rank():
            raise ValueError(
                f"cannot convert rank {self.rank()} extents to rank {len(target)}"
            )
        for r, (mine, theirs) in enumerate(zip(self._static, target)):
            if (
                mine is not DYNAMIC_EXTENT
                and theirs is not DYNAMIC_EXTENT
                and mine != theirs
            ):
                raise ValueError(
                    f"static extent {r} differs: {mine} versus {theirs}"
                )
        return Extents(target, *self._values)

    def _check_rank_index(self, r: int) -> None:
        if not 0 <= r < len(self._static):
            raise IndexError(f"rank index {r} out of range for rank {self.rank()}")

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._static)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Extents):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        statics = ", ".join("dyn" if s is DYNAMIC_EXTENT else str(s) for s in self._static)
        return f"Extents([{statics}], {list(self._values)})"


def dextents(*args: object) -> Extents:
    """Extents whose every dimension is dynamic, with the given values."""
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        values = tuple(args[0])
    else:
        values = args
    return Extents((DYNAMIC_EXTENT,) * len(values), *values)