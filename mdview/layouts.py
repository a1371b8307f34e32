"""Layout mappings from multidimensional indices to flat offsets."""

from __future__ import annotations

import math
import operator
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Union

from mdview.extents import Extents
from mdview.slices import FullExtent, IntegralConstant
from mdview.submdspan_extents import (
    SliceSpecifier,
    first_of,
    inv_map_rank,
    stride_of,
    submdspan_extents,
)


def _as_index(value: object) -> int:
    if isinstance(value, bool):
        raise TypeError("an index must be an integer, not bool")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"an index must be an integer, not {type(value).__name__}"
        ) from None


class _Mapping:
    """State and helpers shared by every layout mapping."""

    __slots__ = ("_extents", "_strides")

    _extents: Extents
    _strides: tuple[int, ...]

    @property
    def extents(self) -> Extents:
        """The index space this mapping covers."""
        return self._extents

    def _offset(self, indices: Iterable[int]) -> int:
        return sum(i * s for i, s in zip(indices, self._strides))

    def _checked_indices(self, args: Sequence[object]) -> tuple[int, ...]:
        rank = self._extents.rank()
        if len(args) != rank:
            raise IndexError(f"expected {rank} indices, got {len(args)}")
        indices = tuple(_as_index(a) for a in args)
        for r, (index, extent) in enumerate(zip(indices, self._extents.values)):
            if not 0 <= index < extent:
                raise IndexError(
                    f"index {index} out of range for extent {extent} in dimension {r}"
                )
        return indices

    def _map(self, args: Sequence[object]) -> int:
        return self._offset(self._checked_indices(args))

    def _stride(self, r: int) -> int:
        if not 0 <= r < self._extents.rank():
            raise IndexError(
                f"rank index {r} out of range for rank {self._extents.rank()}"
            )
        return self._strides[r]

    def _size(self) -> int:
        return math.prod(self._extents.values)


class _ExhaustiveMapping(_Mapping):
    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._extents == other._extents  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._extents))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._extents!r})"


class LayoutLeftMapping(_ExhaustiveMapping):
    """Column-major mapping: the first index varies fastest."""

    __slots__ = ()

    def __init__(self, extents: Extents) -> None:
        self._extents = extents
        values = extents.values
        self._strides = tuple(math.prod(values[:r]) for r in range(len(values)))

    def __call__(self, *args: object) -> int:
        """The flat offset of the element at the given indices."""
        return self._map(args)

    def stride(self, r: int) -> int:
        """The distance between neighbouring elements along dimension ``r``."""
        return self._stride(r)

    def required_span_size(self) -> int:
        """Length of buffer needed to hold every element."""
        return self._size()

    def is_exhaustive(self) -> bool:
        """Whether every position of the span belongs to some index."""
        return True


class LayoutRightMapping(_ExhaustiveMapping):
    """Row-major mapping: the last index varies fastest."""

    __slots__ = ()

    def __init__(self, extents: Extents) -> None:
        self._extents = extents
        values = extents.values
        self._strides = tuple(math.prod(values[r + 1:]) for r in range(len(values)))

    def __call__(self, *args: object) -> int:
        """The flat offset of the element at the given indices."""
        return self._map(args)

    def stride(self, r: int) -> int:
        """The distance between neighbouring elements along dimension ``r``."""
        return self._stride(r)

    def required_span_size(self) -> int:
        """Length of buffer needed to hold every element."""
        return self._size()

    def is_exhaustive(self) -> bool:
        """Whether every position of the span belongs to some index."""
        return True


class LayoutStrideMapping(_Mapping):
    """Mapping with an arbitrary, user-given stride per dimension."""

    __slots__ = ()

    def __init__(self, extents: Extents, strides: Iterable[object]) -> None:
        values = tuple(_as_index(s) for s in strides)
        if len(values) != extents.rank():
            raise ValueError(
                f"expected {extents.rank()} strides, got {len(values)}"
            )
        for r, s in enumerate(values):
            if s < 0:
                raise ValueError(f"stride {r} must not be negative, got {s}")
        self._extents = extents
        self._strides = values

    def __call__(self, *args: object) -> int:
        """The flat offset of the element at the given indices."""
        return self._map(args)

    def stride(self, r: int) -> int:
        """The distance between neighbouring elements along dimension ``r``."""
        return self._stride(r)

    def strides(self) -> tuple[int, ...]:
        """Every stride, in dimension order."""
        return self._strides

    def required_span_size(self) -> int:
        """Length of buffer needed to reach every element."""
        values = self._extents.values
        if not values:
            return 1
        if any(e == 0 for e in values):
            return 0
        return 1 + sum((e - 1) * s for e, s in zip(values, self._strides))

    def is_exhaustive(self) -> bool:
        """Whether every position of the span belongs to some index."""
        if self._extents.rank() == 0:
            return True
        return self.required_span_size() == self._size()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LayoutStrideMapping):
            return NotImplemented
        return self._extents == other._extents and self._strides == other._strides

    def __hash__(self) -> int:
        return hash((self._extents, self._strides))

    def __repr__(self) -> str:
        return f"LayoutStrideMapping({self._extents!r}, {list(self._strides)})"


Mapping = Union[LayoutLeftMapping, LayoutRightMapping, LayoutStrideMapping]


@dataclass(frozen=True)
class MappingOffset:
    """A sub-mapping together with the offset at which it starts."""

    mapping: Mapping
    offset: int


def _is_range(slice_: object) -> bool:
    return (
        isinstance(slice_, tuple)
        and len(slice_) == 2
        and all(
            isinstance(p, IntegralConstant)
            or (isinstance(p, int) and not isinstance(p, bool))
            for p in slice_
        )
    )


def _preserves_left(slices: Sequence[SliceSpecifier], sub_rank: int) -> bool:
    if sub_rank == 0:
        return True
    return all(
        idx > sub_rank - 1
        or isinstance(s, FullExtent)
        or (idx == sub_rank - 1 and _is_range(s))
        for idx, s in enumerate(slices)
    )


def _preserves_right(slices: Sequence[SliceSpecifier], sub_rank: int) -> bool:
    if sub_rank == 0:
        return True
    border = len(slices) - sub_rank
    return all(
        idx < border
        or isinstance(s, FullExtent)
        or (idx == border and _is_range(s))
        for idx, s in enumerate(slices)
    )


def submdspan_mapping(src_mapping: Mapping, *args: SliceSpecifier) -> MappingOffset:
    """The mapping of the view chosen by ``args`` and where that view starts.

    Left and right layouts are kept when the slices allow it; otherwise the
    result is a strided layout.
    """
    if not isinstance(
        src_mapping, (LayoutLeftMapping, LayoutRightMapping, LayoutStrideMapping)
    ):
        raise TypeError(f"not a layout mapping: {src_mapping!r}")
    dst_ext = submdspan_extents(src_mapping.extents, *args)
    offset = src_mapping._offset(int(first_of(s)) for s in args)
    sub_rank = dst_ext.rank()

    if isinstance(src_mapping, LayoutLeftMapping) and _preserves_left(args, sub_rank):
        return MappingOffset(LayoutLeftMapping(dst_ext), offset)
    if isinstance(src_mapping, LayoutRightMapping) and _preserves_right(args, sub_rank):
        return MappingOffset(LayoutRightMapping(dst_ext), offset)

    strides = [
        src_mapping.stride(k) * int(stride_of(args[k])) for k in inv_map_rank(args)
    ]
    return MappingOffset(LayoutStrideMapping(dst_ext, strides), offset)