"""Extents of the view selected from an index space by slice specifiers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Union

from mdview.extents import DYNAMIC_EXTENT, Extents, StaticExtent
from mdview.slices import FullExtent, IntegralConstant, StridedSlice

SliceSpecifier = Union[int, IntegralConstant, FullExtent, tuple, StridedSlice]


def _is_index(slice_: object) -> bool:
    if isinstance(slice_, IntegralConstant):
        return True
    return isinstance(slice_, int) and not isinstance(slice_, bool)


def _is_range(slice_: object) -> bool:
    return (
        isinstance(slice_, tuple)
        and len(slice_) == 2
        and all(_is_index(part) for part in slice_)
    )


def _check_slice(slice_: object) -> None:
    if not (
        _is_index(slice_)
        or isinstance(slice_, (FullExtent, StridedSlice))
        or _is_range(slice_)
    ):
        raise TypeError(f"not a slice specifier: {slice_!r}")


def first_of(slice: SliceSpecifier) -> int | IntegralConstant:  # noqa: A002
    """The first index a slice specifier selects."""
    _check_slice(slice)
    if _is_index(slice):
        return slice  # type: ignore[return-value]
    if isinstance(slice, FullExtent):
        return IntegralConstant(0)
    if isinstance(slice, StridedSlice):
        return slice.offset
    return slice[0]  # type: ignore[index]


def last_of(
    k: int, extents: Extents, slice: SliceSpecifier  # noqa: A002
) -> int | IntegralConstant:
    """The end of the range a slice specifier selects in dimension ``k``.

    For a strided slice this is its extent, as the range is measured from
    its offset.
    """
    _check_slice(slice)
    if _is_index(slice):
        return slice  # type: ignore[return-value]
    if isinstance(slice, FullExtent):
        static = extents.static_extent(k)
        if static is DYNAMIC_EXTENT:
            return extents.extent(k)
        return IntegralConstant(static)
    if isinstance(slice, StridedSlice):
        return slice.extent
    return slice[1]  # type: ignore[index]


def stride_of(slice: SliceSpecifier) -> int | IntegralConstant:  # noqa: A002
    """The step between selected indices; one for all but strided slices."""
    _check_slice(slice)
    if isinstance(slice, StridedSlice):
        return slice.stride
    return IntegralConstant(1)


def inv_map_rank(slices: Sequence[SliceSpecifier]) -> tuple[int, ...]:
    """For each dimension of the result, the source dimension it comes from."""
    for slice_ in slices:
        _check_slice(slice_)
    return tuple(k for k, slice_ in enumerate(slices) if not _is_index(slice_))


def _strided_extent(slice_: StridedSlice) -> tuple[StaticExtent, int]:
    extent = int(slice_.extent)
    stride = int(slice_.stride)
    if extent > 0:
        if stride <= 0:
            raise ValueError(
                f"a strided slice with extent {extent} needs a positive stride, "
                f"got {stride}"
            )
        value = 1 + (extent - 1) // stride
    else:
        value = 0
    both_fixed = isinstance(slice_.extent, IntegralConstant) and isinstance(
        slice_.stride, IntegralConstant
    )
    return (value if both_fixed else DYNAMIC_EXTENT), value


def submdspan_extents(src_exts: Extents, *args: SliceSpecifier) -> Extents:
    """Extents of the view of ``src_exts`` chosen by one slice per dimension.

    Integer slices drop their dimension. Other slices keep it, and the new
    extent stays fixed when everything it depends on is fixed.
    """
    if len(args) != src_exts.rank():
        raise ValueError(
            f"expected {src_exts.rank()} slice specifiers, got {len(args)}"
        )
    statics: list[StaticExtent] = []
    values: list[int] = []
    for k, slice_ in enumerate(args):
        _check_slice(slice_)
        if _is_index(slice_):
            continue
        if isinstance(slice_, StridedSlice):
            static, value = _strided_extent(slice_)
        else:
            first = first_of(slice_)
            last = last_of(k, src_exts, slice_)
            value = int(last) - int(first)
            both_fixed = isinstance(first, IntegralConstant) and isinstance(
                last, IntegralConstant
            )
            static = value if both_fixed else DYNAMIC_EXTENT
        if value < 0:
            raise ValueError(f"slice {slice_!r} selects a negative range")
        statics.append(static)
        values.append(value)
    return Extents(statics, *values)