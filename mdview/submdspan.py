"""Multidimensional views over flat buffers and sub-views of them."""

from __future__ import annotations

import math
from collections.abc import MutableSequence
from typing import Any, Optional, Union

from mdview.accessor import DefaultAccessor, Pointer
from mdview.extents import Extents
from mdview.layouts import (
    LayoutLeftMapping,
    LayoutRightMapping,
    LayoutStrideMapping,
    Mapping,
    submdspan_mapping,
)
from mdview.submdspan_extents import SliceSpecifier


def _index_tuple(indices: object) -> tuple[object, ...]:
    if isinstance(indices, tuple):
        return indices
    return (indices,)


class Mdspan:
    """A multidimensional view of a flat buffer.

    ``mapping`` may be a layout mapping or plain ``Extents``, which are then
    laid out row-major.
    """

    __slots__ = ("_data_handle", "_mapping", "_accessor")

    def __init__(
        self,
        data_handle: Union[Pointer, MutableSequence[Any]],
        mapping: Union[Mapping, Extents],
        accessor: Optional[DefaultAccessor] = None,
    ) -> None:
        if not isinstance(data_handle, Pointer):
            data_handle = Pointer(data_handle)
        if isinstance(mapping, Extents):
            mapping = LayoutRightMapping(mapping)
        elif not isinstance(
            mapping, (LayoutLeftMapping, LayoutRightMapping, LayoutStrideMapping)
        ):
            raise TypeError(f"not a layout mapping or extents: {mapping!r}")
        self._data_handle = data_handle
        self._mapping = mapping
        self._accessor = accessor if accessor is not None else DefaultAccessor()

    @property
    def data_handle(self) -> Pointer:
        """Where the view's element at offset zero lives."""
        return self._data_handle

    @property
    def mapping(self) -> Mapping:
        """The layout mapping of this view."""
        return self._mapping

    @property
    def accessor(self) -> DefaultAccessor:
        """How elements are read and written."""
        return self._accessor

    @property
    def extents(self) -> Extents:
        """The index space of this view."""
        return self._mapping.extents

    def __getitem__(self, indices: object) -> Any:
        offset = self._mapping(*_index_tuple(indices))
        return self._accessor.access(self._data_handle, offset)

    def __setitem__(self, indices: object, value: Any) -> None:
        offset = self._mapping(*_index_tuple(indices))
        self._accessor.store(self._data_handle, offset, value)

    def extent(self, r: int) -> int:
        """The extent of dimension ``r``."""
        return self.extents.extent(r)

    def rank(self) -> int:
        """Number of dimensions."""
        return self.extents.rank()

    def size(self) -> int:
        """Number of elements in the view."""
        return math.prod(self.extents.values)

    def __repr__(self) -> str:
        return f"Mdspan({self._data_handle!r}, {self._mapping!r})"


def submdspan(src: Mdspan, *args: SliceSpecifier) -> Mdspan:
    """A view of part of ``src``, one slice specifier per dimension."""
    sub = submdspan_mapping(src.mapping, *args)
    handle = src.accessor.offset(src.data_handle, sub.offset)
    return Mdspan(handle, sub.mapping, src.accessor)