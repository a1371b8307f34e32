"""Slice specifiers used to take views of part of a multidimensional span."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class IntegralConstant:
    """An integer whose value is fixed, so it can preserve static extents."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(
                f"IntegralConstant needs an int, not {type(self.value).__name__}"
            )

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value


class FullExtent:
    """Slice specifier selecting the whole of a dimension."""

    _instance: FullExtent | None = None

    def __new__(cls) -> FullExtent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "FULL_EXTENT"


FULL_EXTENT = FullExtent()

SliceComponent = Union[int, IntegralConstant]


def _check_component(name: str, value: object) -> None:
    if isinstance(value, IntegralConstant):
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"strided slice {name} must be an int or IntegralConstant, "
            f"not {type(value).__name__}"
        )


@dataclass(frozen=True)
class StridedSlice:
    """Slice specifier with an offset, an extent and a stride."""

    offset: SliceComponent
    extent: SliceComponent
    stride: SliceComponent

    def __post_init__(self) -> None:
        _check_component("offset", self.offset)
        _check_component("extent", self.extent)
        _check_component("stride", self.stride)