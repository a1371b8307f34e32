# mdview

`mdview` gives a multidimensional view over a flat, one-dimensional buffer
such as a `list`. A view pairs a buffer with a *layout mapping*. The mapping
turns a tuple of indices into a position in the buffer. You can cut sub-views
out of a view without copying any data.

The package needs only the standard library and Python 3.10 or later.

## Installing

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## A short example

```python
from mdview.extents import Extents, dextents
from mdview.slices import FULL_EXTENT
from mdview.submdspan import Mdspan, submdspan

buf = list(range(12))
view = Mdspan(buf, Extents([3, 4]))   # plain extents are laid out row-major
view[1, 2]                            # 6
view[1, 2] = 60                       # writes buf[6]

row = submdspan(view, 1, FULL_EXTENT) # keeps the row-major layout
row[2]                                # 60

col = submdspan(view, FULL_EXTENT, 2) # falls back to a strided layout
col.mapping.strides()                 # (4,)

Mdspan(buf, dextents(4, 3)).extent(0) # 4
```

## Concepts

- `Extents` (in `mdview.extents`) describes the shape of a view.
  - The first argument gives one entry per dimension. Each entry is either
    a fixed (static) extent or `DYNAMIC_EXTENT`, which stands for an extent
    given at run time.
  - The remaining arguments give either the dynamic extents only or every
    extent. They may also be passed as one list or tuple. With no values,
    the dynamic extents are zero. A fixed extent that does not match its
    given value raises `ValueError`.
  - `dextents(...)` builds extents whose dimensions are all dynamic.
  - `rank()`, `rank_dynamic()`, `extent(r)` and `static_extent(r)` report on
    the shape. The `values` and `static_extents` properties give every extent
    and the static pattern as tuples.
  - `convert(...)` returns equal extents with another static pattern. The new
    pattern must have the same rank, and any extent fixed in both patterns
    must match.
  - Two extents compare equal when their extent values are equal.
- The layout mappings in `mdview.layouts` turn indices into a buffer offset.
  - `LayoutLeftMapping(extents)` stores the first index fastest
    (column-major).
  - `LayoutRightMapping(extents)` stores the last index fastest (row-major).
  - `LayoutStrideMapping(extents, strides)` uses any non-negative strides
    you give it. This includes zero strides for broadcasting. `strides()`
    returns all of its strides.
  - Every mapping offers `stride(r)`, `required_span_size()`,
    `is_exhaustive()` and the `extents` property. You call a mapping with
    indices to get an offset. An index out of range raises `IndexError`.
- `Pointer` and `DefaultAccessor` (in `mdview.accessor`) handle buffer access.
  - A `Pointer` is a position in a mutable buffer. Two pointers are equal only
    when they hold the same buffer object at the same offset.
  - `DefaultAccessor` reads through a `Pointer` with `access`, writes with
    `store`, and moves the pointer on with `offset`.
- `Mdspan` (in `mdview.submdspan`) is the view itself.
  - It is built from a buffer or `Pointer`, a mapping or `Extents`, and an
    optional accessor.
  - You index it with `view[i, j, k]`, both to read and to assign.
  - It has `extent(r)`, `rank()` and `size()`, and the properties
    `data_handle`, `mapping`, `accessor` and `extents`.

## Slicing

`submdspan(view, *slices)` builds a sub-view. It takes exactly one slice
specifier per dimension. The slice types live in `mdview.slices`.

| Specifier | Effect |
|---|---|
| an `int`, or an `IntegralConstant` | fixes that index and removes the dimension |
| `FULL_EXTENT` (the one `FullExtent()` instance) | keeps the whole dimension |
| a `(begin, end)` pair | keeps the half-open range; when both ends are `IntegralConstant`, the new extent is static |
| `StridedSlice(offset, extent, stride)` | keeps every `stride`-th element of a range of length `extent` starting at `offset` |

Where the slices allow it, the sub-view keeps the source's left or right
layout. Otherwise the sub-view uses a `LayoutStrideMapping`.

The lower-level building blocks are also available:

- `mdview.submdspan_extents` provides `submdspan_extents`, which computes the
  new shape. It also provides the helpers `first_of`, `last_of`, `stride_of`
  and `inv_map_rank`.
- `mdview.layouts` provides `submdspan_mapping`, which returns a
  `MappingOffset`. This holds the new mapping and the offset at which the
  sub-view starts in the buffer.

## What it does not do

- There is no array type that owns its storage. You supply the buffer and
  keep it alive.
- Mappings cannot be converted from one layout kind to another.
- There are no padded layouts, and there is no accessor other than
  `DefaultAccessor`.
- There is no command-line tool.

## Running the tests

```
pytest
```