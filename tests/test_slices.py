import operator

import pytest

from mdview.slices import FULL_EXTENT, FullExtent, IntegralConstant, StridedSlice


def test_integral_constant_int_and_index():
    c = IntegralConstant(3)
    assert int(c) == 3
    assert operator.index(c) == 3
    assert list(range(5))[c] == 3


def test_integral_constant_equality():
    assert IntegralConstant(1) == IntegralConstant(1)
    assert IntegralConstant(1) != IntegralConstant(3)
    assert hash(IntegralConstant(4)) == hash(IntegralConstant(4))


def test_integral_constant_rejects_non_int():
    with pytest.raises(TypeError):
        IntegralConstant(1.0)
    with pytest.raises(TypeError):
        IntegralConstant(True)


def test_full_extent_is_singleton():
    assert FullExtent() is FULL_EXTENT
    assert FullExtent() == FULL_EXTENT


def test_strided_slice_fields():
    s = StridedSlice(1, 3, 2)
    assert (s.offset, s.extent, s.stride) == (1, 3, 2)


def test_strided_slice_with_constants():
    s = StridedSlice(IntegralConstant(1), IntegralConstant(3), 2)
    assert s.offset == IntegralConstant(1)
    assert int(s.extent) == 3


def test_strided_slice_is_immutable():
    s = StridedSlice(0, 4, 1)
    with pytest.raises(AttributeError):
        s.offset = 2
    assert (s.offset, s.extent, s.stride) == (0, 4, 1)


@pytest.mark.parametrize(
    "args",
    [(1.0, 2, 1), (0, "4", 1), (0, 4, None), (True, 4, 1)],
)
def test_strided_slice_rejects_non_integral(args):
    with pytest.raises(TypeError):
        StridedSlice(*args)