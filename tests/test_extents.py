import pytest

from mdview.extents import DYNAMIC_EXTENT, Extents, dextents

dyn = DYNAMIC_EXTENT


def test_all_static_extents():
    statics = (3, 4, 5)
    e = Extents(statics)
    assert e.rank() == len(statics)
    assert e.rank_dynamic() == 0
    assert [e.extent(r) for r in range(e.rank())] == list(statics)
    assert [e.static_extent(r) for r in range(e.rank())] == list(statics)


def test_dynamic_values_only():
    e = Extents((3, dyn, 5), 4)
    assert e.rank_dynamic() == 1
    assert e.extent(1) == 4
    assert e.static_extent(1) is DYNAMIC_EXTENT
    assert e.values == (3, 4, 5)


def test_all_values_given():
    e = Extents((3, dyn, 5), 3, 4, 5)
    assert e == Extents((3, dyn, 5), 4)


def test_values_as_sequence():
    assert Extents((dyn, dyn), [16, 32]) == Extents((dyn, dyn), 16, 32)
    assert Extents((dyn, dyn), (16, 32)).values == (16, 32)


def test_default_dynamic_values_are_zero():
    e = Extents((dyn, 7, dyn))
    assert e.values == (0, 7, 0)


def test_rank_zero():
    e = Extents(())
    assert e.rank() == 0
    assert e.rank_dynamic() == 0
    assert e == Extents([])


def test_static_value_mismatch_raises():
    with pytest.raises(ValueError):
        Extents((3, dyn, 5), 3, 4, 6)


def test_wrong_value_count_raises():
    with pytest.raises(ValueError):
        Extents((dyn, dyn, dyn), 3, 4)


def test_negative_extent_raises():
    with pytest.raises(ValueError):
        Extents((dyn,), -1)
    with pytest.raises(ValueError):
        Extents((-2,))


def test_non_integer_extent_raises():
    with pytest.raises(TypeError):
        Extents((dyn,), 1.5)
    with pytest.raises(TypeError):
        Extents((dyn,), True)


def test_extent_index_out_of_range():
    e = Extents((3, 4))
    with pytest.raises(IndexError):
        e.extent(2)
    with pytest.raises(IndexError):
        e.static_extent(-1)


def test_equality_ignores_static_pattern():
    assert Extents((16, 32)) == Extents((dyn, dyn), 16, 32)
    assert Extents((16, 32)) != Extents((16, 64))
    assert Extents((16, 32)) != Extents((16, 32, 1))


def test_equal_extents_hash_equal():
    assert hash(Extents((16, 32))) == hash(dextents(16, 32))


def test_dextents():
    e = dextents(16, 32)
    assert e.rank_dynamic() == e.rank()
    assert e.values == (16, 32)
    assert e.static_extents == (dyn, dyn)
    assert dextents([3, 4, 5]) == Extents((3, 4, 5))


def test_convert_to_dynamic_and_back():
    e = Extents((3, 4, 5))
    d = e.convert((dyn, dyn, dyn))
    assert d == e
    assert d.static_extents == (dyn, dyn, dyn)
    back = d.convert((3, 4, 5))
    assert back.static_extents == (3, 4, 5)
    assert back == e


def test_convert_checks_runtime_value():
    with pytest.raises(ValueError):
        dextents(3, 4).convert((3, 5))


def test_convert_incompatible_static_raises():
    with pytest.raises(ValueError):
        Extents((3, 4)).convert((3, 5))


def test_convert_rank_mismatch_raises():
    with pytest.raises(ValueError):
        dextents(3, 4).convert((dyn, dyn, 3))


def test_iteration_and_len():
    e = Extents((3, dyn, 5), 4)
    assert list(e) == [3, 4, 5]
    assert len(e) == e.rank()