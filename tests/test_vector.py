from __future__ import annotations

import copy

import numpy as np
import pytest

import pyvec2
from pyvec2 import Vec2ArgumentError, Vec2Error, Vector2, is_vector


def test_defaults():
    assert Vector2().unpack() == (0, 0)
    assert Vector2(3).unpack() == (3, 0)
    assert Vector2(None, 4).unpack() == (0, 4)
    assert Vector2.new(1, 2).unpack() == (1, 2)
    assert pyvec2.new(5).unpack() == (5, 0)


@pytest.mark.parametrize("x, y", [("1", 2), (1, [2]), (True, 0), (0, False)])
def test_invalid_components(x, y):
    with pytest.raises(Vec2ArgumentError, match="<number>"):
        Vector2(x, y)


def test_numpy_components():
    v = Vector2(np.float64(1.5), np.int64(2))
    assert is_vector(v)
    assert v == Vector2(1.5, 2)


def test_is_vector():
    assert is_vector(Vector2(1, 2))
    assert pyvec2.isVector(Vector2())
    assert Vector2.is_vector(Vector2())
    assert not is_vector((1, 2))
    assert not is_vector([1, 2])
    assert is_vector(Vector2(*(1, 2)))
    assert not is_vector(None)
    assert not is_vector(3)

    v = Vector2(1, 2)
    v.x = "oops"
    assert not is_vector(v)


def test_clone():
    v = Vector2(1, 2)
    c = v.clone()
    assert c == v
    assert c is not v
    c.x = 7
    assert v.x == 1

    c = copy.copy(v)
    assert c == v and c is not v


def test_unpack_and_iter():
    v = Vector2(1.5, -2)
    assert v.unpack() == (1.5, -2)
    x, y = v
    assert (x, y) == (1.5, -2)
    assert list(v) == [1.5, -2]


@pytest.mark.parametrize(
    "v, expected",
    [
        (Vector2(1, 2), "(1,2)"),
        (Vector2(1.0, 2.0), "(1,2)"),
        (Vector2(1.5, -0.25), "(1.5,-0.25)"),
        (Vector2(0.1, 0), "(0.1,0)"),
        (Vector2(1e20, 3), "(1e+20,3)"),
    ],
)
def test_to_string(v, expected):
    assert str(v) == expected
    assert v.to_string() == expected
    assert v.toString() == expected


def test_repr():
    assert repr(Vector2(1, 2.5)) == "Vector2(1, 2.5)"


def test_negate():
    v = -Vector2(1, -2)
    assert v.unpack() == (-1, 2)


def test_unhashable():
    with pytest.raises(TypeError):
        hash(Vector2(1, 2))


def test_error_hierarchy():
    assert issubclass(Vec2ArgumentError, TypeError)
    assert issubclass(Vec2ArgumentError, Vec2Error)


def test_camel_case_aliases():
    assert Vector2.isVector is Vector2.is_vector
    assert Vector2.toString is Vector2.to_string
    assert Vector2.normalizeInPlace is Vector2.normalize_inplace
    assert Vector2.rotateInPlace is Vector2.rotate_inplace
    assert Vector2.trimInPlace is Vector2.trim_inplace
    assert Vector2.projectOn is Vector2.project_on
    assert Vector2.mirrorOn is Vector2.mirror_on
    assert Vector2.angleTo is Vector2.angle_to


def test_zero_is_shared(shared_zero):
    assert shared_zero == Vector2(0, 0)
    assert Vector2.zero is pyvec2.zero

    shared_zero.x = 1
    shared_zero.rotate_inplace(np.pi / 2)
    assert Vector2.zero.x == pytest.approx(0, abs=1e-12)
    assert Vector2.zero.y == pytest.approx(1)


def test_version():
    assert pyvec2.__version__.count(".") == 2
