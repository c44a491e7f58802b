"""Tests for the data structures (core/models.py).

Value types are frozen dataclasses — these tests verify immutability,
equality and formatting.  The accumulator and bound accessor are tested
for their call-through behaviour.
"""

from __future__ import annotations

import dataclasses

import pytest

from libext.core.models import (
    BoundProperty,
    Colour,
    Dimension2D,
    Dimension3D,
    Pair,
    Point2D,
    Point3D,
    StringBuffer,
)


# ---------------------------------------------------------------------------
# Pair
# ---------------------------------------------------------------------------

class TestPair:
    def test_fields_accessible(self) -> None:
        p = Pair(1, "one")
        assert p.first == 1
        assert p.second == "one"

    def test_frozen(self) -> None:
        p = Pair(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.first = 3  # type: ignore[misc]

    def test_unpacking(self) -> None:
        a, b = Pair("x", [1])
        assert a == "x"
        assert b == [1]

    def test_equality(self) -> None:
        assert Pair(1, 2) == Pair(1, 2)
        assert Pair(1, 2) != Pair(2, 1)


# ---------------------------------------------------------------------------
# StringBuffer
# ---------------------------------------------------------------------------

class TestStringBuffer:
    def test_concatenates_in_append_order(self) -> None:
        buf = StringBuffer()
        buf.append("a")
        buf.append("b")
        assert buf.to_string() == "ab"

    def test_materialize_is_idempotent(self) -> None:
        buf = StringBuffer()
        buf.append("a")
        buf.append("b")
        assert buf.to_string() == buf.to_string() == "ab"
        assert buf.fragments == ["a", "b"]

    def test_str_matches_to_string(self) -> None:
        buf = StringBuffer()
        buf.append("hello ")
        buf.append("world")
        assert str(buf) == "hello world"

    def test_empty_buffer(self) -> None:
        assert StringBuffer().to_string() == ""

    def test_buffers_do_not_share_state(self) -> None:
        a = StringBuffer()
        b = StringBuffer()
        a.append("x")
        assert b.to_string() == ""


# ---------------------------------------------------------------------------
# BoundProperty
# ---------------------------------------------------------------------------

class _Target:
    def __init__(self) -> None:
        self.value = 1


class TestBoundProperty:
    def test_get_and_set_call_through(self) -> None:
        store = {"v": 10}
        prop: BoundProperty[int] = BoundProperty(
            lambda: store["v"],
            lambda value: store.__setitem__("v", value),
        )
        assert prop.get() == 10
        prop.set(11)
        assert store["v"] == 11
        assert prop.get() == 11

    def test_bind_to_attribute(self) -> None:
        target = _Target()
        prop = BoundProperty.bind(target, "value")
        assert prop.get() == 1
        prop.set(5)
        assert target.value == 5

    def test_bind_sees_external_changes(self) -> None:
        target = _Target()
        prop = BoundProperty.bind(target, "value")
        target.value = 42
        assert prop.get() == 42

    def test_getter_error_propagates_unchanged(self) -> None:
        def boom() -> int:
            raise KeyError("gone")

        prop: BoundProperty[int] = BoundProperty(boom, lambda _: None)
        with pytest.raises(KeyError, match="gone"):
            prop.get()

    def test_setter_error_propagates_unchanged(self) -> None:
        def reject(value: int) -> None:
            raise ValueError(f"bad {value}")

        prop: BoundProperty[int] = BoundProperty(lambda: 0, reject)
        with pytest.raises(ValueError, match="bad 3"):
            prop.set(3)

    def test_bind_missing_attribute_fails_on_get(self) -> None:
        prop = BoundProperty.bind(_Target(), "missing")
        with pytest.raises(AttributeError):
            prop.get()


# ---------------------------------------------------------------------------
# Colour
# ---------------------------------------------------------------------------

class TestColour:
    @pytest.mark.parametrize(
        ("rgb", "expected"),
        [
            ((255, 0, 10), "#FF000A"),
            ((0, 0, 0), "#000000"),
            ((255, 255, 255), "#FFFFFF"),
            ((18, 52, 86), "#123456"),
        ],
    )
    def test_to_hex(self, rgb: tuple[int, int, int], expected: str) -> None:
        assert Colour(*rgb).to_hex() == expected

    def test_whole_float_channels(self) -> None:
        assert Colour(255.0, 0, 10.0).to_hex() == "#FF000A"  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Colour(1, 2, 3).r = 9  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

class TestGeometry:
    def test_point2d_str(self) -> None:
        assert str(Point2D(1, 2)) == "{x: 1, y: 2}"

    def test_point3d_str(self) -> None:
        assert str(Point3D(1, 2.5, -3)) == "{x: 1, y: 2.5, z: -3}"

    def test_dimension2d_str(self) -> None:
        assert str(Dimension2D(800, 600)) == "{width: 800, height: 600}"

    def test_dimension3d_str(self) -> None:
        assert str(Dimension3D(1, 2, 3)) == "{width: 1, height: 2, depth: 3}"

    def test_equality(self) -> None:
        assert Point2D(1, 2) == Point2D(1, 2)
        assert Dimension2D(1, 2) != Dimension2D(2, 1)

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Point2D(0, 0).x = 1  # type: ignore[misc]
