"""Tests for the element data types."""

import dataclasses

import pytest

from vsop87.elements import (
    EMPTY_ELEMENT_SERIES,
    N_POWERS,
    Element,
    Elliptic,
    Rectangular,
    Spherical,
    Term,
)


def test_element_slots_follow_header_index():
    assert [e.name for e in Element] == ["A", "L", "K", "H", "Q", "P"]
    assert [e.slot for e in Element] == [0, 1, 2, 3, 4, 5]
    assert Element(4) is Element.H


def test_elliptic_accessors():
    elements = Elliptic(A=1.0, L=2.0, K=3.0, H=4.0, Q=5.0, P=6.0)
    assert elements.get(Element.Q) == 5.0
    assert elements.as_tuple() == (1.0, 2.0, 3.0, 4.0, 5.0, 6.0)


def test_elliptic_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Elliptic().A = 1.0


def test_term_fields():
    term = Term(0.5, 1.0, 2.0)
    assert (term.amplitude, term.phase, term.frequency) == (0.5, 1.0, 2.0)


def test_empty_series_shape():
    assert len(EMPTY_ELEMENT_SERIES) == len(Element)
    assert all(len(series) == N_POWERS for series in EMPTY_ELEMENT_SERIES)


def test_coordinate_shapes():
    assert [f.name for f in dataclasses.fields(Rectangular)] == ["px", "py", "pz", "vx", "vy", "vz"]
    assert [f.name for f in dataclasses.fields(Spherical)] == ["lon", "lat", "r", "vlon", "vlat", "vr"]
    assert Rectangular(px=1.0).px == 1.0
    assert Spherical(r=5.2).r == 5.2
