"""Tests for EllipticModel."""

import math

import pytest

from vsop87 import EllipticModel, load_elliptic_model
from vsop87.body import ELLIPTIC_BODIES, Body
from vsop87.elements import Element, Elliptic, Term
from vsop87.model import evaluate_series, normalize_angle
from vsop87.store import CoefficientStore

J2000 = 2451545.0
SAMPLE_DATES = [2415020.0, 2433282.5, J2000, 2460754.5, 2488070.0, 1000000.0]


@pytest.fixture
def model(vsop_directory):
    return EllipticModel.load(vsop_directory)


def test_elements_at_epoch(model):
    elements = model.pos(J2000, Body.MERCURY)

    assert elements.A == 0.3871 + 1e-3 * math.cos(1.0) + 1e-9 * math.cos(2.0)
    assert elements.L == pytest.approx(1.0 + 2e-4 * math.cos(0.5))
    assert elements.K == pytest.approx(0.05 + 1e-5 * math.cos(1.0))
    assert elements.H == 0.2
    assert elements.Q == 0.04
    assert elements.P == pytest.approx(0.045 + 2e-7 * math.cos(1.5))


@pytest.mark.parametrize("body", ELLIPTIC_BODIES)
@pytest.mark.parametrize("jd", SAMPLE_DATES)
def test_elements_match_closed_form(model, expected_standard_elements, body, jd):
    elements = model.pos(jd, body)
    expected = expected_standard_elements(body, jd)

    for element in Element:
        assert elements.get(element) == pytest.approx(expected[element], abs=1e-9)


@pytest.mark.parametrize("body", [Body.SUN, Body.EARTH])
def test_bodies_without_series_are_zero(model, body):
    assert model.pos(2460000.5, body) == Elliptic(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)


@pytest.mark.parametrize("jd", SAMPLE_DATES + [J2000 - 1e7, J2000 - 0.5, 0.0, 5e6])
def test_mean_longitude_in_range(model, jd):
    for body in ELLIPTIC_BODIES:
        longitude = model.pos(jd, body).L
        assert 0.0 <= longitude < 2 * math.pi


def test_pos_is_deterministic(model):
    for body in ELLIPTIC_BODIES:
        first = model.pos(2451000.25, body)
        second = model.pos(2451000.25, body)
        assert first.as_tuple() == second.as_tuple()


def test_reparse_gives_identical_results(vsop_directory):
    first = load_elliptic_model(vsop_directory, 1e-7, 2455000.0)
    second = load_elliptic_model(vsop_directory, 1e-7, 2455000.0)

    for body in ELLIPTIC_BODIES:
        for jd in SAMPLE_DATES:
            assert first.pos(jd, body) == second.pos(jd, body)


def test_truncation_changes_results(vsop_directory):
    full = EllipticModel.load(vsop_directory, 0.0)
    coarse = EllipticModel.load(vsop_directory, 0.01)

    jd = 2460000.5
    full_a = full.pos(jd, Body.JUPITER).A
    coarse_a = coarse.pos(jd, Body.JUPITER).A
    t = (jd - J2000) / 365250.0
    assert coarse_a == 5.2026
    assert full_a - coarse_a == pytest.approx(
        1e-3 * math.cos(1.0 + 100.0 * t) + 1e-9 * math.cos(2.0 + 200.0 * t)
    )


def test_default_directory_from_environment(vsop_directory, monkeypatch):
    monkeypatch.setenv("VSOP87", str(vsop_directory))
    model = EllipticModel.load()
    assert model.pos(J2000, Body.NEPTUNE).H == 0.2


def test_positions(model):
    results = model.positions([J2000, 2460000.5], Body.VENUS)
    assert results == [model.pos(J2000, Body.VENUS), model.pos(2460000.5, Body.VENUS)]


def test_model_wraps_prebuilt_store():
    terms = ((Term(2.0, 0.0, 0.0),), (), (), (), (), ())
    empty = tuple(() for _ in range(6))
    series = (terms, empty, empty, empty, empty, empty)
    model = EllipticModel(CoefficientStore({Body.MARS: series}))

    assert model.pos(J2000, Body.MARS).A == 2.0
    assert model.pos(J2000, Body.VENUS).A == 0.0


def test_evaluate_series_accumulates_by_ascending_power():
    series = (
        (Term(1.0, 0.0, 0.0), Term(0.5, math.pi, 0.0)),
        (Term(3.0, 0.0, 0.0),),
        (),
        (Term(2.0, 0.0, 1.0),),
        (),
        (),
    )
    t = 0.25
    powers = [1.0, t, t * t, t * t * t, t**4, t**5]
    expected = 0.0
    expected += 1.0 * math.cos(0.0) * 1.0
    expected += 0.5 * math.cos(math.pi) * 1.0
    expected += 3.0 * math.cos(0.0) * t
    expected += 2.0 * math.cos(0.0 + 1.0 * t) * (t * t * t)

    assert evaluate_series(series, t, powers) == expected


class TestNormalizeAngle:
    def test_positive(self):
        assert normalize_angle(1.0) == 1.0
        assert normalize_angle(2 * math.pi + 1.0) == pytest.approx(1.0)

    def test_negative(self):
        assert normalize_angle(-1.0) == pytest.approx(2 * math.pi - 1.0)
        assert normalize_angle(-4 * math.pi - 1.0) == pytest.approx(2 * math.pi - 1.0)

    def test_tiny_negative_stays_below_period(self):
        value = normalize_angle(-1e-20)
        assert 0.0 <= value < 2 * math.pi

    def test_period_maps_to_zero(self):
        assert normalize_angle(2 * math.pi) == 0.0

    def test_non_finite_is_nan(self):
        assert math.isnan(normalize_angle(math.inf))
        assert math.isnan(normalize_angle(-math.inf))
        assert math.isnan(normalize_angle(math.nan))


@pytest.mark.parametrize("jd", [1e70, 1e100, -1e100])
def test_pos_at_extreme_dates_does_not_raise(jd):
    empty = tuple(() for _ in range(6))
    longitude = ((), (), (), (), (), (Term(1e-10, 1.0, 2.0),))
    semi_major_axis = ((Term(1.0, 0.0, 1e300),), (), (), (), (), ())
    series = (semi_major_axis, longitude, empty, empty, empty, empty)
    model = EllipticModel(CoefficientStore({Body.MARS: series}))

    elements = model.pos(jd, Body.MARS)

    assert math.isnan(elements.L)
    assert math.isnan(elements.A)
    assert elements.H == 0.0
