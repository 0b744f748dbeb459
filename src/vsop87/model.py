"""Elliptic elements model: evaluates the VSOP87 series at a Julian date."""

import math
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from .body import Body
from .elements import MAX_POWER, Elliptic, Series
from .space_time.julian import J2000, julian_millennia_since_j2000
from .store import CoefficientStore
from . import config

TWO_PI = 2 * math.pi


def normalize_angle(x: float, period: float = TWO_PI) -> float:
    """Floor-style modulo: the result is in [0, period) for any finite x.

    A non-finite x (a series that overflowed at an extreme date) gives NaN.
    """
    if not math.isfinite(x):
        return math.nan
    r = math.fmod(x, period)
    if r < 0:
        r += period
        # A tiny negative remainder rounds up to period itself
        if r >= period:
            r = 0.0
    return r


def _time_powers(t: float) -> List[float]:
    powers = [1.0]
    for _ in range(MAX_POWER):
        powers.append(t * powers[-1])
    return powers


def evaluate_series(series: Series, t: float, powers: Sequence[float]) -> float:
    """Sum amplitude * cos(phase + frequency * t) * t**k over all slots.

    Slots are visited by ascending power and terms in stored order, adding
    each product to a single running sum.
    """
    total = 0.0
    for power, terms in enumerate(series):
        tk = powers[power]
        for amplitude, phase, frequency in terms:
            angle = phase + frequency * t
            cos = math.cos(angle) if math.isfinite(angle) else math.nan
            total += amplitude * cos * tk
    return total


class EllipticModel:
    """Heliocentric elliptic elements of the planets from VSOP87.

    Example:
        model = EllipticModel.load("data/vsop87", precision=1e-8)
        elements = model.pos(2451545.0, Body.MARS)
        print(elements.A, elements.L)
    """

    def __init__(self, store: CoefficientStore):
        self.store = store

    @classmethod
    def load(
        cls,
        directory: Optional[Union[str, Path]] = None,
        precision: float = 0.0,
        reference_date: float = J2000,
    ) -> "EllipticModel":
        """Read the VSOP87 files of a directory and build a model.

        Args:
            directory: Directory with the VSOP87.<ext> files. Defaults to
                the VSOP87 environment variable, then ./data/vsop87.
            precision: Requested precision in [0, 0.01]; 0 keeps every term
            reference_date: Julian date used only to choose which terms the
                precision requires; it does not have to be exact.

        Raises:
            ConfigurationError: If precision is out of range
            CoefficientFileError: If a file is missing or unreadable
            FormatError: If a file is malformed
        """
        if directory is None:
            directory = config.get_data_dir()
        return cls(CoefficientStore.build(directory, precision, reference_date))

    def pos(self, date: float, body: Body) -> Elliptic:
        """Compute the elliptic elements of a body at a Julian date (TDB).

        Bodies without series (the Sun, the Earth itself) yield all zeros.
        """
        t = julian_millennia_since_j2000(date)
        powers = _time_powers(t)
        series = self.store.series(body)

        return Elliptic(
            A=evaluate_series(series[0], t, powers),
            L=normalize_angle(evaluate_series(series[1], t, powers)),
            K=evaluate_series(series[2], t, powers),
            H=evaluate_series(series[3], t, powers),
            Q=evaluate_series(series[4], t, powers),
            P=evaluate_series(series[5], t, powers),
        )

    def positions(self, dates: Iterable[float], body: Body) -> List[Elliptic]:
        return [self.pos(date, body) for date in dates]


def load_elliptic_model(
    directory: Optional[Union[str, Path]] = None,
    precision: float = 0.0,
    reference_date: float = J2000,
) -> EllipticModel:
    """Build an EllipticModel; see EllipticModel.load."""
    return EllipticModel.load(directory, precision, reference_date)
