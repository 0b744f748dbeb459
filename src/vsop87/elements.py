"""Data model for VSOP87 series and the values computed from them."""

from dataclasses import astuple, dataclass
from enum import Enum
from typing import NamedTuple, Tuple

# Number of time-power slots (T^0 .. T^5) in every series
MAX_POWER = 5
N_POWERS = MAX_POWER + 1


class Element(Enum):
    """Elliptic elements, valued by their index in header column 41."""

    A = 1  # semi-major axis
    L = 2  # mean longitude
    K = 3  # e*cos(perihelion longitude)
    H = 4  # e*sin(perihelion longitude)
    Q = 5  # sin(i/2)*cos(ascending node longitude)
    P = 6  # sin(i/2)*sin(ascending node longitude)

    @property
    def slot(self) -> int:
        return self.value - 1


N_ELEMENTS = len(Element)


class Term(NamedTuple):
    """One addend: amplitude * cos(phase + frequency * T)."""

    amplitude: float
    phase: float
    frequency: float


# Terms per time power; index k multiplies by T**k
Series = Tuple[Tuple[Term, ...], ...]
# One Series per element, in Element order
ElementSeries = Tuple[Series, ...]

EMPTY_SERIES: Series = tuple(() for _ in range(N_POWERS))
EMPTY_ELEMENT_SERIES: ElementSeries = tuple(EMPTY_SERIES for _ in range(N_ELEMENTS))


@dataclass(frozen=True)
class Elliptic:
    """Heliocentric elliptic elements, J2000 dynamical ecliptic and equinox.

    Attributes:
        A: semi-major axis (au)
        L: mean longitude (rad), in [0, 2*pi)
        K: e*cos(pi), e eccentricity, pi perihelion longitude
        H: e*sin(pi)
        Q: sin(i/2)*cos(omega), i inclination, omega ascending node longitude
        P: sin(i/2)*sin(omega)
    """

    A: float = 0.0
    L: float = 0.0
    K: float = 0.0
    H: float = 0.0
    Q: float = 0.0
    P: float = 0.0

    def get(self, element: Element) -> float:
        return getattr(self, element.name)

    def as_tuple(self) -> Tuple[float, ...]:
        return astuple(self)


@dataclass(frozen=True)
class Rectangular:
    """Heliocentric rectangular coordinates (au, au/day)."""

    px: float = 0.0
    py: float = 0.0
    pz: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    vz: float = 0.0


@dataclass(frozen=True)
class Spherical:
    """Heliocentric spherical coordinates (rad, au, and their rates per day)."""

    lon: float = 0.0
    lat: float = 0.0
    r: float = 0.0
    vlon: float = 0.0
    vlat: float = 0.0
    vr: float = 0.0
