"""VSOP87 planetary theory: heliocentric elliptic elements of the planets."""

from .body import Body, ELLIPTIC_BODIES
from .elements import Element, Elliptic, Rectangular, Spherical, Term
from .errors import (
    Vsop87Error,
    ConfigurationError,
    CoefficientFileError,
    FormatError,
    CheckFileError,
)
from .model import EllipticModel, load_elliptic_model, normalize_angle
from .store import CoefficientStore, build_store

__all__ = [
    "Body",
    "ELLIPTIC_BODIES",
    "Element",
    "Elliptic",
    "Rectangular",
    "Spherical",
    "Term",
    "Vsop87Error",
    "ConfigurationError",
    "CoefficientFileError",
    "FormatError",
    "CheckFileError",
    "EllipticModel",
    "load_elliptic_model",
    "normalize_angle",
    "CoefficientStore",
    "build_store",
]

__version__ = "0.1.0"
