"""Coefficient store: the truncated VSOP87 series of every supported body."""

from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .body import ELLIPTIC_BODIES, Body
from .elements import (
    EMPTY_ELEMENT_SERIES,
    N_ELEMENTS,
    N_POWERS,
    Element,
    ElementSeries,
    Term,
)
from .errors import CoefficientFileError
from .logging import get_logger
from .parsers.coefficient_parser import (
    CoefficientFileParser,
    TruncationPolicy,
    validate_precision,
)
from .space_time.julian import J2000

logger = get_logger(__name__)


def read_coefficient_file(path: Union[str, Path]) -> str:
    """Read a coefficient file, raising CoefficientFileError on failure."""
    path = Path(path)
    try:
        return path.read_text(encoding="latin-1")
    except OSError as e:
        logger.error(f"Cannot read coefficient file {path}: {e}")
        raise CoefficientFileError(path, e.strerror or str(e)) from e


def load_element_series(
    path: Union[str, Path], body: Body, policy: TruncationPolicy
) -> ElementSeries:
    """Parse one coefficient file into the six truncated series of a body.

    Args:
        path: Path of the body's VSOP87.<ext> file
        body: Body the file describes
        policy: Truncation policy for the requested precision

    Returns:
        Six series in Element order; missing blocks are empty slots
    """
    text = read_coefficient_file(path)
    slots: List[List[Tuple[Term, ...]]] = [
        [() for _ in range(N_POWERS)] for _ in range(N_ELEMENTS)
    ]

    kept = total = 0
    for block in CoefficientFileParser(text, body, policy, path=path).blocks():
        header = block.header
        if slots[header.element.slot][header.power]:
            logger.warning(
                f"{path}, line {header.line_number}: duplicate block for "
                f"{header.element.name} T^{header.power} replaces the earlier one"
            )
        slots[header.element.slot][header.power] = block.terms
        kept += len(block.terms)
        total += header.count

    logger.debug(f"Loaded {path}: {kept} of {total} terms kept")
    return tuple(tuple(series) for series in slots)


class CoefficientStore:
    """Immutable mapping from body to its six truncated series.

    Built once, then shared read-only by any number of queries.
    """

    def __init__(
        self,
        series: Mapping[Body, ElementSeries],
        precision: float = 0.0,
        reference_date: float = J2000,
    ):
        self._series = MappingProxyType(dict(series))
        self.precision = precision
        self.reference_date = reference_date

    @classmethod
    def build(
        cls,
        directory: Union[str, Path],
        precision: float = 0.0,
        reference_date: float = J2000,
        bodies: Iterable[Body] = ELLIPTIC_BODIES,
    ) -> "CoefficientStore":
        """Parse the coefficient files of all bodies in a directory.

        Args:
            directory: Directory holding one VSOP87.<ext> file per body
            precision: Requested precision in [0, 0.01]; 0 keeps every term
            reference_date: Julian date around which the precision should
                hold. Only affects which terms are kept.
            bodies: Bodies to load

        Raises:
            ConfigurationError: If precision is out of range (before any I/O)
            CoefficientFileError: If a coefficient file cannot be read
            FormatError: If a coefficient file is malformed
        """
        precision = validate_precision(precision)
        policy = TruncationPolicy(precision, reference_date)
        directory = Path(directory)

        series: Dict[Body, ElementSeries] = {}
        for body in bodies:
            series[body] = load_element_series(directory / body.file_name, body, policy)

        logger.info(
            f"Loaded VSOP87 series for {len(series)} bodies from {directory} "
            f"(precision {precision}, reference JD {reference_date})"
        )
        return cls(series, precision=precision, reference_date=reference_date)

    @property
    def bodies(self) -> Tuple[Body, ...]:
        return tuple(self._series)

    def series(self, body: Body) -> ElementSeries:
        """Series of a body; bodies without coefficients get empty series."""
        return self._series.get(body, EMPTY_ELEMENT_SERIES)

    def terms(self, body: Body, element: Element, power: int) -> Tuple[Term, ...]:
        return self.series(body)[element.slot][power]

    def term_count(self, body: Optional[Body] = None) -> int:
        """Number of stored terms for one body, or for all bodies."""
        bodies = self.bodies if body is None else (body,)
        return sum(
            len(terms)
            for b in bodies
            for element_series in self.series(b)
            for terms in element_series
        )

    def __contains__(self, body: object) -> bool:
        return body in self._series


def build_store(
    directory: Union[str, Path],
    precision: float = 0.0,
    reference_date: float = J2000,
) -> CoefficientStore:
    """Build a CoefficientStore for the eight supported bodies."""
    return CoefficientStore.build(directory, precision, reference_date)
