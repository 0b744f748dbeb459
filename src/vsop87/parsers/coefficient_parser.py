"""Parser for VSOP87 coefficient files (main version, elliptic elements).

A coefficient file is a sequence of blocks. Each block starts with a header
record naming the element (a, l, k, h, q, p), the power of time the block's
terms are multiplied by, and the number of term records that follow.
Blocks for different elements may appear in any order.

Terms below the precision-dependent amplitude threshold are dropped while
reading: the files list terms by decreasing amplitude, so the first term
under the threshold ends the block.
"""

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from ..body import Body
from ..elements import MAX_POWER, Element, Term
from ..errors import ConfigurationError, FormatError
from ..logging import get_logger
from ..space_time.julian import DAYS_PER_JULIAN_MILLENNIUM, J2000
from .layout import HEADER_LAYOUT, TERM_LAYOUT

logger = get_logger(__name__)

MAX_PRECISION = 0.01
# Version digit of the main (elliptic elements) VSOP87 version
ELLIPTIC_VERSION = 0


def validate_precision(precision: float) -> float:
    """Return precision as a float, or raise ConfigurationError.

    Raises:
        ConfigurationError: If precision lies outside [0, 0.01]
    """
    precision = float(precision)
    if not 0 <= precision <= MAX_PRECISION:
        raise ConfigurationError(
            f"Invalid precision {precision}: must be between 0 and {MAX_PRECISION}"
        )
    return precision


class TruncationPolicy:
    """Amplitude thresholds for a requested precision around a reference date.

    The threshold for a block is

        p = precision / 10 / (q - 2) / (d0 + power * dl * 1e-4 + 1e-50)

    with q = max(3, -log10(precision)), d0 = |T|**power for the elapsed time
    T of the reference date, and dl the d0 of the previous block in the
    same file. For the semi-major axis p is scaled by the body's nominal
    distance. The expression is evaluated in exactly this order because the
    published check values depend on which terms it keeps.
    """

    def __init__(self, precision: float, reference_date: float = J2000):
        self.precision = validate_precision(precision)
        self.reference_date = reference_date
        self.q = max(3.0, -math.log10(self.precision + 1e-50))

        t = abs(reference_date - J2000) / DAYS_PER_JULIAN_MILLENNIUM
        powers = [1.0]
        for _ in range(MAX_POWER):
            powers.append(t * powers[-1])
        self.time_powers: Tuple[float, ...] = tuple(powers)

    def threshold(
        self, body: Body, element: Element, power: int, previous: float
    ) -> float:
        """Minimum amplitude kept in a block.

        Args:
            body: Body the file belongs to
            element: Element of the block
            power: Power of time of the block
            previous: time_powers entry of the previous block in the file,
                0 for the first block
        """
        d0 = self.time_powers[power]
        p = self.precision / 10 / (self.q - 2) / (d0 + power * previous * 1e-4 + 1e-50)
        if element is Element.A:
            p *= body.distance_scale
        return p


@dataclass(frozen=True)
class BlockHeader:
    line_number: int
    element: Element
    power: int
    count: int


@dataclass(frozen=True)
class Block:
    """A parsed block: the terms kept and how many were dropped."""

    header: BlockHeader
    terms: Tuple[Term, ...]
    threshold: float

    @property
    def dropped(self) -> int:
        return self.header.count - len(self.terms)


class CoefficientFileParser:
    """Parser for one VSOP87 coefficient file.

    Example:
        policy = TruncationPolicy(1e-7, 2451545.0)
        parser = CoefficientFileParser(text, Body.MARS, policy)
        for block in parser.blocks():
            print(block.header.element, block.header.power, len(block.terms))
    """

    def __init__(
        self,
        text: str,
        body: Body,
        policy: TruncationPolicy,
        path: Optional[Union[str, Path]] = None,
    ):
        """Initialize parser.

        Args:
            text: Full content of the coefficient file
            body: Body the file is expected to describe
            policy: Truncation policy applied to every block
            path: File path, used in error messages only
        """
        self.text = text
        self.body = body
        self.policy = policy
        self.path = path

    def _error(self, line_number: int, reason: str) -> FormatError:
        return FormatError(line_number, reason, self.path)

    def _parse_header(self, line: str, line_number: int) -> BlockHeader:
        try:
            fields = HEADER_LAYOUT.parse(line)
        except ValueError as e:
            raise self._error(line_number, str(e)) from None

        if fields["version"] != ELLIPTIC_VERSION:
            raise self._error(
                line_number,
                f"expected version {ELLIPTIC_VERSION}, found {fields['version']}",
            )
        if fields["body"] != self.body.header_name:
            raise self._error(
                line_number,
                f"expected body {self.body.header_name!r}, found {fields['body']!r}",
            )
        if not 1 <= fields["element"] <= len(Element):
            raise self._error(line_number, f"invalid element index {fields['element']}")
        if fields["power"] > MAX_POWER:
            raise self._error(line_number, f"invalid power of time {fields['power']}")
        if fields["count"] < 0:
            raise self._error(line_number, f"invalid term count {fields['count']}")

        return BlockHeader(
            line_number=line_number,
            element=Element(fields["element"]),
            power=fields["power"],
            count=fields["count"],
        )

    def _parse_terms(
        self, lines: List[str], start: int, count: int, threshold: float
    ) -> Tuple[Term, ...]:
        """Read up to count term records starting at index start."""
        amplitude_field = TERM_LAYOUT["amplitude"]
        phase_field = TERM_LAYOUT["phase"]
        frequency_field = TERM_LAYOUT["frequency"]

        terms = []
        for index in range(start, start + count):
            line = lines[index]
            try:
                amplitude = amplitude_field.parse(line)
                if abs(amplitude) < threshold:
                    break
                if not TERM_LAYOUT.fits(line):
                    raise ValueError(
                        f"term record has {len(line)} characters, "
                        f"expected at least {TERM_LAYOUT.min_length}"
                    )
                phase = phase_field.parse(line)
                frequency = frequency_field.parse(line)
            except ValueError as e:
                raise self._error(index + 1, str(e)) from None
            terms.append(Term(amplitude, phase, frequency))
        return tuple(terms)

    def blocks(self) -> Iterator[Block]:
        """Yield the blocks of the file in file order.

        Parsing stops at the first header line too short to be a record.

        Raises:
            FormatError: On any malformed record or a truncated final block
        """
        lines = self.text.splitlines()
        n = 0
        previous = 0.0

        while n < len(lines):
            line = lines[n]
            if not HEADER_LAYOUT.fits(line):
                break

            header = self._parse_header(line, n + 1)
            if header.count == 0:
                n += 1
                continue

            remaining = len(lines) - n - 1
            if header.count > remaining:
                raise self._error(
                    header.line_number,
                    f"unexpected end of file: block declares {header.count} terms, "
                    f"only {remaining} lines follow",
                )

            threshold = self.policy.threshold(
                self.body, header.element, header.power, previous
            )
            previous = self.policy.time_powers[header.power]

            terms = self._parse_terms(lines, n + 1, header.count, threshold)
            block = Block(header=header, terms=terms, threshold=threshold)
            if block.dropped:
                logger.debug(
                    f"{self.body.name} {header.element.name} T^{header.power}: "
                    f"kept {len(terms)} of {header.count} terms (threshold {threshold:.3e})"
                )
            yield block

            n += header.count + 1

    def parse(self) -> List[Block]:
        """Parse the whole file into a list of blocks."""
        return list(self.blocks())
