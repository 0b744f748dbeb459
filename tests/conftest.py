"""Shared fixtures: synthetic VSOP87 files in the published column layout."""

import math
from pathlib import Path
from typing import List, Sequence, Tuple

import pytest

from vsop87.body import ELLIPTIC_BODIES, Body
from vsop87.elements import Element

HEADER_LENGTH = 132
TERM_LENGTH = 131


def _place(buffer: List[str], column: int, text: str) -> None:
    buffer[column : column + len(text)] = list(text)


def header_line(
    body_name: str, element: int, power: int, count: int, version: int = 0
) -> str:
    """A block header record, 132 characters long."""
    buffer = [" "] * HEADER_LENGTH
    _place(buffer, 1, "VSOP87 VERSION")
    _place(buffer, 17, str(version))
    _place(buffer, 22, body_name)
    _place(buffer, 32, "VARIABLE")
    _place(buffer, 41, str(element))
    _place(buffer, 43, "(ALKHQP)")
    _place(buffer, 55, "*T**")
    _place(buffer, 59, str(power))
    _place(buffer, 60, f"{count:7d}")
    _place(buffer, 68, "TERMS")
    _place(buffer, 74, "HELIOCENTRIC DYNAMICAL ECLIPTIC AND EQUINOX J2000")
    return "".join(buffer)


def term_line(
    rank: int, element: int, power: int, amplitude: float, phase: float, frequency: float
) -> str:
    """A term record, 131 characters long; phase must be in [0, 10)."""
    line = (
        f" 0{1}{element}{power}{rank:5d}"
        + "  0" * 12
        + f"{0.0:15.11f}{0.0:18.11f}"
        + f"{amplitude:18.11f}{phase:14.11f}{frequency:20.11f}"
    )
    assert len(line) == TERM_LENGTH
    return line


Terms = Sequence[Tuple[float, float, float]]


class VsopFileBuilder:
    """Accumulates blocks and renders a coefficient file."""

    def __init__(self, body: Body):
        self.body = body
        self.lines: List[str] = []

    def block(self, element: Element, power: int, terms: Terms) -> "VsopFileBuilder":
        self.lines.append(header_line(self.body.header_name, element.value, power, len(terms)))
        for rank, (a, b, c) in enumerate(terms, start=1):
            self.lines.append(term_line(rank, element.value, power, a, b, c))
        return self

    def empty_block(self, element: Element, power: int) -> "VsopFileBuilder":
        self.lines.append(header_line(self.body.header_name, element.value, power, 0))
        return self

    def raw(self, line: str) -> "VsopFileBuilder":
        self.lines.append(line)
        return self

    def text(self) -> str:
        return "\n".join(self.lines) + "\n"

    def write(self, directory: Path) -> Path:
        path = Path(directory) / self.body.file_name
        path.write_text(self.text())
        return path


# Standard synthetic series, identical for every body except that the
# leading semi-major axis term equals the body's distance scale.
def standard_blocks(body: Body) -> List[Tuple[Element, int, Terms]]:
    return [
        (Element.A, 0, [(body.distance_scale, 0.0, 0.0), (1e-3, 1.0, 100.0), (1e-9, 2.0, 200.0)]),
        (Element.L, 0, [(1.0, 0.0, 0.0), (2e-4, 0.5, 30.0)]),
        (Element.K, 0, [(0.05, 0.0, 0.0), (1e-5, 1.0, 10.0)]),
        # L blocks interleave with the other elements
        (Element.L, 1, [(6283.0, 0.0, 0.0), (1e-6, 3.0, 50.0)]),
        (Element.H, 0, [(0.2, 0.0, 0.0)]),
        (Element.Q, 0, [(0.04, 0.0, 0.0)]),
        (Element.Q, 2, [(1e-3, 0.5, 3.0)]),
        (Element.P, 0, [(0.045, 0.0, 0.0), (2e-7, 1.5, 7.0)]),
    ]


def standard_file(body: Body) -> VsopFileBuilder:
    builder = VsopFileBuilder(body)
    for element, power, terms in standard_blocks(body):
        builder.block(element, power, terms)
    builder.empty_block(Element.A, 3)
    return builder


def expected_elements(body: Body, jd: float) -> dict:
    """Closed-form value of every element of the standard file, untruncated."""
    t = (jd - 2451545.0) / 365250.0
    values = {}
    for element in Element:
        total = 0.0
        for block_element, power, terms in standard_blocks(body):
            if block_element is element:
                for a, b, c in terms:
                    total += a * math.cos(b + c * t) * t**power
        values[element] = total
    values[Element.L] = values[Element.L] % (2 * math.pi)
    return values


@pytest.fixture
def vsop_builder():
    """The VsopFileBuilder class."""
    return VsopFileBuilder


@pytest.fixture
def vsop_lines():
    """Record formatting helpers: (header_line, term_line)."""
    return header_line, term_line


@pytest.fixture
def standard_vsop_file():
    """Factory returning the standard builder of a body."""
    return standard_file


@pytest.fixture
def expected_standard_elements():
    return expected_elements


@pytest.fixture
def vsop_directory(tmp_path):
    """Directory holding the standard coefficient file of every supported body."""
    directory = tmp_path / "vsop87"
    directory.mkdir()
    for body in ELLIPTIC_BODIES:
        standard_file(body).write(directory)
    return directory
