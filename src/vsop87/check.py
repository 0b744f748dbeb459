"""Verification of a model against the vsop87.chk reference values."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from .body import check_file_name
from .elements import Element
from .errors import CoefficientFileError
from .logging import get_logger
from .model import EllipticModel
from .parsers.check_parser import CheckEntry, CheckFileParser

logger = get_logger(__name__)

# Reference values are printed with 10 decimals
DEFAULT_TOLERANCE = 1e-10


def format_check_value(x: float) -> str:
    """Render a value the way vsop87.chk prints it: %.10f without leading zero."""
    s = f"{x:.10f}"
    if s.startswith("0"):
        return s[1:]
    if s.startswith("-0"):
        return "-" + s[2:]
    return s


def load_check_entries(path: Union[str, Path]) -> List[CheckEntry]:
    """Read and parse a vsop87.chk file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="latin-1")
    except OSError as e:
        raise CoefficientFileError(path, e.strerror or str(e)) from e
    return CheckFileParser(text, path).parse()


@dataclass(frozen=True)
class CheckMismatch:
    entry: CheckEntry
    element: Element
    expected: float
    actual: float

    def __str__(self) -> str:
        # Name the body as vsop87.chk does
        name = check_file_name(self.entry.body) or self.entry.body.name
        return (
            f"line {self.entry.line_number}: {name} "
            f"JD{self.entry.julian_date} {self.element.name.lower()}: expected "
            f"{format_check_value(self.expected)}, got {format_check_value(self.actual)}"
        )


@dataclass
class CheckReport:
    """Outcome of comparing a model with a set of check entries."""

    checked: int = 0
    mismatches: List[CheckMismatch] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.mismatches


def verify(
    model: EllipticModel,
    entries: List[CheckEntry],
    tolerance: float = DEFAULT_TOLERANCE,
) -> CheckReport:
    """Compare model output with every entry's expected elements.

    Args:
        model: Model to verify
        entries: Parsed check entries
        tolerance: Maximum absolute difference accepted per element
    """
    report = CheckReport()
    for entry in entries:
        actual = model.pos(entry.julian_date, entry.body)
        for element in Element:
            expected_value = entry.expected.get(element)
            actual_value = actual.get(element)
            report.checked += 1
            if abs(actual_value - expected_value) > tolerance:
                mismatch = CheckMismatch(entry, element, expected_value, actual_value)
                logger.info(str(mismatch))
                report.mismatches.append(mismatch)
    return report


def verify_check_file(
    model: EllipticModel,
    path: Union[str, Path],
    tolerance: Optional[float] = None,
) -> CheckReport:
    """Verify a model against a vsop87.chk file."""
    entries = load_check_entries(path)
    logger.info(f"Verifying {len(entries)} entries from {path}")
    return verify(model, entries, DEFAULT_TOLERANCE if tolerance is None else tolerance)
