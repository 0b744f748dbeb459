"""Fixed-column record layouts of the VSOP87 distribution files.

Every field is described by a FieldSpec: a name, a half-open character range
and a kind that says how the raw slice becomes a value. Keeping the columns
in tables makes the file format auditable in one place and lets the parsers
stay free of slicing arithmetic.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple


class FieldKind(Enum):
    """How a raw fixed-width slice is converted."""

    TEXT = "text"  # returned as-is, padding included
    DIGIT = "digit"  # exactly one character 0-9
    INT = "int"  # surrounding whitespace trimmed
    FLOAT = "float"  # surrounding whitespace trimmed
    FIXED_FLOAT = "fixed_float"  # parsed from the full slice, no trimming


@dataclass(frozen=True)
class FieldSpec:
    """One field of a fixed-width record."""

    name: str
    start: int
    end: int
    kind: FieldKind

    @property
    def width(self) -> int:
        return self.end - self.start

    def raw(self, line: str) -> str:
        return line[self.start : self.end]

    def parse(self, line: str) -> Any:
        """Extract and convert this field from a record.

        Raises:
            ValueError: If the line is too short for the field or the
                slice does not convert to the field's kind
        """
        raw = self.raw(line)
        if len(raw) != self.width:
            raise ValueError(
                f"{self.name} field (columns {self.start}-{self.end}) is truncated"
            )

        if self.kind is FieldKind.TEXT:
            return raw
        if self.kind is FieldKind.DIGIT:
            if raw not in "0123456789":
                raise ValueError(f"{self.name} field must be a digit, found {raw!r}")
            return int(raw)
        try:
            if self.kind is FieldKind.INT:
                return int(raw.strip())
            if self.kind is FieldKind.FLOAT:
                return float(raw.strip())
            return float(raw)
        except ValueError:
            raise ValueError(f"invalid {self.name} field {raw!r}") from None


class RecordLayout:
    """An ordered set of fields making up one kind of record."""

    def __init__(self, name: str, min_length: int, fields: Tuple[FieldSpec, ...]):
        self.name = name
        self.min_length = min_length
        self.fields = fields
        self._by_name = {spec.name: spec for spec in fields}

    def __getitem__(self, name: str) -> FieldSpec:
        return self._by_name[name]

    def fits(self, line: str) -> bool:
        return len(line) >= self.min_length

    def parse(self, line: str) -> Dict[str, Any]:
        """Parse every field of the record, in layout order."""
        return {spec.name: spec.parse(line) for spec in self.fields}


# Header of a block of terms, FORTRAN (17x,i1,4x,a7,12x,i1,17x,i1,i7)
HEADER_LAYOUT = RecordLayout(
    "header",
    132,
    (
        FieldSpec("version", 17, 18, FieldKind.DIGIT),
        FieldSpec("body", 22, 29, FieldKind.TEXT),
        FieldSpec("element", 41, 42, FieldKind.DIGIT),
        FieldSpec("power", 59, 60, FieldKind.DIGIT),
        FieldSpec("count", 60, 67, FieldKind.INT),
    ),
)

# Term record, FORTRAN (1x,4i1,i5,12i3,f15.11,2f18.11,f14.11,f20.11);
# only the A, B and C coefficients are used.
TERM_LAYOUT = RecordLayout(
    "term",
    131,
    (
        FieldSpec("amplitude", 79, 97, FieldKind.FLOAT),
        FieldSpec("phase", 98, 111, FieldKind.FIXED_FLOAT),
        FieldSpec("frequency", 111, 131, FieldKind.FLOAT),
    ),
)

# First line of an entry in vsop87.chk
CHECK_HEADER_LAYOUT = RecordLayout(
    "check header",
    34,
    (
        FieldSpec("marker", 0, 8, FieldKind.TEXT),
        FieldSpec("body", 8, 21, FieldKind.TEXT),
        FieldSpec("date", 24, 34, FieldKind.FLOAT),
    ),
)

CHECK_MARKER = " VSOP87 "
