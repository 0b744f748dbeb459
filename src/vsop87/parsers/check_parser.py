"""Parser for vsop87.chk, the reference values shipped with VSOP87.

Each entry of the main version takes four lines:

     VSOP87 MERCURY       JD2451545.0  ...
     a  .3870982122 au   k  .0446605244 rd   q  .0406156197 rd
     l 4.4026088424 rd   h  .2007233430 rd   p  .0456355986 rd
    (blank)

Entries of the other versions (VSOP87A ... VSOP87E) follow those of the main
version; parsing stops at the first entry that is not a main-version entry.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

from ..body import CHECK_FILE_NAMES, Body
from ..elements import Elliptic
from ..errors import CheckFileError
from .layout import CHECK_HEADER_LAYOUT, CHECK_MARKER

# Value positions among the whitespace-separated fields of lines 2 and 3
VALUE_COLUMNS = (1, 4, 7)
FIELDS_PER_LINE = 9


@dataclass(frozen=True)
class CheckEntry:
    """Expected elements of one body at one date."""

    line_number: int
    body: Body
    julian_date: float
    expected: Elliptic


class CheckFileParser:
    """Parser for the vsop87.chk reference file."""

    def __init__(self, text: str, path: Optional[Union[str, Path]] = None):
        self.text = text
        self.path = path

    def _values(self, line: str, line_number: int) -> Tuple[float, float, float]:
        fields = line.split()
        if len(fields) != FIELDS_PER_LINE:
            raise CheckFileError(
                line_number,
                f"expected {FIELDS_PER_LINE} fields, found {len(fields)}",
                self.path,
            )
        try:
            first, second, third = (float(fields[i]) for i in VALUE_COLUMNS)
        except ValueError as e:
            raise CheckFileError(line_number, str(e), self.path) from None
        return first, second, third

    def parse(self) -> List[CheckEntry]:
        """Parse all main-version entries.

        Raises:
            CheckFileError: If an entry is malformed or names an unknown body
        """
        entries = []
        lines = self.text.splitlines()
        n = 0

        while n + 2 < len(lines):
            line = lines[n]
            if not line.startswith(CHECK_MARKER):
                break
            line_number = n + 1

            try:
                # The date field may end the line
                header = CHECK_HEADER_LAYOUT.parse(line.ljust(CHECK_HEADER_LAYOUT.min_length))
            except ValueError as e:
                raise CheckFileError(line_number, str(e), self.path) from None

            name = header["body"].strip()
            body = CHECK_FILE_NAMES.get(name)
            if body is None:
                raise CheckFileError(line_number, f"unrecognized body {name!r}", self.path)

            a, k, q = self._values(lines[n + 1], line_number + 1)
            l, h, p = self._values(lines[n + 2], line_number + 2)

            entries.append(
                CheckEntry(
                    line_number=line_number,
                    body=body,
                    julian_date=header["date"],
                    expected=Elliptic(A=a, L=l, K=k, H=h, Q=q, P=p),
                )
            )
            # Three data lines and a blank separator
            n += 4

        return entries
