"""Bodies known to the VSOP87 theory and their static per-body tables."""

from enum import Enum
from typing import Dict, Optional, Tuple


class Body(Enum):
    """Body identifiers, in the order used by the VSOP87 distribution."""

    SUN = 0
    MERCURY = 1
    VENUS = 2
    EARTH = 3
    MARS = 4
    JUPITER = 5
    SATURN = 6
    URANUS = 7
    NEPTUNE = 8
    EARTH_MOON_BARYCENTER = 9

    @property
    def extension(self) -> str:
        """Three-letter coefficient file extension ("" for the Sun)."""
        return FILE_EXTENSIONS[self]

    @property
    def file_name(self) -> str:
        return f"VSOP87.{self.extension}"

    @property
    def header_name(self) -> str:
        """Body name as written in columns 22-29 of every header record."""
        return HEADER_NAMES[self]

    @property
    def distance_scale(self) -> float:
        """Nominal semi-major axis in au, used to scale the truncation threshold."""
        return DISTANCE_SCALES[self]

    @property
    def has_series(self) -> bool:
        return self in ELLIPTIC_BODIES

    @classmethod
    def from_name(cls, name: str) -> "Body":
        """Look up a body by enum name, file extension or check-file name.

        Args:
            name: e.g. "mars", "MARS", "mar", "emb" or "EARTH-MOON"

        Raises:
            ValueError: If the name matches no body
        """
        key = name.strip().upper().replace("-", "_").replace(" ", "_")
        if key in cls.__members__:
            return cls[key]
        for body, ext in FILE_EXTENSIONS.items():
            if ext and ext.upper() == key:
                return body
        body = CHECK_FILE_NAMES.get(name.strip().upper())
        if body is not None:
            return body
        raise ValueError(f"Unknown body: {name}")


FILE_EXTENSIONS: Dict[Body, str] = {
    Body.SUN: "",
    Body.MERCURY: "mer",
    Body.VENUS: "ven",
    Body.EARTH: "ear",
    Body.MARS: "mar",
    Body.JUPITER: "jup",
    Body.SATURN: "sat",
    Body.URANUS: "ura",
    Body.NEPTUNE: "nep",
    Body.EARTH_MOON_BARYCENTER: "emb",
}

# Fixed width of 7, padded with spaces, exactly as in the files
HEADER_NAMES: Dict[Body, str] = {
    Body.SUN: "",
    Body.MERCURY: "MERCURY",
    Body.VENUS: "VENUS  ",
    Body.EARTH: "EARTH  ",
    Body.MARS: "MARS   ",
    Body.JUPITER: "JUPITER",
    Body.SATURN: "SATURN ",
    Body.URANUS: "URANUS ",
    Body.NEPTUNE: "NEPTUNE",
    Body.EARTH_MOON_BARYCENTER: "EMB    ",
}

DISTANCE_SCALES: Dict[Body, float] = {
    Body.SUN: 0.0,
    Body.MERCURY: 0.3871,
    Body.VENUS: 0.7233,
    Body.EARTH: 1.0,
    Body.MARS: 1.5237,
    Body.JUPITER: 5.2026,
    Body.SATURN: 9.5547,
    Body.URANUS: 19.2181,
    Body.NEPTUNE: 30.1096,
    Body.EARTH_MOON_BARYCENTER: 1.0,
}

# Names used in the first line of each vsop87.chk entry
CHECK_FILE_NAMES: Dict[str, Body] = {
    "MERCURY": Body.MERCURY,
    "VENUS": Body.VENUS,
    "MARS": Body.MARS,
    "JUPITER": Body.JUPITER,
    "SATURN": Body.SATURN,
    "URANUS": Body.URANUS,
    "NEPTUNE": Body.NEPTUNE,
    "EARTH-MOON": Body.EARTH_MOON_BARYCENTER,
}

# Bodies whose coefficient files are loaded for the elliptic-elements model.
# The main version has no Earth series (VSOP87.ear belongs to the other versions).
ELLIPTIC_BODIES: Tuple[Body, ...] = (
    Body.MERCURY,
    Body.VENUS,
    Body.EARTH_MOON_BARYCENTER,
    Body.MARS,
    Body.JUPITER,
    Body.SATURN,
    Body.URANUS,
    Body.NEPTUNE,
)


def check_file_name(body: Body) -> Optional[str]:
    """Return the name a body carries in vsop87.chk, or None."""
    for name, candidate in CHECK_FILE_NAMES.items():
        if candidate is body:
            return name
    return None
