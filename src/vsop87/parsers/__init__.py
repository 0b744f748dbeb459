from .coefficient_parser import (
    Block,
    BlockHeader,
    CoefficientFileParser,
    TruncationPolicy,
    validate_precision,
)
from .check_parser import CheckEntry, CheckFileParser
from .layout import FieldKind, FieldSpec, RecordLayout, HEADER_LAYOUT, TERM_LAYOUT

__all__ = [
    "Block",
    "BlockHeader",
    "CoefficientFileParser",
    "TruncationPolicy",
    "validate_precision",
    "CheckEntry",
    "CheckFileParser",
    "FieldKind",
    "FieldSpec",
    "RecordLayout",
    "HEADER_LAYOUT",
    "TERM_LAYOUT",
]
