"""
RUT identifier service

Validation, parsing and formatting of Chilean RUTs:
- Identifier types with digit-length bounds fixed at definition time
- Módulo 11 verifier computation
- Parser for "16.894.365-2", "16894365-2" and "168943652" formats
- Human, simple and numeric output styles
"""

__version__ = "0.1.0"

from .errors import (
    DigitLengthOutOfBounds,
    EmptyString,
    InvalidCharacter,
    InvalidVerifier,
    LengthError,
    NegativeNumber,
    RutError,
    RutParseError,
    VerifierMismatch,
)
from .helpers import format_rut, normalize_rut, parse_rut, validate_rut
from .rut import FormatStyle, Rut, Standard, constrained
from .verifier import compute_verifier, count_digits

__all__ = [
    "DigitLengthOutOfBounds",
    "EmptyString",
    "FormatStyle",
    "InvalidCharacter",
    "InvalidVerifier",
    "LengthError",
    "NegativeNumber",
    "Rut",
    "RutError",
    "RutParseError",
    "Standard",
    "VerifierMismatch",
    "compute_verifier",
    "constrained",
    "count_digits",
    "format_rut",
    "normalize_rut",
    "parse_rut",
    "validate_rut",
]
