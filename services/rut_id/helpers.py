"""
Lenient RUT helpers for data pipelines.

These wrap ``Rut.parse`` and turn every RUT error into ``None``/``False``, so
they can be applied to columns of raw data without try/except at each call
site. Surrounding whitespace is ignored.
"""

from typing import Optional, Type, Union

from .errors import RutError
from .rut import FormatStyle, Rut, Standard


def parse_rut(rut: str, rut_type: Type[Rut] = Standard) -> Optional[Rut]:
    """
    Parse a RUT, returning None instead of raising.

    Args:
        rut: RUT string in any accepted format (with/without dots, hyphen)
        rut_type: Identifier type whose digit bounds apply

    Returns:
        Parsed RUT or None if the input is not a valid RUT
    """
    if not isinstance(rut, str):
        return None

    try:
        return rut_type.parse(rut.strip())
    except RutError:
        return None


def normalize_rut(rut: str, rut_type: Type[Rut] = Standard) -> Optional[str]:
    """
    Normalize a RUT string to canonical format: <body>-<DV>

    Args:
        rut: RUT string in any format (with/without dots, hyphen)
        rut_type: Identifier type whose digit bounds apply

    Returns:
        Normalized RUT in format "12345678-5" or None if invalid

    Examples:
        >>> normalize_rut("12.345.678-5")
        '12345678-5'
        >>> normalize_rut("  1.000.005-k  ")
        '1000005-K'
        >>> normalize_rut("12.345.678-9") is None
        True
    """
    parsed = parse_rut(rut, rut_type)
    if parsed is None:
        return None
    return parsed.to_text(FormatStyle.SIMPLE)


def validate_rut(rut: str, rut_type: Type[Rut] = Standard) -> bool:
    """
    Validate a RUT using módulo 11 algorithm.

    Examples:
        >>> validate_rut("12.345.678-5")
        True
        >>> validate_rut("12345678-K")
        False
    """
    return parse_rut(rut, rut_type) is not None


def format_rut(
    rut: str,
    style: Union[str, FormatStyle] = FormatStyle.HUMAN,
    rut_type: Type[Rut] = Standard,
) -> Optional[str]:
    """
    Re-format a RUT string in the given style.

    Examples:
        >>> format_rut("123456785")
        '12.345.678-5'
    """
    parsed = parse_rut(rut, rut_type)
    if parsed is None:
        return None
    return parsed.to_text(style)
