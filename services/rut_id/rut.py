"""
RUT (Rol Único Tributario) identifier type for Chile.

A RUT is a number that uniquely identifies a person or a company in Chile,
written with a trailing verifier character computed with the módulo 11
algorithm (see ``verifier.py``). Only the numeric body is stored; the
verifier is always derived.

Identifier types are constrained by the number of digits their body may
have. The bounds are fixed when the type is defined:

    >>> class Wide(Rut, max_digits=9, min_digits=6):
    ...     pass
    >>> Wide(894365).to_text()
    '894.365-6'

``Standard`` is the real-world bound (7 to 8 digits) and ``constrained()``
builds (and caches) a type for arbitrary bounds.
"""

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import ClassVar, Type, Union

from .errors import (
    DigitLengthOutOfBounds,
    EmptyString,
    InvalidCharacter,
    InvalidVerifier,
    NegativeNumber,
    VerifierMismatch,
)
from .verifier import compute_verifier, count_digits

# Digits of the largest unsigned 32-bit integer
MAX_DIGITS_LIMIT = 10

DIGITS = "0123456789"
VERIFIER_CHARACTERS = DIGITS + "K"
DEFAULT_SEPARATOR = "."
DASH = "-"


class FormatStyle(str, Enum):
    """Text representations of a RUT."""

    NUMERIC = "numeric"  # 16894365
    SIMPLE = "simple"    # 16894365-2
    HUMAN = "human"      # 16.894.365-2

    @classmethod
    def from_selector(cls, selector: Union[str, "FormatStyle"]) -> "FormatStyle":
        """
        Resolve a style selector.

        Accepts the style names, their one-letter forms ("n", "s", "h") and
        "default" or "" for the human style. Matching is case-insensitive.

        Raises:
            ValueError: If the selector is unknown
        """
        if isinstance(selector, cls):
            return selector

        key = selector.strip().lower()
        try:
            return _SELECTORS[key]
        except KeyError:
            raise ValueError(
                f"Unknown format style {selector!r}. "
                f"Expected one of: {', '.join(sorted(k for k in _SELECTORS if k))}"
            ) from None


_SELECTORS = {
    "": FormatStyle.HUMAN,
    "default": FormatStyle.HUMAN,
    "h": FormatStyle.HUMAN,
    "human": FormatStyle.HUMAN,
    "s": FormatStyle.SIMPLE,
    "simple": FormatStyle.SIMPLE,
    "n": FormatStyle.NUMERIC,
    "numeric": FormatStyle.NUMERIC,
}


def _check_bounds(max_digits: int, min_digits: int) -> None:
    """Validate digit bounds for an identifier type."""
    for name, bound in (("max_digits", max_digits), ("min_digits", min_digits)):
        if isinstance(bound, bool) or not isinstance(bound, int):
            raise TypeError(f"{name} must be an int, got {type(bound).__name__}")

    if min_digits < 0:
        raise ValueError("min_digits cannot be negative")
    if min_digits > max_digits:
        raise ValueError("max_digits must be greater than or equal to min_digits")
    if max_digits > MAX_DIGITS_LIMIT:
        raise ValueError(
            f"RUTs can have at most {MAX_DIGITS_LIMIT} digits, got {max_digits}"
        )


def check_separator(separator: str) -> str:
    """
    Validate a group separator.

    It must be a single character that cannot be mistaken for a digit, the
    verifier K or the dash before the verifier.

    Raises:
        ValueError: If the separator is invalid
    """
    if not isinstance(separator, str) or len(separator) != 1:
        raise ValueError(f"Invalid group separator {separator!r}: must be a single character")
    if separator in DIGITS or separator.upper() == "K" or separator == DASH:
        raise ValueError(f"Invalid group separator {separator!r}: cannot be a digit, K or a dash")
    return separator


def _max_separators(max_digits: int) -> int:
    return (max_digits - 1) // 3 if max_digits > 3 else 0


@dataclass(frozen=True, order=True)
class Rut:
    """
    A RUT body with digit-length bounds fixed by its type.

    Instances are immutable and compare by value among the same type.

    Attributes:
        value: Numeric body, without the verifier

    Raises:
        TypeError: If value is not an int
        NegativeNumber: If value is negative
        DigitLengthOutOfBounds: If value has too many or too few digits
    """

    value: int

    max_digits: ClassVar[int]
    min_digits: ClassVar[int]
    # Length of the longest human format: digits, separators, dash and verifier
    buffer_size: ClassVar[int]

    def __init_subclass__(cls, max_digits: int = None, min_digits: int = None, **kwargs):
        super().__init_subclass__(**kwargs)
        _apply_bounds(
            cls,
            cls.max_digits if max_digits is None else max_digits,
            cls.min_digits if min_digits is None else min_digits,
        )

    def __post_init__(self):
        value = self.value
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"RUT number must be an int, got {type(value).__name__}")
        if value < 0:
            raise NegativeNumber(value)

        digits = count_digits(value)
        if digits < self.min_digits or digits > self.max_digits:
            raise DigitLengthOutOfBounds(digits, self.min_digits, self.max_digits)

    @classmethod
    def from_number(cls, number: int) -> "Rut":
        """
        Create a RUT directly from its numeric body.

        Args:
            number: Numeric body, without the verifier

        Returns:
            RUT of this type

        Raises:
            DigitLengthOutOfBounds: If number has too many or too few digits

        Examples:
            >>> Standard.from_number(16894365).value
            16894365
        """
        return cls(number)

    @classmethod
    def parse(cls, text: str, separator: str = DEFAULT_SEPARATOR) -> "Rut":
        """
        Parse a RUT from text, validating its verifier.

        Accepted formats: "16.894.365-2", "16894365-2" and "168943652".
        The verifier may be "K" or "k". The text is scanned from the right:
        verifier, an optional dash, then digits and group separators.

        Args:
            text: RUT text
            separator: Group separator allowed in the body

        Returns:
            RUT of this type

        Raises:
            TypeError: If text is not a str
            ValueError: If separator is not a valid group separator
            EmptyString: If text is empty
            InvalidVerifier: If the last character is not a digit or K/k
            InvalidCharacter: If the body has something other than digits
                and separators
            DigitLengthOutOfBounds: If the body has too many or too few digits
            VerifierMismatch: If the verifier does not match the body

        Examples:
            >>> Standard.parse("16.894.365-2").value
            16894365
        """
        check_separator(separator)

        if not isinstance(text, str):
            raise TypeError(f"RUT text must be a str, got {type(text).__name__}")
        if not text:
            raise EmptyString()

        found = text[-1].upper()
        if found not in VERIFIER_CHARACTERS:
            raise InvalidVerifier(text, text[-1])

        end = len(text) - 1
        if end > 0 and text[end - 1] == DASH:
            end -= 1

        value = 0
        place = 1
        digits = 0
        for position in range(end - 1, -1, -1):
            char = text[position]
            if char == separator:
                continue
            if char not in DIGITS:
                raise InvalidCharacter(text, char, position)

            value += DIGITS.index(char) * place
            place *= 10
            digits += 1

        if digits == 0:
            raise DigitLengthOutOfBounds(0, cls.min_digits, cls.max_digits)

        rut = cls(value)

        expected = rut.verifier
        if expected != found:
            raise VerifierMismatch(text, expected, found)

        return rut

    @property
    def verifier(self) -> str:
        """Verifier character ('0'-'9' or 'K')."""
        return compute_verifier(self.value)

    def to_text(self, style: Union[str, FormatStyle] = FormatStyle.HUMAN) -> str:
        """
        Format the RUT.

        Args:
            style: A FormatStyle or a selector accepted by
                FormatStyle.from_selector

        Returns:
            Formatted RUT

        Examples:
            >>> rut = Standard(16894365)
            >>> rut.to_text(), rut.to_text("simple"), rut.to_text("numeric")
            ('16.894.365-2', '16894365-2', '16894365')
        """
        style = FormatStyle.from_selector(style)
        if style is FormatStyle.NUMERIC:
            return self._numeric()
        if style is FormatStyle.SIMPLE:
            return self._simple()
        return self._human()

    def _numeric(self) -> str:
        return str(self.value)

    def _simple(self) -> str:
        return f"{self.value}{DASH}{self.verifier}"

    def _human(self) -> str:
        # Filled from the end: verifier, dash, then digits with separators
        buffer = bytearray(self.buffer_size)
        i = len(buffer)

        buffer[i - 1] = ord(self.verifier)
        buffer[i - 2] = ord(DASH)
        i -= 2

        n = self.value
        count = 0
        while n > 0 or count == 0:
            if count > 0 and count % 3 == 0:
                i -= 1
                buffer[i] = ord(DEFAULT_SEPARATOR)
            i -= 1
            buffer[i] = ord("0") + n % 10
            n //= 10
            count += 1

        return buffer[i:].decode("ascii")

    def __str__(self) -> str:
        return self._human()

    def __format__(self, format_spec: str) -> str:
        try:
            style = FormatStyle.from_selector(format_spec)
        except ValueError:
            raise ValueError(
                f"Invalid format specifier {format_spec!r} for {type(self).__name__}"
            ) from None
        return self.to_text(style)


def _apply_bounds(cls: Type[Rut], max_digits: int, min_digits: int) -> None:
    _check_bounds(max_digits, min_digits)
    cls.max_digits = max_digits
    cls.min_digits = min_digits
    cls.buffer_size = max_digits + _max_separators(max_digits) + 2


_apply_bounds(Rut, MAX_DIGITS_LIMIT, 1)


class Standard(Rut, max_digits=8, min_digits=7):
    """Standard RUT: 7 or 8 digits in its numeric body."""


def constrained(max_digits: int, min_digits: int) -> Type[Rut]:
    """
    Get the RUT type whose body length is constrained to the given bounds.

    The same type is returned for the same bounds, whether they are passed
    by position or by keyword.

    Args:
        max_digits: Maximum number of digits (at most 10)
        min_digits: Minimum number of digits

    Returns:
        Rut subclass

    Raises:
        ValueError: If min_digits > max_digits or max_digits > 10

    Examples:
        >>> NonStandard = constrained(9, 6)
        >>> str(NonStandard(116894365))
        '116.894.365-9'
    """
    _check_bounds(max_digits, min_digits)
    return _constrained_type(max_digits, min_digits)


@lru_cache(maxsize=None)
def _constrained_type(max_digits: int, min_digits: int) -> Type[Rut]:
    name = f"RutMax{max_digits}Min{min_digits}"
    return type(
        name,
        (Rut,),
        {"__module__": __name__, "__qualname__": name},
        max_digits=max_digits,
        min_digits=min_digits,
    )
