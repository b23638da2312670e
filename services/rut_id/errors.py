"""
Error taxonomy for RUT construction and parsing.

Every error is a ``ValueError`` so callers that only care about "bad input"
can catch that, while callers that need to tell failures apart can catch the
specific classes below.
"""

from typing import Optional


class RutError(ValueError):
    """Base class for every RUT error."""


class NegativeNumber(RutError):
    """Raised when a negative number is given as a RUT body."""

    def __init__(self, number: int):
        self.number = number
        super().__init__(f"RUT number cannot be negative: {number}")


class DigitLengthOutOfBounds(RutError):
    """Raised when the numeric body has too many or too few digits."""

    def __init__(self, digits: int, min_digits: int, max_digits: int):
        self.digits = digits
        self.min_digits = min_digits
        self.max_digits = max_digits
        super().__init__(
            f"RUT number has {digits} digits, expected between "
            f"{min_digits} and {max_digits}"
        )


LengthError = DigitLengthOutOfBounds


class RutParseError(RutError):
    """Base class for errors detected while parsing RUT text."""

    def __init__(self, message: str, text: Optional[str] = None):
        self.text = text
        super().__init__(message)


class EmptyString(RutParseError):
    """Raised when parsing an empty string."""

    def __init__(self):
        super().__init__("RUT text is empty", text="")


class InvalidVerifier(RutParseError):
    """Raised when the last character is not a digit or K/k."""

    def __init__(self, text: str, character: str):
        self.character = character
        super().__init__(
            f"Invalid verifier character {character!r} in {text!r}", text=text
        )


class InvalidCharacter(RutParseError):
    """Raised when the body holds something other than digits and separators."""

    def __init__(self, text: str, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(
            f"Invalid character {character!r} at position {position} in {text!r}",
            text=text,
        )


class VerifierMismatch(RutParseError):
    """Raised when the supplied verifier does not match the computed one."""

    def __init__(self, text: str, expected: str, found: str):
        self.expected = expected
        self.found = found
        super().__init__(
            f"Verifier mismatch in {text!r}: expected {expected!r}, got {found!r}",
            text=text,
        )
