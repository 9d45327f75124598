"""Exception hierarchy for ZeroNet address validation and decoding."""

from __future__ import annotations

from typing import Any

from .constants import LEADING_CHARACTER, MAX_LENGTH, MIN_LENGTH


class AddressError(ValueError):
    """
    Base exception for all address-related errors.

    Subclasses `ValueError` so that pydantic validators report it as a
    regular validation failure.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class AddressLengthError(AddressError):
    """
    Raised when an address has fewer or more characters than the format allows.

    Attributes:
        actual: The observed number of characters.
        min_length: The minimum allowed length (inclusive).
        max_length: The maximum allowed length (inclusive).
    """

    def __init__(
        self,
        actual: int,
        *,
        min_length: int = MIN_LENGTH,
        max_length: int = MAX_LENGTH,
    ) -> None:
        self.actual = actual
        self.min_length = min_length
        self.max_length = max_length

        super().__init__(f"Expected length between {min_length} and {max_length}, found: {actual}")


class AddressStartingCharacterError(AddressError):
    """
    Raised when an address of valid length does not start with the marker character.

    Attributes:
        character: The observed first character.
        expected: The required first character.
    """

    def __init__(self, character: str, *, expected: str = LEADING_CHARACTER) -> None:
        self.character = character
        self.expected = expected

        super().__init__(f"Expected the first character to be {expected!r}, found: {character}")


class AddressDecodeError(AddressError):
    """
    Raised when decoding an address from its text representation fails.

    Attributes:
        detail: Description of what went wrong.
        location: Path of the failing value inside the decoded document (if known).
        input_value: The value that could not be decoded (may be truncated for display).
        cause: The underlying validation error (if any).
    """

    def __init__(
        self,
        detail: str,
        *,
        location: tuple[int | str, ...] = (),
        input_value: Any = None,
        cause: AddressError | None = None,
    ) -> None:
        self.detail = detail
        self.location = location
        self.input_value = input_value
        self.cause = cause

        msg = f"Failed to decode Address: {detail}"
        if location:
            msg = f"{msg} (at {'.'.join(str(part) for part in location)})"
        if input_value is not None:
            value_repr = repr(input_value)
            if len(value_repr) > 50:
                value_repr = value_repr[:47] + "..."
            msg = f"{msg}: {value_repr}"

        super().__init__(msg)
