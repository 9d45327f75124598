"""
JSON text codec for ZeroNet addresses.

On the wire an address is a plain JSON string::

    "1HeLLo4uzjaLetFx6NH3PMwFP3qbRbTf3D"

Decoding never trusts the input. The shape is checked here first, then the
string is handed to `Address.from_string` for full validation. Unlike direct
construction, the codec does not accept the "Test" placeholder: it only ever
decodes real addresses.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import TypeAdapter, ValidationError

from .address import Address
from .constants import LEADING_CHARACTER, MAX_LENGTH, MIN_LENGTH
from .exceptions import (
    AddressDecodeError,
    AddressError,
    AddressLengthError,
    AddressStartingCharacterError,
)

__all__ = ["decode_address_text", "from_json", "to_json"]

logger = logging.getLogger(__name__)


def decode_address_text(text: str) -> Address:
    """
    Validate decoded text and build an address from it.

    Args:
        text: The string scalar read from the interchange document.

    Returns:
        The validated address.

    Raises:
        AddressLengthError: If the length is outside [26, 34].
        AddressStartingCharacterError: If the first character is not '1'.
    """
    if len(text) > MAX_LENGTH or len(text) < MIN_LENGTH:
        logger.debug("Rejected address text of length %d", len(text))
        raise AddressLengthError(len(text))

    if not text.startswith(LEADING_CHARACTER):
        logger.debug("Rejected address text starting with %r", text[0])
        raise AddressStartingCharacterError(text[0])

    return Address.from_string(text)


@lru_cache(maxsize=1)
def _adapter() -> TypeAdapter[Address]:
    """Return the shared pydantic adapter for addresses."""
    return TypeAdapter(Address)


def to_json(address: Address) -> str:
    """
    Encode an address as a JSON string scalar.

    Args:
        address: The address to encode.

    Returns:
        JSON text, e.g. `"\\"1HeLLo4uzjaLetFx6NH3PMwFP3qbRbTf3D\\""`.
    """
    return _adapter().dump_json(address).decode("utf-8")


def from_json(text: str | bytes) -> Address:
    """
    Decode an address from a JSON string scalar.

    Args:
        text: JSON text holding a single string.

    Returns:
        The validated address.

    Raises:
        AddressDecodeError: If the text is not a JSON string or the string is
            not a valid address. The underlying `AddressError` (if any) is
            available as `cause`.
    """
    try:
        return _adapter().validate_json(text)
    except ValidationError as exc:
        error = exc.errors()[0]
        cause = error.get("ctx", {}).get("error")
        raise AddressDecodeError(
            str(cause) if isinstance(cause, AddressError) else error["msg"],
            location=tuple(error["loc"]),
            input_value=error.get("input"),
            cause=cause if isinstance(cause, AddressError) else None,
        ) from exc
