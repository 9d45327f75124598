"""Reusable type definitions for ZeroNet addresses."""

from .address import Address, shorten
from .base import StrictCamelModel
from .codec import decode_address_text, from_json, to_json
from .constants import LEADING_CHARACTER, MAX_LENGTH, MIN_LENGTH, TEST_ADDRESS
from .exceptions import (
    AddressDecodeError,
    AddressError,
    AddressLengthError,
    AddressStartingCharacterError,
)

__all__ = [
    # Core types
    "Address",
    "StrictCamelModel",
    # Operations
    "shorten",
    "decode_address_text",
    "from_json",
    "to_json",
    # Constants
    "LEADING_CHARACTER",
    "MAX_LENGTH",
    "MIN_LENGTH",
    "TEST_ADDRESS",
    # Exceptions
    "AddressError",
    "AddressLengthError",
    "AddressStartingCharacterError",
    "AddressDecodeError",
]
