"""
ZeroNet address value type.

A ZeroNet address names a site or a user on the network. It is the Base58Check
rendering of a Bitcoin-style public key hash, so real addresses look like::

    1HeLLo4uzjaLetFx6NH3PMwFP3qbRbTf3D

Only the outer shape is checked here:

    1. The length is between 26 and 34 characters (inclusive).
    2. The first character is '1' (the version byte 0x00).

The remaining characters are kept verbatim. No alphabet or checksum
verification is performed.

The literal "Test" is the one exception. It is accepted as-is and stands in
for an absent identity wherever a real address is not available.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Any

from pydantic.annotated_handlers import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self

from .constants import (
    LEADING_CHARACTER,
    MAX_LENGTH,
    MIN_LENGTH,
    SHORT_PREFIX_LENGTH,
    SHORT_SEPARATOR,
    SHORT_SUFFIX_LENGTH,
    TEST_ADDRESS,
)
from .exceptions import AddressLengthError, AddressStartingCharacterError

__all__ = ["Address", "shorten"]


def shorten(text: str) -> str:
    """
    Render an address string as `<first 6>...<last 5>`.

    The sentinel "Test" is returned unchanged.

    Args:
        text: A validated address string.

    Returns:
        The shortened rendering.

    Raises:
        AssertionError: If `text` is too short to slice, which means it was
            never validated.
    """
    if text == TEST_ADDRESS:
        return text

    if len(text) < SHORT_PREFIX_LENGTH:
        raise AssertionError(f"Cannot shorten unvalidated address {text!r}")

    # Documented as "first 6 and last 4" historically; the suffix has always been 5 wide.
    return f"{text[:SHORT_PREFIX_LENGTH]}{SHORT_SEPARATOR}{text[-SHORT_SUFFIX_LENGTH:]}"


@dataclass(frozen=True, slots=True)
class Address:
    """
    A validated ZeroNet address.

    Instances are immutable. Equality and hashing depend on the canonical
    string only, so addresses can be used as dict keys and set members.

    Attributes:
        value: The canonical address string, exactly as it was validated.
    """

    value: str
    """Canonical address string."""

    def __post_init__(self) -> None:
        """
        Validate the address string.

        Raises:
            TypeError: If `value` is not a string.
            AddressLengthError: If the length is outside [26, 34].
            AddressStartingCharacterError: If the first character is not '1'.
        """
        if not isinstance(self.value, str):
            raise TypeError(f"Expected str, got {type(self.value).__name__}")

        # The sentinel bypasses every format check.
        if self.value == TEST_ADDRESS:
            return

        if not MIN_LENGTH <= len(self.value) <= MAX_LENGTH:
            raise AddressLengthError(len(self.value))

        if not self.value.startswith(LEADING_CHARACTER):
            raise AddressStartingCharacterError(self.value[0])

    @classmethod
    def from_string(cls, raw: str) -> Self:
        """
        Parse an untrusted string into an address.

        The string is kept verbatim: no trimming or case folding.

        Args:
            raw: Candidate address, e.g. from a CLI argument or config value.

        Returns:
            The validated address.

        Raises:
            AddressLengthError: If the length is outside [26, 34].
            AddressStartingCharacterError: If the first character is not '1'.
        """
        return cls(raw)

    @property
    def is_test(self) -> bool:
        """Whether this is the "Test" placeholder address."""
        return self.value == TEST_ADDRESS

    def sha256(self) -> bytes:
        """Return the 32-byte SHA-256 digest of the address text."""
        return hashlib.sha256(self.value.encode("utf-8")).digest()

    def legacy_digest(self) -> str:
        """
        Return the address text unchanged.

        This accessor used to be called the SHA-1 digest of the address, but it
        has never hashed anything. Callers may rely on getting the plain
        address back, so it stays an identity projection.
        """
        return self.value

    def short(self) -> str:
        """Return the shortened `1HeLLo...bTf3D` rendering for logs and UIs."""
        return shorten(self.value)

    def __str__(self) -> str:
        """Return the canonical address string."""
        return self.value

    def __repr__(self) -> str:
        """Return detailed representation."""
        return f"Address({self.value!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Hook into Pydantic's validation system.

        1. In Python mode, an existing `Address` is accepted as is.
        2. A string (Python or JSON) is re-validated by the text codec.
        3. For serialization, the canonical string is emitted.
        """
        from .codec import decode_address_text

        from_text_schema = core_schema.chain_schema(
            [
                core_schema.str_schema(strict=True),
                core_schema.no_info_plain_validator_function(decode_address_text),
            ]
        )

        return core_schema.json_or_python_schema(
            json_schema=from_text_schema,
            python_schema=core_schema.union_schema(
                [
                    # Case 1: The value is already an address.
                    core_schema.is_instance_schema(cls),
                    # Case 2: The value is text that still has to be validated.
                    from_text_schema,
                ]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Describe the address as a constrained JSON string."""
        return {
            "type": "string",
            "minLength": MIN_LENGTH,
            "maxLength": MAX_LENGTH,
            "pattern": f"^{LEADING_CHARACTER}",
            "format": "zeronet-address",
        }
