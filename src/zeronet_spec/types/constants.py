"""Constants describing the ZeroNet address format."""

from typing import Final

MIN_LENGTH: Final = 26
"""Shortest accepted address, in characters."""

MAX_LENGTH: Final = 34
"""Longest accepted address, in characters."""

LEADING_CHARACTER: Final = "1"
"""Every real address starts with this marker (Bitcoin-style version byte 0x00)."""

TEST_ADDRESS: Final = "Test"
"""The only address accepted without satisfying the format rules."""

SHORT_PREFIX_LENGTH: Final = 6
"""Characters kept from the start of an address in its short form."""

SHORT_SUFFIX_LENGTH: Final = 5
"""Characters kept from the end of an address in its short form."""

SHORT_SEPARATOR: Final = "..."
"""Joins the prefix and suffix of the short form."""
