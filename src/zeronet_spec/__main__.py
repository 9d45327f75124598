"""
ZeroNet address inspection CLI entry point.

Validate addresses and print their short form and SHA-256 digest.

Usage::

    python -m zeronet_spec 1HeLLo4uzjaLetFx6NH3PMwFP3qbRbTf3D
    python -m zeronet_spec --json 1HeLLo4uzjaLetFx6NH3PMwFP3qbRbTf3D Test

Options:
    --json        Print one JSON report per address
    -v/--verbose  Enable debug logging

The exit status is 1 if any address was rejected, 0 otherwise.
"""

from __future__ import annotations

import argparse
import logging
import sys

from zeronet_spec.config import ZERONET_LOG_LEVEL
from zeronet_spec.types import Address, AddressError, StrictCamelModel

logger = logging.getLogger(__name__)


class AddressReport(StrictCamelModel):
    """Everything the CLI reports about one address."""

    address: Address
    """The validated address."""

    short_form: str
    """Shortened rendering, see `Address.short`."""

    sha256: str
    """Hex-encoded SHA-256 digest of the address text."""

    legacy_digest: str
    """The legacy digest field (the address text itself)."""

    @classmethod
    def from_address(cls, address: Address) -> AddressReport:
        """Build the report for a validated address."""
        return cls(
            address=address,
            short_form=address.short(),
            sha256=address.sha256().hex(),
            legacy_digest=address.legacy_digest(),
        )

    def render(self) -> str:
        """Return the one-line plain text rendering."""
        return f"{self.address}  short={self.short_form}  sha256={self.sha256}"


LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
"""e.g. `WARNING zeronet_spec.__main__: Invalid address 'short': ...` on stderr."""


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr at `ZERONET_LOG_LEVEL`, or DEBUG when verbose."""
    level = logging.DEBUG if verbose else getattr(logging, ZERONET_LOG_LEVEL)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def inspect_addresses(raw_addresses: list[str], as_json: bool = False) -> int:
    """
    Validate each raw address and print its report to stdout.

    Args:
        raw_addresses: Candidate addresses as given on the command line.
        as_json: Print JSON objects instead of plain text lines.

    Returns:
        The process exit status: 1 if any address was rejected, 0 otherwise.
    """
    status = 0
    for raw in raw_addresses:
        try:
            address = Address.from_string(raw)
        except AddressError as e:
            logger.warning("Invalid address %r: %s", raw, e)
            status = 1
            continue

        logger.debug("Accepted address %s", address.short())
        report = AddressReport.from_address(address)
        print(report.model_dump_json(by_alias=True) if as_json else report.render())

    return status


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="ZeroNet address inspector",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "addresses",
        nargs="+",
        metavar="ADDRESS",
        help="Address to validate (can be repeated)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="as_json",
        help="Print one JSON report per address",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    return inspect_addresses(args.addresses, args.as_json)


if __name__ == "__main__":
    sys.exit(main())
