"""Tests for the address inspection CLI."""

from __future__ import annotations

import hashlib
import json
import logging
from collections.abc import Iterator

import pytest

from zeronet_spec.__main__ import (
    LOG_FORMAT,
    AddressReport,
    inspect_addresses,
    main,
    setup_logging,
)
from zeronet_spec.types import Address

HELLO = "1HeLLo4uzjaLetFx6NH3PMwFP3qbRbTf3D"
HELLO_SHA256 = hashlib.sha256(HELLO.encode()).hexdigest()


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Remove handlers added by setup_logging after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestAddressReport:
    """Tests for the per-address report model."""

    def test_from_address(self, hello_address: Address) -> None:
        """The report carries the short form and both digests."""
        report = AddressReport.from_address(hello_address)
        assert report.address == hello_address
        assert report.short_form == "1HeLLo...bTf3D"
        assert report.sha256 == HELLO_SHA256
        assert report.legacy_digest == HELLO

    def test_json_uses_camel_case(self, hello_address: Address) -> None:
        """JSON reports use camelCase keys and the canonical address text."""
        report = AddressReport.from_address(hello_address)
        assert json.loads(report.model_dump_json(by_alias=True)) == {
            "address": HELLO,
            "shortForm": "1HeLLo...bTf3D",
            "sha256": HELLO_SHA256,
            "legacyDigest": HELLO,
        }

    def test_render(self, placeholder_address: Address) -> None:
        """The plain rendering is a single line."""
        report = AddressReport.from_address(placeholder_address)
        expected_digest = hashlib.sha256(b"Test").hexdigest()
        assert report.render() == f"Test  short=Test  sha256={expected_digest}"


class TestInspectAddresses:
    """Tests for validating and printing addresses."""

    def test_valid_addresses(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Each valid address produces one output line."""
        assert inspect_addresses([HELLO, "Test"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == f"{HELLO}  short=1HeLLo...bTf3D  sha256={HELLO_SHA256}"
        assert lines[1].startswith("Test  short=Test")

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON mode prints one object per line."""
        assert inspect_addresses([HELLO], as_json=True) == 0
        report = json.loads(capsys.readouterr().out)
        assert report["address"] == HELLO
        assert report["shortForm"] == "1HeLLo...bTf3D"

    def test_invalid_address_sets_status(
        self, capsys: pytest.CaptureFixture[str], caplog: pytest.LogCaptureFixture
    ) -> None:
        """Rejected addresses are logged and make the status non-zero."""
        with caplog.at_level(logging.WARNING):
            assert inspect_addresses(["short", HELLO]) == 1

        assert "Invalid address 'short'" in caplog.text
        assert "found: 5" in caplog.text
        # Valid addresses after a rejected one are still reported.
        assert capsys.readouterr().out.startswith(HELLO)


class TestMain:
    """Tests for argument parsing and the entry point."""

    def test_main_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """main() returns 0 when all addresses are valid."""
        assert main([HELLO]) == 0
        assert HELLO in capsys.readouterr().out

    def test_main_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--json switches to JSON output."""
        assert main(["--json", HELLO]) == 0
        assert json.loads(capsys.readouterr().out)["legacyDigest"] == HELLO

    def test_main_failure(self) -> None:
        """main() returns 1 when any address is invalid."""
        assert main(["3" + HELLO[1:]]) == 1

    def test_main_requires_address(self) -> None:
        """At least one address is required."""
        with pytest.raises(SystemExit):
            main([])


class TestLogging:
    """Tests for the logging setup."""

    def test_verbose_sets_debug(self) -> None:
        """--verbose enables debug logging on the root logger."""
        setup_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_log_format(self) -> None:
        """Records render as level, logger name and message, without colors."""
        record = logging.LogRecord(
            "zeronet_spec", logging.WARNING, __file__, 1, "bad %s", ("address",), None
        )
        assert logging.Formatter(LOG_FORMAT).format(record) == "WARNING zeronet_spec: bad address"

    def test_rejection_logged_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """main() reports rejected addresses on stderr in the plain format."""
        assert main(["short"]) == 1
        err = capsys.readouterr().err
        assert "WARNING zeronet_spec.__main__: Invalid address 'short'" in err
        assert "\x1b[" not in err

    def test_unknown_option_rejected(self) -> None:
        """Options the CLI does not define are rejected."""
        with pytest.raises(SystemExit):
            main(["--no-color", HELLO])
