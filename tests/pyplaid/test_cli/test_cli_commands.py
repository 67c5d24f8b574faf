# ruff: noqa: S101,S106
"""Tests for the pyplaid CLI commands.

Tests CLI-specific functionality: argument parsing, JSON output and exit codes.
Client behavior is tested in test_client.py.
"""

import json
import os
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
from plaid_fixtures import (
    FakeTransport,
    json_response,
    paging_handler,
    transaction_payload,
    transactions_page,
)
from typer.testing import CliRunner

from pyplaid.cli.main import app
from pyplaid.client import PlaidClient
from pyplaid.credentials import Credentials
from pyplaid.errors import ConfigurationError, TransportError

INSTITUTION = {
    "institution_id": "ins_109508",
    "name": "First Platypus Bank",
    "products": ["transactions"],
    "country_codes": ["US"],
}

COMMAND_MODULES = ("institutions", "transactions", "sandbox", "categories")

TRANSACTIONS_ARGS = [
    "transactions",
    "access-sandbox-123",
    "--start",
    "2024-01-01",
    "--end",
    "2024-01-31",
]


def stdout_lines(output: str) -> list[dict[str, Any]]:
    return [json.loads(line) for line in output.splitlines() if line.startswith("{")]


class TestCliCommands:
    """Test CLI commands against a scripted transport."""

    @pytest.fixture
    def runner(self) -> CliRunner:
        """Create a CLI runner for testing."""
        return CliRunner()

    @pytest.fixture(autouse=True)
    def mock_setup_logging(self, mocker: Any) -> MagicMock:
        """Keep the CLI from reconfiguring logging during tests."""
        return mocker.patch("pyplaid.cli.main.setup_logging")

    @pytest.fixture
    def transport(self) -> FakeTransport:
        return FakeTransport()

    @pytest.fixture
    def mock_build_client(self, mocker: Any, transport: FakeTransport) -> MagicMock:
        """Make every command use a client on the scripted transport."""
        mock = MagicMock(
            side_effect=lambda: PlaidClient(
                transport=transport,
                credentials=Credentials(client_id="cli-client", secret="cli-secret"),
            )
        )
        for module in COMMAND_MODULES:
            mocker.patch(f"pyplaid.cli.commands.{module}.build_client", mock)
        return mock

    @pytest.mark.unit
    def test_no_args_shows_help(self, runner: CliRunner) -> None:
        """Running without a command prints usage."""
        result = runner.invoke(app, [])

        assert "institutions" in result.output
        assert "transactions" in result.output

    @pytest.mark.unit
    def test_verbose_flag(
        self,
        runner: CliRunner,
        mock_setup_logging: MagicMock,
        mock_build_client: MagicMock,
        transport: FakeTransport,
    ) -> None:
        """--verbose turns on debug logging."""
        transport.queue(json_response({"categories": [], "request_id": "r1"}))

        result = runner.invoke(app, ["--verbose", "categories"])

        assert result.exit_code == 0
        mock_setup_logging.assert_called_once_with(cli_mode=True, verbose=True)

    @pytest.mark.unit
    def test_institutions_search(
        self,
        runner: CliRunner,
        mock_build_client: MagicMock,
        transport: FakeTransport,
    ) -> None:
        """Search results are printed as JSON lines."""
        transport.queue(
            json_response({"institutions": [INSTITUTION], "request_id": "r1"})
        )

        result = runner.invoke(
            app, ["institutions", "search", "platypus", "-c", "US", "-c", "CA"]
        )

        assert result.exit_code == 0
        assert stdout_lines(result.stdout)[0]["institution_id"] == "ins_109508"
        assert transport.payloads[0] == {
            "query": "platypus",
            "country_codes": ["US", "CA"],
        }

    @pytest.mark.unit
    def test_institutions_get(
        self,
        runner: CliRunner,
        mock_build_client: MagicMock,
        transport: FakeTransport,
    ) -> None:
        """A single institution is printed as one JSON document."""
        transport.queue(
            json_response({"institution": INSTITUTION, "request_id": "r1"})
        )

        result = runner.invoke(app, ["institutions", "get", "ins_109508"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["name"] == "First Platypus Bank"

    @pytest.mark.unit
    def test_institutions_list_respects_limit(
        self,
        runner: CliRunner,
        mock_build_client: MagicMock,
        transport: FakeTransport,
    ) -> None:
        """--limit stops reading once enough institutions were printed."""
        transport.queue(
            json_response(
                {
                    "institutions": [
                        {**INSTITUTION, "institution_id": f"ins_{i}"} for i in range(2)
                    ],
                    "total": 10,
                    "request_id": "r1",
                }
            )
        )

        result = runner.invoke(
            app, ["institutions", "list", "--page-size", "2", "--limit", "2"]
        )

        assert result.exit_code == 0
        assert len(stdout_lines(result.stdout)) == 2
        assert len(transport.requests) == 1

    @pytest.mark.unit
    def test_transactions_streams_json_lines(
        self,
        runner: CliRunner,
        mock_build_client: MagicMock,
    ) -> None:
        """Every transaction across pages is printed, one per line."""
        pool = [transaction_payload(i) for i in range(5)]
        transport = FakeTransport(handler=paging_handler(pool))
        mock_build_client.side_effect = lambda: PlaidClient(
            transport=transport, credentials=Credentials()
        )

        result = runner.invoke(
            app,
            [
                "transactions",
                "access-sandbox-123",
                "--start",
                "2024-01-01",
                "--end",
                "2024-01-31",
                "--page-size",
                "2",
            ],
        )

        assert result.exit_code == 0
        lines = stdout_lines(result.stdout)
        assert [line["transaction_id"] for line in lines] == [
            f"tx_{i}" for i in range(5)
        ]
        assert lines[0]["date"] == "2024-01-15"
        assert len(transport.requests) == 3
        assert transport.payloads[0]["start_date"] == "2024-01-01"

    @pytest.mark.unit
    def test_transactions_keeps_lines_printed_before_a_failure(
        self,
        runner: CliRunner,
        mock_build_client: MagicMock,
        transport: FakeTransport,
    ) -> None:
        """Transactions from pages before a failing one are already on stdout."""
        pool = [transaction_payload(i) for i in range(6)]
        transport.queue(
            json_response(transactions_page(pool, 0, 3)),
            TransportError("connection reset"),
        )

        result = runner.invoke(app, [*TRANSACTIONS_ARGS, "--page-size", "3"])

        assert result.exit_code == 1
        assert [line["transaction_id"] for line in stdout_lines(result.stdout)] == [
            "tx_0",
            "tx_1",
            "tx_2",
        ]
        assert len(transport.requests) == 2

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "command",
        [[*TRANSACTIONS_ARGS], ["institutions", "list"]],
        ids=["transactions", "institutions"],
    )
    def test_limit_zero_prints_nothing(
        self,
        runner: CliRunner,
        mock_build_client: MagicMock,
        transport: FakeTransport,
        command: list[str],
    ) -> None:
        """--limit 0 prints no items and sends no requests."""
        result = runner.invoke(app, [*command, "--limit", "0"])

        assert result.exit_code == 0
        assert stdout_lines(result.stdout) == []
        assert transport.requests == []

    @pytest.mark.unit
    def test_transactions_limit_one(
        self,
        runner: CliRunner,
        mock_build_client: MagicMock,
    ) -> None:
        """--limit 1 prints exactly one transaction."""
        pool = [transaction_payload(i) for i in range(5)]
        transport = FakeTransport(handler=paging_handler(pool))
        mock_build_client.side_effect = lambda: PlaidClient(
            transport=transport, credentials=Credentials()
        )

        result = runner.invoke(app, [*TRANSACTIONS_ARGS, "--limit", "1"])

        assert result.exit_code == 0
        assert len(stdout_lines(result.stdout)) == 1
        assert len(transport.requests) == 1

    @pytest.mark.unit
    def test_negative_limit_is_rejected(self, runner: CliRunner) -> None:
        """A negative --limit is a usage error."""
        result = runner.invoke(app, [*TRANSACTIONS_ARGS, "--limit", "-1"])

        assert result.exit_code == 2

    @pytest.mark.unit
    def test_transactions_invalid_page_size_exits_1(
        self,
        runner: CliRunner,
        mock_build_client: MagicMock,
        transport: FakeTransport,
    ) -> None:
        """A page size of zero fails without contacting Plaid."""
        result = runner.invoke(
            app,
            [
                "transactions",
                "access-sandbox-123",
                "--start",
                "2024-01-01",
                "--end",
                "2024-01-31",
                "--page-size",
                "0",
            ],
        )

        assert result.exit_code == 1
        assert transport.requests == []

    @pytest.mark.unit
    def test_transactions_rejects_bad_date(self, runner: CliRunner) -> None:
        """Dates must be YYYY-MM-DD."""
        result = runner.invoke(
            app,
            ["transactions", "tok", "--start", "01/01/2024", "--end", "2024-01-31"],
        )

        assert result.exit_code == 2

    @pytest.mark.unit
    def test_sandbox_token(
        self,
        runner: CliRunner,
        mock_build_client: MagicMock,
        transport: FakeTransport,
    ) -> None:
        """A public token is created and exchanged for an access token."""
        transport.queue(
            json_response({"public_token": "public-sandbox-1", "request_id": "r1"}),
            json_response(
                {
                    "access_token": "access-sandbox-1",
                    "item_id": "item_123",
                    "request_id": "r2",
                }
            ),
        )

        result = runner.invoke(
            app, ["sandbox", "token", "--product", "auth", "--product", "transactions"]
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["access_token"] == "access-sandbox-1"
        assert transport.payloads[0] == {
            "institution_id": "ins_109508",
            "initial_products": ["auth", "transactions"],
        }
        assert transport.payloads[1] == {"public_token": "public-sandbox-1"}

    @pytest.mark.unit
    def test_sandbox_reset_login_failure_exits_1(
        self,
        runner: CliRunner,
        mock_build_client: MagicMock,
        transport: FakeTransport,
    ) -> None:
        """A false reset_login result exits with an error."""
        transport.queue(json_response({"reset_login": False, "request_id": "r1"}))

        result = runner.invoke(app, ["sandbox", "reset-login", "access-sandbox-1"])

        assert result.exit_code == 1

    @pytest.mark.unit
    def test_api_error_exits_1(
        self,
        runner: CliRunner,
        mock_build_client: MagicMock,
        transport: FakeTransport,
    ) -> None:
        """Plaid errors are reported with exit code 1."""
        transport.queue(
            json_response(
                {
                    "error_type": "INVALID_INPUT",
                    "error_code": "INVALID_API_KEYS",
                    "error_message": "invalid client_id or secret provided",
                },
                status=400,
            )
        )

        result = runner.invoke(app, ["categories"])

        assert result.exit_code == 1
        assert stdout_lines(result.stdout) == []

    @pytest.mark.unit
    def test_missing_credentials_exit_1(
        self, runner: CliRunner, mocker: Any
    ) -> None:
        """Without credentials the command fails before any request."""
        mocker.patch(
            "pyplaid.cli.commands.categories.build_client",
            side_effect=ConfigurationError("Missing required configuration"),
        )

        result = runner.invoke(app, ["categories"])

        assert result.exit_code == 1

    @pytest.mark.unit
    def test_env_file_is_loaded(
        self,
        runner: CliRunner,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        mocker: Any,
    ) -> None:
        """--env-file variables reach the settings used to build the client."""
        # monkeypatch restores both after load_dotenv overwrites them
        monkeypatch.setenv("PLAID_CLIENT_ID", "")
        monkeypatch.setenv("PLAID_SECRET", "")
        env_file = tmp_path / ".env.sandbox"
        env_file.write_text("PLAID_CLIENT_ID=from-env-file\nPLAID_SECRET=s3cret\n")
        transport = FakeTransport(
            responses=[json_response({"categories": [], "request_id": "r1"})]
        )
        mocker.patch("pyplaid.client.HttpxTransport", return_value=transport)

        result = runner.invoke(app, ["--env-file", str(env_file), "categories"])

        assert result.exit_code == 0
        assert transport.requests[0].headers["PLAID-CLIENT-ID"] == "from-env-file"
        assert transport.requests[0].headers["PLAID-SECRET"] == "s3cret"

    @pytest.mark.unit
    def test_env_file_is_loaded_before_logging(
        self,
        runner: CliRunner,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        mock_setup_logging: MagicMock,
        mock_build_client: MagicMock,
        transport: FakeTransport,
    ) -> None:
        """LOG_* variables from --env-file are visible when logging is set up."""
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        env_file = tmp_path / ".env.debug"
        env_file.write_text("LOG_LEVEL=DEBUG\n")
        seen: list[str | None] = []
        mock_setup_logging.side_effect = lambda **_: seen.append(
            os.environ.get("LOG_LEVEL")
        )
        transport.queue(json_response({"categories": [], "request_id": "r1"}))

        result = runner.invoke(app, ["--env-file", str(env_file), "categories"])

        assert result.exit_code == 0
        assert seen == ["DEBUG"]
