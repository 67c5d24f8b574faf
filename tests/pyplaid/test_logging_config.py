"""Tests for application logging configuration."""

import logging
import sys
from collections.abc import Generator
from pathlib import Path
from typing import Any, cast

import pytest
from pydantic import ValidationError

from pyplaid.logging import LoggingConfig, setup_logging


def _force_config(to_file: bool = False, **kwargs: Any) -> LoggingConfig:
    """Return a LoggingConfig that forces handler replacement."""
    return LoggingConfig(to_file=to_file, force_reconfigure=True, **kwargs)


def _console_handlers() -> list[logging.Handler]:
    return [
        h
        for h in logging.getLogger().handlers
        if isinstance(h, logging.StreamHandler)
        and not isinstance(h, logging.FileHandler)
    ]


class TestSetupLogging:
    """Tests for setup_logging handler configuration."""

    @pytest.fixture(autouse=True)
    def _reset_root_logger(self) -> Generator[None, Any, None]:
        """Remove handlers added during each test to avoid leaking state."""
        root = logging.getLogger()
        original_handlers = list(root.handlers)
        original_level = root.level
        yield
        for handler in root.handlers:
            if handler not in original_handlers:
                handler.close()
        root.handlers = original_handlers
        root.setLevel(original_level)

    @pytest.mark.unit
    def test_console_handler_uses_stderr(self) -> None:
        """Console output goes to stderr so JSON on stdout stays clean."""
        setup_logging(config=_force_config(), cli_mode=True)

        handlers = _console_handlers()
        assert handlers, "Expected at least one StreamHandler"
        for h in handlers:
            stream: object = getattr(cast(Any, h), "stream", None)
            assert stream is sys.stderr

    @pytest.mark.unit
    def test_verbose_enables_debug(self) -> None:
        """--verbose overrides the configured level."""
        setup_logging(config=_force_config(level="WARNING"), verbose=True)

        assert logging.getLogger().level == logging.DEBUG

    @pytest.mark.unit
    def test_configured_level(self) -> None:
        """Without verbose the configured level applies."""
        setup_logging(config=_force_config(level="WARNING"))

        assert logging.getLogger().level == logging.WARNING

    @pytest.mark.unit
    def test_http_loggers_are_quieted(self) -> None:
        """Third-party HTTP loggers are raised to WARNING."""
        setup_logging(config=_force_config(), verbose=True)

        for name in ("httpx", "httpcore", "urllib3"):
            assert logging.getLogger(name).level == logging.WARNING

    @pytest.mark.unit
    def test_verbose_cli_format_names_logger(self) -> None:
        """Verbose CLI output shows which pyplaid module logged the record."""
        setup_logging(config=_force_config(), cli_mode=True, verbose=True)

        record = logging.LogRecord(
            "pyplaid.client", logging.DEBUG, __file__, 1, "POST /item/get", None, None
        )
        handler = logging.getLogger().handlers[0]

        assert handler.format(record) == "DEBUG pyplaid.client: POST /item/get"

    @pytest.mark.unit
    def test_file_handler(self, tmp_path: Path) -> None:
        """File logging creates the directory and a rotating handler."""
        log_path = tmp_path / "logs" / "pyplaid.log"

        setup_logging(config=_force_config(to_file=True, file_path=log_path))

        file_handlers = [
            h
            for h in logging.getLogger().handlers
            if isinstance(h, logging.FileHandler)
        ]
        assert len(file_handlers) == 1
        assert log_path.parent.is_dir()


class TestLoggingConfig:
    """Tests for reading LOG_* settings."""

    @pytest.fixture(autouse=True)
    def isolated_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Run without LOG_* variables or a local .env file."""
        for name in ("LOG_LEVEL", "LOG_TO_FILE", "LOG_FILE_PATH", "LOG_BACKUP_COUNT"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.chdir(tmp_path)

    @pytest.mark.unit
    def test_reads_environment(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """LOG_* variables are read and the level is upper-cased."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_TO_FILE", "true")
        monkeypatch.setenv("LOG_FILE_PATH", str(tmp_path / "x.log"))
        monkeypatch.setenv("LOG_BACKUP_COUNT", "2")

        config = LoggingConfig()

        assert config.level == "DEBUG"
        assert config.to_file
        assert config.file_path == tmp_path / "x.log"
        assert config.backup_count == 2

    @pytest.mark.unit
    def test_reads_dotenv_file(self, tmp_path: Path) -> None:
        """LOG_* entries in .env apply next to PLAID_* entries."""
        (tmp_path / ".env").write_text("PLAID_CLIENT_ID=c\nLOG_LEVEL=warning\n")

        assert LoggingConfig().level == "WARNING"

    @pytest.mark.unit
    def test_file_logging_off_by_default(self) -> None:
        """Without LOG_TO_FILE nothing is written to disk."""
        config = LoggingConfig()

        assert not config.to_file
        assert config.level == "INFO"

    @pytest.mark.unit
    def test_rejects_unknown_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Only standard level names are accepted."""
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        with pytest.raises(ValidationError):
            LoggingConfig()


class TestLibraryLogging:
    """Tests for the library's own logger."""

    @pytest.mark.unit
    def test_package_logger_has_null_handler(self) -> None:
        """Importing pyplaid never prints 'no handler' warnings."""
        import pyplaid  # noqa: F401

        handlers = logging.getLogger("pyplaid").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)
