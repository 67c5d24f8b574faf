"""Logging configuration for applications using pyplaid.

The library itself only emits DEBUG records through module loggers and never
configures handlers. Applications such as the bundled CLI call
``setup_logging`` once at startup.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

NOISY_LOGGERS = ("httpx", "httpcore", "urllib3")

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CLI_FORMAT = "%(message)s"
# Shows whether a debug record came from the client, transport or pagination
VERBOSE_CLI_FORMAT = "%(levelname)s %(name)s: %(message)s"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseSettings):
    """Logging settings read from ``LOG_*`` environment variables or ``.env``.

    ``LOG_LEVEL``, ``LOG_TO_FILE``, ``LOG_FILE_PATH``, ``LOG_MAX_FILE_SIZE_MB``
    and ``LOG_BACKUP_COUNT`` map onto the fields below.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LOG_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    level: LogLevel = "INFO"
    to_file: bool = False
    file_path: Path = Path("logs/pyplaid.log")
    max_file_size_mb: int = Field(default=50, gt=0)
    backup_count: int = Field(default=5, ge=0)
    force_reconfigure: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


def setup_logging(
    config: LoggingConfig | None = None,
    cli_mode: bool = False,
    verbose: bool = False,
) -> None:
    """Set up logging for an application using pyplaid.

    Console output goes to stderr so that command output on stdout stays
    machine readable.

    Args:
        config: Optional logging configuration. If None, loads from environment.
        cli_mode: If True, print bare messages unless ``verbose`` is set
        verbose: If True, enable DEBUG level logging (overrides config level)
    """
    if config is None:
        config = LoggingConfig()

    level = logging.DEBUG if verbose else getattr(logging, config.level)

    if not cli_mode:
        console_format = FILE_FORMAT
    elif verbose:
        console_format = VERBOSE_CLI_FORMAT
    else:
        console_format = CLI_FORMAT

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(console_format))
    handlers: list[logging.Handler] = [console_handler]

    if config.to_file:
        config.file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=config.force_reconfigure,
    )

    # Request lines from the HTTP stacks duplicate our own debug records
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
