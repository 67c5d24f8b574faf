"""Helpers shared by the pyplaid CLI commands."""

import asyncio
import logging
from collections.abc import Coroutine, Iterable
from typing import Any, TypeVar

import typer
from pydantic import BaseModel, ValidationError

from ..client import Builder, PlaidClient
from ..config import get_settings
from ..errors import PlaidError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def build_client() -> PlaidClient:
    """Create a client from the current settings.

    Raises:
        ConfigurationError: If PLAID_CLIENT_ID or PLAID_SECRET is missing
    """
    settings = get_settings()
    settings.validate_required_credentials()
    logger.debug(f"Using Plaid {settings.environment} environment")
    return Builder.from_settings(settings).build()


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Run a command coroutine, exiting with status 1 on Plaid or settings errors."""
    try:
        return asyncio.run(coro)
    except PlaidError as e:
        logger.error(f"❌ {e}")
        raise typer.Exit(1) from e
    except ValidationError as e:
        logger.error(f"❌ Invalid settings: {e}")
        raise typer.Exit(1) from e


def echo_model(model: BaseModel, indent: int | None = 2) -> None:
    typer.echo(model.model_dump_json(by_alias=True, indent=indent))


def echo_lines(models: Iterable[BaseModel]) -> None:
    """Print one compact JSON document per line."""
    for model in models:
        echo_model(model, indent=None)
