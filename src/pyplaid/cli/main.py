"""Main CLI application for pyplaid.

Results are written to stdout as JSON, logs to stderr.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv

from ..config import clear_settings_cache
from ..logging import setup_logging
from .commands import categories, institutions, sandbox, transactions

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="pyplaid",
    help="pyplaid: explore the Plaid API from the command line",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    env_file: Annotated[
        Path | None,
        typer.Option(
            "--env-file",
            "-e",
            help="Load PLAID_* variables from this file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose debug logging",
        ),
    ] = False,
) -> None:
    """Global options for the pyplaid CLI.

    Credentials are read from PLAID_CLIENT_ID and PLAID_SECRET, the target
    environment from PLAID_ENV (sandbox by default). Variables can live in a
    .env file in the working directory or in the file given with --env-file.

    Examples:
      pyplaid institutions search "Chase"
      pyplaid --env-file .env.sandbox sandbox token
      pyplaid -v transactions access-sandbox-xxx --start 2024-01-01 --end 2024-01-31
    """
    # LOG_* entries in the env file must be in place before logging is set up
    if env_file is not None:
        load_dotenv(env_file, override=True)
        clear_settings_cache()

    setup_logging(cli_mode=True, verbose=verbose)

    if env_file is not None:
        logger.debug(f"Loaded environment from {env_file}")


app.add_typer(
    institutions.app, name="institutions", help="Institution lookup commands"
)
app.add_typer(sandbox.app, name="sandbox", help="Sandbox Item commands")
app.command("transactions")(transactions.list_transactions)
app.command("categories")(categories.list_categories)


def main() -> None:
    """Entry point for the pyplaid CLI application."""
    app()


if __name__ == "__main__":
    main()
