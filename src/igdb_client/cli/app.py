from __future__ import annotations

import logging
from typing import Annotated

import typer

from igdb_client.cli.games import games_app

app = typer.Typer(no_args_is_help=True)
app.add_typer(games_app, name="games")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log requests to stderr")] = False,
) -> None:
    """
    Query the IGDB catalog. Reads IGDB_API_KEY from the environment or .env file.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
