from __future__ import annotations

import json
from typing import Annotated, Any, Callable, Optional

import typer
from pydantic import BaseModel

from igdb_client.client import Client
from igdb_client.core.errors import IGDBError, NoResultsError
from igdb_client.query.options import (
    Order,
    QueryOption,
    fields,
    limit,
    offset,
    sort,
    where,
)

games_app = typer.Typer(no_args_is_help=True)


def _client() -> Client:
    try:
        return Client.from_settings()
    except RuntimeError as e:
        raise typer.BadParameter(str(e)) from e


def _parse_where(expr: str) -> QueryOption:
    """
    Parse a CLI filter:
      - 'rating > 80'
      - 'platforms () 6,48'
      - 'name ~ "Halo"*'
    Integer values are passed as ints, anything else verbatim.
    """
    parts = expr.strip().split(maxsplit=2)
    if len(parts) != 3:
        raise typer.BadParameter(f"Expected 'field operator value', got: {expr!r}")

    field, op, raw = parts
    # quoted values may contain commas
    raw_values = [raw] if '"' in raw else raw.split(",")

    values: list[Any] = []
    for v in (r.strip() for r in raw_values):
        try:
            values.append(int(v))
        except ValueError:
            values.append(v)
    return where(field, op, *values)


def _build_options(
    field: list[str] | None,
    where_: list[str] | None,
    sort_by: str | None,
    desc: bool,
    limit_: int | None,
    offset_: int | None,
) -> list[QueryOption]:
    opts: list[QueryOption] = []
    if field:
        opts.append(fields(*field))
    for expr in where_ or []:
        opts.append(_parse_where(expr))
    if sort_by:
        opts.append(sort(sort_by, Order.DESC if desc else Order.ASC))
    if limit_ is not None:
        opts.append(limit(limit_))
    if offset_ is not None:
        opts.append(offset(offset_))
    return opts


def _echo_models(result: BaseModel | list[BaseModel]) -> None:
    if isinstance(result, list):
        payload: Any = [m.model_dump(mode="json", exclude_none=True) for m in result]
    else:
        payload = result.model_dump(mode="json", exclude_none=True)
    typer.echo(json.dumps(payload, indent=2))


def _run(call: Callable[[Client], Any]) -> Any:
    with _client() as client:
        try:
            return call(client)
        except NoResultsError:
            typer.echo("No results.")
            raise typer.Exit(code=0) from None
        except IGDBError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1) from e


FieldOpt = Annotated[Optional[list[str]], typer.Option("--field", "-f", help="Field to return (repeatable)")]
WhereOpt = Annotated[
    Optional[list[str]],
    typer.Option("--where", "-w", help="Filter 'field operator value' (repeatable)"),
]
SortOpt = Annotated[Optional[str], typer.Option("--sort", help="Field to sort by")]
DescOpt = Annotated[bool, typer.Option("--desc", help="Sort descending")]
LimitOpt = Annotated[Optional[int], typer.Option("--limit", help="Max results (1-500)")]
OffsetOpt = Annotated[Optional[int], typer.Option("--offset", help="Results to skip (0-5000)")]


@games_app.command("get")
def get_game_cmd(
    game_id: Annotated[int, typer.Argument(help="IGDB game id")],
    field: FieldOpt = None,
) -> None:
    """
    Fetch a single game by id.
    """
    opts = _build_options(field, None, None, False, None, None)
    _echo_models(_run(lambda c: c.games.get(game_id, *opts)))


@games_app.command("search")
def search_games_cmd(
    term: Annotated[str, typer.Argument(help="Free-text search term")],
    field: FieldOpt = None,
    where_: WhereOpt = None,
    limit_: LimitOpt = None,
    offset_: OffsetOpt = None,
) -> None:
    opts = _build_options(field, where_, None, False, limit_, offset_)
    _echo_models(_run(lambda c: c.games.search(term, *opts)))


@games_app.command("list")
def list_games_cmd(
    field: FieldOpt = None,
    where_: WhereOpt = None,
    sort_by: SortOpt = None,
    desc: DescOpt = False,
    limit_: LimitOpt = None,
    offset_: OffsetOpt = None,
) -> None:
    """
    List games matching the given filters.

    Example:
      igdb games list --where 'rating > 90' --sort rating --desc --limit 10
    """
    opts = _build_options(field, where_, sort_by, desc, limit_, offset_)
    _echo_models(_run(lambda c: c.games.index(*opts)))


@games_app.command("count")
def count_games_cmd(where_: WhereOpt = None) -> None:
    opts = _build_options(None, where_, None, False, None, None)
    typer.echo(_run(lambda c: c.games.count(*opts)))
