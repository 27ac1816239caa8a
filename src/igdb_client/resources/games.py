from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from igdb_client.core.errors import InvalidArgumentError, NegativeIDError
from igdb_client.query import options as query_options
from igdb_client.query.options import Operator, QueryOption
from igdb_client.resources.endpoints import Endpoint
from igdb_client.resources.models import Count, Game

if TYPE_CHECKING:
    from igdb_client.client import Client


def _check_id(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"ID must be an int, got {value!r}")
    if value < 0:
        raise NegativeIDError(value)
    return value


@dataclass(frozen=True)
class GameService:
    """Read-only view over the client for the `games` endpoint."""

    client: Client

    def get(self, id: int, *options: QueryOption) -> Game:
        game_id = _check_id(id)
        games = self.client.get(
            Endpoint.GAMES,
            list[Game],
            *options,
            query_options.where("id", Operator.EQUALS, game_id),
        )
        return games[0]

    def list(self, ids: list[int], *options: QueryOption) -> list[Game]:
        if not ids:
            raise InvalidArgumentError("at least one ID is required")
        checked = [_check_id(i) for i in ids]
        return self.client.get(
            Endpoint.GAMES,
            list[Game],
            *options,
            query_options.where("id", Operator.EQUALS, *checked),
        )

    def index(self, *options: QueryOption) -> list[Game]:
        return self.client.get(Endpoint.GAMES, list[Game], *options)

    def search(self, term: str, *options: QueryOption) -> list[Game]:
        return self.client.get(
            Endpoint.GAMES,
            list[Game],
            query_options.search(term),
            *options,
        )

    def count(self, *options: QueryOption) -> int:
        result = self.client.get(Endpoint.GAMES_COUNT, Count, *options)
        return result.count
