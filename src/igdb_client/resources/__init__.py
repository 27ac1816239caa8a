from igdb_client.resources.endpoints import Endpoint
from igdb_client.resources.games import GameService
from igdb_client.resources.models import Count, Game

__all__ = [
    "Count",
    "Endpoint",
    "Game",
    "GameService",
]
