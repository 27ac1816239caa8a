from igdb_client.client import Client
from igdb_client.core.errors import (
    DecodeError,
    IGDBError,
    InvalidArgumentError,
    NegativeIDError,
    NoResultsError,
    OutOfRangeError,
    RemoteAPIError,
    RequestConstructionError,
    TransportError,
)
from igdb_client.resources import Endpoint, Game, GameService

__all__ = [
    "Client",
    "DecodeError",
    "Endpoint",
    "Game",
    "GameService",
    "IGDBError",
    "InvalidArgumentError",
    "NegativeIDError",
    "NoResultsError",
    "OutOfRangeError",
    "RemoteAPIError",
    "RequestConstructionError",
    "TransportError",
]
