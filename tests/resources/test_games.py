from __future__ import annotations

import pytest

from igdb_client.core.errors import InvalidArgumentError, NegativeIDError, NoResultsError
from igdb_client.query.options import fields, limit, sort, where
from igdb_client.resources.games import GameService
from igdb_client.resources.models import Game


def test_games_accessor_is_a_view_over_the_client(make_client, respond_with) -> None:
    client = make_client(respond_with(b"[]"))

    assert isinstance(client.games, GameService)
    assert client.games.client is client


def test_get_by_id(make_client, respond_with, recorded) -> None:
    client = make_client(respond_with(b'[{"id":1942,"name":"The Witcher 3: Wild Hunt"}]'))

    game = client.games.get(1942, fields("name"))

    assert game == Game(id=1942, name="The Witcher 3: Wild Hunt")
    assert recorded[0].content == b"fields name; where id = 1942;"


def test_get_negative_id_fails_before_request(make_client, respond_with, recorded) -> None:
    client = make_client(respond_with(b'[{"id":1}]'))

    with pytest.raises(NegativeIDError):
        client.games.get(-1)

    assert recorded == []


def test_get_missing_game(make_client, respond_with) -> None:
    client = make_client(respond_with(b"[]"))

    with pytest.raises(NoResultsError):
        client.games.get(999999)


def test_list_by_ids(make_client, respond_with, recorded) -> None:
    client = make_client(respond_with(b'[{"id":1},{"id":2},{"id":3}]'))

    games = client.games.list([1, 2, 3])

    assert [g.id for g in games] == [1, 2, 3]
    assert recorded[0].content == b"fields *; where id = (1,2,3);"


@pytest.mark.parametrize(
    ("ids", "error"),
    [([1, -2, 3], NegativeIDError), ([], InvalidArgumentError), (["7"], InvalidArgumentError)],
)
def test_list_rejects_bad_ids(make_client, respond_with, recorded, ids, error) -> None:
    client = make_client(respond_with(b'[{"id":1}]'))

    with pytest.raises(error):
        client.games.list(ids)

    assert recorded == []


def test_index(make_client, respond_with, recorded) -> None:
    client = make_client(respond_with(b'[{"id":1,"rating":95.5},{"id":2,"rating":91.0}]'))

    games = client.games.index(where("rating", ">", 90), sort("rating", "desc"), limit(2))

    assert [g.rating for g in games] == [95.5, 91.0]
    assert recorded[0].content == b"fields *; where rating > 90; sort rating desc; limit 2;"


def test_search(make_client, respond_with, recorded) -> None:
    client = make_client(respond_with(b'[{"id":1025,"name":"Zelda II: The Adventure of Link"}]'))

    games = client.games.search("zelda", fields("name"), limit(2))

    assert games[0].name == "Zelda II: The Adventure of Link"
    assert recorded[0].content == b'search "zelda"; fields name; limit 2;'


def test_count(make_client, respond_with, recorded) -> None:
    client = make_client(respond_with(b'{"count": 42}'))

    assert client.games.count(where("rating", ">", 90)) == 42
    assert str(recorded[0].url).endswith("/games/count")
