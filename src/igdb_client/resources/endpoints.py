class Endpoint:
    """Paths of the catalog collections, relative to the service root URL."""

    GAMES = "games"
    GAMES_COUNT = "games/count"
