from __future__ import annotations


class IGDBError(Exception):
    """Base class for every error raised by igdb_client."""


class InvalidArgumentError(IGDBError, ValueError):
    """A query option or accessor argument failed validation before any request was made."""


class NegativeIDError(InvalidArgumentError):
    def __init__(self, value: int | float) -> None:
        super().__init__(f"negative ID: {value}")
        self.value = value


class OutOfRangeError(InvalidArgumentError):
    def __init__(self, name: str, value: int, low: int, high: int) -> None:
        super().__init__(f"{name} must be within [{low}, {high}], got {value}")
        self.name = name
        self.value = value


class RequestConstructionError(IGDBError):
    pass


class TransportError(IGDBError):
    pass


class NoResultsError(IGDBError):
    """The service answered successfully but no records matched the query."""

    def __init__(self, message: str = "no results") -> None:
        super().__init__(message)


class RemoteAPIError(IGDBError):
    """The service reported an error (status + message) in the response body or HTTP status."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(f"IGDB returned status {status}: {message}")
        self.status = status
        self.message = message


class DecodeError(IGDBError):
    pass
