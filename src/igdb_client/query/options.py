from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Callable, Union

from igdb_client.core.errors import InvalidArgumentError, NegativeIDError, OutOfRangeError

LIMIT_MIN = 1
LIMIT_MAX = 500
OFFSET_MAX = 5000

FilterValue = Union[str, int, float, bool, None]


class Order(str, Enum):
    ASC = "asc"
    DESC = "desc"


class Operator(str, Enum):
    EQUALS = "="
    NOT_EQUALS = "!="
    GREATER_THAN = ">"
    GREATER_THAN_EQUAL = ">="
    LESS_THAN = "<"
    LESS_THAN_EQUAL = "<="
    CASE_INSENSITIVE_EQUALS = "~"
    CASE_INSENSITIVE_NOT_EQUALS = "!~"

    # Array fields
    CONTAINS_ALL = "[]"
    NOT_CONTAINS_ALL = "![]"
    CONTAINS_AT_LEAST = "()"
    NOT_CONTAINS_AT_LEAST = "!()"
    EXACT_CONTAINS = "{}"


# operator -> (prefix, open, close) rendered as `field = <prefix><open>values<close>`
_CONTAINER_OPERATORS: dict[Operator, tuple[str, str, str]] = {
    Operator.CONTAINS_ALL: ("", "[", "]"),
    Operator.NOT_CONTAINS_ALL: ("!", "[", "]"),
    Operator.CONTAINS_AT_LEAST: ("", "(", ")"),
    Operator.NOT_CONTAINS_AT_LEAST: ("!", "(", ")"),
    Operator.EXACT_CONTAINS: ("", "{", "}"),
}


@dataclasses.dataclass
class Query:
    """
    Accumulator for the Apicalypse query sent as the request body.

    Options mutate it in order; `encode()` renders the clauses in a fixed order
    so the same option sequence always produces the same body.
    """

    fields: list[str] = dataclasses.field(default_factory=list)
    exclude: list[str] = dataclasses.field(default_factory=list)
    filters: list[str] = dataclasses.field(default_factory=list)
    sort: tuple[str, Order] | None = None
    limit: int | None = None
    offset: int | None = None
    search: str | None = None

    def encode(self) -> str:
        clauses: list[str] = []
        if self.search is not None:
            escaped = self.search.replace("\\", "\\\\").replace('"', '\\"')
            clauses.append(f'search "{escaped}";')
        clauses.append(f"fields {','.join(self.fields) if self.fields else '*'};")
        if self.exclude:
            clauses.append(f"exclude {','.join(self.exclude)};")
        if self.filters:
            clauses.append(f"where {' & '.join(self.filters)};")
        if self.sort is not None:
            clauses.append(f"sort {self.sort[0]} {self.sort[1].value};")
        if self.limit is not None:
            clauses.append(f"limit {self.limit};")
        if self.offset is not None:
            clauses.append(f"offset {self.offset};")
        return " ".join(clauses)


QueryOption = Callable[[Query], None]


def _clean_name(name: object, *, what: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgumentError(f"{what} must be a non-empty string, got {name!r}")
    cleaned = name.strip()
    if any(c in cleaned for c in ",;&"):
        raise InvalidArgumentError(f"{what} contains a reserved character: {name!r}")
    return cleaned


def _clean_names(names: tuple[str, ...], *, what: str) -> list[str]:
    if not names:
        raise InvalidArgumentError(f"at least one {what} is required")
    return [_clean_name(n, what=what) for n in names]


def _format_value(value: FilterValue) -> str:
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float, str)):
        return str(value)
    raise InvalidArgumentError(f"unsupported filter value type: {type(value).__name__}")


def _check_int(name: str, n: object) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(f"{name} must be an int, got {n!r}")
    return n


def fields(*names: str) -> QueryOption:
    """Select the fields returned for each record. Replaces any earlier selection."""

    def apply(query: Query) -> None:
        query.fields = _clean_names(names, what="field")

    return apply


def exclude(*names: str) -> QueryOption:
    def apply(query: Query) -> None:
        query.exclude = _clean_names(names, what="excluded field")

    return apply


def where(field: str, operator: Operator | str, *values: FilterValue) -> QueryOption:
    """
    Add a filter predicate. Filters are additive and joined with `&`.

    Strings are rendered as given, so string literals must carry their own quotes:
      where("name", "~", '*"zelda"*')
    Several values are rendered as a tuple (`(1,2,3)`) for the scalar operators and
    in the bracket style of the container operators otherwise.
    """

    def apply(query: Query) -> None:
        name = _clean_name(field, what="filter field")
        try:
            op = Operator(operator)
        except ValueError as e:
            raise InvalidArgumentError(f"unknown filter operator: {operator!r}") from e

        if not values:
            raise InvalidArgumentError(f"filter on '{name}' requires at least one value")

        if name == "id":
            for v in values:
                if isinstance(v, (int, float)) and not isinstance(v, bool) and v < 0:
                    raise NegativeIDError(v)

        rendered = ",".join(_format_value(v) for v in values)

        if op in _CONTAINER_OPERATORS:
            prefix, open_, close = _CONTAINER_OPERATORS[op]
            query.filters.append(f"{name} = {prefix}{open_}{rendered}{close}")
        elif len(values) > 1:
            query.filters.append(f"{name} {op.value} ({rendered})")
        else:
            query.filters.append(f"{name} {op.value} {rendered}")

    return apply


def sort(field: str, order: Order | str = Order.ASC) -> QueryOption:
    def apply(query: Query) -> None:
        name = _clean_name(field, what="sort field")
        try:
            query.sort = (name, Order(order))
        except ValueError as e:
            raise InvalidArgumentError(f"unknown sort order: {order!r}") from e

    return apply


def limit(n: int) -> QueryOption:
    def apply(query: Query) -> None:
        value = _check_int("limit", n)
        if not LIMIT_MIN <= value <= LIMIT_MAX:
            raise OutOfRangeError("limit", value, LIMIT_MIN, LIMIT_MAX)
        query.limit = value

    return apply


def offset(n: int) -> QueryOption:
    def apply(query: Query) -> None:
        value = _check_int("offset", n)
        if not 0 <= value <= OFFSET_MAX:
            raise OutOfRangeError("offset", value, 0, OFFSET_MAX)
        query.offset = value

    return apply


def search(term: str) -> QueryOption:
    def apply(query: Query) -> None:
        if not isinstance(term, str) or not term.strip():
            raise InvalidArgumentError(f"search term must be a non-empty string, got {term!r}")
        query.search = term.strip()

    return apply


def compose(*options: QueryOption) -> QueryOption:
    """Bundle several options into one, applied in the given order."""

    def apply(query: Query) -> None:
        for option in options:
            option(query)

    return apply


def unwrap_options(*options: QueryOption) -> Query:
    """
    Apply options in order to a fresh Query.

    The first invalid option raises and the partially built Query is discarded.
    """
    query = Query()
    for option in options:
        option(query)
    return query
