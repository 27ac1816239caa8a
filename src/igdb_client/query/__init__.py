from igdb_client.query.options import (
    Operator,
    Order,
    Query,
    QueryOption,
    compose,
    exclude,
    fields,
    limit,
    offset,
    search,
    sort,
    unwrap_options,
    where,
)

__all__ = [
    "Operator",
    "Order",
    "Query",
    "QueryOption",
    "compose",
    "exclude",
    "fields",
    "limit",
    "offset",
    "search",
    "sort",
    "unwrap_options",
    "where",
]
