from __future__ import annotations

from dataclasses import dataclass

from errors import InvalidParameter
from models import MAP_MARKER_COLUMNS

TABLE = "report"
ORDER_COLUMN = "Id"


# Largest OFFSET a 64-bit signed SQL integer can carry.
MAX_OFFSET = 2**63 - 1


@dataclass(frozen=True)
class AssembledQuery:
    operation: str
    sql: str


def parse_limit(value: str | None, *, default: int, maximum: int) -> int:
    """Parse a `limit` query-string value. Empty means `default`."""
    n = _parse_non_negative("limit", value, default)
    if n > maximum:
        raise InvalidParameter("limit", value, f"must be <= {maximum}")
    return n


def parse_offset(value: str | None, *, maximum: int = MAX_OFFSET) -> int:
    n = _parse_non_negative("start", value, 0)
    if n > maximum:
        raise InvalidParameter("start", value, f"must be <= {maximum}")
    return n


def _parse_non_negative(name: str, value: str | None, default: int) -> int:
    s = (value or "").strip()
    if not s:
        return default
    try:
        n = int(s)
    except ValueError as e:
        raise InvalidParameter(name, value, "must be an integer") from e
    if n < 0:
        raise InvalidParameter(name, value, "must be >= 0")
    return n


def _assemble(
    operation: str,
    projection: str,
    predicate: str,
    *,
    ordered: bool = False,
    limit: int | None = None,
    offset: int | None = None,
) -> AssembledQuery:
    parts = [f"SELECT {projection} FROM {TABLE}"]
    if predicate:
        parts.append(f"WHERE {predicate}")
    if ordered:
        parts.append(f"ORDER BY {ORDER_COLUMN}")
    if limit is not None:
        parts.append(f"LIMIT {limit}")
        if offset is not None:
            parts.append(f"OFFSET {offset}")
    return AssembledQuery(operation=operation, sql=" ".join(parts))


# `column` arguments below must already be resolved through filters.resolve_column().


def list_reports_query(predicate: str, limit: int, offset: int) -> AssembledQuery:
    return _assemble("list_reports", "*", predicate, ordered=True, limit=limit, offset=offset)


def distinct_values_query(column: str, predicate: str) -> AssembledQuery:
    return _assemble("distinct_values", f"DISTINCT {column}", predicate)


def filtered_count_query(predicate: str) -> AssembledQuery:
    return _assemble("filtered_count", "COUNT(*)", predicate)


def map_markers_query(predicate: str, limit: int) -> AssembledQuery:
    return _assemble("map_markers", ", ".join(MAP_MARKER_COLUMNS), predicate, ordered=True, limit=limit)


def chart_series_query(column: str, predicate: str, limit: int) -> AssembledQuery:
    return _assemble("chart_series", column, predicate, ordered=True, limit=limit)


def heat_map_series_query(column: str, predicate: str, limit: int) -> AssembledQuery:
    return _assemble("heat_map_series", column, predicate, ordered=True, limit=limit)
