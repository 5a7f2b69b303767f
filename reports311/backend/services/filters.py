"""
Dashboard filter JSON -> SQL predicate.

The front-end sends the active filters as one query-string parameter, e.g.

    {"complaintType": ["Noise - Residential"], "borough": ["BROOKLYN", "QUEENS"]}

which becomes

    (complaintType IN ('Noise - Residential')) AND (borough IN ('BROOKLYN', 'QUEENS'))
"""

from __future__ import annotations

import json

from errors import MalformedFilter, UnknownColumn
from logging_config import get_logger
from models import REPORT_COLUMNS

logger = get_logger(__name__)

# Column name -> allowed values, in the order the client sent them.
FilterSpec = dict[str, list[str]]

_COLUMNS_BY_LOWER = {c.lower(): c for c in REPORT_COLUMNS}


def resolve_column(name: str | None) -> str:
    """Map a caller-supplied column name onto the canonical store identifier."""
    key = (name or "").strip()
    if key in REPORT_COLUMNS:
        return key
    canonical = _COLUMNS_BY_LOWER.get(key.lower())
    if canonical is None:
        raise UnknownColumn(key)
    return canonical


def parse_filters(raw: str | None) -> FilterSpec:
    if raw is None or not raw.strip():
        return {}

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedFilter(f"filters is not valid JSON: {e.msg}") from e

    if not isinstance(data, dict):
        raise MalformedFilter("filters must be a JSON object")

    spec: FilterSpec = {}
    for column, values in data.items():
        if values is None:
            spec[column] = []
            continue
        if not isinstance(values, list):
            raise MalformedFilter(f"filter {column!r} must be an array of strings")
        if not all(isinstance(v, str) for v in values):
            raise MalformedFilter(f"filter {column!r} must contain only strings")
        spec[column] = list(values)
    return spec


def quote_literal(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def unescape_literal(literal: str) -> str:
    """Inverse of quote_literal()."""
    if len(literal) < 2 or literal[0] != "'" or literal[-1] != "'":
        raise ValueError(f"not a quoted literal: {literal!r}")
    return literal[1:-1].replace("''", "'")


def build_predicate(spec: FilterSpec) -> str:
    clauses: list[str] = []
    for column, values in spec.items():
        if not values:
            continue
        ident = resolve_column(column)
        in_list = ", ".join(quote_literal(v) for v in values)
        clauses.append(f"({ident} IN ({in_list}))")
    return " AND ".join(clauses)


def predicate_from_json(raw: str | None, *, strict: bool = False) -> str:
    """
    Parse + build in one step.

    A malformed filter string degrades to "no filter" (empty predicate) unless
    `strict` is set, in which case MalformedFilter propagates. Unknown column
    names always propagate.
    """
    try:
        spec = parse_filters(raw)
    except MalformedFilter as e:
        if strict:
            raise
        logger.warning("Ignoring malformed filters %r: %s", raw, e)
        return ""
    return build_predicate(spec)
