from __future__ import annotations

from typing import Any

from config import settings
from logging_config import get_logger
from models import Report
from services import query_builder as qb
from services.filters import predicate_from_json, resolve_column
from services.query_builder import AssembledQuery
from services.report_repository import ReportRepository

logger = get_logger(__name__)

DEFAULT_PAGE_LIMIT = 10
DEFAULT_SERIES_LIMIT = 5000


class ReportsService:
    """
    Read-only query surface for the dashboard.

    Every operation takes the raw query-string values, builds one SQL
    statement and hands back whatever the repository returns. Validation
    errors (unknown column, bad limit/start) and execution faults propagate.
    """

    def __init__(
        self,
        repo: ReportRepository,
        *,
        max_limit: int | None = None,
        strict_filters: bool | None = None,
    ) -> None:
        self.repo = repo
        self.max_limit = settings.max_query_limit if max_limit is None else max_limit
        self.strict_filters = settings.strict_filters if strict_filters is None else strict_filters

    def _predicate(self, filters: str | None) -> str:
        return predicate_from_json(filters, strict=self.strict_filters)

    def _limit(self, limit: str | None, default: int) -> int:
        return qb.parse_limit(limit, default=default, maximum=self.max_limit)

    @staticmethod
    def _trace(q: AssembledQuery) -> None:
        logger.info("Executing SQL: %s", q.sql)

    def list_reports(self, limit: str | None, start: str | None, filters: str | None) -> list[Report]:
        q = qb.list_reports_query(
            self._predicate(filters),
            self._limit(limit, DEFAULT_PAGE_LIMIT),
            qb.parse_offset(start),
        )
        self._trace(q)
        return self.repo.fetch_reports(q)

    def distinct_values(self, column: str | None, filters: str | None) -> list[Any]:
        q = qb.distinct_values_query(resolve_column(column), self._predicate(filters))
        self._trace(q)
        return self.repo.fetch_column(q)

    def filtered_count(self, filters: str | None) -> int:
        q = qb.filtered_count_query(self._predicate(filters))
        self._trace(q)
        return self.repo.fetch_count(q)

    def map_markers(self, limit: str | None, filters: str | None) -> list[list[Any]]:
        q = qb.map_markers_query(self._predicate(filters), self._limit(limit, DEFAULT_SERIES_LIMIT))
        self._trace(q)
        return self.repo.fetch_markers(q)

    def chart_series(self, limit: str | None, column: str | None, filters: str | None) -> list[Any]:
        q = qb.chart_series_query(
            resolve_column(column), self._predicate(filters), self._limit(limit, DEFAULT_SERIES_LIMIT)
        )
        self._trace(q)
        return self.repo.fetch_column(q)

    def heat_map_series(self, limit: str | None, column: str | None, filters: str | None) -> list[Any]:
        q = qb.heat_map_series_query(
            resolve_column(column), self._predicate(filters), self._limit(limit, DEFAULT_SERIES_LIMIT)
        )
        self._trace(q)
        return self.repo.fetch_column(q)

    def total_count(self) -> int:
        return self.repo.total_count()

    def get_report(self, report_id: int) -> Report | None:
        return self.repo.get_report(report_id)
