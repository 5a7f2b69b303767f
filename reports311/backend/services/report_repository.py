"""Runs assembled report queries against the store and maps the rows."""

from __future__ import annotations

from typing import Any

from sqlalchemy import func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from errors import QueryExecutionFault
from logging_config import get_logger
from models import MAP_MARKER_COLUMNS, Report
from services.query_builder import AssembledQuery

logger = get_logger(__name__)

# Positions of the coordinates in a map marker row.
_COORD_INDEXES = (MAP_MARKER_COLUMNS.index("latitude"), MAP_MARKER_COLUMNS.index("longitude"))


def _text(q: AssembledQuery):
    # Quoted filter values may contain ":word"; text() would read that as a bind parameter.
    return text(q.sql.replace(":", r"\:"))


class ReportRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def _execute(self, operation: str, sql: str, statement):
        try:
            return self.db.execute(statement)
        except SQLAlchemyError as e:
            logger.error("%s failed: %s | SQL: %s", operation, e, sql)
            raise QueryExecutionFault(sql, e) from e

    def _run(self, q: AssembledQuery, statement):
        return self._execute(q.operation, q.sql, statement)

    def fetch_reports(self, q: AssembledQuery) -> list[Report]:
        stmt = select(Report).from_statement(_text(q))
        return list(self._run(q, stmt).scalars().all())

    def fetch_markers(self, q: AssembledQuery) -> list[list[Any]]:
        """Rows as positional lists: Id, complaintType, descriptorType, agencyName, latitude, longitude."""
        markers = []
        for row in self._run(q, _text(q)).all():
            marker = list(row)
            for i in _COORD_INDEXES:
                if marker[i] is None:
                    marker[i] = 0.0
            markers.append(marker)
        return markers

    def fetch_column(self, q: AssembledQuery) -> list[Any]:
        return list(self._run(q, _text(q)).scalars().all())

    def fetch_count(self, q: AssembledQuery) -> int:
        return int(self._run(q, _text(q)).scalar_one())

    def total_count(self) -> int:
        stmt = select(func.count()).select_from(Report)
        return int(self._execute("total_count", str(stmt), stmt).scalar_one())

    def get_report(self, report_id: int) -> Report | None:
        stmt = select(Report).where(Report.id == report_id)
        return self._execute("get_report", str(stmt), stmt).scalar_one_or_none()
