from __future__ import annotations

from contextlib import contextmanager
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from database import get_db
from errors import MalformedFilter, QueryExecutionFault, ValidationError
from schemas import ReportOut
from services.report_repository import ReportRepository
from services.reports_service import ReportsService

router = APIRouter(prefix="/api/reports", tags=["reports"])


def _svc(db: Session) -> ReportsService:
    return ReportsService(ReportRepository(db))


@contextmanager
def _http_errors():
    try:
        yield
    except (ValidationError, MalformedFilter) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except QueryExecutionFault as e:
        raise HTTPException(status_code=500, detail="Query failed") from e


@router.get("/all", response_model=list[ReportOut])
def all_reports(
    db: Session = Depends(get_db),
    limit: str = "10",
    start: str = "0",
    filters: str = "",
):
    with _http_errors():
        return _svc(db).list_reports(limit, start, filters)


@router.get("/columnFilter", response_model=list[Any])
def column_filter(
    db: Session = Depends(get_db),
    columnName: str = "",
    currentFilters: str = "",
):
    """Distinct values of one column under the other active filters (table header dropdowns)."""
    with _http_errors():
        return _svc(db).distinct_values(columnName, currentFilters)


@router.get("/count", response_model=int)
def count(
    db: Session = Depends(get_db),
    currentFilters: str = "",
):
    with _http_errors():
        return _svc(db).filtered_count(currentFilters)


@router.get("/mapDisplay", response_model=list[list[Any]])
def map_display(
    db: Session = Depends(get_db),
    limit: str = "5000",
    currentFilters: str = "",
):
    with _http_errors():
        return _svc(db).map_markers(limit, currentFilters)


@router.get("/pieChart", response_model=list[Any])
def pie_chart(
    db: Session = Depends(get_db),
    limit: str = "5000",
    column: str = "",
    currentFilters: str = "",
):
    with _http_errors():
        return _svc(db).chart_series(limit, column, currentFilters)


@router.get("/heatMap", response_model=list[Any])
def heat_map(
    db: Session = Depends(get_db),
    limit: str = "5000",
    column: str = "",
    currentFilters: str = "",
):
    with _http_errors():
        return _svc(db).heat_map_series(limit, column, currentFilters)


@router.get("/total", response_model=int)
def total(db: Session = Depends(get_db)):
    with _http_errors():
        return _svc(db).total_count()


@router.get("/{report_id}", response_model=ReportOut)
def get_report(report_id: int, db: Session = Depends(get_db)):
    with _http_errors():
        row = _svc(db).get_report(report_id)
    if not row:
        raise HTTPException(status_code=404, detail="Report not found")
    return row
