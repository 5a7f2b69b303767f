from __future__ import annotations

import csv
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.orm import Session

from logging_config import get_logger
from models import Report

logger = get_logger(__name__)


def _normalize_header(h: str) -> str:
    return h.strip().lower().replace(" ", "").replace("_", "")


def _parse_float(value: str | None) -> float:
    s = (value or "").strip()
    if not s:
        return 0.0
    try:
        return float(s)
    except ValueError:
        return 0.0


# normalized CSV header -> Report attribute. Accepts both our camelCase
# export and the NYC Open Data 311 column titles.
_HEADER_ALIASES: dict[str, str] = {
    "createddate": "created_date",
    "closeddate": "closed_date",
    "agencyname": "agency_name",
    "complainttype": "complaint_type",
    "descriptor": "descriptor_type",
    "descriptortype": "descriptor_type",
    "locationtype": "location_type",
    "incidentzip": "incident_zip",
    "incidentaddress": "incident_address",
    "addresstype": "address_type",
    "city": "city",
    "status": "status",
    "communityboard": "community_board",
    "borough": "borough",
    "opendatachanneltype": "open_data_channel_type",
    "latitude": "latitude",
    "longitude": "longitude",
}


@dataclass(frozen=True)
class SeedResult:
    csv_path: str
    inserted: int
    skipped: int


class SeedService:
    def has_any_data(self, db: Session) -> bool:
        return db.scalar(select(Report.id).limit(1)) is not None

    def ingest_csv_into_db(self, db: Session, csv_path: str) -> SeedResult:
        inserted = 0
        skipped = 0

        with open(csv_path, "r", newline="", encoding="utf-8-sig") as f:
            reader = csv.DictReader(f)
            if not reader.fieldnames:
                raise ValueError("CSV has no headers")

            columns: dict[str, str] = {}
            for h in reader.fieldnames:
                attr = _HEADER_ALIASES.get(_normalize_header(h))
                if attr and attr not in columns.values():
                    columns[h] = attr
            if "complaint_type" not in columns.values():
                raise ValueError("CSV must include a complaint type column (case-insensitive).")

            for row in reader:
                values: dict[str, object] = {}
                for header, attr in columns.items():
                    raw = row.get(header)
                    if attr in ("latitude", "longitude"):
                        values[attr] = _parse_float(raw)
                    else:
                        values[attr] = (raw or "").strip() or None
                if not values.get("complaint_type"):
                    skipped += 1
                    continue
                db.add(Report(**values))
                inserted += 1

        db.flush()
        logger.info("Seeded %d reports from %s (skipped %d)", inserted, csv_path, skipped)
        return SeedResult(csv_path=csv_path, inserted=inserted, skipped=skipped)
