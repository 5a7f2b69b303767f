from __future__ import annotations

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class Report(Base):
    """
    One civic complaint (311 service request).

    Column names are camelCase in the store; the dashboard sends the same
    names back as filter keys and chart columns.
    """

    __tablename__ = "report"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)

    # Free-form strings as exported by the open-data portal; not parsed.
    created_date: Mapped[str | None] = mapped_column("createdDate", String(64), nullable=True)
    closed_date: Mapped[str | None] = mapped_column("closedDate", String(64), nullable=True)

    agency_name: Mapped[str | None] = mapped_column("agencyName", String(255), nullable=True)
    complaint_type: Mapped[str | None] = mapped_column("complaintType", String(255), nullable=True, index=True)
    descriptor_type: Mapped[str | None] = mapped_column("descriptorType", String(255), nullable=True)
    location_type: Mapped[str | None] = mapped_column("locationType", String(255), nullable=True)
    incident_zip: Mapped[str | None] = mapped_column("incidentZip", String(16), nullable=True)
    incident_address: Mapped[str | None] = mapped_column("incidentAddress", String(255), nullable=True)
    address_type: Mapped[str | None] = mapped_column("addressType", String(64), nullable=True)
    city: Mapped[str | None] = mapped_column("city", String(128), nullable=True)
    status: Mapped[str | None] = mapped_column("status", String(64), nullable=True, index=True)
    community_board: Mapped[str | None] = mapped_column("communityBoard", String(128), nullable=True)
    borough: Mapped[str | None] = mapped_column("borough", String(64), nullable=True, index=True)
    open_data_channel_type: Mapped[str | None] = mapped_column("openDataChannelType", String(64), nullable=True)

    latitude: Mapped[float] = mapped_column("latitude", Float, nullable=False, default=0.0)
    longitude: Mapped[float] = mapped_column("longitude", Float, nullable=False, default=0.0)


# Store column identifier -> ORM attribute name. This is the allow-list for
# every caller-supplied column name.
REPORT_COLUMNS: dict[str, str] = {col.name: attr for attr, col in Report.__mapper__.columns.items()}

MAP_MARKER_COLUMNS: tuple[str, ...] = (
    "Id",
    "complaintType",
    "descriptorType",
    "agencyName",
    "latitude",
    "longitude",
)
