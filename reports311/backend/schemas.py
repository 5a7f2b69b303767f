"""Response models, serialized with the camelCase keys the dashboard expects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ReportOut(_CamelModel):
    id: int
    created_date: str | None = None
    closed_date: str | None = None
    agency_name: str | None = None
    complaint_type: str | None = None
    descriptor_type: str | None = None
    location_type: str | None = None
    incident_zip: str | None = None
    incident_address: str | None = None
    address_type: str | None = None
    city: str | None = None
    status: str | None = None
    community_board: str | None = None
    borough: str | None = None
    open_data_channel_type: str | None = None
    latitude: float = 0.0
    longitude: float = 0.0
