"""Pytest configuration and fixtures."""

import os

# Must be set before config/database are imported anywhere.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_SAMPLE_DATA"] = "false"
os.environ["STRICT_FILTERS"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from database import get_db, make_engine
from models import Base, Report


def sample_reports():
    return [
        Report(
            complaint_type="Illegal Parking",
            descriptor_type="Parking on Sidewalk",
            agency_name="Parking Enforcement",
            location_type="Sidewalk",
            incident_address="200 Flatbush Ave",
            incident_zip="11217",
            address_type="Residential",
            city="New York",
            status="Open",
            created_date="2025-11-05",
            closed_date="2025-11-12",
            community_board="10 Brooklyn",
            borough="Brooklyn",
            open_data_channel_type="Mobile App",
            latitude=40.6836,
            longitude=-73.9760,
        ),
        Report(
            complaint_type="Noise - Residential",
            descriptor_type="Banging/Pounding",
            agency_name="New York City Police Department",
            location_type="Residential Building/House",
            incident_address="300 Flatbush Ave",
            incident_zip="11212",
            address_type="ADDRESS",
            city="BROOKLYN",
            status="In Progress",
            created_date="2025-11-05",
            closed_date="2025-11-12",
            community_board="10 Brooklyn",
            borough="Brooklyn",
            open_data_channel_type="Mobile App",
            latitude=40.6836,
            longitude=-73.9760,
        ),
        Report(
            complaint_type="Noise - Residential",
            descriptor_type="Loud Music/Party",
            agency_name="New York City Police Department",
            city="NEW YORK",
            status="Closed",
            borough="Manhattan",
            created_date="2025-11-06",
            latitude=40.8113,
            longitude=-73.9530,
        ),
        Report(
            complaint_type="Street Condition",
            descriptor_type="Pothole",
            agency_name="Department of Transportation",
            incident_address="O'Brien Pl",
            city="BRONX",
            status="Open",
            borough="Bronx",
            created_date="2025-11-07",
        ),
    ]


@pytest.fixture
def engine():
    eng = make_engine("sqlite://")
    Base.metadata.create_all(eng)
    try:
        yield eng
    finally:
        eng.dispose()


@pytest.fixture
def session(engine):
    """Empty in-memory report table."""
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded_session(session):
    session.add_all(sample_reports())
    session.commit()
    return session


class RecordingRepository:
    """Stands in for ReportRepository: records SQL, returns canned results."""

    def __init__(self, result=None):
        self.result = [] if result is None else result
        self.queries = []

    def _record(self, q):
        self.queries.append(q)
        return self.result

    fetch_reports = _record
    fetch_markers = _record
    fetch_column = _record

    def fetch_count(self, q):
        self.queries.append(q)
        return self.result if isinstance(self.result, int) else len(self.result)

    @property
    def last_sql(self):
        return self.queries[-1].sql


@pytest.fixture
def recording_repo():
    return RecordingRepository()


@pytest.fixture
def client(seeded_session):
    from main import app

    def _override():
        yield seeded_session

    app.dependency_overrides[get_db] = _override
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
