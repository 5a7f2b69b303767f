"""HTTP contract of /api/reports."""

from sqlalchemy.exc import OperationalError

NOISE = '{"complaintType":["Noise - Residential"]}'


def test_healthz(client):
    assert client.get("/healthz").json() == {"status": "ok"}


def test_all_defaults_to_first_page_of_ten(client):
    res = client.get("/api/reports/all")
    assert res.status_code == 200
    body = res.json()
    assert [r["id"] for r in body] == [1, 2, 3, 4]
    assert body[0]["complaintType"] == "Illegal Parking"
    assert body[0]["openDataChannelType"] == "Mobile App"
    assert body[3]["latitude"] == 0.0


def test_all_with_paging_and_filters(client):
    res = client.get("/api/reports/all", params={"limit": "1", "start": "1", "filters": NOISE})
    assert [r["id"] for r in res.json()] == [3]


def test_column_filter(client):
    res = client.get("/api/reports/columnFilter", params={"columnName": "status", "currentFilters": NOISE})
    assert sorted(res.json()) == ["Closed", "In Progress"]


def test_count(client):
    assert client.get("/api/reports/count").json() == 4
    assert client.get("/api/reports/count", params={"currentFilters": NOISE}).json() == 2


def test_malformed_filters_fall_back_to_unfiltered(client):
    assert client.get("/api/reports/count", params={"currentFilters": "{bad json"}).json() == 4


def test_map_display(client):
    body = client.get("/api/reports/mapDisplay", params={"limit": "1"}).json()
    assert body == [[1, "Illegal Parking", "Parking on Sidewalk", "Parking Enforcement", 40.6836, -73.976]]


def test_count_with_colon_in_filter_value(client):
    filters = '{"incidentAddress":["Unit :A"]}'
    res = client.get("/api/reports/count", params={"currentFilters": filters})
    assert res.status_code == 200
    assert res.json() == 0


def test_huge_start_is_400(client):
    res = client.get("/api/reports/all", params={"start": "99999999999999999999"})
    assert res.status_code == 400
    assert "start" in res.json()["detail"]


def test_total_store_failure_is_500(client, seeded_session, monkeypatch):
    def boom(statement, *args, **kwargs):
        raise OperationalError(str(statement), {}, Exception("disk I/O error"))

    monkeypatch.setattr(seeded_session, "execute", boom)
    assert client.get("/api/reports/total").status_code == 500
    assert client.get("/api/reports/1").status_code == 500


def test_pie_chart_and_heat_map(client):
    pie = client.get("/api/reports/pieChart", params={"column": "borough", "currentFilters": NOISE})
    assert pie.json() == ["Brooklyn", "Manhattan"]
    heat = client.get("/api/reports/heatMap", params={"limit": "2", "column": "createdDate"})
    assert heat.json() == ["2025-11-05", "2025-11-05"]


def test_unknown_column_is_400(client):
    res = client.get("/api/reports/pieChart", params={"column": "complaintType FROM report; --"})
    assert res.status_code == 400
    assert "Unknown report column" in res.json()["detail"]


def test_missing_column_is_400(client):
    assert client.get("/api/reports/heatMap").status_code == 400


def test_non_numeric_limit_is_400(client):
    res = client.get("/api/reports/all", params={"limit": "10 OR 1=1"})
    assert res.status_code == 400
    assert "limit" in res.json()["detail"]


def test_execution_fault_is_500(client, seeded_session, monkeypatch):
    def boom(statement, *args, **kwargs):
        raise OperationalError(str(statement), {}, Exception("disk I/O error"))

    monkeypatch.setattr(seeded_session, "execute", boom)
    res = client.get("/api/reports/count")
    assert res.status_code == 500
    assert res.json()["detail"] == "Query failed"


def test_total_and_single_report(client):
    assert client.get("/api/reports/total").json() == 4
    assert client.get("/api/reports/3").json()["borough"] == "Manhattan"
    assert client.get("/api/reports/99").status_code == 404
