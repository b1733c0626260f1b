"""
Test the HTTP endpoints and error envelopes.
"""
import sqlite3

from fastapi.testclient import TestClient

from pharmacodb.api import create_app
from pharmacodb.config import PharmacoDBSettings
from pharmacodb.database import ConnectionPool


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_list_cell_lines(client):
    response = client.get("/cell_lines")
    assert response.status_code == 200
    body = response.json()
    assert body["description"] == "List of all cell lines in pharmacodb"
    assert body["data"] == [
        {"id": 1, "name": "A549"},
        {"id": 2, "name": "MCF7"},
        {"id": 3, "name": "SK-MEL-28"},
    ]


def test_cell_line_stats(client):
    response = client.get("/cell_lines/stats")
    assert response.status_code == 200
    assert response.json()["data"] == [
        {"dataset": {"id": 1, "name": "CCLE"}, "count": 1},
        {"dataset": {"id": 2, "name": "GDSC1000"}, "count": 3},
    ]


def test_tissues_and_stats(client):
    tissues = client.get("/tissues").json()
    assert [t["name"] for t in tissues["data"]] == ["lung", "breast", "skin"]

    stats = client.get("/tissues/stats").json()
    assert stats["description"] == "Number of tissues tested in each dataset"
    assert [s["count"] for s in stats["data"]] == [1, 3]


def test_drugs_and_datasets(client):
    assert len(client.get("/drugs").json()["data"]) == 3
    assert [s["count"] for s in client.get("/drugs/stats").json()["data"]] == [2, 2]
    assert client.get("/datasets").json()["data"][1] == {"id": 2, "name": "GDSC1000"}


def test_get_single_entities(client):
    assert client.get("/cell_lines/2").json() == {"id": 2, "name": "MCF7"}
    assert client.get("/tissues/1").json() == {"id": 1, "name": "lung"}
    assert client.get("/drugs/Erlotinib", params={"type": "name"}).json() == {"id": 2, "name": "Erlotinib"}
    assert client.get("/datasets/CCLE", params={"type": "name"}).json() == {"id": 1, "name": "CCLE"}


def test_unknown_entity_is_404_envelope(client):
    response = client.get("/cell_lines/999")
    assert response.status_code == 404
    assert response.json() == {"error": {"code": 404, "message": "Cell line not found"}}


def test_invalid_type_is_400_envelope(client):
    response = client.get("/drugs/1", params={"type": "smiles"})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == 400


def test_list_experiments_paginated(client):
    response = client.get("/experiments", params={"page": 1, "limit": 2})
    assert response.status_code == 200
    assert [e["id"] for e in response.json()] == [1, 2]

    response = client.get("/experiments", params={"page": 3, "limit": 2})
    assert [e["id"] for e in response.json()] == [5]


def test_list_experiments_defaults(client):
    experiments = client.get("/experiments").json()
    assert [e["id"] for e in experiments] == [1, 2, 3, 4, 5]
    assert experiments[0]["cell"] == {"id": 1, "name": "A549"}
    assert experiments[0]["dose_responses"] == []


def test_page_beyond_data_is_empty_list(client):
    response = client.get("/experiments", params={"page": 50, "limit": 10})
    assert response.status_code == 200
    assert response.json() == []


def test_bad_pagination_is_400(client):
    assert client.get("/experiments", params={"page": 0}).status_code == 400
    assert client.get("/experiments", params={"limit": -1}).status_code == 400
    # max_page_limit is 100 in the test settings
    response = client.get("/experiments", params={"limit": 101})
    assert response.status_code == 400
    assert response.json() == {"error": {"code": 400, "message": "limit must not exceed 100"}}


def test_non_integer_page_is_400_envelope(client):
    response = client.get("/experiments", params={"page": "first"})
    assert response.status_code == 400
    body = response.json()
    assert body["error"]["code"] == 400
    assert "page" in body["error"]["message"]


def test_get_experiment(client):
    response = client.get("/experiments/2")
    assert response.status_code == 200
    body = response.json()
    assert body["dataset"] == {"id": 2, "name": "GDSC1000"}
    assert body["dose_responses"] == [
        {"dose": 0.5, "response": 95.5},
        {"dose": 5.0, "response": 40.1},
    ]


def test_get_unknown_experiment(client):
    response = client.get("/experiments/77")
    assert response.status_code == 404
    assert response.json() == {"error": {"code": 404, "message": "Experiment not found"}}


def test_cell_drug_combination(client):
    response = client.get("/cell_lines/1/drugs/1")
    assert response.status_code == 200
    experiments = response.json()
    assert [e["id"] for e in experiments] == [1, 2]
    assert all(e["cell"]["id"] == 1 and e["drug"]["id"] == 1 for e in experiments)
    assert [dr["dose"] for dr in experiments[0]["dose_responses"]] == [0.1, 1.0, 10.0]


def test_cell_drug_combination_by_name(client):
    response = client.get("/cell_lines/SK-MEL-28/drugs/Doxorubicin", params={"type": "name"})
    assert response.status_code == 200
    assert [e["id"] for e in response.json()] == [5]


def test_cell_dataset_combination(client):
    response = client.get("/cell_lines/1/datasets/2")
    assert response.status_code == 200
    experiments = response.json()
    assert [e["id"] for e in experiments] == [2]
    assert experiments[0]["dataset"] == {"id": 2, "name": "GDSC1000"}


def test_combination_unknown_entity(client):
    response = client.get("/cell_lines/1/drugs/404")
    assert response.status_code == 404
    assert response.json() == {"error": {"code": 404, "message": "Drug 404 not found"}}


def test_unknown_route_uses_envelope(client):
    response = client.get("/compounds")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == 404


def test_database_failure_is_private(tmp_path, error_sink):
    """Driver errors reach the sink; the caller only sees a generic 500."""
    empty_db = tmp_path / "empty.db"
    sqlite3.connect(str(empty_db)).close()
    pool = ConnectionPool(str(empty_db), pool_size=1)
    app = create_app(PharmacoDBSettings(db_path=str(empty_db), sentry_dsn=""), pool=pool, error_sink=error_sink)

    try:
        with TestClient(app) as client:
            response = client.get("/cell_lines")
    finally:
        pool.close_all()

    assert response.status_code == 500
    assert response.json() == {"error": {"code": 500, "message": "Internal server error"}}
    assert len(error_sink.captured) == 1
    assert isinstance(error_sink.captured[0], sqlite3.OperationalError)
    assert "cells" not in response.text


def test_app_opens_and_closes_its_own_pool(db_path, error_sink):
    settings = PharmacoDBSettings(db_path=db_path, pool_size=1, sentry_dsn="")
    app = create_app(settings, error_sink=error_sink)

    with TestClient(app) as client:
        assert app.state.pool is not None
        assert client.get("/drugs/3").json() == {"id": 3, "name": "Doxorubicin"}

    assert app.state.pool is None


def test_oversized_ids_are_404(client, error_sink):
    response = client.get("/cell_lines/99999999999999999999")
    assert response.status_code == 404
    assert response.json() == {"error": {"code": 404, "message": "Cell line not found"}}

    assert client.get("/experiments/99999999999999999999").status_code == 404
    assert client.get("/cell_lines/1/drugs/99999999999999999999").status_code == 404
    assert error_sink.captured == []


def test_oversized_page_is_empty_list(client, error_sink):
    response = client.get("/experiments", params={"page": "100000000000000000000"})
    assert response.status_code == 200
    assert response.json() == []
    assert error_sink.captured == []


def test_underscore_id_is_404(client):
    assert client.get("/cell_lines/0_1").status_code == 404


def test_error_envelope_in_openapi_schema(client):
    schema = client.get("/openapi.json").json()
    assert "ErrorResponse" in schema["components"]["schemas"]

    responses = schema["paths"]["/cell_lines/{cell_id}"]["get"]["responses"]
    for code in ("400", "404", "500"):
        ref = responses[code]["content"]["application/json"]["schema"]["$ref"]
        assert ref.endswith("/ErrorResponse")
