"""
Test the FastAPI app: request validation, defaults, and translation of
engine errors into HTTP 400.
"""

import numpy as np
from fastapi.testclient import TestClient

from api.main import app

client = TestClient(app)


def test_root():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_materials():
    response = client.get("/api/materials")
    assert response.status_code == 200
    assert response.json() == {"steel": 200.0, "aluminum": 70.0, "copper": 120.0, "wood": 12.0}


def test_analyze_defaults():
    """Empty body: 2 m steel beam, 10 kN at midspan -> M_max = PL/4 = 5 kN·m."""
    response = client.post("/api/analyze", json={})
    assert response.status_code == 200
    data = response.json()

    assert len(data["x"]) == 101
    assert len(data["deflection_ratio"]) == 101
    assert np.isclose(data["summary"]["max_moment"], 5000.0)
    assert np.isclose(data["summary"]["max_shear"], 5000.0)
    assert data["display"]["max_moment"] == "5.00 kN·m"
    assert data["load_position"] == 1.0


def test_analyze_cantilever_moment():
    response = client.post("/api/analyze", json={
        "beam_type": "cantilever",
        "load_type": "moment",
        "moment_load": 1000.0,
        "num_points": 10,
    })
    assert response.status_code == 200
    data = response.json()
    assert data["moment"] == [-1000.0] * 11
    assert data["shear"] == [0.0] * 11


def test_analyze_rejects_bad_section():
    response = client.post("/api/analyze", json={"width": -0.1})
    assert response.status_code == 400
    assert "positive" in response.json()["detail"]


def test_analyze_rejects_bad_span():
    response = client.post("/api/analyze", json={"length": -2.0})
    assert response.status_code == 400


def test_analyze_validates_num_points():
    response = client.post("/api/analyze", json={"num_points": 0})
    assert response.status_code == 422


def test_export_csv():
    response = client.post("/api/export/csv", json={"num_points": 4})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")

    lines = response.text.strip().splitlines()
    assert lines[0] == "x,deflection,slope,moment,shear"
    assert len(lines) == 6
