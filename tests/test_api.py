"""
Tests for the Flask API routes
"""
from unittest.mock import patch

import pytest
import requests

from conftest import make_response
from roadsBackendFlask.app import create_app

SNAPPED = {"snappedPoints": [{"location": {"latitude": 1.0, "longitude": 2.0}, "originalIndex": 0, "placeId": "P1"}]}


@pytest.fixture
def client():
    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()


def _get(body, status_code=200):
    return patch("roadsBackendFlask.utils.http.requests.get",
                 return_value=make_response(body, status_code))


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    data = res.get_json()
    assert data["ok"] is True
    assert isinstance(data["authReady"], bool)
    assert data["roadsBaseUrl"] == "https://roads.googleapis.com"


def test_tools_listing(client):
    names = [t["name"] for t in client.get("/api/tools").get_json()["tools"]]
    assert names == ["roads_snap", "speed_limits", "snapped_speed_limits"]


def test_snap_get_passes_encoded_path(client):
    with _get(SNAPPED) as mock_get:
        res = client.get("/api/roads/snap?path=1.0,2.0|3.0,4.0&interpolate=true")
    assert res.status_code == 200
    assert res.get_json() == SNAPPED
    params = dict(mock_get.call_args.kwargs["params"])
    assert params["path"] == "1.0,2.0|3.0,4.0"
    assert params["interpolate"] == "true"


def test_snap_post_json_path(client):
    with _get(SNAPPED) as mock_get:
        res = client.post("/api/roads/snap", json={"path": [[1.0, 2.0], [3.0, 4.0]]})
    assert res.status_code == 200
    params = dict(mock_get.call_args.kwargs["params"])
    assert params["path"] == "1.0,2.0|3.0,4.0"
    assert "interpolate" not in params


def test_speed_limits_get_repeated_place_ids(client):
    body = {"speedLimits": [{"placeId": "A", "speedLimit": 50, "units": "KPH"},
                            {"placeId": "B", "speedLimit": 30, "units": "MPH"}]}
    with _get(body) as mock_get:
        res = client.get("/api/roads/speed-limits?placeId=A&placeId=B")
    assert res.status_code == 200
    assert [s["placeId"] for s in res.get_json()["speedLimits"]] == ["A", "B"]
    assert [v for k, v in mock_get.call_args.kwargs["params"] if k == "placeId"] == ["A", "B"]


def test_snapped_speed_limits_post(client):
    body = {"speedLimits": [{"placeId": "P1", "speedLimit": 40, "units": "KPH"}], **SNAPPED}
    with _get(body):
        res = client.post("/api/roads/snapped-speed-limits", json={"path": [1.0, 2.0]})
    assert res.status_code == 200
    data = res.get_json()
    assert data["speedLimits"][0]["speedLimit"] == 40.0
    assert data["snappedPoints"][0]["placeId"] == "P1"


def test_missing_path_is_400(client):
    with _get(SNAPPED) as mock_get:
        res = client.get("/api/roads/snap")
    assert res.status_code == 400
    assert res.get_json()["error"] == "InvalidArgument"
    mock_get.assert_not_called()


@pytest.mark.parametrize("error,status_code,expected", [
    ({"status": "RESOURCE_EXHAUSTED", "message": "quota"}, 429, 429),
    ({"status": "PERMISSION_DENIED", "message": "denied"}, 403, 403),
    ({"status": "INVALID_ARGUMENT", "message": "bad"}, 400, 400),
    ({"status": "INTERNAL"}, 500, 502),
])
def test_upstream_errors_mapped(client, error, status_code, expected):
    with patch("roadsBackendFlask.config.RETRY_OVER_QUERY_LIMIT", False), \
         _get({"error": error}, status_code):
        res = client.get("/api/roads/speed-limits?placeId=A")
    assert res.status_code == expected
    assert res.get_json()["upstreamStatus"] == status_code


def test_run_tool_route(client):
    with _get(SNAPPED):
        res = client.post("/api/tools/roads_snap", json={"points": [[1.0, 2.0]]})
    assert res.status_code == 200
    assert res.get_json()["count"] == 1


def test_run_unknown_tool_route(client):
    assert client.post("/api/tools/nope", json={}).status_code == 404


def test_auth_required(client):
    with patch("roadsBackendFlask.config.REQUIRE_AUTH", True):
        res = client.get("/api/roads/snap?path=1.0,2.0")
    assert res.status_code == 401


def test_network_error_is_json_502(client):
    with patch("roadsBackendFlask.utils.http.requests.get",
               side_effect=requests.Timeout("slow")):
        res = client.get("/api/roads/snap?path=1.0,2.0")
    assert res.status_code == 502
    assert res.get_json() == {"error": "Timeout", "message": "slow"}


def test_health_and_tools_stay_open_when_auth_required(client):
    with patch("roadsBackendFlask.config.REQUIRE_AUTH", True):
        assert client.get("/api/health").status_code == 200
        assert client.get("/api/tools").status_code == 200
        assert client.post("/api/tools/roads_snap", json={"points": [[1.0, 2.0]]}).status_code == 401
