"""Calculate Route — HTTP contract of POST /api/calculate.

Tests:
    - 200 with unrounded bmi and category on valid input
    - 400 text/plain with the fixed message on non-positive / non-finite input
    - 400 MALFORMED_INPUT envelope on malformed bodies, handler never invoked
"""

import pytest

MESSAGE = "Weight and height must be positive numbers"


# ─── success ─────────────────────────────────────────────────────

async def test_reference_calculation(client, recording_observer):
    res = await client.post(
        "/api/calculate", json={"weight_kg": 70.0, "height_m": 1.75},
    )
    assert res.status_code == 200
    assert res.json() == {"bmi": 22.857142857142858, "category": "Normal weight"}
    assert recording_observer.names == ["requested", "succeeded"]


@pytest.mark.parametrize("weight, height, category", [
    (45.0, 1.7, "Underweight"),
    (80.0, 1.7, "Overweight"),
    (100.0, 1.7, "Obese"),
])
async def test_categories(client, weight, height, category):
    res = await client.post(
        "/api/calculate", json={"weight_kg": weight, "height_m": height},
    )
    assert res.status_code == 200
    assert res.json()["category"] == category


async def test_identical_requests_identical_responses(client):
    body = {"weight_kg": 63.2, "height_m": 1.68}
    first = await client.post("/api/calculate", json=body)
    second = await client.post("/api/calculate", json=body)
    assert first.json() == second.json()


# ─── validation failures ─────────────────────────────────────────

@pytest.mark.parametrize("body", [
    {"weight_kg": -5.0, "height_m": 1.75},
    {"weight_kg": 0.0, "height_m": 1.8},
    {"weight_kg": 70.0, "height_m": 0.0},
    {"weight_kg": 70.0, "height_m": -1.75},
])
async def test_non_positive_rejected(client, recording_observer, body):
    res = await client.post("/api/calculate", json=body)
    assert res.status_code == 400
    assert res.headers["content-type"].startswith("text/plain")
    assert res.text == MESSAGE
    assert recording_observer.names == ["requested", "validation_failed"]


@pytest.mark.parametrize("raw", [
    '{"weight_kg": NaN, "height_m": 1.75}',
    '{"weight_kg": 70.0, "height_m": Infinity}',
    '{"weight_kg": -Infinity, "height_m": 1.75}',
])
async def test_non_finite_rejected(client, recording_observer, raw):
    res = await client.post(
        "/api/calculate", content=raw,
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.text == MESSAGE
    assert "succeeded" not in recording_observer.names


async def test_overflowing_bmi_rejected(client):
    res = await client.post(
        "/api/calculate", json={"weight_kg": 1e308, "height_m": 1e-3},
    )
    assert res.status_code == 400
    assert "representable range" in res.text


# ─── malformed input ─────────────────────────────────────────────

@pytest.mark.parametrize("body", [
    {"weight_kg": "seventy"},
    {"weight_kg": "seventy", "height_m": 1.75},
    {"weight_kg": "70", "height_m": 1.75},
    {"weight_kg": True, "height_m": 1.75},
    {"weight_kg": 70.0},
    {},
])
async def test_malformed_body_rejected(client, recording_observer, body):
    res = await client.post("/api/calculate", json=body)
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "MALFORMED_INPUT"
    assert error["details"]
    assert recording_observer.events == []


async def test_missing_field_reported(client):
    res = await client.post("/api/calculate", json={"weight_kg": 70.0})
    fields = [d["field"] for d in res.json()["error"]["details"]]
    assert fields == ["height_m"]


async def test_wrong_type_names_the_field(client):
    res = await client.post(
        "/api/calculate", json={"weight_kg": "seventy", "height_m": 1.75},
    )
    error = res.json()["error"]
    assert error["message"] == (
        "Request body must be a JSON object with numeric weight_kg and height_m"
    )
    (detail,) = error["details"]
    assert detail["field"] == "weight_kg"
    assert detail["type"] == "float_type"
    assert detail["problem"]


async def test_invalid_json_rejected(client, recording_observer):
    res = await client.post(
        "/api/calculate", content="{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    (detail,) = res.json()["error"]["details"]
    assert detail["type"] == "json_invalid"
    assert detail["field"] == "body"
    assert recording_observer.events == []


async def test_get_not_allowed(client):
    res = await client.get("/api/calculate")
    assert res.status_code == 405
