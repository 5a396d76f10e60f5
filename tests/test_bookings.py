import json

import pytest


@pytest.mark.asyncio
async def test_list_party_types(client):
    r = await client.get("/partytypes")
    assert r.status_code == 200
    assert sorted(r.json()) == ["DinnerParty", "MovieParty", "PoolParty"]


@pytest.mark.asyncio
async def test_party_type_spec(client):
    r = await client.get("/partytype/MovieParty")
    assert r.status_code == 200, r.text
    spec = r.json()
    assert set(spec) == {"start_time", "end_time", "attendees", "movie", "rating", "runtime"}
    assert spec["end_time"] == {"type": "RFC 3339", "checks": ["gtfield=start_time"], "required": True, "list": False}
    assert spec["attendees"] == {"type": "string", "checks": ["gt=0"], "required": True, "list": True}
    assert spec["runtime"] == {"type": "int", "checks": ["gt=30"], "required": True, "list": False}
    assert spec["start_time"]["checks"] is None


@pytest.mark.asyncio
async def test_party_type_spec_is_served_identically_every_time(client):
    first = (await client.get("/partytype/DinnerParty")).json()
    second = (await client.get("/partytype/DinnerParty")).json()
    assert first == second
    assert first["dessert"] == {"type": "string", "checks": None, "required": False, "list": False}


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["NopeParty", "movieparty", "MovieParty "])
async def test_unknown_party_type_spec_is_404(client, name):
    r = await client.get(f"/partytype/{name}")
    assert r.status_code == 404
    assert r.json()["code"] == "not_found"


@pytest.mark.asyncio
async def test_book_movie_party(client, party_data):
    r = await client.post("/bookparty", json={"party_type": "MovieParty", "data": party_data["MovieParty"]})
    assert r.status_code == 200, r.text
    assert r.json()["booking_id"]


@pytest.mark.asyncio
async def test_booking_ids_are_not_reused(client, party_data):
    body = {"party_type": "PoolParty", "data": party_data["PoolParty"]}
    a = (await client.post("/bookparty", json=body)).json()["booking_id"]
    b = (await client.post("/bookparty", json=body)).json()["booking_id"]
    assert a != b


@pytest.mark.asyncio
async def test_short_movie_fails_validation(client, party_data):
    data = party_data["MovieParty"]
    data["runtime"] = 20

    r = await client.post("/bookparty", json={"party_type": "MovieParty", "data": data})
    assert r.status_code == 400
    body = r.json()
    assert body["code"] == "validation_failed"
    assert "runtime" in body["message"]
    assert body["details"][0]["field"] == "runtime"
    assert body["details"][0]["check"] == "gt=30"


@pytest.mark.asyncio
@pytest.mark.parametrize("data", [{}, {"anything": 1}, "not even an object", None])
async def test_unknown_party_type_wins_regardless_of_data(client, data):
    r = await client.post("/bookparty", json={"party_type": "BirthdayParty", "data": data})
    assert r.status_code == 400
    assert r.json()["code"] == "unknown_type"


@pytest.mark.asyncio
async def test_party_type_is_case_sensitive(client, party_data):
    r = await client.post("/bookparty", json={"party_type": "movieparty", "data": party_data["MovieParty"]})
    assert r.json()["code"] == "unknown_type"


@pytest.mark.asyncio
@pytest.mark.parametrize("party_type", ["MovieParty", "PoolParty", "DinnerParty"])
async def test_undeclared_field_is_malformed_not_invalid(client, party_data, party_type):
    data = party_data[party_type]
    # also invalid, but decoding runs first
    data["attendees"] = []
    data["balloons"] = 99

    r = await client.post("/bookparty", json={"party_type": party_type, "data": data})
    assert r.status_code == 400
    assert r.json()["code"] == "malformed_payload"


@pytest.mark.asyncio
async def test_wrong_field_shape_is_malformed(client, party_data):
    data = party_data["PoolParty"]
    data["water_temp"] = "warm"

    r = await client.post("/bookparty", json={"party_type": "PoolParty", "data": data})
    assert r.status_code == 400
    body = r.json()
    assert body["code"] == "malformed_payload"
    assert body["details"][0]["loc"] == ["water_temp"]


@pytest.mark.asyncio
async def test_unknown_envelope_key_is_malformed(client, party_data):
    r = await client.post(
        "/bookparty",
        json={"party_type": "PoolParty", "data": party_data["PoolParty"], "priority": "high"},
    )
    assert r.status_code == 400
    assert r.json()["code"] == "malformed_payload"


@pytest.mark.asyncio
async def test_non_json_body_is_malformed(client):
    r = await client.post("/bookparty", content=b"party!", headers={"content-type": "application/json"})
    assert r.status_code == 400
    assert r.json()["code"] == "malformed_payload"


@pytest.mark.asyncio
async def test_prod_route_books_when_not_failing(client, party_data):
    r = await client.post("/bookpartyprod", json={"party_type": "DinnerParty", "data": party_data["DinnerParty"]})
    assert r.status_code == 200, r.text
    assert r.json()["booking_id"]


@pytest.mark.asyncio
async def test_prod_route_injected_failure_is_distinct_from_validation(flaky_client, party_data):
    r = await flaky_client.post("/bookpartyprod", json={"party_type": "DinnerParty", "data": party_data["DinnerParty"]})
    assert r.status_code == 500
    body = r.json()
    assert body["code"] == "transient_failure"
    assert body["message"].startswith("Random prod failure: ")


@pytest.mark.asyncio
async def test_injected_failures_never_touch_the_plain_route(flaky_client, party_data):
    r = await flaky_client.post("/bookparty", json={"party_type": "DinnerParty", "data": party_data["DinnerParty"]})
    assert r.status_code == 200, r.text


@pytest.mark.asyncio
async def test_cors_preflight(client):
    r = await client.options(
        "/bookparty",
        headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "POST"},
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] in ("*", "http://localhost:3000")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "content_type",
    ["text/plain;charset=UTF-8", "application/x-www-form-urlencoded", None],
)
async def test_json_body_is_accepted_whatever_the_content_type(client, party_data, content_type):
    payload = json.dumps({"party_type": "MovieParty", "data": party_data["MovieParty"]}).encode()
    headers = {"content-type": content_type} if content_type else {}

    r = await client.post("/bookparty", content=payload, headers=headers)
    assert r.status_code == 200, r.text
    assert r.json()["booking_id"]


@pytest.mark.asyncio
async def test_empty_body_is_malformed(client):
    r = await client.post("/bookparty", content=b"", headers={"content-type": "text/plain"})
    assert r.status_code == 400
    assert r.json()["code"] == "malformed_payload"
