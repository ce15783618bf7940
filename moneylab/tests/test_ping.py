from flask.testing import FlaskClient


def test_ping_lists_calculators(client: FlaskClient):
    response = client.get("/api/ping")

    assert response.status_code == 200
    body = response.json
    assert body["message"] == "pong"
    assert "/api/calc/retirement" in body["calculators"]
    assert len(body["calculators"]) == 8
