import logging

import pytest


def test_list_stars(client) -> None:
    response = client.get("/stars")
    assert response.status_code == 200
    body = response.json()
    assert len(body) == 6
    assert body[0] == {"name": "Sun", "solarMasses": 1}
    assert [s["name"] for s in body] == [
        "Sun", "Proxima Centauri", "Rigil Kentaurus", "Toliman", "Barnard's Star", "Polaris",
    ]


@pytest.mark.parametrize("name", ["polaris", "POLARIS", "Polaris"])
def test_get_star_any_case(client, name: str) -> None:
    response = client.get(f"/stars/{name}")
    assert response.status_code == 200
    assert response.json() == {"name": "Polaris", "solarMasses": 6.5}


def test_get_star_with_encoded_name(client) -> None:
    response = client.get("/stars/barnard's%20star")
    assert response.status_code == 200
    assert response.json() == {"name": "Barnard's Star", "solarMasses": 0.13}


def test_get_star_not_found(client) -> None:
    response = client.get("/stars/Pluto")
    assert response.status_code == 404
    assert response.headers["content-type"] == "application/problem+json"
    assert response.json() == {
        "type": "https://tools.ietf.org/html/rfc9110#section-15.5.5",
        "title": "Not Found",
        "status": 404,
        "detail": "Star not found.",
    }


def test_misses_are_logged(client, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="stellar_api")
    client.get("/stars/Pluto")
    assert ("stellar_api.app.core.errors", logging.INFO, "GET /stars/Pluto: Star not found.") in caplog.record_tuples
    assert any(
        name == "stellar_api.app.services.star_service" and level == logging.DEBUG
        for name, level, _ in caplog.record_tuples
    )
