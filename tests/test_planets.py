import pytest


def test_list_planets(client) -> None:
    response = client.get("/planets")
    assert response.status_code == 200
    body = response.json()
    assert len(body) == 8
    assert [p["name"] for p in body] == [
        "Mercury", "Venus", "Earth", "Mars", "Jupiter", "Saturn", "Uranus", "Neptune",
    ]
    distances = [p["distanceFromStar"] for p in body]
    assert distances == sorted(distances)


@pytest.mark.parametrize("name", ["earth", "EARTH", "Earth"])
def test_get_planet_any_case(client, name: str) -> None:
    response = client.get(f"/planets/{name}")
    assert response.status_code == 200
    assert response.json() == {"name": "Earth", "distanceFromStar": 149600000}


def test_get_mercury(client) -> None:
    response = client.get("/planets/Mercury")
    assert response.status_code == 200
    assert response.json() == {"name": "Mercury", "distanceFromStar": 57910000}


def test_get_planet_not_found(client) -> None:
    response = client.get("/planets/Pluto")
    assert response.status_code == 404
    body = response.json()
    assert body["status"] == 404
    assert body["detail"] == "Planet not found."
