import pytest
import requests
from fastapi.testclient import TestClient

from stellar_api.app.main import create_app
from stellar_api.app.schemas import Planet, Star
from stellar_client import StellarAPI


class AppSession:
    """Minimal ``requests.Session`` stand‑in backed by the in‑process app.

    ``TestClient`` returns httpx responses, while ``StellarAPI`` relies on
    ``requests.Response.raise_for_status`` raising ``requests.HTTPError``.
    Each result is therefore copied into a real ``requests.Response``;
    ``_content`` is where requests keeps the body it has already read.
    """

    def __init__(self, client: TestClient) -> None:
        self.client = client

    def request(self, method, url, headers=None, timeout=None, **kwargs):
        result = self.client.request(method, url, headers=headers)
        response = requests.Response()
        response.status_code = result.status_code
        response._content = result.content
        response.headers.update(result.headers)
        response.url = str(result.url)
        response.reason = result.reason_phrase
        response.encoding = "utf-8"
        return response


class FailingSession:
    def request(self, method, url, **kwargs):
        raise requests.ConnectionError("connection refused")


@pytest.fixture
def api() -> StellarAPI:
    return StellarAPI(base_url="http://testserver/", session=AppSession(TestClient(create_app())))


def test_list_stars(api: StellarAPI) -> None:
    stars, error = api.list_stars()
    assert error is None
    assert len(stars) == 6
    assert stars[0] == Star(name="Sun", solar_masses=1)


def test_list_planets(api: StellarAPI) -> None:
    planets, error = api.list_planets()
    assert error is None
    assert [p.name for p in planets][-1] == "Neptune"


def test_get_planet(api: StellarAPI) -> None:
    planet, error = api.get_planet("mercury")
    assert error is None
    assert planet == Planet(name="Mercury", distance_from_star=57_910_000)


def test_get_star_quotes_name(api: StellarAPI) -> None:
    star, error = api.get_star("proxima centauri")
    assert error is None
    assert star.name == "Proxima Centauri"
    assert star.solar_masses == 0.122


def test_get_star_not_found(api: StellarAPI) -> None:
    star, error = api.get_star("Pluto")
    assert star is None
    assert error == {"status_code": 404, "message": "Star not found."}


def test_get_planet_not_found(api: StellarAPI) -> None:
    planet, error = api.get_planet("Vulcan")
    assert planet is None
    assert error == {"status_code": 404, "message": "Planet not found."}


def test_connection_error() -> None:
    api = StellarAPI(base_url="http://localhost:1", session=FailingSession())
    planets, error = api.list_planets()
    assert planets == []
    assert error["status_code"] is None
    assert "connection refused" in error["message"]
