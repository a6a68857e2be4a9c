import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from greeting_api.app.core.config import Settings
from greeting_api.app.main import create_app


def test_first_request_without_name(client):
    response = client.get("/greeting")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {"id": 1, "content": "Hello, World!"}


def test_second_request_with_name(client):
    client.get("/greeting")
    response = client.get("/greeting", params={"name": "User"})
    assert response.status_code == 200
    assert response.json() == {"id": 2, "content": "Hello, User!"}


def test_empty_name_is_kept(client):
    client.get("/greeting")
    client.get("/greeting")
    response = client.get("/greeting?name=")
    assert response.json() == {"id": 3, "content": "Hello, !"}


def test_name_with_characters_needing_escaping(client):
    name = 'a "quoted" \\ name'
    response = client.get("/greeting", params={"name": name})
    assert response.json()["content"] == f"Hello, {name}!"
    assert '\\"quoted\\"' in response.text


def test_sequential_ids(client):
    ids = [client.get("/greeting").json()["id"] for _ in range(5)]
    assert ids == [1, 2, 3, 4, 5]


def test_restart_resets_counter(client):
    for _ in range(3):
        client.get("/greeting")
    with TestClient(create_app()) as restarted:
        assert restarted.get("/greeting").json() == {"id": 1, "content": "Hello, World!"}


def test_unknown_path_is_404(client):
    assert client.get("/greetings").status_code == 404


def test_wrong_method_is_405(client):
    response = client.post("/greeting")
    assert response.status_code == 405
    # Rejected requests do not consume an id.
    assert client.get("/greeting").json()["id"] == 1


def test_settings_drive_app_metadata():
    app = create_app(Settings(project_name="Hello Service", api_version="2.0.0"))
    assert app.title == "Hello Service"
    assert app.version == "2.0.0"


@pytest.mark.anyio
async def test_concurrent_requests_get_distinct_ids(app):
    total = 200
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        responses = await asyncio.gather(
            *(ac.get("/greeting", params={"name": str(i)}) for i in range(total))
        )
    assert all(r.status_code == 200 for r in responses)
    ids = [r.json()["id"] for r in responses]
    assert sorted(ids) == list(range(1, total + 1))
    for i, r in enumerate(responses):
        assert r.json()["content"] == f"Hello, {i}!"
