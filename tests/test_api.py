import pytest
from httpx import ASGITransport, AsyncClient

from app.core.expiry import SECONDS_PER_YEAR

API = "/api/v1"


async def create_folder(client, password="pw", **extra):
    response = await client.post(f"{API}/folders", json={"name": "box", "password": password, **extra})
    assert response.status_code == 200
    return response.json()


async def test_root_and_health(client):
    assert (await client.get("/health")).json() == {"status": "healthy"}
    assert (await client.get("/")).status_code == 200


async def test_create_folder(client, clock):
    body = await create_folder(client, years=2)
    assert body["id"]
    assert body["expires_at"] == clock.now + 2 * SECONDS_PER_YEAR


async def test_create_folder_without_password(client):
    response = await client.post(f"{API}/folders", json={"name": "box"})
    assert response.status_code == 400
    assert response.json() == {"detail": "Password required"}


async def test_malformed_body_is_bad_request(client):
    response = await client.post(f"{API}/folders", json={"password": "pw", "years": "lots"})
    assert response.status_code == 400
    assert "years" in response.json()["detail"]
    assert "pw" not in response.json()["detail"]


async def test_verify(client):
    folder = await create_folder(client)

    ok = await client.post(f"{API}/folders/{folder['id']}/verify", json={"password": "pw"})
    assert ok.status_code == 200
    assert ok.json() == {"ok": True, "expires_at": folder["expires_at"]}

    bad = await client.post(f"{API}/folders/{folder['id']}/verify", json={"password": "nope"})
    assert bad.status_code == 401

    missing = await client.post(f"{API}/folders/unknown/verify", json={"password": "pw"})
    assert missing.status_code == 404


async def test_message_lifecycle(client, clock):
    folder = await create_folder(client)
    url = f"{API}/folders/{folder['id']}/messages"

    first = await client.post(url, json={"password": "pw", "content": "hello"})
    assert first.status_code == 200
    clock.advance(3)
    second = await client.post(url, json={"password": "pw", "content": "world"})
    assert second.json()["created_at"] == clock.now

    listing = await client.get(url, params={"password": "pw"})
    assert listing.status_code == 200
    body = listing.json()
    assert body["expires_at"] == folder["expires_at"]
    assert [m["content"] for m in body["messages"]] == ["world", "hello"]
    assert set(body["messages"][0]) == {"id", "content", "created_at", "updated_at"}

    clock.advance(3)
    message_id = first.json()["id"]
    edited = await client.put(f"{url}/{message_id}", json={"password": "pw", "content": "hello again"})
    assert edited.json() == {"updated_at": clock.now}

    removed = await client.request("DELETE", f"{url}/{message_id}", json={"password": "pw"})
    assert removed.json() == {"deleted": True}

    again = await client.delete(f"{url}/{message_id}", params={"password": "pw"})
    assert again.status_code == 404

    listing = await client.get(url, params={"password": "pw"})
    assert [m["content"] for m in listing.json()["messages"]] == ["world"]


async def test_message_errors(client):
    folder = await create_folder(client)
    url = f"{API}/folders/{folder['id']}/messages"

    assert (await client.post(url, json={"password": "pw", "content": ""})).status_code == 400
    assert (await client.post(url, json={"password": "bad", "content": "x"})).status_code == 401
    assert (await client.get(url)).status_code == 401
    assert (await client.put(f"{url}/missing", json={"password": "pw", "content": "x"})).status_code == 404
    assert (await client.delete(f"{url}/missing", params={"password": "bad"})).status_code == 401


async def test_expired_folder_is_not_found(client, clock):
    folder = await create_folder(client, years=1)
    clock.now = folder["expires_at"] + 1

    response = await client.get(f"{API}/folders/{folder['id']}/messages", params={"password": "pw"})
    assert response.status_code == 404
    response = await client.get(f"{API}/folders/{folder['id']}/messages", params={"password": "bad"})
    assert response.status_code == 404


async def test_cross_folder_access_is_not_found(client):
    a = await create_folder(client, password="a")
    b = await create_folder(client, password="b")
    created = await client.post(f"{API}/folders/{a['id']}/messages", json={"password": "a", "content": "mine"})
    message_id = created.json()["id"]

    edit = await client.put(f"{API}/folders/{b['id']}/messages/{message_id}", json={"password": "b", "content": "x"})
    assert edit.status_code == 404
    delete = await client.delete(f"{API}/folders/{b['id']}/messages/{message_id}", params={"password": "b"})
    assert delete.status_code == 404


async def test_share_flow(client, clock):
    folder = await create_folder(client)
    await client.post(f"{API}/folders/{folder['id']}/messages", json={"password": "pw", "content": "shared"})

    assert (await client.post(f"{API}/folders/{folder['id']}/share", json={"password": "bad"})).status_code == 401

    issued = await client.post(f"{API}/folders/{folder['id']}/share", json={"password": "pw", "years": 1})
    assert issued.status_code == 200
    token = issued.json()["token"]
    assert issued.json()["expires_at"] == clock.now + SECONDS_PER_YEAR

    shared = await client.get(f"{API}/share/{token}/messages")
    assert shared.status_code == 200
    assert [m["content"] for m in shared.json()["messages"]] == ["shared"]
    assert shared.json()["expires_at"] == issued.json()["expires_at"]

    assert (await client.request("DELETE", f"{API}/share/{token}", json={"password": "bad"})).status_code == 401

    revoked = await client.request("DELETE", f"{API}/share/{token}", json={"password": "pw"})
    assert revoked.json() == {"deleted": True}

    assert (await client.get(f"{API}/share/{token}/messages")).status_code == 404
    assert (await client.delete(f"{API}/share/{token}", params={"password": "pw"})).status_code == 404


async def test_expired_share_token(client, clock):
    folder = await create_folder(client, years=5)
    issued = await client.post(f"{API}/folders/{folder['id']}/share", json={"password": "pw", "years": 1})
    token = issued.json()["token"]

    clock.now = issued.json()["expires_at"] + 1
    assert (await client.get(f"{API}/share/{token}/messages")).status_code == 404


async def test_cleanup(client, clock):
    folder = await create_folder(client, years=1)
    await client.post(f"{API}/folders/{folder['id']}/messages", json={"password": "pw", "content": "bye"})

    nothing = await client.post(f"{API}/cleanup")
    assert nothing.json() == {"deleted_messages": 0, "deleted_folders": 0}

    clock.now = folder["expires_at"] + 1
    swept = await client.post(f"{API}/cleanup")
    assert swept.json() == {"deleted_messages": 1, "deleted_folders": 1}


async def test_long_password_folder(client):
    password = "x" * 80
    folder = await create_folder(client, password=password)

    ok = await client.post(f"{API}/folders/{folder['id']}/verify", json={"password": password})
    assert ok.status_code == 200

    url = f"{API}/folders/{folder['id']}/messages"
    assert (await client.post(url, json={"password": password, "content": "hi"})).status_code == 200
    listing = await client.get(url, params={"password": password})
    assert [m["content"] for m in listing.json()["messages"]] == ["hi"]


@pytest.mark.parametrize("years", ["Infinity", "-Infinity", "NaN", "1e20", "1001"])
async def test_out_of_range_lifetime_is_bad_request(client, years):
    raw = '{"password": "pw", "years": %s}' % years
    response = await client.post(f"{API}/folders", content=raw, headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert "years" in response.json()["detail"]

    folder = await create_folder(client)
    response = await client.post(
        f"{API}/folders/{folder['id']}/share",
        content=raw,
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400


@pytest.mark.parametrize("body", [{}, {"password": ""}, {"password": None, "years": 1}])
async def test_share_without_password(client, body):
    folder = await create_folder(client)

    response = await client.post(f"{API}/folders/{folder['id']}/share", json=body)
    assert response.status_code == 400
    assert response.json() == {"detail": "Password required"}

    missing = await client.post(f"{API}/folders/unknown/share", json=body)
    assert missing.status_code == 404


class BrokenFolderStore:
    async def create(self, name, password, years=None):
        raise RuntimeError("database is on fire: password=pw")


async def test_unexpected_fault_is_generic_server_error(database):
    from main import app
    from app.api.deps import get_folder_store

    app.state.database = database
    app.dependency_overrides[get_folder_store] = lambda: BrokenFolderStore()
    try:
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            response = await ac.post(f"{API}/folders", json={"password": "pw"})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"detail": "Server error"}
