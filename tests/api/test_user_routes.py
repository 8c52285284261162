"""User routes — creation, duplicate usernames and listing."""


async def test_create_user_returns_username_and_generated_id(client, store):
    res = await client.post("/api/exercise/new-user", json={"username": "alice"})

    assert res.status_code == 200
    body = res.json()
    assert body["username"] == "alice"
    assert body["_id"]
    assert set(body) == {"username", "_id"}
    assert body["_id"] in store.users


async def test_create_user_accepts_form_body(client):
    res = await client.post("/api/exercise/new-user", data={"username": "bob"})

    assert res.status_code == 200
    assert res.json()["username"] == "bob"


async def test_duplicate_username_is_rejected(client, store):
    await client.post("/api/exercise/new-user", json={"username": "alice"})

    res = await client.post("/api/exercise/new-user", json={"username": "alice"})

    assert res.json() == {"error": "user exists"}
    assert len(store.users) == 1


async def test_empty_username_does_nothing(client, store):
    """Missing username is a no-op that still completes the request."""
    res = await client.post("/api/exercise/new-user", json={"username": ""})

    assert res.status_code == 204
    assert res.content == b""
    assert store.users == {}


async def test_missing_body_does_nothing(client, store):
    res = await client.post("/api/exercise/new-user")

    assert res.status_code == 204
    assert store.users == {}


async def test_save_failure_is_reported_inline(client, store):
    store.fail_saves = True

    res = await client.post("/api/exercise/new-user", json={"username": "alice"})

    assert res.status_code == 200
    assert res.json() == {"error": "save failure"}


async def test_lookup_failure_escalates_to_500(client, store):
    store.fail_lookups = True

    res = await client.post("/api/exercise/new-user", json={"username": "alice"})

    assert res.status_code == 500
    assert res.text == "Internal Server Error"


async def test_list_users_empty(client):
    res = await client.get("/api/exercise/users")

    assert res.status_code == 200
    assert res.json() == []


async def test_list_users_in_store_order(client):
    ids = []
    for name in ("alice", "bob", "carol"):
        res = await client.post("/api/exercise/new-user", json={"username": name})
        ids.append(res.json()["_id"])

    res = await client.get("/api/exercise/users")

    assert res.json() == [
        {"username": "alice", "_id": ids[0]},
        {"username": "bob", "_id": ids[1]},
        {"username": "carol", "_id": ids[2]},
    ]


async def test_list_users_store_failure(client, store):
    store.fail_lookups = True

    res = await client.get("/api/exercise/users")

    assert res.json() == {"error": "error retrieving users"}
