"""User routes: verbatim create and case-sensitive lookup."""


async def test_create_user_keeps_extra_fields(client):
    res = await client.post("/user", json={
        "username": "carol", "email": "c@x.com", "name": "Carol", "age": 31,
    })
    assert res.status_code == 200
    body = res.json()
    assert isinstance(body["id"], int)
    assert body["username"] == "carol"
    assert body["email"] == "c@x.com"
    assert body["name"] == "Carol"
    assert body["age"] == 31


async def test_create_user_duplicate_username_is_500(client, seed_user):
    res = await client.post(
        "/user", json={"username": "alice", "email": "other@x.com"},
    )
    assert res.status_code == 500
    assert "Integrity constraint violated" in res.json()["error"]["message"]


async def test_create_user_duplicate_email_is_500(client, seed_user):
    res = await client.post(
        "/user", json={"username": "alice2", "email": "a@x.com"},
    )
    assert res.status_code == 500


async def test_create_user_missing_email_is_500(client):
    res = await client.post("/user", json={"username": "dave"})
    assert res.status_code == 500


async def test_get_user_by_username(client, seed_user):
    res = await client.get("/user/alice")
    assert res.status_code == 200
    assert res.json() == {
        "id": seed_user.id, "username": "alice",
        "email": "a@x.com", "name": "Alice",
    }


async def test_get_user_is_case_sensitive(client, seed_user):
    res = await client.get("/user/Alice")
    assert res.status_code == 404
    assert res.json() == {"error": {"message": "User not found", "status": 404}}


async def test_get_unknown_user_is_404(client):
    res = await client.get("/user/nobody")
    assert res.status_code == 404


async def test_create_user_id_in_body_does_not_override_storage_id(client, seed_user):
    res = await client.post("/user", json={
        "id": seed_user.id, "username": "erin", "email": "e@x.com",
    })
    assert res.status_code == 200
    assert res.json()["id"] != seed_user.id
