"""Feed: all posts, each with its author embedded."""


async def test_empty_feed(client):
    res = await client.get("/feed")
    assert res.status_code == 200
    assert res.json() == []


async def test_feed_embeds_authors(client, seed_user):
    await client.post("/user", json={"username": "bob", "email": "b@x.com"})
    await client.post("/post", json={"content": "one", "authorEmail": "a@x.com"})
    await client.post("/post", json={"content": "two", "authorEmail": "b@x.com"})

    res = await client.get("/feed")
    assert res.status_code == 200
    by_content = {p["content"]: p for p in res.json()}
    assert set(by_content) == {"one", "two"}
    assert by_content["one"]["author"]["username"] == "alice"
    assert by_content["one"]["author"]["name"] == "Alice"
    assert by_content["two"]["author"]["email"] == "b@x.com"
    assert by_content["two"]["authorId"] == by_content["two"]["author"]["id"]


async def test_feed_trailing_slash_served_directly(client, seed_user):
    await client.post("/post", json={"content": "one", "authorEmail": "a@x.com"})
    res = await client.get("/feed/")
    assert res.status_code == 200
    assert [p["content"] for p in res.json()] == ["one"]
