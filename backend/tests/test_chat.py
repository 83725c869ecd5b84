async def _post(client, text, user_id=1, is_bot=False):
    res = await client.post("/chat", json={"text": text, "isBot": is_bot, "userId": user_id})
    assert res.status_code == 201
    return res.json()


async def test_create_requires_all_fields(client):
    res = await client.post("/chat", json={"text": "hello", "userId": 1})
    assert res.status_code == 400
    assert res.json()["message"] == "Missing required fields: isBot"

    message = await _post(client, "hello", is_bot=False)
    assert message["isBot"] is False
    assert message["timestamp"]


async def test_latest_returns_last_twenty_oldest_first(client):
    for i in range(25):
        await _post(client, f"msg {i}", is_bot=i % 2 == 1)
    await _post(client, "someone else", user_id=2)

    res = await client.get("/chat/latest/1")
    texts = [m["text"] for m in res.json()]
    assert texts == [f"msg {i}" for i in range(5, 25)]

    timestamps = [m["timestamp"] for m in res.json()]
    assert timestamps == sorted(timestamps)


async def test_latest_with_short_history(client):
    await _post(client, "only one")
    assert [m["text"] for m in (await client.get("/chat/latest/1")).json()] == ["only one"]
    assert (await client.get("/chat/latest/99")).json() == []


async def test_delete_checks_owner(client):
    message = await _post(client, "mine", user_id=1)

    res = await client.request("DELETE", f"/chat/{message['id']}", json={"userId": 2})
    assert res.status_code == 403
    assert res.json()["message"] == "Not authorized to delete this message"

    res = await client.request("DELETE", f"/chat/{message['id']}")
    assert res.status_code == 403

    res = await client.request("DELETE", f"/chat/{message['id']}", json={"userId": 1})
    assert res.status_code == 200
    assert res.json() == {"message": "Message deleted successfully"}

    res = await client.request("DELETE", f"/chat/{message['id']}", json={"userId": 1})
    assert res.status_code == 404


async def test_clear_history(client):
    await _post(client, "a")
    await _post(client, "b")
    await _post(client, "keep", user_id=2)

    res = await client.delete("/chat/clear/1")
    assert res.json() == {"message": "Chat history cleared successfully"}
    assert (await client.get("/chat/user/1")).json() == []
    assert [m["text"] for m in (await client.get("/chat")).json()] == ["keep"]

    res = await client.delete("/chat/clear/1")
    assert res.status_code == 200
