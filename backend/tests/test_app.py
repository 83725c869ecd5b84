async def test_health(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}
    assert "x-process-time" in res.headers


async def test_invalid_path_id_is_bad_request(client):
    res = await client.get("/videos/not-a-number")
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid request"


async def test_malformed_body_is_bad_request(client):
    res = await client.post("/chat", json={"text": "hi", "isBot": "maybe", "userId": 1})
    assert res.status_code == 400
    assert "isBot" in res.json()["error"]


async def test_missing_entities_are_404(client):
    for path in ("/videos/1", "/quizzes/1", "/questions/1", "/animals/1", "/qna/1", "/replies/1", "/progress/1"):
        res = await client.get(path)
        assert res.status_code == 404, path
        assert res.json()["message"].endswith("not found")
