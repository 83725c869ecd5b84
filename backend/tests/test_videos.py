from sqlalchemy.exc import SQLAlchemyError

from agri_edu.db.repositories import video_repo


async def test_create_video_and_additional_video(client, video):
    assert video["type"] == "animal"
    assert video["youtubeId"] is None

    res = await client.post("/additional-videos", json={"title": "B", "youtubeId": "x", "videoId": video["id"]})
    assert res.status_code == 201
    assert res.json()["videoId"] == video["id"]

    res = await client.post("/additional-videos", json={"title": "B", "youtubeId": "x", "videoId": 9999})
    assert res.status_code == 404
    assert res.json() == {"message": "Main video not found"}


async def test_create_video_missing_fields(client):
    res = await client.post("/videos", json={"title": "A"})
    assert res.status_code == 400
    assert res.json()["message"] == "Missing required fields: category, type"


async def test_create_video_rejects_unknown_type(client):
    res = await client.post("/videos", json={"title": "A", "category": "c", "type": "fish"})
    assert res.status_code == 400
    assert res.json()["message"] == 'Type must be either "animal" or "crop"'


async def test_update_keeps_omitted_fields(client, video):
    res = await client.put(f"/videos/{video['id']}", json={"title": "Raising dairy goats"})
    assert res.status_code == 200
    body = res.json()
    assert body["title"] == "Raising dairy goats"
    assert body["category"] == "livestock"
    assert body["type"] == "animal"

    res = await client.put(f"/videos/{video['id']}", json={"title": None, "youtubeId": "abc123"})
    assert res.json()["title"] == "Raising dairy goats"
    assert res.json()["youtubeId"] == "abc123"


async def test_update_rejects_invalid_type(client, video):
    res = await client.put(f"/videos/{video['id']}", json={"type": "tree"})
    assert res.status_code == 400
    res = await client.get(f"/videos/{video['id']}")
    assert res.json()["type"] == "animal"


async def test_video_detail_includes_children(client, video, qna):
    await client.post("/additional-videos", json={"title": "Part 2", "youtubeId": "yt2", "videoId": video["id"]})
    res = await client.get(f"/videos/{video['id']}")
    assert res.status_code == 200
    body = res.json()
    assert [v["title"] for v in body["additionalVideos"]] == ["Part 2"]
    assert [q["id"] for q in body["questionsAndAnswers"]] == [qna["id"]]


async def test_filters_and_search(client, video):
    await client.post("/videos", json={"title": "Planting maize", "category": "cereals", "type": "crop"})

    res = await client.get("/videos/category/livestock")
    assert [v["title"] for v in res.json()] == ["Raising goats"]

    res = await client.get("/videos/type/crop")
    assert [v["title"] for v in res.json()] == ["Planting maize"]

    res = await client.get("/videos/type/fish")
    assert res.status_code == 400

    res = await client.get("/videos/search", params={"query": "GOAT"})
    assert [v["title"] for v in res.json()] == ["Raising goats"]

    res = await client.get("/videos/search")
    assert res.status_code == 400
    assert res.json()["message"] == "Search query is required"


async def test_delete_video(client, video):
    res = await client.delete(f"/videos/{video['id']}")
    assert res.status_code == 200
    assert res.json() == {"message": "Video deleted successfully"}
    assert (await client.get(f"/videos/{video['id']}")).status_code == 404
    assert (await client.delete(f"/videos/{video['id']}")).status_code == 404


async def test_additional_video_update_validates_parent(client, video):
    res = await client.post("/additional-videos", json={"title": "B", "youtubeId": "x", "videoId": video["id"]})
    extra_id = res.json()["id"]

    res = await client.put(f"/additional-videos/{extra_id}", json={"videoId": 9999})
    assert res.status_code == 404

    res = await client.put(f"/additional-videos/{extra_id}", json={"youtubeId": "y"})
    assert res.status_code == 200
    assert res.json()["title"] == "B"
    assert res.json()["youtubeId"] == "y"

    res = await client.get(f"/additional-videos/video/{video['id']}")
    assert len(res.json()) == 1
    assert (await client.get("/additional-videos/video/9999")).status_code == 404


async def test_store_failure_returns_500(client, monkeypatch):
    async def broken(session):
        raise SQLAlchemyError("connection lost")

    monkeypatch.setattr(video_repo, "list_videos", broken)
    res = await client.get("/videos")
    assert res.status_code == 500
    assert res.json() == {"message": "Internal server error", "error": "connection lost"}


async def test_update_blank_strings_keep_stored_values(client, video):
    res = await client.put(f"/videos/{video['id']}", json={"title": "", "category": "  "})
    assert res.status_code == 200
    assert res.json()["title"] == "Raising goats"
    assert res.json()["category"] == "livestock"

    res = await client.put(f"/videos/{video['id']}", json={"type": "", "title": "Goat kids"})
    assert res.status_code == 200
    assert res.json()["type"] == "animal"
    assert res.json()["title"] == "Goat kids"
