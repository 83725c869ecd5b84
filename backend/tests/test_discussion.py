async def test_create_qna_requires_existing_video(client):
    res = await client.post(
        "/qna", json={"text": "Q", "authorName": "A", "authorImage": "a.png", "videoId": 9999}
    )
    assert res.status_code == 404
    assert res.json()["message"] == "Video not found"

    res = await client.post("/qna", json={"text": "Q", "authorName": "A"})
    assert res.status_code == 400
    assert res.json()["message"] == "Missing required fields: authorImage, videoId"


async def test_qna_with_replies(client, qna, reply):
    res = await client.get(f"/qna/{qna['id']}")
    assert res.status_code == 200
    assert [r["id"] for r in res.json()["replies"]] == [reply["id"]]

    res = await client.get(f"/qna/video/{qna['videoId']}")
    assert [q["id"] for q in res.json()] == [qna["id"]]
    assert (await client.get("/qna/video/9999")).status_code == 404

    assert [q["id"] for q in (await client.get("/qna/user/1")).json()] == [qna["id"]]
    assert [r["id"] for r in (await client.get(f"/replies/qna/{qna['id']}")).json()] == [reply["id"]]
    assert [r["id"] for r in (await client.get("/replies/user/2")).json()] == [reply["id"]]


async def test_qna_update_is_owner_only(client, qna):
    res = await client.put(f"/qna/{qna['id']}", json={"text": "Edited", "userId": 2})
    assert res.status_code == 403

    res = await client.put(f"/qna/{qna['id']}", json={"text": "Edited"})
    assert res.status_code == 400

    res = await client.put(f"/qna/{qna['id']}", json={"text": "Edited", "userId": 1})
    assert res.status_code == 200
    assert res.json()["text"] == "Edited"
    assert res.json()["authorName"] == "Amira"


async def test_reply_update_by_other_user_is_forbidden(client, reply):
    res = await client.put(f"/replies/{reply['id']}", json={"text": "Hijacked", "userId": 1})
    assert res.status_code == 403
    assert res.json()["message"] == "Unauthorized: Only the owner can update this reply"

    res = await client.get(f"/replies/{reply['id']}")
    assert res.json()["text"] == "Twice a day."

    res = await client.put(f"/replies/{reply['id']}", json={"text": "Three times a day.", "userId": 2})
    assert res.status_code == 200
    assert res.json()["text"] == "Three times a day."


async def test_reply_delete_by_other_user_is_forbidden(client, reply):
    res = await client.request("DELETE", f"/replies/{reply['id']}", json={"userId": 1})
    assert res.status_code == 403
    assert (await client.get(f"/replies/{reply['id']}")).status_code == 200

    res = await client.request("DELETE", f"/replies/{reply['id']}", json={"userId": 2})
    assert res.status_code == 200
    assert res.json() == {"message": "Reply deleted successfully"}
    assert (await client.get(f"/replies/{reply['id']}")).status_code == 404


async def test_create_reply_requires_existing_qna(client):
    res = await client.post(
        "/replies",
        json={"text": "R", "authorName": "A", "authorImage": "a.png", "questionAndAnswerId": 9999},
    )
    assert res.status_code == 404
    assert res.json()["message"] == "Question and answer not found"


async def test_toggle_like_uses_like_rows(client, make_user, qna, reply):
    await make_user("amira")
    await make_user("karim")

    res = await client.put(f"/qna/{qna['id']}/toggle-like", json={"userId": 2})
    assert res.status_code == 200
    assert res.json() == {
        "contentType": "question",
        "contentId": qna["id"],
        "userId": 2,
        "liked": True,
        "totalLikes": 1,
    }
    assert (await client.get(f"/likes/check/2/question/{qna['id']}")).json()["hasLiked"] is True

    res = await client.put(f"/qna/{qna['id']}/toggle-like", json={"userId": 2})
    assert res.json()["liked"] is False
    assert res.json()["totalLikes"] == 0

    res = await client.put(f"/replies/{reply['id']}/toggle-like", json={"userId": 1})
    assert res.json()["liked"] is True
    assert (await client.put(f"/replies/{reply['id']}/toggle-like", json={})).status_code == 400
    assert (await client.put("/replies/9999/toggle-like", json={"userId": 1})).status_code == 404


async def test_delete_qna_removes_replies_and_likes(client, make_user, qna, reply):
    await make_user("amira")
    await client.post("/likes/add", json={"userId": 1, "contentType": "reply", "contentId": reply["id"]})

    res = await client.request("DELETE", f"/qna/{qna['id']}", json={"userId": 2})
    assert res.status_code == 403

    res = await client.request("DELETE", f"/qna/{qna['id']}")
    assert res.status_code == 400

    res = await client.request("DELETE", f"/qna/{qna['id']}", json={"userId": 1})
    assert res.status_code == 200
    assert (await client.get(f"/replies/{reply['id']}")).status_code == 404
    assert (await client.get(f"/likes/count/reply/{reply['id']}")).json()["totalLikes"] == 0
