async def test_add_twice_then_remove_and_add_again(client, make_user, qna):
    await make_user("amira")
    like = {"userId": 1, "contentType": "question", "contentId": qna["id"]}

    res = await client.post("/likes/add", json=like)
    assert res.status_code == 201
    assert res.json()["totalLikes"] == 1
    assert res.json()["like"]["contentType"] == "question"

    res = await client.post("/likes/add", json=like)
    assert res.status_code == 400
    assert res.json()["message"] == "User already liked this content"

    res = await client.post("/likes/remove", json=like)
    assert res.status_code == 200
    assert res.json() == {"message": "Like removed successfully", "totalLikes": 0}

    res = await client.post("/likes/add", json=like)
    assert res.status_code == 201

    res = await client.get(f"/likes/count/question/{qna['id']}")
    assert res.json() == {"totalLikes": 1}


async def test_add_like_validation(client, make_user, qna):
    await make_user("amira")

    res = await client.post("/likes/add", json={"userId": 1, "contentType": "question"})
    assert res.status_code == 400
    assert res.json()["message"] == "Missing required fields: contentId"

    res = await client.post("/likes/add", json={"userId": 1, "contentType": "video", "contentId": qna["id"]})
    assert res.status_code == 400
    assert res.json()["message"] == 'contentType must be either "question" or "reply"'

    res = await client.post("/likes/add", json={"userId": 1, "contentType": "question", "contentId": 9999})
    assert res.status_code == 404
    assert res.json()["message"] == "Question not found"

    res = await client.post("/likes/add", json={"userId": 1, "contentType": "reply", "contentId": 9999})
    assert res.status_code == 404
    assert res.json()["message"] == "Reply not found"


async def test_remove_missing_like(client, qna):
    res = await client.post("/likes/remove", json={"userId": 1, "contentType": "question", "contentId": qna["id"]})
    assert res.status_code == 404
    assert res.json()["message"] == "Like not found"


async def test_likes_are_counted_per_content(client, make_user, qna, reply):
    await make_user("amira")
    await make_user("karim", picture="karim.png")
    for user_id in (1, 2):
        await client.post("/likes/add", json={"userId": user_id, "contentType": "question", "contentId": qna["id"]})
    await client.post("/likes/add", json={"userId": 2, "contentType": "reply", "contentId": reply["id"]})

    assert (await client.get(f"/likes/count/question/{qna['id']}")).json()["totalLikes"] == 2
    assert (await client.get(f"/likes/count/reply/{reply['id']}")).json()["totalLikes"] == 1

    assert (await client.get(f"/likes/check/1/reply/{reply['id']}")).json() == {"hasLiked": False}
    assert (await client.get(f"/likes/check/2/reply/{reply['id']}")).json() == {"hasLiked": True}

    res = await client.get(f"/likes/question/{qna['id']}")
    users = [like["user"] for like in res.json()]
    assert users == [
        {"id": 1, "username": "amira", "profilePicture": None},
        {"id": 2, "username": "karim", "profilePicture": "karim.png"},
    ]


async def test_toggle_like_route(client, make_user, reply):
    await make_user("amira")
    body = {"userId": 1, "contentType": "reply", "contentId": reply["id"]}

    res = await client.post("/likes/toggle-like", json=body)
    assert res.json()["liked"] is True
    assert res.json()["totalLikes"] == 1

    res = await client.post("/likes/toggle-like", json=body)
    assert res.json()["liked"] is False
    assert res.json()["totalLikes"] == 0


async def test_at_most_one_like_row(client, make_user, database, qna):
    from agri_edu.db.repositories import like_repo

    await make_user("amira")
    like = {"userId": 1, "contentType": "question", "contentId": qna["id"]}
    for path in ("/likes/add", "/likes/add", "/likes/remove", "/likes/add", "/likes/add"):
        await client.post(path, json=like)

    async with database.session_maker() as session:
        assert await like_repo.count_likes(session, "question", qna["id"]) == 1


async def test_duplicate_like_past_stale_check_is_rejected(client, make_user, qna, monkeypatch):
    from agri_edu.db.repositories import like_repo

    await make_user("amira")
    like = {"userId": 1, "contentType": "question", "contentId": qna["id"]}
    assert (await client.post("/likes/add", json=like)).status_code == 201

    # first lookup misses, as if a concurrent request inserted after it ran
    real_find = like_repo.find_like
    calls = []

    async def stale_find(*args, **kwargs):
        calls.append(args)
        if len(calls) == 1:
            return None
        return await real_find(*args, **kwargs)

    monkeypatch.setattr(like_repo, "find_like", stale_find)

    res = await client.post("/likes/add", json=like)
    assert res.status_code == 400
    assert res.json()["message"] == "User already liked this content"

    monkeypatch.setattr(like_repo, "find_like", real_find)
    assert (await client.get(f"/likes/count/question/{qna['id']}")).json() == {"totalLikes": 1}


async def test_like_by_unknown_user(client, qna):
    like = {"userId": 42, "contentType": "question", "contentId": qna["id"]}
    res = await client.post("/likes/add", json=like)
    assert res.status_code == 404
    assert res.json()["message"] == "User not found"

    res = await client.post("/likes/toggle-like", json=like)
    assert res.status_code == 404
