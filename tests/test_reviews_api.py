"""Review API 테스트. 작성·중복·수정·삭제와 대학 평균 평점 재계산."""

import uuid


async def _post_review(client, headers, college_id, rating, comment="Nice campus"):
    return await client.post(
        "/api/reviews",
        json={"collegeId": college_id, "rating": rating, "comment": comment},
        headers=headers,
    )


async def _college_rating(client, college_id) -> float:
    return (await client.get(f"/api/colleges/{college_id}")).json()["rating"]


async def test_rating_follows_reviews(client, register_user, create_college):
    """리뷰 5 → 평균 5.0, 두 번째 리뷰 3 → 4.0."""
    alice = await register_user(name="Alice")
    bob = await register_user(name="Bob")
    college = await create_college(alice["headers"])
    assert await _college_rating(client, college["id"]) == 0

    first = await _post_review(client, alice["headers"], college["id"], 5)
    assert first.status_code == 201
    data = first.json()
    assert data["message"] == "Review created successfully"
    assert data["review"]["userName"] == "Alice"
    assert data["review"]["collegeId"] == college["id"]
    assert await _college_rating(client, college["id"]) == 5.0

    await _post_review(client, bob["headers"], college["id"], 3)
    assert await _college_rating(client, college["id"]) == 4.0


async def test_second_review_by_same_user_rejected(client, register_user, create_college):
    alice = await register_user()
    college = await create_college(alice["headers"])
    await _post_review(client, alice["headers"], college["id"], 4)
    res = await _post_review(client, alice["headers"], college["id"], 2)
    assert res.status_code == 400
    assert res.json() == {"error": "You have already reviewed this college"}
    assert await _college_rating(client, college["id"]) == 4.0


async def test_review_validation(client, register_user, create_college):
    alice = await register_user()
    college = await create_college(alice["headers"])

    out_of_range = await _post_review(client, alice["headers"], college["id"], 6)
    assert out_of_range.status_code == 400
    assert out_of_range.json() == {"error": "Rating must be between 1 and 5"}

    missing = await client.post(
        "/api/reviews", json={"collegeId": college["id"], "rating": 3}, headers=alice["headers"]
    )
    assert missing.status_code == 400
    assert missing.json() == {"error": "College ID, rating, and comment are required"}

    unknown = await _post_review(client, alice["headers"], str(uuid.uuid4()), 3)
    assert unknown.status_code == 404
    assert unknown.json() == {"error": "College not found"}


async def test_update_review_recomputes_rating(client, register_user, create_college):
    alice = await register_user()
    bob = await register_user()
    college = await create_college(alice["headers"])
    review = (await _post_review(client, alice["headers"], college["id"], 5)).json()["review"]
    await _post_review(client, bob["headers"], college["id"], 4)
    assert await _college_rating(client, college["id"]) == 4.5

    res = await client.put(
        f"/api/reviews/{review['id']}",
        json={"rating": 3, "comment": "Changed my mind"},
        headers=alice["headers"],
    )
    assert res.status_code == 200
    assert res.json()["message"] == "Review updated successfully"
    assert res.json()["review"]["comment"] == "Changed my mind"
    assert await _college_rating(client, college["id"]) == 3.5


async def test_update_review_rejects_bad_rating(client, register_user, create_college):
    alice = await register_user()
    college = await create_college(alice["headers"])
    review = (await _post_review(client, alice["headers"], college["id"], 5)).json()["review"]
    res = await client.put(
        f"/api/reviews/{review['id']}", json={"rating": 0}, headers=alice["headers"]
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Rating must be between 1 and 5"}


async def test_only_author_can_modify_review(client, register_user, create_college):
    alice = await register_user()
    mallory = await register_user()
    college = await create_college(alice["headers"])
    review = (await _post_review(client, alice["headers"], college["id"], 5)).json()["review"]

    put = await client.put(
        f"/api/reviews/{review['id']}", json={"rating": 1}, headers=mallory["headers"]
    )
    delete = await client.delete(f"/api/reviews/{review['id']}", headers=mallory["headers"])
    assert put.status_code == delete.status_code == 404
    assert put.json() == {"error": "Review not found"}
    assert await _college_rating(client, college["id"]) == 5.0


async def test_delete_last_review_resets_rating(client, register_user, create_college):
    alice = await register_user()
    college = await create_college(alice["headers"], rating=4.5)
    review = (await _post_review(client, alice["headers"], college["id"], 2)).json()["review"]
    assert await _college_rating(client, college["id"]) == 2.0

    res = await client.delete(f"/api/reviews/{review['id']}", headers=alice["headers"])
    assert res.status_code == 200
    assert res.json() == {"message": "Review deleted successfully"}
    assert await _college_rating(client, college["id"]) == 0


async def test_list_college_reviews_newest_first(client, register_user, create_college):
    alice = await register_user(name="Alice")
    bob = await register_user(name="Bob")
    college = await create_college(alice["headers"])
    await _post_review(client, alice["headers"], college["id"], 5)
    await _post_review(client, bob["headers"], college["id"], 4)

    res = await client.get(f"/api/reviews/college/{college['id']}")
    assert res.status_code == 200
    assert [r["userName"] for r in res.json()] == ["Bob", "Alice"]

    bad = await client.get("/api/reviews/college/nope")
    assert bad.status_code == 400
    assert bad.json() == {"error": "Invalid college ID"}


async def test_list_my_reviews_includes_college(client, register_user, create_college):
    alice = await register_user()
    college = await create_college(alice["headers"], name="Oxford University")
    await _post_review(client, alice["headers"], college["id"], 4)

    res = await client.get("/api/reviews/user", headers=alice["headers"])
    assert res.status_code == 200
    reviews = res.json()
    assert len(reviews) == 1
    assert reviews[0]["college"]["name"] == "Oxford University"


async def test_oauth_user_without_name_reviews_under_email(client, create_college):
    login = await client.post("/api/auth/google-login", json={"email": "anon@example.com"})
    headers = {"Authorization": f"Bearer {login.json()['token']}"}
    college = await create_college(headers)
    res = await _post_review(client, headers, college["id"], 4)
    assert res.json()["review"]["userName"] == "anon@example.com"
