from app.db.models.post import Post


def test_create_post(client, user_factory):
    user = user_factory(username="Lernantino")
    response = client.post("/api/posts", json={
        "title": "Taskmaster goes public!",
        "post_url": "https://taskmaster.com/press",
        "user_id": user.id,
    })
    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Taskmaster goes public!"
    assert body["user_id"] == user.id
    assert body["vote_count"] == 0


def test_create_post_with_bad_url_is_rejected(client, db_session, user_factory):
    user = user_factory()
    response = client.post("/api/posts", json={"title": "Bad", "post_url": "not a url", "user_id": user.id})
    assert response.status_code == 500
    assert response.json()["name"] == "ValidationError"
    assert db_session.query(Post).count() == 0


def test_list_posts(client, user_factory, post_factory, vote_factory):
    author = user_factory(username="Ana")
    older = post_factory(user=author)
    newer = post_factory(user=author)
    vote_factory(older)
    vote_factory(older)

    response = client.get("/api/posts")
    assert response.status_code == 200
    posts = response.json()
    assert [p["id"] for p in posts] == [newer.id, older.id]
    assert [p["vote_count"] for p in posts] == [0, 2]
    assert all(p["user"] == {"username": "Ana"} for p in posts)


def test_get_post_includes_comments(client, user_factory, post_factory):
    post = post_factory()
    commenter = user_factory(username="Bo")
    client.post("/api/comments", json={"comment_text": "Great read", "user_id": commenter.id, "post_id": post.id})

    response = client.get(f"/api/posts/{post.id}")
    assert response.status_code == 200
    body = response.json()
    assert body["vote_count"] == 0
    assert [(c["comment_text"], c["user"]["username"]) for c in body["comments"]] == [("Great read", "Bo")]


def test_get_missing_post_is_not_found(client):
    response = client.get("/api/posts/999")
    assert response.status_code == 404
    assert response.json() == {"message": "No post found with this id"}


def test_upvote_increments_vote_count(client, user_factory, post_factory, vote_factory):
    post = post_factory()
    for _ in range(3):
        vote_factory(post)
    voter = user_factory()

    response = client.put("/api/posts/upvote", json={"user_id": voter.id, "post_id": post.id})
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == post.id
    assert body["vote_count"] == 4
    assert client.get(f"/api/posts/{post.id}").json()["vote_count"] == 4


def test_upvote_missing_post_fails(client, user_factory):
    voter = user_factory()
    response = client.put("/api/posts/upvote", json={"user_id": voter.id, "post_id": 999})
    assert response.status_code == 500
    assert response.json()["name"] == "ReferentialViolation"


def test_update_post_title(client, post_factory):
    post = post_factory()
    response = client.put(f"/api/posts/{post.id}", json={"title": "Renamed"})
    assert response.status_code == 200
    assert response.json() == [1]
    assert client.get(f"/api/posts/{post.id}").json()["title"] == "Renamed"


def test_update_missing_post_is_not_found(client):
    assert client.put("/api/posts/999", json={"title": "Nope"}).status_code == 404


def test_delete_post(client, post_factory):
    post_id = post_factory().id
    response = client.delete(f"/api/posts/{post_id}")
    assert response.status_code == 200
    assert response.json() == 1
    assert client.get(f"/api/posts/{post_id}").status_code == 404


def test_delete_missing_post_is_not_found(client):
    response = client.delete("/api/posts/999")
    assert response.status_code == 404


def test_unknown_route_is_not_found(client):
    assert client.get("/api/nothing-here").status_code == 404


def test_out_of_range_post_id_is_not_found(client):
    huge_id = 99999999999999999999
    assert client.get(f"/api/posts/{huge_id}").status_code == 404
    assert client.put(f"/api/posts/{huge_id}", json={"title": "Nope"}).status_code == 404
    assert client.delete(f"/api/posts/{huge_id}").status_code == 404
    assert client.delete(f"/api/comments/{huge_id}").status_code == 404


def test_upvote_with_out_of_range_post_id_is_rejected(client, user_factory):
    voter = user_factory()
    response = client.put("/api/posts/upvote", json={"user_id": voter.id, "post_id": 99999999999999999999})
    assert response.status_code == 500
    assert response.json()["name"] == "ValidationError"
