from app.db.models.comment import Comment


def test_create_and_list_comments(client, user_factory, post_factory):
    post = post_factory()
    user = user_factory(username="Bo")
    response = client.post("/api/comments", json={"comment_text": "First!", "user_id": user.id, "post_id": post.id})
    assert response.status_code == 200
    created = response.json()
    assert created["comment_text"] == "First!"
    assert created["post_id"] == post.id

    listed = client.get("/api/comments").json()
    assert [(c["id"], c["user"]["username"]) for c in listed] == [(created["id"], "Bo")]


def test_empty_comment_is_rejected(client, db_session, user_factory, post_factory):
    post = post_factory()
    user = user_factory()
    response = client.post("/api/comments", json={"comment_text": "", "user_id": user.id, "post_id": post.id})
    assert response.status_code == 500
    assert response.json()["name"] == "ValidationError"
    assert db_session.query(Comment).count() == 0


def test_delete_comment(client, user_factory, post_factory):
    post = post_factory()
    user = user_factory()
    created = client.post("/api/comments", json={"comment_text": "Hmm", "user_id": user.id, "post_id": post.id}).json()

    assert client.delete(f"/api/comments/{created['id']}").json() == 1
    assert client.delete(f"/api/comments/{created['id']}").status_code == 404
