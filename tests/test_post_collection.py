from bson import ObjectId

from dbase.models.PostModel import Author


def _create(posts, title="Hello"):
    return posts.create(title, "Body text", Author(firstName="Grace", lastName="Hopper"))


def test_create_assigns_id(posts):
    post = _create(posts)
    assert ObjectId.is_valid(post.id)
    assert posts.collection.count_documents({}) == 1


def test_list_returns_all_posts(posts):
    ids = {_create(posts, "one").id, _create(posts, "two").id}
    assert {post.id for post in posts.list()} == ids


def test_get_missing_and_malformed_ids(posts):
    assert posts.get(str(ObjectId())) is None
    assert posts.get("not-an-object-id") is None


def test_update_only_touches_given_fields(posts):
    post = _create(posts)
    updated = posts.update(post.id, {"title": "New title", "id": "ignored"})
    assert updated.title == "New title"
    assert updated.content == post.content
    assert updated.author == post.author
    assert updated.id == post.id


def test_update_replaces_author_wholesale(posts):
    post = _create(posts)
    updated = posts.update(post.id, {"author": Author(firstName="Alan", lastName="Turing")})
    assert updated.author.model_dump() == {"firstName": "Alan", "lastName": "Turing"}


def test_empty_update_returns_existing(posts):
    post = _create(posts)
    assert posts.update(post.id, {}) == post


def test_update_missing_post(posts):
    assert posts.update(str(ObjectId()), {"title": "x"}) is None
    assert posts.update("bogus", {"title": "x"}) is None


def test_delete_is_idempotent(posts):
    post = _create(posts)
    assert posts.delete(post.id) is True
    assert posts.delete(post.id) is False
    assert posts.delete("bogus") is False
    assert posts.get(post.id) is None
