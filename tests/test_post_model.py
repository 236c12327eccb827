from bson import ObjectId

from dbase.models.PostModel import Author, Post, to_representation


def _post(first="Ada", last="Lovelace"):
    return Post(id="abc", title="t", content="c", author=Author(firstName=first, lastName=last))


def test_representation_joins_author_name():
    rep = to_representation(_post())
    assert rep.model_dump() == {"id": "abc", "title": "t", "content": "c", "author": "Ada Lovelace"}


def test_representation_strips_outer_whitespace():
    assert to_representation(_post(first=" Ada", last="Lovelace ")).author == "Ada Lovelace"


def test_from_document_stringifies_object_id():
    oid = ObjectId()
    post = Post.from_document(
        {"_id": oid, "title": "t", "content": "c", "author": {"firstName": "A", "lastName": "B"}}
    )
    assert post.id == str(oid)
    assert post.author.lastName == "B"
