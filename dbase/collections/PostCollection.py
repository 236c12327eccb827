import os
from typing import List, Optional

from bson import ObjectId
from pymongo import ReturnDocument

from dbase.driver import DbaseDriver
from dbase.models.PostModel import Author, Post

UPDATABLE_FIELDS = ("title", "content", "author")


class PostCollection:
    """
    Provides CRUD helpers for blog posts stored in MongoDB.
    Documents are keyed by a generated ObjectId (_id); callers only ever see
    its hex string.
    """

    def __init__(self, collection_name: Optional[str] = None, db: Optional[DbaseDriver] = None):
        self.db = db or DbaseDriver()
        self.collection = self.db.get_collection(collection_name or os.getenv("MONGODB_COLLECTION", "posts"))

    @staticmethod
    def _object_id(post_id: str) -> Optional[ObjectId]:
        if not ObjectId.is_valid(post_id):
            return None
        return ObjectId(post_id)

    @staticmethod
    def _serialize(document: Optional[dict]) -> Optional[Post]:
        if not document:
            return None
        return Post.from_document(document)

    def list(self) -> List[Post]:
        return [self._serialize(doc) for doc in self.collection.find({})]

    def get(self, post_id: str) -> Optional[Post]:
        object_id = self._object_id(post_id)
        if object_id is None:
            return None
        return self._serialize(self.collection.find_one({"_id": object_id}))

    def create(self, title: str, content: str, author: Author) -> Post:
        document = {
            "title": title,
            "content": content,
            "author": author.model_dump(),
        }
        result = self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return self._serialize(document)

    def update(self, post_id: str, fields: dict) -> Optional[Post]:
        object_id = self._object_id(post_id)
        if object_id is None:
            return None

        updates = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS}
        if isinstance(updates.get("author"), Author):
            updates["author"] = updates["author"].model_dump()

        if not updates:
            return self._serialize(self.collection.find_one({"_id": object_id}))

        document = self.collection.find_one_and_update(
            {"_id": object_id}, {"$set": updates}, return_document=ReturnDocument.AFTER
        )
        return self._serialize(document)

    def delete(self, post_id: str) -> bool:
        object_id = self._object_id(post_id)
        if object_id is None:
            return False
        result = self.collection.delete_one({"_id": object_id})
        return result.deleted_count == 1
