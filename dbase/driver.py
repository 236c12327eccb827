import os
from typing import Optional

from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.errors import PyMongoError

load_dotenv()

DEFAULT_DB_NAME = "blog-app"


class DbaseDriver:
    """
    Thin wrapper around MongoClient that:
    - Reads connection settings from env (DATABASE_URL, MONGODB_DB)
    - Exposes a helper to obtain a collection handle.
    - Owns the client lifecycle (connect/close).
    """

    def __init__(self, uri: Optional[str] = None, db_name: Optional[str] = None, client=None):
        self.uri = uri or os.getenv("DATABASE_URL")
        if not self.uri:
            raise ValueError("DATABASE_URL is not set. Add it to .env or pass uri explicitly.")

        self.client = client if client is not None else MongoClient(self.uri, serverSelectionTimeoutMS=5000)

        db_name = db_name or os.getenv("MONGODB_DB")
        if db_name:
            self.db = self.client[db_name]
        else:
            self.db = self.client.get_default_database(DEFAULT_DB_NAME)
        self.db_name = self.db.name

    def connect(self):
        # MongoClient connects lazily, ping forces server selection now
        try:
            self.client.admin.command("ping")
        except PyMongoError:
            self.close()
            raise
        return self

    def get_collection(self, collection_name: str):
        return self.db[collection_name]

    def close(self):
        self.client.close()
