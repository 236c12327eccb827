import mongomock
import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from dbase.collections.PostCollection import PostCollection
from dbase.driver import DbaseDriver

TEST_DATABASE_URL = "mongodb://localhost/test-blog-app"


@pytest.fixture
def driver():
    return DbaseDriver(TEST_DATABASE_URL, db_name="test-blog-app", client=mongomock.MongoClient())


@pytest.fixture
def posts(driver):
    return PostCollection(db=driver)


@pytest.fixture
def app(driver):
    return create_app(driver)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def new_post():
    return {
        "title": "Ten things about MongoDB",
        "content": "Documents all the way down.",
        "author": {"firstName": "Ada", "lastName": "Lovelace"},
    }


@pytest.fixture
def seeded(client, new_post):
    resp = client.post("/posts", json=new_post)
    assert resp.status_code == 201
    return resp.json()
