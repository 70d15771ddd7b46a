import os

# Settings are read at import time, so the environment is prepared first
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-influencer-api")
os.environ.setdefault("MONGODB_DB", "influencers_test")

import mongomock
import pytest
from fastapi.testclient import TestClient

from influencer_api.core import database
from influencer_api.core.config import settings
from main import app


@pytest.fixture
def mongo_client():
    return mongomock.MongoClient()


@pytest.fixture
def db(mongo_client):
    database.close_db()
    yield database.init_db(mongo_client)
    database.close_db()


@pytest.fixture(autouse=True)
def upload_dir(tmp_path, monkeypatch):
    path = str(tmp_path / "uploads")
    monkeypatch.setattr(settings, "upload_dir", path)
    # the mounted StaticFiles app resolved its directory at import
    static = next(r.app for r in app.routes if getattr(r, "name", None) == "uploads")
    monkeypatch.setattr(static, "directory", path)
    monkeypatch.setattr(static, "all_directories", [path])
    return path


@pytest.fixture
def client(db, upload_dir):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def credentials():
    return {"email": "creator@example.com", "password": "s3cret-pass"}


@pytest.fixture
def token(client, credentials):
    assert client.post("/signup", json=credentials).status_code == 201
    res = client.post("/login", json=credentials)
    assert res.status_code == 200
    return res.json()["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def profile_form():
    return {
        "youtubeLink": "https://youtube.com/@creator",
        "instagramLink": "https://instagram.com/creator",
        "accountName": "creator",
        "email": "contact@creator.example.com",
        "followers": "12.5k",
        "category": "travel",
    }


@pytest.fixture
def image_file():
    return {"profileImage": ("avatar.PNG", b"\x89PNG\r\n\x1a\nfake-image", "image/png")}
