# tests/conftest.py
import io

import pytest
from werkzeug.datastructures import FileStorage

from engine_inventory import create_app
from engine_inventory.config import Config
from engine_inventory.extensions import db

LOGIN = "admin"
PASSWORD = "s3cret"


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-key"
    ADMIN_LOGIN = LOGIN
    ADMIN_PASSWORD = PASSWORD


@pytest.fixture
def flask_app(tmp_path):
    class _Config(TestingConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'engines.db'}"
        UPLOAD_FOLDER = str(tmp_path / "uploads")

    app = create_app(_Config)
    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def app(flask_app):
    """App with an application context pushed, for calling services directly."""
    with flask_app.app_context():
        yield flask_app
        db.session.remove()


@pytest.fixture
def upload_dir(flask_app):
    return flask_app.config["UPLOAD_FOLDER"]


# HTTP fixtures run without an outer app context so every request gets its own
@pytest.fixture
def anon_client(flask_app):
    return flask_app.test_client()


@pytest.fixture
def client(flask_app):
    client = flask_app.test_client()
    resp = client.post("/login", json={"username": LOGIN, "password": PASSWORD})
    assert resp.status_code == 200
    return client


def make_image(filename="photo.png", content=b"\x89PNG fake image bytes"):
    return FileStorage(stream=io.BytesIO(content), filename=filename)
