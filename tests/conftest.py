"""Pytest configuration and shared fixtures."""

import io

import pytest

from app import create_app
from db import db


@pytest.fixture
def app(tmp_path):
    """App on an in-memory database with a temporary static folder."""
    static_folder = tmp_path / "public"
    app = create_app("config.TestingConfig", overrides={
        "STATIC_FOLDER": str(static_folder),
        "IMAGE_FOLDER": str(static_folder / "images"),
    })
    yield app
    app.extensions["image_store"].close()
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def image_store(app):
    return app.extensions["image_store"]


@pytest.fixture
def car_store(app):
    return app.extensions["car_store"]


@pytest.fixture
def car_form():
    """Form fields for a valid car."""
    return {
        "name": "Model S",
        "brand": "Tesla",
        "model": "S",
        "year": "2023",
        "price": "79999.99",
    }


@pytest.fixture
def make_image():
    def _make(name="photo.png", content=b"\x89PNG fake image"):
        return (io.BytesIO(content), name)
    return _make
