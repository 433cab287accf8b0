"""Tests for environment-driven settings, CORS and logging setup."""

import importlib
import logging

import pytest

import config
from app import create_app


@pytest.fixture
def reload_config(monkeypatch):
    """Reload config under a patched environment, restoring it afterwards."""
    def _reload(**env):
        for name in ("PORT", "CORS_ORIGINS"):
            monkeypatch.delenv(name, raising=False)
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


class TestConfig:

    def test_defaults(self, reload_config):
        cfg = reload_config()
        assert cfg.Config.PORT == 3000
        assert cfg.Config.CORS_ORIGINS == "*"

    def test_port_from_environment(self, reload_config):
        assert reload_config(PORT="8080").Config.PORT == 8080

    def test_cors_origins_from_environment(self, reload_config):
        cfg = reload_config(CORS_ORIGINS="https://a.example, https://b.example,")
        assert cfg.Config.CORS_ORIGINS == ["https://a.example", "https://b.example"]

    def test_star_means_any_origin(self, reload_config):
        assert reload_config(CORS_ORIGINS=" * ").Config.CORS_ORIGINS == "*"


@pytest.fixture
def cors_app(tmp_path):
    app = create_app("config.TestingConfig", overrides={
        "STATIC_FOLDER": str(tmp_path / "public"),
        "CORS_ORIGINS": ["https://allowed.example"],
    })
    yield app
    app.extensions["image_store"].close()


class TestCors:

    def test_allowed_origin(self, cors_app):
        response = cors_app.test_client().get(
            "/api/cars/all", headers={"Origin": "https://allowed.example"})
        assert response.status_code == 200
        assert response.headers["Access-Control-Allow-Origin"] == "https://allowed.example"

    def test_disallowed_origin(self, cors_app):
        response = cors_app.test_client().get(
            "/api/cars/all", headers={"Origin": "https://evil.example"})
        assert response.status_code == 200
        assert "Access-Control-Allow-Origin" not in response.headers

    def test_any_origin_by_default(self, client):
        response = client.get("/api/cars/all", headers={"Origin": "https://anywhere.example"})
        assert response.headers["Access-Control-Allow-Origin"] == "*"


class TestLogging:

    def test_create_app_leaves_root_logger_alone(self, tmp_path):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level

        app = create_app("config.TestingConfig", overrides={
            "STATIC_FOLDER": str(tmp_path / "public"),
            "LOG_LEVEL": "DEBUG",
        })
        app.extensions["image_store"].close()

        assert root.handlers == handlers
        assert root.level == level
        assert app.logger.level == logging.DEBUG
