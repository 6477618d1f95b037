import os
import runpy

from wedding_planner.core.config import Settings, settings

GUNICORN_CONF = os.path.join(os.path.dirname(__file__), "..", "gunicorn.conf.py")


def test_local_cors_origins_follow_the_app_port():
    local = Settings(PORT=8080, ENVIRONMENT="development", ALLOWED_ORIGINS="")
    assert local.cors_origins == ["http://localhost:8080", "http://localhost:5173"]


def test_explicit_origins_win():
    configured = Settings(ALLOWED_ORIGINS="https://a.example.com, https://b.example.com")
    assert configured.cors_origins == ["https://a.example.com", "https://b.example.com"]


def test_production_without_origins_allows_none():
    production = Settings(ENVIRONMENT="production", ALLOWED_ORIGINS="")
    assert production.is_production
    assert production.cors_origins == []


def test_gunicorn_binds_the_configured_port():
    config = runpy.run_path(GUNICORN_CONF)
    assert config["bind"] == f"0.0.0.0:{settings.PORT}"
    assert config["wsgi_app"] == "wedding_planner.main:app"
