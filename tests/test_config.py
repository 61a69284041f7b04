"""Tests for configuration selection and the application factory."""
import importlib

import pytest

import app.config as config_module
from app import create_app


def _reload_config(monkeypatch, env):
    for key, value in env.items():
        if value is None:
            monkeypatch.delenv(key, raising=False)
        else:
            monkeypatch.setenv(key, value)
    return importlib.reload(config_module)


@pytest.fixture(autouse=True)
def _restore_config():
    yield
    importlib.reload(config_module)


def test_testing_config_uses_memory_db(monkeypatch):
    cfg = _reload_config(monkeypatch, {'APP_ENV': 'testing', 'TEST_DATABASE_URL': None})
    cls = cfg.get_config_class()
    assert cls is cfg.TestingConfig
    assert cls.TESTING is True
    assert cls.SQLALCHEMY_DATABASE_URI == 'sqlite:///:memory:'


def test_development_defaults(monkeypatch):
    cfg = _reload_config(monkeypatch, {'APP_ENV': 'development', 'DATABASE_URL': None})
    cls = cfg.get_config_class()
    assert cls.DEBUG is True
    assert cls.SQLALCHEMY_DATABASE_URI == 'sqlite:///dev.db'


def test_unknown_env_falls_back_to_development(monkeypatch):
    cfg = _reload_config(monkeypatch, {'APP_ENV': 'staging'})
    assert cfg.get_config_class() is cfg.DevelopmentConfig


def test_production_requires_secrets(monkeypatch):
    cfg = _reload_config(monkeypatch, {
        'APP_ENV': 'production',
        'SECRET_KEY': None,
        'JWT_SECRET': None,
        'DATABASE_URL': None,
    })
    with pytest.raises(RuntimeError) as exc:
        cfg.get_config_class()
    assert 'JWT_SECRET' in str(exc.value)


def test_production_with_secrets(monkeypatch):
    cfg = _reload_config(monkeypatch, {
        'APP_ENV': 'production',
        'SECRET_KEY': 's',
        'JWT_SECRET': 'j' * 32,
        'DATABASE_URL': 'postgresql://db/streetsupply',
    })
    cls = cfg.get_config_class()
    assert cls is cfg.ProductionConfig
    assert cls.SQLALCHEMY_DATABASE_URI == 'postgresql://db/streetsupply'


def test_env_overrides_rate_limits(monkeypatch):
    cfg = _reload_config(monkeypatch, {'CHECKOUT_LIMIT_PER_IP': '3 per minute'})
    assert cfg.BaseConfig.CHECKOUT_LIMIT_PER_IP == '3 per minute'


class _CorsConfig(config_module.TestingConfig):
    CORS_ALLOWED_ORIGINS = "http://localhost:3000,https://app.example.com"


def test_cors_preflight_allows_whitelisted_origin():
    client = create_app(_CorsConfig).test_client()
    resp = client.open(
        "/__ok",
        method="OPTIONS",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert resp.status_code in (200, 204)
    assert resp.headers.get("Access-Control-Allow-Origin") == "http://localhost:3000"


def test_cors_preflight_blocks_disallowed_origin():
    client = create_app(_CorsConfig).test_client()
    resp = client.open(
        "/__ok",
        method="OPTIONS",
        headers={
            "Origin": "http://evil.test",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert "Access-Control-Allow-Origin" not in resp.headers
