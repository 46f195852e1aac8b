import pytest

from santa.core.config import load_settings
from santa.services.graph import ImmediateFamilyRule


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DATABASE_URL", "LOG_LEVEL", "LOG_PATH", "HOST", "PORT", "IMMEDIATE_FAMILY_RULE"):
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+pysqlite:///santa.db")
    settings = load_settings()
    assert settings.database_url == "sqlite+pysqlite:///santa.db"
    assert settings.log_level == "INFO"
    assert settings.port == 8080
    assert settings.immediate_family_rule == ImmediateFamilyRule.ANY_EDGE


def test_database_url_required():
    with pytest.raises(ValueError, match="DATABASE_URL"):
        load_settings()


def test_target_only_rule(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+pysqlite:///santa.db")
    monkeypatch.setenv("IMMEDIATE_FAMILY_RULE", "TARGET_ONLY")
    assert load_settings().immediate_family_rule == ImmediateFamilyRule.TARGET_ONLY


def test_unknown_rule_rejected(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+pysqlite:///santa.db")
    monkeypatch.setenv("IMMEDIATE_FAMILY_RULE", "nobody")
    with pytest.raises(ValueError, match="IMMEDIATE_FAMILY_RULE"):
        load_settings()


def test_port_must_be_numeric(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+pysqlite:///santa.db")
    monkeypatch.setenv("PORT", "http")
    with pytest.raises(ValueError, match="PORT"):
        load_settings()
