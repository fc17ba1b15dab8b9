"""Tests for configuration helpers."""

import pytest

from dish_nutrition.config import Settings, parse_cors_origins


@pytest.mark.parametrize("raw", [None, "", "  ", "*"])
def test_parse_cors_origins_defaults_to_wildcard(raw: str | None) -> None:
    assert parse_cors_origins(raw) == ["*"]


def test_parse_cors_origins_splits_list() -> None:
    raw = "https://a.example.com, https://b.example.com,"

    assert parse_cors_origins(raw) == [
        "https://a.example.com",
        "https://b.example.com",
    ]


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUPABASE_URL", "https://db.example.co")
    monkeypatch.setenv("SUPABASE_SERVICE_KEY", "secret")
    monkeypatch.setenv("AI_PROVIDER", "openai")
    monkeypatch.setenv("SUGGESTION_LIMIT", "5")

    settings = Settings(_env_file=None)

    assert settings.supabase_url == "https://db.example.co"
    assert settings.ai_provider == "openai"
    assert settings.suggestion_limit == 5
    assert settings.food_table == "food_data"
