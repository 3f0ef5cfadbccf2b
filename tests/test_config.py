"""Settings tests."""

from __future__ import annotations

from ballot.config import Settings


def test_is_production_follows_environment() -> None:
    """Only the production environment reports as production."""
    assert Settings(environment="production").is_production
    assert not Settings(environment="development").is_production


def test_origins_list_splits_and_strips() -> None:
    """Comma separated origins should be parsed into a clean list."""
    settings = Settings(allowed_origins=" http://a.test, ,http://b.test ")
    assert settings.origins_list == ["http://a.test", "http://b.test"]
