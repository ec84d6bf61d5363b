from __future__ import annotations

from tasktracker.app.core.config import DEFAULT_JWT_SECRET, Settings


def test_environment_profiles_apply_defaults() -> None:
    dev = Settings(environment="development")
    assert dev.environment == "development"
    assert dev.log_level == "DEBUG"
    assert dev.reload is True
    assert dev.expose_error_details is True

    test_profile = Settings(environment="test")
    assert test_profile.log_level == "WARNING"
    assert test_profile.reload is False
    assert test_profile.expose_error_details is False

    ci_profile = Settings(environment="ci")
    assert ci_profile.log_level == "INFO"
    assert ci_profile.reload is False
    assert ci_profile.expose_error_details is False


def test_environment_aliases_are_normalised() -> None:
    assert Settings(environment="DEV").environment == "development"
    assert Settings(environment="Testing").environment == "test"


def test_environment_profile_respects_explicit_overrides(monkeypatch) -> None:
    monkeypatch.setenv("TASKTRACKER_LOG_LEVEL", "error")
    assert Settings(environment="test").log_level == "ERROR"

    monkeypatch.setenv("TASKTRACKER_EXPOSE_ERROR_DETAILS", "true")
    assert Settings(environment="ci").expose_error_details is True


def test_defaults_match_service_contract(monkeypatch) -> None:
    monkeypatch.delenv("TASKTRACKER_JWT_SECRET_KEY", raising=False)
    settings = Settings(environment="test")
    assert settings.default_page_size == 5
    assert settings.recently_viewed_limit == 5
    assert settings.access_token_expire_minutes == 24 * 60
    assert settings.jwt_algorithm == "HS256"
    assert settings.jwt_secret_key == DEFAULT_JWT_SECRET
    assert settings.uses_default_secret


def test_cors_lists_accept_comma_separated_values() -> None:
    settings = Settings(cors_allow_origins="http://a.test, http://b.test")
    assert settings.cors_allow_origins == ["http://a.test", "http://b.test"]
