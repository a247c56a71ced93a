"""
Unit tests for settings and the environment config loader.
"""
import pytest
from pydantic import ValidationError

from lunch_roulette.config.loader import ConfigLoader
from lunch_roulette.config.settings import Environment, SearchPolicySettings, Settings


def test_default_policy():
    policy = SearchPolicySettings()
    assert policy.min_score == 0.98
    assert policy.required_category == "restaurant"
    assert policy.query_term == "restaurant"


def test_min_score_is_bounded(monkeypatch):
    monkeypatch.setenv("SEARCH_MIN_SCORE", "1.5")
    with pytest.raises(ValidationError):
        SearchPolicySettings()


def test_environment_is_normalized():
    assert Settings(environment="PRODUCTION").is_production()


def test_sample_env_file_round_trip(tmp_path, monkeypatch):
    monkeypatch.delenv("AZURE_MAPS_SUBSCRIPTION_KEY", raising=False)
    monkeypatch.delenv("AzureMapsKey", raising=False)
    sample = ConfigLoader.create_sample_env_file("staging", str(tmp_path / ".env.staging"))
    content = (tmp_path / ".env.staging").read_text()
    assert sample.endswith(".env.staging")
    assert "ENVIRONMENT=staging" in content
    assert "AZURE_MAPS_SUBSCRIPTION_KEY=" in content
    assert "SEARCH_MIN_SCORE=0.98" in content

    assert ConfigLoader.get_available_environments(tmp_path) == ["staging"]

    settings = ConfigLoader.load_environment_config("staging", tmp_path)
    assert settings.environment == Environment.STAGING
    assert settings.workers == 4


def test_validate_requires_env_file(tmp_path):
    assert ConfigLoader.validate_environment_config("production", tmp_path) is False


def test_validate_requires_subscription_key(tmp_path, monkeypatch):
    monkeypatch.delenv("AZURE_MAPS_SUBSCRIPTION_KEY", raising=False)
    monkeypatch.delenv("AzureMapsKey", raising=False)
    (tmp_path / ".env.testing").write_text("ENVIRONMENT=testing\n")
    assert ConfigLoader.validate_environment_config("testing", tmp_path) is False

    monkeypatch.setenv("AZURE_MAPS_SUBSCRIPTION_KEY", "abc")
    assert ConfigLoader.validate_environment_config("testing", tmp_path) is True


def test_unknown_environment_is_rejected(tmp_path):
    assert ConfigLoader.validate_environment_config("qa", tmp_path) is False


def test_missing_env_file_falls_back_to_defaults(tmp_path):
    settings = ConfigLoader.load_environment_config("testing", tmp_path)
    assert settings.environment == Environment.TESTING
