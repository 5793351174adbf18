"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from sutra.config import load_settings


def test_defaults_when_environment_is_empty():
    settings = load_settings({})

    assert settings.log_level == "INFO"
    assert settings.structured_logs is True
    assert settings.explain_model == "gpt-4o-mini"
    assert settings.log_capacity == 50
    assert settings.openai_api_key is None


def test_values_are_read_and_normalized():
    settings = load_settings(
        {
            "SUTRA_LOG_LEVEL": " debug ",
            "SUTRA_STRUCTURED_LOGS": "false",
            "SUTRA_EXPLAIN_MODEL": "gpt-4o",
            "SUTRA_LOG_CAPACITY": "10",
            "OPENAI_API_KEY": "sk-abc",
        }
    )

    assert settings.log_level == "DEBUG"
    assert settings.structured_logs is False
    assert settings.explain_model == "gpt-4o"
    assert settings.log_capacity == 10
    assert settings.openai_api_key == "sk-abc"


def test_blank_api_key_counts_as_missing():
    assert load_settings({"OPENAI_API_KEY": "  "}).openai_api_key is None


@pytest.mark.parametrize(
    "env",
    [
        {"SUTRA_LOG_LEVEL": "LOUD"},
        {"SUTRA_LOG_CAPACITY": "0"},
        {"SUTRA_EXPLAIN_MODEL": " "},
    ],
)
def test_invalid_values_are_rejected(env):
    with pytest.raises(ValidationError):
        load_settings(env)
