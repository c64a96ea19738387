"""Tests for configuration module."""

import os
from pathlib import Path

import pytest


def test_settings_defaults():
    """Settings have sensible defaults."""
    from spha.core.config import DEFAULT_TECHNICAL_LAG_TYPE_IDS, Settings

    s = Settings(_env_file=None)

    assert s.strict_mode is False
    assert s.validate_before_calculation is False
    assert s.hierarchy_path is None
    assert s.technical_lag_type_ids == DEFAULT_TECHNICAL_LAG_TYPE_IDS
    assert s.log_dir == Path("logs")
    assert s.log_sessions_to_keep == 5


def test_settings_from_env():
    """Settings can be overridden via environment variables."""
    os.environ["STRICT_MODE"] = "true"
    os.environ["TECHNICAL_LAG_TYPE_IDS"] = '["LIB_DAYS_DEV"]'

    try:
        from spha.core.config import Settings

        s = Settings(_env_file=None)

        assert s.strict_mode is True
        assert s.technical_lag_type_ids == ["LIB_DAYS_DEV"]
    finally:
        del os.environ["STRICT_MODE"]
        del os.environ["TECHNICAL_LAG_TYPE_IDS"]


def test_settings_validation():
    """Settings validate constraints."""
    from spha.core.config import Settings
    from pydantic import ValidationError

    with pytest.raises(ValidationError):
        Settings(log_sessions_to_keep=0)


def test_global_settings_available():
    """Global settings instance is importable."""
    from spha.core.config import settings

    assert settings is not None
    assert hasattr(settings, "strict_mode")
