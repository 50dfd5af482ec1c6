"""
Tests for settings loaded from the environment.
"""

from pathlib import Path

import pytest

from remarkdeck.config import DEFAULT_SCRIPT_URL, DEFAULT_STYLESHEET, load_settings
from remarkdeck.models import RemarkOptions


def test_defaults(clean_env, tmp_path):
    """Test settings without any variable set."""
    settings = load_settings(tmp_path / ".env")
    assert settings.script_url == DEFAULT_SCRIPT_URL
    assert settings.stylesheet == DEFAULT_STYLESHEET
    assert settings.output_dir is None
    assert settings.deck_path is None
    assert settings.remark == RemarkOptions()


def test_environment_variables(clean_env, tmp_path):
    """Test every supported variable."""
    clean_env.setenv("REMARK_SCRIPT_URL", "https://cdn.example.org/remark.min.js")
    clean_env.setenv("REMARK_STYLESHEET", "css/theme.css")
    clean_env.setenv("REMARK_HIGHLIGHT_STYLE", "monokai")
    clean_env.setenv("REMARK_RATIO", "16:9")
    clean_env.setenv("OUTPUT_DIR", str(tmp_path / "out"))
    clean_env.setenv("DECK_PATH", str(tmp_path / "talk.md"))

    settings = load_settings(tmp_path / ".env")
    assert settings.script_url == "https://cdn.example.org/remark.min.js"
    assert settings.stylesheet == "css/theme.css"
    assert settings.remark.highlight_style == "monokai"
    assert settings.remark.ratio == "16:9"
    assert settings.output_dir == tmp_path / "out"
    assert isinstance(settings.output_dir, Path)
    assert settings.deck_path == tmp_path / "talk.md"


def test_empty_variables_use_defaults(clean_env, tmp_path):
    clean_env.setenv("REMARK_HIGHLIGHT_STYLE", "")
    clean_env.setenv("OUTPUT_DIR", "")
    settings = load_settings(tmp_path / ".env")
    assert settings.remark.highlight_style == "github"
    assert settings.output_dir is None


def test_env_file(clean_env, tmp_path):
    """Test values read from a .env file."""
    env_file = tmp_path / ".env"
    env_file.write_text("REMARK_STYLESHEET=theme.css\nREMARK_RATIO=16:10\n", encoding="utf-8")

    settings = load_settings(env_file)
    assert settings.stylesheet == "theme.css"
    assert settings.remark.ratio == "16:10"


def test_environment_wins_over_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("REMARK_STYLESHEET=from-file.css\n", encoding="utf-8")
    clean_env.setenv("REMARK_STYLESHEET", "from-env.css")

    assert load_settings(env_file).stylesheet == "from-env.css"


def test_invalid_ratio(clean_env, tmp_path):
    clean_env.setenv("REMARK_RATIO", "21:9")
    with pytest.raises(ValueError):
        load_settings(tmp_path / ".env")
