import os

import pytest

from expense_insights.core import settings


def test_read_config_file(tmp_path):
    config = tmp_path / "config.yaml"
    config.write_text(
        "# comment\n"
        "INSIGHT_MODEL: gemini-2.5-flash # inline\n"
        "GEMINI_API_KEY: \"AIza#secret\"\n"
        "EMPTY:\n"
        "not a pair\n",
        encoding="utf-8",
    )

    values = settings.read_config_file(str(config))

    assert values == {"INSIGHT_MODEL": "gemini-2.5-flash", "GEMINI_API_KEY": "AIza#secret"}

def test_read_missing_config_file(tmp_path):
    assert settings.read_config_file(str(tmp_path / "missing.yaml")) == {}
    assert settings.read_config_file(None) == {}

def test_config_file_does_not_override_environment(tmp_path, monkeypatch: pytest.MonkeyPatch):
    (tmp_path / "config.yaml").write_text("INSIGHT_MODEL: from-file\nCATEGORY_MODEL: cat-file\n", encoding="utf-8")
    monkeypatch.setenv("CONFIG_DIR", str(tmp_path))
    monkeypatch.setenv("INSIGHT_MODEL", "from-env")
    # Register CATEGORY_MODEL with monkeypatch so the value loaded below is undone
    monkeypatch.setenv("CATEGORY_MODEL", "placeholder")
    monkeypatch.delenv("CATEGORY_MODEL")

    settings.load_environment()

    assert os.environ["INSIGHT_MODEL"] == "from-env"
    assert os.environ["CATEGORY_MODEL"] == "cat-file"
    assert settings.get_config_path() == str(tmp_path / "config.yaml")

@pytest.mark.parametrize("raw,expected", [
    (None, 8000),
    ("9000", 9000),
    ("abc", 8000),
    ("0", 8000),
])
def test_get_env_int(monkeypatch: pytest.MonkeyPatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("PORT", raising=False)
    else:
        monkeypatch.setenv("PORT", raw)
    assert settings.get_env_int("PORT", 8000, min_value=1) == expected

def test_mask_env_value():
    assert settings._mask_env_value("GEMINI_API_KEY", "AIzaSyExample") == "AI...le"
    assert settings._mask_env_value("INSIGHT_MODEL", "gemini-2.0-flash") == "gemini-2.0-flash"
    assert settings._mask_env_value("GEMINI_API_KEY", "abc") == "****"
