"""
Configuration Tests
===================
"""

import pytest
from pydantic import ValidationError

from marquee_engine.config import Settings, load_config


class TestLoadConfig:
    """Tests for load_config()."""

    def test_defaults(self, clean_env):
        settings = load_config()
        assert settings.render.width == 20
        assert settings.render.delay_ms == 1000
        assert settings.render.loop is True
        assert settings.render.separator == "    "
        assert settings.decoration.prefix == ""
        assert settings.input.json_records is False
        assert settings.logging.level == "WARNING"

    def test_yaml_file(self, clean_env):
        path = clean_env / "custom.yaml"
        path.write_text(
            "render:\n"
            "  width: 8\n"
            "  separator: ' | '\n"
            "decoration:\n"
            "  prefix: '> '\n"
            "input:\n"
            "  json: true\n"
        )
        settings = load_config(str(path))
        assert settings.render.width == 8
        assert settings.render.separator == " | "
        assert settings.decoration.prefix == "> "
        assert settings.input.json_records is True

    def test_found_in_working_directory(self, clean_env):
        (clean_env / "marquee.yaml").write_text("render:\n  delay_ms: 250\n")
        assert load_config().render.delay_ms == 250

    def test_empty_yaml_file(self, clean_env):
        (clean_env / "marquee.yaml").write_text("")
        assert load_config().render.width == 20

    def test_missing_explicit_file(self, clean_env):
        with pytest.raises(FileNotFoundError):
            load_config(str(clean_env / "absent.yaml"))

    def test_env_overrides_yaml(self, clean_env, monkeypatch):
        (clean_env / "marquee.yaml").write_text("render:\n  width: 8\n")
        monkeypatch.setenv("MARQUEE_WIDTH", "12")
        monkeypatch.setenv("MARQUEE_DELAY_MS", "50")
        monkeypatch.setenv("MARQUEE_PREFIX", "[")
        monkeypatch.setenv("MARQUEE_JSON", "yes")
        monkeypatch.setenv("MARQUEE_LOG_LEVEL", "debug")

        settings = load_config()
        assert settings.render.width == 12
        assert settings.render.delay_ms == 50
        assert settings.decoration.prefix == "["
        assert settings.input.json_records is True
        assert settings.logging.level == "debug"

    def test_empty_env_separator_applies(self, clean_env, monkeypatch):
        (clean_env / "marquee.yaml").write_text("render:\n  separator: '--'\n")
        monkeypatch.setenv("MARQUEE_SEPARATOR", "")
        assert load_config().render.separator == ""

    def test_invalid_value(self, clean_env, monkeypatch):
        monkeypatch.setenv("MARQUEE_WIDTH", "-3")
        with pytest.raises(ValidationError):
            load_config()


class TestSettings:
    """Tests for the Settings model."""

    def test_json_alias(self):
        settings = Settings.model_validate({"input": {"json": True}})
        assert settings.input.json_records is True
        assert settings.model_dump(by_alias=True)["input"] == {"json": True}
