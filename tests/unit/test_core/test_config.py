"""
test_config.py - template configuration loading and validation
"""

import json

import pytest

from script_generator.core.config import (
    ConfigError,
    TemplateConfig,
    load_config,
    save_config,
    validate_config,
)


class TestLoadConfig:

    def test_defaults(self):
        config = load_config()
        assert config == TemplateConfig()
        assert config.start_mark == "#"
        assert config.end_mark == "#end"
        assert config.newline == "\n"
        assert config.file_extension == ".cs"

    def test_overrides_skip_none(self):
        config = load_config(custom_config={"start_mark": "//#", "end_mark": None})
        assert config.start_mark == "//#"
        assert config.end_mark == "#end"

    def test_file_then_overrides(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"start_mark": "@@", "end_mark": "@@end"}))

        config = load_config(custom_config={"end_mark": "@@stop"}, config_file=path)

        assert config.start_mark == "@@"
        assert config.end_mark == "@@stop"

    def test_unknown_keys_go_to_custom(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"author": "tools"}))
        assert load_config(config_file=path).custom == {"author": "tools"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(config_file=tmp_path / "missing.json")

    def test_not_json_extension(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("start_mark: '#'")
        with pytest.raises(ConfigError, match="must be JSON"):
            load_config(config_file=path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(config_file=path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError, match="JSON object"):
            load_config(config_file=path)

    def test_non_string_marker(self):
        with pytest.raises(ConfigError, match="start_mark"):
            load_config(custom_config={"start_mark": 1})


class TestSaveConfig:

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "config.json"
        config = TemplateConfig(start_mark="/*#", custom={"author": "tools"})

        save_config(config, path)

        saved = json.loads(path.read_text(encoding="utf-8"))
        assert saved["start_mark"] == "/*#"
        assert saved["author"] == "tools"
        assert "custom" not in saved
        assert load_config(config_file=path) == config


class TestValidateConfig:

    def test_default_is_clean(self):
        assert validate_config(TemplateConfig()) == []

    def test_empty_marks(self):
        warnings = validate_config(TemplateConfig(start_mark="", end_mark=""))
        assert len(warnings) == 2
        assert warnings[0] == (
            "Empty start_mark: the first line opens the template block "
            "and every later line is collected"
        )

    def test_identical_marks(self):
        warnings = validate_config(TemplateConfig(start_mark="%%", end_mark="%%"))
        assert any("both" in warning for warning in warnings)

    def test_unusual_newline_and_extension(self):
        warnings = validate_config(TemplateConfig(newline=";", file_extension="cs"))
        assert len(warnings) == 2

    def test_default_custom_not_shared(self):
        TemplateConfig().custom["author"] = "tools"
        assert TemplateConfig().custom == {}

    def test_config_is_immutable(self):
        with pytest.raises(AttributeError):
            TemplateConfig().start_mark = "$"
