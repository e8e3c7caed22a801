"""
Tests for the YAML settings loader and the pydantic schema.
"""

import pytest
import yaml
from pydantic import ValidationError

from config.settings_loader import (
    get_config_path,
    get_setting,
    load_settings,
    read_yaml,
)
from config.settings_schema import (
    EvolutionConfig,
    LoggingConfig,
    load_evolution_config,
    load_validated_settings,
)
from core.exceptions import ConfigParseError, MissingConfigError, SettingsValidationError


class TestEvolutionConfig:
    """Tests for the immutable run parameters."""

    def test_reference_defaults(self):
        config = EvolutionConfig()
        assert config.population_size == 10
        assert config.mutation_range == 1.0
        assert config.generations == 100
        assert config.node_width == 2
        assert config.seed is None

    def test_frozen(self):
        config = EvolutionConfig()
        with pytest.raises(ValidationError):
            config.population_size = 3

    @pytest.mark.parametrize("field,value", [
        ("population_size", 0),
        ("mutation_range", -0.1),
        ("generations", -1),
        ("node_width", 1),
    ])
    def test_out_of_range(self, field, value):
        with pytest.raises(ValidationError):
            EvolutionConfig(**{field: value})

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            EvolutionConfig(nodes_amount=5)

    def test_logging_defaults(self):
        assert LoggingConfig().level == "WARNING"
        assert LoggingConfig().structured is False


class TestSettingsLoader:
    """Tests for YAML loading and dot-path access."""

    def test_default_path(self, monkeypatch):
        monkeypatch.delenv("LEFTRIGHT_CONFIG_PATH", raising=False)
        assert get_config_path().name == "base.yaml"

    def test_shipped_base_yaml(self, monkeypatch):
        monkeypatch.delenv("LEFTRIGHT_CONFIG_PATH", raising=False)
        settings = load_settings(force_reload=True)
        assert settings["evolution"]["population_size"] == 10
        assert settings["evolution"]["generations"] == 100

    def test_env_override(self, temp_config_file):
        path = temp_config_file("evolution:\n  generations: 7\n")
        assert get_config_path() == path
        assert get_setting("evolution.generations") == 7

    def test_get_setting_default(self, temp_config_file):
        temp_config_file("evolution: {}\n")
        assert get_setting("evolution.missing.key", "fallback") == "fallback"

    def test_missing_env_file_is_empty(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LEFTRIGHT_CONFIG_PATH", str(tmp_path / "nope.yaml"))
        assert load_settings(force_reload=True) == {}
        monkeypatch.delenv("LEFTRIGHT_CONFIG_PATH")
        load_settings(force_reload=True)

    def test_read_yaml_missing_raises(self, tmp_path):
        with pytest.raises(MissingConfigError):
            read_yaml(tmp_path / "absent.yaml")

    def test_read_yaml_syntax_error(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("evolution: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigParseError) as exc_info:
            read_yaml(path)
        assert isinstance(exc_info.value.cause, yaml.YAMLError)
        assert exc_info.value.context["path"] == str(path)

    def test_read_yaml_rejects_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")

        with pytest.raises(ConfigParseError) as exc_info:
            read_yaml(path)
        assert exc_info.value.context["type"] == "list"

    def test_read_yaml_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert read_yaml(path) == {}


class TestLoadEvolutionConfig:
    """Tests for merging YAML and overrides into EvolutionConfig."""

    def test_from_yaml(self, temp_config_file):
        temp_config_file(
            "evolution:\n"
            "  population_size: 3\n"
            "  mutation_range: 0.5\n"
            "  seed: 4\n"
        )
        config = load_evolution_config()
        assert config.population_size == 3
        assert config.mutation_range == 0.5
        assert config.generations == 100
        assert config.seed == 4

    def test_overrides_win(self, temp_config_file):
        temp_config_file("evolution:\n  generations: 50\n")
        config = load_evolution_config(overrides={"generations": 5, "seed": None})
        assert config.generations == 5
        assert config.seed is None

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text("evolution:\n  node_width: 3\n", encoding="utf-8")
        assert load_evolution_config(path=path).node_width == 3

    def test_invalid_values_wrapped(self, temp_config_file):
        temp_config_file("evolution:\n  population_size: 0\n")
        with pytest.raises(SettingsValidationError) as exc_info:
            load_evolution_config()
        assert "population_size" in exc_info.value.context["errors"]
        assert isinstance(exc_info.value.cause, ValidationError)

    def test_non_mapping_section_wrapped(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text("evolution:\n  - 1\n", encoding="utf-8")
        with pytest.raises(SettingsValidationError):
            load_evolution_config(overrides={"generations": 3}, path=path)

    def test_invalid_override_wrapped(self):
        with pytest.raises(SettingsValidationError):
            load_evolution_config(overrides={"node_width": 1})

    def test_validated_settings(self, temp_config_file):
        temp_config_file("logging:\n  level: INFO\n  log_dir: /tmp/x\n")
        settings = load_validated_settings()
        assert settings.logging.level == "INFO"
        assert settings.logging.log_dir == "/tmp/x"
        assert settings.evolution == EvolutionConfig()
