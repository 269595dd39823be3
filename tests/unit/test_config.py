"""Tests for configuration schema, loader and adapter."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from casework.application.config import (
    ConfigError,
    OutputConfig,
    ProjectConfiguration,
    config_to_request,
    load_config,
    load_config_from_dict,
    resolve_formats,
)
from casework.domain.value_objects import (
    CabinetArchetype,
    DoorStyle,
    DrawingTier,
    MaterialType,
    ViewMode,
)


def minimal_config(**cabinet) -> dict:
    return {
        "schema_version": "1.0",
        "cabinet": {"archetype": "base", "width": 24, **cabinet},
    }


class TestConfigSchema:
    """Tests for the Pydantic configuration models."""

    def test_minimal_config_defaults(self) -> None:
        config = ProjectConfiguration.model_validate(minimal_config())
        assert config.cabinet.archetype == CabinetArchetype.BASE
        assert config.cabinet.height is None
        assert config.cabinet.material.thickness == 0.75
        assert config.cabinet.configuration.shelf_count is None
        assert config.output.formats == ["json"]
        assert config.output.tier == DrawingTier.DETAILED

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProjectConfiguration.model_validate(minimal_config(color="white"))

    def test_unsupported_version(self) -> None:
        data = minimal_config()
        data["schema_version"] = "2.0"
        with pytest.raises(ValidationError, match="Unsupported schema version"):
            ProjectConfiguration.model_validate(data)

    def test_malformed_version(self) -> None:
        data = minimal_config()
        data["schema_version"] = "one"
        with pytest.raises(ValidationError):
            ProjectConfiguration.model_validate(data)

    def test_negative_shelf_count_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProjectConfiguration.model_validate(
                minimal_config(configuration={"shelf_count": -1})
            )

    def test_unknown_archetype_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProjectConfiguration.model_validate(minimal_config(archetype="corner"))

    def test_formats_normalized(self) -> None:
        output = OutputConfig(formats=[" SVG", "json"])
        assert output.formats == ["svg", "json"]

    def test_unknown_format_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Unknown output format"):
            OutputConfig(formats=["pdf"])


class TestConfigLoader:
    """Tests for load_config and load_config_from_dict."""

    def test_load_valid_file(self, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "valid_wall.json")
        assert config.cabinet.archetype == CabinetArchetype.WALL
        assert config.cabinet.configuration.door_style == DoorStyle.SHAKER
        assert config.output.formats == ["json", "svg"]

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"

    def test_invalid_json(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "invalid_json.json")
        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 3

    def test_validation_error_paths(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(minimal_config(width=-5))
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "cabinet.width"
        assert error.details[0]["value"] == -5
        assert "cabinet.width" in str(error)

    def test_list_index_in_path(self) -> None:
        data = minimal_config()
        data["output"] = {"formats": ["json", 3]}
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(data)
        assert exc_info.value.details[0]["path"] == "output.formats[1]"

    def test_message_lists_every_problem(self) -> None:
        data = minimal_config(width=-5)
        data["output"] = {"formats": ["json", 3]}
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(data)
        lines = str(exc_info.value).splitlines()
        assert lines[0] == "Configuration validation failed:"
        assert len(lines) == 1 + len(exc_info.value.details) == 3
        assert any(l.startswith("  - cabinet.width:") and "(got: -5)" in l for l in lines)
        assert any(l.startswith("  - output.formats[1]:") for l in lines)

    def test_directory_is_read_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)
        assert exc_info.value.error_type in ("file_read_error", "permission_denied")
        assert exc_info.value.__cause__ is not None


class TestConfigAdapter:
    """Tests for converting configuration into requests."""

    def test_config_to_request(self, fixtures_path: Path) -> None:
        request = config_to_request(load_config(fixtures_path / "valid_wall.json"))
        assert request.archetype == "wall"
        assert (request.width, request.height) == (30, 30)
        assert request.material.thickness == 0.75
        assert request.material.material_type == MaterialType.PLYWOOD
        assert request.configuration.shelf_count == 2
        assert request.configuration.door_style == DoorStyle.SHAKER

    def test_resolve_formats_expands_all(self) -> None:
        output = OutputConfig(formats=["all", "json"], view=ViewMode.ISO)
        assert resolve_formats(output) == ["json", "svg", "dxf", "canvas"]

    def test_resolve_formats_drops_duplicates(self) -> None:
        output = OutputConfig(formats=["svg", "svg", "json"])
        assert resolve_formats(output) == ["svg", "json"]
