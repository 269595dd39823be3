"""Integration tests for the casework CLI.

These tests run the Typer app end-to-end:
- sizes lists the ladders
- generate prints reports and writes export files
- draw renders a single view
- validate checks configuration files
"""

import json
from pathlib import Path

import ezdxf
import pytest
from typer.testing import CliRunner

from casework.cli.main import app

pytestmark = pytest.mark.integration


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestSizesCommand:
    """Tests for the sizes command."""

    def test_single_archetype(self, runner: CliRunner) -> None:
        """Listing one archetype prints its widths and heights."""
        result = runner.invoke(app, ["sizes", "--type", "tall"])
        assert result.exit_code == 0
        assert "TALL" in result.output
        assert "Heights: 79.5, 85.5, 91.5" in result.output

    def test_all_archetypes(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["sizes"])
        assert result.exit_code == 0
        for name in ("BASE", "WALL", "TALL"):
            assert name in result.output

    def test_unknown_archetype(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["sizes", "--type", "corner"])
        assert result.exit_code == 1
        assert "Unsupported cabinet archetype" in result.output


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_all_reports(self, runner: CliRunner) -> None:
        """The default output prints every report section."""
        result = runner.invoke(app, ["generate", "--type", "base", "--width", "24"])
        assert result.exit_code == 0
        for heading in ("BASE CABINET", "CUT LIST", "MACHINING", "MATERIAL USAGE"):
            assert heading in result.output

    def test_json_report(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["generate", "--type", "wall", "-w", "30", "-h", "30", "--format", "json"],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["id"] == "wall-cabinet-30x30"
        assert data["has_two_doors"] is True

    def test_shelf_options(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "generate", "--type", "wall", "-w", "24", "-h", "36",
                "--shelves", "4", "--door-style", "shaker", "-f", "json",
            ],
        )
        assert result.exit_code == 0
        config = json.loads(result.output)["configuration"]
        assert config["shelf_count"] == 4
        assert config["door_style"] == "shaker"

    def test_no_shelf(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["generate", "--type", "base", "-w", "24", "--no-shelf", "-f", "cutlist"]
        )
        assert result.exit_code == 0
        assert "Adjustable Shelf" not in result.output

    def test_off_ladder_width(self, runner: CliRunner) -> None:
        """Sizes off the ladder fail fast with a clear error."""
        result = runner.invoke(app, ["generate", "--type", "base", "--width", "10"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "not available" in result.output

    def test_type_required_without_config(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["generate", "--width", "24"])
        assert result.exit_code == 1
        assert "--type and --width are required" in result.output

    def test_unknown_report_format(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["generate", "--type", "base", "-w", "24", "--format", "pdf"]
        )
        assert result.exit_code == 1
        assert "Unknown format" in result.output

    def test_export_files(self, runner: CliRunner, tmp_path: Path) -> None:
        """--output-formats writes one file per format."""
        result = runner.invoke(
            app,
            [
                "generate", "--type", "base", "-w", "24", "-f", "dimensions",
                "--output-formats", "json,svg,dxf",
                "--output-dir", str(tmp_path),
                "--project-name", "kitchen",
            ],
        )
        assert result.exit_code == 0
        assert "Exported files:" in result.output
        assert (tmp_path / "kitchen_json.json").exists()
        assert (tmp_path / "kitchen_svg.svg").exists()
        assert (tmp_path / "kitchen_dxf.dxf").exists()

    def test_unknown_export_format(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "generate", "--type", "base", "-w", "24", "-f", "dimensions",
                "--output-formats", "stl", "--output-dir", str(tmp_path),
            ],
        )
        assert result.exit_code == 1
        assert "Unknown formats: stl" in result.output

    def test_config_file(self, runner: CliRunner, fixtures_path: Path) -> None:
        result = runner.invoke(
            app,
            ["generate", "--config", str(fixtures_path / "valid_wall.json"), "-f", "json"],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["configuration"]["shelf_count"] == 2

    def test_config_output_section(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        """A config naming an output_dir exports its formats there."""
        config = {
            "schema_version": "1.0",
            "cabinet": {"archetype": "tall", "width": 24, "height": 85.5},
            "output": {
                "formats": ["svg", "canvas"],
                "view": "iso",
                "tier": "basic",
                "output_dir": str(tmp_path / "out"),
                "project_name": "pantry",
            },
        }
        config_path = tmp_path / "pantry.json"
        config_path.write_text(json.dumps(config), encoding="utf-8")

        result = runner.invoke(
            app, ["generate", "-c", str(config_path), "-f", "dimensions"]
        )
        assert result.exit_code == 0
        svg = (tmp_path / "out" / "pantry_svg.svg").read_text(encoding="utf-8")
        assert 'font-family="sans-serif"' in svg
        assert (tmp_path / "out" / "pantry_canvas.json").exists()


class TestDrawCommand:
    """Tests for the draw command."""

    def test_svg_to_stdout(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["draw", "--type", "wall", "-w", "30", "-h", "30", "--view", "iso"]
        )
        assert result.exit_code == 0
        assert result.output.startswith("<?xml")
        assert "3D ISOMETRIC VIEW" in result.output

    def test_basic_canvas(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "draw", "--type", "base", "-w", "24", "--tier", "basic",
                "--format", "canvas", "--scale", "4",
            ],
        )
        assert result.exit_code == 0
        commands = json.loads(result.output)
        assert commands[0] == {"op": "save", "args": []}

    def test_dxf_to_file(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "wall.dxf"
        result = runner.invoke(
            app,
            [
                "draw", "--type", "wall", "-w", "30", "-h", "33",
                "--format", "dxf", "-o", str(path),
            ],
        )
        assert result.exit_code == 0
        assert "Wrote detailed elevation DXF" in result.output
        doc = ezdxf.readfile(path)
        assert "OVERLAY_DOOR" in doc.layers

    def test_dxf_basic_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["draw", "--type", "base", "-w", "24", "--tier", "basic", "--format", "dxf"],
        )
        assert result.exit_code == 1
        assert "detailed tier" in result.output

    def test_hide_internals(self, runner: CliRunner) -> None:
        shown = runner.invoke(app, ["draw", "--type", "base", "-w", "24"])
        hidden = runner.invoke(
            app, ["draw", "--type", "base", "-w", "24", "--hide-internals"]
        )
        assert hidden.exit_code == 0
        assert hidden.output.count("<line") < shown.output.count("<line")

    def test_hide_internals_dxf(self, runner: CliRunner, tmp_path: Path) -> None:
        counts = {}
        for name, extra in (("shown", []), ("hidden", ["--hide-internals"])):
            path = tmp_path / f"{name}.dxf"
            result = runner.invoke(
                app,
                ["draw", "--type", "wall", "-w", "30", "-h", "30", "--format", "dxf",
                 "-o", str(path), *extra],
            )
            assert result.exit_code == 0
            msp = ezdxf.readfile(path).modelspace()
            counts[name] = len(msp.query('LINE[layer=="HARDWARE"]'))
        assert counts["shown"] > 0
        assert counts["hidden"] == 0


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_config(self, runner: CliRunner, fixtures_path: Path) -> None:
        """A valid config passes and names the cabinet."""
        result = runner.invoke(app, ["validate", str(fixtures_path / "valid_wall.json")])
        assert result.exit_code == 0
        assert "Cabinet: wall-cabinet-30x30 (7 cut list rows)" in result.output
        assert "Validation passed" in result.output

    def test_off_ladder_config(self, runner: CliRunner, fixtures_path: Path) -> None:
        """Schema-valid files still fail when the cabinet cannot be built."""
        result = runner.invoke(app, ["validate", str(fixtures_path / "off_ladder.json")])
        assert result.exit_code == 1
        assert "cabinet: Width 10" in result.output
        assert "Validation failed" in result.output

    def test_file_not_found(self, runner: CliRunner, fixtures_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(fixtures_path / "nonexistent.json")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner, fixtures_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(fixtures_path / "invalid_json.json")])
        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line 3" in result.output

    def test_unknown_field_rejected(self, runner: CliRunner, fixtures_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(fixtures_path / "unknown_field.json")])
        assert result.exit_code == 1
        assert "cabinet.color" in result.output
