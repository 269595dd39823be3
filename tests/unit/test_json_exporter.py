"""Tests for the JSON exporter."""

import json
from pathlib import Path

import pytest

from casework.infrastructure.exporters import JsonExporter


class TestJsonExporter:
    """Tests for JsonExporter."""

    def test_top_level_keys(self, base_output) -> None:
        data = JsonExporter().build(base_output)
        assert data["schema_version"] == "1.0"
        assert data["id"] == "base-cabinet-24x34.5"
        assert data["archetype"] == "base"
        assert data["has_two_doors"] is False
        assert data["material"] == {"type": "plywood", "thickness": 0.75}

    def test_dimensions(self, tall_output) -> None:
        dims = JsonExporter().build(tall_output)["dimensions"]
        assert dims["height"] == 81
        assert dims["total_height"] == 85.5
        assert dims["box_depth"] == 24
        assert dims["door_thickness"] == 0.875

    def test_configuration_is_resolved(self, wall_output) -> None:
        config = JsonExporter().build(wall_output)["configuration"]
        assert config["shelf_count"] == 2
        assert config["overlay"] == "full"

    def test_cut_list_rows(self, wall_output) -> None:
        rows = JsonExporter().build(wall_output)["cut_list"]
        doors = [row for row in rows if row["part"] == "door"]
        assert [row["name"] for row in doors] == ["Left Door", "Right Door"]
        assert doors[0]["width"] == 15.75
        assert doors[0]["edge_banding"] == ["top", "bottom", "left", "right"]

    def test_material_usage(self, base_output) -> None:
        usage = JsonExporter().build(base_output)["material_usage"]
        assert (usage["plywood34"], usage["plywood14"], usage["edge_banding"]) == (28, 6, 20)
        assert usage["plywood34_sqft"] == round(3634.3125 / 144, 4)

    def test_machining_optional(self, base_output) -> None:
        assert len(JsonExporter().build(base_output)["machining"]) == 44
        assert "machining" not in JsonExporter(include_machining=False).build(base_output)

    def test_metric_fields(self, base_output) -> None:
        data = JsonExporter(include_metric=True).build(base_output)
        assert data["dimensions"]["width_mm"] == pytest.approx(609.6)
        assert "box_depth_mm" not in data["dimensions"]
        hole = next(r for r in data["machining"] if r["kind"] == "hinge")
        assert hole["size_mm"] == pytest.approx(34.925)
        assert "length_mm" not in hole

    def test_export_string_is_valid_json(self, tall_output) -> None:
        data = json.loads(JsonExporter().export_string(tall_output))
        assert data["id"] == "tall-cabinet-24x85.5"

    def test_export_writes_file(self, base_output, tmp_path: Path) -> None:
        path = tmp_path / "base.json"
        JsonExporter(indent=None).export(base_output, path)
        assert json.loads(path.read_text(encoding="utf-8"))["archetype"] == "base"
