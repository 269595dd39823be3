"""JSON exporter for generated cabinets.

Exports:
- Resolved dimensions and construction configuration
- Cut list rows with edge banding
- Machining records (holes and grooves) in inches
- Material usage, rounded and net
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from casework.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from casework.application.dtos import CabinetOutput
    from casework.domain.services import CutListRow, MachiningRecord


logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"
MM_PER_INCH = 25.4


@ExporterRegistry.register("json")
class JsonExporter:
    """Exports cabinet manufacturing data as JSON.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(
        self,
        include_machining: bool = True,
        include_metric: bool = False,
        indent: int = 2,
    ) -> None:
        """Initialize the JSON exporter.

        Args:
            include_machining: Whether to include hole and groove records.
            include_metric: Whether to add ``*_mm`` fields beside inch values.
            indent: JSON indentation level.
        """
        self.include_machining = include_machining
        self.include_metric = include_metric
        self.indent = indent

    def export(self, output: CabinetOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported JSON to {path}")

    def export_string(self, output: CabinetOutput) -> str:
        return json.dumps(self.build(output), indent=self.indent, default=str)

    def build(self, output: CabinetOutput) -> dict[str, Any]:
        """Build the JSON-ready dictionary for a cabinet."""
        cabinet = output.cabinet
        dims = cabinet.dimensions
        config = cabinet.configuration
        usage = output.material_usage

        result: dict[str, Any] = {
            "schema_version": SCHEMA_VERSION,
            "id": cabinet.id,
            "archetype": cabinet.archetype.value,
            "dimensions": self._with_metric(
                {
                    "width": dims.width,
                    "height": dims.height,
                    "depth": dims.depth,
                    "total_height": dims.total_height,
                    "box_depth": dims.box_depth,
                    "door_thickness": dims.door_thickness,
                    "toe_kick_height": dims.toe_kick_height,
                    "toe_kick_depth": dims.toe_kick_depth,
                }
            ),
            "has_two_doors": dims.has_two_doors,
            "material": {
                "type": cabinet.material.material_type.value,
                "thickness": cabinet.material.thickness,
            },
            "configuration": {
                "has_adjustable_shelf": config.has_adjustable_shelf,
                "shelf_count": config.shelf_count,
                "door_style": config.door_style.value,
                "hinge_type": config.hinge_type.value,
                "overlay": config.overlay.value,
            },
            "cut_list": [self._cut_row(row) for row in output.cut_list],
            "material_usage": {
                "plywood34": usage.plywood34,
                "plywood14": usage.plywood14,
                "edge_banding": usage.edge_banding,
                "plywood34_sqft": round(usage.plywood34_sqft, 4),
                "plywood14_sqft": round(usage.plywood14_sqft, 4),
                "edge_banding_ft": round(usage.edge_banding_ft, 4),
                "description": usage.description,
            },
        }
        if self.include_machining:
            result["machining"] = [self._machining(rec) for rec in output.machining]
        return result

    def _cut_row(self, row: CutListRow) -> dict[str, Any]:
        data = self._with_metric(
            {
                "width": row.width,
                "height": row.height,
                "thickness": row.thickness,
            }
        )
        return {
            "name": row.name,
            "part": row.part.value,
            "quantity": row.quantity,
            **data,
            "material": row.material.value,
            "edge_banding": list(row.edge_banding),
        }

    def _machining(self, record: MachiningRecord) -> dict[str, Any]:
        data = asdict(record)
        if not self.include_metric:
            return data
        for key in ("x", "y", "size", "depth", "length"):
            if data[key] is not None:
                data[f"{key}_mm"] = round(data[key] * MM_PER_INCH, 3)
        return data

    def _with_metric(self, values: dict[str, float | None]) -> dict[str, Any]:
        if not self.include_metric:
            return dict(values)
        result: dict[str, Any] = {}
        for key, value in values.items():
            result[key] = value
            if value is not None:
                result[f"{key}_mm"] = round(value * MM_PER_INCH, 3)
        return result
