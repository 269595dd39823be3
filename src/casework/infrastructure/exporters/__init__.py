"""Exporter framework for generated cabinets.

This package provides:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- canvas: JSON list of 2D canvas drawing commands
- dxf: DXF for CNC machining (flat panels) or CAD review (one view)
- json: Dimensions, configuration, cut list, machining and material usage
- svg: Vector SVG of one view at either drawing tier

Usage:
    from casework.infrastructure.exporters import ExportManager, ExporterRegistry

    svg_exporter = ExporterRegistry.get("svg")(view="iso")
    manager = ExportManager(output_dir=Path("./output"))
    results = manager.export_all(["json", "svg"], cabinet_output, project_name="wall30")
"""

from casework.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)

# Import exporters to trigger registration
from casework.infrastructure.exporters.canvas import CanvasCommandExporter
from casework.infrastructure.exporters.dxf import DxfExporter
from casework.infrastructure.exporters.json_exporter import JsonExporter
from casework.infrastructure.exporters.svg import SvgExporter

__all__ = [
    # Framework
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    # Registered exporters
    "CanvasCommandExporter",
    "DxfExporter",
    "JsonExporter",
    "SvgExporter",
]
