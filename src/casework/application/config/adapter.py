"""Adapter converting configuration models into application requests."""

from casework.application.config.schema import (
    CabinetConfig,
    ConstructionConfig,
    MaterialConfig,
    OutputConfig,
    ProjectConfiguration,
)
from casework.application.dtos import CabinetRequest
from casework.domain.value_objects import CabinetConfiguration, MaterialSpec

ALL_FORMATS = ["json", "svg", "dxf", "canvas"]


def material_to_spec(material: MaterialConfig) -> MaterialSpec:
    return MaterialSpec(thickness=material.thickness, material_type=material.type)


def construction_to_configuration(
    construction: ConstructionConfig,
) -> CabinetConfiguration:
    return CabinetConfiguration(
        has_adjustable_shelf=construction.has_adjustable_shelf,
        shelf_count=construction.shelf_count,
        door_style=construction.door_style,
        hinge_type=construction.hinge_type,
        overlay=construction.overlay,
    )


def cabinet_to_request(cabinet: CabinetConfig) -> CabinetRequest:
    return CabinetRequest(
        archetype=cabinet.archetype.value,
        width=cabinet.width,
        height=cabinet.height,
        material=material_to_spec(cabinet.material),
        configuration=construction_to_configuration(cabinet.configuration),
    )


def config_to_request(config: ProjectConfiguration) -> CabinetRequest:
    """Convert a validated configuration file to a CabinetRequest."""
    return cabinet_to_request(config.cabinet)


def resolve_formats(output: OutputConfig) -> list[str]:
    """Expand "all" and drop duplicates, keeping the configured order."""
    formats: list[str] = []
    for name in output.formats:
        expanded = ALL_FORMATS if name == "all" else [name]
        for fmt in expanded:
            if fmt not in formats:
                formats.append(fmt)
    return formats
