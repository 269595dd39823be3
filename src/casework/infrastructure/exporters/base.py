"""Exporter framework: Protocol, Registry and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from casework.application.dtos import CabinetOutput


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters convert a CabinetOutput to a specific file format.

    Attributes:
        format_name: Registered name of the format (e.g., "svg", "json").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, output: CabinetOutput, path: Path) -> None:
        """Write the exported cabinet to ``path``."""
        ...

    def export_string(self, output: CabinetOutput) -> str:
        """Return the exported cabinet as a string.

        Raises:
            NotImplementedError: If the format has no text representation.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Central registry of exporter classes by format name.

    Example:
        @ExporterRegistry.register("svg")
        class SvgExporter:
            format_name = "svg"
            file_extension = "svg"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Decorator registering an exporter class under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Look up an exporter class.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Exports one cabinet to several formats in an output directory.

    Files are named ``{project_name}_{format}.{extension}``.

    Attributes:
        output_dir: Directory where exported files are saved.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: CabinetOutput,
        project_name: str = "cabinet",
        exporter_options: dict[str, dict] | None = None,
    ) -> dict[str, Path]:
        """Export a cabinet to multiple formats.

        Args:
            formats: Format names to export (e.g., ["json", "svg"]).
            output: The generated cabinet.
            project_name: Base name for output files.
            exporter_options: Optional constructor keyword arguments per format.

        Returns:
            Mapping of format name to written file path.

        Raises:
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        # Resolve every exporter first so an unknown format writes nothing
        exporter_classes = {name: ExporterRegistry.get(name) for name in formats}
        options = exporter_options or {}
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name, exporter_class in exporter_classes.items():
            exporter = exporter_class(**options.get(format_name, {}))
            filename = f"{project_name}_{format_name}.{exporter.file_extension}"
            filepath = self.output_dir / filename

            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(output, filepath)
            results[format_name] = filepath

        return results

    def export_single(
        self,
        format_name: str,
        output: CabinetOutput,
        project_name: str = "cabinet",
    ) -> Path:
        """Export a cabinet to a single format."""
        return self.export_all([format_name], output, project_name)[format_name]
