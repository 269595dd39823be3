"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from casework.application.cache import CabinetCache
    from casework.application.commands import (
        GenerateCabinetCommand,
        RenderDrawingCommand,
    )
    from casework.domain.services import (
        CutListGenerator,
        DimensionRuleEngine,
        MaterialUsageCalculator,
    )
    from casework.infrastructure.formatters import (
        CutListFormatter,
        DimensionsFormatter,
        MachiningFormatter,
        MaterialUsageFormatter,
    )


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Centralizes service instantiation so tests can swap in their own
    services and so stateless services are created once.

    Attributes:
        cache_size: Number of cabinets kept by the shared cache.
    """

    cache_size: int = 128

    _dimension_rules: "DimensionRuleEngine | None" = field(
        default=None, init=False, repr=False
    )
    _cut_list_generator: "CutListGenerator | None" = field(
        default=None, init=False, repr=False
    )
    _material_calculator: "MaterialUsageCalculator | None" = field(
        default=None, init=False, repr=False
    )
    _cache: "CabinetCache | None" = field(default=None, init=False, repr=False)

    def get_dimension_rules(self) -> "DimensionRuleEngine":
        """Get or create the dimension rule engine."""
        if self._dimension_rules is None:
            from casework.domain.services import DimensionRuleEngine

            self._dimension_rules = DimensionRuleEngine()
        return self._dimension_rules

    def get_cut_list_generator(self) -> "CutListGenerator":
        """Get or create cut list generator instance."""
        if self._cut_list_generator is None:
            from casework.domain.services import CutListGenerator

            self._cut_list_generator = CutListGenerator()
        return self._cut_list_generator

    def get_material_calculator(self) -> "MaterialUsageCalculator":
        """Get or create material usage calculator instance."""
        if self._material_calculator is None:
            from casework.domain.services import MaterialUsageCalculator

            self._material_calculator = MaterialUsageCalculator()
        return self._material_calculator

    def get_cache(self) -> "CabinetCache":
        """Get or create the shared cabinet cache."""
        if self._cache is None:
            from casework.application.cache import CabinetCache

            self._cache = CabinetCache(maxsize=self.cache_size)
        return self._cache

    def get_cut_list_formatter(self) -> "CutListFormatter":
        from casework.infrastructure.formatters import CutListFormatter

        return CutListFormatter()

    def get_machining_formatter(self) -> "MachiningFormatter":
        from casework.infrastructure.formatters import MachiningFormatter

        return MachiningFormatter()

    def get_material_usage_formatter(self) -> "MaterialUsageFormatter":
        from casework.infrastructure.formatters import MaterialUsageFormatter

        return MaterialUsageFormatter()

    def get_dimensions_formatter(self) -> "DimensionsFormatter":
        from casework.infrastructure.formatters import DimensionsFormatter

        return DimensionsFormatter()

    def create_generate_command(self) -> "GenerateCabinetCommand":
        """Create a GenerateCabinetCommand wired with the shared services."""
        from casework.application.commands import GenerateCabinetCommand

        return GenerateCabinetCommand(
            dimension_rules=self.get_dimension_rules(),
            cut_list_generator=self.get_cut_list_generator(),
            material_calculator=self.get_material_calculator(),
        )

    def create_render_command(self) -> "RenderDrawingCommand":
        from casework.application.commands import RenderDrawingCommand

        return RenderDrawingCommand()


_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
