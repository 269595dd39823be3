"""Application commands orchestrating the domain services."""

from __future__ import annotations

import logging

from casework.domain.services import (
    BasicWireframeRenderer,
    ConstructionFeatureGenerator,
    CutListGenerator,
    DetailedDrawingGenerator,
    DimensionRuleEngine,
    DrawOptions,
    MachiningListGenerator,
    MaterialUsageCalculator,
)
from casework.domain.value_objects import (
    DrawingTier,
    ScreenDrawing,
    ViewMode,
    WireframeGeometry,
)

from .dtos import CabinetOutput, CabinetRequest

logger = logging.getLogger(__name__)


class GenerateCabinetCommand:
    """Command to size, construct and draw a single cabinet.

    Domain errors (invalid dimensions, unsupported archetype, degenerate
    configuration) propagate to the caller unchanged; no partial output is
    ever produced.
    """

    def __init__(
        self,
        dimension_rules: DimensionRuleEngine | None = None,
        construction: ConstructionFeatureGenerator | None = None,
        cut_list_generator: CutListGenerator | None = None,
        machining_generator: MachiningListGenerator | None = None,
        material_calculator: MaterialUsageCalculator | None = None,
        drawing_generator: DetailedDrawingGenerator | None = None,
    ) -> None:
        self.dimension_rules = dimension_rules or DimensionRuleEngine()
        self.construction = construction or ConstructionFeatureGenerator()
        self.cut_list_generator = cut_list_generator or CutListGenerator()
        self.machining_generator = machining_generator or MachiningListGenerator()
        self.material_calculator = material_calculator or MaterialUsageCalculator()
        self.drawing_generator = drawing_generator or DetailedDrawingGenerator()

    def execute(self, request: CabinetRequest) -> CabinetOutput:
        """Execute the generation pipeline.

        Args:
            request: Cabinet to generate.

        Returns:
            CabinetOutput with the cabinet, cut list, machining records,
            material usage and detailed drawing.

        Raises:
            CaseworkError: If the request cannot produce a valid cabinet.
        """
        dimensions = self.dimension_rules.dimensions_for(
            request.archetype, request.width, request.height
        )
        cabinet = self.construction.generate(
            dimensions, request.material, request.configuration
        )
        cut_list = self.cut_list_generator.generate(cabinet)
        output = CabinetOutput(
            cabinet=cabinet,
            cut_list=cut_list,
            machining=self.machining_generator.generate(cabinet),
            material_usage=self.material_calculator.calculate(cabinet.components),
            drawing=self.drawing_generator.generate(cabinet),
        )
        logger.info(
            f"Generated {cabinet.id}: {len(cut_list)} cut list rows, "
            f"{len(output.machining)} machining operations"
        )
        return output


class RenderDrawingCommand:
    """Command to render one view of a generated cabinet at either tier."""

    def __init__(
        self,
        basic_renderer: BasicWireframeRenderer | None = None,
        detailed_generator: DetailedDrawingGenerator | None = None,
    ) -> None:
        self.basic_renderer = basic_renderer or BasicWireframeRenderer()
        self.detailed_generator = detailed_generator or DetailedDrawingGenerator()

    def execute(
        self,
        output: CabinetOutput,
        view: ViewMode | str = ViewMode.ELEVATION,
        tier: DrawingTier | str = DrawingTier.DETAILED,
        options: DrawOptions | None = None,
    ) -> WireframeGeometry | ScreenDrawing:
        """Render a view.

        Returns:
            WireframeGeometry for the detailed tier, ScreenDrawing for the
            basic tier.
        """
        view = ViewMode(view)
        tier = DrawingTier(tier)
        options = options or DrawOptions()
        if tier == DrawingTier.BASIC:
            return self.basic_renderer.render(output.cabinet, view, options)
        if options.show_internals:
            # Cached outputs are shared between callers
            return output.drawing.view(view).copy()
        drawing = self.detailed_generator.generate(output.cabinet, show_internals=False)
        return drawing.view(view)
