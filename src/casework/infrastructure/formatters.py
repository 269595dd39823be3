"""Console formatters for cabinet output."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from casework.domain.services import CutListRow, MachiningRecord, MaterialUsage
    from casework.domain.value_objects import CabinetDimensions


class CutListFormatter:
    """Formats cut lists for display."""

    def format(self, cut_list: list[CutListRow]) -> str:
        """Format cut list as a table."""
        if not cut_list:
            return "No pieces in cut list."

        lines = [
            "CUT LIST",
            "=" * 86,
            f"{'Piece':<20} {'Width':<9} {'Height':<9} {'Thick':<7} {'Qty':<5} "
            f"{'Area (sq in)':<14} {'Edge Banding'}",
            "-" * 86,
        ]

        total_area = 0.0
        for row in cut_list:
            banding = ", ".join(row.edge_banding) or "-"
            lines.append(
                f"{row.name:<20} {row.width:<9.3f} {row.height:<9.3f} "
                f"{row.thickness:<7.3f} {row.quantity:<5} {row.area:<14.1f} {banding}"
            )
            total_area += row.area

        lines.append("-" * 86)
        lines.append(f"{'TOTAL':<20} {'':<9} {'':<9} {'':<7} {'':<5} {total_area:.1f}")
        lines.append(f"{'':>50} ({total_area / 144:.2f} sq ft)")

        return "\n".join(lines)


class MachiningFormatter:
    """Formats hole and groove records, grouped by component."""

    def format(self, records: list[MachiningRecord]) -> str:
        if not records:
            return "No machining operations."

        lines = [
            "MACHINING",
            "=" * 84,
            f"{'Component':<16} {'Op':<7} {'Kind':<11} {'X':<8} {'Y':<8} "
            f"{'Size':<7} {'Depth':<6} {'Detail'}",
            "-" * 84,
        ]
        for rec in records:
            if rec.operation == "groove":
                detail = f"{rec.orientation} run {rec.length:.3f}"
            else:
                detail = f"from {rec.edge} edge"
            lines.append(
                f"{rec.component:<16} {rec.operation:<7} {rec.kind:<11} "
                f"{rec.x:<8.3f} {rec.y:<8.3f} {rec.size:<7.3f} {rec.depth:<6.3f} {detail}"
            )
        lines.append("-" * 84)
        holes = sum(1 for rec in records if rec.operation == "hole")
        lines.append(f"{len(records)} operations ({holes} holes, {len(records) - holes} grooves)")
        return "\n".join(lines)


class MaterialUsageFormatter:
    """Formats material usage reports."""

    def format(self, usage: MaterialUsage) -> str:
        """Format material usage as a report."""
        return "\n".join(
            [
                "MATERIAL USAGE",
                "=" * 60,
                "",
                '3/4" Plywood (carcass and doors)',
                f"  Area needed: {usage.plywood34_sqft:.2f} sq ft",
                f"  To purchase: {usage.plywood34} sq ft (waste included)",
                "",
                '1/4" Plywood (back panel)',
                f"  Area needed: {usage.plywood14_sqft:.2f} sq ft",
                f"  To purchase: {usage.plywood14} sq ft (waste included)",
                "",
                "Edge banding",
                f"  Length needed: {usage.edge_banding_ft:.2f} ft",
                f"  To purchase: {usage.edge_banding} ft (waste included)",
            ]
        )


class DimensionsFormatter:
    """Formats resolved cabinet dimensions."""

    def format(self, dimensions: CabinetDimensions) -> str:
        d = dimensions
        lines = [
            f"{d.archetype.value.upper()} CABINET",
            "=" * 40,
            f"{'Width:':<18}{d.width:g}\"",
            f"{'Box height:':<18}{d.height:g}\"",
            f"{'Total height:':<18}{d.total_height:g}\"",
            f"{'Depth:':<18}{d.depth:g}\"",
            f"{'Box depth:':<18}{d.carcass_depth:g}\"",
        ]
        if d.door_thickness is not None:
            lines.append(f"{'Door thickness:':<18}{d.door_thickness:g}\"")
        if d.has_toe_kick:
            lines.append(
                f"{'Toe kick:':<18}{d.toe_kick_height:g}\" high x "
                f"{d.toe_kick_depth:g}\" deep"
            )
        lines.append(f"{'Doors:':<18}{2 if d.has_two_doors else 1}")
        return "\n".join(lines)
