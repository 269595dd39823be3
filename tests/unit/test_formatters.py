"""Tests for console formatters."""

from casework.infrastructure import (
    CutListFormatter,
    DimensionsFormatter,
    MachiningFormatter,
    MaterialUsageFormatter,
)


class TestCutListFormatter:
    """Tests for CutListFormatter."""

    def test_table(self, base_output) -> None:
        text = CutListFormatter().format(base_output.cut_list)
        assert text.startswith("CUT LIST")
        assert "Side Panel" in text
        assert "Toe Kick Side" in text
        assert "TOTAL" in text
        assert "sq ft" in text

    def test_empty(self) -> None:
        assert CutListFormatter().format([]) == "No pieces in cut list."


class TestMachiningFormatter:
    """Tests for MachiningFormatter."""

    def test_summary_line(self, base_output) -> None:
        text = MachiningFormatter().format(base_output.machining)
        assert text.splitlines()[-1] == "44 operations (42 holes, 2 grooves)"
        assert "from left edge" in text
        assert "vertical run 29.625" in text


class TestMaterialUsageFormatter:
    """Tests for MaterialUsageFormatter."""

    def test_report(self, base_output) -> None:
        text = MaterialUsageFormatter().format(base_output.material_usage)
        assert "MATERIAL USAGE" in text
        assert "To purchase: 28 sq ft (waste included)" in text
        assert "To purchase: 20 ft (waste included)" in text


class TestDimensionsFormatter:
    """Tests for DimensionsFormatter."""

    def test_base(self, base_output) -> None:
        lines = DimensionsFormatter().format(base_output.dimensions).splitlines()
        assert lines[0] == "BASE CABINET"
        assert any("34.5" in line and "Total height" in line for line in lines)
        assert any(line.startswith("Toe kick:") for line in lines)
        assert not any(line.startswith("Door thickness:") for line in lines)
        assert lines[-1].split() == ["Doors:", "1"]

    def test_wall(self, wall_output) -> None:
        lines = DimensionsFormatter().format(wall_output.dimensions).splitlines()
        assert lines[0] == "WALL CABINET"
        assert any(line.startswith("Door thickness:") for line in lines)
        assert lines[-1].split() == ["Doors:", "2"]
