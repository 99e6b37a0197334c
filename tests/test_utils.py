"""Tests for the rendering helpers used by the Streamlit app."""

import plotly.graph_objects as go

import utils
from engine import HIT, MISS, ReplacementPolicy, compare, fifo, lru
from utils import (
    HIT_COLOR,
    MISS_COLOR,
    build_comparison_figure,
    build_visualization_figure,
    format_frame,
    frame_grid,
    get_color,
)


class TestFormatting:
    """Verify cell text and colors."""

    def test_empty_frame_shown_as_dash(self) -> None:
        """Empty slots render as '-'."""
        assert format_frame(None) == "-"

    def test_page_zero_is_not_empty(self) -> None:
        """Page 0 is a real page, not an empty slot."""
        assert format_frame(0) == "0"
        assert format_frame(12) == "12"

    def test_status_colors(self) -> None:
        """Hits and misses are colored differently."""
        assert get_color(HIT) == HIT_COLOR
        assert get_color(MISS) == MISS_COLOR
        assert HIT_COLOR != MISS_COLOR


class TestFrameGrid:
    """Verify the frame-by-step layout."""

    def test_rows_are_frames(self) -> None:
        """Row i traces frame i across every step."""
        grid = frame_grid(fifo([1, 2, 3, 4, 1, 2, 5], 3))
        assert grid == [
            ["1", "1", "1", "4", "4", "4", "5"],
            ["-", "2", "2", "2", "1", "1", "1"],
            ["-", "-", "3", "3", "3", "2", "2"],
        ]

    def test_empty_run_keeps_frame_rows(self) -> None:
        """No steps still gives one (empty) row per frame."""
        assert frame_grid(lru([], 2)) == [[], []]


class TestVisualizationFigure:
    """Verify the step-by-step table figure."""

    def test_frame_cells_match_frame_grid(self) -> None:
        """Table frame cells are the frame grid read column by column."""
        result = fifo([1, 2, 3, 4, 1], 2)
        grid = frame_grid(result)
        columns = [list(col) for col in build_visualization_figure(result).data[0].cells.values]
        for j, column in enumerate(columns[1:]):
            assert column[1:] == [row[j] for row in grid]

    def test_frame_cells_come_from_frame_grid(self, monkeypatch) -> None:
        """The table draws its frame rows from frame_grid and nowhere else."""
        monkeypatch.setattr(utils, "frame_grid", lambda result: [["a", "b"]])
        fig = build_visualization_figure(fifo([1, 2], 1))
        columns = [list(col) for col in fig.data[0].cells.values]
        assert columns[1:] == [[MISS, "a"], [MISS, "b"]]

    def test_one_column_per_step(self) -> None:
        """Headers are the referenced pages after a label column."""
        fig = build_visualization_figure(lru([1, 2, 1], 2))
        table = fig.data[0]
        assert isinstance(table, go.Table)
        assert list(table.header.values) == ["Ref", "1", "2", "1"]

    def test_cells_hold_status_then_frames(self) -> None:
        """Each step column is its status followed by its frames."""
        fig = build_visualization_figure(lru([1, 2, 1], 2))
        columns = [list(col) for col in fig.data[0].cells.values]
        assert columns == [
            ["Status", "Frame 0", "Frame 1"],
            [MISS, "1", "-"],
            [MISS, "1", "2"],
            [HIT, "1", "2"],
        ]

    def test_columns_colored_by_status(self) -> None:
        """Hit columns and miss columns get their own fill."""
        fig = build_visualization_figure(fifo([3, 3], 1))
        fills = [list(col) for col in fig.data[0].cells.fill.color]
        assert fills[1] == [MISS_COLOR, MISS_COLOR]
        assert fills[2] == [HIT_COLOR, HIT_COLOR]


class TestComparisonFigure:
    """Verify the FIFO vs LRU fault chart."""

    def test_bar_per_policy(self) -> None:
        """One bar per policy, height equal to its fault count."""
        fig = build_comparison_figure(compare([1, 2, 3, 1, 4, 1], 3))
        bar = fig.data[0]
        assert list(bar.x) == [ReplacementPolicy.FIFO, ReplacementPolicy.LRU]
        assert list(bar.y) == [5, 4]
