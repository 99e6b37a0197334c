# utils.py

from typing import Dict, List, Optional

import plotly.graph_objects as go

from engine import EMPTY, HIT, SimulationResult

EMPTY_LABEL = "-"

HIT_COLOR = "lightgreen"
MISS_COLOR = "#f4a6a6"  # light red
HEADER_COLOR = "lightgray"


def format_frame(value: Optional[int]) -> str:
    """Return the text shown for a frame slot ('-' when empty)."""
    return EMPTY_LABEL if value is EMPTY else str(value)


def get_color(status):
    """Return a fill color for a Hit/Miss column."""
    return HIT_COLOR if status == HIT else MISS_COLOR


def frame_grid(result: SimulationResult) -> List[List[str]]:
    """
    Lay the snapshots out as rows of frame slots.

    Row i holds the contents of frame i at every step, so reading a row
    left to right shows how that slot changed over the run.
    """
    return [
        [format_frame(step.frames[slot]) for step in result.steps]
        for slot in range(result.frame_count)
    ]


def build_visualization_figure(result: SimulationResult) -> go.Figure:
    """
    Build the step-by-step table: one column per reference.

    The header of each column is the referenced page, the first row is
    its Hit/Miss status and the remaining rows are the frames.
    """
    row_labels = ["Status"] + [f"Frame {i}" for i in range(result.frame_count)]
    header = ["Ref"] + [str(step.current_page) for step in result.steps]

    # go.Table takes cell values column by column, so the grid is transposed
    grid = frame_grid(result)
    columns = [row_labels]
    fill_colors = [[HEADER_COLOR] * len(row_labels)]
    for j, step in enumerate(result.steps):
        columns.append([step.status] + [row[j] for row in grid])
        fill_colors.append([get_color(step.status)] * len(row_labels))

    fig = go.Figure(go.Table(
        header=dict(values=header, fill_color=HEADER_COLOR, align="center"),
        cells=dict(values=columns, fill_color=fill_colors, align="center"),
    ))
    fig.update_layout(
        height=80 + 30 * len(row_labels),
        margin=dict(l=0, r=0, t=10, b=0),
    )
    return fig


def build_comparison_figure(results: Dict[str, SimulationResult]) -> go.Figure:
    """Bar chart of page faults for each policy run on the same input."""
    policies = list(results)
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=policies,
        y=[results[p].page_faults for p in policies],
        text=[results[p].page_faults for p in policies],
    ))
    fig.update_layout(height=300, title="Page Faults by Policy")
    return fig
