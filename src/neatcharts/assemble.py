"""Plot assembly: lay out facet panels, then finish the drawn chart.

layout_panels() decides where every prepared row goes. The chart functions
draw their geometry into the panels, and post_process_plot() applies what
depends on all panels at once: orientation, axis sharing, legends and the
value-axis expansion.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.patches import Patch

from .config import DEFAULTS, ChartDefaults
from .prepare import LABEL_COLUMN
from .reorder import strip_within
from .style import discrete_axes

logger = logging.getLogger(__name__)


@dataclass
class Panel:
    """One facet panel: its rows, its axes and where each row is drawn."""

    value: Any
    rows: pd.DataFrame
    ax: plt.Axes
    positions: np.ndarray
    values: np.ndarray
    ticks: np.ndarray = field(default_factory=lambda: np.array([]))
    tick_labels: list[str] = field(default_factory=list)


def fill_colors(values: pd.Series, palette=DEFAULTS.palette) -> dict:
    """Map each distinct value to a palette color, in sorted value order.

    The same set of values always yields the same mapping; a value may get
    a different color when the set of values changes. The palette repeats
    when there are more values than colors.
    """
    distinct = list(pd.unique(values.dropna()))
    try:
        distinct.sort()
    except TypeError:
        distinct.sort(key=str)
    return {value: palette[i % len(palette)] for i, value in enumerate(distinct)}


def _positions(
    rows: pd.DataFrame, x: str, numeric_x: bool, label_sep: str
) -> tuple[np.ndarray, np.ndarray, list[str]]:
    """Row positions along the category axis, plus ticks and tick labels."""
    if numeric_x:
        positions = rows[x].to_numpy(dtype=float)
        return positions, np.array([]), []

    keys = rows[LABEL_COLUMN] if LABEL_COLUMN in rows.columns else rows[x]
    categories = list(pd.unique(keys))
    index = {key: i for i, key in enumerate(categories)}
    positions = np.array([index[key] for key in keys], dtype=float)
    if LABEL_COLUMN in rows.columns:
        labels = [strip_within(key, label_sep) for key in categories]
    else:
        labels = [str(key) for key in categories]
    return positions, np.arange(len(categories), dtype=float), labels


def _grid(n: int) -> tuple[int, int]:
    """Wrap n panels into a near-square grid: (rows, columns)."""
    ncols = math.ceil(math.sqrt(n))
    return math.ceil(n / ncols), ncols


def layout_panels(
    data: pd.DataFrame,
    x: str,
    y: str,
    facet: str | None = None,
    *,
    numeric_x: bool = False,
    figsize: tuple[float, float] | None = None,
    defaults: ChartDefaults = DEFAULTS,
) -> tuple[plt.Figure, list[Panel]]:
    """Create the figure with one panel per facet value (or a single panel)."""
    if facet is None:
        fig, ax = plt.subplots(figsize=figsize)
        groups = [(None, data)]
        cells = [ax]
    else:
        values = list(pd.unique(data[facet]))
        groups = []
        for value in values:
            mask = data[facet].isna() if pd.isna(value) else data[facet] == value
            groups.append((value, data[mask]))
        if not groups:
            groups = [(None, data)]

        nrows, ncols = _grid(len(groups))
        if figsize is None:
            width, height = defaults.panel_size
            figsize = (width * ncols, height * nrows)
        fig, grid = plt.subplots(nrows, ncols, figsize=figsize, squeeze=False)
        cells = list(grid.ravel())
        for ax in cells[len(groups):]:
            ax.remove()

    panels = []
    for (value, rows), ax in zip(groups, cells):
        positions, ticks, labels = _positions(rows, x, numeric_x, defaults.label_sep)
        panels.append(
            Panel(
                value=value,
                rows=rows,
                ax=ax,
                positions=positions,
                values=rows[y].to_numpy(dtype=float),
                ticks=ticks,
                tick_labels=labels,
            )
        )
        if facet is not None and value is not None:
            ax.set_title(str(value), fontsize=defaults.strip_size, fontweight="normal")
    return fig, panels


def value_limits(
    panels: list[Panel], expand_mult: tuple[float, float] = DEFAULTS.expand_mult
) -> tuple[float, float]:
    """Value-axis limits: no padding at the baseline, a margin on the far side."""
    values = np.concatenate([panel.values for panel in panels] + [np.zeros(1)])
    values = values[np.isfinite(values)]
    low, high = values.min(), values.max()
    span = (high - low) or 1.0
    lower_mult, upper_mult = expand_mult
    if low < 0 and high == 0:
        # all-negative data: the baseline is on the far (upper) side
        return low - span * upper_mult, high + span * lower_mult
    return low - span * lower_mult, high + span * upper_mult


def _label_axes(
    fig: plt.Figure,
    panels: list[Panel],
    horizontal: bool,
    faceted: bool,
    title: str | None,
    xlabel: str | None,
    ylabel: str | None,
) -> None:
    # xlabel names the category column, ylabel the value column
    bottom, left = (ylabel, xlabel) if horizontal else (xlabel, ylabel)
    if faceted:
        if title:
            fig.suptitle(title)
        if bottom:
            fig.supxlabel(bottom)
        if left:
            fig.supylabel(left)
        return
    ax = panels[0].ax
    if title:
        ax.set_title(title)
    if bottom:
        ax.set_xlabel(bottom)
    if left:
        ax.set_ylabel(left)


def post_process_plot(
    fig: plt.Figure,
    panels: list[Panel],
    *,
    is_sorted: bool = True,
    horizontal: bool = True,
    numeric_x: bool = False,
    faceted: bool = False,
    highlight: bool = False,
    fill: dict | None = None,
    fill_title: str | None = None,
    title: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    defaults: ChartDefaults = DEFAULTS,
) -> tuple[plt.Figure, Any]:
    """Finish a chart whose geometry has been drawn into ``panels``.

    Returns ``(fig, ax)`` for a single panel, or ``(fig, axes)`` with a 1-D
    array of panel axes in facet order.

    ``is_sorted`` and ``highlight`` only tag the debug log record: per-panel
    order and highlight colors are already in the prepared rows.
    """
    # Orientation first: every later decision is about the resolved axes.
    category_axis = "y" if horizontal else "x"
    value_axis = "x" if horizontal else "y"

    for panel in panels:
        discrete_axes(panel.ax, horizontal)
        if not numeric_x:
            getattr(panel.ax, f"set_{category_axis}ticks")(
                panel.ticks, labels=panel.tick_labels
            )
            if horizontal:
                # first prepared row on top
                panel.ax.invert_yaxis()

    if highlight:
        logger.debug("colors taken from the prepared rows as-is")

    if fill:
        handles = [Patch(color=color, label=str(value)) for value, color in fill.items()]
        panels[-1].ax.legend(handles=handles, title=fill_title)

    if faceted:
        if numeric_x:
            scales = "fixed"
            first = panels[0].ax
            for panel in panels[1:]:
                getattr(panel.ax, f"share{category_axis}")(first)
            first.autoscale(axis=category_axis)
        else:
            scales = f"free_{category_axis}"
        logger.debug("faceted %d panels with %s scales (sorted=%s)", len(panels), scales, is_sorted)

    limits = value_limits(panels, defaults.expand_mult)
    for panel in panels:
        getattr(panel.ax, f"set_{value_axis}lim")(limits)

    _label_axes(fig, panels, horizontal, faceted, title, xlabel, ylabel)

    if faceted:
        return fig, np.array([panel.ax for panel in panels], dtype=object)
    return fig, panels[0].ax
