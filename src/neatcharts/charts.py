"""Convenience chart functions: bar_chart(), column_chart(), lollipop_chart(),
figure(), save()."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.colors import is_color_like
from pandas.api.types import is_numeric_dtype

from .assemble import Panel, fill_colors, layout_panels, post_process_plot
from .config import DEFAULTS, ChartDefaults, default_output_dir
from .exceptions import ColumnNotFoundError
from .prepare import COLOR_COLUMN, ChartRequest, pre_process_data
from .style import apply

logger = logging.getLogger(__name__)


def _ensure_style() -> None:
    """Apply the neatcharts style if not already applied."""
    apply()


def figure(
    figsize: tuple[float, float] | None = None,
) -> tuple[plt.Figure, plt.Axes]:
    """Create a styled (fig, ax) pair. Escape hatch for custom charts."""
    _ensure_style()
    fig, ax = plt.subplots(figsize=figsize)
    return fig, ax


def save(
    fig: plt.Figure,
    filename: str,
    output_dir: str | Path | None = None,
) -> Path:
    """Save a figure to the output directory and close it.

    The directory defaults to $NEATCHARTS_OUTPUT_DIR, else ./charts.
    Returns the path to the saved file.
    """
    dest = Path(output_dir) if output_dir else default_output_dir()
    dest.mkdir(parents=True, exist_ok=True)
    path = dest / filename
    fig.savefig(path)
    plt.close(fig)
    logger.debug("saved chart to %s", path)
    return path


def _prepare(
    data: Any,
    request: ChartRequest,
    defaults: ChartDefaults,
    figsize: tuple[float, float] | None,
) -> tuple[pd.DataFrame, bool, plt.Figure, list[Panel]]:
    prepared = pre_process_data(
        data,
        request,
        neutral_color=defaults.neutral_color,
        label_sep=defaults.label_sep,
        stacklevel=4,
    )
    # Sorting turns x into an ordered set of categories, numeric or not.
    numeric_x = is_numeric_dtype(prepared[request.x]) and not request.sort

    _ensure_style()
    fig, panels = layout_panels(
        prepared,
        request.x,
        request.y,
        request.facet,
        numeric_x=numeric_x,
        figsize=figsize,
        defaults=defaults,
    )
    return prepared, numeric_x, fig, panels


def _row_colors(rows: pd.DataFrame, color: Any) -> Any:
    """One color per row: the highlight colors, or ``color`` repeated."""
    if COLOR_COLUMN in rows.columns:
        return rows[COLOR_COLUMN].tolist()
    if is_color_like(color):
        # scatter() would colormap an RGB tuple when len(rows) == len(color)
        return [color] * len(rows)
    return color


def bar_chart(
    data: Any,
    x: str,
    y: str,
    facet: str | None = None,
    *,
    fill: str | None = None,
    bar_color: Any = DEFAULTS.color,
    highlight: Any = None,
    sort: bool = True,
    horizontal: bool = True,
    limit: int | None = None,
    threshold: float | None = None,
    title: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    figsize: tuple[float, float] | None = None,
    defaults: ChartDefaults = DEFAULTS,
    **kwargs: Any,
) -> tuple[plt.Figure, Any]:
    """Bar chart of ``y`` per ``x``, horizontal and sorted by default.

    ``limit`` keeps the top N bars and ``threshold`` the bars with
    ``y > threshold``; both need ``sort=True`` and only one may be given.
    ``highlight`` is one or more values of ``x`` drawn in ``bar_color`` (or
    in the matching entry of a list of colors) with every other bar grey.
    ``fill`` names a column whose values split each bar into dodged bars
    with a legend; it takes precedence over ``highlight`` for bar colors.
    With ``facet`` there is one panel per facet value, each sorted and
    limited on its own.

    Returns ``(fig, ax)``, or ``(fig, axes)`` when faceted.
    """
    request = ChartRequest.create(
        x,
        y,
        facet,
        highlight=highlight,
        highlight_color=bar_color,
        sort=sort,
        limit=limit,
        threshold=threshold,
    )
    prepared, numeric_x, fig, panels = _prepare(data, request, defaults, figsize)

    try:
        fill_map = None
        if fill is not None:
            if fill not in prepared.columns:
                raise ColumnNotFoundError(fill, prepared.columns)
            fill_map = fill_colors(prepared[fill], defaults.palette)

        for panel in panels:
            draw = panel.ax.barh if horizontal else panel.ax.bar
            if fill_map:
                n = len(fill_map)
                width = defaults.bar_width / n
                offsets = np.linspace(-(n - 1) / 2 * width, (n - 1) / 2 * width, n)
                for offset, (group, color) in zip(offsets, fill_map.items()):
                    mask = (panel.rows[fill] == group).to_numpy()
                    if mask.any():
                        draw(
                            panel.positions[mask] + offset,
                            panel.values[mask],
                            width,
                            color=color,
                            **kwargs,
                        )
            else:
                draw(
                    panel.positions,
                    panel.values,
                    defaults.bar_width,
                    color=_row_colors(panel.rows, bar_color),
                    **kwargs,
                )

        fig, ax = post_process_plot(
            fig,
            panels,
            is_sorted=request.sort,
            horizontal=horizontal,
            numeric_x=numeric_x,
            faceted=facet is not None,
            highlight=not fill_map and request.highlight is not None,
            fill=fill_map,
            fill_title=fill,
            title=title,
            xlabel=x if xlabel is None else xlabel,
            ylabel=y if ylabel is None else ylabel,
            defaults=defaults,
        )
    except Exception:
        plt.close(fig)
        raise

    if filename:
        save(fig, filename, output_dir)

    return fig, ax


def column_chart(
    data: Any,
    x: str,
    y: str,
    facet: str | None = None,
    *,
    sort: bool | None = None,
    horizontal: bool = False,
    **kwargs: Any,
) -> tuple[plt.Figure, Any]:
    """Vertical bar_chart(). Sorts by default unless ``x`` is numeric."""
    if sort is None:
        frame = data if isinstance(data, pd.DataFrame) else pd.DataFrame(data)
        if x not in frame.columns:
            raise ColumnNotFoundError(x, frame.columns)
        sort = not is_numeric_dtype(frame[x])
    return bar_chart(data, x, y, facet, sort=sort, horizontal=horizontal, **kwargs)


def lollipop_chart(
    data: Any,
    x: str,
    y: str,
    facet: str | None = None,
    *,
    line_width: float | None = None,
    line_color: Any = DEFAULTS.color,
    point_size: float | None = None,
    point_color: Any = None,
    highlight: Any = None,
    sort: bool = True,
    horizontal: bool = True,
    limit: int | None = None,
    threshold: float | None = None,
    title: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    figsize: tuple[float, float] | None = None,
    defaults: ChartDefaults = DEFAULTS,
) -> tuple[plt.Figure, Any]:
    """Lollipop chart: a stem from the baseline and a point at each value.

    Takes the same shape options as bar_chart(). Highlighted rows get the
    highlight color on both stem and point.
    """
    line_width = defaults.line_width if line_width is None else line_width
    point_size = defaults.point_size if point_size is None else point_size
    point_color = line_color if point_color is None else point_color

    request = ChartRequest.create(
        x,
        y,
        facet,
        highlight=highlight,
        highlight_color=line_color,
        sort=sort,
        limit=limit,
        threshold=threshold,
    )
    prepared, numeric_x, fig, panels = _prepare(data, request, defaults, figsize)

    try:
        for panel in panels:
            stem = panel.ax.hlines if horizontal else panel.ax.vlines
            stem(
                panel.positions,
                0,
                panel.values,
                colors=_row_colors(panel.rows, line_color),
                linewidth=line_width,
            )
            if horizontal:
                xs, ys = panel.values, panel.positions
            else:
                xs, ys = panel.positions, panel.values
            panel.ax.scatter(
                xs,
                ys,
                s=point_size**2,
                c=_row_colors(panel.rows, point_color),
                zorder=3,
            )

        fig, ax = post_process_plot(
            fig,
            panels,
            is_sorted=request.sort,
            horizontal=horizontal,
            numeric_x=numeric_x,
            faceted=facet is not None,
            highlight=request.highlight is not None,
            title=title,
            xlabel=x if xlabel is None else xlabel,
            ylabel=y if ylabel is None else ylabel,
            defaults=defaults,
        )
    except Exception:
        plt.close(fig)
        raise

    if filename:
        save(fig, filename, output_dir)

    return fig, ax
