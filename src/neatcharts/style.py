"""Translate theme.py constants into matplotlib rcParams."""

import matplotlib as mpl
import matplotlib.pyplot as plt

from .theme import COLORS, FONTS, LAYOUT, PALETTE

# matplotlib rcParams dict — applied before every chart is drawn
STYLE: dict = {
    # Figure
    "figure.figsize": LAYOUT["figsize"],
    "figure.dpi": LAYOUT["dpi"],
    "figure.facecolor": COLORS["bg"],
    "savefig.dpi": LAYOUT["dpi"],
    "savefig.facecolor": COLORS["bg"],
    "savefig.bbox": "tight",
    "savefig.pad_inches": 0.2,

    # Axes
    "axes.facecolor": COLORS["bg"],
    "axes.titlesize": LAYOUT["title_size"],
    "axes.titleweight": "bold",
    "axes.titlecolor": COLORS["text"],
    "axes.labelsize": LAYOUT["label_size"],
    "axes.labelcolor": COLORS["text"],
    "axes.prop_cycle": mpl.cycler(color=PALETTE),
    "axes.spines.top": False,
    "axes.spines.right": False,
    "axes.axisbelow": True,

    # Grid — drawn per panel by discrete_axes()
    "grid.color": COLORS["grid"],
    "grid.alpha": LAYOUT["grid_alpha"],
    "grid.linewidth": 0.6,

    # Ticks
    "xtick.labelsize": LAYOUT["tick_size"],
    "ytick.labelsize": LAYOUT["tick_size"],
    "xtick.color": COLORS["muted"],
    "ytick.color": COLORS["muted"],
    "xtick.labelcolor": COLORS["text"],
    "ytick.labelcolor": COLORS["text"],

    # Legend
    "legend.frameon": False,
    "legend.fontsize": LAYOUT["tick_size"],

    # Font
    "font.family": "sans-serif",
    "font.sans-serif": FONTS["sans"],
    "font.size": LAYOUT["tick_size"],
}


def apply() -> None:
    """Apply the neatcharts style to matplotlib globally."""
    plt.rcParams.update(STYLE)


def discrete_axes(ax: plt.Axes, horizontal: bool) -> None:
    """Style a panel whose one axis holds categories.

    Grid lines run only along the value axis and the category axis loses
    its spine and tick marks.
    """
    value_axis = "x" if horizontal else "y"
    category_axis = "y" if horizontal else "x"

    ax.grid(False)
    ax.grid(True, axis=value_axis)
    ax.tick_params(axis=category_axis, length=0)
    if horizontal:
        ax.spines["left"].set_visible(False)
        ax.spines["bottom"].set_visible(False)
    else:
        ax.spines["bottom"].set_color(COLORS["muted"])
        ax.spines["left"].set_visible(False)
