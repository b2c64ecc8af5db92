"""Defaults handed to the data preparer and the plot assembler."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .theme import COLORS, LAYOUT, PALETTE

# Environment override for save(); relative to the working directory otherwise
OUTPUT_DIR_ENV = "NEATCHARTS_OUTPUT_DIR"


def default_output_dir() -> Path:
    """Directory save() writes to when no output_dir is given."""
    return Path(os.environ.get(OUTPUT_DIR_ENV, "charts"))


@dataclass(frozen=True)
class ChartDefaults:
    color: str = COLORS["bar"]
    neutral_color: str = COLORS["neutral"]
    palette: tuple[str, ...] = tuple(PALETTE)
    bar_width: float = LAYOUT["bar_width"]
    line_width: float = LAYOUT["line_width"]
    point_size: float = LAYOUT["point_size"]
    expand_mult: tuple[float, float] = LAYOUT["expand_mult"]
    panel_size: tuple[float, float] = LAYOUT["panel_size"]
    strip_size: float = LAYOUT["strip_size"]
    label_sep: str = "___"

    @classmethod
    def from_theme(cls, **overrides) -> "ChartDefaults":
        """Build defaults from theme.py, replacing any field given by keyword."""
        return cls(**overrides)


DEFAULTS = ChartDefaults.from_theme()
