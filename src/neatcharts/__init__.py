"""neatcharts — sorted, filtered, highlighted and faceted charts on matplotlib."""

from .assemble import fill_colors, layout_panels, post_process_plot
from .charts import bar_chart, column_chart, figure, lollipop_chart, save
from .config import DEFAULTS, ChartDefaults
from .exceptions import ColumnNotFoundError, ConfigurationError, HighlightNotice
from .prepare import ChartRequest, highlight_colors, pre_process_data
from .reorder import reorder_within, strip_within
from .theme import COLORS, FONTS, LAYOUT, PALETTE

__all__ = [
    "bar_chart",
    "column_chart",
    "lollipop_chart",
    "figure",
    "save",
    "ChartRequest",
    "pre_process_data",
    "highlight_colors",
    "layout_panels",
    "post_process_plot",
    "fill_colors",
    "reorder_within",
    "strip_within",
    "ChartDefaults",
    "DEFAULTS",
    "ConfigurationError",
    "ColumnNotFoundError",
    "HighlightNotice",
    "COLORS",
    "FONTS",
    "LAYOUT",
    "PALETTE",
]
