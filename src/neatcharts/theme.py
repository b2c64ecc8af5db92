"""Pure data: colors, fonts, and layout constants for neatcharts.

No library imports — this module defines the chart look as plain Python
dicts and lists so config.py and style.py can both read from it.
"""

# Core palette
COLORS = {
    "bar": "#1F77B4",        # default bar / line color
    "neutral": "#BEBEBE",    # non-highlighted rows
    "bg": "#FFFFFF",
    "text": "#2B2B2B",
    "muted": "#6B6860",
    "grid": "#D9D9D9",
}

# Category colors for explicit fills — matplotlib's "tab10" cycle, in order
PALETTE = [
    "#1F77B4",
    "#FF7F0E",
    "#2CA02C",
    "#D62728",
    "#9467BD",
    "#8C564B",
    "#E377C2",
    "#7F7F7F",
    "#BCBD22",
    "#17BECF",
]

FONTS = {
    "sans": [
        "Helvetica Neue", "Helvetica", "Arial",
        "DejaVu Sans", "sans-serif",
    ],
}

# Chart layout constants
LAYOUT = {
    "figsize": (7.0, 5.0),
    "panel_size": (3.5, 3.0),   # per facet panel
    "dpi": 100,
    "title_size": 13,
    "label_size": 11,
    "tick_size": 9,
    "strip_size": 10,           # facet panel titles
    "bar_width": 0.75,
    "line_width": 2.0,          # lollipop stems, in points
    "point_size": 8,            # lollipop heads, diameter in points
    "expand_mult": (0.0, 0.05), # value axis padding: (baseline, far side)
    "grid_alpha": 0.8,
}
