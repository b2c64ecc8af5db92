"""Data preparation: validate a chart request, then sort, filter and color rows.

Everything here is a pure function of its inputs. The caller's table is never
modified; pre_process_data() returns a new DataFrame with a fresh index.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any

import pandas as pd
from matplotlib.colors import is_color_like
from pandas.api.types import is_numeric_dtype

from .config import DEFAULTS
from .exceptions import ColumnNotFoundError, ConfigurationError, HighlightNotice
from .reorder import reorder_within

logger = logging.getLogger(__name__)

COLOR_COLUMN = "display_color"
LABEL_COLUMN = "display_label"

Color = str | tuple[float, ...]


def _as_values(value: Any) -> tuple | None:
    """Normalize a scalar or an iterable of highlight values to a tuple."""
    if value is None:
        return None
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        return (value,)
    values = tuple(value)
    return values or None


def _as_colors(color: Any) -> Color | tuple[Color, ...]:
    """A single color stays as is; a sequence of colors becomes a tuple."""
    if isinstance(color, str) or is_color_like(color):
        return color
    colors = tuple(color)
    if not colors:
        raise ConfigurationError("at least one highlight color is required")
    if len(colors) == 1:
        return colors[0]
    return colors


@dataclass(frozen=True)
class ChartRequest:
    """Column references plus the shape options of one chart call.

    Build instances with ChartRequest.create(), which rejects option
    combinations that cannot be drawn.
    """

    x: str
    y: str
    facet: str | None = None
    highlight: tuple | None = None
    highlight_color: Color | tuple[Color, ...] = DEFAULTS.color
    sort: bool = True
    limit: int | None = None
    threshold: float | None = None

    @classmethod
    def create(
        cls,
        x: str,
        y: str,
        facet: str | None = None,
        *,
        highlight: Hashable | Iterable[Hashable] | None = None,
        highlight_color: Color | Sequence[Color] = DEFAULTS.color,
        sort: bool = True,
        limit: int | None = None,
        threshold: float | None = None,
    ) -> "ChartRequest":
        if (limit is not None or threshold is not None) and not sort:
            raise ConfigurationError(
                "sorting required for limit/threshold: pass sort=True"
            )
        if limit is not None and threshold is not None:
            raise ConfigurationError(
                "limit and threshold are mutually exclusive: pass only one"
            )
        if limit is not None:
            if isinstance(limit, bool) or not isinstance(limit, Integral) or limit < 1:
                raise ConfigurationError(f"limit must be a positive integer, got {limit!r}")
            limit = int(limit)
        if threshold is not None and (
            isinstance(threshold, bool) or not isinstance(threshold, Real)
        ):
            raise ConfigurationError(f"threshold must be a number, got {threshold!r}")

        values = _as_values(highlight)
        colors = _as_colors(highlight_color)
        if (
            values is not None
            and isinstance(colors, tuple)
            and not is_color_like(colors)
            and len(values) > 1
            and len(colors) != len(values)
        ):
            raise ConfigurationError(
                f"got {len(colors)} highlight colors for {len(values)} highlight "
                "values; pass one color or one per value"
            )

        return cls(
            x=x,
            y=y,
            facet=facet,
            highlight=values,
            highlight_color=colors,
            sort=bool(sort),
            limit=limit,
            threshold=threshold,
        )


def resolve_columns(data: pd.DataFrame, request: ChartRequest) -> None:
    """Check that every referenced column exists and that y is numeric."""
    for column in (request.x, request.y, request.facet):
        if column is not None and column not in data.columns:
            raise ColumnNotFoundError(column, data.columns)
    if not is_numeric_dtype(data[request.y]):
        raise ConfigurationError(
            f"y column {request.y!r} must be numeric, got dtype {data[request.y].dtype}"
        )


def highlight_colors(
    values: pd.Series,
    highlight: Sequence,
    color: Color | tuple[Color, ...],
    neutral_color: Color = DEFAULTS.neutral_color,
    stacklevel: int = 2,
) -> pd.Series:
    """Color each row by whether its value is one of ``highlight``.

    With one color every highlighted row gets it. With a sequence, the i-th
    highlight value gets the i-th color (request order). Everything else gets
    ``neutral_color``. Warns with HighlightNotice when the number of distinct
    highlight values found differs from the number requested.
    """
    present = set(values.tolist())
    found = {value for value in highlight if value in present}
    if len(found) != len(highlight):
        missing = [value for value in highlight if value not in present]
        detail = f"; not found: {missing}" if missing else "; duplicate values requested"
        warnings.warn(
            f"{len(found)} of {len(highlight)} highlight values matched the "
            f"data{detail}",
            HighlightNotice,
            stacklevel=stacklevel,
        )

    if isinstance(color, tuple) and not is_color_like(color):
        mapping: dict = {}
        for value, value_color in zip(highlight, color):
            mapping.setdefault(value, value_color)
    else:
        mapping = {value: color for value in highlight}

    return pd.Series(
        [mapping.get(value, neutral_color) for value in values.tolist()],
        index=values.index,
        dtype=object,
    )


def _shape(frame: pd.DataFrame, request: ChartRequest) -> pd.DataFrame:
    """Sort descending by y, then apply limit or threshold."""
    if request.sort:
        frame = frame.sort_values(request.y, ascending=False, kind="mergesort")
    if request.limit is not None:
        frame = frame.head(request.limit)
    elif request.threshold is not None:
        frame = frame[frame[request.y] > request.threshold]
    return frame


def pre_process_data(
    data: Any,
    request: ChartRequest,
    *,
    neutral_color: Color = DEFAULTS.neutral_color,
    label_sep: str = DEFAULTS.label_sep,
    stacklevel: int = 2,
) -> pd.DataFrame:
    """Return the rows to draw for ``request``, in drawing order.

    ``data`` is a DataFrame or anything ``pandas.DataFrame()`` accepts. With a
    facet column, sorting, limit and threshold apply within each facet group
    and groups follow sorted facet order. Adds ``display_color`` when
    highlighting and ``display_label`` when sorting a faceted chart.
    ``stacklevel`` counts frames up to the caller a HighlightNotice names,
    as for warnings.warn().
    """
    frame = data if isinstance(data, pd.DataFrame) else pd.DataFrame(data)
    resolve_columns(frame, request)
    frame = frame.reset_index(drop=True)
    total = len(frame)

    if request.facet is None:
        frame = _shape(frame, request)
    else:
        groups = [
            _shape(group, request)
            for _, group in frame.groupby(
                request.facet, sort=True, dropna=False, observed=True
            )
        ]
        frame = pd.concat(groups) if groups else frame.iloc[0:0]
        logger.debug("prepared %d facet groups on %r", len(groups), request.facet)

    frame = frame.reset_index(drop=True)

    if request.facet is not None and request.sort:
        frame[LABEL_COLUMN] = reorder_within(
            frame[request.x], frame[request.facet], sep=label_sep
        )

    if request.highlight:
        frame[COLOR_COLUMN] = highlight_colors(
            frame[request.x],
            request.highlight,
            request.highlight_color,
            neutral_color,
            stacklevel=stacklevel + 1,
        )

    logger.debug(
        "prepared %d of %d rows (sort=%s, limit=%s, threshold=%s)",
        len(frame),
        total,
        request.sort,
        request.limit,
        request.threshold,
    )
    return frame
