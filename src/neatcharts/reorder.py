"""Axis labels that keep the same category apart across facet panels.

A category that appears in several panels may rank differently in each one.
reorder_within() tags every label with its panel value so each panel can
order its own rows; strip_within() drops the tag again for display.
"""

from __future__ import annotations

from collections.abc import Iterable

SEP = "___"


def reorder_within(values: Iterable, within: Iterable, sep: str = SEP) -> list[str]:
    """Combine each value with its facet value: ``"Roche___2018"``."""
    return [f"{value}{sep}{group}" for value, group in zip(values, within)]


def strip_within(label, sep: str = SEP) -> str:
    """Inverse of reorder_within() for a single label."""
    text = str(label)
    head, found, _ = text.rpartition(sep)
    return head if found else text
