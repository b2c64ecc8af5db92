"""Errors and notices raised while building a chart."""


class ConfigurationError(ValueError):
    """A chart request that can never be drawn (bad option combination)."""


class ColumnNotFoundError(ConfigurationError, KeyError):
    """A column reference that does not name a column of the table."""

    def __init__(self, column: str, available) -> None:
        self.column = column
        self.available = list(available)
        super().__init__(
            f"column {column!r} not found; available columns: {self.available}"
        )

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return self.args[0]


class HighlightNotice(UserWarning):
    """Some highlight values do not match any category in the data."""
