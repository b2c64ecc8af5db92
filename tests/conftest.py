from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import pytest


@pytest.fixture
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def revenue() -> pd.DataFrame:
    """Three companies, one year."""
    return pd.DataFrame({"company": ["A", "B", "C"], "revenue": [10, 30, 20]})


@pytest.fixture
def revenue_by_year() -> pd.DataFrame:
    """Four companies over two years; rankings differ between the years."""
    return pd.DataFrame(
        {
            "company": ["A", "B", "C", "D", "A", "B", "C", "D"],
            "year": [2018, 2018, 2018, 2018, 2019, 2019, 2019, 2019],
            "revenue": [10, 40, 30, 20, 50, 10, 20, 35],
        }
    )
