"""Example: each year's top three, ranked within its own panel."""

import pandas as pd

import neatcharts as nc

revenue = pd.DataFrame(
    {
        "company": ["Roche", "Pfizer", "Novartis", "Merck"] * 2,
        "year": [2017] * 4 + [2018] * 4,
        "revenue": [57.3, 52.5, 49.1, 40.1, 63.0, 53.6, 53.2, 42.3],
    }
)

nc.bar_chart(
    revenue,
    "company",
    "revenue",
    facet="year",
    limit=3,
    filename="revenue-facets.svg",
)

# Numeric x keeps one shared year axis across the company panels
nc.column_chart(revenue, "year", "revenue", facet="company", filename="revenue-by-company.svg")
