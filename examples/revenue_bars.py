"""Example: top companies by revenue, one highlighted."""

import pandas as pd

import neatcharts as nc

revenue = pd.DataFrame(
    {
        "company": ["Roche", "Pfizer", "Novartis", "Merck", "Sanofi", "AbbVie", "Bayer"],
        "revenue": [63.0, 53.6, 53.2, 42.3, 40.6, 32.8, 46.4],
    }
)

nc.bar_chart(
    revenue,
    "company",
    "revenue",
    limit=5,
    highlight="Roche",
    title="Revenue 2018",
    ylabel="Revenue (B USD)",
    filename="revenue-bars.svg",
)
