"""Example: lollipop chart with two highlighted categories in their own colors."""

import numpy as np
import pandas as pd

import neatcharts as nc

rng = np.random.default_rng(42)
languages = ["Python", "Rust", "Go", "Java", "C", "Ruby", "Kotlin", "Swift"]
scores = pd.DataFrame({"language": languages, "score": rng.uniform(10, 90, len(languages))})

nc.lollipop_chart(
    scores,
    "language",
    "score",
    threshold=30,
    highlight=["Python", "Rust"],
    line_color=[nc.PALETTE[0], nc.PALETTE[3]],
    title="Survey Score",
    filename="lollipop-highlight.svg",
)
