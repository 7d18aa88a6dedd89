# backend/benchmarks.py

import numpy as np

from backend.models import BenchmarkReport, BenchmarkRow
from backend.scoring import round_half_up

# (label, attribute, higher_is_better)
METRICS = [
    ("Revenue", "revenue", True),
    ("Revenue Growth", "growth_rate", True),
    ("Burn Rate", "burn_rate", False),
    ("Team Size", "team_size", True),
    ("Valuation", "valuation", True),
    ("AI Score", "ai_score", True),
]


def sector_cohort(startup, startups):
    sector = (startup.sector or "").strip().lower()
    cohort = [s for s in startups if (s.sector or "").strip().lower() == sector]
    if not any(s.id == startup.id for s in cohort):
        cohort.append(startup)
    return cohort


def benchmark(startup, startups):
    """Compare a startup with the average and top quartile of its sector."""
    cohort = sector_cohort(startup, startups)

    rows = []
    for label, attr, higher_is_better in METRICS:
        values = np.array([float(getattr(s, attr)) for s in cohort])
        top = float(np.percentile(values, 75 if higher_is_better else 25))
        own = float(getattr(startup, attr))
        rows.append(BenchmarkRow(
            metric=label,
            startup=own,
            sector_average=float(values.mean()),
            top_quartile=top,
            percent_of_top_quartile=round_half_up(own / top * 100) if top else None,
        ))

    return BenchmarkReport(
        startup_id=startup.id,
        sector=startup.sector,
        peer_count=len(cohort) - 1,
        metrics=rows,
    )
