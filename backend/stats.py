# backend/stats.py

from collections import Counter

from backend.models import Activity, DashboardStats, Overview, Recommendation, RiskLevel
from backend.scoring import round_half_up

RECENT_ACTIVITY_LIMIT = 5


def dashboard_stats(startups):
    total = len(startups)
    avg_score = round_half_up(sum(s.ai_score for s in startups) / total) if total else 0

    overview = Overview(
        total_startups=total,
        avg_score=avg_score,
        high_risk=sum(1 for s in startups if s.risk_level == RiskLevel.HIGH),
        invest_recommendations=sum(
            1 for s in startups if s.recommendation == Recommendation.INVEST
        ),
    )

    sectors = Counter(s.sector for s in startups if s.sector)

    recent = sorted(startups, key=lambda s: s.last_analyzed, reverse=True)
    activity = [
        Activity(id=s.id, name=s.name, timestamp=s.last_analyzed, score=s.ai_score)
        for s in recent[:RECENT_ACTIVITY_LIMIT]
    ]

    return DashboardStats(
        overview=overview,
        sector_distribution=dict(sectors),
        recent_activity=activity,
    )
