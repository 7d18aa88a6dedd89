# backend/scoring.py

import math
import random

from backend.models import AnalysisResult, Recommendation

# Weighted formula
WEIGHTS = {
    "financial": 0.30,
    "market": 0.25,
    "team": 0.25,
    "technology": 0.20,
}

LOW_FINANCIAL = "Low Financial Performance"
HIGH_BURN = "High Burn Rate"
SHORT_RUNWAY = "Short Runway"
MARKET_CONCERNS = "Market Size Concerns"


def round_half_up(value):
    return int(math.floor(value + 0.5))


def clamp(v, lo, hi):
    return max(lo, min(hi, v))


def _metric(startup, name):
    value = getattr(startup, name, None)
    return value or 0


def financial_score(revenue, growth_rate, burn_rate):
    raw = (
        revenue / 1_000_000 * 30
        + growth_rate * 0.8
        + max(0, 24 - burn_rate / 100_000) * 2
    )
    return clamp(raw, 20, 95)


def weighted_overall(financial, market, team, technology):
    return round_half_up(
        financial * WEIGHTS["financial"]
        + market * WEIGHTS["market"]
        + team * WEIGHTS["team"]
        + technology * WEIGHTS["technology"]
    )


def classify_recommendation(overall_score, flag_count):
    # Recommendation rules
    if overall_score >= 75 and flag_count <= 1:
        return Recommendation.INVEST
    if overall_score >= 50:
        return Recommendation.WATCH
    return Recommendation.DECLINE


def risk_flags_for(financial, market, burn_rate, runway):
    flags = []
    if financial < 40:
        flags.append(LOW_FINANCIAL)
    if burn_rate > 500_000:
        flags.append(HIGH_BURN)
    if runway < 12:
        flags.append(SHORT_RUNWAY)
    if market < 50:
        flags.append(MARKET_CONCERNS)
    return flags


def key_insights_for(scores, flag_count, growth_rate):
    strongest = max(scores, key=lambda name: scores[name])
    if flag_count == 0:
        profile = "Low"
    elif flag_count == 1:
        profile = "Moderate"
    else:
        profile = "High"
    return [
        f"Strong {strongest} fundamentals",
        f"{profile} risk profile",
        "Rapid growth trajectory" if growth_rate > 100 else "Steady growth potential",
    ]


def analyze(startup, rng=None):
    # jitter is drawn in order: market, team, technology, confidence
    rng = rng if rng is not None else random.Random()

    revenue = _metric(startup, "revenue")
    growth_rate = _metric(startup, "growth_rate")
    burn_rate = _metric(startup, "burn_rate")
    team_size = _metric(startup, "team_size")
    runway = _metric(startup, "runway")

    raw_financial = financial_score(revenue, growth_rate, burn_rate)
    raw_market = clamp(70 + rng.uniform(-20, 20), 25, 95)
    financial = round_half_up(raw_financial)
    market = round_half_up(raw_market)
    team = round_half_up(clamp(team_size * 8 + 40 + rng.uniform(-10, 10), 30, 95))
    technology = round_half_up(clamp(65 + rng.uniform(-15, 15), 35, 95))

    overall = weighted_overall(financial, market, team, technology)
    # flags see the unrounded scores
    flags = risk_flags_for(raw_financial, raw_market, burn_rate, runway)

    scores = {
        "financial": financial,
        "market": market,
        "team": team,
        "technology": technology,
    }

    return AnalysisResult(
        overall_score=overall,
        financial_score=financial,
        market_score=market,
        team_score=team,
        technology_score=technology,
        risk_flags=flags,
        recommendation=classify_recommendation(overall, len(flags)),
        confidence=round_half_up(80 + rng.random() * 15),
        key_insights=key_insights_for(scores, len(flags), growth_rate),
    )
