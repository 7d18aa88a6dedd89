# backend/scenarios.py

from backend.models import Projections, ScenarioProjection


def project_one(startup, scenario):
    revenue = startup.revenue * (1 + scenario.growth_rate / 100)
    valuation = startup.valuation * (1 + scenario.valuation_multiple)
    burn_rate = startup.burn_rate * (1 + scenario.burn_rate_change / 100)

    # Literal runway: projected revenue over projected burn, in months.
    # Not cash / burn. Zero burn means no bound.
    runway = revenue / burn_rate * 12 if burn_rate else None
    roi = (valuation - startup.valuation) / startup.valuation * 100 if startup.valuation else None

    return ScenarioProjection(
        name=scenario.name,
        probability=scenario.probability,
        projections=Projections(
            revenue=revenue,
            valuation=valuation,
            burn_rate=burn_rate,
            runway=runway,
            roi=roi,
        ),
    )


def project(startup, scenarios):
    return [project_one(startup, s) for s in scenarios]
