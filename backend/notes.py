# backend/notes.py

import uuid

from backend.models import DealNotes, KeyMetrics, NotesRecommendation, utcnow

NO_MAJOR_RISKS = "No major risks identified"


def generate_deal_notes(startup, analysis, now=None):
    now = now or utcnow()
    decision = analysis.recommendation.value

    summary = (
        f"{startup.name} is a {startup.stage.value}-stage {startup.sector} company "
        f"with a current valuation of ${startup.valuation / 1_000_000:.1f}M. "
        f"Our AI analysis scored the company {analysis.overall_score}/100 "
        f"with a {decision.upper()} recommendation."
    )
    reasoning = (
        "Based on comprehensive analysis across "
        f"financial performance ({analysis.financial_score}/100), "
        f"market opportunity ({analysis.market_score}/100), "
        f"team quality ({analysis.team_score}/100), "
        f"and technology innovation ({analysis.technology_score}/100)."
    )

    return DealNotes(
        id=str(uuid.uuid4()),
        startup_id=startup.id,
        title=f"Investment Analysis: {startup.name}",
        summary=summary,
        key_metrics=KeyMetrics(
            valuation=startup.valuation,
            revenue=startup.revenue,
            growth_rate=startup.growth_rate,
            burn_rate=startup.burn_rate,
            runway=startup.runway,
            team_size=startup.team_size,
        ),
        strengths=list(analysis.key_insights),
        risks=list(analysis.risk_flags) or [NO_MAJOR_RISKS],
        recommendation=NotesRecommendation(
            decision=analysis.recommendation,
            confidence=analysis.confidence,
            reasoning=reasoning,
        ),
        generated_at=now,
        last_modified=now,
    )


def edit_summary(notes, summary, now=None):
    return notes.model_copy(update={
        "summary": summary,
        "last_modified": now or utcnow(),
    })


def _money(amount):
    return f"${amount / 1_000_000:.1f}M"


def render_markdown(notes):
    m = notes.key_metrics
    lines = [
        f"# {notes.title}",
        "",
        notes.summary,
        "",
        "## Key Metrics",
        "",
        f"- Valuation: {_money(m.valuation)}",
        f"- Revenue: {_money(m.revenue)}",
        f"- Growth rate: {m.growth_rate:g}%",
        f"- Burn rate: {_money(m.burn_rate)}/month",
        f"- Runway: {m.runway:g} months",
        f"- Team size: {m.team_size}",
        "",
        "## Strengths",
        "",
    ]
    lines += [f"- {s}" for s in notes.strengths]
    lines += ["", "## Risks", ""]
    lines += [f"- {r}" for r in notes.risks]
    rec = notes.recommendation
    lines += [
        "",
        "## Recommendation",
        "",
        f"**{rec.decision.value.upper()}** (confidence {rec.confidence}%)",
        "",
        rec.reasoning,
        "",
        f"_Generated {notes.generated_at.isoformat()}, "
        f"last modified {notes.last_modified.isoformat()}_",
        "",
    ]
    return "\n".join(lines)
