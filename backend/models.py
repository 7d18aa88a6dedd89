# backend/models.py

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utcnow():
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self):
        return self.model_dump(by_alias=True, mode="json")


# -------- Enums --------
class Stage(str, Enum):
    PRE_SEED = "Pre-Seed"
    SEED = "Seed"
    SERIES_A = "Series A"
    SERIES_B = "Series B"
    GROWTH = "Growth"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Recommendation(str, Enum):
    INVEST = "invest"
    WATCH = "watch"
    DECLINE = "decline"


# -------- Analysis --------
class AnalysisResult(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    overall_score: int
    financial_score: int
    market_score: int
    team_score: int
    technology_score: int
    risk_flags: List[str] = Field(default_factory=list)
    recommendation: Recommendation
    confidence: int
    key_insights: List[str] = Field(default_factory=list)

    @property
    def risk_level(self) -> RiskLevel:
        if len(self.risk_flags) > 1:
            return RiskLevel.HIGH
        if len(self.risk_flags) == 1:
            return RiskLevel.MEDIUM
        return RiskLevel.LOW


# -------- Startups --------
class StartupCreate(CamelModel):
    id: Optional[str] = None
    name: Optional[str] = None
    valuation: Optional[float] = Field(None, ge=0)
    stage: Optional[Stage] = None
    sector: Optional[str] = None
    founded_year: Optional[int] = None
    team_size: Optional[int] = Field(None, ge=0)
    revenue: Optional[float] = Field(None, ge=0)
    growth_rate: Optional[float] = None
    burn_rate: Optional[float] = Field(None, ge=0)
    runway: Optional[float] = Field(None, ge=0)
    uploaded_at: Optional[datetime] = None
    pitch_deck_url: Optional[str] = None
    financials_url: Optional[str] = None

    def with_defaults(self, now=None):
        now = now or utcnow()
        defaults = {
            "id": str(uuid.uuid4()),
            "name": "Unnamed Startup",
            "valuation": 0,
            "stage": Stage.SEED,
            "sector": "Technology",
            "founded_year": now.year,
            "team_size": 5,
            "revenue": 0,
            "growth_rate": 0,
            "burn_rate": 0,
            "runway": 12,
            "uploaded_at": now,
        }
        filled = {k: v for k, v in defaults.items() if getattr(self, k) in (None, "")}
        return self.model_copy(update=filled)


class StartupRecord(CamelModel):
    id: str
    name: str
    valuation: float = 0
    stage: Stage = Stage.SEED
    sector: str = "Technology"
    founded_year: int
    team_size: int = 0
    revenue: float = 0
    growth_rate: float = 0
    burn_rate: float = 0
    runway: float = 12
    ai_score: int
    risk_level: RiskLevel
    recommendation: Recommendation
    uploaded_at: datetime
    last_analyzed: datetime
    pitch_deck_url: Optional[str] = None
    financials_url: Optional[str] = None

    @classmethod
    def from_analysis(cls, payload: StartupCreate, analysis: AnalysisResult, now=None):
        now = now or utcnow()
        profile = payload.with_defaults(now)
        return cls(
            **profile.model_dump(),
            ai_score=analysis.overall_score,
            risk_level=analysis.risk_level,
            recommendation=analysis.recommendation,
            last_analyzed=now,
        )

    def with_analysis(self, analysis: AnalysisResult, now=None):
        return self.model_copy(update={
            "ai_score": analysis.overall_score,
            "risk_level": analysis.risk_level,
            "recommendation": analysis.recommendation,
            "last_analyzed": now or utcnow(),
        })


# -------- Scenarios --------
class ScenarioInput(CamelModel):
    name: str
    probability: float = Field(0, ge=0)
    growth_rate: float = 0
    valuation_multiple: float = 0
    burn_rate_change: float = 0


class SimulationRequest(CamelModel):
    scenarios: List[ScenarioInput]


class Projections(CamelModel):
    revenue: float
    valuation: float
    burn_rate: float
    # None: unbounded (zero burn) or undefined (zero valuation)
    runway: Optional[float] = None
    roi: Optional[float] = None


class ScenarioProjection(CamelModel):
    name: str
    probability: float
    projections: Projections


# -------- Deal notes --------
class KeyMetrics(CamelModel):
    valuation: float
    revenue: float
    growth_rate: float
    burn_rate: float
    runway: float
    team_size: int


class NotesRecommendation(CamelModel):
    decision: Recommendation
    confidence: int
    reasoning: str


class DealNotes(CamelModel):
    id: str
    startup_id: str
    title: str
    summary: str
    key_metrics: KeyMetrics
    strengths: List[str]
    risks: List[str]
    recommendation: NotesRecommendation
    generated_at: datetime
    last_modified: datetime


class NotesUpdate(CamelModel):
    summary: str = Field(..., min_length=1)


# -------- Uploads --------
class UploadRequest(CamelModel):
    file_name: str = Field(..., min_length=1)
    file_type: Optional[str] = None
    startup_id: Optional[str] = None


class UploadReceipt(CamelModel):
    file_url: str
    file_name: str
    uploaded_at: datetime
    file_type: Optional[str] = None
    page_count: Optional[int] = None
    text_preview: Optional[str] = None


# -------- Dashboard --------
class Overview(CamelModel):
    total_startups: int = 0
    avg_score: int = 0
    high_risk: int = 0
    invest_recommendations: int = 0


class Activity(CamelModel):
    id: str
    name: str
    action: str = "Analysis Updated"
    timestamp: datetime
    score: int = 0


class DashboardStats(CamelModel):
    overview: Overview = Field(default_factory=Overview)
    # sector names are keys, so they are not camel-cased
    sector_distribution: Dict[str, int] = Field(default_factory=dict)
    recent_activity: List[Activity] = Field(default_factory=list)


# -------- Benchmarks --------
class BenchmarkRow(CamelModel):
    metric: str
    startup: float
    sector_average: float
    top_quartile: float
    percent_of_top_quartile: Optional[int] = None


class BenchmarkReport(CamelModel):
    startup_id: str
    sector: str
    peer_count: int
    metrics: List[BenchmarkRow]
