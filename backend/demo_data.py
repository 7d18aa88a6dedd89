# backend/demo_data.py

# Seeded into an empty store when SEED_DEMO_DATA is on.
DEMO_STARTUPS = [
    {
        "name": "TechNova",
        "valuation": 4_500_000,
        "stage": "Seed",
        "sector": "Technology",
        "revenue": 2_100_000,
        "growthRate": 120,
        "teamSize": 25,
        "burnRate": 200_000,
        "runway": 18,
        "foundedYear": 2022,
    },
    {
        "name": "HealthLink",
        "valuation": 8_200_000,
        "stage": "Series A",
        "sector": "Healthcare",
        "revenue": 3_800_000,
        "growthRate": 95,
        "teamSize": 42,
        "burnRate": 350_000,
        "runway": 14,
        "foundedYear": 2021,
    },
    {
        "name": "FinanceFlow",
        "valuation": 12_000_000,
        "stage": "Series A",
        "sector": "Fintech",
        "revenue": 5_200_000,
        "growthRate": 85,
        "teamSize": 38,
        "burnRate": 420_000,
        "runway": 22,
        "foundedYear": 2020,
    },
    {
        "name": "EcoSustain",
        "valuation": 2_800_000,
        "stage": "Pre-Seed",
        "sector": "Clean Tech",
        "revenue": 800_000,
        "growthRate": 180,
        "teamSize": 15,
        "burnRate": 120_000,
        "runway": 16,
        "foundedYear": 2023,
    },
    {
        "name": "DataPulse",
        "valuation": 6_700_000,
        "stage": "Seed",
        "sector": "AI/ML",
        "revenue": 1_900_000,
        "growthRate": 140,
        "teamSize": 32,
        "burnRate": 290_000,
        "runway": 12,
        "foundedYear": 2022,
    },
]


# Served by the client when the backend cannot be reached.
FALLBACK_STARTUPS = [
    {
        "id": "startup-1",
        "name": "TechNova",
        "valuation": 4_500_000,
        "stage": "Seed",
        "sector": "Technology",
        "foundedYear": 2022,
        "teamSize": 25,
        "revenue": 2_100_000,
        "growthRate": 120,
        "burnRate": 200_000,
        "runway": 18,
        "aiScore": 78,
        "riskLevel": "medium",
        "recommendation": "invest",
    },
    {
        "id": "startup-2",
        "name": "HealthLink",
        "valuation": 8_200_000,
        "stage": "Series A",
        "sector": "Healthcare",
        "foundedYear": 2021,
        "teamSize": 42,
        "revenue": 3_800_000,
        "growthRate": 95,
        "burnRate": 350_000,
        "runway": 14,
        "aiScore": 82,
        "riskLevel": "low",
        "recommendation": "invest",
    },
    {
        "id": "startup-3",
        "name": "FinanceFlow",
        "valuation": 12_000_000,
        "stage": "Series A",
        "sector": "Fintech",
        "foundedYear": 2020,
        "teamSize": 38,
        "revenue": 5_200_000,
        "growthRate": 85,
        "burnRate": 420_000,
        "runway": 22,
        "aiScore": 76,
        "riskLevel": "medium",
        "recommendation": "watch",
    },
]

FALLBACK_STATS = {
    "overview": {
        "totalStartups": 3,
        "avgScore": 78,
        "highRisk": 1,
        "investRecommendations": 2,
    },
    "sectorDistribution": {
        "Technology": 1,
        "Healthcare": 1,
        "Fintech": 1,
    },
    "recentActivity": [
        {"id": "startup-1", "name": "TechNova", "action": "Analysis Updated", "score": 78},
        {"id": "startup-2", "name": "HealthLink", "action": "Analysis Updated", "score": 82},
    ],
}
