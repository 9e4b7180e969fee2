from .insight import (
    InsightGenerator,
    GeminiInsightGenerator,
    get_production_insight,
    RECENT_LOG_LIMIT,
)

__all__ = ["InsightGenerator", "GeminiInsightGenerator", "get_production_insight", "RECENT_LOG_LIMIT"]
