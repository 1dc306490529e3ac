from chatwrapped.services.analysis.engine import AnalyticsEngine
from chatwrapped.services.analysis.runner import analyze, available_years, compare_years
from chatwrapped.services.analysis.vocabulary import DEFAULT_VOCABULARY, Vocabulary

__all__ = ["AnalyticsEngine", "DEFAULT_VOCABULARY", "Vocabulary", "analyze", "available_years", "compare_years"]
