"""
Search result processing components.

Turns raw provider responses into enriched, LLM-consumable result sets.
"""

from .result_enricher import ResultEnricher

__all__ = ["ResultEnricher"]
