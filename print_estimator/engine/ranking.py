"""
Ranker — cheapest first, with 115 gr brochures always on top.
"""

from .config import EngineConfig
from ..schemas import CalculationResult


def is_pinned(result: CalculationResult, config: EngineConfig) -> bool:
    return (
        result.matched_entry.category == config.priority_category
        and config.priority_marker in result.paper_type_name
    )


def rank_results(results: list[CalculationResult], config: EngineConfig) -> list[CalculationResult]:
    """Pinned results first, then ascending price. Stable for ties."""
    return sorted(results, key=lambda r: (not is_pinned(r, config), r.price))
