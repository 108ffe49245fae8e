"""
Best-candidate selector — cheapest entry within a paper-type group.

Every entry is tried, not just the one matching the requested quantity:
fitting 2000 pieces 2-up on a 1000-sheet entry can beat the 2000 entry.
"""

from typing import Optional

from .evaluator import PriceEvaluator
from ..schemas import CatalogEntry, PriceOutcome


def select_best(entries: list[CatalogEntry], width_mm: float, height_mm: float,
                quantity: int, evaluator: PriceEvaluator,
                ) -> Optional[tuple[PriceOutcome, CatalogEntry]]:
    """
    Lowest-price (outcome, entry) pair, or None if no entry can be priced.
    On equal prices the earlier entry is kept.
    """
    best = None
    for entry in entries:
        outcome = evaluator.evaluate(entry, width_mm, height_mm, quantity)
        if outcome is None:
            continue
        if best is None or outcome.price < best[0].price:
            best = (outcome, entry)
    return best
