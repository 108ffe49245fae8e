"""
Price evaluator — prices one catalog entry for a requested size and quantity.

Dispatches to the strategy registered for the entry's category. Returns None
for entries the engine does not price, or cannot price without arithmetic
overflow (caller skips them).
"""

import logging
from typing import Optional

from .config import EngineConfig, PricingStrategy
from .strategies.base import BaseStrategy
from .strategies.registry import get_strategy, resolve_strategy, STRATEGY_REGISTRY
from ..schemas import BaseDims, CatalogEntry, PriceOutcome

logger = logging.getLogger(__name__)


class PriceEvaluator:
    """Stateless after construction. One instance serves every request."""

    def __init__(self, config: EngineConfig):
        self.config = config
        self._strategies: dict[PricingStrategy, BaseStrategy] = {
            variant: get_strategy(variant, config) for variant in STRATEGY_REGISTRY
        }

    def evaluate(self, entry: CatalogEntry, width_mm: float, height_mm: float,
                 target_qty: int) -> Optional[PriceOutcome]:
        variant = resolve_strategy(entry, self.config)
        if variant is None:
            logger.debug("No pricing strategy for category %r", entry.category)
            return None

        try:
            outcome = self._strategies[variant].price(entry, width_mm, height_mm, target_qty)
        except (OverflowError, ValueError) as e:
            logger.debug("Entry %r (%s) skipped: %s", entry.code, entry.size_label, e)
            return None
        if outcome is None:
            logger.debug("Entry %r (%s) could not be priced: no base size",
                         entry.code, entry.size_label)
        return outcome

    def base_dims_for(self, entry: CatalogEntry) -> Optional[BaseDims]:
        """Base sheet for an entry, as the imposition strategy sees it."""
        return self._strategies[PricingStrategy.MULTIPLIER].base_dims_for(entry)
