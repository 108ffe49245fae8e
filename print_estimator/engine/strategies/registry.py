"""
Strategy registry — maps PricingStrategy variants to strategy classes,
and catalog entries to the variant that prices them.
"""

from typing import Optional

from .base import BaseStrategy
from .formula import FormulaStrategy
from .imposition import ImpositionStrategy
from ..config import EngineConfig, PricingStrategy
from ...schemas import CatalogEntry

STRATEGY_REGISTRY: dict[PricingStrategy, type] = {
    PricingStrategy.FORMULA: FormulaStrategy,
    PricingStrategy.MULTIPLIER: ImpositionStrategy,
}


def resolve_strategy(entry: CatalogEntry, config: EngineConfig) -> Optional[PricingStrategy]:
    """
    Which strategy prices this entry. None if its category is not priced automatically.
    Formula products win over imposition (custom magnets sit in an imposition category).
    """
    if config.formula_products.get(entry.category) == entry.code:
        return PricingStrategy.FORMULA
    if entry.category in config.imposition_categories:
        return PricingStrategy.MULTIPLIER
    return None


def get_strategy(strategy: PricingStrategy, config: EngineConfig) -> BaseStrategy:
    """Returns an instance of the strategy class for a variant, or raises ValueError."""
    if strategy not in STRATEGY_REGISTRY:
        raise ValueError(
            f"No strategy registered for: {strategy}. "
            f"Available: {list(STRATEGY_REGISTRY.keys())}"
        )
    return STRATEGY_REGISTRY[strategy](config)


def has_strategy(strategy: PricingStrategy) -> bool:
    """Check if a strategy class exists for a variant."""
    return strategy in STRATEGY_REGISTRY
