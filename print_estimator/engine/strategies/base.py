"""
Abstract base class for all pricing strategies.

Input: one CatalogEntry + requested width/height (mm) + target quantity
Output: PriceOutcome, or None when the entry cannot be priced this way
"""

import math
from abc import ABC, abstractmethod
from typing import Optional

from ..config import EngineConfig
from ...schemas import BaseDims, CatalogEntry, PriceOutcome


def round_half_up(value: float) -> int:
    """Half-up rounding (2.5 → 3). Python's round() would give 2."""
    return math.floor(value + 0.5)


class BaseStrategy(ABC):
    """All pricing strategies inherit from this."""

    def __init__(self, config: EngineConfig):
        self.config = config

    @abstractmethod
    def price(self, entry: CatalogEntry, width_mm: float, height_mm: float,
              target_qty: int) -> Optional[PriceOutcome]:
        """Returns the price outcome for this entry, or None if it cannot be priced."""
        pass

    # --- Helper methods for all strategies ---

    def base_dims_for(self, entry: CatalogEntry) -> Optional[BaseDims]:
        """
        Press-sheet size the entry is priced against.
        Business cards and labels use a fixed sheet; everything else
        comes from the entry's size label (cm → mm).
        """
        fixed = self.config.fixed_base_dims.get(entry.category)
        if fixed:
            return BaseDims(width_mm=fixed[0], height_mm=fixed[1])
        if entry.size_cm:
            w_cm, h_cm = entry.size_cm
            return BaseDims(width_mm=w_cm * 10, height_mm=h_cm * 10)
        return None

    def tier_count(self, entry: CatalogEntry) -> int:
        """Quantity the entry's price covers. Unparseable tiers count as the default tier."""
        return entry.quantity_tier or self.config.default_tier
