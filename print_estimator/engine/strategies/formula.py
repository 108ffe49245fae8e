"""
Formula strategy — custom-size magnets priced by area.

price = width_mm × height_mm × unit_rate × (quantity / 1000)

There is no base sheet, so a custom cut is always required.
"""

from typing import Optional

from .base import BaseStrategy
from ..config import PricingStrategy
from ...schemas import CatalogEntry, PriceOutcome


class FormulaStrategy(BaseStrategy):

    PER_QUANTITY = 1000  # unit rate is quoted per 1000 pieces

    def price(self, entry: CatalogEntry, width_mm: float, height_mm: float,
              target_qty: int) -> Optional[PriceOutcome]:
        base_price = width_mm * height_mm * self.config.magnet_unit_rate
        total = base_price * (target_qty / self.PER_QUANTITY)
        return PriceOutcome(
            price=total,
            strategy=PricingStrategy.FORMULA,
            needs_cut=True,
        )
