"""
Imposition strategy — price = entry unit price × number of base sheets ("molds").

A job is a standard fit when both sides land on an integer multiple of the
base sheet (either orientation) within the fit tolerance. A4 on an A3 entry
is 2 molds, no cutting. Anything else is a custom cut and goes through the
layout optimizer.
"""

import math
from typing import Optional

from .base import BaseStrategy, round_half_up
from ..config import PricingStrategy
from ..layout import minimize_sheets
from ...schemas import CatalogEntry, PriceOutcome


class ImpositionStrategy(BaseStrategy):

    def price(self, entry: CatalogEntry, width_mm: float, height_mm: float,
              target_qty: int) -> Optional[PriceOutcome]:
        base = self.base_dims_for(entry)
        if base is None:
            return None

        quantity_ratio = target_qty / self.tier_count(entry)
        imposed = self.standard_fit_multiplier(width_mm, height_mm, base.width_mm, base.height_mm)

        if imposed is not None:
            multiplier = math.ceil(imposed * quantity_ratio)
        else:
            multiplier = minimize_sheets(
                width_mm, height_mm, base.width_mm, base.height_mm, quantity_ratio,
            )

        return PriceOutcome(
            price=entry.unit_price * multiplier,
            strategy=PricingStrategy.MULTIPLIER,
            needs_cut=imposed is None,
            multiplier=multiplier,
            quantity_ratio=quantity_ratio,
            base_dims=base,
        )

    def fits(self, requested: float, base: float) -> bool:
        """True if requested is within tolerance of an integer multiple of base."""
        ratio = requested / base
        return abs(ratio - round_half_up(ratio)) * base <= self.config.fit_tolerance_mm

    def standard_fit_multiplier(self, width_mm: float, height_mm: float,
                                base_w: float, base_h: float) -> Optional[int]:
        """
        Sheets per piece for a standard fit, or None for a custom cut.
        Request as-is is checked first, then rotated 90°.
        """
        for bw, bh in ((base_w, base_h), (base_h, base_w)):
            if self.fits(width_mm, bw) and self.fits(height_mm, bh):
                cols = max(1, round_half_up(width_mm / bw))
                rows = max(1, round_half_up(height_mm / bh))
                return cols * rows
        return None
