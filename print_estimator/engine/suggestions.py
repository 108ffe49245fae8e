"""
Suggestion engine — cheaper or more standard alternatives to the winning result.

Two independent searches, both read-only against the computed result:

1. Size snap: nudge the requested size (±10 mm) onto an integer multiple of
   one of the group's base sheets. 201×100 on a 200×100 sheet costs 2 molds
   as a custom cut; 200×100 costs 1.
2. Quantity tiers: the price one tier below and one tier above.
"""

import logging
from typing import Optional

from .config import EngineConfig
from .evaluator import PriceEvaluator
from .selector import select_best
from .strategies.base import round_half_up
from ..formatting import format_price, format_waste
from ..schemas import CatalogEntry, PrintJob, PriceOutcome, QuantitySuggestion, SizeSuggestion

logger = logging.getLogger(__name__)


class SuggestionEngine:

    def __init__(self, config: EngineConfig, evaluator: PriceEvaluator):
        self.config = config
        self.evaluator = evaluator

    # --- Size snap ---

    def suggest_size(self, entries: list[CatalogEntry], job: PrintJob,
                     current: PriceOutcome) -> Optional[SizeSuggestion]:
        """
        Best snapped size across every distinct size in the group, both orientations.

        Accepted when strictly cheaper than the current price, or the same price
        with a standard fit where the current result needed a custom cut.
        Free-size categories have no snap target and always return None.
        """
        if job.category in self.config.free_size_categories:
            return None

        best = None
        for size_label in self._distinct_sizes(entries):
            probe = self._probe_entry(entries, size_label, job.quantity)
            base = self.evaluator.base_dims_for(probe)
            if base is None:
                continue

            for bw, bh in ((base.width_mm, base.height_mm), (base.height_mm, base.width_mm)):
                snap = self._snap(job.width_mm, job.height_mm, bw, bh)
                if snap is None:
                    continue
                candidate = self._evaluate_snap(probe, job, snap, current)
                if candidate is not None and (best is None or candidate.price <= best.price):
                    best = candidate

        return best

    def _distinct_sizes(self, entries: list[CatalogEntry]) -> list[str]:
        sizes = []
        for entry in entries:
            if entry.size_label not in sizes:
                sizes.append(entry.size_label)
        return sizes

    def _probe_entry(self, entries: list[CatalogEntry], size_label: str,
                     quantity: int) -> CatalogEntry:
        """Entry of this size at the job's tier, else the default tier, else the first one."""
        same_size = [e for e in entries if e.size_label == size_label]
        for wanted in (quantity, self.config.default_tier):
            for entry in same_size:
                if entry.quantity_tier == wanted:
                    return entry
        return same_size[0]

    def _snap(self, width_mm: float, height_mm: float,
              base_w: float, base_h: float) -> Optional[tuple[float, float]]:
        """Nearest multiple of the base on each axis, if inside the snap window and actually different."""
        snap_w = max(1, round_half_up(width_mm / base_w)) * base_w
        snap_h = max(1, round_half_up(height_mm / base_h)) * base_h
        dw = abs(width_mm - snap_w)
        dh = abs(height_mm - snap_h)

        tolerance = self.config.snap_tolerance_mm
        if dw > tolerance or dh > tolerance:
            return None
        if dw < self.config.snap_min_delta_mm and dh < self.config.snap_min_delta_mm:
            return None
        return (snap_w, snap_h)

    def _evaluate_snap(self, probe: CatalogEntry, job: PrintJob, snap: tuple[float, float],
                       current: PriceOutcome) -> Optional[SizeSuggestion]:
        snap_w, snap_h = snap
        outcome = self.evaluator.evaluate(probe, snap_w, snap_h, job.quantity)
        if outcome is None:
            return None

        is_cheaper = outcome.price < current.price
        is_same_but_standard = (
            outcome.price == current.price and current.needs_cut and not outcome.needs_cut
        )
        if not (is_cheaper or is_same_but_standard):
            return None

        saving = current.price - outcome.price
        percent = round_half_up(saving / current.price * 100) if is_cheaper else 0

        waste_w = abs(job.width_mm - snap_w)
        waste_h = abs(job.height_mm - snap_h)
        waste_w = round_half_up(waste_w * 10) / 10 if waste_w >= self.config.waste_min_mm else None
        waste_h = round_half_up(waste_h * 10) / 10 if waste_h >= self.config.waste_min_mm else None

        logger.debug("Size snap %.1fx%.1f → %.1fx%.1f saves %.2f",
                     job.width_mm, job.height_mm, snap_w, snap_h, saving)
        return SizeSuggestion(
            width_mm=snap_w,
            height_mm=snap_h,
            price=outcome.price,
            formatted_price=format_price(outcome.price),
            saving_amount=saving,
            formatted_saving=format_price(saving),
            saving_percent=percent,
            is_same_price=is_same_but_standard,
            waste_width_mm=waste_w,
            waste_height_mm=waste_h,
            waste_label=format_waste(waste_w, waste_h),
        )

    # --- Quantity tiers ---

    def neighbor_tiers(self, quantity: int) -> tuple[Optional[int], Optional[int]]:
        """
        Previous and next tier around a quantity.
        Off-list quantities get the nearest tier below and above.
        """
        tiers = self.config.quantity_tiers
        if quantity in tiers:
            idx = tiers.index(quantity)
            prev_tier = tiers[idx - 1] if idx > 0 else None
            next_tier = tiers[idx + 1] if idx < len(tiers) - 1 else None
        else:
            below = [t for t in tiers if t < quantity]
            above = [t for t in tiers if t > quantity]
            prev_tier = max(below) if below else None
            next_tier = min(above) if above else None

        # Merchandising rule: 2000 → 4000, never 3000
        skip = self.config.tier_skip.get(quantity)
        if skip and next_tier == skip[0] and skip[1] in tiers:
            next_tier = skip[1]

        return prev_tier, next_tier

    def best_price_for_quantity(self, entries: list[CatalogEntry], job: PrintJob,
                                quantity: int) -> Optional[float]:
        """
        Cheapest price at another quantity. Candidates are the entries at that
        tier, else the default-tier entries, else the group's first entry.
        """
        candidates = [e for e in entries if e.quantity_tier == quantity]
        if not candidates:
            candidates = [e for e in entries if e.quantity_tier == self.config.default_tier]
        if not candidates:
            candidates = entries[:1]

        best = select_best(candidates, job.width_mm, job.height_mm, quantity, self.evaluator)
        return best[0].price if best else None

    def suggest_quantities(self, entries: list[CatalogEntry], job: PrintJob,
                           ) -> tuple[Optional[QuantitySuggestion], Optional[QuantitySuggestion]]:
        prev_tier, next_tier = self.neighbor_tiers(job.quantity)
        return (
            self._quantity_suggestion(entries, job, prev_tier),
            self._quantity_suggestion(entries, job, next_tier),
        )

    def _quantity_suggestion(self, entries: list[CatalogEntry], job: PrintJob,
                             quantity: Optional[int]) -> Optional[QuantitySuggestion]:
        if quantity is None:
            return None
        price = self.best_price_for_quantity(entries, job, quantity)
        if price is None:
            return None
        return QuantitySuggestion(quantity=quantity, price=price, formatted_price=format_price(price))
