"""
Engine configuration — every constant the pricing engine depends on.

One immutable EngineConfig is built at startup and handed to the engine.
Category names match the catalog data (Turkish print-shop price list).
"""

import enum
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, field_validator


class PricingStrategy(str, enum.Enum):
    FORMULA = "formula"          # area × rate, custom-size products
    MULTIPLIER = "multiplier"    # imposition on a priced base sheet


# Catalog category names
BUSINESS_CARD = "Kartvizit"
BROCHURE = "Broşür"
FLYER = "El İlanı"
LABEL = "Etiket"
MAGNET = "Magnet"
COATED_200 = "200 Gr. Kuşe"

MAGNET_PRODUCT_CODE = "MGN"


class EngineConfig(BaseModel):
    """Immutable engine configuration. Defaults reproduce the shop's price rules."""

    # Supported order quantities, ascending
    quantity_tiers: tuple[int, ...] = (1000, 2000, 3000, 4000, 5000, 6000, 8000, 10000, 12000, 20000)
    default_tier: int = 1000

    # Categories priced by imposing the job on a base sheet
    imposition_categories: frozenset[str] = frozenset({
        BUSINESS_CARD, BROCHURE, FLYER, LABEL, MAGNET, COATED_200,
    })
    # Fixed base sheet (mm), overrides the entry's size label
    fixed_base_dims: Mapping[str, tuple[float, float]] = {
        BUSINESS_CARD: (86.0, 54.0),
        LABEL: (86.0, 54.0),
    }
    # category → product code priced by area formula
    formula_products: Mapping[str, str] = {MAGNET: MAGNET_PRODUCT_CODE}
    magnet_unit_rate: float = 0.21
    free_size_group_name: str = "Özel Ebat Magnet"

    # Tolerances (mm)
    fit_tolerance_mm: float = 0.5       # 201 vs 200 is already a custom cut
    snap_tolerance_mm: float = 10.0
    snap_min_delta_mm: float = 0.5
    waste_min_mm: float = 0.1

    # current tier → (computed next tier, replacement)
    tier_skip: Mapping[int, tuple[int, int]] = {2000: (3000, 4000)}

    # Results pinned to the top of the list
    priority_category: str = BROCHURE
    priority_marker: str = "115"

    # Category listing
    excluded_category_keywords: tuple[str, ...] = (
        "zarf", "bloknot", "dosya", "oto paspas",
        "amerikan servis", "karton çanta", "antetli", "afiş",
    )
    category_order: tuple[str, ...] = (
        BROCHURE, BUSINESS_CARD, MAGNET, FLYER, LABEL, COATED_200,
    )

    # Request bounds; larger inputs are rejected as invalid
    max_dimension_mm: float = 10000.0
    max_quantity_factor: int = 10       # × largest tier

    class Config:
        frozen = True
        validate_default = True

    @field_validator("fixed_base_dims", "formula_products", "tier_skip")
    @classmethod
    def read_only_mapping(cls, value):
        return MappingProxyType(dict(value))

    @property
    def max_quantity(self) -> int:
        return max(self.quantity_tiers) * self.max_quantity_factor

    @classmethod
    def from_settings(cls, settings) -> "EngineConfig":
        """Build the engine config, applying process-level overrides."""
        return cls(magnet_unit_rate=settings.MAGNET_UNIT_RATE)

    @property
    def free_size_categories(self) -> frozenset[str]:
        """Categories sized freely by the customer; no snap target exists."""
        return frozenset(self.formula_products)
