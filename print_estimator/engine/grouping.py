"""
Catalog grouper — partitions one category into paper-type groups.

A paper-type group is the same physical stock at different printed sizes or
quantity tiers. The paper type is the description up to the first hyphen:
"115 gr Kuşe - Çift Yön" → "115 gr Kuşe".
"""

from .config import EngineConfig
from ..schemas import CatalogEntry


def paper_type_name(description: str) -> str:
    """Description text before the first hyphen, trimmed."""
    return description.split("-", 1)[0].strip()


def group_entries(entries: list[CatalogEntry], category: str,
                  config: EngineConfig) -> dict[str, list[CatalogEntry]]:
    """
    Group the category's entries by paper type, in catalog order.

    Free-size categories (magnets) collapse their custom-size product into a
    single synthetic group; sheet entries in those categories are dropped.
    An unknown or empty category returns an empty dict.
    """
    groups: dict[str, list[CatalogEntry]] = {}
    formula_code = config.formula_products.get(category)

    for entry in entries:
        if entry.category != category:
            continue
        if formula_code is not None:
            if entry.code != formula_code:
                continue
            key = config.free_size_group_name
        else:
            key = paper_type_name(entry.description)
        groups.setdefault(key, []).append(entry)

    return groups
