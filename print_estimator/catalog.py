"""
Catalog boundary — turns the shop's string-typed price list into CatalogEntry models.

Rows come from the price-list extraction step (or a hand-maintained JSON file)
with every field as free text:
    {"kategori": "Broşür", "ebat": "9.5x20 cm", "kod": "1CA7",
     "aciklama": "115 gr Kuşe - Tek Yön", "miktar": "1.000 Adet", "fiyat": "550 ₺"}

Numbers are parsed here once. The engine never sees a price or size string.
"""

import json
import logging
import math
import re
from typing import Optional

from .engine.config import EngineConfig
from .schemas import CatalogEntry

logger = logging.getLogger(__name__)

# Original price-list keys → CatalogEntry raw fields
RAW_FIELD_ALIASES = {
    "kategori": "category",
    "ebat": "size_label",
    "kod": "code",
    "aciklama": "description",
    "miktar": "quantity_label",
    "fiyat": "price_label",
}

_SIZE_RE = re.compile(r"^([\d.]+)[x*]([\d.]+)")


class CatalogError(ValueError):
    """Raised when a catalog file or row cannot be turned into entries."""


def parse_price(value) -> Optional[float]:
    """
    Parse a Turkish-formatted currency label: '1.250,50 ₺' → 1250.5.
    '.' is always a thousands separator, ',' the decimal mark.
    Returns None when the label has no digits.
    """
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)
    cleaned = str(value).replace(".", "")
    cleaned = re.sub(r"[^\d,]", "", cleaned).replace(",", ".", 1).replace(",", "")
    if not cleaned or cleaned == ".":
        return None
    try:
        return float(cleaned)
    except ValueError:
        return None


def parse_quantity(value) -> Optional[int]:
    """All digits of a quantity label: '1.000 Adet' → 1000. None without digits."""
    if value is None:
        return None
    digits = re.sub(r"[^\d]", "", str(value))
    if not digits:
        return None
    return int(digits)


def parse_size_label(value) -> Optional[tuple[float, float]]:
    """
    Parse '<w> x <h> cm' into (w, h) centimetres. Accepts '*' as separator
    and ',' as decimal mark. Descriptive labels ('Özel Ebat') return None.
    """
    if not value:
        return None
    clean = re.sub(r"\s", "", str(value).lower()).replace("cm", "").replace(",", ".")
    match = _SIZE_RE.match(clean)
    if not match:
        return None
    try:
        w, h = float(match.group(1)), float(match.group(2))
    except ValueError:
        return None
    if not (math.isfinite(w) and math.isfinite(h)) or w <= 0 or h <= 0:
        return None
    return (w, h)


def entry_from_raw(row: dict) -> CatalogEntry:
    """
    Build a CatalogEntry from a raw row (original or English keys).
    Raises CatalogError when the row has no category or no parseable price.
    """
    fields = {}
    for key, value in row.items():
        name = RAW_FIELD_ALIASES.get(key, key)
        if name in RAW_FIELD_ALIASES.values():
            fields[name] = "" if value is None else str(value).strip()

    category = fields.get("category", "")
    if not category:
        raise CatalogError(f"Catalog row has no category: {row!r}")

    price = parse_price(fields.get("price_label"))
    if price is None or price < 0:
        raise CatalogError(f"Unparseable price {fields.get('price_label')!r} for {category}")

    return CatalogEntry(
        category=category,
        size_label=fields.get("size_label", ""),
        code=fields.get("code", ""),
        description=fields.get("description", ""),
        quantity_label=fields.get("quantity_label", ""),
        price_label=fields.get("price_label", ""),
        quantity_tier=parse_quantity(fields.get("quantity_label")),
        unit_price=price,
        size_cm=parse_size_label(fields.get("size_label")),
    )


def entries_from_rows(rows: list) -> list[CatalogEntry]:
    """Parse rows, skipping the ones that cannot be priced."""
    entries = []
    for row in rows:
        try:
            entries.append(entry_from_raw(row))
        except CatalogError as e:
            logger.warning("Skipping catalog row: %s", e)
    return entries


def load_catalog(path: str) -> list[CatalogEntry]:
    """
    Load a JSON catalog (array of row objects) from disk.
    Raises CatalogError if the file is missing or not a JSON array.
    """
    try:
        with open(path, encoding="utf-8") as f:
            rows = json.load(f)
    except FileNotFoundError:
        raise CatalogError(f"Catalog file not found: {path}")
    except json.JSONDecodeError as e:
        raise CatalogError(f"Catalog file is not valid JSON: {path} ({e})")

    if not isinstance(rows, list):
        raise CatalogError(f"Catalog file must contain a JSON array: {path}")

    entries = entries_from_rows(rows)
    logger.info("Loaded %d catalog entries from %s", len(entries), path)
    return entries


def _fold(text: str) -> str:
    """Turkish-aware lower-casing: 'İ' → 'i', 'I' → 'ı'."""
    return text.replace("İ", "i").replace("I", "ı").lower()


def calculable_categories(entries: list[CatalogEntry], config: EngineConfig) -> list[str]:
    """
    Distinct categories the calculator offers, minus envelopes, notepads,
    posters and the other made-to-order groups. Shop order first, then alphabetical.
    """
    seen = []
    for entry in entries:
        cat = entry.category
        if cat in seen:
            continue
        folded = _fold(cat.strip())
        if any(keyword in folded for keyword in config.excluded_category_keywords):
            continue
        seen.append(cat)

    order = {name: i for i, name in enumerate(config.category_order)}
    return sorted(seen, key=lambda c: (order.get(c, len(order)), _fold(c)))
