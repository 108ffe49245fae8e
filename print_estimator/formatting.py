"""
Display helpers — currency and waste labels.

Formatting carries no business logic. Prices are already computed;
these only turn numbers into the strings the storefront shows.
"""

CURRENCY_SYMBOL = "₺"


def format_price(amount: float) -> str:
    """Turkish lira, zero decimals, '.' as thousands separator: 1250.4 → '₺1.250'."""
    sign = "-" if amount < 0 else ""
    grouped = f"{abs(amount):,.0f}".replace(",", ".")
    return f"{sign}{CURRENCY_SYMBOL}{grouped}"


def _trim(value: float) -> str:
    """One decimal max, trailing zeros stripped: 4.0 → '4', 2.46 → '2.5'."""
    return f"{value:.1f}".rstrip("0").rstrip(".")


def format_waste(waste_w, waste_h) -> str:
    """
    Waste label for a size snap. Either axis may be None (below threshold).
    Returns '' when neither axis carries waste.
    """
    if waste_w is not None and waste_h is not None:
        return f"{_trim(waste_w)}x{_trim(waste_h)} mm"
    if waste_w is not None:
        return f"{_trim(waste_w)} mm"
    if waste_h is not None:
        return f"{_trim(waste_h)} mm"
    return ""
