"""
Pricing strategies — one per PricingStrategy variant.

Strategy is chosen from the entry's category (and product code),
never by inspecting the entry at runtime.
"""
