"""
Price/layout computation engine.

Pure Python math. No I/O, no catalog loading, no rendering.
Given a parsed catalog and a print job (width, height, category, quantity),
produce a ranked list of CalculationResult models.
"""
