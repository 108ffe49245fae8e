"""
Layout optimizer — fewest base sheets for a batch of custom-size pieces.

Scaling "sheets per piece × pieces" overcounts: two pieces that each waste
half a sheet can share one. Instead, arrange the pieces into an r × c
super-tile and count how many base sheets cover it.

Only regular row × column tilings are searched. This is not a 2D
cutting-stock solver; irregular mixed arrangements are never considered.
"""

import math


def factor_pairs(n: int) -> list[tuple[int, int]]:
    """All (r, c) with r × c == n and r <= √n. 12 → [(1, 12), (2, 6), (3, 4)]."""
    pairs = []
    r = 1
    while r * r <= n:
        if n % r == 0:
            pairs.append((r, n // r))
        r += 1
    return pairs


def sheets_to_cover(tile_w: float, tile_h: float, base_w: float, base_h: float) -> int:
    """Base sheets needed to cover a tile without rotating the sheet."""
    return math.ceil(tile_w / base_w) * math.ceil(tile_h / base_h)


def minimize_sheets(piece_w: float, piece_h: float,
                    base_w: float, base_h: float, piece_count: float) -> int:
    """
    Minimum base-sheet multiplier over every regular tiling of piece_count pieces.

    piece_count may be fractional (a quantity ratio); it is rounded up.
    Each factor pair is tried as r rows × c columns and transposed, each
    against the sheet as-is and rotated. Always returns >= 1.
    """
    if piece_w <= 0 or piece_h <= 0 or base_w <= 0 or base_h <= 0:
        raise ValueError(
            f"Dimensions must be positive: piece {piece_w}x{piece_h}, base {base_w}x{base_h}"
        )

    n = max(1, math.ceil(piece_count))
    best = None

    for r, c in factor_pairs(n):
        for tile_w, tile_h in ((piece_w * c, piece_h * r), (piece_w * r, piece_h * c)):
            sheets = min(
                sheets_to_cover(tile_w, tile_h, base_w, base_h),
                sheets_to_cover(tile_w, tile_h, base_h, base_w),
            )
            if best is None or sheets < best:
                best = sheets

    return best
