import math
from typing import List

MAX_STARS = 5

FULL = "full"
HALF = "half"
EMPTY = "empty"

GLYPHS = {FULL: "★", HALF: "⯪", EMPTY: "☆"}

def rating_stars(rating: float) -> List[str]:
    """Five star slots for ``rating``.

    Any non-zero fractional part earns a half star, so 4.1 and 4.9 both
    render as four full stars and one half star.
    """
    rating = min(max(rating, 0.0), float(MAX_STARS))
    full = math.floor(rating)
    half = 1 if rating % 1 != 0 else 0
    return [FULL] * full + [HALF] * half + [EMPTY] * (MAX_STARS - full - half)

def render_stars(rating: float) -> str:
    return "".join(GLYPHS[s] for s in rating_stars(rating))
