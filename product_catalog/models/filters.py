from dataclasses import dataclass
from typing import Optional

SORT_NAME = "name"
SORT_PRICE_ASCENDING = "price-ascending"
SORT_PRICE_DESCENDING = "price-descending"
SORT_RATING_DESCENDING = "rating-descending"

SORT_LABELS = {
    SORT_NAME: "Name (A-Z)",
    SORT_PRICE_ASCENDING: "Price: Low to High",
    SORT_PRICE_DESCENDING: "Price: High to Low",
    SORT_RATING_DESCENDING: "Rating: High to Low",
}

DEFAULT_SORT = SORT_NAME

@dataclass(frozen=True)
class FilterOptions:
    """One complete snapshot of the user's filter and sort choices.

    Empty strings and ``None`` mean the dimension is inactive.
    """

    search: str = ""
    category: str = ""
    subcategory: str = ""
    brand: str = ""
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    min_rating: Optional[float] = None
    in_stock_only: bool = False
    sort_key: str = DEFAULT_SORT
