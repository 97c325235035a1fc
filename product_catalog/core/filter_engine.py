from typing import Callable, Dict, List, Optional, Sequence, Tuple
import unicodedata

from product_catalog.models.filters import (
    FilterOptions,
    SORT_NAME,
    SORT_PRICE_DESCENDING,
    SORT_PRICE_ASCENDING,
    SORT_RATING_DESCENDING,
)
from product_catalog.models.product import Product
from product_catalog.utils.logger import logger

Predicate = Callable[[Product], bool]

# ---------- Individual filters ----------

def search_products(products: Sequence[Product], search_term: str) -> List[Product]:
    if not search_term:
        return list(products)
    term = search_term.lower()
    return [p for p in products if _matches_search(p, term)]

def filter_by_category(products: Sequence[Product], category: str) -> List[Product]:
    if not category:
        return list(products)
    return [p for p in products if p.category == category]

def filter_by_subcategory(products: Sequence[Product], subcategory: str) -> List[Product]:
    if not subcategory:
        return list(products)
    return [p for p in products if p.subcategory == subcategory]

def filter_by_brand(products: Sequence[Product], brand: str) -> List[Product]:
    if not brand:
        return list(products)
    return [p for p in products if p.brand == brand]

def filter_by_price_range(
    products: Sequence[Product],
    min_price: Optional[float],
    max_price: Optional[float],
) -> List[Product]:
    filtered = list(products)
    if min_price is not None:
        filtered = [p for p in filtered if p.price >= min_price]
    if max_price is not None:
        filtered = [p for p in filtered if p.price <= max_price]
    return filtered

def filter_by_rating(products: Sequence[Product], min_rating: Optional[float]) -> List[Product]:
    if min_rating is None:
        return list(products)
    return [p for p in products if p.rating >= min_rating]

def filter_by_stock(products: Sequence[Product], in_stock_only: bool) -> List[Product]:
    if not in_stock_only:
        return list(products)
    return [p for p in products if p.in_stock]

# ---------- Composed pipeline ----------

def _matches_search(product: Product, term: str) -> bool:
    return (
        term in product.name.lower()
        or term in product.description.lower()
        or term in product.brand.lower()
    )

def active_predicates(options: FilterOptions) -> List[Predicate]:
    """Predicates for the dimensions that are set; inactive ones are left out."""
    preds: List[Predicate] = []

    if options.search:
        term = options.search.lower()
        preds.append(lambda p: _matches_search(p, term))
    if options.category:
        preds.append(lambda p: p.category == options.category)
    if options.subcategory:
        preds.append(lambda p: p.subcategory == options.subcategory)
    if options.brand:
        preds.append(lambda p: p.brand == options.brand)
    if options.min_price is not None:
        preds.append(lambda p: p.price >= options.min_price)
    if options.max_price is not None:
        preds.append(lambda p: p.price <= options.max_price)
    if options.min_rating is not None:
        preds.append(lambda p: p.rating >= options.min_rating)
    if options.in_stock_only:
        preds.append(lambda p: p.in_stock)

    return preds

def filter_products(products: Sequence[Product], options: FilterOptions) -> List[Product]:
    preds = active_predicates(options)
    return [p for p in products if all(pred(p) for pred in preds)]

# ---------- Sorting ----------

def name_sort_key(name: str) -> Tuple[str, str]:
    # Accents and case are folded out of the primary key; the raw name only breaks ties.
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), name

# key function and reverse flag per sort key
SORTERS: Dict[str, Tuple[Callable[[Product], object], bool]] = {
    SORT_NAME: (lambda p: name_sort_key(p.name), False),
    SORT_PRICE_ASCENDING: (lambda p: p.price, False),
    SORT_PRICE_DESCENDING: (lambda p: p.price, True),
    SORT_RATING_DESCENDING: (lambda p: p.rating, True),
}

def sort_products(products: Sequence[Product], sort_key: str) -> List[Product]:
    """Return a sorted copy. Unknown keys keep the input order."""
    result = list(products)
    sorter = SORTERS.get(sort_key)
    if sorter is None:
        return result
    key, reverse = sorter
    # list.sort is stable with reverse=True too, so ties keep input order.
    result.sort(key=key, reverse=reverse)
    return result

def apply(products: Sequence[Product], options: FilterOptions) -> List[Product]:
    filtered = filter_products(products, options)
    ordered = sort_products(filtered, options.sort_key)
    logger.debug(f"Filter matched {len(ordered)} of {len(products)} products (sort={options.sort_key})")
    return ordered
