import json
from typing import Any, Dict, List, Optional
from product_catalog.config import paths
from product_catalog.models.product import CatalogData, Product
from product_catalog.utils.exceptions import DataLoadError
from product_catalog.utils.logger import logger

ALL_CATEGORIES_SENTINEL = "All"

REQUIRED_FIELDS = ("id", "name", "category", "subcategory", "brand", "price", "rating", "inStock")

def _load_json(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        logger.error(f"File not found: {path}")
        raise DataLoadError(f"File not found: {path}") from e
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}")
        raise DataLoadError(f"Invalid JSON in {path}") from e

def parse_product(item: Dict[str, Any]) -> Product:
    """Build a Product from one camelCase record of the catalog document."""
    missing = [k for k in REQUIRED_FIELDS if k not in item]
    if missing:
        raise DataLoadError(f"Product record {item.get('id', '?')} is missing {', '.join(missing)}")
    try:
        price = float(item["price"])
        rating = float(item["rating"])
    except (TypeError, ValueError) as e:
        raise DataLoadError(f"Product {item['id']} has a non-numeric price or rating") from e
    return Product(
        product_id=str(item["id"]),
        name=item["name"],
        category=item["category"],
        subcategory=item["subcategory"],
        brand=item["brand"],
        price=price,
        rating=rating,
        in_stock=bool(item["inStock"]),
        description=item.get("description") or "",
    )

def parse_catalog(raw: Any) -> CatalogData:
    if not isinstance(raw, dict) or "products" not in raw:
        raise DataLoadError("Catalog document must be an object with a 'products' list")

    products = [parse_product(item) for item in raw["products"]]
    categories: List[str] = [c for c in raw.get("categories", []) if c != ALL_CATEGORIES_SENTINEL]
    subcategories: Dict[str, List[str]] = {
        cat: list(names) for cat, names in raw.get("subcategories", {}).items()
    }
    brands: List[str] = list(raw.get("brands", []))
    return CatalogData(
        products=products,
        categories=categories,
        subcategories=subcategories,
        brands=brands,
    )

def load_catalog(path: Optional[str] = None) -> CatalogData:
    path = path or paths.CATALOG_PATH
    raw = _load_json(path)
    try:
        catalog = parse_catalog(raw)
    except DataLoadError as e:
        logger.error(f"Malformed catalog in {path}: {e}")
        raise
    logger.info(f"Loaded {len(catalog.products)} products from {path}")
    return catalog
