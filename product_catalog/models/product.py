from dataclasses import dataclass, field
from typing import Dict, List

@dataclass(frozen=True)
class Product:
    product_id: str
    name: str
    category: str
    subcategory: str
    brand: str
    price: float
    rating: float
    in_stock: bool
    description: str = ""

@dataclass
class CatalogData:
    """Everything read from the catalog document."""

    products: List[Product]
    categories: List[str] = field(default_factory=list)
    subcategories: Dict[str, List[str]] = field(default_factory=dict)
    brands: List[str] = field(default_factory=list)
