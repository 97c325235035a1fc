from dataclasses import dataclass, replace
from typing import List, Optional
import matplotlib.pyplot as plt
import networkx as nx

from product_catalog.models.filters import FilterOptions
from product_catalog.models.product import CatalogData, Product
from product_catalog.data_access.loader import load_catalog
from product_catalog.core import filter_engine
from product_catalog.core.taxonomy import build_taxonomy, list_brands, list_categories, list_subcategories
from product_catalog.core.visualize import visualize_category
from product_catalog.pipelines.presentation import count_label

@dataclass
class ResultView:
    products: List[Product]
    total: int

    @property
    def count_text(self) -> str:
        return count_label(len(self.products), self.total)

class AppService:
    """High-level service used by the Streamlit app."""

    def __init__(self, catalog: Optional[CatalogData] = None) -> None:
        self.catalog: CatalogData = catalog if catalog is not None else load_catalog()
        self.taxonomy: nx.DiGraph = build_taxonomy(self.catalog)

    @property
    def products(self) -> List[Product]:
        return self.catalog.products

    def categories(self) -> List[str]:
        return self.catalog.categories or list_categories(self.taxonomy)

    def subcategories(self, category: str) -> List[str]:
        if not category:
            return []
        declared = self.catalog.subcategories.get(category)
        if declared:
            return list(declared)
        return list_subcategories(self.taxonomy, category)

    def brands(self) -> List[str]:
        return self.catalog.brands or list_brands(self.taxonomy)

    def with_category(self, options: FilterOptions, category: str) -> FilterOptions:
        return replace(options, category=category, subcategory="")

    def clear_filters(self) -> FilterOptions:
        return FilterOptions()

    def get_results(self, options: FilterOptions) -> ResultView:
        return ResultView(
            products=filter_engine.apply(self.products, options),
            total=len(self.products),
        )

    def build_visualization(self, category: str) -> Optional[plt.Figure]:
        return visualize_category(self.taxonomy, category)
