import pytest

from product_catalog.models.product import CatalogData, Product


@pytest.fixture
def sample_products():
    return [
        Product("1", "Samsung Galaxy S23", "Electronics", "Mobile Phones", "Samsung",
                75000, 4.5, True, "Latest Samsung smartphone"),
        Product("2", "Nike Air Max", "Fashion", "Shoes", "Nike",
                8500, 4.3, True, "Comfortable running shoes"),
        Product("3", "MacBook Pro M3", "Electronics", "Laptops", "Apple",
                185000, 4.8, False, "High-performance laptop"),
        Product("4", "Adidas T-Shirt", "Fashion", "Clothing", "Adidas",
                1200, 4.0, True, "Cotton sports t-shirt"),
    ]


@pytest.fixture
def sample_catalog(sample_products):
    return CatalogData(
        products=sample_products,
        categories=["Electronics", "Fashion", "Books"],
        subcategories={"Electronics": ["Mobile Phones", "Laptops", "Tablets"]},
        brands=[],
    )
