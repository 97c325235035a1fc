import json

import pytest

from product_catalog.data_access import loader
from product_catalog.utils.exceptions import DataLoadError


def write_catalog(tmp_path, data):
    path = tmp_path / "products.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def product_record(**overrides):
    record = {
        "id": 1,
        "name": "Samsung Galaxy S23",
        "category": "Electronics",
        "subcategory": "Mobile Phones",
        "price": 75000,
        "brand": "Samsung",
        "rating": 4.5,
        "inStock": True,
        "description": "Latest Samsung smartphone",
    }
    record.update(overrides)
    return record


def test_load_catalog_parses_document(tmp_path):
    path = write_catalog(tmp_path, {
        "products": [product_record()],
        "categories": ["All", "Electronics"],
        "subcategories": {"Electronics": ["Mobile Phones"]},
        "brands": ["Samsung"],
    })
    catalog = loader.load_catalog(path)

    assert catalog.categories == ["Electronics"]
    assert catalog.subcategories == {"Electronics": ["Mobile Phones"]}
    assert catalog.brands == ["Samsung"]
    product = catalog.products[0]
    assert product.product_id == "1"
    assert product.price == 75000.0
    assert product.in_stock is True


def test_optional_sections_default_to_empty(tmp_path):
    path = write_catalog(tmp_path, {"products": [product_record(description=None)]})
    catalog = loader.load_catalog(path)
    assert catalog.categories == []
    assert catalog.subcategories == {}
    assert catalog.brands == []


def test_missing_description_defaults_to_blank():
    record = product_record()
    del record["description"]
    assert loader.parse_product(record).description == ""


def test_missing_file_raises(tmp_path):
    with pytest.raises(DataLoadError):
        loader.load_catalog(str(tmp_path / "nope.json"))


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "products.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(DataLoadError):
        loader.load_catalog(str(path))


def test_document_without_products_raises(tmp_path):
    path = write_catalog(tmp_path, ["not", "an", "object"])
    with pytest.raises(DataLoadError):
        loader.load_catalog(path)


def test_incomplete_record_raises(tmp_path):
    record = product_record()
    del record["price"]
    path = write_catalog(tmp_path, {"products": [record]})
    with pytest.raises(DataLoadError, match="price"):
        loader.load_catalog(path)


def test_non_numeric_price_raises():
    with pytest.raises(DataLoadError):
        loader.parse_product(product_record(price="cheap"))


def test_bundled_catalog_loads():
    catalog = loader.load_catalog()
    assert catalog.products
    assert "All" not in catalog.categories
    assert len({p.product_id for p in catalog.products}) == len(catalog.products)
