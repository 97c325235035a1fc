import importlib
import json
import os

import pytest

from product_catalog.config import paths
from product_catalog.data_access import loader


@pytest.fixture
def reload_paths(monkeypatch):
    yield
    monkeypatch.undo()
    importlib.reload(paths)


def test_default_catalog_path(monkeypatch, reload_paths):
    monkeypatch.delenv("PRODUCT_CATALOG_DATA_PATH", raising=False)
    importlib.reload(paths)
    assert paths.CATALOG_PATH == os.path.join(paths.DATA_DIR, "products.json")


def test_catalog_path_env_override(tmp_path, monkeypatch, reload_paths):
    catalog_file = tmp_path / "custom.json"
    catalog_file.write_text(json.dumps({"products": [], "categories": ["All", "Toys"]}), encoding="utf-8")
    monkeypatch.setenv("PRODUCT_CATALOG_DATA_PATH", str(catalog_file))
    importlib.reload(paths)

    assert paths.CATALOG_PATH == str(catalog_file)
    catalog = loader.load_catalog()
    assert catalog.products == []
    assert catalog.categories == ["Toys"]
