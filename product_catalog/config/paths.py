import os

# product_catalog/config/paths.py

# CONFIG_DIR = .../product_catalog/config  → product_catalog  → project root
CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))      # .../product_catalog/config
PACKAGE_DIR = os.path.dirname(CONFIG_DIR)                    # .../product_catalog
PROJECT_ROOT = os.path.dirname(PACKAGE_DIR)                  # .../repo root

DATA_DIR = os.path.join(PROJECT_ROOT, "data")

CATALOG_PATH = os.environ.get(
    "PRODUCT_CATALOG_DATA_PATH",
    os.path.join(DATA_DIR, "products.json"),
)
