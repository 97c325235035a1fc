import logging
import os

LOG_LEVEL = os.environ.get("PRODUCT_CATALOG_LOG_LEVEL", "INFO").upper()

logger = logging.getLogger("product_catalog")
if not logger.handlers:
    logger.setLevel(LOG_LEVEL)
    ch = logging.StreamHandler()
    fmt = logging.Formatter("[%(asctime)s] [%(levelname)s] %(message)s")
    ch.setFormatter(fmt)
    logger.addHandler(ch)
