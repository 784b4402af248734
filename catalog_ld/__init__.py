"""
Storefront catalog to schema.org JSON-LD.

Exports:
- Product: dataclass representing a scraped product
- SiteConfig: selectors, brand record and timing for one storefront
- build_catalog: high-level function to scrape and write the JSON-LD artifacts
"""

from .types import Product
from .config import SiteConfig
from .cli import build_catalog, scrape_catalog

__all__ = ["Product", "SiteConfig", "build_catalog", "scrape_catalog"]
