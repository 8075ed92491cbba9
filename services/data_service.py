"""
Data service - loads the static storefront data file
"""
import json
import logging
from typing import Any, Dict, List, Optional

from models.product import Product

log = logging.getLogger(__name__)


class DataService:
    # Reads products, blog posts and discount codes once and caches them

    def __init__(self, data_path: str):
        self.data_path = data_path
        self._cache: Optional[Dict[str, Any]] = None

    def load_data(self) -> Dict[str, Any]:
        # Parse the data file; any read or parse problem yields empty collections
        if self._cache is not None:
            return self._cache

        try:
            with open(self.data_path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            self._cache = {
                "products": [Product.from_dict(p) for p in raw.get("products", [])],
                "blog_posts": raw.get("blogPosts") or [],
                "discount_codes": raw.get("discountCodes") or []
            }
            log.info("Loaded %d products from %s", len(self._cache["products"]), self.data_path)
        except (OSError, ValueError, KeyError, TypeError) as e:
            log.warning("Could not load data from %s: %s", self.data_path, e)
            self._cache = self.get_fallback_data()

        return self._cache

    def get_products(self) -> List[Product]:
        return self.load_data()["products"]

    def get_blog_posts(self) -> List[Dict[str, Any]]:
        return self.load_data()["blog_posts"]

    def get_discount_codes(self) -> List[Dict[str, Any]]:
        return self.load_data()["discount_codes"]

    def get_fallback_data(self) -> Dict[str, Any]:
        return {"products": [], "blog_posts": [], "discount_codes": []}

    def clear_cache(self):
        self._cache = None

    def reload(self) -> Dict[str, Any]:
        self.clear_cache()
        return self.load_data()
