"""
Product service - catalog queries over the loaded products
"""
from typing import Dict, List, Any, Optional
from difflib import SequenceMatcher

from models.product import Product


class ProductService:
    # Read-only catalog with the search term and certification filters of the home view

    def __init__(self, products: List[Product]):
        # Products come from DataService; ids are unique
        self.products = list(products)
        self._by_id = {product.id: product for product in self.products}
        self.search_term = ""
        self.active_filters: List[str] = []

    def similarity(self, a: str, b: str) -> float:
        # Similarity score between two strings (0.0 to 1.0)
        return SequenceMatcher(None, a.lower(), b.lower()).ratio()

    def find_by_id(self, product_id: int) -> Optional[Product]:
        return self._by_id.get(product_id)

    def get_stock(self, product_id: int) -> Optional[int]:
        # Live stock for the checkout validator; None for unknown products
        product = self.find_by_id(product_id)
        return product.stock if product else None

    def get_products(self) -> List[Product]:
        return list(self.products)

    def get_by_category(self, category: str) -> List[Product]:
        return [p for p in self.products if p.category.lower() == category.lower()]

    def search(self, term: str) -> List[Product]:
        if not term.strip():
            return self.get_products()
        return [p for p in self.products if p.matches_search(term.strip())]

    def find_product(self, query: str, limit: int = 5) -> Dict[str, Any]:
        # Fuzzy lookup by name for free-text input, best matches first
        matches = []
        for product in self.products:
            score = max(self.similarity(query, product.name), 1.0 if product.matches_search(query) else 0.0)
            if score > 0.3:
                matches.append((score, product))

        matches.sort(key=lambda pair: pair[0], reverse=True)
        matches = matches[:limit]

        return {
            "success": True,
            "matches": [dict(product.to_dict(), match_score=round(score, 2)) for score, product in matches],
            "total_found": len(matches)
        }

    def set_search_term(self, term: str):
        self.search_term = term

    def toggle_filter(self, certification: str) -> bool:
        # Returns True when the filter is now active
        if certification in self.active_filters:
            self.active_filters.remove(certification)
            return False
        self.active_filters.append(certification)
        return True

    def clear_filters(self):
        self.active_filters = []
        self.search_term = ""

    def get_filtered_products(self) -> List[Product]:
        return [p for p in self.search(self.search_term) if p.matches_filters(self.active_filters)]

    def get_certifications(self) -> List[str]:
        return sorted({c for p in self.products for c in p.certifications})
