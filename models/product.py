"""
Product related data models
"""
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any

from core.constants import LOW_STOCK_THRESHOLD


@dataclass
class Product:
    """Product data model"""
    id: int
    name: str
    price: float
    stock: int = 0
    certifications: List[str] = field(default_factory=list)
    category: str = ""
    image: Optional[str] = None
    ingredients: List[str] = field(default_factory=list)
    description: str = ""
    usage: str = ""
    reviews: int = 0

    def __post_init__(self):
        if self.price < 0:
            raise ValueError(f"Product {self.id}: price cannot be negative")
        if self.stock < 0:
            raise ValueError(f"Product {self.id}: stock cannot be negative")

    def is_in_stock(self) -> bool:
        return self.stock > 0

    def is_low_stock(self) -> bool:
        return 0 < self.stock <= LOW_STOCK_THRESHOLD

    def has_certification(self, certification: str) -> bool:
        return certification in self.certifications

    def matches_search(self, search_term: str) -> bool:
        # Case-insensitive match on name, category or any ingredient
        term = search_term.lower()
        return (
            term in self.name.lower()
            or term in self.category.lower()
            or any(term in ingredient.lower() for ingredient in self.ingredients)
        )

    def matches_filters(self, filters: List[str]) -> bool:
        return all(self.has_certification(f) for f in filters)

    def reduce_stock(self, quantity: int):
        if self.stock >= quantity:
            self.stock -= quantity

    def increase_stock(self, quantity: int):
        self.stock += quantity

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "category": self.category,
            "image": self.image,
            "ingredients": list(self.ingredients),
            "certifications": list(self.certifications),
            "description": self.description,
            "usage": self.usage,
            "stock": self.stock,
            "reviews": self.reviews
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        """Build a product from a catalog record"""
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            price=data.get("price", 0),
            stock=data.get("stock") or 0,
            certifications=list(data.get("certifications") or []),
            category=data.get("category") or "",
            image=data.get("image"),
            ingredients=list(data.get("ingredients") or []),
            description=data.get("description") or "",
            usage=data.get("usage") or "",
            reviews=data.get("reviews") or 0
        )
