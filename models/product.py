# models/product.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from utils.money import format_money, round_money


class InvalidCategoryError(ValueError):
    pass


class Category(Enum):
    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"
    FOOD = "Food"
    ACCESSORIES = "Accessories"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Category":
        """
        Match free text against the category names or labels, ignoring case
        and surrounding spaces. Raises InvalidCategoryError if nothing matches.
        """
        key = (text or "").strip().upper()
        for category in cls:
            if key == category.name or key == category.value.upper():
                return category
        choices = ", ".join(c.name for c in cls)
        raise InvalidCategoryError(f"Unknown category '{text}'. Choose one of: {choices}")


# Product model representing a catalog entry in the store.
# Only stock changes after creation (through Store.record_sale).
@dataclass
class Product:
    name: str
    price: float
    category: Category
    stock: int
    code: int
    discount: float = 0.0
    description: Optional[str] = None

    def discounted_price(self) -> float:
        return round_money(self.price * (1.0 - self.discount))

    def is_discounted(self) -> bool:
        return self.discount > 0

    def describe(self) -> str:
        description = self.description if self.description is not None else "No description"
        return "\n".join([
            f"Product: {self.name}",
            f"Price: {format_money(self.discounted_price())}",
            f"Category: {self.category.label}",
            f"Stock: {self.stock}",
            f"Code: {self.code}",
            f"Description: {description}",
        ])
