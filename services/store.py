# services/store.py
import logging
from typing import List, Optional

from models.product import Category, Product
from models.sale import Sale
from utils.money import round_money

logger = logging.getLogger("store.inventory")


class Store:
    # In-memory bookkeeping: owns the product list and the sale list.
    # Both lists keep insertion order; nothing is ever removed.

    def __init__(self):
        self._products: List[Product] = []
        self._sales: List[Sale] = []

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(self._products)

    def add_product(self, product: Product) -> None:
        # Codes are not required to be unique; lookups return the first match.
        if self.find_by_code(product.code) is not None:
            logger.warning(
                f"Duplicate product code {product.code} ({product.name}); "
                f"lookups keep returning the first product with this code"
            )
        self._products.append(product)
        logger.info(f"Product added: {product.code} {product.name} (stock {product.stock})")

    def record_sale(self, sale: Sale) -> bool:
        """
        Accept the sale if the product has enough stock: decrement stock and
        keep the sale. Otherwise leave everything untouched and return False.
        """
        product = sale.product
        if product.stock < sale.quantity:
            logger.warning(
                f"Sale rejected: {product.name} has {product.stock} in stock, "
                f"{sale.quantity} requested"
            )
            return False

        product.stock -= sale.quantity
        self._sales.append(sale)
        logger.info(
            f"Sale recorded: {product.name} x {sale.quantity} = {sale.total:.2f} "
            f"(stock left {product.stock})"
        )
        return True

    def list_by_category(self, category: Category) -> List[Product]:
        return [p for p in self._products if p.category == category]

    def list_by_max_price(self, max_price: float) -> List[Product]:
        return [p for p in self._products if p.discounted_price() <= max_price]

    def list_discounted(self) -> List[Product]:
        return [p for p in self._products if p.is_discounted()]

    def total_sales(self) -> float:
        return round_money(sum(s.total for s in self._sales))

    def sales_summary(self) -> List[Sale]:
        return list(self._sales)

    def find_by_code(self, code: int) -> Optional[Product]:
        for p in self._products:
            if p.code == code:
                return p
        return None
