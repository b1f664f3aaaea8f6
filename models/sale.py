# models/sale.py
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from models.product import Product
from utils.money import format_money, line_total


# Sale model: a snapshot of one sale. The product is shared with the Store,
# the total is fixed at construction and never recomputed.
# Building a Sale does not touch stock; Store.record_sale decides that.
@dataclass(frozen=True, eq=False)
class Sale:
    product: Product
    quantity: int
    sold_on: Optional[date] = None
    total: float = field(init=False)

    def __post_init__(self):
        # frozen dataclass -> object.__setattr__ for derived fields
        if self.sold_on is None:
            object.__setattr__(self, "sold_on", date.today())
        object.__setattr__(
            self, "total", line_total(self.quantity, self.product.discounted_price())
        )

    @property
    def date_label(self) -> str:
        return self.sold_on.strftime("%d/%m/%Y")

    def describe(self) -> str:
        return "\n".join([
            f"Product sold: {self.product.name}",
            f"Quantity: {self.quantity}",
            f"Date: {self.date_label}",
            f"Total: {format_money(self.total)}",
        ])
