# services/report_service.py
from collections import Counter

from utils.money import round_money

# ReportService builds read-only reports on top of the Store:
# sales statistics and low stock alerts.
class ReportService:
    def __init__(self, store):
        self.store = store

    def sales_report(self) -> dict:
        # Use Counter to track how many units of each product code have been sold;
        # most_common(5) retrieves the top 5 best-selling items.
        sales = self.store.sales_summary()
        revenue = sum(s.total for s in sales)
        counter = Counter()
        names = {}
        for s in sales:
            counter[s.product.code] += s.quantity
            names.setdefault(s.product.code, s.product.name)
        return {
            "revenue": round_money(revenue),
            "units_sold": sum(counter.values()),
            "top5": [(names[code], units) for code, units in counter.most_common(5)],
        }

    def low_stock(self, threshold: int = 5) -> list[tuple[int, str, int]]:
        # Alert for products with low stock.
        return [(p.code, p.name, p.stock) for p in self.store.products if p.stock <= threshold]
