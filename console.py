# console.py
import logging

import config
from models.product import Category, InvalidCategoryError, Product
from models.sale import Sale
from services.report_service import ReportService
from services.store import Store
from utils.money import format_money

logger = logging.getLogger("store.console")

MENU = """
=== MENU ===
1. Add product
2. List products by category
3. List products by maximum price
4. List discounted products
5. Record sale
6. Show total sales
7. Show sales summary
8. Exit"""

CATEGORY_PROMPT = "Category (" + ", ".join(c.name for c in Category) + "): "


class EndOfInput(Exception):
    pass


class StoreConsole:
    # Text menu on top of a Store. input_fn / output_fn are swappable so the
    # loop can be driven by scripted input in tests.

    def __init__(self, store: Store, reports: ReportService | None = None,
                 input_fn=input, output_fn=print,
                 low_stock_threshold: int | None = None):
        self.store = store
        self.reports = reports or ReportService(store)
        self.input_fn = input_fn
        self.output_fn = output_fn
        if low_stock_threshold is None:
            low_stock_threshold = config.LOW_STOCK_THRESHOLD
        self.low_stock_threshold = low_stock_threshold

        self.actions = {
            1: self.menu_add_product,
            2: self.menu_list_by_category,
            3: self.menu_list_by_max_price,
            4: self.menu_list_discounted,
            5: self.menu_record_sale,
            6: self.menu_total_sales,
            7: self.menu_sales_summary,
        }

    def run(self):
        while True:
            try:
                self.output_fn(MENU)
                choice = self.read_int("Choose an option: ", default=-1)
                if choice == 8:
                    self.output_fn("Exiting...")
                    return
                action = self.actions.get(choice)
                if action is None:
                    self.output_fn("Invalid option. Try again.")
                    continue
                action()
            except EndOfInput:
                logger.info("Console: input closed, leaving menu")
                self.output_fn("Exiting...")
                return

    # Input helpers
    def read_line(self, prompt: str) -> str:
        try:
            return self.input_fn(prompt)
        except EOFError:
            raise EndOfInput()

    def read_int(self, prompt: str, default: int = 0) -> int:
        # non-numeric input becomes the default, no retry
        try:
            return int(self.read_line(prompt).strip())
        except ValueError:
            return default

    def read_float(self, prompt: str, low: float | None = None, high: float | None = None) -> float:
        # non-numeric input becomes -1.0; with a range, ask again until inside it
        while True:
            try:
                value = float(self.read_line(prompt).strip())
            except ValueError:
                value = -1.0
            if low is None or high is None or low <= value <= high:
                return value

    def read_category(self) -> Category:
        while True:
            try:
                return Category.parse(self.read_line(CATEGORY_PROMPT))
            except InvalidCategoryError as e:
                self.output_fn(str(e))

    def read_product(self) -> Product:
        name = self.read_line("Product name: ")
        price = self.read_float("Price: ")
        category = self.read_category()
        stock = self.read_int("Stock: ")
        code = self.read_int("Code: ")
        discount = self.read_float("Discount (between 0.0 and 1.0): ", 0.0, 1.0)
        description = self.read_line("Description (leave empty for none): ").strip()
        return Product(
            name=name,
            price=price,
            category=category,
            stock=stock,
            code=code,
            discount=discount,
            description=description or None,
        )

    # Output helpers
    def show_products(self, products):
        if not products:
            self.output_fn("No products found.")
            return
        for p in products:
            self.output_fn(p.describe())
            self.output_fn("")

    def show_sales(self, sales):
        if not sales:
            self.output_fn("No sales recorded.")
            return
        for s in sales:
            self.output_fn(s.describe())
            self.output_fn("")

    # Menu actions
    def menu_add_product(self):
        product = self.read_product()
        self.store.add_product(product)
        self.output_fn(f"Product '{product.name}' added successfully!")

    def menu_list_by_category(self):
        category = self.read_category()
        self.show_products(self.store.list_by_category(category))

    def menu_list_by_max_price(self):
        max_price = self.read_float("Maximum price: ")
        self.show_products(self.store.list_by_max_price(max_price))

    def menu_list_discounted(self):
        self.show_products(self.store.list_discounted())

    def menu_record_sale(self):
        code = self.read_int("Product code: ")
        product = self.store.find_by_code(code)
        if product is None:
            self.output_fn("Product not found.")
            return

        quantity = self.read_int("Quantity to sell: ")
        sale = Sale(product, quantity)
        if not self.store.record_sale(sale):
            self.output_fn("Insufficient stock for this sale.")
            return

        self.output_fn("Sale recorded successfully!")
        for code, name, stock in self.reports.low_stock(self.low_stock_threshold):
            if code == product.code:
                self.output_fn(f"Low stock: {name} has {stock} left.")
                break

    def menu_total_sales(self):
        self.output_fn(f"Total sales: {format_money(self.store.total_sales())}")

    def menu_sales_summary(self):
        sales = self.store.sales_summary()
        self.show_sales(sales)
        if not sales:
            return
        report = self.reports.sales_report()
        self.output_fn(f"Units sold: {report['units_sold']}")
        self.output_fn("Top sellers:")
        for name, units in report["top5"]:
            self.output_fn(f"  {name}: {units}")
