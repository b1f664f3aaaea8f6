from services.report_service import ReportService
from models.sale import Sale


def test_empty_report(store):
    report = ReportService(store).sales_report()
    assert report == {"revenue": 0, "units_sold": 0, "top5": []}


def test_sales_report(store, mouse, shirt, apple, sale_day):
    store.record_sale(Sale(mouse, 2, sale_day))
    store.record_sale(Sale(apple, 10, sale_day))
    store.record_sale(Sale(mouse, 1, sale_day))
    store.record_sale(Sale(shirt, 9, sale_day))  # rejected

    report = ReportService(store).sales_report()
    assert report["revenue"] == store.total_sales()
    assert report["units_sold"] == 13
    assert report["top5"] == [("Apple", 10), ("Mouse", 3)]


def test_low_stock(store, mouse, sale_day):
    reports = ReportService(store)
    assert reports.low_stock(threshold=5) == [(2, "Shirt", 3)]

    store.record_sale(Sale(mouse, 6, sale_day))
    assert reports.low_stock(threshold=5) == [(1, "Mouse", 4), (2, "Shirt", 3)]


def test_top_sellers_keyed_by_code(store, sale_day):
    from models.product import Category, Product
    budget = Product("Mouse", 20.0, Category.ELECTRONICS, 10, 9, 0.0)
    store.add_product(budget)
    mouse = store.find_by_code(1)
    store.record_sale(Sale(mouse, 2, sale_day))
    store.record_sale(Sale(budget, 3, sale_day))

    report = ReportService(store).sales_report()
    assert report["top5"] == [("Mouse", 3), ("Mouse", 2)]
    assert report["units_sold"] == 5


def test_revenue_matches_store_total(store, apple, sale_day):
    store.record_sale(Sale(apple, 3, sale_day))
    store.record_sale(Sale(apple, 7, sale_day))
    assert ReportService(store).sales_report()["revenue"] == store.total_sales()
