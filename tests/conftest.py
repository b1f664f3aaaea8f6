"""
Shared fixtures: a few catalog entries and a seeded Store.
"""
from datetime import date

import pytest

from models.product import Category, Product
from services.store import Store


@pytest.fixture
def mouse():
    return Product(
        name="Mouse",
        price=100.00,
        category=Category.ELECTRONICS,
        stock=10,
        code=1,
        discount=0.10,
    )


@pytest.fixture
def shirt():
    return Product(
        name="Shirt",
        price=40.00,
        category=Category.CLOTHING,
        stock=3,
        code=2,
        discount=0.0,
        description="Cotton, size M",
    )


@pytest.fixture
def apple():
    return Product(name="Apple", price=1.50, category=Category.FOOD, stock=200, code=3, discount=0.25)


@pytest.fixture
def store(mouse, shirt, apple):
    s = Store()
    s.add_product(mouse)
    s.add_product(shirt)
    s.add_product(apple)
    return s


@pytest.fixture
def sale_day():
    return date(2024, 3, 9)
