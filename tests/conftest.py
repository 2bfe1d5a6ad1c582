from decimal import Decimal

import pytest

from app import create_app
from models import db, FixedCosts
from services import InventoryStore, build_saved_recipe
from tests.factories import CHEESE, EGGS, FLOUR, MILK, make_ingredient, make_line


@pytest.fixture
def inventory():
    # per base unit: flour 1.2/g, milk 0.9/ml, eggs 60/u, cheese 10/g
    return InventoryStore([
        make_ingredient(FLOUR, 'Harina 0000', '1200', '1', 'kg'),
        make_ingredient(MILK, 'Leche', '900', '1', 'l'),
        make_ingredient(EGGS, 'Huevos', '1800', '30', 'u'),
        make_ingredient(CHEESE, 'Queso', '5000', '500', 'g'),
    ])


@pytest.fixture
def pancake_lines():
    # 300 + 450 + 120 = 870
    return (
        make_line(10, FLOUR, '250', 'g'),
        make_line(11, MILK, '500', 'ml'),
        make_line(12, EGGS, '2', 'u'),
    )


@pytest.fixture
def fixed_costs():
    return FixedCosts(packaging=Decimal('50'), cutlery=Decimal('20'), extras=Decimal('10'))


@pytest.fixture
def pancakes(inventory, pancake_lines, fixed_costs):
    return build_saved_recipe('Panqueques', pancake_lines, fixed_costs, Decimal('1500'), inventory,
                              recipe_id=100)


@pytest.fixture
def omelette(inventory):
    # 3 eggs (180) + 50 g cheese (500) = 680
    lines = (make_line(20, EGGS, '3', 'u'), make_line(21, CHEESE, '50', 'g'))
    return build_saved_recipe('Omelette', lines, FixedCosts(), Decimal('1000'), inventory, recipe_id=200)


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()
