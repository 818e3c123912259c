import pytest
from src.main import create_app


@pytest.fixture
def app():
    app = create_app()
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def scenario_a_item():
    # invoice line, fixed discount, never edited
    return {
        "productId": "p-a",
        "quantity": 2,
        "form_updated_rate": 50,
        "discount": 10,
        "discountType": 3,
        "taxInfo": {"taxRate": 15},
        "isRateFormUpadted": False,
    }


@pytest.fixture
def scenario_b_item():
    # invoice line, edited to a 10% discount and 5% tax
    return {
        "productId": "p-b",
        "quantity": 1,
        "form_updated_rate": 200,
        "form_updated_discounttype": 2,
        "form_updated_discount": 10,
        "form_updated_tax": 5,
        "isRateFormUpadted": True,
    }
