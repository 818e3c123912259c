from decimal import Decimal

import pytest

from invoices.invoice_item import format_invoice_item, format_new_sell_item
from invoices.invoice_service import InvoiceService
from line_items.line_item import DiscountType
from purchases.purchase_item import format_new_buy_item, format_purchase_item
from purchases.purchase_service import PurchaseService


@pytest.fixture
def product():
    return {
        "_id": "prod-1",
        "name": "Steel Bolt",
        "units": {"_id": "u-1", "name": "Box"},
        "sellingPrice": 200,
        "purchasePrice": 120,
        "discountType": 2,
        "discountValue": 10,
        "tax": {"_id": "t-1", "name": "GST 18", "taxRate": 18},
    }


def test_invoice_item_from_percent_product(product):
    item = format_invoice_item(product)

    assert item["productId"] == "prod-1"
    assert item["units"] == "Box"
    assert item["unit"] == "u-1"
    assert item["quantity"] == 1
    assert item["rate"] == Decimal("200")
    assert item["form_updated_rate"] == Decimal("200")
    assert item["discountType"] is DiscountType.PERCENT
    assert item["form_updated_discounttype"] is DiscountType.PERCENT
    assert item["discount"] == "20.00"
    assert item["form_updated_discount"] == "10.00"
    assert item["taxableAmount"] == "180.00"
    assert item["tax"] == "32.40"
    assert item["amount"] == "212.40"
    assert item["form_updated_tax"] == "18.00"
    assert item["isRateFormUpadted"] is False


def test_invoice_item_fixed_discount_is_rounded(product):
    product["discountType"] = 3
    product["discountValue"] = "12.345"

    item = format_invoice_item(product)
    assert item["discount"] == "12.35"
    assert item["discountType"] is DiscountType.FIXED


def test_invoice_item_prices_the_same_through_the_engine(product):
    item = format_invoice_item(product)
    values = InvoiceService.calculate_item_values(item)

    assert values["amount"] == Decimal(item["amount"])
    # editing the line without changing anything keeps the price
    item["isRateFormUpadted"] = True
    assert InvoiceService.calculate_item_values(item)["amount"] == Decimal(item["amount"])


@pytest.mark.parametrize("empty", [None, {}])
def test_formatters_return_none_for_missing_product(empty):
    assert format_invoice_item(empty) is None
    assert format_purchase_item(empty) is None


def test_purchase_item_defaults_to_fixed_discount(product):
    product["discountType"] = None
    product["discountValue"] = 5
    product["tax"] = {"taxRate": 10}

    item = format_purchase_item(product)
    assert item["discountType"] is DiscountType.FIXED
    assert item["purchasePrice"] == Decimal("120")
    assert item["rate"] == Decimal("120")
    assert item["discount"] == "5.00"
    assert item["form_updated_discount"] == "5.00"
    assert item["taxableAmount"] == "115.00"
    assert item["tax"] == "11.50"
    assert item["amount"] == "126.50"


def test_purchase_item_seeds_working_rate_from_selling_price(product):
    item = format_purchase_item(product)

    assert item["rate"] == Decimal("120")
    assert item["form_updated_rate"] == Decimal("200")

    assert PurchaseService.calculate_purchase_item_values(item)["rate"] == Decimal("120.00")
    item["isRateFormUpadted"] = True
    assert PurchaseService.calculate_purchase_item_values(item)["rate"] == Decimal("200.00")


def test_purchase_item_percent_product_matches_engine(product):
    item = format_purchase_item(product)

    assert item["discount"] == "10.00"
    assert item["taxableAmount"] == "108.00"
    values = PurchaseService.calculate_purchase_item_values(item)
    assert values["amount"] == Decimal(item["amount"])


def test_blank_rows():
    sell_row = format_new_sell_item()
    buy_row = format_new_buy_item()

    assert sell_row["quantity"] == buy_row["quantity"] == 1
    assert sell_row["discountType"] is DiscountType.PERCENT
    assert buy_row["discountType"] is DiscountType.FIXED
    assert sell_row["isRateFormUpadted"] is False
    assert format_new_sell_item()["key"] != sell_row["key"]
    assert InvoiceService.calculate_item_values(sell_row)["amount"] == 0
    assert PurchaseService.calculate_purchase_item_values(buy_row)["amount"] == 0
