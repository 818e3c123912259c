from decimal import Decimal

import pytest

from invoices.invoice_item import format_invoice_item
from line_items.item_editor import invoice_editor, purchase_editor
from line_items.line_item import DiscountType
from purchases.purchase_item import format_purchase_item


@pytest.fixture
def invoice_line():
    return format_invoice_item({
        "_id": "prod-7",
        "name": "Cable",
        "sellingPrice": 200,
        "purchasePrice": 150,
        "discountType": 3,
        "discountValue": 20,
        "tax": {"taxRate": 10},
    })


@pytest.fixture
def purchase_line():
    return format_purchase_item({
        "_id": "prod-7",
        "name": "Cable",
        "sellingPrice": 200,
        "purchasePrice": 150,
        "discountType": 3,
        "discountValue": 20,
        "tax": {"taxRate": 10},
    })


def test_switching_to_percent_reprices_the_line(invoice_line):
    values = invoice_editor.change_discount_type(invoice_line, 2)

    assert invoice_line["isRateFormUpadted"] is True
    assert invoice_line["discountType"] is DiscountType.PERCENT
    assert invoice_line["form_updated_discounttype"] is DiscountType.PERCENT
    assert values["discount"] == Decimal("40.00")
    assert invoice_line["discount"] == Decimal("40.00")
    assert invoice_line["tax"] == Decimal("16")
    assert invoice_line["amount"] == Decimal("176")


def test_changing_line_rate_derives_unit_rate(invoice_line):
    invoice_editor.change_quantity(invoice_line, 2)
    invoice_editor.change_rate(invoice_line, 300)

    assert invoice_line["form_updated_rate"] == Decimal("150.0000")
    assert invoice_line["form_updated_discount"] == Decimal("20.00")
    assert invoice_line["rate"] == Decimal("300.00")
    assert invoice_line["taxableAmount"] == Decimal("280.00")
    assert invoice_line["amount"] == Decimal("308")


def test_line_rate_with_zero_quantity_is_nan(invoice_line):
    invoice_editor.change_quantity(invoice_line, 0)
    invoice_editor.change_rate(invoice_line, 300)

    assert invoice_line["form_updated_rate"].is_nan()
    assert invoice_line["amount"].is_nan()


def test_negative_discount_clamps_to_zero(invoice_line):
    invoice_editor.change_discount(invoice_line, "-5")

    assert invoice_line["discount"] == 0
    assert invoice_line["form_updated_discount"] == 0
    assert invoice_line["amount"] == Decimal("220")


def test_changing_tax_uses_the_new_rate(invoice_line):
    invoice_editor.change_tax(invoice_line, {"_id": "t-5", "taxRate": 5})

    assert invoice_line["taxInfo"] == {"_id": "t-5", "taxRate": 5}
    assert invoice_line["form_updated_tax"] == Decimal("5")
    assert invoice_line["tax"] == Decimal("9")
    assert invoice_line["amount"] == Decimal("189")


def test_purchase_quantity_change_keeps_original_view(purchase_line):
    values = purchase_editor.change_quantity(purchase_line, 3)

    assert purchase_line["isRateFormUpadted"] is False
    assert values["rate"] == Decimal("450.00")
    # the stored line amount is not written back in purchase mode
    assert purchase_line["rate"] == Decimal("150")
    assert purchase_line["amount"] == Decimal("473")


def test_purchase_edit_switches_to_selling_price_seed(purchase_line):
    purchase_editor.change_discount(purchase_line, 0)

    assert purchase_line["isRateFormUpadted"] is True
    assert purchase_line["amount"] == Decimal("220")
