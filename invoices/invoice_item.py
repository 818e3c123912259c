import uuid
from line_items.line_item import DiscountType, ZERO, format_money, quiet_context, round2
from products.product import Product


def format_invoice_item(product_data):
    """
    Build an invoice line from a catalog product.
    Both pricing views start out equal; money fields are 2-decimal strings.
    """
    if not product_data:
        return None

    product = Product(product_data)
    selling_price = product.selling_price
    discount_type = product.discount_type
    discount_value = product.discount_value
    tax_rate = product.tax_rate

    with quiet_context():
        if discount_type is DiscountType.PERCENT:
            discount = round2(selling_price * discount_value / 100)
        else:
            discount = round2(discount_value)

        taxable_amount = selling_price - discount
        tax = taxable_amount * tax_rate / 100
        amount = taxable_amount + tax

    return {
        "productId": product.id,
        "name": product.name,
        "units": product.units.get("name"),
        "unit": product.units.get("_id"),
        "quantity": 1,
        "rate": selling_price,
        "discountType": discount_type,
        "discount": format_money(discount),
        "taxableAmount": format_money(taxable_amount),
        "tax": format_money(tax),
        "amount": format_money(amount),
        "taxInfo": product.tax,
        "isRateFormUpadted": False,
        "form_updated_discounttype": discount_type,
        "form_updated_discount": format_money(discount_value),
        "form_updated_rate": selling_price,
        "form_updated_tax": format_money(tax_rate),
    }


def format_new_sell_item():
    """Blank invoice row"""
    return {
        "productId": "",
        "name": "",
        "units": "",
        "quantity": 1,
        "rate": ZERO,
        "discount": ZERO,
        "discountType": DiscountType.PERCENT,
        "tax": ZERO,
        "taxInfo": {"_id": "", "name": "", "taxRate": 0},
        "amount": ZERO,
        "taxableAmount": ZERO,
        "key": uuid.uuid4().hex,
        "isRateFormUpadted": False,
        "form_updated_rate": "",
        "form_updated_discount": "",
        "form_updated_discounttype": "",
        "form_updated_tax": "",
    }
