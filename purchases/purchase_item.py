import uuid
from line_items.line_item import DiscountType, ZERO, format_money, quiet_context, round2
from products.product import Product


def format_purchase_item(product_data):
    """
    Build a purchase line from a catalog product, priced at its purchase price.

    form_updated_rate is seeded from the selling price, not the purchase
    price; the purchase engine only reads it once the line is edited.
    """
    if not product_data:
        return None

    product = Product(product_data)
    purchase_price = product.purchase_price
    discount_type = product.discount_type
    discount_value = product.discount_value
    tax_rate = product.tax_rate

    with quiet_context():
        if discount_type is DiscountType.PERCENT:
            discount_amount = round2(purchase_price * discount_value / 100)
        else:
            discount_amount = round2(discount_value)

        taxable_amount = purchase_price - discount_amount
        tax = taxable_amount * tax_rate / 100
        amount = taxable_amount + tax

    return {
        "productId": product.id,
        "name": product.name,
        "units": product.units.get("name"),
        "unit": product.units.get("_id"),
        "quantity": 1,
        "purchasePrice": purchase_price,
        "rate": purchase_price,
        "discountType": discount_type,
        "discount": format_money(discount_value),
        "taxableAmount": format_money(taxable_amount),
        "amount": format_money(amount),
        "taxInfo": product.tax,
        "tax": format_money(tax),
        "isRateFormUpadted": False,
        "form_updated_discounttype": discount_type,
        "form_updated_discount": format_money(discount_value),
        "form_updated_rate": product.selling_price,
        "form_updated_tax": format_money(tax_rate),
    }


def format_new_buy_item():
    """Blank purchase row"""
    return {
        "productId": "",
        "name": "",
        "units": "",
        "quantity": 1,
        "purchasePrice": ZERO,
        "rate": ZERO,
        "discount": ZERO,
        "discountType": DiscountType.FIXED,
        "tax": ZERO,
        "taxInfo": {"_id": "", "name": "", "taxRate": 0},
        "amount": ZERO,
        "taxableAmount": ZERO,
        "key": uuid.uuid4().hex,
        "isRateFormUpadted": False,
        "form_updated_rate": ZERO,
        "form_updated_discount": ZERO,
        "form_updated_discounttype": DiscountType.FIXED,
        "form_updated_tax": ZERO,
    }
