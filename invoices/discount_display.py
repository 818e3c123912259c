from invoices.invoice_service import InvoiceService
from line_items.line_item import DiscountType, ZERO, round2
from src.config import Config


def _finite_or_zero(value):
    return value if value.is_finite() else ZERO


def format_discount_display(item):
    """
    Discount cell text for an invoice row.

    Percentage discounts show the percentage with the currency amount
    underneath; fixed discounts show only the grouped amount.
    """
    values = InvoiceService.calculate_item_values(item)
    discount = round2(_finite_or_zero(values["discount"]))

    if values["discountType"] is DiscountType.PERCENT:
        percentage = round2(_finite_or_zero(values["form_updated_discount"]))
        return {
            "mainValue": f"{percentage:.2f}%",
            "secondaryValue": f"{discount:.2f} {Config.CURRENCY_SYMBOL}",
        }

    return {
        "mainValue": f"{discount:,.2f}",
        "secondaryValue": None,
    }
