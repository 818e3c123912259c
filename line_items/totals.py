from decimal import Decimal
from line_items.line_item import ZERO, finite_or_nan, quantize, quiet_context

WHOLE_UNIT = Decimal("1")


def empty_round_off_totals():
    return {
        "taxableAmount": ZERO,
        "totalDiscount": ZERO,
        "vat": ZERO,
        "TotalAmount": ZERO,
        "roundOffValue": ZERO,
    }


def round_to_whole(value):
    """Nearest whole currency unit, halves away from zero"""
    return quantize(value, WHOLE_UNIT)


def round_off_totals(results, should_round_off):
    """
    Fold priced line results (in order) into the document summary shared by
    invoices and purchases.

    The summary's ``taxableAmount`` key carries the pre-discount subtotal
    (sum of line rates), not the sum of per-line taxable amounts.
    """
    pre_discount_subtotal = ZERO
    total_discount = ZERO
    vat = ZERO

    with quiet_context():
        for result in results:
            pre_discount_subtotal += result["rate"]
            total_discount += result["discount"]
            vat += result["tax"]

        total_amount = pre_discount_subtotal - total_discount + vat

        if should_round_off:
            rounded = round_to_whole(total_amount)
            round_off_value = rounded - total_amount
            total_amount = rounded
        else:
            round_off_value = ZERO

    summary = {
        "taxableAmount": pre_discount_subtotal,
        "totalDiscount": total_discount,
        "vat": vat,
        "TotalAmount": total_amount,
        "roundOffValue": round_off_value,
    }
    return {key: finite_or_nan(value) for key, value in summary.items()}
