from line_items.line_item import DiscountType, LineItemRecord, ZERO, finite_or_nan, has_nan, quiet_context, round2
from line_items.totals import empty_round_off_totals, round_off_totals
from src.config import Config
from src.logger import get_logger

logger = get_logger("InvoiceService")


class InvoiceService:
    @staticmethod
    def _empty_item_values():
        return {
            "rate": ZERO,
            "baseRate": ZERO,
            "discount": ZERO,
            "form_updated_discount": ZERO,
            "discountType": DiscountType.FIXED,
            "tax": ZERO,
            "amount": ZERO,
            "taxableAmount": ZERO,
            "quantity": ZERO,
        }

    @staticmethod
    def calculate_item_values(item):
        """
        Price one invoice line.

        The unit rate always comes from form_updated_rate. Discount type,
        tax rate and discount follow the edited view only once the line
        has been edited (isRateFormUpadted); otherwise the stored discount
        is already an absolute amount and is used as-is.
        """
        if not item:
            return InvoiceService._empty_item_values()

        record = LineItemRecord(item)
        quantity = record.quantity
        base_rate = record.number("form_updated_rate")
        discount_type = record.discount_type(
            record.pick("form_updated_discounttype", "discountType")
        )
        tax_rate = record.number("form_updated_tax") if record.is_edited else record.tax_info_rate
        edited_discount = record.number("form_updated_discount")

        with quiet_context():
            rate = round2(quantity * base_rate)

            if not record.is_edited:
                discount = record.number("discount")
            elif discount_type is DiscountType.PERCENT:
                discount = round2(rate * edited_discount / 100)
            else:
                discount = edited_discount

            taxable_amount = finite_or_nan(rate - discount)
            tax = finite_or_nan(taxable_amount * tax_rate / 100)
            amount = finite_or_nan(taxable_amount + tax)

        if has_nan((rate, discount, tax)):
            logger.warning("Non-numeric input on invoice line %s; result is NaN", item.get("productId"))

        return {
            "rate": rate,
            "baseRate": base_rate,
            "discount": discount,
            "form_updated_discount": edited_discount,
            "discountType": discount_type,
            "tax": tax,
            "amount": amount,
            "taxableAmount": taxable_amount,
            "quantity": quantity,
        }

    @staticmethod
    def calculate_item_totals(items):
        """Sum priced invoice lines in order. Non-list input counts as empty."""
        totals = {
            "subTotal": ZERO,
            "totalDiscount": ZERO,
            "totalTax": ZERO,
            "total": ZERO,
            "taxableAmount": ZERO,
        }
        if not isinstance(items, list) or not items:
            return totals

        with quiet_context():
            for item in items:
                values = InvoiceService.calculate_item_values(item)
                totals["subTotal"] += values["rate"]
                totals["totalDiscount"] += values["discount"]
                totals["totalTax"] += values["tax"]
                totals["total"] += values["amount"]
                totals["taxableAmount"] += values["taxableAmount"]
        totals = {key: finite_or_nan(value) for key, value in totals.items()}

        logger.debug("Invoice item totals over %d lines: %s", len(items), totals["total"])
        return totals

    @staticmethod
    def calculate_invoice_totals(items, should_round_off=None):
        """
        Document summary for an invoice: pre-discount subtotal (reported as
        taxableAmount), total discount, vat and the grand total, optionally
        rounded to a whole currency unit with the delta in roundOffValue.
        """
        if should_round_off is None:
            should_round_off = Config.ROUND_OFF
        if not isinstance(items, list) or not items:
            return empty_round_off_totals()

        results = [InvoiceService.calculate_item_values(item) for item in items]
        summary = round_off_totals(results, should_round_off)
        logger.debug(
            "Invoice totals over %d lines: %s (round off %s)",
            len(items), summary["TotalAmount"], summary["roundOffValue"],
        )
        return summary
