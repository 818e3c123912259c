# purchases/purchase_service.py
from line_items.line_item import DiscountType, LineItemRecord, ZERO, finite_or_nan, has_nan, quiet_context, round2
from line_items.totals import empty_round_off_totals, round_off_totals
from src.config import Config
from src.logger import get_logger

logger = get_logger("PurchaseService")


class PurchaseService:
    @staticmethod
    def calculate_purchase_item_values(item):
        """
        Price one purchase line.

        Unit rate, discount type and discount value switch together on
        isRateFormUpadted: form_updated_* once edited, otherwise
        purchasePrice / discountType / discount. The tax rate always comes
        from taxInfo.
        """
        if not item:
            return {
                "rate": ZERO,
                "discount": ZERO,
                "discountType": DiscountType.FIXED,
                "tax": ZERO,
                "amount": ZERO,
                "taxableAmount": ZERO,
                "quantity": ZERO,
            }

        record = LineItemRecord(item)
        quantity = record.quantity
        unit_rate = record.number(record.pick("form_updated_rate", "purchasePrice"))
        discount_type = record.discount_type(
            record.pick("form_updated_discounttype", "discountType")
        )
        discount_value = record.number(record.pick("form_updated_discount", "discount"))
        tax_rate = record.tax_info_rate

        with quiet_context():
            rate = round2(quantity * unit_rate)

            if discount_type is DiscountType.PERCENT:
                discount = round2(rate * discount_value / 100)
            else:
                discount = discount_value

            taxable_amount = finite_or_nan(rate - discount)
            tax = finite_or_nan(taxable_amount * tax_rate / 100)
            amount = finite_or_nan(taxable_amount + tax)

        if has_nan((rate, discount, tax)):
            logger.warning("Non-numeric input on purchase line %s; result is NaN", item.get("productId"))

        return {
            "rate": rate,
            "discount": discount,
            "discountType": discount_type,
            "tax": tax,
            "amount": amount,
            "taxableAmount": taxable_amount,
            "quantity": quantity,
        }

    @staticmethod
    def calculate_purchase_item_totals(items):
        """
        Sum priced purchase lines in order. Tax is reported as vat.
        """
        totals = {
            "subTotal": ZERO,
            "totalDiscount": ZERO,
            "vat": ZERO,
            "total": ZERO,
            "taxableAmount": ZERO,
        }
        if not isinstance(items, list) or not items:
            return totals

        with quiet_context():
            for item in items:
                values = PurchaseService.calculate_purchase_item_values(item)
                totals["subTotal"] += values["rate"]
                totals["totalDiscount"] += values["discount"]
                totals["vat"] += values["tax"]
                totals["total"] += values["amount"]
                totals["taxableAmount"] += values["taxableAmount"]
        totals = {key: finite_or_nan(value) for key, value in totals.items()}

        logger.debug("Purchase item totals over %d lines: %s", len(items), totals["total"])
        return totals

    @staticmethod
    def calculate_purchase_totals(items, should_round_off=None):
        """Document summary for a purchase, same shape as the invoice summary"""
        if should_round_off is None:
            should_round_off = Config.ROUND_OFF
        if not isinstance(items, list) or not items:
            return empty_round_off_totals()

        results = [PurchaseService.calculate_purchase_item_values(item) for item in items]
        summary = round_off_totals(results, should_round_off)
        logger.debug(
            "Purchase totals over %d lines: %s (round off %s)",
            len(items), summary["TotalAmount"], summary["roundOffValue"],
        )
        return summary
