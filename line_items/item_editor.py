from decimal import Decimal
from invoices.invoice_service import InvoiceService
from line_items.line_item import DiscountType, ZERO, divide, parse_tax_info, quantize, to_decimal
from purchases.purchase_service import PurchaseService

UNIT_RATE_PLACES = Decimal("0.0001")


class LineItemEditor:
    """
    Applies a user edit to a line item in place, marks the line as edited
    and writes the re-priced fields back onto it.
    """

    def __init__(self, calculate, write_back):
        self.calculate = calculate
        self.write_back = write_back

    def refresh(self, item):
        values = self.calculate(item)
        for key in self.write_back:
            item[key] = values[key]
        return values

    def change_quantity(self, item, quantity):
        item["quantity"] = to_decimal(quantity)
        return self.refresh(item)

    def change_rate(self, item, line_rate):
        """line_rate is the line amount; the unit rate is derived from quantity"""
        rate = to_decimal(line_rate)
        unit_rate = divide(rate, to_decimal(item.get("quantity")))
        unit_rate = quantize(unit_rate, UNIT_RATE_PLACES)

        discount_type = DiscountType.of(item.get("discountType"))
        item["rate"] = rate
        item["form_updated_rate"] = unit_rate
        item["form_updated_discounttype"] = discount_type
        # A stored percentage line keeps its working percentage
        if discount_type is DiscountType.FIXED:
            item["form_updated_discount"] = to_decimal(item.get("discount"))
        item["isRateFormUpadted"] = True
        return self.refresh(item)

    def change_discount(self, item, value):
        discount = to_decimal(value)
        if not discount.is_nan() and discount < 0:
            discount = ZERO

        item["discount"] = discount
        item["form_updated_discount"] = discount
        item["isRateFormUpadted"] = True
        return self.refresh(item)

    def change_discount_type(self, item, discount_type):
        discount_type = DiscountType.of(discount_type)
        item["discountType"] = discount_type
        item["form_updated_discounttype"] = discount_type
        item["isRateFormUpadted"] = True
        return self.refresh(item)

    def change_tax(self, item, tax_info):
        tax_info = parse_tax_info(tax_info) or {}
        item["taxInfo"] = tax_info
        item["form_updated_tax"] = to_decimal(tax_info.get("taxRate"))
        item["isRateFormUpadted"] = True
        return self.refresh(item)


invoice_editor = LineItemEditor(
    InvoiceService.calculate_item_values,
    ("rate", "discount", "tax", "amount", "taxableAmount"),
)

purchase_editor = LineItemEditor(
    PurchaseService.calculate_purchase_item_values,
    ("discount", "tax", "amount"),
)
