from line_items.line_item import DiscountType, ZERO, parse_tax_info, to_decimal


class Product:
    """Catalog product as supplied by the product listing (camelCase keys)"""

    def __init__(self, data):
        self.data = data

    # Product ID (catalog identifier)
    @property
    def id(self):
        return self.data.get("_id")

    @property
    def name(self):
        return self.data.get("name")

    # Unit of Measure (Piece, Kg, Litre, etc.)
    @property
    def units(self):
        units = self.data.get("units")
        return units if isinstance(units, dict) else {}

    # Unit Price
    @property
    def selling_price(self):
        return to_decimal(self.data.get("sellingPrice"))

    # Purchase Price (Cost Price)
    @property
    def purchase_price(self):
        return to_decimal(self.data.get("purchasePrice"))

    @property
    def raw_discount_type(self):
        return self.data.get("discountType")

    @property
    def discount_type(self):
        return DiscountType.of(self.raw_discount_type)

    @property
    def discount_value(self):
        return to_decimal(self.data.get("discountValue"))

    @property
    def tax(self):
        return parse_tax_info(self.data.get("tax"))

    @property
    def tax_rate(self):
        tax = self.tax
        return to_decimal(tax.get("taxRate")) if tax else ZERO
