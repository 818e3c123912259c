import json
from decimal import Decimal, InvalidOperation, DivisionByZero, Overflow, ROUND_HALF_UP, getcontext, localcontext
from enum import Enum, IntEnum

ZERO = Decimal("0")
NAN = Decimal("NaN")
CENT = Decimal("0.01")


class DiscountType(IntEnum):
    PERCENT = 2
    FIXED = 3

    @classmethod
    def of(cls, value):
        """2 / "2" (or "percentage") is a percentage discount, anything else is fixed"""
        if isinstance(value, bool):
            return cls.FIXED
        if value == 2 or value == "2":
            return cls.PERCENT
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized in ("2", "percentage", "percent"):
                return cls.PERCENT
        return cls.FIXED


class RateView(Enum):
    """Which pricing view of a line item is authoritative"""
    ORIGINAL = "original"
    EDITED = "edited"

    @classmethod
    def of(cls, flag):
        # isRateFormUpadted arrives as True/False or "true"/"false"
        if flag is True:
            return cls.EDITED
        if isinstance(flag, str) and flag.strip().lower() == "true":
            return cls.EDITED
        return cls.ORIGINAL


def finite_or_nan(value):
    return value if value.is_finite() else NAN


def quiet_context():
    """
    Decimal context for pricing arithmetic: overflow, invalid operations and
    division by zero give Infinity/NaN instead of raising.
    """
    ctx = getcontext().copy()
    ctx.traps[Overflow] = False
    ctx.traps[InvalidOperation] = False
    ctx.traps[DivisionByZero] = False
    return localcontext(ctx)


def to_decimal(value):
    """
    Coerce a form value to Decimal the way the form layer does (Number(x || 0)).
    Empty values count as 0; unparsable or infinite ones become NaN instead
    of raising.
    """
    if value is None or value is False or value == "":
        return ZERO
    if value is True:
        return Decimal(1)
    if isinstance(value, Decimal):
        return finite_or_nan(value)
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return finite_or_nan(Decimal(str(value)))
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return ZERO
        # Digit separators are Python syntax, not form input
        if "_" in text:
            return NAN
        try:
            return finite_or_nan(Decimal(text))
        except InvalidOperation:
            return NAN
    return NAN


def quantize(value, places):
    """Half away from zero. NaN passes through; unrepresentable results become NaN."""
    if not value.is_finite():
        return NAN
    with quiet_context():
        return finite_or_nan(value.quantize(places, rounding=ROUND_HALF_UP))


def round2(value):
    return quantize(value, CENT)


def divide(numerator, denominator):
    # Division by zero gives NaN instead of raising
    with quiet_context():
        return finite_or_nan(numerator / denominator)


def format_money(value):
    return f"{round2(value):.2f}"


def parse_tax_info(tax_info):
    """taxInfo may be a mapping or its JSON encoding"""
    if not tax_info:
        return None
    if isinstance(tax_info, str):
        try:
            tax_info = json.loads(tax_info)
        except ValueError:
            return None
    if not isinstance(tax_info, dict):
        return None
    return tax_info


class LineItemRecord:
    """
    Read-only view over one line item mapping.

    Normalizes the edit flag into a RateView and exposes every pricing
    field of both views as a Decimal.
    """

    def __init__(self, data):
        self.data = data
        self.view = RateView.of(data.get("isRateFormUpadted"))

    @property
    def is_edited(self):
        return self.view is RateView.EDITED

    def number(self, key):
        return to_decimal(self.data.get(key))

    @property
    def quantity(self):
        return self.number("quantity")

    @property
    def tax_info_rate(self):
        # Missing taxInfo counts as a 0% rate
        tax_info = parse_tax_info(self.data.get("taxInfo"))
        if tax_info is None:
            return ZERO
        return to_decimal(tax_info.get("taxRate"))

    def discount_type(self, key):
        return DiscountType.of(self.data.get(key))

    def pick(self, edited_key, original_key):
        """Key of the authoritative field for this item's view"""
        return edited_key if self.is_edited else original_key


def has_nan(values):
    return any(isinstance(v, Decimal) and v.is_nan() for v in values)
