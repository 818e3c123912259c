from line_items.exceptions import InvalidLineItemException, InvalidProductException


def get_item(payload):
    item = payload.get("item")
    if item is not None and not isinstance(item, dict):
        raise InvalidLineItemException("item must be an object")
    return item


def get_items(payload):
    items = payload.get("items")
    if items is None:
        return []
    if not isinstance(items, list):
        raise InvalidLineItemException("items must be an array")
    for index, item in enumerate(items):
        if item is not None and not isinstance(item, dict):
            raise InvalidLineItemException(f"Invalid item format at position {index + 1}: {item}")
    return items


def get_product(payload):
    product = payload.get("product")
    if not product:
        raise InvalidProductException("product required")
    if not isinstance(product, dict):
        raise InvalidProductException("product must be an object")
    return product


def get_round_off(payload):
    round_off = payload.get("round_off")
    if round_off is None:
        return None
    if isinstance(round_off, str):
        return round_off.strip().lower() in ("1", "true", "yes")
    return bool(round_off)
