class InvalidLineItemException(Exception):
    pass

class InvalidProductException(Exception):
    pass
