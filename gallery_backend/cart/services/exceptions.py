# cart/services/exceptions.py


class CartError(Exception):
    code = "CART_ERROR"


class PaintingNotAvailableError(CartError):
    code = "PAINTING_NOT_AVAILABLE"


class CartItemNotFoundError(CartError):
    code = "CART_ITEM_NOT_FOUND"
