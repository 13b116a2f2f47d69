# orders/services/exceptions.py


class CheckoutError(Exception):
    """Base checkout exception"""

    code = "CHECKOUT_FAILED"


class EmptyOrderError(CheckoutError):
    code = "EMPTY_ORDER"


class PaintingUnavailableError(CheckoutError):
    code = "PAINTING_UNAVAILABLE"


class InsufficientStockError(CheckoutError):
    code = "INSUFFICIENT_STOCK"


class CouponError(CheckoutError):
    """Wraps a coupon rejection raised while redeeming at checkout."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


class OrderAccessError(Exception):
    code = "ORDER_ACCESS"


class TokenRequiredError(OrderAccessError):
    code = "TOKEN_REQUIRED"


class OrderNotFoundError(OrderAccessError):
    code = "ORDER_NOT_FOUND"


class InvalidTokenError(OrderAccessError):
    code = "UNAUTHORIZED"


class TransferProofError(Exception):
    code = "INVALID_TRANSFER_PROOF"


class InvalidStatusError(ValueError):
    code = "INVALID_STATUS"
