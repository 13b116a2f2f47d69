# coupons/services/exceptions.py


class CouponValidationError(Exception):
    """
    Raised when a coupon cannot be applied. `code` is the stable identifier,
    str(exc) the user-facing message.
    """

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


COUPON_NOT_FOUND = "COUPON_NOT_FOUND"
COUPON_INACTIVE = "COUPON_INACTIVE"
COUPON_NOT_YET_VALID = "COUPON_NOT_YET_VALID"
COUPON_EXPIRED = "COUPON_EXPIRED"
COUPON_USAGE_LIMIT = "COUPON_USAGE_LIMIT"
COUPON_MIN_PURCHASE = "COUPON_MIN_PURCHASE"
