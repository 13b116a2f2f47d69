# common/throttles.py

from rest_framework.throttling import AnonRateThrottle


class PublicWriteThrottle(AnonRateThrottle):
    """
    For public write endpoints (register, login, checkout, reviews, custom orders).
    Uses REST_FRAMEWORK['DEFAULT_THROTTLE_RATES']['public_write'].
    """

    scope = "public_write"


class PublicPollThrottle(AnonRateThrottle):
    """
    For public polling endpoints (order lookup by token).
    Uses REST_FRAMEWORK['DEFAULT_THROTTLE_RATES']['public_poll'].
    """

    scope = "public_poll"


class PublicCatalogThrottle(AnonRateThrottle):
    """
    For catalog browsing (paintings, blog, settings).
    Uses REST_FRAMEWORK['DEFAULT_THROTTLE_RATES']['public_catalog'].
    """

    scope = "public_catalog"
