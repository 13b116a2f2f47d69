# common/pagination.py

from django.conf import settings
from rest_framework.pagination import PageNumberPagination


class GalleryPagination(PageNumberPagination):
    """Public catalog pages (12 paintings by default)."""

    page_size = getattr(settings, "GALLERY_ITEMS_PER_PAGE", 12)
    page_size_query_param = "page_size"
    max_page_size = 100


class AdminPagination(PageNumberPagination):
    """Back-office lists (20 rows by default)."""

    page_size = getattr(settings, "ADMIN_ITEMS_PER_PAGE", 20)
    page_size_query_param = "page_size"
    max_page_size = 100
