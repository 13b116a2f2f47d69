# common/validators.py

"""
INPUT VALIDATORS

Plain predicates (is_valid_*) plus Django-style validators that raise
django.core.exceptions.ValidationError. DRF serializers accept the latter
directly in `validators=[...]`.
"""

from __future__ import annotations

import re

from django.conf import settings
from django.core.exceptions import ValidationError

EMAIL_REGEX = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

PHONE_MIN_DIGITS = 8
NAME_MIN_LENGTH = 3

RATING_MIN = 1
RATING_MAX = 5

ALLOWED_UPLOAD_PREFIXES = ("image/",)
ALLOWED_UPLOAD_TYPES = {"application/pdf"}


def is_valid_email(value: str) -> bool:
    if not value:
        return False
    return EMAIL_REGEX.fullmatch(value) is not None


def is_valid_file_size(file_or_size, max_size_mb: int = 10) -> bool:
    """
    file_or_size: an int byte count or any object exposing `.size`
    (UploadedFile, File).
    """
    size = getattr(file_or_size, "size", file_or_size)
    max_bytes = max_size_mb * 1024 * 1024
    return int(size) <= max_bytes


def validate_phone(value: str) -> None:
    digits = re.sub(r"\D", "", value or "")
    if len(digits) < PHONE_MIN_DIGITS:
        raise ValidationError(f"El teléfono debe tener al menos {PHONE_MIN_DIGITS} dígitos")


def validate_person_name(value: str) -> None:
    if len((value or "").strip()) < NAME_MIN_LENGTH:
        raise ValidationError(f"El nombre debe tener al menos {NAME_MIN_LENGTH} caracteres")


def validate_upload_size(file) -> None:
    max_mb = int(getattr(settings, "MAX_IMAGE_SIZE_MB", 10))
    if not is_valid_file_size(file, max_mb):
        raise ValidationError(f"El archivo supera el máximo de {max_mb} MB")


def validate_image_or_pdf(file) -> None:
    content_type = (getattr(file, "content_type", "") or "").lower()
    if not content_type:
        return
    if content_type in ALLOWED_UPLOAD_TYPES:
        return
    if any(content_type.startswith(p) for p in ALLOWED_UPLOAD_PREFIXES):
        return
    raise ValidationError("Solo se aceptan imágenes o PDF")


def validate_image(file) -> None:
    content_type = (getattr(file, "content_type", "") or "").lower()
    if content_type and not content_type.startswith("image/"):
        raise ValidationError("Solo se aceptan imágenes")
