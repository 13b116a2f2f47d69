# common/tests/test_validators.py

from django.core.exceptions import ValidationError
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import SimpleTestCase, override_settings

from common.validators import (
    is_valid_email,
    is_valid_file_size,
    validate_image_or_pdf,
    validate_person_name,
    validate_phone,
    validate_upload_size,
)


class EmailValidationTests(SimpleTestCase):
    def test_accepts_valid_emails(self):
        self.assertTrue(is_valid_email("user@example.com"))
        self.assertTrue(is_valid_email("test.user+tag@domain.co.uk"))
        self.assertTrue(is_valid_email("admin@galeria.art"))

    def test_rejects_invalid_formats(self):
        for value in ["a@b", "notanemail", "@example.com", "user@", "user @example.com", ""]:
            with self.subTest(value=value):
                self.assertFalse(is_valid_email(value))

    def test_rejects_spaces(self):
        self.assertFalse(is_valid_email(" user@example.com"))
        self.assertFalse(is_valid_email("user@ example.com"))


class FileSizeTests(SimpleTestCase):
    def test_byte_counts(self):
        self.assertTrue(is_valid_file_size(5 * 1024 * 1024))
        self.assertTrue(is_valid_file_size(10 * 1024 * 1024))
        self.assertFalse(is_valid_file_size(10 * 1024 * 1024 + 1))

    def test_custom_limit(self):
        self.assertFalse(is_valid_file_size(3 * 1024 * 1024, max_size_mb=2))

    def test_accepts_file_objects(self):
        upload = SimpleUploadedFile("proof.png", b"x" * 1024, content_type="image/png")
        self.assertTrue(is_valid_file_size(upload, max_size_mb=1))

    @override_settings(MAX_IMAGE_SIZE_MB=1)
    def test_upload_validator_uses_setting(self):
        big = SimpleUploadedFile("big.png", b"x" * (1024 * 1024 + 1), content_type="image/png")
        with self.assertRaises(ValidationError):
            validate_upload_size(big)


class ContactValidatorTests(SimpleTestCase):
    def test_phone_needs_eight_digits(self):
        validate_phone("+56 9 1234 5678")
        with self.assertRaises(ValidationError):
            validate_phone("12-34")

    def test_name_needs_three_chars(self):
        validate_person_name("Ana")
        with self.assertRaises(ValidationError):
            validate_person_name("  Al ")

    def test_image_or_pdf(self):
        validate_image_or_pdf(SimpleUploadedFile("a.pdf", b"%PDF", content_type="application/pdf"))
        validate_image_or_pdf(SimpleUploadedFile("a.jpg", b"x", content_type="image/jpeg"))
        with self.assertRaises(ValidationError):
            validate_image_or_pdf(SimpleUploadedFile("a.exe", b"x", content_type="application/x-msdownload"))
