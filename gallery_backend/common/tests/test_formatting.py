# common/tests/test_formatting.py

from datetime import date, datetime, timezone as dt_timezone
from decimal import Decimal

from django.test import SimpleTestCase

from common.formatting import format_date, format_price, truncate_text


class FormatPriceTests(SimpleTestCase):
    """
    GUARANTEES:
    - CLP has no decimals and uses "." as thousands separator
    - Rounds half away from zero
    """

    def test_formats_clp_currency(self):
        self.assertEqual(format_price(50000), "$50.000")

    def test_zero(self):
        self.assertEqual(format_price(0), "$0")

    def test_negative(self):
        self.assertEqual(format_price(-10000), "-$10.000")

    def test_decimal_values_round(self):
        self.assertEqual(format_price(50000.99), "$50.001")
        self.assertEqual(format_price(Decimal("145000.50")), "$145.001")

    def test_large_numbers(self):
        self.assertEqual(format_price(1000000), "$1.000.000")

    def test_none_is_zero(self):
        self.assertEqual(format_price(None), "$0")


class FormatDateTests(SimpleTestCase):
    def test_short_month_in_store_timezone(self):
        value = datetime(2024, 11, 10, 12, 0, tzinfo=dt_timezone.utc)
        self.assertEqual(format_date(value), "10 nov 2024")

    def test_long_month(self):
        value = datetime(2024, 11, 10, 12, 0, tzinfo=dt_timezone.utc)
        formatted = format_date(value, month="long")
        self.assertIn("noviembre", formatted)
        self.assertIn("2024", formatted)

    def test_new_year_utc_is_still_previous_day_in_santiago(self):
        first = format_date(datetime(2024, 1, 1, 0, 0, tzinfo=dt_timezone.utc))
        last = format_date(datetime(2024, 12, 31, 23, 59, 59, tzinfo=dt_timezone.utc))
        self.assertEqual(first, "31 dic 2023")
        self.assertNotEqual(first, last)

    def test_plain_date(self):
        self.assertEqual(format_date(date(2024, 3, 5), month="numeric"), "05-03-2024")

    def test_with_time(self):
        value = datetime(2024, 11, 10, 15, 30, tzinfo=dt_timezone.utc)
        self.assertEqual(format_date(value, with_time=True), "10 nov 2024, 12:30")

    def test_unknown_style(self):
        with self.assertRaises(ValueError):
            format_date(date(2024, 1, 1), month="weird")


class TruncateTextTests(SimpleTestCase):
    def test_truncates_longer_text(self):
        text = "This is a very long text that needs truncation"
        self.assertEqual(truncate_text(text, 10), "This is a ...")

    def test_short_and_exact_text_untouched(self):
        self.assertEqual(truncate_text("Short", 10), "Short")
        self.assertEqual(truncate_text("1234567890", 10), "1234567890")

    def test_empty(self):
        self.assertEqual(truncate_text("", 10), "")

    def test_length_includes_ellipsis(self):
        self.assertEqual(len(truncate_text("This is a long text", 10)), 13)
