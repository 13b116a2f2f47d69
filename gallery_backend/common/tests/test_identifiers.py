# common/tests/test_identifiers.py

import re
from datetime import datetime

from django.test import SimpleTestCase, TestCase
from django.utils import timezone

from blog.models import BlogPost
from common.identifiers import (
    generate_order_number,
    generate_slug,
    generate_transaction_id,
    unique_slug,
)

ORDER_NUMBER_RE = re.compile(r"^ORD-\d{8}-\d{3}$")


class OrderNumberTests(SimpleTestCase):
    def test_format(self):
        self.assertRegex(generate_order_number(), ORDER_NUMBER_RE)

    def test_includes_given_date(self):
        number = generate_order_number(datetime(2024, 11, 10, 9, 0))
        self.assertTrue(number.startswith("ORD-20241110-"))

    def test_includes_current_local_date(self):
        today = timezone.localtime()
        self.assertIn(f"ORD-{today:%Y%m%d}", generate_order_number())

    def test_random_part_is_zero_padded(self):
        for _ in range(20):
            self.assertEqual(len(generate_order_number().split("-")[2]), 3)

    def test_transaction_id(self):
        self.assertRegex(generate_transaction_id(), r"^TXN-\d+$")


class SlugTests(SimpleTestCase):
    def test_strips_accents_and_symbols(self):
        self.assertEqual(generate_slug("Técnicas del Óleo: ¡Guía!"), "tecnicas-del-oleo-guia")

    def test_trims_dashes(self):
        self.assertEqual(generate_slug("  --Hola Mundo--  "), "hola-mundo")

    def test_empty(self):
        self.assertEqual(generate_slug("¡¿!"), "")


class UniqueSlugTests(TestCase):
    def test_suffixes_when_taken(self):
        BlogPost.objects.create(title="Paisajes", slug="paisajes", excerpt="e", content="c")
        BlogPost.objects.create(title="Paisajes", slug="paisajes-2", excerpt="e", content="c")

        self.assertEqual(unique_slug(BlogPost, "Paisajes"), "paisajes-3")

    def test_excludes_current_row(self):
        post = BlogPost.objects.create(title="Retratos", slug="retratos", excerpt="e", content="c")
        self.assertEqual(unique_slug(BlogPost, "Retratos", exclude_pk=post.pk), "retratos")
