from datetime import timedelta
from decimal import Decimal, InvalidOperation

from django.db import DataError, IntegrityError
from django.test import TestCase
from django.utils import timezone

from apps.catalog.models import Category, Product
from apps.catalog.repositories import CategoryRepository, ProductRepository


class ProductRepositoryTests(TestCase):
    def setUp(self):
        self.repo = ProductRepository()
        now = timezone.now()
        self.old = Product.objects.create(
            title="Old", price=1, text="t", category="Furniture", date=now - timedelta(days=2)
        )
        self.new = Product.objects.create(
            title="New", price=2, text="t", category="Lighting", date=now
        )

    def test_list_by_date(self):
        self.assertEqual([p.title for p in self.repo.list_by_date()], ["Old", "New"])
        self.assertEqual(
            [p.title for p in self.repo.list_by_date(descending=True)], ["New", "Old"]
        )

    def test_list_by_category_is_exact(self):
        self.assertEqual([p.title for p in self.repo.list_by_category("Lighting")], ["New"])
        self.assertEqual(list(self.repo.list_by_category("lighting")), [])

    def test_title_exists_can_exclude_self(self):
        self.assertTrue(self.repo.title_exists("Old"))
        self.assertFalse(self.repo.title_exists("Old", exclude_pk=self.old.pk))

    def test_create_refreshes_row(self):
        product = self.repo.create(title="Lamp", price="5", text="t", category="Lighting")
        self.assertEqual(str(product.price), "5.00")
        self.assertIsNotNone(product.date)

    def test_duplicate_title_raises_integrity_error(self):
        with self.assertRaises(IntegrityError):
            self.repo.create(title="Old", price="5", text="t", category="Furniture")
        # outer transaction still usable
        self.assertEqual(self.repo.objects.count(), 2)

    def test_update_one_returns_reread_row(self):
        updated = self.repo.update_one({"pk": self.old.pk}, text="changed", price="3.5")
        self.assertEqual(updated.text, "changed")
        self.assertEqual(str(updated.price), "3.50")
        self.assertIsNone(self.repo.update_one({"pk": 9999}, text="changed"))
        self.assertEqual(self.repo.update_one({"pk": self.new.pk}).title, "New")
        self.assertIsNone(self.repo.update_one({"pk": 9999}))

    def test_failed_create_leaves_no_row(self):
        # Wider than numeric(12, 2): rejected on write or on the re-read
        with self.assertRaises((InvalidOperation, DataError)):
            self.repo.create(
                title="Huge", price=Decimal("1000000000000"), text="t", category="Furniture"
            )
        self.assertFalse(Product.objects.filter(title="Huge").exists())
        self.assertEqual(len(list(self.repo.list_by_date())), 2)

    def test_failed_update_is_rolled_back(self):
        with self.assertRaises((InvalidOperation, DataError)):
            self.repo.update_one(
                {"pk": self.old.pk}, text="changed", price=Decimal("1000000000000")
            )
        self.old.refresh_from_db()
        self.assertEqual(self.old.text, "t")
        self.assertEqual(str(self.old.price), "1.00")

    def test_delete_where(self):
        self.assertEqual(self.repo.delete_where(pk=self.new.pk), 1)
        self.assertEqual(self.repo.delete_where(pk=self.new.pk), 0)


class CategoryRepositoryTests(TestCase):
    def setUp(self):
        self.repo = CategoryRepository()
        self.b = Category.objects.create(category="B")
        self.a = Category.objects.create(category="A")

    def test_list_ordered_by_id(self):
        self.assertEqual([c.category for c in self.repo.list_ordered()], ["B", "A"])

    def test_name_exists(self):
        self.assertTrue(self.repo.name_exists("A"))
        self.assertFalse(self.repo.name_exists("A", exclude_id=self.a.id))
        self.assertFalse(self.repo.name_exists("C"))
