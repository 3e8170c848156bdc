from django.core.management.base import BaseCommand
from django.db import transaction

from apps.catalog.models import Category, Product
from apps.common.sanitizers import sanitize

CATEGORIES = [
    "Furniture",
    "Electronics",
    "Jewelery",
    "Clothing",
]

PRODUCTS = [
    (
        "Wooden Chair",
        49,
        "Solid oak dining chair with a curved back.",
        None,
        "Furniture",
    ),
    (
        "Coffee Table",
        120,
        "Low walnut table with a lower shelf for magazines.",
        None,
        "Furniture",
    ),
    (
        "WD 2TB Elements Portable External Hard Drive - USB 3.0",
        64,
        "USB 3.0 and USB 2.0 compatibility, fast data transfers, improve PC performance, high capacity.",
        "https://images.example.com/catalog/61IBBVJvSDL._AC_SY879_t.png",
        "Electronics",
    ),
    (
        "SanDisk SSD PLUS 1TB Internal SSD - SATA III 6 Gb/s",
        109,
        "Easy upgrade for faster boot up, shutdown, application load and response.",
        "https://images.example.com/catalog/61U7T1koQqL._AC_SX679_t.png",
        "Electronics",
    ),
    (
        "White Gold Plated Princess",
        9.99,
        "Classic created wedding engagement solitaire diamond promise ring for her.",
        "https://images.example.com/catalog/71YAIFU48IL._AC_UL640_QL65_ML3_t.png",
        "Jewelery",
    ),
    (
        "Mens Cotton Jacket",
        55.99,
        "Great outerwear jacket for Spring, Autumn and Winter.",
        "https://images.example.com/catalog/71li-ujtlUL._AC_UX679_t.png",
        "Clothing",
    ),
]


class Command(BaseCommand):
    help = "Load a small demo catalog of categories and products (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush",
            action="store_true",
            help="Delete every product and category before seeding.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["flush"]:
            self.stdout.write("Flushing catalog...")
            Product.objects.all().delete()
            Category.objects.all().delete()

        self.stdout.write("Seeding categories...")
        for name in CATEGORIES:
            Category.objects.get_or_create(category=sanitize(name))

        self.stdout.write("Seeding products...")
        created = 0
        for title, price, text, imgurl, category in PRODUCTS:
            _, was_created = Product.objects.get_or_create(
                title=sanitize(title),
                defaults=dict(
                    price=sanitize(price),
                    text=sanitize(text),
                    imgurl=sanitize(imgurl) if imgurl else None,
                    category=sanitize(category),
                ),
            )
            created += int(was_created)

        self.stdout.write(
            self.style.SUCCESS(f"Catalog seed completed ({created} new products).")
        )
