from django.db import models
from django.utils import timezone


class Category(models.Model):
    id = models.AutoField(primary_key=True)
    # Stored sanitized; input is limited to 128 characters before escaping
    category = models.TextField(unique=True)

    class Meta:
        db_table = "categories"

    def __str__(self):
        return self.category


class Product(models.Model):
    product_no = models.AutoField(primary_key=True)
    title = models.TextField(unique=True)
    price = models.DecimalField(max_digits=12, decimal_places=2)
    text = models.TextField()
    imgurl = models.TextField(null=True, blank=True)
    # Category name, not a foreign key: deleting or renaming a category
    # never touches its products.
    category = models.TextField()
    date = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "products"
        indexes = [
            models.Index(fields=["category"], name="product_category_idx"),
            models.Index(fields=["date"], name="product_date_idx"),
        ]

    def __str__(self):
        return self.title
