import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Category",
            fields=[
                ("id", models.AutoField(primary_key=True, serialize=False)),
                ("category", models.TextField(unique=True)),
            ],
            options={
                "db_table": "categories",
            },
        ),
        migrations.CreateModel(
            name="Product",
            fields=[
                ("product_no", models.AutoField(primary_key=True, serialize=False)),
                ("title", models.TextField(unique=True)),
                ("price", models.DecimalField(decimal_places=2, max_digits=12)),
                ("text", models.TextField()),
                ("imgurl", models.TextField(blank=True, null=True)),
                ("category", models.TextField()),
                ("date", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "db_table": "products",
                "indexes": [
                    models.Index(fields=["category"], name="product_category_idx"),
                    models.Index(fields=["date"], name="product_date_idx"),
                ],
            },
        ),
    ]
