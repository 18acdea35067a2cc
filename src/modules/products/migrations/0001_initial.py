from decimal import Decimal

from django.db import migrations, models

import modules.core.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                (
                    "created_at",
                    models.BigIntegerField(
                        default=modules.core.models.current_millis, editable=False
                    ),
                ),
                (
                    "updated_at",
                    models.BigIntegerField(default=modules.core.models.current_millis),
                ),
                ("active", models.BooleanField(db_index=True, default=True)),
                ("code", models.CharField(max_length=255, unique=True)),
                ("name", models.CharField(max_length=255)),
                (
                    "description",
                    models.TextField(blank=True, default=None, null=True),
                ),
                ("price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("quantity", models.IntegerField()),
                (
                    "image",
                    models.CharField(
                        blank=True, default=None, max_length=500, null=True
                    ),
                ),
            ],
            options={
                "db_table": "products",
                "ordering": ["id"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(
                            ("price__gte", Decimal("0.01")),
                            ("price__lte", Decimal("999999.99")),
                        ),
                        name="products_price_range",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(
                            ("quantity__gte", 0), ("quantity__lte", 1000000)
                        ),
                        name="products_quantity_range",
                    ),
                ],
            },
        ),
    ]
