import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid6.uuid7,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("manager", models.CharField(max_length=255)),
                ("password", models.CharField(max_length=255)),
                (
                    "status",
                    models.CharField(
                        choices=[("FOR_SALE", "For sale"), ("SOLD_OUT", "Sold out")],
                        default="FOR_SALE",
                        max_length=20,
                    ),
                ),
            ],
            options={
                "db_table": "products",
                "ordering": ["-updated_at"],
                "indexes": [
                    models.Index(fields=["name"], name="products_name_idx"),
                    models.Index(
                        fields=["updated_at"], name="products_updated_at_idx"
                    ),
                ],
            },
        ),
    ]
