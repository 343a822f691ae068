import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="SchoolLicense",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("school_code", models.CharField(db_index=True, max_length=64, unique=True)),
                ("school_name", models.CharField(blank=True, max_length=255)),
                ("expiry_date", models.DateTimeField(blank=True, null=True)),
                ("is_active", models.BooleanField(db_index=True, default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "school_licenses",
                "ordering": ["school_code"],
                "indexes": [
                    models.Index(
                        fields=["is_active", "expiry_date"], name="school_lic_active_expiry_idx"
                    )
                ],
            },
        ),
    ]
