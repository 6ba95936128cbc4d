# Generated manually (initial migration).
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Room",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("room_number", models.PositiveIntegerField(unique=True)),
                (
                    "room_type",
                    models.CharField(
                        choices=[("single", "Single"), ("double", "Double"), ("suite", "Suite")],
                        max_length=16,
                    ),
                ),
                ("has_sea_view", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["id"],
            },
        ),
    ]
