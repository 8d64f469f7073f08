from django.db import migrations

from playground_bff.models import seed_products


def create_products(apps, schema_editor):
    seed_products(apps.get_model("playground_bff", "Product"))


class Migration(migrations.Migration):
    dependencies = [
        ("playground_bff", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(create_products, migrations.RunPython.noop),
    ]
