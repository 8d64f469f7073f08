import datetime
import decimal
from typing import ClassVar, Optional

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

#: The fixed catalog served by the API, as (id, name, price).
SEED_PRODUCTS = (
    (1, "Sample Product", decimal.Decimal("9.99")),
    (2, "Electricity", decimal.Decimal("19.99")),
)


class Product(models.Model):
    """A catalog entry.

    Rows are inserted once by the seed migration and only read afterwards.
    """

    class Meta:
        verbose_name = _("Product")
        verbose_name_plural = _("Products")
        ordering: ClassVar[list[str]] = ["id"]

    id = models.IntegerField(
        verbose_name=_("ID"),
        primary_key=True,
    )
    name = models.CharField(
        verbose_name=_("Name"),
        max_length=255,
    )
    price = models.DecimalField(
        verbose_name=_("Price"),
        max_digits=24,
        decimal_places=2,
    )
    created_at = models.DateTimeField(
        verbose_name=_("Created at"),
    )

    def __str__(self) -> str:
        return self.name


def seed_products(
    model: type[models.Model] = Product,
    created_at: Optional[datetime.datetime] = None,
) -> list[models.Model]:
    """Insert the fixed product catalog.

    Every record shares a single creation timestamp, taken when the catalog
    is built unless one is given. `model` lets migrations pass their
    historical model.
    """
    if created_at is None:
        created_at = timezone.now()

    return model.objects.bulk_create(
        [
            model(id=id_, name=name, price=price, created_at=created_at)
            for id_, name, price in SEED_PRODUCTS
        ]
    )
