import strawberry_django
from strawberry import auto

from . import models

# filters


@strawberry_django.filter_type(models.Product, name="ProductFilter", lookups=True)
class ProductFilter:
    id: auto
    name: auto
    price: auto
    created_at: auto


# order


@strawberry_django.order_type(models.Product, name="ProductOrder")
class ProductOrder:
    id: auto
    name: auto
    price: auto
    created_at: auto


# types


@strawberry_django.type(
    models.Product,
    name="Product",
    filters=ProductFilter,
    ordering=ProductOrder,
)
class ProductType:
    id: auto
    name: auto
    price: auto
    created_at: auto
