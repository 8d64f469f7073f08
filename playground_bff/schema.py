from collections.abc import Iterable
from typing import Optional

import strawberry
import strawberry_django
from strawberry.schema.config import StrawberryConfig

from .models import Product
from .pagination import ListConnection
from .query import ProductQuery
from .settings import bff_settings
from .types import ProductType


@strawberry.type
class Query:
    service: strawberry.Private[ProductQuery]

    @strawberry_django.connection(ListConnection[ProductType])
    def products(self, info: strawberry.Info) -> Iterable[Product]:
        return self.service.list()

    @strawberry_django.field
    def product(self, id: int) -> Optional[ProductType]:  # noqa: A002
        return self.service.get_by_id(id)


def create_schema() -> strawberry.Schema:
    config = StrawberryConfig(relay_max_results=bff_settings()["MAX_PAGE_SIZE"])
    return strawberry.Schema(query=Query, config=config)
