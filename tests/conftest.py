from typing import Dict, Tuple, Type, Union, cast

import pytest
from django.test.client import (
    AsyncClient,  # type: ignore
    Client,
)

from playground_bff.models import Product
from playground_bff.query import ProductQuery
from tests.utils import CREATED_AT, GraphQLTestClient, generate_query


@pytest.fixture
def products(db):
    Product.objects.update(created_at=CREATED_AT)
    return list(Product.objects.all())


@pytest.fixture
def service(db):
    return ProductQuery(Product.objects.all())


@pytest.fixture
def query(products):
    return generate_query()


@pytest.fixture
def catalog(db):
    """Replace the seeded products with fifteen numbered ones."""
    Product.objects.all().delete()
    return Product.objects.bulk_create(
        [
            Product(id=i, name=f"Product {i}", price=i, created_at=CREATED_AT)
            for i in range(1, 16)
        ]
    )


@pytest.fixture(params=["sync", "async"])
def gql_client(request, db):
    client, path = cast(
        Dict[str, Tuple[Union[Type[Client], Type[AsyncClient]], str]],
        {
            "sync": (Client, "/graphql/"),
            "async": (AsyncClient, "/graphql/async/"),
        },
    )[request.param]

    return GraphQLTestClient(path, client())
