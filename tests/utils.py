import asyncio
import datetime
import inspect
from typing import Any, Optional, Union, cast

from django.test.client import AsyncClient, Client
from strawberry.test.client import Response
from typing_extensions import override

from playground_bff.models import Product
from playground_bff.query import ProductQuery
from playground_bff.schema import Query, create_schema
from playground_bff.test.client import TestClient

CREATED_AT = datetime.datetime(2025, 1, 1, 12, 0, tzinfo=datetime.timezone.utc)


def generate_query(service: Optional[ProductQuery] = None):
    schema = create_schema()
    root_value = Query(service=service or ProductQuery(Product.objects.all()))

    def query_sync(query, variable_values=None):
        return schema.execute_sync(
            query,
            variable_values=variable_values,
            root_value=root_value,
        )

    return query_sync


class GraphQLTestClient(TestClient):
    def __init__(
        self,
        path: str,
        client: Union[Client, AsyncClient],
    ):
        super().__init__(path, client=cast("Client", client))
        self.is_async = isinstance(client, AsyncClient)

    @override
    def query(
        self,
        query: str,
        variables: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, object]] = None,
        files: Optional[dict[str, object]] = None,
        assert_no_errors: Optional[bool] = True,
    ) -> Response:
        body = self._build_body(query, variables)

        resp = self.request(body, headers)
        if inspect.iscoroutine(resp):
            resp = asyncio.run(resp)

        return self.to_response(resp, assert_no_errors)
