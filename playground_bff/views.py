from typing import Optional

from django.apps import apps
from django.http import HttpRequest, HttpResponse
from strawberry.django.views import AsyncGraphQLView, GraphQLView

from .schema import Query


def index(request: HttpRequest) -> HttpResponse:
    return HttpResponse("Hello World!", content_type="text/plain")


def get_root_value() -> Query:
    config = apps.get_app_config("playground_bff")
    return Query(service=config.query_service)


class ProductGraphQLView(GraphQLView):
    def get_root_value(self, request: HttpRequest) -> Optional[Query]:
        return get_root_value()


class AsyncProductGraphQLView(AsyncGraphQLView):
    async def get_root_value(self, request: HttpRequest) -> Optional[Query]:
        return get_root_value()
