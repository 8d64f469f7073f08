from django.urls import path

from playground_bff.schema import create_schema
from playground_bff.views import AsyncProductGraphQLView, ProductGraphQLView, index

schema = create_schema()

urlpatterns = [
    path("", index),
    path("graphql/", ProductGraphQLView.as_view(schema=schema)),
    path("graphql/async/", AsyncProductGraphQLView.as_view(schema=schema)),
]
