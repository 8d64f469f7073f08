from .client import AsyncTestClient, TestClient, encode_variables
from .query_builder import FieldRef, QueryBuilder

__all__ = [
    "AsyncTestClient",
    "FieldRef",
    "QueryBuilder",
    "TestClient",
    "encode_variables",
]
