import inspect
from typing import Any, Optional, cast

import strawberry
from strawberry import Info, relay
from strawberry.relay.types import NodeIterableType
from strawberry.relay.utils import SliceMetadata, should_resolve_list_connection_edges
from strawberry.utils.await_maybe import AwaitableOrValue
from strawberry_django.relay import DjangoListConnection
from strawberry_django.resolvers import django_resolver
from typing_extensions import Self

from .settings import bff_settings


@strawberry.type(name="Connection", description="A connection to a list of items.")
class ListConnection(DjangoListConnection[relay.NodeType]):
    # Set when edges were skipped because only `nodes` was selected
    page: strawberry.Private[Optional[SliceMetadata]] = None
    page_last: strawberry.Private[Optional[int]] = None

    @strawberry.field(
        name="nodes",
        description="Flattened list of the nodes in this page.",
    )
    @django_resolver
    def page_nodes(self) -> list[relay.NodeType]:
        if self.page is None:
            return [edge.node for edge in self.edges]

        assert self.nodes is not None
        result = list(self.nodes[self.page.start : self.page.end])  # type: ignore
        if self.page_last is not None:
            result = result[max(len(result) - self.page_last, 0) :]

        return result

    @classmethod
    def resolve_connection(
        cls,
        nodes: NodeIterableType[relay.NodeType],
        *,
        info: Info,
        before: Optional[str] = None,
        after: Optional[str] = None,
        first: Optional[int] = None,
        last: Optional[int] = None,
        **kwargs: Any,
    ) -> AwaitableOrValue[Self]:
        """Resolve a page of `nodes`.

        When neither `first` nor `last` is given, the page is limited to the
        `DEFAULT_PAGE_SIZE` setting.
        """
        if first is None and last is None:
            first = bff_settings()["DEFAULT_PAGE_SIZE"]

        conn = super().resolve_connection(
            nodes,
            info=info,
            before=before,
            after=after,
            first=first,
            last=last,
            **kwargs,
        )
        if should_resolve_list_connection_edges(info):
            return conn

        page = SliceMetadata.from_arguments(
            info,
            before=before,
            after=after,
            first=first,
            last=last,
            max_results=kwargs.get("max_results"),
        )

        if inspect.isawaitable(conn):

            async def wrapper():
                resolved = await conn
                resolved.page = page
                resolved.page_last = last
                return resolved

            return wrapper()

        conn = cast("Self", conn)
        conn.page = page
        conn.page_last = last
        return conn
