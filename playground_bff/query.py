import logging
from typing import Optional

from django.db.models import QuerySet

from .models import Product

logger = logging.getLogger(__name__)


class ProductQuery:
    """Read operations over the product catalog."""

    def __init__(self, queryset: QuerySet[Product]):
        self._queryset = queryset

    def list(self) -> QuerySet[Product]:
        """Return every product in insertion order.

        The result is a lazy queryset. Filtering, ordering and pagination are
        applied on it by the GraphQL layer.
        """
        return self._queryset.all()

    def get_by_id(self, id: int) -> Optional[Product]:  # noqa: A002
        product = self._queryset.filter(pk=id).first()
        if product is None:
            logger.debug("No product with id %r", id)

        return product
