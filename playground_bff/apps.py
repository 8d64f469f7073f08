import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class PlaygroundBffConfig(AppConfig):
    name = "playground_bff"
    verbose_name = "Playground BFF"
    default_auto_field = "django.db.models.AutoField"

    def ready(self):
        from .models import Product
        from .query import ProductQuery

        self.query_service = ProductQuery(Product.objects.all())
        logger.info("Product query service ready")
