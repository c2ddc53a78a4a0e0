"""Product URL configuration.

Wires repository -> service -> views by explicit composition; the
same ``ProductService`` instance backs every product route.
"""

from __future__ import annotations

from typing import List

from django.urls import URLPattern, path

from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService
from modules.products.views import ProductViewSet


def build_urlpatterns(service: ProductService) -> List[URLPattern]:
    """Return the product routes bound to ``service``."""
    collection = ProductViewSet.as_view({"post": "create"}, service=service)
    listing = ProductViewSet.as_view({"get": "list_all"}, service=service)
    detail = ProductViewSet.as_view(
        {"get": "retrieve", "put": "update", "delete": "destroy"},
        service=service,
    )
    return [
        path("products", collection, name="product-create"),
        path("products/all", listing, name="product-list"),
        path("products/<int:pk>", detail, name="product-detail"),
    ]


urlpatterns = build_urlpatterns(ProductService(repository=ProductDjangoRepository()))
