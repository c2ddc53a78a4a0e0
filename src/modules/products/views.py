"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Service results are branched on explicitly: a failed ``Result`` is
rendered by the shared not-found mapper, so every 404 has the same
body regardless of the HTTP method.
"""

from __future__ import annotations

from typing import Optional

from drf_spectacular.utils import extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import not_found_response
from modules.products.dtos import ProductInputDTO
from modules.products.models import Product
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    The service is passed in through ``as_view(..., service=...)``
    (see ``modules.products.urls``).  All ORM access goes through the
    service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    service: Optional[ProductService] = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @extend_schema(responses=ProductSerializer(many=True))
    def list_all(self, request: Request) -> Response:
        """GET /api/products/all"""
        products = self.service.fetch_all_products()
        return Response(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: int) -> Response:
        """GET /api/products/{pk}"""
        result = self.service.get_product_by_id(pk)
        if not result.ok:
            return not_found_response(result.error)
        return Response(ProductSerializer(result.value).data)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/products"""
        try:
            dto = ProductInputDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        product = self.service.save_product(dto)
        out = ProductSerializer(product)
        return Response(out.data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: int) -> Response:
        """PUT /api/products/{pk}"""
        try:
            dto = ProductInputDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        result = self.service.update_product(pk, dto)
        if not result.ok:
            return not_found_response(result.error)
        return Response(ProductSerializer(result.value).data)

    def destroy(self, request: Request, pk: int) -> Response:
        """DELETE /api/products/{pk}"""
        result = self.service.delete_product(pk)
        if not result.ok:
            return not_found_response(result.error)
        return Response(status=status.HTTP_204_NO_CONTENT)
