"""
Product views.
"""
from django.db.models import Exists, OuterRef, Prefetch, ProtectedError
from django.http import FileResponse, Http404
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny

from apps.core.exceptions import InvalidOperationError
from apps.core.mixins import MultiSerializerMixin, StandardResponseMixin
from apps.core.pagination import LargePagination
from apps.core.permissions import IsShiftLeadOrAbove, IsShiftLeadOrReadOnly
from apps.core.views import BaseViewSet
from .filters import ProductFilter
from .models import Category, Product, ProductType, ProductVariant
from .serializers import (
    CategorySerializer,
    ProductSerializer,
    ProductTypeSerializer,
    ProductWriteSerializer,
)
from .services import ProductService

IMAGE_CACHE_CONTROL = 'public, max-age=31536000, immutable'


class InUseProtectedMixin:
    """Turn deletes blocked by referencing products into a business error."""
    in_use_message = 'No se puede eliminar: está en uso'

    def perform_destroy(self, instance):
        try:
            instance.delete()
        except ProtectedError:
            raise InvalidOperationError(self.in_use_message)


class ProductTypeViewSet(InUseProtectedMixin, BaseViewSet):
    """Product type management ViewSet."""
    queryset = ProductType.objects.all()
    serializer_class = ProductTypeSerializer
    permission_classes = [IsShiftLeadOrReadOnly]
    pagination_class = LargePagination
    search_fields = ['name']
    ordering_fields = ['name']
    in_use_message = 'No se puede eliminar: el tipo de producto está en uso'


class CategoryViewSet(InUseProtectedMixin, BaseViewSet):
    """Category management ViewSet."""
    queryset = Category.objects.all()
    serializer_class = CategorySerializer
    permission_classes = [IsShiftLeadOrReadOnly]
    pagination_class = LargePagination
    search_fields = ['name']
    ordering_fields = ['name']
    in_use_message = 'No se puede eliminar: la categoría está en uso'


class ProductViewSet(MultiSerializerMixin, StandardResponseMixin, BaseViewSet):
    """
    Product catalog ViewSet.
    Reads are public; writes need a shift lead or administrator.
    """
    queryset = Product.objects.select_related('category', 'type').prefetch_related(
        Prefetch('variants', queryset=ProductVariant.objects.order_by('id'))
    )
    serializer_class = ProductSerializer
    serializer_classes = {
        'create': ProductWriteSerializer,
        'update': ProductWriteSerializer,
        'partial_update': ProductWriteSerializer,
    }
    pagination_class = LargePagination
    filterset_class = ProductFilter
    search_fields = ['name', 'description']
    ordering_fields = ['name', 'created_at']
    ordering = ['name']

    def get_permissions(self):
        if self.action in ['list', 'retrieve', 'image']:
            return [AllowAny()]
        return [IsShiftLeadOrAbove()]

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action == 'list':
            # POS catalog: sellable products that still have an active variant
            active_variant = ProductVariant.objects.filter(product=OuterRef('pk'), active=True)
            queryset = queryset.filter(is_sellable=True).filter(Exists(active_variant))
        return queryset

    def _reload(self, product):
        return self.get_queryset().get(pk=product.pk)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = ProductService.create_product(serializer.validated_data, user=request.user)
        return self.created_response(
            data=ProductSerializer(self._reload(product)).data,
            message='Producto creado'
        )

    def update(self, request, *args, **kwargs):
        product = self.get_object()
        serializer = self.get_serializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        ProductService.update_product(product, serializer.validated_data, user=request.user)
        return self.success_response(
            data=ProductSerializer(self._reload(product)).data,
            message='Producto actualizado'
        )

    def destroy(self, request, *args, **kwargs):
        product = self.get_object()
        product_id = product.pk
        if ProductService.delete_product(product, user=request.user):
            return self.success_response(
                data={'id': product_id, 'soft_deleted': False},
                message='Producto eliminado'
            )
        return self.success_response(
            data=ProductSerializer(self._reload(product)).data,
            message='El producto tiene ventas registradas; se desactivó'
        )

    @action(detail=True, methods=['get'])
    def image(self, request, pk=None):
        """Serve the uploaded product image."""
        product = self.get_object()
        if not product.image:
            raise Http404('El producto no tiene imagen')
        try:
            image_file = product.image.open('rb')
        except FileNotFoundError:
            raise Http404('El producto no tiene imagen')

        response = FileResponse(
            image_file,
            content_type=product.image_type or 'application/octet-stream',
            status=status.HTTP_200_OK
        )
        response['Cache-Control'] = IMAGE_CACHE_CONTROL
        return response
