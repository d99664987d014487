"""
Sales views.
"""
from django.db.models import Prefetch
from rest_framework.decorators import action

from apps.core.mixins import MultiSerializerMixin, StandardResponseMixin
from apps.core.pagination import LargePagination
from apps.core.permissions import IsStaffMember
from apps.core.utils import parse_date_range, range_filter
from apps.core.views import ReadOnlyViewSet
from .models import Order, OrderItem
from .serializers import (
    OrderCreateSerializer,
    OrderSerializer,
    PaymentCreateSerializer,
    PaymentSerializer,
)
from .services import SalesService


class OrderViewSet(MultiSerializerMixin, StandardResponseMixin, ReadOnlyViewSet):
    """
    Orders: POS order entry, lookup and payments.
    Listing defaults to today's orders.
    """
    queryset = Order.objects.select_related('user').prefetch_related(
        Prefetch('items', queryset=OrderItem.objects.select_related('variant', 'variant__product')),
        'payments',
    )
    serializer_class = OrderSerializer
    serializer_classes = {
        'create': OrderCreateSerializer,
        'payments': PaymentCreateSerializer,
    }
    permission_classes = [IsStaffMember]
    pagination_class = LargePagination
    filterset_fields = ['status', 'channel', 'user']
    search_fields = ['order_number']
    ordering_fields = ['opened_at', 'total']
    ordering = ['-opened_at']

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action == 'list':
            gte, lt = parse_date_range(self.request.query_params, default_today=True)
            queryset = queryset.filter(**range_filter('opened_at', gte, lt))
        return queryset

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = SalesService.create_order(serializer.validated_data, user=request.user)
        order = self.get_queryset().get(pk=order.pk)
        return self.created_response(data=OrderSerializer(order).data, message='Pedido registrado')

    @action(detail=True, methods=['post'])
    def payments(self, request, pk=None):
        """Record a payment for the order."""
        order = self.get_object()
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        payment = SalesService.add_payment(
            order=order,
            method=serializer.validated_data['method'],
            amount=serializer.validated_data['amount'],
            user=request.user
        )
        return self.created_response(data=PaymentSerializer(payment).data, message='Pago registrado')
