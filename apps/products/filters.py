"""
Product filters.
"""
from django_filters import rest_framework as filters
from .models import Product


class ProductFilter(filters.FilterSet):
    """Product filter set."""
    type_id = filters.NumberFilter(field_name='type_id')
    type = filters.CharFilter(field_name='type__name', lookup_expr='iexact')
    category = filters.CharFilter(method='filter_category')
    is_stock_item = filters.BooleanFilter()

    class Meta:
        model = Product
        fields = ['type_id', 'type', 'category', 'is_stock_item']

    def filter_category(self, queryset, name, value):
        """Accept either the category id or its name."""
        if value.isdigit():
            return queryset.filter(category_id=int(value))
        return queryset.filter(category__name__iexact=value)
