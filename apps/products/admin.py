"""
Product admin configuration.
"""
from django.contrib import admin
from .models import Category, Product, ProductType, ProductVariant


@admin.register(ProductType)
class ProductTypeAdmin(admin.ModelAdmin):
    list_display = ['name', 'created_at']
    search_fields = ['name']


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'created_at']
    search_fields = ['name']


class ProductVariantInline(admin.TabularInline):
    model = ProductVariant
    extra = 0
    fields = ['name', 'price', 'cost', 'quantity', 'active']


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'type', 'is_sellable', 'is_stock_item', 'created_at']
    list_filter = ['is_sellable', 'is_stock_item', 'type', 'category']
    search_fields = ['name', 'description']
    inlines = [ProductVariantInline]
