from django.contrib import admin

from modules.products.models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("id", "code", "name", "price", "quantity", "active")
    list_filter = ("active",)
    search_fields = ("code", "name")
    readonly_fields = ("created_at", "updated_at")
