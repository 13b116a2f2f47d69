from django.contrib import admin

from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ("painting", "title", "image_url", "unit_price", "quantity", "total_price")
    can_delete = False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("order_number", "shipping_full_name", "total", "payment_method", "payment_status", "status", "created_at")
    list_filter = ("status", "shipping_status", "payment_method", "payment_status")
    search_fields = ("order_number", "shipping_email", "shipping_full_name")
    readonly_fields = ("order_number", "subtotal", "shipping_cost", "discount", "total", "transaction_id", "created_at", "updated_at")
    inlines = [OrderItemInline]
