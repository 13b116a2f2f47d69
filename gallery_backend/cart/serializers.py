# cart/serializers.py

"""
CART SERIALIZERS

Totals are computed server-side (never trusted from client).
"""

from rest_framework import serializers

from paintings.serializers import PaintingSerializer

from .models import Cart, CartItem


class CartItemSerializer(serializers.ModelSerializer):
    painting_id = serializers.UUIDField(read_only=True)
    painting = PaintingSerializer(read_only=True)
    line_total = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = CartItem
        fields = ["id", "painting_id", "painting", "quantity", "unit_price", "line_total", "created_at"]
        read_only_fields = fields


class CartSerializer(serializers.ModelSerializer):
    items = serializers.SerializerMethodField()
    item_count = serializers.IntegerField(read_only=True)
    total = serializers.DecimalField(source="total_amount", max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = Cart
        fields = ["id", "items", "item_count", "total", "updated_at"]
        read_only_fields = fields

    def get_items(self, obj):
        qs = obj.items.select_related("painting").order_by("created_at")
        return CartItemSerializer(qs, many=True).data


# ---------------- INPUT ----------------
class AddCartItemInputSerializer(serializers.Serializer):
    painting_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, required=False, default=1)


class UpdateCartItemInputSerializer(serializers.Serializer):
    quantity = serializers.IntegerField()


class GuestCartLineSerializer(serializers.Serializer):
    painting_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, required=False, default=1)


class MergeCartInputSerializer(serializers.Serializer):
    items = GuestCartLineSerializer(many=True, allow_empty=True)
