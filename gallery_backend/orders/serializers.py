# orders/serializers.py

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from common.validators import validate_person_name, validate_phone

from .models import Order, OrderItem


# =====================================================
# INPUT
# =====================================================
class CheckoutLineSerializer(serializers.Serializer):
    painting_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, default=1)


class ShippingInputSerializer(serializers.Serializer):
    full_name = serializers.CharField(max_length=120)
    email = serializers.EmailField()
    phone = serializers.CharField(max_length=40)
    address = serializers.CharField(max_length=255)
    city = serializers.CharField(max_length=120)
    region = serializers.CharField(max_length=120)
    postal_code = serializers.CharField(max_length=20, required=False, allow_blank=True, default="")

    def validate_full_name(self, value):
        try:
            validate_person_name(value)
        except DjangoValidationError as exc:
            raise serializers.ValidationError(exc.messages)
        return value.strip()

    def validate_phone(self, value):
        try:
            validate_phone(value)
        except DjangoValidationError as exc:
            raise serializers.ValidationError(exc.messages)
        return value.strip()


class CheckoutSerializer(serializers.Serializer):
    items = CheckoutLineSerializer(many=True, required=False, default=list)
    shipping = ShippingInputSerializer()
    payment_method = serializers.ChoiceField(choices=Order.PAYMENT_METHOD_CHOICES)
    coupon_code = serializers.CharField(required=False, allow_blank=True, default="")
    notes = serializers.CharField(required=False, allow_blank=True, default="")


class TransferProofSerializer(serializers.Serializer):
    file = serializers.FileField()


class OrderStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Order.STATUS_CHOICES)


class ShippingStatusSerializer(serializers.Serializer):
    shipping_status = serializers.ChoiceField(choices=Order.SHIPPING_STATUS_CHOICES)


class PaymentStatusSerializer(serializers.Serializer):
    payment_status = serializers.ChoiceField(choices=Order.PAYMENT_STATUS_CHOICES)


# =====================================================
# OUTPUT
# =====================================================
class OrderItemSerializer(serializers.ModelSerializer):
    painting_id = serializers.UUIDField(read_only=True, allow_null=True)

    class Meta:
        model = OrderItem
        fields = ["id", "painting_id", "title", "image_url", "unit_price", "quantity", "total_price"]
        read_only_fields = fields


class ShippingInfoSerializer(serializers.Serializer):
    full_name = serializers.CharField(source="shipping_full_name")
    email = serializers.EmailField(source="shipping_email")
    phone = serializers.CharField(source="shipping_phone")
    address = serializers.CharField(source="shipping_address")
    city = serializers.CharField(source="shipping_city")
    region = serializers.CharField(source="shipping_region")
    postal_code = serializers.CharField(source="shipping_postal_code")


class PaymentInfoSerializer(serializers.Serializer):
    method = serializers.CharField(source="payment_method")
    status = serializers.CharField(source="payment_status")
    transaction_id = serializers.CharField()
    paid_at = serializers.DateTimeField(allow_null=True)
    transfer_proof_uploaded_at = serializers.DateTimeField(allow_null=True)


class OrderSerializer(serializers.ModelSerializer):
    """
    Customer-facing order payload. Never exposes public_access_token.
    """

    items = OrderItemSerializer(many=True, read_only=True)
    shipping = ShippingInfoSerializer(source="*", read_only=True)
    payment = PaymentInfoSerializer(source="*", read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "order_number",
            "items",
            "subtotal",
            "shipping_cost",
            "discount",
            "total",
            "coupon_code",
            "shipping",
            "payment",
            "status",
            "shipping_status",
            "notes",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class AdminOrderSerializer(OrderSerializer):
    user_email = serializers.SerializerMethodField()
    transfer_proof_url = serializers.SerializerMethodField()

    class Meta(OrderSerializer.Meta):
        fields = OrderSerializer.Meta.fields + ["user_email", "transfer_proof_url"]
        read_only_fields = fields

    def get_user_email(self, obj):
        return obj.user.email if obj.user_id else None

    def get_transfer_proof_url(self, obj):
        if not obj.transfer_proof:
            return None
        request = self.context.get("request")
        url = obj.transfer_proof.url
        return request.build_absolute_uri(url) if request else url


class CheckoutResponseSerializer(serializers.Serializer):
    order_id = serializers.UUIDField()
    order_number = serializers.CharField()
    access_token = serializers.CharField()
    confirmation_path = serializers.CharField()
    order = OrderSerializer()
