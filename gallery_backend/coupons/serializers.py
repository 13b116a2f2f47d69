from rest_framework import serializers

from .models import Coupon, normalize_code


class CouponSerializer(serializers.ModelSerializer):
    limit_reached = serializers.BooleanField(read_only=True)

    class Meta:
        model = Coupon
        fields = [
            "id",
            "code",
            "description",
            "discount_type",
            "discount_value",
            "min_purchase",
            "max_discount",
            "valid_from",
            "valid_until",
            "usage_limit",
            "usage_count",
            "limit_reached",
            "is_active",
            "created_at",
        ]
        read_only_fields = ["id", "usage_count", "limit_reached", "created_at"]

    def validate_code(self, value):
        value = normalize_code(value)
        qs = Coupon.objects.filter(code=value)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError("Ya existe un cupón con este código")
        return value

    def validate(self, attrs):
        discount_type = attrs.get("discount_type", getattr(self.instance, "discount_type", None))
        value = attrs.get("discount_value", getattr(self.instance, "discount_value", None))
        if value is not None and value <= 0:
            raise serializers.ValidationError({"discount_value": "El descuento debe ser mayor a cero"})
        if discount_type == Coupon.TYPE_PERCENTAGE and value is not None and value > 100:
            raise serializers.ValidationError({"discount_value": "El porcentaje no puede superar 100"})

        start = attrs.get("valid_from", getattr(self.instance, "valid_from", None))
        end = attrs.get("valid_until", getattr(self.instance, "valid_until", None))
        if start and end and end < start:
            raise serializers.ValidationError({"valid_until": "La fecha de término debe ser posterior al inicio"})
        return attrs


class CouponValidateInputSerializer(serializers.Serializer):
    code = serializers.CharField()
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)


class CouponSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Coupon
        fields = ["id", "code", "description", "discount_type", "discount_value", "max_discount", "min_purchase"]
        read_only_fields = fields


class CouponValidateResponseSerializer(serializers.Serializer):
    valid = serializers.BooleanField()
    coupon = CouponSummarySerializer()
    discount = serializers.DecimalField(max_digits=12, decimal_places=2)
