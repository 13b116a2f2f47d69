from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from common.validators import validate_image, validate_person_name, validate_phone, validate_upload_size

from .models import CustomOrder
from .sizes import ORIENTATION_CHOICES, ORIENTATION_VERTICAL, get_size


def _run(validator, value):
    try:
        validator(value)
    except DjangoValidationError as exc:
        raise serializers.ValidationError(exc.messages)
    return value


class CanvasSizeSerializer(serializers.Serializer):
    name = serializers.CharField()
    width = serializers.IntegerField()
    height = serializers.IntegerField()
    price_multiplier = serializers.DecimalField(max_digits=5, decimal_places=2)
    price = serializers.DecimalField(max_digits=12, decimal_places=2)


class CustomOrderCreateSerializer(serializers.Serializer):
    customer_name = serializers.CharField(max_length=120)
    email = serializers.EmailField()
    phone = serializers.CharField(max_length=40)
    size = serializers.CharField()
    orientation = serializers.ChoiceField(choices=ORIENTATION_CHOICES, default=ORIENTATION_VERTICAL)
    reference_image = serializers.FileField()
    notes = serializers.CharField(required=False, allow_blank=True, default="")

    def validate_customer_name(self, value):
        return _run(validate_person_name, value).strip()

    def validate_phone(self, value):
        return _run(validate_phone, value).strip()

    def validate_size(self, value):
        size = get_size(value)
        if size is None:
            raise serializers.ValidationError("Tamaño no válido")
        return size

    def validate_reference_image(self, value):
        _run(validate_upload_size, value)
        return _run(validate_image, value)


class CustomOrderSerializer(serializers.ModelSerializer):
    reference_image_url = serializers.SerializerMethodField()

    class Meta:
        model = CustomOrder
        fields = [
            "id",
            "customer_name",
            "email",
            "phone",
            "reference_image_url",
            "size_name",
            "width_cm",
            "height_cm",
            "price_multiplier",
            "orientation",
            "total_price",
            "status",
            "notes",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_reference_image_url(self, obj):
        if not obj.reference_image:
            return None
        request = self.context.get("request")
        url = obj.reference_image.url
        return request.build_absolute_uri(url) if request else url


class CustomOrderStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=CustomOrder.STATUS_CHOICES)
