# paintings/serializers.py

"""
PAINTING SERIALIZERS

- PaintingSerializer: list rows + admin writes (in_stock derived, never written)
- PaintingDetailSerializer: adds approved-review summary for the detail page
"""

from rest_framework import serializers

from reviews.services import rating_summary

from .models import Painting


class PaintingSerializer(serializers.ModelSerializer):
    in_stock = serializers.BooleanField(read_only=True)
    images = serializers.ListField(
        child=serializers.CharField(max_length=500), required=False, allow_empty=True
    )

    class Meta:
        model = Painting
        fields = [
            "id",
            "title",
            "slug",
            "description",
            "image_url",
            "images",
            "price",
            "width_cm",
            "height_cm",
            "orientation",
            "category",
            "available",
            "stock",
            "in_stock",
            "featured",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "slug", "in_stock", "created_at", "updated_at"]

    def validate_price(self, value):
        if value is None or value <= 0:
            raise serializers.ValidationError("El precio debe ser mayor a cero")
        return value

    def validate_width_cm(self, value):
        if value is None or value <= 0:
            raise serializers.ValidationError("Las dimensiones deben ser mayores a cero")
        return value

    def validate_height_cm(self, value):
        if value is None or value <= 0:
            raise serializers.ValidationError("Las dimensiones deben ser mayores a cero")
        return value

    def validate(self, attrs):
        image_url = attrs.get("image_url", getattr(self.instance, "image_url", "") or "")
        images = attrs.get("images", getattr(self.instance, "images", None) or [])

        if "images" in attrs and images and "image_url" not in attrs:
            attrs["image_url"] = images[0]
        elif not images and image_url:
            attrs["images"] = [image_url]

        return attrs


class PaintingDetailSerializer(PaintingSerializer):
    reviews_summary = serializers.SerializerMethodField()

    class Meta(PaintingSerializer.Meta):
        fields = PaintingSerializer.Meta.fields + ["reviews_summary"]

    def get_reviews_summary(self, obj) -> dict:
        return rating_summary(obj.reviews.all())


class CategorySerializer(serializers.Serializer):
    value = serializers.CharField()
    label = serializers.CharField()


class ImageUploadSerializer(serializers.Serializer):
    file = serializers.FileField()
