from rest_framework import serializers

from common.validators import RATING_MAX, RATING_MIN
from paintings.models import Painting

from .models import COMMENT_MIN_LENGTH, Review


class ReviewSerializer(serializers.ModelSerializer):
    class Meta:
        model = Review
        fields = ["id", "painting", "user_name", "rating", "comment", "created_at"]
        read_only_fields = fields


class AdminReviewSerializer(serializers.ModelSerializer):
    painting_title = serializers.CharField(source="painting.title", read_only=True)

    class Meta:
        model = Review
        fields = [
            "id",
            "painting",
            "painting_title",
            "user_name",
            "user_email",
            "rating",
            "comment",
            "approved",
            "created_at",
        ]
        read_only_fields = fields


class ReviewCreateSerializer(serializers.Serializer):
    painting_id = serializers.PrimaryKeyRelatedField(queryset=Painting.objects.all())
    rating = serializers.IntegerField(min_value=RATING_MIN, max_value=RATING_MAX)
    comment = serializers.CharField()

    def validate_comment(self, value):
        value = value.strip()
        if len(value) < COMMENT_MIN_LENGTH:
            raise serializers.ValidationError(
                f"El comentario debe tener al menos {COMMENT_MIN_LENGTH} caracteres"
            )
        return value


class ReviewListResponseSerializer(serializers.Serializer):
    count = serializers.IntegerField()
    average_rating = serializers.FloatField()
    results = ReviewSerializer(many=True)


class ReviewCreateResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    review = AdminReviewSerializer()
