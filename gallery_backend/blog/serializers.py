from rest_framework import serializers

from common.identifiers import generate_slug, unique_slug

from .models import BlogPost


class TagsField(serializers.Field):
    """Accepts ["a", "b"] or "a, b"; always returns a list."""

    def to_internal_value(self, data):
        if data is None or data == "":
            return []
        if isinstance(data, str):
            items = data.split(",")
        elif isinstance(data, (list, tuple)):
            items = data
        else:
            raise serializers.ValidationError("Las etiquetas deben ser una lista o texto separado por comas")
        return [str(t).strip() for t in items if str(t).strip()]

    def to_representation(self, value):
        return list(value or [])


class BlogPostListSerializer(serializers.ModelSerializer):
    tags = TagsField(required=False)

    class Meta:
        model = BlogPost
        fields = ["id", "title", "slug", "excerpt", "cover_image", "category", "tags", "published_at"]
        read_only_fields = fields


class BlogPostDetailSerializer(BlogPostListSerializer):
    author_name = serializers.SerializerMethodField()

    class Meta(BlogPostListSerializer.Meta):
        fields = BlogPostListSerializer.Meta.fields + ["content", "author_name", "view_count", "updated_at"]
        read_only_fields = fields

    def get_author_name(self, obj):
        return obj.author.display_name if obj.author_id else None


class AdminBlogPostSerializer(serializers.ModelSerializer):
    tags = TagsField(required=False)
    slug = serializers.CharField(max_length=220, required=False, allow_blank=True)

    class Meta:
        model = BlogPost
        fields = [
            "id",
            "title",
            "slug",
            "excerpt",
            "content",
            "cover_image",
            "category",
            "tags",
            "published",
            "published_at",
            "author",
            "view_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "published_at", "author", "view_count", "created_at", "updated_at"]

    def validate(self, attrs):
        title = attrs.get("title", getattr(self.instance, "title", ""))
        requested = generate_slug(attrs.get("slug") or "")
        if "slug" in attrs or self.instance is None:
            attrs["slug"] = unique_slug(
                BlogPost,
                requested or title,
                exclude_pk=getattr(self.instance, "pk", None),
                fallback="post",
            )
        return attrs
