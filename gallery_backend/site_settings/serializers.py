from rest_framework import serializers


class SiteSettingInputSerializer(serializers.Serializer):
    data = serializers.DictField()


class SiteSettingSerializer(serializers.Serializer):
    key = serializers.CharField()
    data = serializers.DictField()
    updated_at = serializers.DateTimeField(allow_null=True)
