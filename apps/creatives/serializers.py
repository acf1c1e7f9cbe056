from rest_framework import serializers
from .models import Creative


class CreativeSerializer(serializers.ModelSerializer):
    is_video = serializers.BooleanField(read_only=True)

    class Meta:
        model = Creative
        fields = (
            'id', 'campaign', 'title', 'description', 'public_url', 'file_type',
            'storage_path', 'duration_seconds', 'is_video', 'created_at',
        )
        read_only_fields = fields
