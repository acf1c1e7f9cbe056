from rest_framework import serializers

from apps.creatives.serializers import CreativeSerializer
from .models import Campaign


class CampaignSerializer(serializers.ModelSerializer):
    advertiser_id = serializers.IntegerField(read_only=True)
    creative = CreativeSerializer(read_only=True)
    is_running = serializers.SerializerMethodField()
    is_upcoming = serializers.SerializerMethodField()

    class Meta:
        model = Campaign
        fields = (
            'id', 'advertiser_id', 'name', 'description', 'budget', 'status',
            'start_date', 'end_date', 'creative', 'is_running', 'is_upcoming',
            'created_at', 'updated_at',
        )
        read_only_fields = ('id', 'advertiser_id', 'creative', 'created_at', 'updated_at')

    def get_is_running(self, obj):
        return obj.is_running()

    def get_is_upcoming(self, obj):
        return obj.is_upcoming()

    def validate_budget(self, value):
        if value <= 0:
            raise serializers.ValidationError('Budget must be greater than zero.')
        return value

    def validate(self, data):
        start = data.get('start_date', getattr(self.instance, 'start_date', None))
        end = data.get('end_date', getattr(self.instance, 'end_date', None))
        if start and end and end < start:
            raise serializers.ValidationError({'end_date': 'end_date cannot be before start_date'})
        return data


class CampaignCreateSerializer(CampaignSerializer):
    """Campaign fields plus an optional creative upload."""

    creative_file = serializers.FileField(write_only=True, required=False)
    creative_title = serializers.CharField(write_only=True, required=False, allow_blank=True, max_length=200)
    creative_description = serializers.CharField(write_only=True, required=False, allow_blank=True)

    class Meta(CampaignSerializer.Meta):
        fields = CampaignSerializer.Meta.fields + ('creative_file', 'creative_title', 'creative_description')
        read_only_fields = CampaignSerializer.Meta.read_only_fields + ('status',)


class CreativeUploadSerializer(serializers.Serializer):
    creative_file = serializers.FileField()
    creative_title = serializers.CharField(required=False, allow_blank=True, max_length=200)
    creative_description = serializers.CharField(required=False, allow_blank=True)
