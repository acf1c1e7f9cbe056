from rest_framework import serializers

from apps.bookings.models import Booking
from apps.creatives.serializers import CreativeSerializer
from .models import Screen


class ScreenSerializer(serializers.ModelSerializer):
    owner_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Screen
        fields = (
            'id', 'owner_id', 'name', 'location', 'address', 'screen_type', 'size_inches',
            'resolution', 'hourly_rate', 'currency', 'is_active', 'created_at', 'updated_at',
        )
        read_only_fields = ('id', 'owner_id', 'is_active', 'created_at', 'updated_at')

    def validate_hourly_rate(self, value):
        if value < 0:
            raise serializers.ValidationError('Hourly rate cannot be negative.')
        return value

    def validate_currency(self, value):
        return value.upper()


class DiscoveryScreenSerializer(ScreenSerializer):
    owner_business_name = serializers.CharField(source='owner.business_name', read_only=True)

    class Meta(ScreenSerializer.Meta):
        fields = ScreenSerializer.Meta.fields + ('owner_business_name',)
        read_only_fields = fields


class BookingIntentSerializer(serializers.Serializer):
    screen_ids = serializers.ListField(child=serializers.IntegerField(), allow_empty=True)

    def validate_screen_ids(self, value):
        if not value:
            raise serializers.ValidationError('Please select at least one screen to proceed with booking.')
        ids = list(dict.fromkeys(value))
        found = set(Screen.objects.active().filter(pk__in=ids).values_list('pk', flat=True))
        missing = [pk for pk in ids if pk not in found]
        if missing:
            raise serializers.ValidationError(f"Screens not available for booking: {missing}")
        return ids


class ScreenContentSerializer(serializers.ModelSerializer):
    """Approved booking as shown in the owner's playback schedule."""

    screen_id = serializers.IntegerField(read_only=True)
    screen_name = serializers.CharField(source='screen.name', read_only=True)
    campaign_id = serializers.IntegerField(read_only=True)
    campaign_name = serializers.CharField(source='campaign.name', read_only=True)
    advertiser_business_name = serializers.CharField(source='campaign.advertiser.business_name', read_only=True)
    creative = CreativeSerializer(source='campaign.creative', read_only=True)
    is_playing = serializers.SerializerMethodField()

    class Meta:
        model = Booking
        fields = (
            'id', 'screen_id', 'screen_name', 'campaign_id', 'campaign_name',
            'advertiser_business_name', 'creative', 'start_datetime', 'end_datetime',
            'status', 'is_playing',
        )
        read_only_fields = fields

    def get_is_playing(self, obj):
        now = self.context['now']
        return obj.start_datetime <= now <= obj.end_datetime
