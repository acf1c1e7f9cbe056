from rest_framework import serializers

from apps.campaigns.models import Campaign
from apps.creatives.serializers import CreativeSerializer
from apps.screens.models import Screen
from .models import Booking
from .partition import display_status, partition_of
from .services import TRANSITION_TARGETS


class BookingCampaignSerializer(serializers.ModelSerializer):
    advertiser_id = serializers.IntegerField(read_only=True)
    advertiser_business_name = serializers.CharField(source='advertiser.business_name', read_only=True)
    advertiser_contact_email = serializers.CharField(source='advertiser.contact_email', read_only=True)
    creative = CreativeSerializer(read_only=True)

    class Meta:
        model = Campaign
        fields = (
            'id', 'name', 'advertiser_id', 'advertiser_business_name',
            'advertiser_contact_email', 'creative',
        )


class BookingScreenSerializer(serializers.ModelSerializer):
    owner_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Screen
        fields = ('id', 'name', 'location', 'owner_id')


class BookingSerializer(serializers.ModelSerializer):
    campaign = BookingCampaignSerializer(read_only=True)
    screen = BookingScreenSerializer(read_only=True)
    display_status = serializers.SerializerMethodField()
    partition = serializers.SerializerMethodField()

    class Meta:
        model = Booking
        fields = (
            'id', 'campaign', 'screen', 'start_datetime', 'end_datetime', 'total_cost',
            'status', 'display_status', 'partition', 'created_at', 'updated_at',
        )
        read_only_fields = fields

    def get_display_status(self, obj):
        return display_status(obj, self.context.get('now'))

    def get_partition(self, obj):
        return partition_of(obj, self.context.get('now'))


class BookingRequestSerializer(serializers.Serializer):
    campaign = serializers.PrimaryKeyRelatedField(queryset=Campaign.objects.none())
    screen = serializers.PrimaryKeyRelatedField(queryset=Screen.objects.active())
    start_datetime = serializers.DateTimeField()
    end_datetime = serializers.DateTimeField()
    total_cost = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        profile = self.context.get('profile')
        if profile is not None:
            self.fields['campaign'].queryset = Campaign.objects.filter(advertiser=profile)

    def validate(self, data):
        if data['end_datetime'] <= data['start_datetime']:
            raise serializers.ValidationError({'end_datetime': 'end_datetime must be after start_datetime'})
        return data


class BookingTransitionSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=TRANSITION_TARGETS)
