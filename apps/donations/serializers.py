"""DRF serializers for campaign and donation API."""
from decimal import Decimal

from rest_framework import serializers

from apps.core.constants import DonationStatus

from .models import Campaign, Donation


class CampaignListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for campaign lists."""

    masjid_name = serializers.CharField(source='masjid.name', read_only=True)
    progress_percentage = serializers.IntegerField(read_only=True)

    class Meta:
        model = Campaign
        fields = [
            'id',
            'title',
            'goal',
            'raised',
            'progress_percentage',
            'is_active',
            'start_date',
            'end_date',
            'masjid',
            'masjid_name',
        ]


class CampaignSerializer(serializers.ModelSerializer):
    """Full campaign serializer. ``raised`` is owned by the ledger and never writable."""

    masjid_name = serializers.CharField(source='masjid.name', read_only=True)
    progress_percentage = serializers.IntegerField(read_only=True)
    is_ongoing = serializers.BooleanField(read_only=True)

    class Meta:
        model = Campaign
        fields = [
            'id',
            'title',
            'description',
            'goal',
            'raised',
            'progress_percentage',
            'start_date',
            'end_date',
            'is_active',
            'is_ongoing',
            'cover_image_url',
            'masjid',
            'masjid_name',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['raised', 'created_at', 'updated_at']

    def validate(self, attrs):
        start = attrs.get('start_date', getattr(self.instance, 'start_date', None))
        end = attrs.get('end_date', getattr(self.instance, 'end_date', None))
        if start and end and end < start:
            raise serializers.ValidationError({'end_date': 'End date cannot be before start date.'})
        return attrs


class CampaignUpdateSerializer(CampaignSerializer):
    """The owning masjid is fixed once a campaign exists."""

    class Meta(CampaignSerializer.Meta):
        read_only_fields = ['raised', 'masjid', 'created_at', 'updated_at']


class DonationSerializer(serializers.ModelSerializer):
    """Donation as returned by the API. Anonymous donors are not disclosed."""

    campaign_title = serializers.CharField(source='campaign.title', read_only=True)
    donor_name = serializers.SerializerMethodField()

    class Meta:
        model = Donation
        fields = [
            'id',
            'amount',
            'payment_method',
            'status',
            'transaction_id',
            'is_anonymous',
            'message',
            'donor',
            'donor_name',
            'campaign',
            'campaign_title',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_donor_name(self, obj):
        if obj.is_anonymous or obj.donor is None:
            return None
        return obj.donor.get_full_name() or obj.donor.get_username()

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if instance.is_anonymous:
            data['donor'] = None
        return data


class DonationCreateSerializer(serializers.Serializer):
    """Input for a direct donation or a payment intent. Campaign comes from the URL or the body."""

    amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0.01'))
    payment_method = serializers.CharField(max_length=50)
    is_anonymous = serializers.BooleanField(default=False)
    message = serializers.CharField(max_length=500, required=False, allow_blank=True, default='')


class DonationStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=DonationStatus.CHOICES)
    transaction_id = serializers.CharField(max_length=100, required=False, allow_blank=True)
