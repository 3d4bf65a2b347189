"""Serializers for payment details and payment intents."""
from rest_framework import serializers

from apps.donations.serializers import DonationCreateSerializer

from .models import PaymentDetail


class PaymentDetailSerializer(serializers.ModelSerializer):
    donation_status = serializers.CharField(source='donation.status', read_only=True)

    class Meta:
        model = PaymentDetail
        fields = [
            'id', 'provider', 'payment_method_id', 'receipt_url', 'metadata',
            'donation', 'donation_status', 'created_at', 'updated_at',
        ]
        read_only_fields = ['donation', 'created_at', 'updated_at']


class PaymentDetailCreateSerializer(serializers.ModelSerializer):
    """The donation is looked up by the service so duplicates surface as a conflict."""

    donation_id = serializers.UUIDField(write_only=True)

    class Meta:
        model = PaymentDetail
        fields = ['donation_id', 'provider', 'payment_method_id', 'receipt_url', 'metadata']


class CreatePaymentIntentSerializer(DonationCreateSerializer):
    campaign_id = serializers.UUIDField()


class PaymentIntentSerializer(serializers.Serializer):
    client_secret = serializers.CharField()
    payment_intent_id = serializers.CharField()
    donation_id = serializers.UUIDField()
