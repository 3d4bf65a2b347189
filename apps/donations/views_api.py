"""
Donations API Views - REST API endpoints for campaigns and donations.

ViewSets:
- CampaignViewSet: Campaign management and donating to a campaign
- DonationViewSet: Donation lookup, status updates and refunds

Endpoints follow the namespace: api:v1:donations:resource-name
"""
import logging

from django.db.models import Q
from rest_framework import mixins, viewsets, status, filters
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend

from apps.core.permissions import IsMasjidAdmin, IsPlatformAdmin, is_platform_admin

from .models import Donation
from .serializers import (
    CampaignSerializer,
    CampaignListSerializer,
    CampaignUpdateSerializer,
    DonationSerializer,
    DonationCreateSerializer,
    DonationStatusSerializer,
)
from .services import CampaignService, DonationService

logger = logging.getLogger(__name__)


def _flag(value):
    return str(value).lower() in ('1', 'true', 'yes')


# =============================================================================
# CAMPAIGN VIEWSET
# =============================================================================

class CampaignViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Campaign operations.

    Provides:
    - list: GET /api/v1/donations/campaigns/?active_only=true
    - retrieve: GET /api/v1/donations/campaigns/{uuid}/
    - create: POST /api/v1/donations/campaigns/ (masjid admin)
    - update: PATCH /api/v1/donations/campaigns/{uuid}/ (masjid admin)
    - destroy: DELETE /api/v1/donations/campaigns/{uuid}/ (masjid admin, no donations)

    Custom actions:
    - by_masjid: GET /api/v1/donations/campaigns/masjid/{masjid_uuid}/
    - donations: GET (authenticated) / POST (public) /api/v1/donations/campaigns/{uuid}/donations/
    """

    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['masjid', 'is_active']
    search_fields = ['title', 'description']
    ordering_fields = ['created_at', 'goal', 'raised', 'start_date']
    ordering = ['-created_at']

    def get_queryset(self):
        active_only = _flag(self.request.query_params.get('active_only', ''))
        return CampaignService.list_campaigns(active_only=active_only)

    def get_serializer_class(self):
        if self.action in ['list', 'by_masjid']:
            return CampaignListSerializer
        if self.action in ['update', 'partial_update']:
            return CampaignUpdateSerializer
        if self.action == 'donations' and self.request.method == 'POST':
            return DonationCreateSerializer
        if self.action == 'donations':
            return DonationSerializer
        return CampaignSerializer

    def get_permissions(self):
        if self.action in ['list', 'retrieve', 'by_masjid']:
            return [AllowAny()]
        if self.action == 'donations' and self.request.method == 'POST':
            return [AllowAny()]
        return [IsAuthenticated()]

    def perform_create(self, serializer):
        serializer.instance = CampaignService.create_campaign(serializer.validated_data, self.request.user)

    def perform_update(self, serializer):
        serializer.instance = CampaignService.update_campaign(
            serializer.instance.pk, serializer.validated_data, self.request.user
        )

    def perform_destroy(self, instance):
        CampaignService.delete_campaign(instance.pk, self.request.user)

    @action(detail=False, methods=['get'], url_path=r'masjid/(?P<masjid_id>[^/.]+)')
    def by_masjid(self, request, masjid_id=None):
        """Campaigns of one masjid."""
        queryset = self.filter_queryset(CampaignService.list_by_masjid(masjid_id))
        page = self.paginate_queryset(queryset)
        if page is not None:
            serializer = self.get_serializer(page, many=True)
            return self.get_paginated_response(serializer.data)
        return Response(self.get_serializer(queryset, many=True).data)

    @action(detail=True, methods=['get', 'post'])
    def donations(self, request, pk=None):
        """List the donations of a campaign, or donate to it."""
        if request.method == 'GET':
            queryset = CampaignService.list_donations(pk)
            page = self.paginate_queryset(queryset)
            if page is not None:
                return self.get_paginated_response(DonationSerializer(page, many=True).data)
            return Response(DonationSerializer(queryset, many=True).data)

        serializer = DonationCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        donor = request.user if request.user.is_authenticated else None
        donation = DonationService.create_donation(
            pk,
            donor=donor,
            **serializer.validated_data,
        )
        return Response(DonationSerializer(donation).data, status=status.HTTP_201_CREATED)


# =============================================================================
# DONATION VIEWSET
# =============================================================================

class DonationViewSet(mixins.ListModelMixin,
                      mixins.RetrieveModelMixin,
                      viewsets.GenericViewSet):
    """
    ViewSet for Donation lookups and lifecycle actions.

    Provides:
    - list: GET /api/v1/donations/donations/
    - retrieve: GET /api/v1/donations/donations/{uuid}/

    Custom actions:
    - set_status: POST /api/v1/donations/donations/{uuid}/status/ (platform admin)
    - refund: POST /api/v1/donations/donations/{uuid}/refund/ (masjid admin)
    """

    serializer_class = DonationSerializer
    filter_backends = [DjangoFilterBackend, filters.OrderingFilter]
    filterset_fields = ['status', 'campaign', 'payment_method']
    ordering_fields = ['created_at', 'amount']
    ordering = ['-created_at']

    def get_queryset(self):
        """Donors see their own donations, masjid admins those of their campaigns."""
        user = self.request.user
        queryset = Donation.objects.select_related('campaign', 'donor')
        if getattr(self, 'swagger_fake_view', False):
            return queryset.none()
        if is_platform_admin(user):
            return queryset
        return queryset.filter(
            Q(donor=user) | Q(campaign__masjid__admins__user=user)
        ).distinct()

    def get_permissions(self):
        if self.action == 'set_status':
            return [IsAuthenticated(), IsPlatformAdmin()]
        if self.action == 'refund':
            return [IsMasjidAdmin()]
        return [IsAuthenticated()]

    @action(detail=True, methods=['post'], url_path='status')
    def set_status(self, request, pk=None):
        """Drive a donation through its lifecycle manually."""
        serializer = DonationStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        donation = DonationService.update_donation_status(
            pk,
            serializer.validated_data['status'],
            transaction_id=serializer.validated_data.get('transaction_id') or None,
        )
        return Response(DonationSerializer(donation).data)

    @action(detail=True, methods=['post'])
    def refund(self, request, pk=None):
        """Refund a completed donation; its amount leaves the campaign total."""
        donation = DonationService.get_donation(pk)
        self.check_object_permissions(request, donation)
        donation = DonationService.refund_donation(donation.pk)
        logger.info(f'Donation {donation.pk} refunded by user {request.user.pk}')
        return Response(DonationSerializer(donation).data)
