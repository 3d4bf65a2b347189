"""
Tests for donations API views.
"""
from decimal import Decimal

import pytest
from rest_framework import status
from rest_framework.test import APIClient

from apps.core.constants import DonationStatus
from apps.donations.models import Campaign, Donation
from apps.masjids.tests.factories import MasjidFactory, MasjidAdminFactory
from apps.users.tests.factories import UserFactory, PlatformAdminFactory

from .factories import (
    CampaignFactory,
    InactiveCampaignFactory,
    DonationFactory,
    CompletedDonationFactory,
)

CAMPAIGNS_URL = '/api/v1/donations/campaigns/'
DONATIONS_URL = '/api/v1/donations/donations/'


def make_api_client(user=None):
    """Create an APIClient, optionally authenticated."""
    client = APIClient()
    if user:
        client.force_authenticate(user=user)
    return client


# =============================================================================
# CAMPAIGN VIEWSET TESTS
# =============================================================================

@pytest.mark.django_db
class TestCampaignList:

    def test_list_is_public(self):
        CampaignFactory.create_batch(2)
        response = make_api_client().get(CAMPAIGNS_URL)
        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 2

    def test_active_only_filter(self):
        active = CampaignFactory()
        InactiveCampaignFactory()
        response = make_api_client().get(CAMPAIGNS_URL, {'active_only': 'true'})
        ids = [c['id'] for c in response.data['results']]
        assert ids == [str(active.pk)]

    def test_list_by_masjid(self):
        masjid = MasjidFactory()
        own = CampaignFactory(masjid=masjid)
        CampaignFactory()
        response = make_api_client().get(f'{CAMPAIGNS_URL}masjid/{masjid.pk}/')
        assert response.status_code == status.HTTP_200_OK
        assert [c['id'] for c in response.data['results']] == [str(own.pk)]

    def test_list_by_unknown_masjid_is_404(self):
        response = make_api_client().get(f'{CAMPAIGNS_URL}masjid/00000000-0000-0000-0000-000000000000/')
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_retrieve_unknown_is_404(self):
        response = make_api_client().get(f'{CAMPAIGNS_URL}not-a-uuid/')
        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestCampaignMutations:

    def payload(self, masjid):
        return {
            'title': 'Ramadan iftar',
            'goal': '2500.00',
            'masjid': str(masjid.pk),
        }

    def test_masjid_admin_creates_campaign(self):
        admin = MasjidAdminFactory()
        response = make_api_client(admin.user).post(CAMPAIGNS_URL, self.payload(admin.masjid), format='json')
        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['raised'] == '0.00'

    def test_raised_cannot_be_set_on_create(self):
        admin = MasjidAdminFactory()
        data = {**self.payload(admin.masjid), 'raised': '500.00'}
        response = make_api_client(admin.user).post(CAMPAIGNS_URL, data, format='json')
        assert response.status_code == status.HTTP_201_CREATED
        assert Campaign.objects.get(pk=response.data['id']).raised == Decimal('0.00')

    def test_other_user_cannot_create(self):
        response = make_api_client(UserFactory()).post(CAMPAIGNS_URL, self.payload(MasjidFactory()), format='json')
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_unauthenticated_cannot_create(self):
        response = make_api_client().post(CAMPAIGNS_URL, self.payload(MasjidFactory()), format='json')
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_invalid_goal_is_rejected(self):
        admin = MasjidAdminFactory()
        data = {**self.payload(admin.masjid), 'goal': '0.00'}
        response = make_api_client(admin.user).post(CAMPAIGNS_URL, data, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'goal' in response.data['detail']

    def test_masjid_admin_updates_campaign(self):
        admin = MasjidAdminFactory()
        campaign = CampaignFactory(masjid=admin.masjid)
        response = make_api_client(admin.user).patch(
            f'{CAMPAIGNS_URL}{campaign.pk}/', {'is_active': False}, format='json'
        )
        assert response.status_code == status.HTTP_200_OK
        campaign.refresh_from_db()
        assert campaign.is_active is False

    def test_other_user_cannot_update(self):
        campaign = CampaignFactory()
        response = make_api_client(UserFactory()).patch(
            f'{CAMPAIGNS_URL}{campaign.pk}/', {'title': 'x'}, format='json'
        )
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_delete_with_donations_is_forbidden(self):
        admin = MasjidAdminFactory()
        campaign = CampaignFactory(masjid=admin.masjid)
        DonationFactory(campaign=campaign)
        response = make_api_client(admin.user).delete(f'{CAMPAIGNS_URL}{campaign.pk}/')
        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Campaign.objects.filter(pk=campaign.pk).exists()

    def test_delete_without_donations(self):
        admin = MasjidAdminFactory()
        campaign = CampaignFactory(masjid=admin.masjid)
        response = make_api_client(admin.user).delete(f'{CAMPAIGNS_URL}{campaign.pk}/')
        assert response.status_code == status.HTTP_204_NO_CONTENT


@pytest.mark.django_db
class TestCampaignDonations:

    def test_anonymous_visitor_can_donate(self):
        campaign = CampaignFactory()
        response = make_api_client().post(
            f'{CAMPAIGNS_URL}{campaign.pk}/donations/',
            {'amount': '100.00', 'payment_method': 'card', 'is_anonymous': True},
            format='json',
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['status'] == DonationStatus.COMPLETED
        assert response.data['donor'] is None
        campaign.refresh_from_db()
        assert campaign.raised == Decimal('100.00')

    def test_authenticated_donor_is_recorded(self):
        user = UserFactory()
        campaign = CampaignFactory()
        response = make_api_client(user).post(
            f'{CAMPAIGNS_URL}{campaign.pk}/donations/',
            {'amount': '15.00', 'payment_method': 'card'},
            format='json',
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert Donation.objects.get(pk=response.data['id']).donor == user

    def test_inactive_campaign_is_forbidden(self):
        campaign = InactiveCampaignFactory()
        response = make_api_client().post(
            f'{CAMPAIGNS_URL}{campaign.pk}/donations/',
            {'amount': '15.00', 'payment_method': 'card'},
            format='json',
        )
        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Donation.objects.count() == 0

    def test_negative_amount_is_rejected(self):
        campaign = CampaignFactory()
        response = make_api_client().post(
            f'{CAMPAIGNS_URL}{campaign.pk}/donations/',
            {'amount': '-5.00', 'payment_method': 'card'},
            format='json',
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'amount' in response.data['detail']

    def test_listing_requires_authentication(self):
        campaign = CampaignFactory()
        response = make_api_client().get(f'{CAMPAIGNS_URL}{campaign.pk}/donations/')
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_listing_returns_campaign_donations(self):
        campaign = CampaignFactory()
        DonationFactory.create_batch(2, campaign=campaign)
        DonationFactory()
        response = make_api_client(UserFactory()).get(f'{CAMPAIGNS_URL}{campaign.pk}/donations/')
        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 2


# =============================================================================
# DONATION VIEWSET TESTS
# =============================================================================

@pytest.mark.django_db
class TestDonationViewSet:

    def test_donor_sees_own_donations_only(self):
        user = UserFactory()
        own = DonationFactory(donor=user)
        other = DonationFactory()
        response = make_api_client(user).get(DONATIONS_URL)
        ids = [d['id'] for d in response.data['results']]
        assert str(own.pk) in ids
        assert str(other.pk) not in ids

    def test_masjid_admin_sees_campaign_donations(self):
        admin = MasjidAdminFactory()
        donation = DonationFactory(campaign=CampaignFactory(masjid=admin.masjid))
        response = make_api_client(admin.user).get(f'{DONATIONS_URL}{donation.pk}/')
        assert response.status_code == status.HTTP_200_OK

    def test_platform_admin_updates_status(self):
        donation = DonationFactory(amount=Decimal('60.00'))
        response = make_api_client(PlatformAdminFactory()).post(
            f'{DONATIONS_URL}{donation.pk}/status/',
            {'status': DonationStatus.COMPLETED, 'transaction_id': 'txn_manual'},
            format='json',
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.data['transaction_id'] == 'txn_manual'
        donation.campaign.refresh_from_db()
        assert donation.campaign.raised == Decimal('60.00')

    def test_invalid_transition_is_conflict(self):
        donation = DonationFactory(status=DonationStatus.FAILED)
        response = make_api_client(PlatformAdminFactory()).post(
            f'{DONATIONS_URL}{donation.pk}/status/',
            {'status': DonationStatus.COMPLETED},
            format='json',
        )
        assert response.status_code == status.HTTP_409_CONFLICT

    def test_regular_user_cannot_update_status(self):
        donation = DonationFactory()
        response = make_api_client(UserFactory()).post(
            f'{DONATIONS_URL}{donation.pk}/status/',
            {'status': DonationStatus.COMPLETED},
            format='json',
        )
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_masjid_admin_refunds(self):
        admin = MasjidAdminFactory()
        campaign = CampaignFactory(masjid=admin.masjid)
        Campaign.objects.filter(pk=campaign.pk).update(raised=Decimal('100.00'))
        donation = CompletedDonationFactory(campaign=campaign, amount=Decimal('100.00'))

        response = make_api_client(admin.user).post(f'{DONATIONS_URL}{donation.pk}/refund/')
        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == DonationStatus.REFUNDED
        campaign.refresh_from_db()
        assert campaign.raised == Decimal('0.00')

    def test_other_user_cannot_refund(self):
        donation = CompletedDonationFactory()
        response = make_api_client(UserFactory()).post(f'{DONATIONS_URL}{donation.pk}/refund/')
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_error_body_shape(self):
        response = make_api_client(UserFactory()).get(f'{DONATIONS_URL}00000000-0000-0000-0000-000000000000/')
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['status_code'] == 404
        assert response.data['path'].startswith(DONATIONS_URL)
        assert 'timestamp' in response.data
