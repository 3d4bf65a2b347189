"""Tests for core permissions."""
from unittest.mock import Mock

import pytest
from django.contrib.auth.models import AnonymousUser

from apps.core.constants import Roles
from apps.core.permissions import (
    IsMasjidAdmin,
    IsPlatformAdmin,
    IsSuperAdmin,
    get_user_role,
    is_platform_admin,
    masjid_id_for,
)
from apps.donations.tests.factories import CampaignFactory, DonationFactory
from apps.masjids.tests.factories import MasjidFactory, MasjidAdminFactory
from apps.users.tests.factories import UserFactory, PlatformAdminFactory


def make_request(user):
    request = Mock()
    request.user = user
    return request


@pytest.mark.django_db
class TestRoles:

    def test_regular_user(self):
        user = UserFactory()
        assert get_user_role(user) == Roles.USER
        assert not is_platform_admin(user)

    def test_profile_admin(self):
        assert is_platform_admin(PlatformAdminFactory())

    def test_superuser_is_super_admin(self):
        user = UserFactory(is_superuser=True)
        assert get_user_role(user) == Roles.SUPER_ADMIN

    def test_anonymous_is_not_admin(self):
        assert not is_platform_admin(AnonymousUser())


@pytest.mark.django_db
class TestPermissionClasses:

    def test_platform_admin_permission(self):
        view = Mock()
        assert IsPlatformAdmin().has_permission(make_request(PlatformAdminFactory()), view)
        assert not IsPlatformAdmin().has_permission(make_request(UserFactory()), view)
        assert not IsPlatformAdmin().has_permission(make_request(AnonymousUser()), view)

    def test_super_admin_permission(self):
        view = Mock()
        assert IsSuperAdmin().has_permission(make_request(PlatformAdminFactory(role=Roles.SUPER_ADMIN)), view)
        assert not IsSuperAdmin().has_permission(make_request(PlatformAdminFactory()), view)

    def test_masjid_admin_object_permission(self):
        admin = MasjidAdminFactory()
        campaign = CampaignFactory(masjid=admin.masjid)
        donation = DonationFactory(campaign=campaign)
        permission = IsMasjidAdmin()

        for obj in (admin.masjid, campaign, donation):
            assert permission.has_object_permission(make_request(admin.user), Mock(), obj)
            assert not permission.has_object_permission(make_request(UserFactory()), Mock(), obj)

    def test_platform_admin_passes_masjid_check(self):
        assert IsMasjidAdmin().has_object_permission(
            make_request(PlatformAdminFactory()), Mock(), MasjidFactory()
        )


@pytest.mark.django_db
class TestMasjidIdFor:

    def test_resolves_each_owner_type(self):
        campaign = CampaignFactory()
        donation = DonationFactory(campaign=campaign)
        assert masjid_id_for(campaign.masjid) == campaign.masjid_id
        assert masjid_id_for(campaign) == campaign.masjid_id
        assert masjid_id_for(donation) == campaign.masjid_id

    def test_unknown_object(self):
        assert masjid_id_for(object()) is None
