"""Tests for users API views."""
import pytest
from django.contrib.auth import get_user_model
from rest_framework import status
from rest_framework.test import APIClient

from apps.core.constants import Roles
from apps.users.models import UserProfile

from .factories import UserFactory, PlatformAdminFactory

User = get_user_model()

USERS_URL = '/api/v1/users/users/'
PROFILE_URL = f'{USERS_URL}profile/'


def make_api_client(user=None):
    client = APIClient()
    if user:
        client.force_authenticate(user=user)
    return client


@pytest.mark.django_db
class TestProfileSignal:

    def test_new_user_gets_profile(self):
        user = UserFactory()
        assert UserProfile.objects.get(user=user).role == Roles.USER

    def test_superuser_profile_is_super_admin(self):
        user = User.objects.create_superuser('root', 'root@example.com', 'pass')
        assert user.profile.role == Roles.SUPER_ADMIN
        assert user.profile.is_platform_admin


@pytest.mark.django_db
class TestOwnProfile:

    def test_requires_authentication(self):
        response = make_api_client().get(PROFILE_URL)
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_get_own_profile(self):
        user = UserFactory(first_name='Amina', last_name='Yusuf')
        response = make_api_client(user).get(PROFILE_URL)
        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == user.email
        assert response.data['full_name'] == 'Amina Yusuf'

    def test_patch_updates_user_and_profile(self):
        user = UserFactory()
        response = make_api_client(user).patch(
            PROFILE_URL, {'first_name': 'Bilal', 'phone': '555-0100'}, format='json'
        )
        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.first_name == 'Bilal'
        assert user.profile.phone == '555-0100'

    def test_role_cannot_be_self_assigned(self):
        user = UserFactory()
        make_api_client(user).patch(PROFILE_URL, {'role': Roles.SUPER_ADMIN}, format='json')
        assert UserProfile.objects.get(user=user).role == Roles.USER


@pytest.mark.django_db
class TestUserAdministration:

    def test_regular_user_cannot_list(self):
        response = make_api_client(UserFactory()).get(USERS_URL)
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_platform_admin_lists_users(self):
        admin = PlatformAdminFactory()
        UserFactory.create_batch(2)
        response = make_api_client(admin).get(USERS_URL)
        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 3

    def test_platform_admin_changes_role(self):
        admin = PlatformAdminFactory()
        user = UserFactory()
        response = make_api_client(admin).patch(
            f'{USERS_URL}{user.profile.pk}/', {'role': Roles.ADMIN}, format='json'
        )
        assert response.status_code == status.HTTP_200_OK
        assert UserProfile.objects.get(user=user).role == Roles.ADMIN

    def test_platform_admin_deletes_user(self):
        admin = PlatformAdminFactory()
        user = UserFactory()
        response = make_api_client(admin).delete(f'{USERS_URL}{user.profile.pk}/')
        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not User.objects.filter(pk=user.pk).exists()
