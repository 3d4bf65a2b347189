"""Masjid profile and administrator management."""
import logging

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from rest_framework.exceptions import NotFound, PermissionDenied

from apps.core.constants import MasjidAdminRole
from apps.core.exceptions import Conflict

from .models import Masjid, MasjidAdmin

logger = logging.getLogger(__name__)


class MasjidService:
    """Masjid CRUD, admin assignment and the masjid-admin access check."""

    @staticmethod
    def get_masjid(masjid_id):
        try:
            return Masjid.objects.prefetch_related('admins__user').get(pk=masjid_id)
        except (Masjid.DoesNotExist, DjangoValidationError):
            logger.error(f'Masjid with ID: {masjid_id} not found')
            raise NotFound(f'Masjid with ID: {masjid_id} not found')

    @staticmethod
    def create_masjid(data, user):
        """Create a masjid and make its creator the first ADMIN."""
        logger.info(f'Creating new masjid with name: {data.get("name")}')
        with transaction.atomic():
            masjid = Masjid.objects.create(**data)
            MasjidAdmin.objects.create(
                user=user,
                masjid=masjid,
                role=MasjidAdminRole.ADMIN,
            )
        return masjid

    @staticmethod
    def update_masjid(masjid, data):
        logger.info(f'Updating masjid with ID: {masjid.pk}')
        for field, value in data.items():
            setattr(masjid, field, value)
        masjid.save()
        return masjid

    @staticmethod
    def delete_masjid(masjid):
        """Delete a masjid with its campaigns; refused once any campaign holds donations."""
        from apps.donations.models import Donation

        if Donation.objects.filter(campaign__masjid=masjid).exists():
            logger.error(f'Cannot delete masjid with ID: {masjid.pk} because its campaigns have donations')
            raise PermissionDenied('Cannot delete a masjid whose campaigns have donations')

        logger.info(f'Deleting masjid with ID: {masjid.pk}')
        with transaction.atomic():
            masjid.campaigns.all().delete()
            masjid.delete()

    # ─── Administrators ──────────────────────────────────────────────────────

    @staticmethod
    def list_admins(masjid):
        logger.info(f'Finding all admins for masjid ID: {masjid.pk}')
        return MasjidAdmin.objects.filter(masjid=masjid).select_related('user')

    @staticmethod
    def get_admin(masjid, admin_id):
        logger.info(f'Finding admin with ID: {admin_id} for masjid ID: {masjid.pk}')
        try:
            return MasjidAdmin.objects.select_related('user').get(pk=admin_id, masjid=masjid)
        except (MasjidAdmin.DoesNotExist, DjangoValidationError):
            logger.error(f'Admin with ID: {admin_id} not found for masjid ID: {masjid.pk}')
            raise NotFound(f'Admin with ID: {admin_id} not found for masjid ID: {masjid.pk}')

    @staticmethod
    def add_admin(masjid, user_id, role=MasjidAdminRole.ADMIN):
        """Assign a user as administrator. NotFound for unknown users, Conflict for duplicates."""
        User = get_user_model()
        try:
            user = User.objects.get(pk=user_id)
        except (User.DoesNotExist, ValueError, DjangoValidationError):
            logger.error(f'User with ID: {user_id} not found')
            raise NotFound(f'User with ID: {user_id} not found')

        if MasjidAdmin.objects.filter(user=user, masjid=masjid).exists():
            logger.error(f'User with ID: {user_id} is already an admin for masjid ID: {masjid.pk}')
            raise Conflict(f'User with ID: {user_id} is already an admin for this masjid')

        logger.info(f'Adding user with ID: {user_id} as admin for masjid ID: {masjid.pk}')
        return MasjidAdmin.objects.create(user=user, masjid=masjid, role=role)

    @staticmethod
    def update_admin(admin, role):
        logger.info(f'Updating admin with ID: {admin.pk} for masjid ID: {admin.masjid_id}')
        admin.role = role
        admin.save(update_fields=['role', 'updated_at'])
        return admin

    @staticmethod
    def remove_admin(admin):
        """Remove an administrator; the last one of a masjid cannot be removed."""
        if MasjidAdmin.objects.filter(masjid_id=admin.masjid_id).count() <= 1:
            logger.error(f'Cannot remove the last admin for masjid ID: {admin.masjid_id}')
            raise PermissionDenied('Cannot remove the last admin for this masjid')

        logger.info(f'Removing admin with ID: {admin.pk} from masjid ID: {admin.masjid_id}')
        admin.delete()

    @staticmethod
    def is_masjid_admin(user_id, masjid_id):
        """Answer whether the user administers the masjid."""
        if user_id is None or masjid_id is None:
            return False
        return MasjidAdmin.objects.filter(user_id=user_id, masjid_id=masjid_id).exists()
