"""DRF permission classes for role-based access control."""
from rest_framework import permissions

from .constants import Roles


class IsPlatformAdmin(permissions.BasePermission):
    """Requires the admin or super_admin platform role, or a Django superuser."""
    message = "You must be a platform administrator to access this resource."

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False
        return is_platform_admin(request.user)


class IsSuperAdmin(permissions.BasePermission):
    """Requires the super_admin role or a Django superuser."""
    message = "You must be a super administrator to access this resource."

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False
        return get_user_role(request.user) == Roles.SUPER_ADMIN


class IsMasjidAdmin(permissions.BasePermission):
    """
    Object-level: allows administrators of the masjid that owns the object.

    Works for Masjid instances and for anything exposing a ``masjid_id``
    (campaigns) or a ``campaign`` (donations). Platform admins always pass.
    """
    message = "You must be a masjid admin to modify this resource."

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated)

    def has_object_permission(self, request, view, obj):
        if is_platform_admin(request.user):
            return True

        from apps.masjids.services import MasjidService
        return MasjidService.is_masjid_admin(request.user.pk, masjid_id_for(obj))


def masjid_id_for(obj):
    """Resolve the owning masjid id of a masjid, campaign or donation."""
    from apps.masjids.models import Masjid

    if isinstance(obj, Masjid):
        return obj.pk
    if hasattr(obj, 'masjid_id'):
        return obj.masjid_id
    if hasattr(obj, 'campaign'):
        return obj.campaign.masjid_id
    return None


def get_user_role(user):
    """Get the platform role for a user. Superusers are SUPER_ADMIN."""
    if user.is_superuser:
        return Roles.SUPER_ADMIN

    if hasattr(user, 'profile'):
        return user.profile.role

    return Roles.USER


def is_platform_admin(user):
    """Check if user holds a platform-wide admin role."""
    if not user or not user.is_authenticated:
        return False
    return get_user_role(user) in Roles.PLATFORM_ADMIN_ROLES
