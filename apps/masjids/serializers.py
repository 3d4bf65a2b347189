"""DRF serializers for masjid API."""
from rest_framework import serializers

from apps.core.constants import MasjidAdminRole

from .models import Masjid, MasjidAdmin


class MasjidAdminSerializer(serializers.ModelSerializer):
    """Administrator entry with a short view of the user."""

    email = serializers.EmailField(source='user.email', read_only=True)
    first_name = serializers.CharField(source='user.first_name', read_only=True)
    last_name = serializers.CharField(source='user.last_name', read_only=True)

    class Meta:
        model = MasjidAdmin
        fields = [
            'id',
            'role',
            'user',
            'email',
            'first_name',
            'last_name',
            'masjid',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class AddMasjidAdminSerializer(serializers.Serializer):
    user_id = serializers.IntegerField()
    role = serializers.ChoiceField(choices=MasjidAdminRole.CHOICES, default=MasjidAdminRole.ADMIN)


class UpdateMasjidAdminSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=MasjidAdminRole.CHOICES)


class MasjidListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for masjid lists."""

    class Meta:
        model = Masjid
        fields = [
            'id',
            'name',
            'city',
            'state',
            'country',
            'logo_url',
            'is_verified',
        ]


class MasjidSerializer(serializers.ModelSerializer):
    """Full masjid profile including its administrators."""

    admins = MasjidAdminSerializer(many=True, read_only=True)

    class Meta:
        model = Masjid
        fields = [
            'id',
            'name',
            'description',
            'address',
            'city',
            'state',
            'country',
            'zip_code',
            'email',
            'phone',
            'website',
            'logo_url',
            'cover_image_url',
            'is_verified',
            'admins',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['is_verified', 'created_at', 'updated_at']


class PlatformMasjidSerializer(MasjidSerializer):
    """Platform admins may also flip the verification flag."""

    class Meta(MasjidSerializer.Meta):
        read_only_fields = ['created_at', 'updated_at']
