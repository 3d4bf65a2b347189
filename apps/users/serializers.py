"""DRF serializers for user profiles."""
from rest_framework import serializers

from .models import UserProfile


class UserProfileSerializer(serializers.ModelSerializer):
    """
    Serializer for the caller's own profile.

    Name fields live on the auth user; role is read-only here.
    """

    email = serializers.EmailField(source='user.email', read_only=True)
    first_name = serializers.CharField(source='user.first_name', required=False, allow_blank=True, max_length=150)
    last_name = serializers.CharField(source='user.last_name', required=False, allow_blank=True, max_length=150)
    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = UserProfile
        fields = [
            'id',
            'email',
            'first_name',
            'last_name',
            'full_name',
            'phone',
            'profile_image',
            'role',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['role', 'created_at', 'updated_at']

    def update(self, instance, validated_data):
        user_data = validated_data.pop('user', {})
        if user_data:
            for field, value in user_data.items():
                setattr(instance.user, field, value)
            instance.user.save(update_fields=list(user_data))
        return super().update(instance, validated_data)


class UserAdminSerializer(UserProfileSerializer):
    """Serializer for platform admins: role and account activation are writable."""

    is_active = serializers.BooleanField(source='user.is_active', required=False)
    last_login = serializers.DateTimeField(source='user.last_login', read_only=True)

    class Meta(UserProfileSerializer.Meta):
        fields = UserProfileSerializer.Meta.fields + ['is_active', 'last_login']
        read_only_fields = ['created_at', 'updated_at']
