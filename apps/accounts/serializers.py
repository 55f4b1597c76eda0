from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User, UserRole


# =============================================================================
# Input Serializers
# =============================================================================

class UserLoginSerializer(serializers.Serializer):
    """Serializer for employee login."""

    username = serializers.CharField(required=True, max_length=50)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class UserCreateSerializer(serializers.Serializer):
    """Validate input for creating an employee account (admin only)."""

    username = serializers.CharField(max_length=50)
    email = serializers.EmailField(max_length=255)
    password = serializers.CharField(
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    role = serializers.ChoiceField(choices=UserRole.choices)


class UserUpdateSerializer(serializers.Serializer):
    """Validate input for updating an employee account. All fields optional."""

    username = serializers.CharField(max_length=50, required=False)
    email = serializers.EmailField(max_length=255, required=False)
    role = serializers.ChoiceField(choices=UserRole.choices, required=False)
    is_active = serializers.BooleanField(required=False)


class UserRoleSerializer(serializers.Serializer):
    """Validate role change input."""

    role = serializers.CharField(required=False, allow_blank=True)


class PasswordResetSerializer(serializers.Serializer):
    """Validate admin-initiated password reset."""

    new_password = serializers.CharField(
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )


# =============================================================================
# Output Serializers
# =============================================================================

class UserSerializer(serializers.ModelSerializer):
    """Account details as shown to the user and in the back office."""

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'role',
            'is_active',
            'created_at',
            'updated_at',
            'last_login',
        ]
        read_only_fields = fields
