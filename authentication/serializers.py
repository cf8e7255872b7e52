"""
Authentication serializers for the parish console.

Login and registration both answer with ``{user, token, refresh}``; ``token``
is the bearer access token the console attaches to every request.
"""

from rest_framework import serializers
from rest_framework_simplejwt.tokens import RefreshToken
from django.contrib.auth import authenticate, get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Public view of a console account."""

    class Meta:
        model = User
        fields = ['id', 'email', 'church_name', 'parish_name', 'created_at']
        read_only_fields = fields


class RegisterSerializer(serializers.ModelSerializer):
    """Create a console account for a church and parish."""

    password = serializers.CharField(
        write_only=True,
        max_length=128,
        style={'input_type': 'password'},
    )

    class Meta:
        model = User
        fields = ['church_name', 'parish_name', 'email', 'password']
        extra_kwargs = {
            'church_name': {'required': True, 'allow_blank': False},
            'parish_name': {'required': True, 'allow_blank': False},
            'email': {'required': True},
        }

    def validate_email(self, value):
        value = value.lower().strip()
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError(
                "An account with this email already exists.")
        return value

    def validate(self, attrs):
        candidate = User(
            email=attrs.get('email', ''),
            church_name=attrs.get('church_name', ''),
            parish_name=attrs.get('parish_name', ''),
        )
        try:
            validate_password(attrs['password'], user=candidate)
        except ValidationError as e:
            raise serializers.ValidationError({'password': list(e.messages)})
        return attrs

    def create(self, validated_data):
        return User.objects.create_user(**validated_data)


class LoginSerializer(serializers.Serializer):
    """Email and password sign-in."""

    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        style={'input_type': 'password'},
    )

    def validate(self, attrs):
        user = authenticate(
            request=self.context.get('request'),
            email=attrs['email'].lower().strip(),
            password=attrs['password'],
        )
        attrs['user'] = user
        return attrs


class LogoutSerializer(serializers.Serializer):
    refresh = serializers.CharField(
        required=False,
        allow_blank=True,
        help_text="Refresh token to revoke"
    )


class AuthResponseSerializer(serializers.Serializer):
    """Body returned by login and registration."""

    user = UserSerializer()
    token = serializers.CharField(help_text="Bearer access token")
    refresh = serializers.CharField(help_text="Refresh token")


def build_auth_response(user):
    """Issue a token pair for ``user`` and wrap it with the user record."""
    refresh = RefreshToken.for_user(user)
    return {
        'user': UserSerializer(user).data,
        'token': str(refresh.access_token),
        'refresh': str(refresh),
    }
