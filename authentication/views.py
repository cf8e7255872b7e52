"""
Authentication views for the parish console.

- register: create a console account, answer with ``{user, token}``
- login: exchange email/password for ``{user, token}``
- logout: revoke the refresh token (the client drops its stored session)
- me: the signed-in account
"""

from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes, throttle_classes
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken
from django.db import transaction
from drf_spectacular.utils import extend_schema
import structlog

from core.api_tags import authentication_schema
from core.exceptions import ProblemDetailException
from core.logging.structured import log_business_event, log_security_event
from core.serializers import MessageResponseSerializer, ProblemResponseSerializer
from core.throttling import LoginRateThrottle, RegistrationRateThrottle

from .serializers import (
    RegisterSerializer,
    LoginSerializer,
    LogoutSerializer,
    AuthResponseSerializer,
    UserSerializer,
    build_auth_response,
)

logger = structlog.get_logger(__name__)


@authentication_schema(
    operation_id='register_user',
    summary='Register a console account',
    request=RegisterSerializer,
    responses={201: AuthResponseSerializer, 400: ProblemResponseSerializer},
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
@throttle_classes([RegistrationRateThrottle])
def register_view(request):
    """
    Register a new console account.

    **Request Body**:
    ```json
    {
        "church_name": "St. Mary's Church",
        "parish_name": "Holy Family Parish",
        "email": "office@stmarys.example",
        "password": "a-strong-password"
    }
    ```

    **Response**: `201 Created` with `{user, token, refresh}`.
    """
    serializer = RegisterSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    with transaction.atomic():
        user = serializer.save()

    logger.info(
        "User registration successful",
        user_id=str(user.id),
        church_name=user.church_name
    )
    log_business_event('user_registered', user=user)

    return Response(build_auth_response(user), status=status.HTTP_201_CREATED)


@authentication_schema(
    operation_id='login_user',
    summary='Sign in',
    request=LoginSerializer,
    responses={200: AuthResponseSerializer, 401: ProblemResponseSerializer},
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
@throttle_classes([LoginRateThrottle])
def login_view(request):
    """
    Exchange email and password for a bearer token.

    **Response**:
    - `200 OK`: `{user, token, refresh}`
    - `401 Unauthorized`: `{error: "Invalid email or password"}`
    """
    serializer = LoginSerializer(data=request.data, context={'request': request})
    serializer.is_valid(raise_exception=True)
    user = serializer.validated_data['user']

    if user is None:
        log_security_event(
            'login_failed',
            request,
            details={'email': serializer.validated_data['email']}
        )
        # No authenticators here, so DRF would turn AuthenticationFailed into a 403
        raise ProblemDetailException(
            title='Unauthorized',
            detail="Invalid email or password",
            status_code=status.HTTP_401_UNAUTHORIZED
        )

    log_security_event('login_succeeded', request, user=user)
    return Response(build_auth_response(user), status=status.HTTP_200_OK)


@authentication_schema(
    operation_id='logout_user',
    summary='Sign out',
    request=LogoutSerializer,
    responses={200: MessageResponseSerializer, 400: ProblemResponseSerializer},
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout_view(request):
    """
    Revoke the refresh token, if one is supplied.

    Access tokens expire on their own; the client clears its stored session.
    """
    serializer = LogoutSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    refresh = serializer.validated_data.get('refresh')

    if refresh:
        try:
            RefreshToken(refresh).blacklist()
        except TokenError as e:
            raise ValidationError({'refresh': [str(e)]})

    log_security_event('logout', request, user=request.user)
    return Response({'message': 'Logged out'}, status=status.HTTP_200_OK)


@extend_schema(
    summary='Current account',
    tags=['Authentication'],
    responses={200: UserSerializer},
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def me_view(request):
    """Return the signed-in console account."""
    return Response(UserSerializer(request.user).data)
