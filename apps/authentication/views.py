import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from .serializers import (
    LoginSerializer, LogoutSerializer, RegisterSerializer, UserProfileSerializer, UserSerializer,
)
from .session import MarketplaceSession

logger = logging.getLogger(__name__)


def session_payload(session, tokens=None):
    payload = {
        'user': UserSerializer(session.user).data,
        'profile': UserProfileSerializer(session.profile).data if session.profile else None,
        'notices': session.notices,
    }
    if tokens is not None:
        payload['access'] = str(tokens.access_token)
        payload['refresh'] = str(tokens)
    return payload


@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    serializer = RegisterSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    user = serializer.save()
    logger.info(f"Registered user {user.pk} as {user.signup_metadata.get('role')}")

    session = MarketplaceSession.open(user)
    return Response(session_payload(session, RefreshToken.for_user(user)), status=status.HTTP_200_OK)


@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    user = serializer.validated_data['user']

    session = MarketplaceSession.open(user)
    return Response(session_payload(session, RefreshToken.for_user(user)))


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout(request):
    serializer = LogoutSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    try:
        RefreshToken(serializer.validated_data['refresh']).blacklist()
    except TokenError as e:
        return Response({'detail': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    MarketplaceSession.for_request(request).close()
    return Response({'detail': 'Signed out successfully!'})


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def current_session(request):
    """Resolution pass for an identity observed with an existing token."""
    session = MarketplaceSession.open(request.user)
    return Response(session_payload(session))


@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated])
def profile(request):
    session = MarketplaceSession.for_request(request)
    current = session.require_profile()

    if request.method == 'GET':
        return Response(UserProfileSerializer(current).data)

    serializer = UserProfileSerializer(current, data=request.data, partial=True)
    serializer.is_valid(raise_exception=True)
    updated = serializer.save()
    updated.refresh_from_db()
    session.profile = updated
    logger.info(f"Profile {updated.pk} updated: {sorted(serializer.validated_data)}")
    return Response(UserProfileSerializer(updated).data)
