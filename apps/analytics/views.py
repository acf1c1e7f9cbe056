from django.conf import settings
from django.core.cache import cache
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from apps.authentication.models import UserProfile
from apps.authentication.permissions import HasProfile
from apps.authentication.session import MarketplaceSession
from .services import DEFAULT_RANGE, RANGES, advertiser_stats, screen_owner_stats


@api_view(['GET'])
@permission_classes([HasProfile])
def analytics_summary(request):
    """Role-segmented dashboard figures for the requested date range"""
    range_key = request.query_params.get('range', DEFAULT_RANGE)
    if range_key not in RANGES:
        return Response(
            {'range': f"Must be one of {', '.join(RANGES)}."},
            status=status.HTTP_400_BAD_REQUEST,
        )

    profile = MarketplaceSession.for_request(request).require_profile()
    cache_key = f"analytics:summary:{profile.pk}:{profile.role}:{range_key}"
    data = cache.get(cache_key)
    if data is None:
        if profile.role == UserProfile.ROLE_ADVERTISER:
            data = advertiser_stats(profile, range_key)
        else:
            data = screen_owner_stats(profile, range_key)
        cache.set(cache_key, data, settings.ANALYTICS_CACHE_TIMEOUT)

    return Response(data)
