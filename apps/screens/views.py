import logging
from decimal import Decimal

from django.utils import timezone
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.authentication.permissions import IsScreenOwner
from apps.authentication.session import MarketplaceSession
from apps.bookings.models import Booking
from core.mutations import MutationResult
from .models import Screen
from .serializers import (
    BookingIntentSerializer, DiscoveryScreenSerializer, ScreenContentSerializer, ScreenSerializer,
)

logger = logging.getLogger(__name__)


class ScreenViewSet(mixins.ListModelMixin,
                    mixins.RetrieveModelMixin,
                    mixins.CreateModelMixin,
                    mixins.UpdateModelMixin,
                    viewsets.GenericViewSet):
    """Screen owner's inventory. Screens are deactivated, never deleted."""

    permission_classes = [IsScreenOwner]
    serializer_class = ScreenSerializer
    http_method_names = ['get', 'post', 'patch', 'head', 'options']

    @property
    def profile(self):
        return MarketplaceSession.for_request(self.request).profile

    def get_queryset(self):
        return Screen.objects.owned_by(self.profile)

    def perform_create(self, serializer):
        screen = serializer.save(owner=self.profile, is_active=True)
        logger.info(f"Screen {screen.pk} listed by owner {self.profile.pk}")

    @action(detail=True, methods=['post'])
    def activate(self, request, pk=None):
        return self._set_active(True)

    @action(detail=True, methods=['post'])
    def deactivate(self, request, pk=None):
        return self._set_active(False)

    def _set_active(self, is_active):
        screen = self.get_object()
        result = MutationResult()
        Screen.objects.filter(pk=screen.pk).update(is_active=is_active, updated_at=timezone.now())
        screen.refresh_from_db()
        result.confirm(screen)
        logger.info(f"Screen {screen.pk} {'activated' if is_active else 'deactivated'}")
        return Response(result.as_payload(ScreenSerializer(screen).data))

    @action(detail=False, methods=['get'])
    def content(self, request):
        now = timezone.now()
        bookings = (
            Booking.objects.for_screen_owner(self.profile)
            .filter(status=Booking.STATUS_APPROVED, end_datetime__gte=now)
            .select_related('screen', 'campaign', 'campaign__advertiser', 'campaign__creative')
            .order_by('start_datetime')
        )
        return Response(ScreenContentSerializer(bookings, many=True, context={'now': now}).data)


class DiscoverScreenViewSet(viewsets.ReadOnlyModelViewSet):
    """Active screens any signed-in user can browse."""

    permission_classes = [IsAuthenticated]
    serializer_class = DiscoveryScreenSerializer

    def get_queryset(self):
        queryset = Screen.objects.active().select_related('owner')
        return queryset.search(self.request.query_params.get('search'))

    @action(detail=False, methods=['post'], url_path='booking-intent')
    def booking_intent(self, request):
        serializer = BookingIntentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ids = serializer.validated_data['screen_ids']

        screens = Screen.objects.active().select_related('owner').filter(pk__in=ids)
        screens = sorted(screens, key=lambda s: ids.index(s.pk))
        return Response({
            'screen_ids': ids,
            'screens': DiscoveryScreenSerializer(screens, many=True).data,
            'hourly_total': sum((s.hourly_rate for s in screens), Decimal('0')),
        }, status=status.HTTP_200_OK)
