from django.utils import timezone
from rest_framework import mixins, serializers, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.authentication.models import UserProfile
from apps.authentication.permissions import HasProfile
from apps.authentication.session import MarketplaceSession
from .models import Booking, PARTITIONS
from .partition import partition_bookings
from .serializers import BookingRequestSerializer, BookingSerializer, BookingTransitionSerializer
from .services import bookings_for, request_booking, transition_booking


class BookingViewSet(mixins.ListModelMixin,
                     mixins.RetrieveModelMixin,
                     viewsets.GenericViewSet):
    permission_classes = [HasProfile]
    serializer_class = BookingSerializer

    @property
    def session(self):
        return MarketplaceSession.for_request(self.request)

    def get_queryset(self):
        queryset = bookings_for(self.session)
        if self.action == 'list':
            partition = self.request.query_params.get('partition')
            if partition:
                if partition not in PARTITIONS:
                    raise serializers.ValidationError({'partition': f"Must be one of {', '.join(PARTITIONS)}."})
                queryset = queryset.in_partition(partition)
        return queryset

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context['now'] = timezone.now()
        return context

    def partitions_payload(self):
        context = self.get_serializer_context()
        partitions = partition_bookings(bookings_for(self.session), context['now'])
        payload = {
            name: BookingSerializer(items, many=True, context=context).data
            for name, items in partitions.items()
        }
        payload['counts'] = {name: len(items) for name, items in partitions.items()}
        return payload

    def create(self, request, *args, **kwargs):
        profile = self.session.require_role(UserProfile.ROLE_ADVERTISER)
        serializer = BookingRequestSerializer(data=request.data, context={'profile': profile})
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        result = request_booking(
            self.session,
            data['campaign'],
            data['screen'],
            data['start_datetime'],
            data['end_datetime'],
            data.get('total_cost'),
        )
        payload = result.as_payload(BookingSerializer(result.instance, context=self.get_serializer_context()).data)
        return Response(payload, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=['get'])
    def partitions(self, request):
        return Response(self.partitions_payload())

    @action(detail=True, methods=['post'])
    def transition(self, request, pk=None):
        serializer = BookingTransitionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self._transition(serializer.validated_data['status'])

    @action(detail=True, methods=['post'])
    def approve(self, request, pk=None):
        return self._transition(Booking.STATUS_APPROVED)

    @action(detail=True, methods=['post'])
    def reject(self, request, pk=None):
        return self._transition(Booking.STATUS_REJECTED)

    def _transition(self, target):
        booking = self.get_object()
        result = transition_booking(self.session, booking, target)
        payload = result.as_payload(BookingSerializer(result.instance, context=self.get_serializer_context()).data)
        # Callers replace their whole list with the refreshed view
        payload['bookings'] = self.partitions_payload()
        return Response(payload)
