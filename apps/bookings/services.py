import logging
from decimal import Decimal, ROUND_HALF_UP

from django.db import transaction
from django.utils import timezone
from rest_framework.exceptions import PermissionDenied

from apps.authentication.models import UserProfile
from apps.screens.models import Screen
from core.exceptions import BookingConflict, InvalidTransition, NotScreenOwner
from core.mutations import MutationResult
from .models import Booking

logger = logging.getLogger(__name__)

TRANSITION_TARGETS = (Booking.STATUS_APPROVED, Booking.STATUS_REJECTED)

CENTS = Decimal('0.01')


def booking_cost(screen, start, end):
    hours = Decimal((end - start).total_seconds()) / Decimal(3600)
    return (screen.hourly_rate * hours).quantize(CENTS, rounding=ROUND_HALF_UP)


def bookings_for(session):
    """Bookings visible to the caller: own campaigns for advertisers, own screens otherwise."""
    profile = session.require_profile()
    queryset = Booking.objects.select_related(
        'campaign', 'campaign__advertiser', 'campaign__creative', 'screen', 'screen__owner',
    )
    if profile.role == UserProfile.ROLE_ADVERTISER:
        return queryset.for_advertiser(profile)
    return queryset.for_screen_owner(profile)


def request_booking(session, campaign, screen, start, end, total_cost=None):
    """Create a pending booking of ``screen`` for ``campaign``.

    Rejected when an approved booking on the same screen overlaps the window.
    Screen and campaign rows are only read.
    """
    profile = session.require_role(UserProfile.ROLE_ADVERTISER)
    result = MutationResult()

    if campaign.advertiser_id != profile.pk:
        raise PermissionDenied('You can only book screens for your own campaigns.')

    if Booking.objects.overlapping(screen, start, end).filter(status=Booking.STATUS_APPROVED).exists():
        raise BookingConflict()

    if total_cost is None:
        total_cost = booking_cost(screen, start, end)

    booking = Booking(
        campaign=campaign,
        screen=screen,
        start_datetime=start,
        end_datetime=end,
        total_cost=total_cost,
        status=Booking.STATUS_PENDING,
    )
    booking.full_clean(exclude=['campaign', 'screen'])
    booking.save()
    logger.info(f"Booking {booking.pk} requested: campaign {campaign.pk} on screen {screen.pk}")
    return result.confirm(booking)


def transition_booking(session, booking, target):
    """Move a pending booking to approved or rejected.

    Only the owner of the booked screen may do this. The update is conditional
    on the booking still being pending, so the first of two concurrent
    decisions wins and the other gets InvalidTransition.
    """
    profile = session.require_profile()
    result = MutationResult()

    if target not in TRANSITION_TARGETS:
        raise InvalidTransition(f"Bookings can only be moved to {' or '.join(TRANSITION_TARGETS)}.")
    if booking.screen.owner_id != profile.pk:
        raise NotScreenOwner()
    if booking.status != Booking.STATUS_PENDING:
        raise InvalidTransition(f"Booking is already {booking.status}.")

    with transaction.atomic():
        if target == Booking.STATUS_APPROVED:
            # Serialize approvals per screen
            screen = Screen.objects.select_for_update().get(pk=booking.screen_id)
            clash = (
                Booking.objects.overlapping(screen, booking.start_datetime, booking.end_datetime)
                .filter(status=Booking.STATUS_APPROVED)
                .exclude(pk=booking.pk)
                .exists()
            )
            if clash:
                raise BookingConflict()

        updated = Booking.objects.filter(pk=booking.pk, status=Booking.STATUS_PENDING).update(
            status=target, updated_at=timezone.now(),
        )
    if not updated:
        raise InvalidTransition('Booking is no longer pending.')

    booking.refresh_from_db()
    logger.info(f"Booking {booking.pk} {target} by screen owner {profile.pk}")
    return result.confirm(booking)
