"""Client-facing booking partitions.

A booking is *pending* while its status is pending, *active* while approved
and not yet ended, and *completed* once rejected or approved with an end in
the past. "completed" is only ever a display state.
"""
from django.utils import timezone

from .models import (
    Booking, PARTITION_ACTIVE, PARTITION_COMPLETED, PARTITION_PENDING, PARTITIONS,
)


def partition_of(booking, now=None):
    now = now or timezone.now()
    if booking.status == Booking.STATUS_PENDING:
        return PARTITION_PENDING
    if booking.status == Booking.STATUS_APPROVED and booking.end_datetime >= now:
        return PARTITION_ACTIVE
    return PARTITION_COMPLETED


def display_status(booking, now=None):
    now = now or timezone.now()
    if booking.status == Booking.STATUS_APPROVED and booking.end_datetime < now:
        return 'completed'
    return booking.status


def partition_bookings(bookings, now=None):
    now = now or timezone.now()
    partitions = {name: [] for name in PARTITIONS}
    for booking in bookings:
        partitions[partition_of(booking, now)].append(booking)
    return partitions
