from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q
from django.utils import timezone

PARTITION_PENDING = 'pending'
PARTITION_ACTIVE = 'active'
PARTITION_COMPLETED = 'completed'
PARTITIONS = (PARTITION_PENDING, PARTITION_ACTIVE, PARTITION_COMPLETED)


class BookingQuerySet(models.QuerySet):
    def for_advertiser(self, profile):
        return self.filter(campaign__advertiser=profile)

    def for_screen_owner(self, profile):
        return self.filter(screen__owner=profile)

    def overlapping(self, screen, start, end):
        return self.filter(screen=screen, start_datetime__lt=end, end_datetime__gt=start)

    def in_partition(self, partition, now=None):
        now = now or timezone.now()
        if partition == PARTITION_PENDING:
            return self.filter(status=Booking.STATUS_PENDING)
        if partition == PARTITION_ACTIVE:
            return self.filter(status=Booking.STATUS_APPROVED, end_datetime__gte=now)
        if partition == PARTITION_COMPLETED:
            return self.filter(
                Q(status=Booking.STATUS_REJECTED) |
                Q(status=Booking.STATUS_APPROVED, end_datetime__lt=now)
            )
        raise ValueError(f"Unknown booking partition: {partition}")


class Booking(models.Model):
    class Meta:
        app_label = 'bookings'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['screen', 'status'], name='booking_screen_status_idx'),
            models.Index(fields=['screen', 'start_datetime'], name='booking_screen_start_idx'),
        ]

    STATUS_PENDING = 'pending'
    STATUS_APPROVED = 'approved'
    STATUS_REJECTED = 'rejected'

    # "completed" is derived from end_datetime and never stored
    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_APPROVED, 'Approved'),
        (STATUS_REJECTED, 'Rejected'),
    ]

    campaign = models.ForeignKey('campaigns.Campaign', on_delete=models.CASCADE, related_name='bookings')
    screen = models.ForeignKey('screens.Screen', on_delete=models.CASCADE, related_name='bookings')
    start_datetime = models.DateTimeField()
    end_datetime = models.DateTimeField()
    total_cost = models.DecimalField(max_digits=12, decimal_places=2)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = BookingQuerySet.as_manager()

    def clean(self):
        if self.start_datetime and self.end_datetime and self.end_datetime <= self.start_datetime:
            raise ValidationError({'end_datetime': 'end_datetime must be after start_datetime'})

    @property
    def duration_hours(self):
        return (self.end_datetime - self.start_datetime).total_seconds() / 3600

    def __str__(self):
        return f"Booking {self.pk} ({self.status})"
