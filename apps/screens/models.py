from django.db import models
from django.db.models import Q


class ScreenQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_active=True)

    def owned_by(self, profile):
        return self.filter(owner=profile)

    def search(self, term):
        term = (term or '').strip()
        if not term:
            return self
        return self.filter(
            Q(name__icontains=term) |
            Q(location__icontains=term) |
            Q(address__icontains=term)
        )


class Screen(models.Model):
    class Meta:
        app_label = 'screens'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['owner', 'is_active'], name='screen_owner_active_idx'),
            models.Index(fields=['is_active', 'created_at'], name='screen_active_created_idx'),
        ]

    owner = models.ForeignKey('authentication.UserProfile', on_delete=models.CASCADE, related_name='screens')
    name = models.CharField(max_length=200)
    location = models.CharField(max_length=200)
    address = models.CharField(max_length=300)
    screen_type = models.CharField(max_length=50)  # led, lcd, projection...
    size_inches = models.PositiveIntegerField()
    resolution = models.CharField(max_length=50)
    hourly_rate = models.DecimalField(max_digits=10, decimal_places=2)
    currency = models.CharField(max_length=3, default='USD')
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ScreenQuerySet.as_manager()

    def __str__(self):
        return f"{self.name} ({self.location})"
