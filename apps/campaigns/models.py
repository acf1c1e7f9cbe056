from django.db import models
from django.core.exceptions import ValidationError
from django.utils import timezone


class Campaign(models.Model):
    class Meta:
        app_label = 'campaigns'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['advertiser', 'status'], name='campaign_advertiser_status_idx'),
        ]

    STATUS_DRAFT = 'draft'
    STATUS_ACTIVE = 'active'
    STATUS_PAUSED = 'paused'
    STATUS_COMPLETED = 'completed'

    STATUS_CHOICES = [
        (STATUS_DRAFT, 'Draft'),
        (STATUS_ACTIVE, 'Active'),
        (STATUS_PAUSED, 'Paused'),
        (STATUS_COMPLETED, 'Completed'),
    ]

    advertiser = models.ForeignKey('authentication.UserProfile', on_delete=models.CASCADE, related_name='campaigns')
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True, null=True)
    budget = models.DecimalField(max_digits=12, decimal_places=2)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_DRAFT)
    start_date = models.DateField()
    end_date = models.DateField()
    creative = models.ForeignKey(
        'creatives.Creative',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def clean(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValidationError({'end_date': 'end_date cannot be before start_date'})

    def is_running(self, today=None):
        today = today or timezone.localdate()
        return self.status == self.STATUS_ACTIVE and self.start_date <= today <= self.end_date

    def is_upcoming(self, today=None):
        today = today or timezone.localdate()
        return self.status == self.STATUS_ACTIVE and today < self.start_date

    def __str__(self):
        return self.name
