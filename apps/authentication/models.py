from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    email = models.EmailField(unique=True)
    # Values supplied at sign-up, e.g. {"role": "screen_owner", "business_name": "Acme"}
    signup_metadata = models.JSONField(default=dict, blank=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['username']


class UserProfile(models.Model):
    ROLE_ADVERTISER = 'advertiser'
    ROLE_SCREEN_OWNER = 'screen_owner'
    ROLE_ADMIN = 'admin'

    ROLE_CHOICES = [
        (ROLE_ADVERTISER, 'Advertiser'),
        (ROLE_SCREEN_OWNER, 'Screen owner'),
        (ROLE_ADMIN, 'Admin'),
    ]
    ROLES = {choice for choice, _ in ROLE_CHOICES}

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='profile')
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_ADVERTISER)
    business_name = models.CharField(max_length=200)
    contact_email = models.EmailField(blank=True)
    phone = models.CharField(max_length=50, blank=True, null=True)
    website = models.URLField(blank=True, null=True)
    description = models.TextField(blank=True, null=True)
    is_verified = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.business_name} ({self.role})"
