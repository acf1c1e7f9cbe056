"""Fixture builders shared by the app test suites."""
from datetime import timedelta
from decimal import Decimal

from django.utils import timezone

from apps.authentication.models import User, UserProfile
from apps.bookings.models import Booking
from apps.campaigns.models import Campaign
from apps.screens.models import Screen


def make_user(email, role=None, with_profile=True, business_name='Acme Media', metadata=None):
    username = email.split('@')[0]
    user = User.objects.create_user(
        username=username,
        email=email,
        password='testpass123',
        signup_metadata=metadata if metadata is not None else ({'role': role} if role else {}),
    )
    if with_profile:
        UserProfile.objects.create(
            user=user,
            role=role or UserProfile.ROLE_ADVERTISER,
            business_name=business_name,
            contact_email=email,
        )
    return user


def make_screen(owner, name='Downtown Plaza', hourly_rate='50.00', is_active=True, **extra):
    fields = {
        'location': 'Downtown',
        'address': '1 Main St',
        'screen_type': 'led',
        'size_inches': 85,
        'resolution': '1920x1080',
    }
    fields.update(extra)
    return Screen.objects.create(
        owner=owner.profile,
        name=name,
        hourly_rate=Decimal(hourly_rate),
        is_active=is_active,
        **fields
    )


def make_campaign(advertiser, name='Summer Sale', budget='1000.00', status=Campaign.STATUS_DRAFT):
    today = timezone.localdate()
    return Campaign.objects.create(
        advertiser=advertiser.profile,
        name=name,
        budget=Decimal(budget),
        status=status,
        start_date=today,
        end_date=today + timedelta(days=30),
    )


def make_booking(campaign, screen, start=None, hours=2, status=Booking.STATUS_PENDING, total_cost='100.00'):
    start = start or timezone.now() + timedelta(days=1)
    return Booking.objects.create(
        campaign=campaign,
        screen=screen,
        start_datetime=start,
        end_datetime=start + timedelta(hours=hours),
        total_cost=Decimal(total_cost),
        status=status,
    )
