from collections import OrderedDict
from datetime import timedelta
from decimal import Decimal, ROUND_HALF_UP

from django.utils import timezone

from apps.bookings.models import Booking
from apps.campaigns.models import Campaign
from apps.screens.models import Screen

RANGES = OrderedDict([('7d', 7), ('30d', 30), ('90d', 90)])
DEFAULT_RANGE = '30d'

CENTS = Decimal('0.01')


def _money(value):
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def _hours(bookings):
    return round(sum(b.duration_hours for b in bookings), 2)


def window(range_key, now=None):
    now = now or timezone.now()
    return now - timedelta(days=RANGES[range_key]), now


def advertiser_stats(profile, range_key=DEFAULT_RANGE, now=None):
    since, now = window(range_key, now)
    bookings = list(
        Booking.objects.for_advertiser(profile)
        .filter(start_datetime__gte=since, start_datetime__lte=now)
        .select_related('campaign')
    )
    approved = [b for b in bookings if b.status == Booking.STATUS_APPROVED]
    total_spend = sum((b.total_cost for b in approved), Decimal('0'))
    screen_hours = _hours(approved)

    per_campaign = OrderedDict()
    for campaign in Campaign.objects.filter(advertiser=profile).order_by('name'):
        per_campaign[campaign.pk] = {
            'campaign_id': campaign.pk, 'name': campaign.name, 'bookings': 0, 'spend': Decimal('0'),
        }
    for booking in bookings:
        row = per_campaign[booking.campaign_id]
        row['bookings'] += 1
        if booking.status == Booking.STATUS_APPROVED:
            row['spend'] += booking.total_cost

    return {
        'role': profile.role,
        'range': range_key,
        'total_spend': _money(total_spend),
        'active_campaigns': Campaign.objects.filter(advertiser=profile, status=Campaign.STATUS_ACTIVE).count(),
        'total_bookings': len(bookings),
        'screen_hours': screen_hours,
        'avg_cost_per_hour': _money(total_spend / Decimal(str(screen_hours))) if screen_hours else Decimal('0.00'),
        'campaign_performance': [
            dict(row, spend=_money(row['spend'])) for row in per_campaign.values()
        ],
    }


def screen_owner_stats(profile, range_key=DEFAULT_RANGE, now=None):
    since, now = window(range_key, now)
    range_hours = RANGES[range_key] * 24
    bookings = list(
        Booking.objects.for_screen_owner(profile)
        .filter(start_datetime__gte=since, start_datetime__lte=now)
    )
    approved = [b for b in bookings if b.status == Booking.STATUS_APPROVED]
    active_screens = list(Screen.objects.owned_by(profile).active())
    total_hours = _hours(approved)

    if active_screens:
        avg_rate = sum((s.hourly_rate for s in active_screens), Decimal('0')) / len(active_screens)
        occupancy = round(total_hours / (len(active_screens) * range_hours) * 100, 1)
    else:
        avg_rate = Decimal('0')
        occupancy = 0.0

    screen_performance = []
    for screen in Screen.objects.owned_by(profile).order_by('name'):
        screen_bookings = [b for b in bookings if b.screen_id == screen.pk]
        screen_approved = [b for b in screen_bookings if b.status == Booking.STATUS_APPROVED]
        screen_performance.append({
            'screen_id': screen.pk,
            'name': screen.name,
            'bookings': len(screen_bookings),
            'revenue': _money(sum((b.total_cost for b in screen_approved), Decimal('0'))),
            'occupancy_rate': round(_hours(screen_approved) / range_hours * 100, 1),
        })

    return {
        'role': profile.role,
        'range': range_key,
        'total_revenue': _money(sum((b.total_cost for b in approved), Decimal('0'))),
        'total_bookings': len(bookings),
        'active_screens': len(active_screens),
        'avg_hourly_rate': _money(avg_rate),
        'total_hours': total_hours,
        'occupancy_rate': occupancy,
        'screen_performance': screen_performance,
    }
