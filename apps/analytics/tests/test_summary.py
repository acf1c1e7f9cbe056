from datetime import timedelta
from decimal import Decimal

from django.core.cache import cache
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.analytics.services import advertiser_stats, screen_owner_stats
from apps.bookings.models import Booking
from apps.campaigns.models import Campaign
from core.testing import make_booking, make_campaign, make_screen, make_user


class AnalyticsTestCase(APITestCase):
    def setUp(self):
        cache.clear()
        self.owner = make_user('owner@example.com', role='screen_owner')
        self.advertiser = make_user('ads@example.com', role='advertiser')
        self.screen = make_screen(self.owner, name='Alpha', hourly_rate='50.00')
        self.idle_screen = make_screen(self.owner, name='Beta', hourly_rate='30.00')
        make_screen(self.owner, name='Gamma', hourly_rate='90.00', is_active=False)
        self.campaign = make_campaign(self.advertiser, name='Launch', status=Campaign.STATUS_ACTIVE)
        make_campaign(self.advertiser, name='Idea')

        now = timezone.now()
        make_booking(self.campaign, self.screen, start=now - timedelta(days=2), hours=4,
                     status=Booking.STATUS_APPROVED, total_cost='200.00')
        make_booking(self.campaign, self.screen, start=now - timedelta(days=1), hours=2,
                     status=Booking.STATUS_APPROVED, total_cost='100.00')
        make_booking(self.campaign, self.screen, start=now - timedelta(days=3), hours=1,
                     status=Booking.STATUS_REJECTED, total_cost='50.00')
        # outside the 7 day window
        make_booking(self.campaign, self.screen, start=now - timedelta(days=20), hours=1,
                     status=Booking.STATUS_APPROVED, total_cost='50.00')


class AnalyticsServicesTest(AnalyticsTestCase):
    def test_advertiser_stats(self):
        stats = advertiser_stats(self.advertiser.profile, '7d')

        self.assertEqual(stats['role'], 'advertiser')
        self.assertEqual(stats['total_spend'], Decimal('300.00'))
        self.assertEqual(stats['total_bookings'], 3)
        self.assertEqual(stats['active_campaigns'], 1)
        self.assertEqual(stats['screen_hours'], 6)
        self.assertEqual(stats['avg_cost_per_hour'], Decimal('50.00'))
        launch = next(row for row in stats['campaign_performance'] if row['name'] == 'Launch')
        self.assertEqual(launch['bookings'], 3)
        self.assertEqual(launch['spend'], Decimal('300.00'))

    def test_wider_range_includes_older_bookings(self):
        stats = advertiser_stats(self.advertiser.profile, '30d')

        self.assertEqual(stats['total_spend'], Decimal('350.00'))
        self.assertEqual(stats['total_bookings'], 4)

    def test_screen_owner_stats(self):
        stats = screen_owner_stats(self.owner.profile, '7d')

        self.assertEqual(stats['role'], 'screen_owner')
        self.assertEqual(stats['total_revenue'], Decimal('300.00'))
        self.assertEqual(stats['total_bookings'], 3)
        self.assertEqual(stats['active_screens'], 2)
        self.assertEqual(stats['avg_hourly_rate'], Decimal('40.00'))
        self.assertEqual(stats['total_hours'], 6)
        # 6 booked hours over 2 screens x 168 hours
        self.assertEqual(stats['occupancy_rate'], 1.8)
        names = [row['name'] for row in stats['screen_performance']]
        self.assertEqual(names, ['Alpha', 'Beta', 'Gamma'])

    def test_empty_stats(self):
        newcomer = make_user('new@example.com', role='screen_owner')

        stats = screen_owner_stats(newcomer.profile, '30d')

        self.assertEqual(stats['total_revenue'], Decimal('0.00'))
        self.assertEqual(stats['active_screens'], 0)
        self.assertEqual(stats['occupancy_rate'], 0.0)
        self.assertEqual(stats['screen_performance'], [])


class AnalyticsSummaryApiTest(AnalyticsTestCase):
    def test_advertiser_summary(self):
        self.client.force_authenticate(user=self.advertiser)

        response = self.client.get(reverse('analytics_summary'), {'range': '7d'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['role'], 'advertiser')
        self.assertIn('total_spend', response.data)
        self.assertNotIn('total_revenue', response.data)

    def test_screen_owner_summary_defaults_to_30_days(self):
        self.client.force_authenticate(user=self.owner)

        response = self.client.get(reverse('analytics_summary'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['range'], '30d')
        self.assertEqual(response.data['total_revenue'], Decimal('350.00'))

    def test_invalid_range(self):
        self.client.force_authenticate(user=self.owner)

        response = self.client.get(reverse('analytics_summary'), {'range': '1y'})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('range', response.data)

    def test_summary_is_cached_per_profile(self):
        self.client.force_authenticate(user=self.owner)
        first = self.client.get(reverse('analytics_summary'), {'range': '7d'})
        Booking.objects.all().delete()

        second = self.client.get(reverse('analytics_summary'), {'range': '7d'})

        self.assertEqual(first.data, second.data)

    def test_requires_profile(self):
        self.client.force_authenticate(user=make_user('ghost@example.com', with_profile=False))

        response = self.client.get(reverse('analytics_summary'))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
