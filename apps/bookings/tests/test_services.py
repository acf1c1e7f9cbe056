from datetime import timedelta
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.test import TestCase
from django.utils import timezone
from rest_framework.exceptions import PermissionDenied

from apps.authentication.session import MarketplaceSession
from apps.bookings.models import Booking
from apps.bookings.services import booking_cost, bookings_for, request_booking, transition_booking
from core.exceptions import BookingConflict, InvalidTransition, NotScreenOwner, RoleRequired
from core.mutations import MutationState
from core.testing import make_booking, make_campaign, make_screen, make_user


class BookingServiceTestCase(TestCase):
    def setUp(self):
        self.owner = make_user('owner@example.com', role='screen_owner')
        self.rival = make_user('rival@example.com', role='screen_owner')
        self.advertiser = make_user('ads@example.com', role='advertiser')
        self.screen = make_screen(self.owner, hourly_rate='40.00')
        self.campaign = make_campaign(self.advertiser)
        self.start = timezone.now() + timedelta(days=2)
        self.end = self.start + timedelta(hours=3)

    def session(self, user):
        return MarketplaceSession.open(user)


class RequestBookingTest(BookingServiceTestCase):
    def test_creates_pending_booking_with_computed_cost(self):
        result = request_booking(self.session(self.advertiser), self.campaign, self.screen, self.start, self.end)

        self.assertIs(result.state, MutationState.CONFIRMED)
        booking = result.instance
        self.assertEqual(booking.status, Booking.STATUS_PENDING)
        self.assertEqual(booking.total_cost, Decimal('120.00'))
        self.assertEqual(booking.campaign_id, self.campaign.pk)
        self.assertEqual(booking.screen_id, self.screen.pk)

    def test_explicit_cost_is_kept(self):
        result = request_booking(
            self.session(self.advertiser), self.campaign, self.screen, self.start, self.end, Decimal('99.00'),
        )

        self.assertEqual(result.instance.total_cost, Decimal('99.00'))

    def test_does_not_modify_screen_or_campaign(self):
        screen_before = type(self.screen).objects.filter(pk=self.screen.pk).values().get()
        campaign_before = type(self.campaign).objects.filter(pk=self.campaign.pk).values().get()

        request_booking(self.session(self.advertiser), self.campaign, self.screen, self.start, self.end)

        self.assertEqual(type(self.screen).objects.filter(pk=self.screen.pk).values().get(), screen_before)
        self.assertEqual(type(self.campaign).objects.filter(pk=self.campaign.pk).values().get(), campaign_before)

    def test_overlap_with_approved_booking_conflicts(self):
        make_booking(self.campaign, self.screen, start=self.start + timedelta(hours=1), status=Booking.STATUS_APPROVED)

        with self.assertRaises(BookingConflict):
            request_booking(self.session(self.advertiser), self.campaign, self.screen, self.start, self.end)
        self.assertEqual(Booking.objects.filter(status=Booking.STATUS_PENDING).count(), 0)

    def test_overlap_with_pending_booking_is_allowed(self):
        make_booking(self.campaign, self.screen, start=self.start)

        result = request_booking(self.session(self.advertiser), self.campaign, self.screen, self.start, self.end)

        self.assertTrue(result.confirmed)

    def test_back_to_back_bookings_do_not_overlap(self):
        make_booking(self.campaign, self.screen, start=self.end, status=Booking.STATUS_APPROVED)

        result = request_booking(self.session(self.advertiser), self.campaign, self.screen, self.start, self.end)

        self.assertTrue(result.confirmed)

    def test_end_must_follow_start(self):
        with self.assertRaises(ValidationError):
            request_booking(self.session(self.advertiser), self.campaign, self.screen, self.end, self.start)

    def test_requires_advertiser(self):
        with self.assertRaises(RoleRequired):
            request_booking(self.session(self.owner), self.campaign, self.screen, self.start, self.end)

    def test_foreign_campaign_is_denied(self):
        other = make_user('other@example.com', role='advertiser')

        with self.assertRaises(PermissionDenied):
            request_booking(self.session(other), self.campaign, self.screen, self.start, self.end)

    def test_booking_cost_rounds_to_cents(self):
        cost = booking_cost(self.screen, self.start, self.start + timedelta(minutes=20))

        self.assertEqual(cost, Decimal('13.33'))


class TransitionBookingTest(BookingServiceTestCase):
    def setUp(self):
        super().setUp()
        self.booking = make_booking(self.campaign, self.screen, start=self.start, hours=3)

    def test_owner_approves_pending_booking(self):
        result = transition_booking(self.session(self.owner), self.booking, Booking.STATUS_APPROVED)

        self.assertTrue(result.confirmed)
        self.booking.refresh_from_db()
        self.assertEqual(self.booking.status, Booking.STATUS_APPROVED)
        self.assertEqual(self.booking.campaign_id, self.campaign.pk)
        self.assertEqual(self.booking.screen_id, self.screen.pk)
        self.assertIn(self.booking, Booking.objects.in_partition('active'))

    def test_owner_rejects_pending_booking(self):
        transition_booking(self.session(self.owner), self.booking, Booking.STATUS_REJECTED)

        self.booking.refresh_from_db()
        self.assertEqual(self.booking.status, Booking.STATUS_REJECTED)
        self.assertIn(self.booking, Booking.objects.in_partition('completed'))

    def test_other_owner_cannot_transition(self):
        with self.assertRaises(NotScreenOwner):
            transition_booking(self.session(self.rival), self.booking, Booking.STATUS_APPROVED)

        self.booking.refresh_from_db()
        self.assertEqual(self.booking.status, Booking.STATUS_PENDING)

    def test_advertiser_cannot_transition(self):
        with self.assertRaises(NotScreenOwner):
            transition_booking(self.session(self.advertiser), self.booking, Booking.STATUS_APPROVED)

    def test_only_pending_bookings_move(self):
        transition_booking(self.session(self.owner), self.booking, Booking.STATUS_REJECTED)
        self.booking.refresh_from_db()

        with self.assertRaises(InvalidTransition):
            transition_booking(self.session(self.owner), self.booking, Booking.STATUS_APPROVED)

    def test_stale_copy_loses_race(self):
        stale = Booking.objects.get(pk=self.booking.pk)
        transition_booking(self.session(self.owner), self.booking, Booking.STATUS_REJECTED)

        with self.assertRaises(InvalidTransition):
            transition_booking(self.session(self.owner), stale, Booking.STATUS_APPROVED)
        stale.refresh_from_db()
        self.assertEqual(stale.status, Booking.STATUS_REJECTED)

    def test_unknown_target(self):
        for target in ('pending', 'completed'):
            with self.assertRaises(InvalidTransition):
                transition_booking(self.session(self.owner), self.booking, target)

    def test_approving_into_approved_overlap_conflicts(self):
        rival_booking = make_booking(self.campaign, self.screen, start=self.start, hours=1)
        transition_booking(self.session(self.owner), rival_booking, Booking.STATUS_APPROVED)

        with self.assertRaises(BookingConflict):
            transition_booking(self.session(self.owner), self.booking, Booking.STATUS_APPROVED)
        self.booking.refresh_from_db()
        self.assertEqual(self.booking.status, Booking.STATUS_PENDING)

    def test_rejecting_overlap_is_allowed(self):
        make_booking(self.campaign, self.screen, start=self.start, status=Booking.STATUS_APPROVED)

        result = transition_booking(self.session(self.owner), self.booking, Booking.STATUS_REJECTED)

        self.assertTrue(result.confirmed)


class BookingsForTest(BookingServiceTestCase):
    def test_segmented_by_role(self):
        booking = make_booking(self.campaign, self.screen)
        other_screen = make_screen(self.rival, name='Rival Screen')
        make_booking(make_campaign(make_user('b@example.com', role='advertiser')), other_screen)

        self.assertEqual(list(bookings_for(self.session(self.advertiser))), [booking])
        self.assertEqual(list(bookings_for(self.session(self.owner))), [booking])
        self.assertEqual(bookings_for(self.session(self.rival)).count(), 1)
