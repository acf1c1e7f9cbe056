from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from apps.authentication.models import User, UserProfile


class CreateMarketplaceUserTest(TestCase):
    def test_creates_user_and_profile(self):
        out = StringIO()
        call_command(
            'create_marketplace_user',
            '--email', 'cli@example.com',
            '--password', 'clipass123',
            '--username', 'cli',
            '--role', 'screen_owner',
            '--business-name', 'CLI Screens',
            stdout=out,
        )

        profile = UserProfile.objects.get(user__email='cli@example.com')
        self.assertEqual(profile.role, 'screen_owner')
        self.assertEqual(profile.business_name, 'CLI Screens')
        self.assertIn('Successfully created screen_owner cli@example.com', out.getvalue())

    def test_existing_email_is_reported(self):
        User.objects.create_user(username='dup', email='dup@example.com', password='x' * 10)
        out = StringIO()

        call_command(
            'create_marketplace_user',
            '--email', 'dup@example.com',
            '--password', 'clipass123',
            '--username', 'dup2',
            stdout=out,
        )

        self.assertIn('already exists', out.getvalue())
        self.assertEqual(User.objects.filter(email='dup@example.com').count(), 1)
