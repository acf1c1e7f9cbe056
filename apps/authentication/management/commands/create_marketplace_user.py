from django.core.management.base import BaseCommand, CommandError
from django.contrib.auth import get_user_model

from apps.authentication.models import UserProfile
from apps.authentication.services import resolve_profile

User = get_user_model()


class Command(BaseCommand):
    help = 'Create a marketplace user and resolve its profile from signup metadata'

    def add_arguments(self, parser):
        parser.add_argument('--email', type=str, required=True)
        parser.add_argument('--password', type=str, required=True)
        parser.add_argument('--username', type=str, required=True)
        parser.add_argument('--role', type=str, default=UserProfile.ROLE_ADVERTISER,
                            choices=sorted(UserProfile.ROLES))
        parser.add_argument('--business-name', type=str, default='')

    def handle(self, *args, **options):
        email = options['email']

        if User.objects.filter(email=email).exists():
            self.stdout.write(
                self.style.ERROR(f'User with email {email} already exists')
            )
            return

        metadata = {'role': options['role']}
        if options['business_name']:
            metadata['business_name'] = options['business_name']

        user = User.objects.create_user(
            username=options['username'],
            email=email,
            password=options['password'],
            signup_metadata=metadata,
        )

        resolution = resolve_profile(user)
        if resolution.profile is None:
            raise CommandError(f'Created user {email} but could not create its profile: {resolution.error}')

        self.stdout.write(
            self.style.SUCCESS(
                f'Successfully created {resolution.profile.role} {email} ({resolution.profile.business_name})'
            )
        )
