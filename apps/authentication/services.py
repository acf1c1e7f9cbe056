import logging
from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from django.db import DatabaseError
from django.utils import timezone

from .models import UserProfile

logger = logging.getLogger(__name__)

DEFAULT_ROLE = UserProfile.ROLE_ADVERTISER
DEFAULT_BUSINESS_NAME = 'Business'

ROLE_SYNC_ALWAYS = 'always'
ROLE_SYNC_ON_CREATE = 'on_create'

PROFILE_LOAD_FAILED = 'Failed to load user profile'


@dataclass
class ProfileResolution:
    profile: Optional[UserProfile] = None
    created: bool = False
    role_synced: bool = False
    error: Optional[str] = None


def metadata_role(user):
    """Role declared in the user's signup metadata, or None if absent or unknown."""
    role = (user.signup_metadata or {}).get('role')
    if not role:
        return None
    if role not in UserProfile.ROLES:
        logger.warning(f"Ignoring unknown signup role {role!r} for user {user.pk}")
        return None
    return role


def role_sync_policy():
    policy = getattr(settings, 'PROFILE_ROLE_SYNC', ROLE_SYNC_ALWAYS)
    if policy not in (ROLE_SYNC_ALWAYS, ROLE_SYNC_ON_CREATE):
        raise ValueError(f"PROFILE_ROLE_SYNC must be '{ROLE_SYNC_ALWAYS}' or '{ROLE_SYNC_ON_CREATE}', got {policy!r}")
    return policy


def resolve_profile(user):
    """Ensure exactly one profile exists for ``user`` and reconcile its role.

    Storage failures never propagate: they are logged and reported through
    ``ProfileResolution.error`` with no profile, so the caller can carry on
    without role-specific features.
    """
    try:
        return _resolve(user)
    except DatabaseError:
        logger.exception(f"Error resolving profile for user {user.pk}")
        return ProfileResolution(error=PROFILE_LOAD_FAILED)


def _resolve(user):
    metadata = user.signup_metadata or {}
    declared_role = metadata_role(user)

    profile, created = UserProfile.objects.get_or_create(
        user=user,
        defaults={
            'role': declared_role or DEFAULT_ROLE,
            'business_name': metadata.get('business_name') or DEFAULT_BUSINESS_NAME,
            'contact_email': user.email or '',
            'is_verified': False,
        },
    )
    if created:
        logger.info(f"Created {profile.role} profile for user {user.pk}")
        return ProfileResolution(profile=profile, created=True)

    if declared_role and profile.role != declared_role and role_sync_policy() == ROLE_SYNC_ALWAYS:
        logger.info(f"Syncing role for user {user.pk}: {profile.role} -> {declared_role}")
        UserProfile.objects.filter(pk=profile.pk).update(role=declared_role, updated_at=timezone.now())
        profile.refresh_from_db()
        return ProfileResolution(profile=profile, role_synced=True)

    return ProfileResolution(profile=profile)


def load_profile(user):
    """Stored profile of ``user`` without reconciliation; None when absent."""
    return UserProfile.objects.filter(user=user).first()
