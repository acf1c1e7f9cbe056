import logging

from django.db import DatabaseError

from core.exceptions import ProfileRequired, RoleRequired
from .services import PROFILE_LOAD_FAILED, load_profile, resolve_profile

logger = logging.getLogger(__name__)

REQUEST_ATTR = '_marketplace_session'


class MarketplaceSession:
    """Identity and profile of one signed-in caller.

    Opened on sign-in, closed on sign-out, and handed to every service that
    needs the caller's role. ``profile`` is None when it could not be loaded;
    ``notices`` then explains why.
    """

    def __init__(self, user, profile=None, notices=None):
        self.user = user
        self.profile = profile
        self.notices = list(notices or [])
        self.closed = False

    @classmethod
    def open(cls, user):
        resolution = resolve_profile(user)
        notices = [resolution.error] if resolution.error else []
        return cls(user, resolution.profile, notices)

    @classmethod
    def for_request(cls, request):
        session = getattr(request, REQUEST_ATTR, None)
        if session is not None and session.user == request.user:
            return session
        try:
            profile = load_profile(request.user)
            session = cls(request.user, profile)
        except DatabaseError:
            logger.exception(f"Error loading profile for user {request.user.pk}")
            session = cls(request.user, None, [PROFILE_LOAD_FAILED])
        setattr(request, REQUEST_ATTR, session)
        return session

    @property
    def role(self):
        return self.profile.role if self.profile else None

    @property
    def is_advertiser(self):
        return self.role == 'advertiser'

    @property
    def is_screen_owner(self):
        return self.role == 'screen_owner'

    def require_profile(self):
        if self.profile is None:
            raise ProfileRequired()
        return self.profile

    def require_role(self, *roles):
        profile = self.require_profile()
        if profile.role not in roles:
            raise RoleRequired(*roles)
        return profile

    def close(self):
        self.profile = None
        self.notices = []
        self.closed = True
