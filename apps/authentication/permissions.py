from rest_framework.permissions import BasePermission

from .models import UserProfile
from .session import MarketplaceSession


class HasProfile(BasePermission):
    message = "No user profile is available for this account."

    def has_permission(self, request, view):
        return (
            request.user.is_authenticated and
            MarketplaceSession.for_request(request).profile is not None
        )


class HasRole(BasePermission):
    role = None

    def has_permission(self, request, view):
        if not request.user.is_authenticated:
            return False
        return MarketplaceSession.for_request(request).role == self.role


class IsAdvertiser(HasRole):
    role = UserProfile.ROLE_ADVERTISER
    message = "This action requires the advertiser role."


class IsScreenOwner(HasRole):
    role = UserProfile.ROLE_SCREEN_OWNER
    message = "You must be a screen owner to manage screens."
