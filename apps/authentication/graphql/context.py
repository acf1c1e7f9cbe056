from apps.authentication.session import MarketplaceSession
from core.exceptions import ProfileRequired


def session_from(info):
    request = info.context.request
    if not request.user.is_authenticated:
        raise ProfileRequired("Authentication credentials were not provided.")
    return MarketplaceSession.for_request(request)
