import strawberry_django
from strawberry import auto
from apps.authentication.graphql.types import UserProfileType
from apps.screens.models import Screen


@strawberry_django.type(Screen)
class ScreenType:
    id: auto
    name: auto
    location: auto
    address: auto
    screen_type: auto
    size_inches: auto
    resolution: auto
    hourly_rate: auto
    currency: auto
    is_active: auto
    owner: UserProfileType
