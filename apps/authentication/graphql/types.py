import strawberry_django
from strawberry import auto
from apps.authentication.models import UserProfile


@strawberry_django.type(UserProfile)
class UserProfileType:
    id: auto
    role: auto
    business_name: auto
    contact_email: auto
    website: auto
    is_verified: auto
