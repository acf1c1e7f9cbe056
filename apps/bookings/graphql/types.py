import strawberry
import strawberry_django
from strawberry import auto
from apps.bookings.models import Booking
from apps.bookings.partition import display_status, partition_of
from apps.campaigns.graphql.types import CampaignType
from apps.screens.graphql.types import ScreenType


@strawberry_django.type(Booking)
class BookingType:
    id: auto
    start_datetime: auto
    end_datetime: auto
    total_cost: auto
    status: auto
    campaign: CampaignType
    screen: ScreenType

    @strawberry.field
    def display_status(self) -> str:
        return display_status(self)

    @strawberry.field
    def partition(self) -> str:
        return partition_of(self)
