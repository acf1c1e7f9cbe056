import strawberry
from strawberry.types import Info
from typing import List, Optional
from apps.authentication.graphql.context import session_from
from apps.bookings.models import PARTITIONS
from apps.bookings.services import bookings_for
from .types import BookingType


@strawberry.type
class BookingQueries:

    @strawberry.field
    def bookings(self, info: Info, partition: Optional[str] = None) -> List[BookingType]:
        queryset = bookings_for(session_from(info))
        if partition:
            if partition not in PARTITIONS:
                raise ValueError(f"partition must be one of {', '.join(PARTITIONS)}")
            queryset = queryset.in_partition(partition)
        return queryset
