import strawberry
from strawberry.types import Info
from typing import List, Optional
from apps.authentication.graphql.context import session_from
from apps.screens.models import Screen
from .types import ScreenType


@strawberry.type
class ScreenQueries:

    @strawberry.field
    def screens(self, info: Info, search: Optional[str] = None) -> List[ScreenType]:
        session_from(info)
        return Screen.objects.active().select_related('owner').search(search)
