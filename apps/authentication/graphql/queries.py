import strawberry
from strawberry.types import Info
from typing import Optional
from .context import session_from
from .types import UserProfileType


@strawberry.type
class AuthQueries:

    @strawberry.field
    def me(self, info: Info) -> Optional[UserProfileType]:
        return session_from(info).profile
