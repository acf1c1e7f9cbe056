import strawberry
from strawberry.types import Info
from typing import List
from apps.authentication.graphql.context import session_from
from apps.authentication.models import UserProfile
from apps.campaigns.models import Campaign
from .types import CampaignType


@strawberry.type
class CampaignQueries:

    @strawberry.field
    def campaigns(self, info: Info) -> List[CampaignType]:
        profile = session_from(info).require_role(UserProfile.ROLE_ADVERTISER)
        return Campaign.objects.filter(advertiser=profile).select_related('creative')

    @strawberry.field
    def campaign(self, info: Info, id: int) -> CampaignType:
        profile = session_from(info).require_role(UserProfile.ROLE_ADVERTISER)
        return Campaign.objects.get(id=id, advertiser=profile)
