import strawberry
from strawberry.types import Info
import datetime
from decimal import Decimal
from typing import Optional
from apps.authentication.graphql.context import session_from
from apps.campaigns.services import create_campaign
from .types import CampaignType


@strawberry.input
class CampaignInput:
    name: str
    budget: Decimal
    start_date: datetime.date
    end_date: datetime.date
    description: Optional[str] = None


@strawberry.type
class CampaignMutations:

    @strawberry.mutation
    def create_campaign(self, info: Info, input: CampaignInput) -> CampaignType:
        if input.budget <= 0:
            raise ValueError("Budget must be greater than zero.")
        result = create_campaign(session_from(info), {
            'name': input.name,
            'budget': input.budget,
            'start_date': input.start_date,
            'end_date': input.end_date,
            'description': input.description,
        })
        return result.instance
