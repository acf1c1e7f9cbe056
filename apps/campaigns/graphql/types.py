import strawberry
import strawberry_django
from strawberry import auto
from typing import Optional
from apps.campaigns.models import Campaign
from apps.creatives.models import Creative


@strawberry_django.type(Creative)
class CreativeType:
    id: auto
    title: auto
    description: auto
    public_url: auto
    file_type: auto


@strawberry_django.type(Campaign)
class CampaignType:
    id: auto
    name: auto
    description: auto
    budget: auto
    status: auto
    start_date: auto
    end_date: auto
    creative: Optional[CreativeType]

    @strawberry.field
    def is_running(self) -> bool:
        return Campaign.is_running(self)
