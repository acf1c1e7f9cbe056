import strawberry
from apps.authentication.graphql.queries import AuthQueries
from apps.bookings.graphql.queries import BookingQueries
from apps.campaigns.graphql.mutations import CampaignMutations
from apps.campaigns.graphql.queries import CampaignQueries
from apps.screens.graphql.queries import ScreenQueries


@strawberry.type
class Query(AuthQueries, ScreenQueries, CampaignQueries, BookingQueries):
    pass


@strawberry.type
class Mutation(CampaignMutations):
    pass


schema = strawberry.Schema(query=Query, mutation=Mutation)
