import json

from django.test import TestCase
from rest_framework_simplejwt.tokens import RefreshToken

from apps.campaigns.models import Campaign
from core.testing import make_campaign, make_user

CREATE_CAMPAIGN = '''
mutation {
  createCampaign(input: {name: "GraphQL Launch", budget: "1000", startDate: "2024-07-01", endDate: "2024-07-31"}) {
    id
    status
    creative { id }
  }
}
'''


class CampaignGraphQLTest(TestCase):
    def setUp(self):
        self.advertiser = make_user('gql-ads@example.com', role='advertiser')
        self.token = str(RefreshToken.for_user(self.advertiser).access_token)

    def execute(self, query, token=None):
        response = self.client.post(
            '/graphql/',
            data=json.dumps({'query': query}),
            content_type='application/json',
            HTTP_AUTHORIZATION=f'Bearer {token or self.token}',
        )
        return response.json()

    def test_create_campaign_mutation_creates_draft(self):
        result = self.execute(CREATE_CAMPAIGN)

        self.assertNotIn('errors', result)
        self.assertEqual(result['data']['createCampaign']['status'], 'draft')
        self.assertIsNone(result['data']['createCampaign']['creative'])
        campaign = Campaign.objects.get(pk=result['data']['createCampaign']['id'])
        self.assertEqual(campaign.advertiser, self.advertiser.profile)

    def test_screen_owner_cannot_create_campaign(self):
        owner = make_user('gql-owner@example.com', role='screen_owner')

        result = self.execute(CREATE_CAMPAIGN, str(RefreshToken.for_user(owner).access_token))

        self.assertIn('errors', result)
        self.assertFalse(Campaign.objects.exists())

    def test_campaigns_query_lists_own_campaigns(self):
        mine = make_campaign(self.advertiser, name='Mine')
        make_campaign(make_user('other@example.com', role='advertiser'), name='Theirs')

        result = self.execute('{ campaigns { id name isRunning } }')

        self.assertNotIn('errors', result)
        self.assertEqual([row['name'] for row in result['data']['campaigns']], [mine.name])
        self.assertFalse(result['data']['campaigns'][0]['isRunning'])
