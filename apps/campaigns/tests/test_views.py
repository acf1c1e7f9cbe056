from datetime import timedelta
from decimal import Decimal
from unittest.mock import patch

from django.core.files.uploadedfile import SimpleUploadedFile
from django.urls import reverse
from django.utils import timezone
from google.auth.exceptions import DefaultCredentialsError
from rest_framework import status
from rest_framework.test import APITestCase

from apps.campaigns.models import Campaign
from apps.creatives.models import Creative
from apps.creatives.storage import CreativeUploadError
from core.testing import make_campaign, make_user

PUBLIC_URL = 'https://storage.googleapis.com/test-creatives/1/1719792000000.png'


def creative_file(name='summer.png', content_type='image/png'):
    return SimpleUploadedFile(name, b'\x89PNG\r\n\x1a\nfake-image', content_type=content_type)


class CampaignCreateTest(APITestCase):
    def setUp(self):
        self.advertiser = make_user('ads@example.com', role='advertiser')
        self.client.force_authenticate(user=self.advertiser)
        self.url = reverse('campaign-list')
        self.payload = {
            'name': 'July Launch',
            'budget': '1000.00',
            'start_date': '2024-07-01',
            'end_date': '2024-07-31',
        }

    def test_create_without_upload_is_draft(self):
        response = self.client.post(self.url, self.payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['state'], 'confirmed')
        self.assertEqual(response.data['warnings'], [])

        campaign = Campaign.objects.get(pk=response.data['data']['id'])
        self.assertEqual(campaign.status, Campaign.STATUS_DRAFT)
        self.assertIsNone(campaign.creative_id)
        self.assertEqual(campaign.budget, Decimal('1000.00'))
        self.assertEqual(campaign.advertiser, self.advertiser.profile)

    def test_status_cannot_be_set_on_create(self):
        response = self.client.post(self.url, dict(self.payload, status='active'), format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(Campaign.objects.get().status, Campaign.STATUS_DRAFT)

    def test_end_before_start_rejected(self):
        response = self.client.post(self.url, dict(self.payload, end_date='2024-06-01'), format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('end_date', response.data)
        self.assertFalse(Campaign.objects.exists())

    def test_zero_budget_rejected(self):
        response = self.client.post(self.url, dict(self.payload, budget='0'), format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('budget', response.data)

    @patch('apps.campaigns.services.CreativeStorage')
    def test_create_with_upload_attaches_creative(self, storage_cls):
        storage = storage_cls.return_value
        storage.build_path.return_value = '1/1719792000000.png'
        storage.upload_creative.return_value = PUBLIC_URL

        response = self.client.post(
            self.url,
            dict(self.payload, creative_file=creative_file(), creative_title='Summer banner'),
            format='multipart',
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['warnings'], [])
        campaign = Campaign.objects.get(pk=response.data['data']['id'])
        creative = Creative.objects.get(campaign=campaign)
        self.assertEqual(campaign.creative_id, creative.pk)
        self.assertEqual(creative.public_url, PUBLIC_URL)
        self.assertEqual(creative.title, 'Summer banner')
        self.assertEqual(creative.file_type, 'image/png')
        self.assertEqual(creative.storage_path, '1/1719792000000.png')
        self.assertEqual(response.data['data']['creative']['id'], creative.pk)
        storage.build_path.assert_called_once_with(self.advertiser.pk, 'summer.png')

    @patch('apps.campaigns.services.CreativeStorage')
    def test_failed_upload_keeps_draft_campaign(self, storage_cls):
        storage_cls.return_value.build_path.return_value = '1/1719792000000.png'
        storage_cls.return_value.upload_creative.side_effect = CreativeUploadError('bucket unavailable')

        response = self.client.post(
            self.url,
            dict(self.payload, creative_file=creative_file()),
            format='multipart',
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['state'], 'confirmed')
        self.assertEqual(len(response.data['warnings']), 1)
        self.assertIn('bucket unavailable', response.data['warnings'][0])
        campaign = Campaign.objects.get()
        self.assertEqual(campaign.status, Campaign.STATUS_DRAFT)
        self.assertIsNone(campaign.creative_id)
        self.assertFalse(Creative.objects.exists())

    @patch('apps.creatives.storage.storage.Client', side_effect=DefaultCredentialsError('no creds'))
    def test_missing_storage_credentials_keep_draft_campaign(self, client_cls):
        response = self.client.post(
            self.url,
            dict(self.payload, creative_file=creative_file()),
            format='multipart',
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['state'], 'confirmed')
        self.assertEqual(len(response.data['warnings']), 1)
        self.assertIn('no creds', response.data['warnings'][0])
        campaign = Campaign.objects.get()
        self.assertEqual(campaign.status, Campaign.STATUS_DRAFT)
        self.assertIsNone(campaign.creative_id)
        client_cls.assert_called_once_with()

    def test_screen_owner_cannot_create_campaigns(self):
        owner = make_user('owner@example.com', role='screen_owner')
        self.client.force_authenticate(user=owner)

        response = self.client.post(self.url, self.payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(Campaign.objects.exists())


class CampaignManageTest(APITestCase):
    def setUp(self):
        self.advertiser = make_user('ads@example.com', role='advertiser')
        self.other = make_user('other@example.com', role='advertiser')
        self.campaign = make_campaign(self.advertiser)
        self.client.force_authenticate(user=self.advertiser)

    def test_list_only_own_campaigns(self):
        make_campaign(self.other, name='Not mine')

        response = self.client.get(reverse('campaign-list'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row['id'] for row in response.data], [self.campaign.pk])

    def test_other_advertisers_campaign_not_found(self):
        theirs = make_campaign(self.other, name='Not mine')

        response = self.client.get(reverse('campaign-detail', args=[theirs.pk]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_update_status(self):
        response = self.client.patch(
            reverse('campaign-detail', args=[self.campaign.pk]), {'status': 'active'}, format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.campaign.refresh_from_db()
        self.assertEqual(self.campaign.status, Campaign.STATUS_ACTIVE)
        self.assertTrue(response.data['is_running'])

    @patch('apps.campaigns.services.CreativeStorage')
    def test_attach_creative_later(self, storage_cls):
        storage_cls.return_value.build_path.return_value = '1/1719792000000.mp4'
        storage_cls.return_value.upload_creative.return_value = PUBLIC_URL

        response = self.client.post(
            reverse('campaign-creative', args=[self.campaign.pk]),
            {'creative_file': creative_file('spot.mp4', 'video/mp4')},
            format='multipart',
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.campaign.refresh_from_db()
        self.assertEqual(response.data['state'], 'confirmed')
        self.assertEqual(self.campaign.creative_id, response.data['data']['id'])
        self.assertTrue(response.data['data']['is_video'])
        self.assertEqual(self.campaign.creative.title, self.campaign.name)

    @patch('apps.campaigns.services.CreativeStorage')
    def test_second_creative_conflicts(self, storage_cls):
        storage_cls.return_value.build_path.return_value = '1/1719792000000.png'
        storage_cls.return_value.upload_creative.return_value = PUBLIC_URL
        url = reverse('campaign-creative', args=[self.campaign.pk])
        self.client.post(url, {'creative_file': creative_file()}, format='multipart')

        response = self.client.post(url, {'creative_file': creative_file()}, format='multipart')

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(Creative.objects.filter(campaign=self.campaign).count(), 1)

    @patch('apps.campaigns.services.CreativeStorage')
    def test_attach_upload_failure_is_unavailable(self, storage_cls):
        storage_cls.return_value.build_path.return_value = '1/1719792000000.png'
        storage_cls.return_value.upload_creative.side_effect = CreativeUploadError('timeout')

        response = self.client.post(
            reverse('campaign-creative', args=[self.campaign.pk]),
            {'creative_file': creative_file()},
            format='multipart',
        )

        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(response.data['state'], 'failed')
        self.assertIn('timeout', response.data['error'])
        self.assertNotIn('data', response.data)
        self.campaign.refresh_from_db()
        self.assertIsNone(self.campaign.creative_id)

    @patch('apps.creatives.storage.storage.Client', side_effect=DefaultCredentialsError('no creds'))
    def test_attach_without_storage_credentials_fails(self, client_cls):
        response = self.client.post(
            reverse('campaign-creative', args=[self.campaign.pk]),
            {'creative_file': creative_file()},
            format='multipart',
        )

        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(response.data['state'], 'failed')
        self.assertIn('no creds', response.data['error'])
        self.assertFalse(Creative.objects.exists())

    def test_summary(self):
        today = timezone.localdate()
        Campaign.objects.create(
            advertiser=self.advertiser.profile, name='Running', budget=Decimal('500.00'),
            status=Campaign.STATUS_ACTIVE, start_date=today - timedelta(days=1), end_date=today + timedelta(days=5),
        )
        Campaign.objects.create(
            advertiser=self.advertiser.profile, name='Soon', budget=Decimal('250.00'),
            status=Campaign.STATUS_ACTIVE, start_date=today + timedelta(days=3), end_date=today + timedelta(days=9),
        )

        response = self.client.get(reverse('campaign-summary'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['total'], 3)
        self.assertEqual(response.data['running'], 1)
        self.assertEqual(response.data['upcoming'], 1)
        self.assertEqual(response.data['drafts'], 1)
        self.assertEqual(response.data['total_budget'], Decimal('1750.00'))
