import logging

from django.db import DatabaseError

from apps.authentication.models import UserProfile
from apps.creatives.models import Creative
from apps.creatives.storage import CreativeStorage, CreativeUploadError
from core.exceptions import CreativeAlreadyAttached
from core.mutations import MutationResult
from .models import Campaign

logger = logging.getLogger(__name__)

CREATIVE_NOT_ATTACHED = 'Campaign was saved as a draft, but the creative could not be attached'


def create_campaign(session, data, upload=None, creative_title='', creative_description='', storage=None):
    """Insert a draft campaign, then upload and attach its creative if a file was sent.

    The steps are independent writes: when the upload or the creative insert
    fails the campaign stays persisted as a draft without a creative.
    """
    profile = session.require_role(UserProfile.ROLE_ADVERTISER)
    result = MutationResult()

    campaign = Campaign(advertiser=profile, status=Campaign.STATUS_DRAFT, **data)
    campaign.full_clean(exclude=['advertiser', 'creative'])
    campaign.save()
    result.confirm(campaign)
    logger.info(f"Campaign {campaign.pk} created for advertiser {profile.pk}")

    if upload is None:
        return result

    try:
        attach_creative(session, campaign, upload, creative_title, creative_description, storage=storage)
    except (CreativeUploadError, DatabaseError) as e:
        logger.warning(f"Campaign {campaign.pk} left without creative: {e}")
        result.warn(f"{CREATIVE_NOT_ATTACHED}: {e}")
    return result


def attach_creative(session, campaign, upload, title='', description='', storage=None):
    """Upload ``upload`` and link the resulting Creative to ``campaign``."""
    profile = session.require_role(UserProfile.ROLE_ADVERTISER)
    if campaign.creative_id is not None:
        raise CreativeAlreadyAttached()

    storage = storage or CreativeStorage()
    path = storage.build_path(session.user.pk, upload.name)
    public_url = storage.upload_creative(upload, path)

    creative = Creative.objects.create(
        campaign=campaign,
        advertiser=profile,
        title=title or campaign.name,
        description=description or '',
        public_url=public_url,
        file_type=getattr(upload, 'content_type', None) or '',
        storage_path=path,
    )
    Campaign.objects.filter(pk=campaign.pk).update(creative=creative)
    campaign.creative = creative
    logger.info(f"Creative {creative.pk} attached to campaign {campaign.pk}")
    return creative


def add_creative(session, campaign, upload, title='', description='', storage=None):
    """Attach a creative to an existing campaign, reporting storage failures as a failed result."""
    result = MutationResult()
    try:
        creative = attach_creative(session, campaign, upload, title, description, storage=storage)
    except CreativeUploadError as e:
        logger.warning(f"Creative upload for campaign {campaign.pk} failed: {e}")
        return result.fail(f"Upload failed: {e}")
    return result.confirm(creative)


def campaign_summary(campaigns, today=None):
    campaigns = list(campaigns)
    return {
        'total': len(campaigns),
        'running': sum(1 for c in campaigns if c.is_running(today)),
        'upcoming': sum(1 for c in campaigns if c.is_upcoming(today)),
        'drafts': sum(1 for c in campaigns if c.status == Campaign.STATUS_DRAFT),
        'total_budget': sum((c.budget for c in campaigns), 0),
    }
