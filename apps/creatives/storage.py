import logging
import os

import requests
from django.conf import settings
from django.utils import timezone
from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import storage

logger = logging.getLogger(__name__)


class CreativeUploadError(Exception):
    pass


class CreativeStorage:
    """Uploads creative assets to a public Cloud Storage bucket.

    The client is built on first upload, so missing credentials surface as a
    CreativeUploadError like any other storage failure.
    """

    def __init__(self, client=None, bucket_name=None):
        self._client = client
        self.bucket_name = bucket_name or settings.CREATIVES_BUCKET

    @property
    def client(self):
        if self._client is None:
            self._client = storage.Client()
        return self._client

    def build_path(self, user_id, filename, now=None):
        # <user id>/<epoch millis><ext>
        now = now or timezone.now()
        ext = os.path.splitext(filename or '')[1].lower()
        return f"{user_id}/{int(now.timestamp() * 1000)}{ext}"

    def upload_creative(self, upload, path):
        content_type = getattr(upload, 'content_type', None)

        try:
            blob = self.client.bucket(self.bucket_name).blob(path)
            blob.upload_from_file(upload, content_type=content_type, rewind=True)
            blob.make_public()
        except (GoogleAPIError, GoogleAuthError, requests.RequestException) as e:
            logger.error(f"Upload of {path} to {self.bucket_name} failed: {e}")
            raise CreativeUploadError(str(e)) from e

        return blob.public_url
