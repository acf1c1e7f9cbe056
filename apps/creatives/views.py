from rest_framework import viewsets

from apps.authentication.permissions import IsAdvertiser
from apps.authentication.session import MarketplaceSession
from .models import Creative
from .serializers import CreativeSerializer


class CreativeViewSet(viewsets.ReadOnlyModelViewSet):
    permission_classes = [IsAdvertiser]
    serializer_class = CreativeSerializer

    def get_queryset(self):
        profile = MarketplaceSession.for_request(self.request).profile
        return Creative.objects.filter(advertiser=profile).select_related('campaign')
