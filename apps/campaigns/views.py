from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response

from apps.authentication.permissions import IsAdvertiser
from apps.authentication.session import MarketplaceSession
from apps.creatives.serializers import CreativeSerializer
from .models import Campaign
from .serializers import CampaignCreateSerializer, CampaignSerializer, CreativeUploadSerializer
from .services import add_creative, campaign_summary, create_campaign


class CampaignViewSet(mixins.ListModelMixin,
                      mixins.RetrieveModelMixin,
                      mixins.UpdateModelMixin,
                      viewsets.GenericViewSet):
    permission_classes = [IsAdvertiser]
    serializer_class = CampaignSerializer
    parser_classes = [JSONParser, MultiPartParser, FormParser]
    http_method_names = ['get', 'post', 'patch', 'head', 'options']

    @property
    def session(self):
        return MarketplaceSession.for_request(self.request)

    def get_queryset(self):
        return Campaign.objects.filter(advertiser=self.session.profile).select_related('creative')

    def create(self, request, *args, **kwargs):
        serializer = CampaignCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        upload = data.pop('creative_file', None)
        title = data.pop('creative_title', '')
        description = data.pop('creative_description', '')

        result = create_campaign(self.session, data, upload, title, description)
        payload = result.as_payload(CampaignSerializer(result.instance).data)
        return Response(payload, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=['post'], parser_classes=[MultiPartParser, FormParser])
    def creative(self, request, pk=None):
        campaign = self.get_object()
        serializer = CreativeUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = add_creative(
            self.session,
            campaign,
            serializer.validated_data['creative_file'],
            serializer.validated_data.get('creative_title', ''),
            serializer.validated_data.get('creative_description', ''),
        )
        if not result.confirmed:
            # Campaign is unchanged; the client keeps its previous copy
            return Response(result.as_payload(), status=status.HTTP_503_SERVICE_UNAVAILABLE)
        payload = result.as_payload(CreativeSerializer(result.instance).data)
        return Response(payload, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=['get'])
    def summary(self, request):
        return Response(campaign_summary(self.get_queryset()))
