from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import DiscoverScreenViewSet, ScreenViewSet

router = DefaultRouter()
router.register(r'screens', ScreenViewSet, basename='screen')
router.register(r'discover/screens', DiscoverScreenViewSet, basename='discover-screen')

urlpatterns = [
    path('', include(router.urls)),
]
