"""Credit URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.credits.views import CreditViewSet

router = SimpleRouter(trailing_slash=True)
router.register("credits", CreditViewSet, basename="credit")

urlpatterns = router.urls
