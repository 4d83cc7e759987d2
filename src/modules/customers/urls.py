"""Customer URL configuration.

Trailing slash is optional.  Format suffixes are disabled: the
get-by-email route takes keys such as ``test@test.com``.
"""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.customers.views import CustomerViewSet

router = DefaultRouter()
router.trailing_slash = "/?"
router.include_format_suffixes = False
router.register("customers", CustomerViewSet, basename="customer")

urlpatterns = router.urls
