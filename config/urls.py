"""URL configuration for the marketplace project.

The JSON API lives under /api/; the Django admin manages catalog data.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("marketplace.urls")),
]
