"""
URL configuration for the showcase project.

The JSON API lives under /api/ (see network.urls); /admin/ serves the
Django admin for moderation.
"""
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('network.urls')),
]
