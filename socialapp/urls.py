"""
URL configuration for socialapp project.

Every JSON endpoint lives under `/api/`; the websocket route is declared in
`social.routing` and mounted by `socialapp.asgi`.
"""
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('social.urls')),
]

handler404 = 'social.views.errors.not_found'
handler500 = 'social.views.errors.server_error'
