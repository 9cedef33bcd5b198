"""ASGI entry point: HTTP goes to Django, websockets to the event consumer."""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'socialapp.settings')

# Django must be set up before importing anything that touches models.
django_asgi_app = get_asgi_application()

from channels.routing import ProtocolTypeRouter, URLRouter  # noqa: E402
from channels.security.websocket import AllowedHostsOriginValidator, OriginValidator  # noqa: E402
from django.conf import settings  # noqa: E402

from social.middleware import TokenAuthMiddleware  # noqa: E402
from social.routing import websocket_urlpatterns  # noqa: E402


def _origin_guard(app):
    """Only FRONTEND_URL may open sockets; "*" falls back to ALLOWED_HOSTS."""
    if settings.FRONTEND_URL in ("", "*"):
        return AllowedHostsOriginValidator(app)
    return OriginValidator(app, [settings.FRONTEND_URL])


application = ProtocolTypeRouter({
    "http": django_asgi_app,
    "websocket": _origin_guard(
        TokenAuthMiddleware(URLRouter(websocket_urlpatterns))
    ),
})
