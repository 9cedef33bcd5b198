"""Channels middleware authenticating websockets with the API bearer token."""

from urllib.parse import parse_qs

from channels.db import database_sync_to_async
from channels.middleware import BaseMiddleware
from django.contrib.auth.models import AnonymousUser

from social.authentication import user_for_token


@database_sync_to_async
def _resolve_user(key):
    return user_for_token(key) or AnonymousUser()


def token_from_scope(scope):
    """Read the token from `?token=` or an `Authorization: Bearer` header."""
    query = parse_qs(scope.get("query_string", b"").decode())
    if query.get("token"):
        return query["token"][0]
    for name, value in scope.get("headers", []):
        if name == b"authorization":
            parts = value.decode().split()
            if len(parts) == 2 and parts[0].lower() == "bearer":
                return parts[1]
    return None


class TokenAuthMiddleware(BaseMiddleware):
    """Populate scope["user"] from the connection's token."""

    async def __call__(self, scope, receive, send):
        scope = dict(scope)
        scope["user"] = await _resolve_user(token_from_scope(scope))
        return await super().__call__(scope, receive, send)
