from django.contrib.auth import get_user_model
from rest_framework import exceptions
from rest_framework.authentication import TokenAuthentication
from rest_framework.authtoken.models import Token

User = get_user_model()


class BearerTokenAuthentication(TokenAuthentication):
    """DRF token authentication reading `Authorization: Bearer <key>`."""

    keyword = 'Bearer'

    def authenticate_credentials(self, key):
        """Resolve the token to an active user."""
        try:
            token = Token.objects.select_related('user').get(key=key)
        except Token.DoesNotExist:
            raise exceptions.AuthenticationFailed('Invalid token')

        if not token.user.is_active:
            raise exceptions.AuthenticationFailed('User not found')

        return (token.user, token)


def user_for_token(key):
    """Return the active user owning `key`, or None."""
    if not key:
        return None
    token = Token.objects.select_related('user').filter(key=key).first()
    if token is None or not token.user.is_active:
        return None
    return token.user


def issue_token(user, *, rotate=False):
    """Return the user's token, creating it (or replacing it when rotating)."""
    if rotate:
        Token.objects.filter(user=user).delete()
    token, _ = Token.objects.get_or_create(user=user)
    return token.key


def revoke_token(user):
    """Delete the user's token; returns the number removed."""
    count, _ = Token.objects.filter(user=user).delete()
    return count


class OptionalBearerTokenAuthentication(BearerTokenAuthentication):
    """
    Bearer auth for endpoints that also serve anonymous callers.

    Clients resend whatever token they last stored, so a revoked, rotated or
    malformed key is treated as no credentials instead of failing the request.
    """

    def authenticate(self, request):
        try:
            return super().authenticate(request)
        except exceptions.AuthenticationFailed:
            return None
