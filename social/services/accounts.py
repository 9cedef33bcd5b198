"""Account lifecycle: signup, login/logout, profile and password changes."""

import logging

from django.contrib.auth import authenticate
from django.db import transaction
from rest_framework.exceptions import ValidationError

from social.authentication import issue_token, revoke_token
from social.models import User

logger = logging.getLogger(__name__)


class AccountService:
    """Encapsulate account operations behind the auth endpoints."""

    def signup(self, *, name, email, password):
        """Create an account and return (user, token)."""
        user = User.objects.create_user(email=email, password=password, name=name.strip())
        user.mark_online()
        return user, issue_token(user)

    def login(self, *, email, password, request=None):
        """Check credentials and return (user, token)."""
        user = authenticate(request, email=(email or "").strip().lower(), password=password)
        if user is None:
            raise ValidationError("Invalid email or password")
        user.mark_online()
        return user, issue_token(user)

    def logout(self, user):
        """Mark the user offline and revoke their token."""
        user.mark_offline()
        revoke_token(user)

    def update_profile(self, user, **changes):
        """Apply name/bio/avatar changes that were provided."""
        fields = []
        for field in ("name", "bio", "avatar"):
            if field in changes:
                value = changes[field]
                setattr(user, field, value.strip() if isinstance(value, str) else value)
                fields.append(field)
        if fields:
            user.save(update_fields=fields + ["updated_at"])
        return user

    def change_password(self, user, *, current_password, new_password):
        """Replace the password and rotate the token; returns the new token."""
        if not user.check_password(current_password):
            raise ValidationError("Current password is incorrect")
        user.set_password(new_password)
        user.save(update_fields=["password", "updated_at"])
        return issue_token(user, rotate=True)

    @transaction.atomic
    def delete_account(self, user):
        """Delete the user; posts, comments, messages and follow edges cascade."""
        user_id = user.id
        user.delete()
        logger.info("Deleted account %s", user_id)
