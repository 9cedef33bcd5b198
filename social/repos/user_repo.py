"""Repository helpers for user lookups."""

from typing import Optional

from django.db.models import Q, QuerySet

from social.db_accessor import DB_Accessor
from social.models import User


class UserRepo(DB_Accessor):
    """Repository for basic user queries."""
    def __init__(self) -> None:
        """Initialise with the User model."""
        super().__init__(User)

    def get_by_id(self, user_id) -> Optional[User]:
        """Return a user by id, or None."""
        return self.find(id=user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        """Return a user by (case-insensitive) email, or None."""
        return self.find(email__iexact=(email or "").strip())

    def search(self, *, exclude_id=None, query: Optional[str] = None) -> QuerySet:
        """Users matching query on name or email, newest first."""
        qs = self.model.objects.all()
        if exclude_id is not None:
            qs = qs.exclude(id=exclude_id)
        if query:
            qs = qs.filter(Q(name__icontains=query) | Q(email__icontains=query))
        return qs.order_by("-created_at", "-id")
