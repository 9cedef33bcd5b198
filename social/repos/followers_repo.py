"""Repository helpers for follower relationships."""

from django.db.models import QuerySet
from social.db_accessor import DB_Accessor
from social.models import Follower, User


class FollowersRepo(DB_Accessor):
    """Repository wrapper for follower relationships."""
    def __init__(self) -> None:
        """Initialise with the Follower model."""
        super().__init__(Follower)

    def followers_of(self, author) -> QuerySet:
        """Users following `author`, most recent edge first."""
        return User.objects.filter(following__author=author).order_by("-following__created_at", "-following__id")

    def followed_by(self, follower) -> QuerySet:
        """Users `follower` follows, most recent edge first."""
        return User.objects.filter(followers__follower=follower).order_by("-followers__created_at", "-followers__id")

    def is_following(self, *, follower_id, author_id) -> bool:
        """Return True if follower_id follows author_id."""
        return Follower.objects.filter(follower_id=follower_id, author_id=author_id).exists()

    def follow(self, *, follower_id, author_id) -> Follower:
        """Create a follower relation."""
        return self.create(follower_id=follower_id, author_id=author_id)

    def unfollow(self, *, follower_id, author_id) -> int:
        """Remove a follower relation."""
        return self.delete(follower_id=follower_id, author_id=author_id)
