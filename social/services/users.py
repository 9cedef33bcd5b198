"""Service helpers for user lookups and discovery."""

from rest_framework.exceptions import NotFound

from social.repos.followers_repo import FollowersRepo
from social.repos.user_repo import UserRepo


class UserService:
    """Encapsulate common user lookups."""

    def __init__(self, user_repo=None, followers_repo=None):
        self.user_repo = user_repo or UserRepo()
        self.followers_repo = followers_repo or FollowersRepo()

    def fetch(self, user_id):
        """Fetch a user by id or raise 404."""
        user = self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    def search(self, actor, *, query=None, page=1, limit=20):
        """Page through users other than actor, optionally filtered by name/email."""
        qs = self.user_repo.search(exclude_id=actor.id, query=query)
        return self.user_repo.page(qs, page=page, limit=limit)

    def is_following(self, actor, target):
        """Return True when actor follows target."""
        return self.followers_repo.is_following(follower_id=actor.id, author_id=target.id)

    def followers(self, user):
        return list(self.followers_repo.followers_of(user))

    def following(self, user):
        return list(self.followers_repo.followed_by(user))
