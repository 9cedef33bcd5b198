from django.db import IntegrityError, transaction
from rest_framework.exceptions import ValidationError

from social.repos.followers_repo import FollowersRepo


class FollowService:
    """
    Follow / unfollow on behalf of `actor`.

    Both sides of the graph come from the single Follower edge table, so a
    user's "following" and the target's "followers" cannot drift apart.
    """

    def __init__(self, actor, followers_repo=None):
        self.actor = actor
        self.followers_repo = followers_repo or FollowersRepo()

    def _check_not_self(self, target, verb):
        if self.actor.pk == target.pk:
            raise ValidationError(f"You cannot {verb} yourself")

    def is_following(self, target):
        return self.followers_repo.is_following(follower_id=self.actor.pk, author_id=target.pk)

    @transaction.atomic
    def follow_user(self, target):
        """Create the edge actor → target; 400 on self-follow or duplicates."""
        self._check_not_self(target, "follow")
        if self.is_following(target):
            raise ValidationError("Already following this user")
        try:
            with transaction.atomic():
                return self.followers_repo.follow(follower_id=self.actor.pk, author_id=target.pk)
        except IntegrityError:
            # Lost a race with a concurrent follow of the same pair.
            raise ValidationError("Already following this user")

    @transaction.atomic
    def unfollow(self, target):
        """Remove the edge actor → target; returns True when one existed."""
        self._check_not_self(target, "unfollow")
        return bool(self.followers_repo.unfollow(follower_id=self.actor.pk, author_id=target.pk))
