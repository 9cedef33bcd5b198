"""Directed follow edge: `follower` receives `author`'s activity."""

from django.conf import settings
from django.db import models
from django.db.models import F, Q


class Follower(models.Model):
    """
    One row per (follower, author) pair.

    Both sides of the graph are read from this table: `user.following` holds
    the edges a user created, `user.followers` the edges pointing at them.
    """

    follower = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="following",
        db_column="follower_id",
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="followers",
        db_column="author_id",
    )
    # follower lists are shown most recent first
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "followers"
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(fields=["follower", "author"], name="uniq_followers_follower_author"),
            models.CheckConstraint(condition=~Q(follower=F("author")), name="chk_followers_not_self"),
        ]
        indexes = [
            models.Index(fields=["follower"], name="followers_followe_5a8a43_idx"),
            models.Index(fields=["author"], name="followers_author__c2d8d4_idx"),
        ]

    def __str__(self):
        return f"{self.follower_id} follows {self.author_id}"
