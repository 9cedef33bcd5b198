"""Model for user comments on posts."""

from django.conf import settings
from django.db import models
from .post import Post

class Comment(models.Model):
    """User-authored comment on a post."""

    # FK → post.id
    post = models.ForeignKey(
        Post,
        on_delete=models.CASCADE,
        db_column='post_id',
        related_name='comments'
    )

    # FK → user.id
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='comments'
    )

    # text (1–500)
    text = models.TextField(max_length=500)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Oldest first, as shown under a post."""
        db_table = "comment"
        ordering = ["created_at", "id"]

    def __str__(self):
        """Readable identifier for admin/debugging."""
        return f"Comment by {self.user_id} on {self.post_id}"
