from django.conf import settings
from django.db import models

"""
Post model

A post is the unit of authored content shown in the feed.

- `author` links the post to the user who created it.
- `content` is the required text body (1–1000 chars after trimming).
- `image` is an optional URL to a picture hosted elsewhere.
- `likes` / `saved_by` hold the users that liked / bookmarked the post.
  Both are toggled by the post service; a user appears at most once.
- `visibility` records who the author intended the post for. Only
  "public" is enforced: the feed lists public posts and nothing else.
- Comments live in their own table (see comment.py) and are always
  returned embedded in their post.
"""


class Post(models.Model):
    VISIBILITY_PUBLIC = "public"
    VISIBILITY_FOLLOWERS = "followers"
    VISIBILITY_PRIVATE = "private"

    VISIBILITY_CHOICES = [
        (VISIBILITY_PUBLIC, "Public"),
        (VISIBILITY_FOLLOWERS, "Followers only"),
        (VISIBILITY_PRIVATE, "Private"),
    ]

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="posts",
        db_column="author_id",
    )
    content = models.TextField(max_length=1000)
    image = models.URLField(max_length=500, blank=True, null=True)

    likes = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        related_name="liked_posts",
        blank=True,
    )
    saved_by = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        related_name="saved_posts",
        blank=True,
    )

    visibility = models.CharField(
        max_length=20,
        choices=VISIBILITY_CHOICES,
        default=VISIBILITY_PUBLIC,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "post"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["visibility", "-created_at"], name="post_visibil_0c1f6e_idx"),
        ]

    def __str__(self):
        return f"Post {self.pk} by {self.author_id}"

    @property
    def likes_count(self):
        return self.likes.count()

    @property
    def comments_count(self):
        return self.comments.count()

    def is_liked_by(self, user):
        return self.likes.filter(pk=user.pk).exists()

    def is_saved_by(self, user):
        return self.saved_by.filter(pk=user.pk).exists()
