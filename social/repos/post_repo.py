"""Repository helpers for fetching posts."""

from typing import Optional

from django.db.models import QuerySet

from social.db_accessor import DB_Accessor
from social.models import Post


class PostRepo(DB_Accessor):
    """Repository for Post queries (feed, per-author, saved, liked)."""
    def __init__(self) -> None:
        """Initialise with the Post model."""
        super().__init__(Post)

    def _with_relations(self, qs: QuerySet) -> QuerySet:
        return (
            qs.select_related("author")
            .prefetch_related("comments__user", "likes", "saved_by")
            .order_by("-created_at", "-id")
        )

    def list_for_feed(self, *, author_id: Optional[int] = None) -> QuerySet:
        """Public posts, optionally limited to one author, newest first."""
        filters = {"visibility": Post.VISIBILITY_PUBLIC}
        if author_id is not None:
            filters["author_id"] = author_id
        return self._with_relations(self.model.objects.filter(**filters))

    def saved_by(self, user) -> QuerySet:
        """Posts bookmarked by user, newest first."""
        return self._with_relations(self.model.objects.filter(id__in=user.saved_posts.values("id")))

    def liked_by(self, user) -> QuerySet:
        """Posts liked by user, newest first."""
        return self._with_relations(self.model.objects.filter(id__in=user.liked_posts.values("id")))

    def get_detailed(self, post_id) -> Optional[Post]:
        """Single post with author, comments and counters loaded."""
        return self._with_relations(self.model.objects.filter(id=post_id)).first()
