"""Service helpers for creating comments."""

from social.models import Comment


class CommentService:
    """Encapsulate comment creation on posts."""

    def create_comment(self, post, user, text):
        """Attach a new comment by user to post."""
        return Comment.objects.create(post=post, user=user, text=text.strip())

    def count_for(self, post):
        return Comment.objects.filter(post=post).count()
