"""Service helpers for post creation, deletion, and engagement."""

from django.db import transaction
from rest_framework.exceptions import NotFound, PermissionDenied

from social.models import Post
from social.repos.post_repo import PostRepo
from social.services.comments import CommentService


class PostService:
    """Encapsulate post lifecycle and like/save/comment operations."""

    def __init__(self, post_repo=None, comment_service=None):
        self.post_repo = post_repo or PostRepo()
        self.comment_service = comment_service or CommentService()

    def fetch(self, post_id):
        """Fetch a post with its relations or raise 404."""
        post = self.post_repo.get_detailed(post_id)
        if post is None:
            raise NotFound("Post not found")
        return post

    def feed(self, *, author_id=None, page=1, limit=20):
        """Page through public posts, newest first."""
        qs = self.post_repo.list_for_feed(author_id=author_id)
        return self.post_repo.page(qs, page=page, limit=limit)

    def create(self, author, *, content, image=None, visibility=Post.VISIBILITY_PUBLIC):
        """Create and return a post by author."""
        post = Post.objects.create(
            author=author,
            content=content.strip(),
            image=image or None,
            visibility=visibility,
        )
        return self.fetch(post.id)

    def delete(self, actor, post_id):
        """Delete a post; only its author may do so."""
        post = self.post_repo.find(id=post_id)
        if post is None:
            raise NotFound("Post not found")
        if post.author_id != actor.id:
            raise PermissionDenied("Not authorized to delete this post")
        post.delete()

    @transaction.atomic
    def toggle_like(self, user, post_id):
        """Like or unlike; returns (is_liked_now, likes_count)."""
        post = self.post_repo.find(id=post_id)
        if post is None:
            raise NotFound("Post not found")
        if post.is_liked_by(user):
            post.likes.remove(user)
            liked = False
        else:
            post.likes.add(user)
            liked = True
        return liked, post.likes.count()

    @transaction.atomic
    def toggle_save(self, user, post_id):
        """Save or unsave; returns is_saved_now."""
        post = self.post_repo.find(id=post_id)
        if post is None:
            raise NotFound("Post not found")
        if post.is_saved_by(user):
            post.saved_by.remove(user)
            return False
        post.saved_by.add(user)
        return True

    def add_comment(self, user, post_id, text):
        """Comment on a post; returns (comment, comments_count)."""
        post = self.post_repo.find(id=post_id)
        if post is None:
            raise NotFound("Post not found")
        comment = self.comment_service.create_comment(post, user, text)
        return comment, self.comment_service.count_for(post)

    def saved(self, user):
        return list(self.post_repo.saved_by(user))

    def liked(self, user):
        return list(self.post_repo.liked_by(user))
